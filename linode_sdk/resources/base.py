from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, Union
from urllib.parse import quote

from linode_sdk.context import RequestContext
from linode_sdk.http import HttpClient
from linode_sdk.models.base import OptionsRecord, PageEnvelope, RecordT, decode_page, decode_record
from linode_sdk.pagination import ListOptions, ListResult, paginate

Body = Union[OptionsRecord, Dict[str, Any], None]


def format_api_path(template: str, *ids: Union[int, str]) -> str:
    return template.format(*(quote(str(value), safe="") for value in ids))


def _payload(body: Body) -> Optional[Dict[str, Any]]:
    if isinstance(body, OptionsRecord):
        return body.to_payload()
    return body


class ResourceClient:
    """Typed request helpers shared by every resource group on the client."""

    _http: HttpClient

    def _call(
        self,
        method: str,
        path: str,
        *,
        body: Body = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        context: Optional[RequestContext] = None,
    ) -> Any:
        return self._http.request(
            method,
            path,
            params=params,
            body=_payload(body),
            headers=headers,
            context=context,
        )

    def _get(self, model: Type[RecordT], path: str, *, context: Optional[RequestContext] = None) -> RecordT:
        return decode_record(model, self._call("GET", path, context=context))

    def _post(self, model: Type[RecordT], path: str, body: Body = None, *, context: Optional[RequestContext] = None) -> RecordT:
        return decode_record(model, self._call("POST", path, body=body, context=context))

    def _put(self, model: Type[RecordT], path: str, body: Body = None, *, context: Optional[RequestContext] = None) -> RecordT:
        return decode_record(model, self._call("PUT", path, body=body, context=context))

    def _delete(self, path: str, *, context: Optional[RequestContext] = None) -> None:
        self._call("DELETE", path, context=context)

    def _action(self, path: str, body: Body = None, *, context: Optional[RequestContext] = None) -> None:
        self._call("POST", path, body=body, context=context)

    def _paginate(
        self,
        model: Type[RecordT],
        path: str,
        options: Optional[ListOptions] = None,
        *,
        context: Optional[RequestContext] = None,
    ) -> ListResult[RecordT]:
        opts = options or ListOptions()

        def fetch_page(page: int) -> PageEnvelope[RecordT]:
            raw = self._call("GET", path, params=opts.query_params(page), headers=opts.headers(), context=context)
            return decode_page(model, raw)

        return paginate(fetch_page, opts, context)

    def _list(
        self,
        model: Type[RecordT],
        path: str,
        options: Optional[ListOptions] = None,
        *,
        context: Optional[RequestContext] = None,
    ) -> List[RecordT]:
        return self._paginate(model, path, options, context=context).data
