from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar, Union

from linode_sdk.context import RequestContext, resolve_context
from linode_sdk.http import encode_filter
from linode_sdk.models.base import PageEnvelope

T = TypeVar("T")


@dataclass
class ListOptions:
    # Fetch only this page instead of walking the whole listing.
    page: Optional[int] = None
    page_size: Optional[int] = None
    filter: Optional[Union[str, Dict[str, Any]]] = None
    max_pages: Optional[int] = None

    def query_params(self, page: int) -> Dict[str, Any]:
        params: Dict[str, Any] = {"page": page}
        if self.page_size:
            params["page_size"] = self.page_size
        return params

    def headers(self) -> Dict[str, str]:
        if self.filter is None:
            return {}
        return {"X-Filter": encode_filter(self.filter)}


@dataclass
class ListResult(Generic[T]):
    data: List[T] = field(default_factory=list)
    pages: int = 0
    results: int = 0


FetchPage = Callable[[int], PageEnvelope[Any]]


def paginate(
    fetch_page: FetchPage,
    options: Optional[ListOptions] = None,
    context: Optional[RequestContext] = None,
) -> ListResult[Any]:
    """Walk a listing endpoint page by page and collect every record in page order.

    ``fetch_page(n)`` performs the request for page ``n``. Any error it raises
    aborts the walk and propagates; records gathered so far are dropped with
    the local accumulator.
    """
    opts = options or ListOptions()
    ctx = resolve_context(context)

    if opts.page:
        ctx.check()
        envelope = fetch_page(opts.page)
        ctx.check()
        return ListResult(data=list(envelope.data), pages=envelope.pages, results=envelope.results)

    ctx.check()
    first = fetch_page(1)
    ctx.check()
    items: List[Any] = list(first.data)
    pages = first.pages
    last_page = pages
    if opts.max_pages is not None:
        last_page = min(last_page, max(1, opts.max_pages))

    for page in range(2, last_page + 1):
        envelope = fetch_page(page)
        ctx.check()
        items.extend(envelope.data)

    return ListResult(data=items, pages=pages, results=first.results)
