from __future__ import annotations

from typing import List, Optional, Union

from linode_sdk.context import RequestContext
from linode_sdk.models.account_events import Event
from linode_sdk.pagination import ListOptions, ListResult
from linode_sdk.resources.base import ResourceClient, format_api_path

EVENTS_PATH = "account/events"


def _event_id(event: Union[Event, int]) -> int:
    return event.id if isinstance(event, Event) else int(event)


class AccountEventsClient(ResourceClient):
    def list_events(self, options: Optional[ListOptions] = None, *, context: Optional[RequestContext] = None) -> List[Event]:
        """Events visible to the token, newest first, across every page."""
        return self._list(Event, EVENTS_PATH, options, context=context)

    def paginate_events(self, options: Optional[ListOptions] = None, *, context: Optional[RequestContext] = None) -> ListResult[Event]:
        return self._paginate(Event, EVENTS_PATH, options, context=context)

    def get_event(self, event_id: int, *, context: Optional[RequestContext] = None) -> Event:
        return self._get(Event, format_api_path("account/events/{}", event_id), context=context)

    def mark_event_read(self, event: Union[Event, int], *, context: Optional[RequestContext] = None) -> None:
        self._action(format_api_path("account/events/{}/read", _event_id(event)), context=context)

    def mark_events_seen(self, event: Union[Event, int], *, context: Optional[RequestContext] = None) -> None:
        """Marks every event up to and including ``event`` as seen."""
        self._action(format_api_path("account/events/{}/seen", _event_id(event)), context=context)
