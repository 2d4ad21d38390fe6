from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import field_validator

from linode_sdk.decoders import parse_time_remaining, parse_timestamp
from linode_sdk.models.base import Record
from linode_sdk.types import EntityID, OpenEntityType, OpenEventAction, OpenEventStatus


class EventEntity(Record):
    id: Optional[EntityID] = None
    label: Optional[str] = None
    type: Optional[OpenEntityType] = None
    status: Optional[str] = None
    url: Optional[str] = None


class Event(Record):
    """An action taken on the account, as reported by ``account/events``."""

    id: int
    status: Optional[OpenEventStatus] = None
    action: Optional[OpenEventAction] = None
    # Null for notification events.
    percent_complete: Optional[int] = None
    rate: Optional[str] = None
    read: bool = False
    seen: bool = False
    time_remaining: Optional[int] = None
    username: Optional[str] = None
    entity: Optional[EventEntity] = None
    secondary_entity: Optional[EventEntity] = None
    created: Optional[datetime] = None

    @field_validator("created", mode="before")
    @classmethod
    def _parse_created(cls, value: Any) -> Optional[datetime]:
        return parse_timestamp(value)

    @field_validator("time_remaining", mode="before")
    @classmethod
    def _parse_time_remaining(cls, value: Any) -> Optional[int]:
        return parse_time_remaining(value)
