from __future__ import annotations

from typing import Any, Dict, Generic, List, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from pydantic_core import PydanticSerializationError

from linode_sdk.errors import DecodeError, SerializationError


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _null_as_default(cls, data: Any) -> Any:
        # A JSON null in a field that has a default decodes to that default.
        if not isinstance(data, dict):
            return data
        fields = cls.model_fields
        return {
            key: value
            for key, value in data.items()
            if not (value is None and key in fields and not fields[key].is_required())
        }


RecordT = TypeVar("RecordT", bound=Record)


class OptionsRecord(BaseModel):
    """Request payload. Fields left as ``None`` are omitted from the wire body."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    def to_payload(self) -> Dict[str, Any]:
        try:
            return self.model_dump(mode="json", exclude_none=True)
        except PydanticSerializationError as exc:
            raise SerializationError(f"{type(self).__name__} cannot be serialized: {exc}") from exc


class PageEnvelope(BaseModel, Generic[RecordT]):
    model_config = ConfigDict(extra="ignore")

    data: List[RecordT]
    page: int = 1
    pages: int = 1
    results: int = 0


def decode_record(model: Type[RecordT], payload: Any) -> RecordT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(f"cannot decode {model.__name__}: {exc}") from exc


def decode_page(model: Type[RecordT], payload: Any) -> PageEnvelope[RecordT]:
    try:
        return PageEnvelope[model].model_validate(payload)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise DecodeError(f"cannot decode page of {model.__name__}: {exc}") from exc
