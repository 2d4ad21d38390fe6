from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


class LinodeError(Exception):
    pass


class ConfigurationError(LinodeError):
    pass


class DecodeError(LinodeError, ValueError):
    pass


class SerializationError(LinodeError):
    pass


class TransportError(LinodeError):
    def __init__(self, message: str, *, request_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.request_id = request_id


class CancelledError(LinodeError):
    pass


class DeadlineExceeded(CancelledError):
    pass


@dataclass(frozen=True)
class FieldError:
    reason: str
    field: Optional[str] = None

    def __str__(self) -> str:
        if self.field:
            return f"[{self.field}] {self.reason}"
        return self.reason


class APIError(LinodeError):
    def __init__(
        self,
        *,
        status_code: int,
        code: str,
        message: str,
        errors: Optional[List[FieldError]] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(f"[{status_code}] {message}")
        self.status_code = status_code
        self.code = code
        self.message = message
        self.errors = list(errors or [])
        self.request_id = request_id

    @property
    def reasons(self) -> List[str]:
        return [e.reason for e in self.errors]
