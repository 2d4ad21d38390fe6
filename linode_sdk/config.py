from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from linode_sdk.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.linode.com"
DEFAULT_API_VERSION = "v4"


def _token() -> Optional[str]:
    value = os.getenv("LINODE_TOKEN", "").strip()
    return value or None


def _base_url() -> str:
    return os.getenv("LINODE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL


def _api_version() -> str:
    return os.getenv("LINODE_API_VERSION", DEFAULT_API_VERSION).strip() or DEFAULT_API_VERSION


def _ca_file() -> Optional[str]:
    value = os.getenv("LINODE_CA", "").strip()
    return value or None


def _timeout_seconds() -> float:
    return float(os.getenv("LINODE_TIMEOUT_SECONDS", "30"))


def _max_retries() -> int:
    return int(os.getenv("LINODE_MAX_RETRIES", "3"))


def _retry_backoff_seconds() -> float:
    return float(os.getenv("LINODE_RETRY_BACKOFF_SECONDS", "0.25"))


@dataclass
class ClientConfig:
    token: str
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    timeout: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 0.25
    ca_file: Optional[str] = None

    @property
    def api_root(self) -> str:
        root = self.base_url.rstrip("/")
        version = self.api_version.strip("/")
        if root.endswith(f"/{version}"):
            return root
        return f"{root}/{version}"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        token = _token()
        if not token:
            raise ConfigurationError("LINODE_TOKEN is required")
        try:
            return cls(
                token=token,
                base_url=_base_url(),
                api_version=_api_version(),
                timeout=_timeout_seconds(),
                max_retries=_max_retries(),
                backoff_base_seconds=_retry_backoff_seconds(),
                ca_file=_ca_file(),
            )
        except ValueError as exc:
            raise ConfigurationError(f"invalid client configuration: {exc}") from exc
