from __future__ import annotations

import io
import json
import urllib.error
from collections import defaultdict, deque
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple
from urllib.parse import parse_qs, urlparse

import pytest

from linode_sdk.client import LinodeClient

API_ROOT = "https://api.example.test"


class _DummyResponse:
    def __init__(self, body: bytes, status: int = 200, headers: Optional[Dict[str, str]] = None):
        self._body = body
        self.status = status
        self.headers = headers or {}

    def __enter__(self) -> "_DummyResponse":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        return False

    def read(self) -> bytes:
        return self._body


class FakeApi:
    """Stands in for ``urlopen``; replies are queued per (method, path)."""

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Deque[Any]] = defaultdict(deque)
        self.calls: List[Dict[str, Any]] = []

    def add(self, method: str, path: str, *replies: Any) -> None:
        self.routes[(method, path)].extend(replies)

    def calls_to(self, method: str, path: str) -> List[Dict[str, Any]]:
        return [c for c in self.calls if c["method"] == method and c["path"] == path]

    def __call__(self, req: Any, timeout: float = 30, context: Any = None) -> _DummyResponse:
        parsed = urlparse(req.full_url)
        path = parsed.path.split("/v4/", 1)[-1]
        query = {k: v[0] for k, v in parse_qs(parsed.query).items()}
        body = json.loads(req.data.decode("utf-8")) if req.data else None
        call = {
            "method": req.get_method(),
            "path": path,
            "query": query,
            "headers": {k.lower(): v for k, v in req.header_items()},
            "body": body,
            "timeout": timeout,
            "url": req.full_url,
        }
        self.calls.append(call)
        queue = self.routes.get((call["method"], path))
        if not queue:
            raise AssertionError(f"unexpected request {call['method']} {path}")
        return self._reply(queue.popleft(), req)

    def _reply(self, reply: Any, req: Any) -> _DummyResponse:
        if isinstance(reply, BaseException):
            raise reply
        if callable(reply):
            return self._reply(reply(req), req)
        if reply is None:
            return _DummyResponse(b"")
        if isinstance(reply, bytes):
            return _DummyResponse(reply)
        if isinstance(reply, tuple):
            status, payload = reply[0], reply[1]
            headers = reply[2] if len(reply) > 2 else {}
            raw = payload if isinstance(payload, str) else json.dumps(payload)
            if status >= 400:
                raise urllib.error.HTTPError(
                    url=req.full_url,
                    code=status,
                    msg="error",
                    hdrs=headers,
                    fp=io.BytesIO(raw.encode("utf-8")),
                )
            return _DummyResponse(raw.encode("utf-8"), status=status, headers=headers)
        return _DummyResponse(json.dumps(reply).encode("utf-8"))


@pytest.fixture
def fake_api(monkeypatch: pytest.MonkeyPatch) -> FakeApi:
    api = FakeApi()
    monkeypatch.setattr("linode_sdk.http.request.urlopen", api)
    return api


@pytest.fixture
def events_log() -> List[Dict[str, Any]]:
    return []


@pytest.fixture
def client(fake_api: FakeApi, events_log: List[Dict[str, Any]]) -> LinodeClient:
    return LinodeClient(
        "test-token",
        base_url=API_ROOT,
        max_retries=0,
        backoff_base_seconds=0,
        logger=events_log.append,
    )


@pytest.fixture
def make_client(fake_api: FakeApi) -> Callable[..., LinodeClient]:
    def _make(**kwargs: Any) -> LinodeClient:
        kwargs.setdefault("base_url", API_ROOT)
        kwargs.setdefault("backoff_base_seconds", 0)
        return LinodeClient("test-token", **kwargs)

    return _make
