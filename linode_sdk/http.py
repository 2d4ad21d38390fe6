from __future__ import annotations

import http.client
import json
import ssl
import time
from typing import Any, Callable, Dict, List, Mapping, Optional
from urllib import error, parse, request

import certifi

from linode_sdk.context import RequestContext, resolve_context
from linode_sdk.errors import (
    APIError,
    CancelledError,
    DeadlineExceeded,
    DecodeError,
    FieldError,
    SerializationError,
    TransportError,
)

LogFn = Callable[[Dict[str, Any]], None]

DEFAULT_USER_AGENT = "linode-sdk-python/0.1.0"

_STATUS_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    409: "CONFLICT",
    429: "RATE_LIMITED",
}


def _error_code(status_code: int) -> str:
    if status_code in _STATUS_CODES:
        return _STATUS_CODES[status_code]
    if 500 <= status_code < 600:
        return "SERVER_ERROR"
    return "HTTP_ERROR"


def encode_body(body: Any) -> bytes:
    try:
        return json.dumps(body, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"request body is not JSON serializable: {exc}") from exc


def encode_filter(value: Any) -> str:
    if isinstance(value, str):
        return value
    return encode_body(value).decode("utf-8")


def build_api_error(status_code: int, raw: str, headers: Optional[Mapping[str, str]] = None) -> APIError:
    request_id = headers.get("X-Request-Id") if headers else None
    message = f"HTTP {status_code}"
    errors: List[FieldError] = []
    if raw:
        try:
            parsed = json.loads(raw)
        except ValueError:
            message = raw[:500]
        else:
            items = parsed.get("errors") if isinstance(parsed, dict) else None
            if isinstance(items, list):
                for item in items:
                    if not isinstance(item, dict) or not item.get("reason"):
                        continue
                    field = item.get("field")
                    errors.append(FieldError(reason=str(item["reason"]), field=str(field) if field else None))
            if errors:
                message = "; ".join(str(e) for e in errors)
    return APIError(
        status_code=status_code,
        code=_error_code(status_code),
        message=message,
        errors=errors,
        request_id=request_id,
    )


class HttpClient:
    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30,
        max_retries: int = 3,
        backoff_base_seconds: float = 0.25,
        ca_file: Optional[str] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        logger: Optional[LogFn] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_base_seconds = backoff_base_seconds
        self.ca_file = ca_file
        self.user_agent = user_agent
        self.logger = logger
        self._ssl: Optional[ssl.SSLContext] = None

    def _ssl_context(self) -> ssl.SSLContext:
        if self._ssl is None:
            self._ssl = ssl.create_default_context(cafile=self.ca_file or certifi.where())
        return self._ssl

    def _should_retry_status(self, status_code: int) -> bool:
        return status_code == 429 or 500 <= status_code < 600

    def _emit_log(self, event: Dict[str, Any], logger_override: Optional[LogFn] = None) -> None:
        log_fn = logger_override or self.logger
        if not log_fn:
            return
        try:
            log_fn(event)
        except Exception:
            pass

    def _backoff(self, ctx: RequestContext, base: float, attempt: int) -> None:
        if ctx.wait(base * (2 ** attempt)):
            raise CancelledError("request cancelled during retry backoff")

    def url_for(self, path: str, params: Optional[Dict[str, Any]] = None) -> str:
        url = f"{self.base_url}/{path.lstrip('/')}"
        if params:
            query = parse.urlencode(params, doseq=True)
            url = f"{url}?{query}"
        return url

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        context: Optional[RequestContext] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        backoff_base_seconds: Optional[float] = None,
        logger: Optional[LogFn] = None,
    ) -> Any:
        ctx = resolve_context(context)
        payload = encode_body(body) if body is not None else None
        url = self.url_for(path, params)
        req_headers = {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
        if headers:
            req_headers.update(headers)
        effective_timeout = timeout if timeout is not None else self.timeout
        effective_retries = max_retries if max_retries is not None else self.max_retries
        effective_backoff = backoff_base_seconds if backoff_base_seconds is not None else self.backoff_base_seconds
        last_request_id: Optional[str] = None
        attempts = max(effective_retries, 0) + 1
        for attempt in range(attempts):
            ctx.check()
            attempt_start = time.perf_counter()
            req = request.Request(url=url, data=payload, headers=req_headers, method=method)
            try:
                with request.urlopen(req, timeout=ctx.clamp_timeout(effective_timeout), context=self._ssl_context()) as resp:
                    raw = resp.read()
                    request_id = resp.headers.get("X-Request-Id") if resp.headers else None
                    last_request_id = request_id or last_request_id
                    self._emit_log({
                        "event": "http_request",
                        "method": method,
                        "path": path,
                        "status_code": getattr(resp, "status", None),
                        "duration_ms": round((time.perf_counter() - attempt_start) * 1000, 2),
                        "attempt": attempt + 1,
                        "request_id": request_id,
                        "has_body": body is not None,
                        "query_keys": sorted((params or {}).keys()),
                    }, logger_override=logger)
            except error.HTTPError as exc:
                raw_error = ""
                try:
                    raw_error = exc.read().decode("utf-8", errors="replace")
                except Exception:
                    raw_error = ""
                api_err = build_api_error(exc.code, raw_error, exc.headers)
                last_request_id = api_err.request_id or last_request_id
                self._emit_log({
                    "event": "http_error",
                    "method": method,
                    "path": path,
                    "status_code": exc.code,
                    "duration_ms": round((time.perf_counter() - attempt_start) * 1000, 2),
                    "attempt": attempt + 1,
                    "request_id": api_err.request_id,
                    "error_code": api_err.code,
                    "has_body": body is not None,
                    "query_keys": sorted((params or {}).keys()),
                }, logger_override=logger)
                if attempt + 1 < attempts and self._should_retry_status(exc.code):
                    self._backoff(ctx, effective_backoff, attempt)
                    continue
                raise api_err
            except (error.URLError, http.client.HTTPException, OSError) as exc:
                reason = getattr(exc, "reason", None)
                message = str(reason) if reason is not None else str(exc)
                self._emit_log({
                    "event": "network_error",
                    "method": method,
                    "path": path,
                    "status_code": None,
                    "duration_ms": round((time.perf_counter() - attempt_start) * 1000, 2),
                    "attempt": attempt + 1,
                    "request_id": last_request_id,
                    "error_code": "NETWORK_ERROR",
                    "has_body": body is not None,
                    "query_keys": sorted((params or {}).keys()),
                }, logger_override=logger)
                if ctx.expired():
                    raise DeadlineExceeded("request deadline exceeded") from exc
                if attempt + 1 < attempts:
                    self._backoff(ctx, effective_backoff, attempt)
                    continue
                raise TransportError(message, request_id=last_request_id) from exc
            ctx.check()
            try:
                text = raw.decode("utf-8")
                if not text.strip():
                    return {}
                return json.loads(text)
            except ValueError as exc:
                raise DecodeError(f"response from {method} {path} is not valid JSON: {exc}") from exc
        raise RuntimeError("Request failed without explicit exception")
