"""Shared HTTP transport for the query endpoint.

`HTTPTransport` builds requests against a base URL and executes them one at a
time: `lock_and_do` holds the transport lock for the whole exchange, including
streaming the response body into the caller's sink.
"""

import json
import os
import sys
import threading
from collections.abc import Mapping
from typing import IO, Any

import httpx
from pydantic import BaseModel, ValidationError

from v2query_sdk._internal.redaction import redact_headers, redact_payload
from v2query_sdk._version import __version__
from v2query_sdk.exceptions import (
    ExecutionError,
    RequestBuildError,
    RequestCancelledError,
    V2QueryConfigError,
)
from v2query_sdk.models import QueryErrorBody, Response

DEFAULT_TIMEOUT = 30.0
DEFAULT_TIMEOUT_MS = 30000
ADMIN_SECRET_HEADER = "X-Hasura-Admin-Secret"

# How often a queued caller re-checks its cancel event.
LOCK_POLL_INTERVAL = 0.05


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
    headers: Mapping[str, str] | None = None,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds.
        base_url: Optional base URL for all requests.
        headers: Extra headers sent with every request (e.g. the admin secret).

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        base_url=base_url or "",
        headers={"User-Agent": f"v2query-sdk/{__version__}", **(headers or {})},
    )


class HTTPTransport:
    """HTTP transport with serialized execution.

    At most one exchange proceeds at a time per transport instance, no matter
    how many clients or source providers share it.
    """

    def __init__(self, http_client: httpx.Client, *, debug: bool = False) -> None:
        """Initialize the transport.

        Args:
            http_client: The httpx client used for every exchange.
            debug: Enable debug logging to stderr.
        """
        self._client = http_client
        self._lock = threading.Lock()
        self._debug = debug

    @classmethod
    def from_env(cls) -> "HTTPTransport":
        """Create a transport from environment variables.

        Required environment variables:
            V2QUERY_ENDPOINT: Base URL of the service.

        Optional environment variables:
            V2QUERY_ADMIN_SECRET: Admin secret sent with every request.
            V2QUERY_TIMEOUT_MS: Request timeout in milliseconds.
            V2QUERY_DEBUG: Set to "1" to enable debug logging.

        Raises:
            V2QueryConfigError: If V2QUERY_ENDPOINT is not set.
            ValueError: If V2QUERY_TIMEOUT_MS is not an integer.
        """
        endpoint = os.environ.get("V2QUERY_ENDPOINT")
        if not endpoint:
            raise V2QueryConfigError("V2QUERY_ENDPOINT is not set")

        admin_secret = os.environ.get("V2QUERY_ADMIN_SECRET")
        debug = os.environ.get("V2QUERY_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("V2QUERY_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        headers = {ADMIN_SECRET_HEADER: admin_secret} if admin_secret else None
        http_client = create_http_client(
            timeout=timeout_ms / 1000,
            base_url=endpoint,
            headers=headers,
        )
        return cls(http_client, debug=debug)

    @property
    def http_client(self) -> httpx.Client:
        return self._client

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[v2query-sdk] {message}", file=sys.stderr)

    def new_request(self, method: str, path: str, body: Any) -> httpx.Request:
        """Build a request with `body` serialized as JSON.

        Pydantic models are dumped with `exclude_none=True`; any other value
        must be accepted by `json.dumps` as is.

        Raises:
            RequestBuildError: If the body cannot be serialized or the path
                does not form a valid URL.
        """
        try:
            data = body.model_dump(mode="json", exclude_none=True) if isinstance(body, BaseModel) else body
            content = json.dumps(data, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise RequestBuildError(f"cannot serialize request body: {e}") from e

        try:
            request = self._client.build_request(
                method,
                path,
                content=content,
                headers={"Content-Type": "application/json"},
            )
        except httpx.InvalidURL as e:
            raise RequestBuildError(f"invalid request path {path!r}: {e}") from e

        if self._debug:
            self._log_debug(f"Built {method} {request.url} headers={redact_headers(request.headers)}")
            self._log_debug(f"Body: {json.dumps(redact_payload(data))[:200]}")
        return request

    def lock_and_do(
        self,
        request: httpx.Request,
        sink: IO[bytes],
        *,
        cancel: threading.Event | None = None,
    ) -> Response:
        """Execute `request` while holding the transport lock.

        The response payload is written to `sink`. Setting `cancel` aborts the
        call while it is queued for the lock or while the body is streaming;
        other queued callers are unaffected.

        Returns:
            The response descriptor of a 2xx exchange.

        Raises:
            RequestCancelledError: If `cancel` was set.
            ExecutionError: On network failure or a non-2xx status. The
                descriptor is attached when the server answered.
        """
        self._acquire(cancel)
        try:
            return self._do(request, sink, cancel)
        finally:
            self._lock.release()

    def _acquire(self, cancel: threading.Event | None) -> None:
        if cancel is None:
            self._lock.acquire()
            return
        while not self._lock.acquire(timeout=LOCK_POLL_INTERVAL):
            if cancel.is_set():
                self._log_debug("Cancelled while waiting for transport")
                raise RequestCancelledError("request cancelled while waiting for transport")

    def _do(
        self,
        request: httpx.Request,
        sink: IO[bytes],
        cancel: threading.Event | None,
    ) -> Response:
        if cancel is not None and cancel.is_set():
            raise RequestCancelledError("request cancelled before sending")

        self._log_debug(f"Sending {request.method} {request.url}")
        try:
            http_response = self._client.send(request, stream=True)
        except httpx.TimeoutException as e:
            raise ExecutionError(f"request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise ExecutionError(f"request failed: {e}") from e

        descriptor = Response.from_httpx(http_response)
        try:
            if cancel is not None and cancel.is_set():
                raise RequestCancelledError(
                    "request cancelled while waiting for response",
                    response=descriptor,
                )

            if not descriptor.ok:
                content = http_response.read()
                self._log_debug(f"Request failed with status {descriptor.status_code}")
                raise _error_from_response(descriptor, content)

            for chunk in http_response.iter_bytes():
                if cancel is not None and cancel.is_set():
                    raise RequestCancelledError(
                        "request cancelled while reading response",
                        response=descriptor,
                    )
                sink.write(chunk)
        except httpx.HTTPError as e:
            raise ExecutionError(f"reading response failed: {e}", response=descriptor) from e
        finally:
            http_response.close()

        self._log_debug(f"Request succeeded with status {descriptor.status_code}")
        return descriptor

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _error_from_response(descriptor: Response, content: bytes) -> ExecutionError:
    """Build the error for a non-2xx response.

    JSON bodies are read as `{"error", "code", "path"}`; anything else is
    reported as text.
    """
    content_type = descriptor.headers.get("content-type", "")
    if "json" in content_type:
        try:
            error_body = QueryErrorBody.model_validate_json(content)
        except ValidationError:
            error_body = None
        if error_body is not None:
            return ExecutionError(
                f"request failed with status {descriptor.status_code}: {error_body.error}",
                response=descriptor,
                code=error_body.code,
            )

    text = content.decode("utf-8", errors="replace").strip()
    message = f"request failed with status {descriptor.status_code}"
    if text:
        message = f"{message}: {text}"
    return ExecutionError(message, response=descriptor)
