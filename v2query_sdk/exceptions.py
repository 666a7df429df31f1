"""Public exceptions for the v2query SDK."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from v2query_sdk.models import Response


class V2QueryError(Exception):
    """Base exception for all v2query SDK errors."""


class V2QueryConfigError(V2QueryError):
    """Configuration error (missing env vars, invalid config)."""


class V2QueryValidationError(V2QueryError):
    """Response data did not match the expected model."""


class RequestBuildError(V2QueryError):
    """The outbound request could not be built.

    Raised before any network I/O is attempted.
    """


class ExecutionError(V2QueryError):
    """The HTTP exchange failed.

    `response` is set when the server answered (e.g. a non-2xx status) and is
    None when the request never got a response.
    """

    def __init__(
        self,
        message: str,
        response: "Response | None" = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.response = response
        self.code = code

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None


class RequestCancelledError(ExecutionError):
    """The request was cancelled while queued or in flight."""
