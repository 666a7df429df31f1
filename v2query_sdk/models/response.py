"""Pydantic models describing a completed HTTP exchange."""

import httpx
from pydantic import BaseModel


class Response(BaseModel):
    """Metadata about one completed HTTP exchange.

    The body is not part of the descriptor; it is written to the sink passed
    to the transport.
    """

    status_code: int
    headers: dict[str, str] = {}
    url: str = ""

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        """Check if the status is 2xx."""
        return 200 <= self.status_code < 300

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "Response":
        return cls(
            status_code=response.status_code,
            headers=dict(response.headers),
            url=str(response.request.url),
        )


class QueryErrorBody(BaseModel):
    """Error payload returned by the query endpoint.

    Example:
        {"error": "relation \\"foo\\" does not exist", "code": "postgres-error", "path": "$"}
    """

    error: str
    code: str | None = None
    path: str | None = None

    model_config = {"extra": "allow"}
