"""Request/response cycle shared by the source providers."""

import io
import threading
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from v2query_sdk._internal.http import HTTPTransport
from v2query_sdk.exceptions import V2QueryValidationError

OutputT = TypeVar("OutputT", bound=BaseModel)


def run_query(
    transport: HTTPTransport,
    path: str,
    query_type: str,
    args: BaseModel,
    output_model: type[OutputT],
    *,
    cancel: threading.Event | None = None,
) -> OutputT:
    """POST `{"type": query_type, "args": args}` and parse the response.

    Build and execution errors from the transport propagate unchanged.

    Raises:
        V2QueryValidationError: If a successful response does not match
            `output_model`.
    """
    body = {"type": query_type, "args": args.model_dump(mode="json", exclude_none=True)}
    request = transport.new_request("POST", path, body)
    response_body = io.BytesIO()
    transport.lock_and_do(request, response_body, cancel=cancel)
    try:
        return output_model.model_validate_json(response_body.getvalue())
    except ValidationError as e:
        raise V2QueryValidationError(f"unexpected {query_type} response: {e}") from e
