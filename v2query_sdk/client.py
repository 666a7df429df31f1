"""User-facing client for the v2/query endpoint.

Example usage:
    from v2query_sdk import Client, PGRunSQLInput

    with Client.from_env() as client:
        # Dialect-specific operations
        output = client.pg_run_sql(PGRunSQLInput(sql="select 1"))

        # Any query body
        response, body = client.send({"type": "run_sql", "args": {"sql": "select 1"}})
"""

import io
import os
import threading
from typing import Any

from v2query_sdk._internal.http import HTTPTransport
from v2query_sdk._internal.sourceops import (
    MSSQLRunSQLInput,
    MSSQLRunSQLOutput,
    MSSQLSourceOps,
    PGRunSQLInput,
    PGRunSQLOutput,
    PGSourceOps,
    mssql,
    postgres,
)
from v2query_sdk._internal.sourceops.models import DEFAULT_SOURCE
from v2query_sdk.models import Response

DEFAULT_PATH = "v2/query"


class Client:
    """Client for the v2/query endpoint.

    Holds one shared transport and one provider per database dialect, all
    bound to the same endpoint path. Dialect operations are forwarded to the
    providers as is; `send` posts an arbitrary query body.

    Concurrent calls on one client (or on anything sharing its transport) are
    serialized by the transport.
    """

    def __init__(self, transport: HTTPTransport, path: str) -> None:
        """Initialize the client.

        Performs no I/O.

        Args:
            transport: The transport shared by every operation.
            path: The endpoint path, relative to the transport's base URL.
        """
        self._transport = transport
        self._path = path
        self._pg: PGSourceOps = postgres.new(transport, path)
        self._mssql: MSSQLSourceOps = mssql.new(transport, path)

    @classmethod
    def from_env(cls) -> "Client":
        """Create a client from environment variables.

        Reads the transport settings described in `HTTPTransport.from_env`,
        plus:
            V2QUERY_PATH: The endpoint path (default: "v2/query").

        Raises:
            V2QueryConfigError: If V2QUERY_ENDPOINT is not set.
        """
        path = os.environ.get("V2QUERY_PATH") or DEFAULT_PATH
        return cls(HTTPTransport.from_env(), path)

    @property
    def transport(self) -> HTTPTransport:
        return self._transport

    @property
    def path(self) -> str:
        return self._path

    @property
    def pg(self) -> PGSourceOps:
        return self._pg

    @property
    def mssql(self) -> MSSQLSourceOps:
        return self._mssql

    def send(
        self,
        body: Any,
        *,
        cancel: threading.Event | None = None,
    ) -> tuple[Response, io.BytesIO]:
        """POST `body` to the endpoint and return the response.

        Args:
            body: Any JSON-serializable value or pydantic model.
            cancel: Optional event that aborts the call when set.

        Returns:
            The response descriptor and a buffer holding the response body,
            rewound to the start.

        Raises:
            RequestBuildError: If the request cannot be built. Nothing is sent.
            ExecutionError: If the exchange fails. `error.response` holds the
                descriptor when the server answered.
        """
        request = self._transport.new_request("POST", self._path, body)
        response_body = io.BytesIO()
        response = self._transport.lock_and_do(request, response_body, cancel=cancel)
        response_body.seek(0)
        return response, response_body

    # =========================================================================
    # PostgreSQL
    # =========================================================================

    def pg_run_sql(
        self,
        input: PGRunSQLInput,
        *,
        cancel: threading.Event | None = None,
    ) -> PGRunSQLOutput:
        return self._pg.pg_run_sql(input, cancel=cancel)

    def pg_estimate_count(
        self,
        schema: str,
        table: str,
        *,
        source: str = DEFAULT_SOURCE,
        cancel: threading.Event | None = None,
    ) -> int:
        return self._pg.pg_estimate_count(schema, table, source=source, cancel=cancel)

    # =========================================================================
    # MSSQL
    # =========================================================================

    def mssql_run_sql(
        self,
        input: MSSQLRunSQLInput,
        *,
        cancel: threading.Event | None = None,
    ) -> MSSQLRunSQLOutput:
        return self._mssql.mssql_run_sql(input, cancel=cancel)

    def close(self) -> None:
        """Close the shared transport."""
        self._transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def new(transport: HTTPTransport, path: str) -> Client:
    """Create a client bound to `transport` and `path`."""
    return Client(transport, path)
