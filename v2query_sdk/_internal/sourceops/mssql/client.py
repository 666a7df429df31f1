"""MSSQL source operations over the query endpoint."""

import threading

from v2query_sdk._internal.http import HTTPTransport
from v2query_sdk._internal.sourceops.base import run_query
from v2query_sdk._internal.sourceops.models import (
    MSSQL_RUN_SQL,
    MSSQLRunSQLInput,
    MSSQLRunSQLOutput,
)


class SourceOps:
    """MSSQL operations sent to one endpoint path."""

    def __init__(self, transport: HTTPTransport, path: str) -> None:
        self._transport = transport
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def mssql_run_sql(
        self,
        input: MSSQLRunSQLInput,
        *,
        cancel: threading.Event | None = None,
    ) -> MSSQLRunSQLOutput:
        """Run raw SQL on an MSSQL source."""
        return run_query(self._transport, self._path, MSSQL_RUN_SQL, input, MSSQLRunSQLOutput, cancel=cancel)


def new(transport: HTTPTransport, path: str) -> SourceOps:
    return SourceOps(transport, path)
