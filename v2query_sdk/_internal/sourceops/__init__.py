"""Per-dialect source operations for the query endpoint.

Each dialect provider is built from a transport and an endpoint path and
implements one of the protocols below. The public Client holds one provider
per dialect and forwards to it.
"""

import threading
from typing import Protocol

from v2query_sdk._internal.sourceops.models import (
    MSSQLRunSQLInput,
    MSSQLRunSQLOutput,
    PGRunSQLInput,
    PGRunSQLOutput,
)


class PGSourceOps(Protocol):
    """Operations on a PostgreSQL source."""

    def pg_run_sql(
        self, input: PGRunSQLInput, *, cancel: threading.Event | None = None
    ) -> PGRunSQLOutput: ...

    def pg_estimate_count(
        self,
        schema: str,
        table: str,
        *,
        source: str = "default",
        cancel: threading.Event | None = None,
    ) -> int: ...


class MSSQLSourceOps(Protocol):
    """Operations on an MSSQL source."""

    def mssql_run_sql(
        self, input: MSSQLRunSQLInput, *, cancel: threading.Event | None = None
    ) -> MSSQLRunSQLOutput: ...


__all__ = [
    "PGSourceOps",
    "MSSQLSourceOps",
    "PGRunSQLInput",
    "PGRunSQLOutput",
    "MSSQLRunSQLInput",
    "MSSQLRunSQLOutput",
]
