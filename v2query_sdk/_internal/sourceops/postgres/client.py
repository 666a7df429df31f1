"""PostgreSQL source operations over the query endpoint."""

import threading

from v2query_sdk._internal.http import HTTPTransport
from v2query_sdk._internal.sourceops.base import run_query
from v2query_sdk._internal.sourceops.models import (
    DEFAULT_SOURCE,
    PG_RUN_SQL,
    PGRunSQLInput,
    PGRunSQLOutput,
)
from v2query_sdk._internal.sourceops.postgres.sql import estimate_count_query
from v2query_sdk.exceptions import V2QueryValidationError


class SourceOps:
    """PostgreSQL operations sent to one endpoint path."""

    def __init__(self, transport: HTTPTransport, path: str) -> None:
        self._transport = transport
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def pg_run_sql(
        self,
        input: PGRunSQLInput,
        *,
        cancel: threading.Event | None = None,
    ) -> PGRunSQLOutput:
        """Run raw SQL on a PostgreSQL source.

        Args:
            input: The SQL and its options.
            cancel: Optional event that aborts the call when set.

        Returns:
            The parsed query result.
        """
        return run_query(self._transport, self._path, PG_RUN_SQL, input, PGRunSQLOutput, cancel=cancel)

    def pg_estimate_count(
        self,
        schema: str,
        table: str,
        *,
        source: str = DEFAULT_SOURCE,
        cancel: threading.Event | None = None,
    ) -> int:
        """Return the planner's row estimate for `schema.table`.

        Raises:
            V2QueryValidationError: If the result holds no count.
        """
        output = self.pg_run_sql(
            PGRunSQLInput(sql=estimate_count_query(schema, table), source=source, read_only=True),
            cancel=cancel,
        )
        if not output.result or len(output.result) < 2 or not output.result[1]:
            raise V2QueryValidationError(f"no row estimate for {schema}.{table}")
        try:
            return int(output.result[1][0])
        except (TypeError, ValueError) as e:
            raise V2QueryValidationError(f"invalid row estimate for {schema}.{table}: {e}") from e


def new(transport: HTTPTransport, path: str) -> SourceOps:
    return SourceOps(transport, path)
