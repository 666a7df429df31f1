"""Pydantic models for raw SQL queries on database sources.

The request models are sent as the `args` of a query; the output models parse
the response body of a successful query.
"""

from typing import Any

from pydantic import BaseModel, Field

# =============================================================================
# Constants
# =============================================================================

DEFAULT_SOURCE = "default"

PG_RUN_SQL = "run_sql"
MSSQL_RUN_SQL = "mssql_run_sql"

RESULT_TUPLES_OK = "TuplesOk"
RESULT_COMMAND_OK = "CommandOk"

# =============================================================================
# Request Models
# =============================================================================


class RunSQLInput(BaseModel):
    """Arguments shared by the run_sql query types.

    Required fields:
        sql: The SQL to execute

    Optional fields:
        source: Name of the database source (default: "default")
        cascade: Cascade dependent metadata when dropping objects
        check_metadata_consistency: Reload and check metadata after running
    """

    sql: str = Field(min_length=1)
    source: str = DEFAULT_SOURCE
    cascade: bool | None = None
    check_metadata_consistency: bool | None = None


class PGRunSQLInput(RunSQLInput):
    """Arguments for a PostgreSQL `run_sql` query."""

    read_only: bool | None = None


class MSSQLRunSQLInput(RunSQLInput):
    """Arguments for an MSSQL `mssql_run_sql` query."""


# =============================================================================
# Response Models
# =============================================================================


class RunSQLOutput(BaseModel):
    """Result of a run_sql query.

    For `TuplesOk` results the first row of `result` holds the column names.
    """

    result_type: str
    result: list[list[Any]] | None = None

    model_config = {"extra": "allow"}

    def rows(self) -> list[dict[str, Any]]:
        """Return the data rows keyed by column name."""
        if self.result_type != RESULT_TUPLES_OK or not self.result:
            return []
        header = [str(column) for column in self.result[0]]
        return [dict(zip(header, row)) for row in self.result[1:]]


class PGRunSQLOutput(RunSQLOutput):
    """Result of a PostgreSQL `run_sql` query."""


class MSSQLRunSQLOutput(RunSQLOutput):
    """Result of an MSSQL `mssql_run_sql` query."""
