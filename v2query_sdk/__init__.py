"""v2query SDK for Python.

Client for the v2/query schema/metadata endpoint.

Public API:
    Client - Generic query dispatch plus per-dialect source operations
    PGRunSQLInput, MSSQLRunSQLInput - Raw SQL query arguments
    cascade_sql_query, is_sql_function - PostgreSQL SQL text helpers

Internal (system-level, not for direct use):
    _internal.http - Shared HTTP transport
    _internal.sourceops - Per-dialect source providers
"""

from v2query_sdk._internal.sourceops.models import (
    MSSQLRunSQLInput,
    MSSQLRunSQLOutput,
    PGRunSQLInput,
    PGRunSQLOutput,
)
from v2query_sdk._internal.sourceops.postgres import cascade_sql_query, is_sql_function
from v2query_sdk._version import __version__
from v2query_sdk.client import Client, new
from v2query_sdk.models import Response

__all__ = [
    "__version__",
    "Client",
    "new",
    "Response",
    "PGRunSQLInput",
    "PGRunSQLOutput",
    "MSSQLRunSQLInput",
    "MSSQLRunSQLOutput",
    "cascade_sql_query",
    "is_sql_function",
]
