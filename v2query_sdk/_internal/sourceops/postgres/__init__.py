"""PostgreSQL source operations.

Also exports standalone SQL text helpers for callers composing their own
run_sql statements: `cascade_sql_query`, `is_sql_function` and
`estimate_count_query`. The provider uses `estimate_count_query` itself.
"""

from v2query_sdk._internal.sourceops.postgres.client import SourceOps, new
from v2query_sdk._internal.sourceops.postgres.sql import (
    cascade_sql_query,
    estimate_count_query,
    is_sql_function,
)

__all__ = [
    "SourceOps",
    "new",
    "cascade_sql_query",
    "estimate_count_query",
    "is_sql_function",
]
