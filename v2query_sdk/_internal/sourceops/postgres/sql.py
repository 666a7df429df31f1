"""SQL text helpers for PostgreSQL sources."""

import re

_SQL_FUNCTION_RE = re.compile(r".*\(\)$", re.MULTILINE)


def is_sql_function(text: str) -> bool:
    """Check if a column default looks like a function call, e.g. `now()`."""
    return _SQL_FUNCTION_RE.search(text) is not None


def cascade_sql_query(sql: str) -> str:
    """Append CASCADE to a statement, keeping a single trailing semicolon."""
    if sql.endswith(";"):
        return f"{sql[:-1]} CASCADE;"
    # A quote may follow the semicolon
    if len(sql) >= 2 and sql[-2] == ";":
        return f"{sql[:-2]} CASCADE;"
    return f"{sql} CASCADE;"


def _quote_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def estimate_count_query(schema: str, table: str) -> str:
    """Build a query returning the planner's row estimate for a table."""
    return (
        "SELECT reltuples::BIGINT FROM pg_class "
        f"WHERE oid = (quote_ident({_quote_literal(schema)}) || '.' || "
        f"quote_ident({_quote_literal(table)}))::regclass::oid "
        f"AND relname = {_quote_literal(table)};"
    )
