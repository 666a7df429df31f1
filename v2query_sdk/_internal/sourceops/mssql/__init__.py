"""MSSQL source operations."""

from v2query_sdk._internal.sourceops.mssql.client import SourceOps, new

__all__ = ["SourceOps", "new"]
