"""Public models for the v2query SDK."""

from v2query_sdk.models.response import QueryErrorBody, Response

__all__ = ["Response", "QueryErrorBody"]
