"""Tests for run_sql models."""

import pytest
from pydantic import ValidationError

from v2query_sdk._internal.sourceops.models import (
    MSSQLRunSQLInput,
    PGRunSQLInput,
    PGRunSQLOutput,
    RunSQLOutput,
)


class TestRunSQLInput:
    """Tests for run_sql input models."""

    def test_defaults(self):
        """Should default the source and omit unset options."""
        args = PGRunSQLInput(sql="select 1")
        assert args.model_dump(mode="json", exclude_none=True) == {
            "sql": "select 1",
            "source": "default",
        }

    def test_all_options(self):
        """Should serialize every option that is set."""
        args = PGRunSQLInput(
            sql="drop table foo",
            source="analytics",
            cascade=True,
            check_metadata_consistency=False,
            read_only=False,
        )
        assert args.model_dump(mode="json", exclude_none=True) == {
            "sql": "drop table foo",
            "source": "analytics",
            "cascade": True,
            "check_metadata_consistency": False,
            "read_only": False,
        }

    def test_empty_sql_rejected(self):
        """Should reject empty SQL."""
        with pytest.raises(ValidationError):
            MSSQLRunSQLInput(sql="")

    def test_mssql_has_no_read_only(self):
        """MSSQL input should not carry the read_only option."""
        assert "read_only" not in MSSQLRunSQLInput.model_fields


class TestRunSQLOutput:
    """Tests for run_sql output models."""

    def test_rows_keyed_by_header(self):
        """Should map data rows to the header row."""
        output = PGRunSQLOutput(
            result_type="TuplesOk",
            result=[["id", "name"], ["1", "alice"], ["2", "bob"]],
        )
        assert output.rows() == [
            {"id": "1", "name": "alice"},
            {"id": "2", "name": "bob"},
        ]

    def test_rows_header_only(self):
        """Should return no rows when only the header is present."""
        output = RunSQLOutput(result_type="TuplesOk", result=[["id"]])
        assert output.rows() == []

    def test_rows_command_ok(self):
        """Should return no rows for CommandOk results."""
        output = RunSQLOutput(result_type="CommandOk", result=None)
        assert output.rows() == []

    def test_result_type_required(self):
        """Should reject output without a result_type."""
        with pytest.raises(ValidationError):
            RunSQLOutput.model_validate({"result": []})
