"""Tests for the MSSQL source provider."""

import json

import httpx
import pytest
import respx

from v2query_sdk._internal.http import HTTPTransport, create_http_client
from v2query_sdk._internal.sourceops import MSSQLSourceOps, mssql
from v2query_sdk._internal.sourceops.models import MSSQLRunSQLInput
from v2query_sdk.exceptions import ExecutionError, RequestBuildError

QUERY_URL = "http://test/v2/query"


def make_ops(path: str = "v2/query") -> mssql.SourceOps:
    return mssql.new(HTTPTransport(create_http_client(base_url="http://test")), path)


class TestMSSQLRunSQL:
    """Tests for mssql_run_sql()."""

    def test_implements_protocol(self):
        """Should satisfy the MSSQLSourceOps protocol."""
        ops: MSSQLSourceOps = make_ops()
        assert callable(ops.mssql_run_sql)

    @respx.mock
    def test_sends_mssql_run_sql(self):
        """Should POST an mssql_run_sql query with the given args."""
        route = respx.post(QUERY_URL).mock(
            return_value=httpx.Response(200, json={"result_type": "CommandOk", "result": None})
        )

        output = make_ops().mssql_run_sql(
            MSSQLRunSQLInput(sql="select 1", source="mssql", check_metadata_consistency=True)
        )

        assert output.result_type == "CommandOk"
        body = json.loads(route.calls.last.request.content)
        assert body == {
            "type": "mssql_run_sql",
            "args": {"sql": "select 1", "source": "mssql", "check_metadata_consistency": True},
        }

    @respx.mock
    def test_parses_typed_values(self):
        """Should keep non-string values returned by MSSQL."""
        respx.post(QUERY_URL).mock(
            return_value=httpx.Response(
                200, json={"result_type": "TuplesOk", "result": [["n", "label"], [1, "one"]]}
            )
        )

        output = make_ops().mssql_run_sql(MSSQLRunSQLInput(sql="select 1 as n, 'one' as label"))

        assert output.rows() == [{"n": 1, "label": "one"}]

    @respx.mock
    def test_server_error(self):
        """Should raise ExecutionError carrying the response descriptor."""
        respx.post(QUERY_URL).mock(
            return_value=httpx.Response(500, json={"error": "boom", "code": "unexpected"})
        )

        with pytest.raises(ExecutionError) as exc_info:
            make_ops().mssql_run_sql(MSSQLRunSQLInput(sql="select 1"))

        assert exc_info.value.response is not None
        assert exc_info.value.response.status_code == 500

    def test_invalid_path(self):
        """Should raise RequestBuildError before sending."""
        with pytest.raises(RequestBuildError):
            make_ops("v2/\x00query").mssql_run_sql(MSSQLRunSQLInput(sql="select 1"))
