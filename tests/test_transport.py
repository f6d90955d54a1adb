import json
from unittest.mock import Mock, patch

import pytest
import requests

from gql_schema_explorer import transport, utils
from gql_schema_explorer.errors import MissingDataError
from gql_schema_explorer.schema import Schema


def mock_response(text: str) -> Mock:
    resp = Mock()
    resp.text = text
    resp.raise_for_status = Mock()
    return resp


class TestParseHeaders:
    def test_name_value_pairs(self) -> None:
        assert transport.parse_headers(["Authorization: Bearer abc", "X-Trace:1"]) == {
            "Authorization": "Bearer abc",
            "X-Trace": "1",
        }

    @pytest.mark.parametrize("header", ["no-colon", "a:b:c", "Referer: http://example.com", ""])
    def test_malformed_headers_skipped(self, header: str) -> None:
        assert transport.parse_headers([header]) == {}

    def test_empty(self) -> None:
        assert transport.parse_headers([]) == {}


class TestIntrospect:
    def test_posts_compact_query(self) -> None:
        with patch("gql_schema_explorer.transport.requests.post", return_value=mock_response("{}")) as post:
            text = transport.introspect("https://example.com/graphql", ["Authorization: Bearer abc", "bad"])

        assert text == "{}"
        post.assert_called_once()
        args, kwargs = post.call_args
        assert args == ("https://example.com/graphql",)
        assert kwargs["headers"] == {"Authorization": "Bearer abc", "Content-Type": "application/json"}

        query = kwargs["json"]["query"]
        assert "\n" not in query
        assert query == utils.compact_query()
        assert "fields(includeDeprecated:true)" in query
        assert "enumValues(includeDeprecated:true)" in query

    def test_http_error_propagates(self) -> None:
        resp = mock_response("oops")
        resp.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
        with patch("gql_schema_explorer.transport.requests.post", return_value=resp):
            with pytest.raises(requests.HTTPError):
                transport.introspect("https://example.com/graphql")

    def test_connection_error_propagates(self) -> None:
        with patch(
            "gql_schema_explorer.transport.requests.post",
            side_effect=requests.ConnectionError("refused"),
        ):
            with pytest.raises(requests.ConnectionError):
                Schema.from_url("https://example.com/graphql")


class TestFromUrl:
    def test_parses_response(self, introspection_text: str) -> None:
        with patch("gql_schema_explorer.transport.requests.post", return_value=mock_response(introspection_text)):
            schema = Schema.from_url("https://example.com/graphql", ["Authorization: Bearer abc"])
        assert schema.get_query_name() == "Query"

    def test_schema_errors_from_body(self) -> None:
        body = json.dumps({"errors": [{"message": "introspection disabled"}]})
        with patch("gql_schema_explorer.transport.requests.post", return_value=mock_response(body)):
            with pytest.raises(MissingDataError):
                Schema.from_url("https://example.com/graphql")


class TestIntrospectionQuery:
    def test_type_ref_depth(self) -> None:
        fragment = utils.INTROSPECTION_QUERY.split("fragment TypeRef on __Type")[1]
        assert fragment.count("ofType") == 7

    def test_requests_roots_and_directives(self) -> None:
        query = utils.compact_query()
        for part in ("queryType{name}", "mutationType{name}", "subscriptionType{name}", "directives{"):
            assert part in query
