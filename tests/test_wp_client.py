"""Tests client WPGraphQL — jamais d'exception, erreurs → QueryResult.error."""
from unittest.mock import MagicMock

import requests

from beacon_front.wp.client import QueryResult, WordPressClient


def _client(json_body=None, json_error=None, post_error=None, http_error=None):
    session = MagicMock()
    resp = MagicMock()
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = json_body
    if http_error is not None:
        resp.raise_for_status.side_effect = http_error
    if post_error is not None:
        session.post.side_effect = post_error
    else:
        session.post.return_value = resp
    return WordPressClient(endpoint="https://wp.test/graphql", timeout=5, session=session), session


def test_success():
    client, session = _client({"data": {"post": {"id": "1"}}})
    result = client.query("query { post }", {"slug": "x"})
    assert result.ok
    assert result.data == {"post": {"id": "1"}}
    session.post.assert_called_once_with(
        "https://wp.test/graphql",
        json={"query": "query { post }", "variables": {"slug": "x"}},
        headers={"Content-Type": "application/json"},
        timeout=5,
    )


def test_variables_default_to_empty_dict():
    client, session = _client({"data": {}})
    client.query("query { x }")
    assert session.post.call_args.kwargs["json"]["variables"] == {}


def test_http_error():
    client, _ = _client(http_error=requests.HTTPError("500 Server Error"))
    result = client.query("q")
    assert not result.ok
    assert "500" in result.error


def test_network_error():
    client, _ = _client(post_error=requests.ConnectionError("refused"))
    result = client.query("q")
    assert result.data is None
    assert result.error == "refused"


def test_invalid_json():
    client, _ = _client(json_error=ValueError("Expecting value"))
    result = client.query("q")
    assert not result.ok
    assert result.error.startswith("Invalid JSON response")


def test_graphql_errors_keep_first_message():
    client, _ = _client({"errors": [{"message": "Cannot query field"}, {"message": "second"}], "data": None})
    result = client.query("q")
    assert not result.ok
    assert result.error == "Cannot query field"


def test_non_dict_body():
    client, _ = _client(["unexpected"])
    result = client.query("q")
    assert result.error == "Unexpected GraphQL response"


def test_missing_data_is_not_ok():
    assert not QueryResult().ok
    assert not QueryResult(data={}, error="boom").ok
    assert QueryResult(data={}).ok


def test_endpoint_from_environment(monkeypatch):
    monkeypatch.setenv("WORDPRESS_URL", "https://cms.example.com/")
    assert WordPressClient(session=MagicMock()).endpoint == "https://cms.example.com/graphql"
