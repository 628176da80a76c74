"""
Tests for the requests-based playground client.
"""
import json
from unittest.mock import MagicMock

import requests

from api_playground_client import PlaygroundAPI


def _response(status_code, payload=None):
    response = requests.Response()
    response.status_code = status_code
    if payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
    else:
        response._content = b""
    return response


def _client(response, **kwargs):
    session = MagicMock()
    session.request.return_value = response
    return PlaygroundAPI(base_url="http://playground.test/", session=session, **kwargs), session


def test_list_books_drops_unset_params():
    client, session = _client(_response(200, {"success": True, "data": []}))
    data, error = client.list_books(genre="Technology", limit=2)
    assert error is None
    assert data == {"success": True, "data": []}
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://playground.test/api/books"
    assert kwargs["params"] == {"genre": "Technology", "limit": 2}


def test_error_response_is_returned_as_error_tuple():
    body = {"success": False, "error": "Book not found", "tip": "Try an ID between 1 and 4"}
    client, _ = _client(_response(404, body))
    data, error = client.get_book(99)
    assert data is None
    assert error == {"status_code": 404, "message": "Book not found", "body": body}


def test_list_users_sends_bearer_token():
    client, session = _client(_response(200, {"success": True}), bearer_token="abc")
    client.list_users()
    assert session.request.call_args.kwargs["headers"] == {"Authorization": "Bearer abc"}


def test_list_users_without_token_sends_no_header():
    client, session = _client(_response(401, {"success": False, "error": "No authorization header provided"}))
    _, error = client.list_users()
    assert session.request.call_args.kwargs["headers"] == {}
    assert error["status_code"] == 401


def test_create_user_sends_api_key():
    client, session = _client(_response(201, {"success": True}), api_key="key")
    client.create_user({"username": "u", "email": "u@example.com"})
    kwargs = session.request.call_args.kwargs
    assert kwargs["headers"] == {"X-API-Key": "key"}
    assert kwargs["json"] == {"username": "u", "email": "u@example.com"}


def test_empty_success_body():
    client, _ = _client(_response(204))
    assert client.status(204) == (None, None)


def test_submit_form_sends_form_fields():
    client, session = _client(_response(200, {"success": True}))
    client.submit_form({"name": "Ada"})
    kwargs = session.request.call_args.kwargs
    assert kwargs["data"] == {"name": "Ada"}
    assert kwargs["json"] is None


def test_connection_error():
    session = MagicMock()
    session.request.side_effect = requests.ConnectionError("refused")
    client = PlaygroundAPI(session=session)
    data, error = client.random()
    assert data is None
    assert error["status_code"] is None
    assert "refused" in error["message"]
