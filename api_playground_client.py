"""API playground client.

This module defines a small client around the playground's REST API
using the ``requests`` library, together with a guided tour
(:func:`main`) that calls every kind of endpoint in turn and logs what
comes back.  It is the Python counterpart of making the same calls
with curl or a browser:

* :meth:`PlaygroundAPI.list_books` and friends - GET/POST/PUT/PATCH/DELETE
  on ``/api/books``.
* :meth:`PlaygroundAPI.search` - several query parameters at once.
* :meth:`PlaygroundAPI.list_users` / :meth:`PlaygroundAPI.create_user` -
  credentials sent in the ``Authorization`` and ``X-API-Key`` headers.
* :meth:`PlaygroundAPI.echo`, :meth:`PlaygroundAPI.status`,
  :meth:`PlaygroundAPI.slow`, :meth:`PlaygroundAPI.random`,
  :meth:`PlaygroundAPI.calculate` and :meth:`PlaygroundAPI.submit_form`.

Every method returns a tuple ``(data, error)``: on success ``data`` is
the decoded JSON body and ``error`` is ``None``; on failure ``data`` is
``None`` and ``error`` holds the status code, the server's ``error``
message and the full error body, so the tour can show what a 401 or a
404 looks like.

Usage:
    python api_playground_client.py

The base URL is read from ``PLAYGROUND_BASE_URL`` (default
``http://localhost:3000``).
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]

DEFAULT_BASE_URL = "http://localhost:3000"


class PlaygroundAPI:
    """Client for the API playground."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        bearer_token: Optional[str] = None,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the playground, e.g. ``http://localhost:3000``.
            bearer_token: Token sent as ``Authorization: Bearer <token>``
                by :meth:`list_users`.  When ``None`` no header is sent.
            api_key: Value of the ``X-API-Key`` header sent by
                :meth:`create_user`.  When ``None`` no header is sent.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.bearer_token = bearer_token
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
        data: Dict[str, Any] | None = None,
        headers: Dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> Result:
        """Perform an HTTP request against the playground.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``, etc.).
            path: Path relative to :attr:`base_url` (e.g. ``/api/books``).
            params: Query parameters to include in the request.
            json_body: JSON body to send.
            data: Form fields to send URL-encoded.
            headers: Extra request headers.
            timeout: Overrides the client's default timeout.
        Returns:
            A tuple ``(data, error)``.  ``error`` is a dictionary with
            keys ``status_code``, ``message`` and ``body``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                data=data,
                headers=headers or {},
                timeout=timeout or self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            response = exc.response
            status = response.status_code if response is not None else None
            body: Any = None
            message = ""
            if response is not None:
                try:
                    body = response.json()
                    if isinstance(body, dict):
                        message = body.get("error") or body.get("meaning") or ""
                except ValueError:
                    body = response.text
            if not message:
                message = str(exc)
            logger.debug("Request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message, "body": body}
        except requests.RequestException as exc:
            logger.error("Request to %s failed: %s", url, exc)
            return None, {"status_code": None, "message": str(exc), "body": None}

    # ------------------------------------------------------------------
    # Book operations
    # ------------------------------------------------------------------
    def list_books(
        self,
        *,
        genre: Optional[str] = None,
        sort: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Result:
        params = {"genre": genre, "sort": sort, "limit": limit}
        return self._request("GET", "/api/books", params={k: v for k, v in params.items() if v is not None})

    def get_book(self, book_id: Any) -> Result:
        return self._request("GET", f"/api/books/{book_id}")

    def create_book(self, book: Dict[str, Any]) -> Result:
        return self._request("POST", "/api/books", json_body=book)

    def replace_book(self, book_id: Any, book: Dict[str, Any]) -> Result:
        """PUT: every field must be present."""
        return self._request("PUT", f"/api/books/{book_id}", json_body=book)

    def update_book(self, book_id: Any, fields: Dict[str, Any]) -> Result:
        """PATCH: only the given fields change."""
        return self._request("PATCH", f"/api/books/{book_id}", json_body=fields)

    def delete_book(self, book_id: Any) -> Result:
        return self._request("DELETE", f"/api/books/{book_id}")

    def search(
        self,
        q: Optional[str] = None,
        *,
        min_year: Optional[int] = None,
        max_year: Optional[int] = None,
        author: Optional[str] = None,
    ) -> Result:
        params = {"q": q, "minYear": min_year, "maxYear": max_year, "author": author}
        return self._request("GET", "/api/search", params={k: v for k, v in params.items() if v is not None})

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Result:
        headers = {"Authorization": f"Bearer {self.bearer_token}"} if self.bearer_token else {}
        return self._request("GET", "/api/users", headers=headers)

    def create_user(self, user: Dict[str, Any]) -> Result:
        headers = {"X-API-Key": self.api_key} if self.api_key else {}
        return self._request("POST", "/api/users", json_body=user, headers=headers)

    # ------------------------------------------------------------------
    # Utility endpoints
    # ------------------------------------------------------------------
    def echo(self, body: Any = None, *, headers: Dict[str, str] | None = None) -> Result:
        return self._request("POST", "/api/echo", json_body=body, headers=headers)

    def status(self, code: int) -> Result:
        return self._request("GET", f"/api/status/{code}")

    def slow(self, delay_ms: int) -> Result:
        # Leave room for the server-side wait on top of the usual timeout.
        return self._request(
            "GET", "/api/slow", params={"delay": delay_ms}, timeout=self.timeout + delay_ms / 1000
        )

    def random(self) -> Result:
        return self._request("GET", "/api/random")

    def calculate(self, operation: str, a: Any, b: Any) -> Result:
        return self._request("POST", "/api/calculate", json_body={"operation": operation, "a": a, "b": b})

    def submit_form(self, fields: Dict[str, Any]) -> Result:
        return self._request("POST", "/api/form", data=fields)


def _show(label: str, result: Result) -> None:
    data, error = result
    payload = data if error is None else error
    logger.info("%s\n%s", label, json.dumps(payload, indent=2))


def main(base_url: Optional[str] = None) -> None:
    """Walk through the playground's endpoints one request at a time."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    base_url = base_url or os.getenv("PLAYGROUND_BASE_URL", DEFAULT_BASE_URL)
    client = PlaygroundAPI(
        base_url=base_url,
        bearer_token=os.getenv("BEARER_TOKEN", "secret-token-123"),
        api_key=os.getenv("API_KEY", "my-secret-api-key"),
    )
    logger.info("Make sure the playground is running at %s", base_url)

    _show("GET /api/books - all books", client.list_books())
    _show("GET /api/books/1 - path parameter", client.get_book(1))
    _show("GET /api/books?genre=Technology&limit=2 - query parameters", client.list_books(genre="Technology", limit=2))
    _show(
        "POST /api/books - create",
        client.create_book(
            {"title": "Learning APIs the Fun Way", "author": "You, the Learner", "year": 2024, "genre": "Education"}
        ),
    )
    _show(
        "PUT /api/books/1 - replace every field",
        client.replace_book(
            1, {"title": "Completely New Title", "author": "Completely New Author", "year": 2025, "genre": "Fiction"}
        ),
    )
    _show("PATCH /api/books/2 - update the year only", client.update_book(2, {"year": 2030}))
    _show("DELETE /api/books/4", client.delete_book(4))
    _show("GET /api/search?q=rest&minYear=2020", client.search("rest", min_year=2020))

    anonymous = PlaygroundAPI(base_url=base_url, session=client.session)
    _show("GET /api/users without credentials", anonymous.list_users())
    _show("GET /api/users with a bearer token", client.list_users())
    _show(
        "POST /api/users with an X-API-Key header",
        client.create_user({"username": "newuser", "email": "newuser@example.com"}),
    )

    _show(
        "POST /api/echo",
        client.echo({"message": "Hello, API!"}, headers={"X-Custom-Header": "Hello from client!"}),
    )
    for code in (200, 404, 500):
        _show(f"GET /api/status/{code}", client.status(code))
    _show("GET /api/slow?delay=1000", client.slow(1000))
    _show("GET /api/random", client.random())
    _show("POST /api/calculate 7 * 8", client.calculate("multiply", 7, 8))
    _show("POST /api/calculate 5 / 0", client.calculate("divide", 5, 0))
    _show("POST /api/form", client.submit_form({"name": "Ada", "course": "API 101"}))
    _show("GET /api/books/999 - not found", client.get_book(999))


if __name__ == "__main__":
    main()
