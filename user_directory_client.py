"""User Directory API client.

A small wrapper around the REST API served by ``user_directory_api``.
It uses the ``requests`` library internally and exposes one method per
endpoint:

* :meth:`list_users` – return all users keyed by id.
* :meth:`get_user` – fetch a single user by its identifier.
* :meth:`create_user` – add a user with the given name.
* :meth:`update_user` – rename an existing user.
* :meth:`delete_user` – remove a user and return the remaining ones.
* :meth:`hello`, :meth:`echo`, :meth:`hey` – plain-text greeting routes.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``.  On failure ``data`` is ``None`` (or an empty mapping for
collection calls) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  Network problems never raise out of
the client; they are logged and reported in ``error``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class UserDirectoryAPI:
    """Client for interacting with the user directory API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://127.0.0.1:8080``.
                Include the route prefix if the server mounts one.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any | None = None,
        data: Any | None = None,
        expect_json: bool = True,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/users/``).
            json_body: JSON body to send with the request.
            data: Raw body to send instead of JSON.
            expect_json: Parse the response as JSON; otherwise return
                its text.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                data=data,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if not expect_json:
            return response.text, None
        try:
            return response.json(), None
        except ValueError:
            logger.error("API returned a non-JSON body for %s %s", method, url)
            return None, {"status_code": response.status_code, "message": "Invalid JSON in response"}

    @staticmethod
    def _user_path(user_id: Any) -> str:
        return f"/users/{user_id}"

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[Dict[str, Dict[str, Any]], Optional[Error]]:
        """Retrieve all users.

        Returns:
            A tuple ``(users, error)``.  ``users`` maps user ids to
            user records and is empty on failure.
        """
        data, error = self._request("GET", "/users/")
        if error:
            return {}, error
        return data or {}, None

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single user by ID.

        An unknown id yields ``error["status_code"] == 404``.
        """
        return self._request("GET", self._user_path(user_id))

    def create_user(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a user and return the stored record, including its id."""
        return self._request("POST", "/users/", json_body={"name": name})

    def update_user(self, user_id: Any, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Rename a user and return the updated record."""
        return self._request("PUT", self._user_path(user_id), json_body={"name": name})

    def delete_user(self, user_id: Any) -> Tuple[Dict[str, Dict[str, Any]], Optional[Error]]:
        """Delete a user.

        Returns:
            A tuple ``(remaining, error)`` where ``remaining`` maps the
            ids of the users left in the directory to their records.
        """
        data, error = self._request("DELETE", self._user_path(user_id))
        if error:
            return {}, error
        return data or {}, None

    # ------------------------------------------------------------------
    # Greetings
    # ------------------------------------------------------------------
    def hello(self) -> Tuple[Optional[str], Optional[Error]]:
        return self._request("GET", "/", expect_json=False)

    def echo(self, text: str) -> Tuple[Optional[str], Optional[Error]]:
        return self._request("POST", "/echo", data=text.encode("utf-8"), expect_json=False)

    def hey(self, user_id: Any) -> Tuple[Optional[str], Optional[Error]]:
        return self._request("GET", f"/hey/{user_id}", expect_json=False)
