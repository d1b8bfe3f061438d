"""School Portal API client.

A thin wrapper around the HTTP API of the School Portal service.  The
client uses the ``requests`` library internally and exposes one method
per endpoint:

* :meth:`list_users` – return all users.
* :meth:`create_user` – register a new user.
* :meth:`login` – check an email/password pair.
* :meth:`update_user` – change some fields of an existing user.
* :meth:`list_subjects` – return all subjects (``vakken``).

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None`` and ``data`` holds the decoded JSON (lists) or the
confirmation text.  On failure ``data`` is ``None`` and ``error`` is a
dictionary with the keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PortalClient:
    """Client for interacting with the School Portal API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            timeout: Seconds to wait for each response.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``).
            path: Path relative to :attr:`base_url` (e.g. ``/user``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  The service answers errors in
            plain text, which becomes ``error["message"]``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
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
        if response.headers.get("content-type", "").startswith("application/json"):
            return response.json(), None
        return response.text, None

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users.  ``users`` is empty on failure."""
        data, error = self._request("GET", "/user")
        if error:
            return [], error
        return data or [], None

    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[str], Optional[Error]]:
        """Create a user.

        Args:
            payload: Fields of the new user (``voornaam``, ``achternaam``,
                ``email`` and ``wachtwoord`` are required by the server).
        """
        return self._request("POST", "/user", json_body=payload)

    def login(self, email: str, wachtwoord: str) -> Tuple[Optional[str], Optional[Error]]:
        """Check credentials.  A 404 or 401 comes back as ``error``."""
        return self._request("POST", "/login", json_body={"email": email, "wachtwoord": wachtwoord})

    def update_user(self, user_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[str], Optional[Error]]:
        """Update the given fields of user ``user_id``."""
        return self._request("PUT", f"/user/{user_id}", json_body=payload)

    # ------------------------------------------------------------------
    # Subjects
    # ------------------------------------------------------------------
    def list_subjects(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all subjects (``vakken``)."""
        data, error = self._request("GET", "/vakken")
        if error:
            return [], error
        return data or [], None
