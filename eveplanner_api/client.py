"""EvePlanner API client.

A thin wrapper around the HTTP API built on ``requests``.  Every method
maps to one route and returns a tuple ``(data, error)``:

* on success ``data`` is the decoded JSON body (or the raw bytes for
  :meth:`EvePlannerClient.download_file`) and ``error`` is ``None``;
* on failure ``data`` is ``None`` (or an empty list for listings) and
  ``error`` is a dictionary with ``status_code`` and ``message``.  The
  message is taken from the ``{"error": ...}`` envelope of the API.

Example::

    client = EvePlannerClient(base_url="http://localhost:5000")
    created, error = client.create_user({"fullName": "Jane D.", "email": "jane@x.com"})
"""

from __future__ import annotations

import logging
import os
from typing import Any, BinaryIO, Dict, List, Optional, Tuple, Union

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class EvePlannerClient:
    """Client for the ``/api`` routes of an EvePlanner server."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``http://localhost:5000``.  The
                ``/api`` prefix is added by the client.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
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
        json_body: Any | None = None,
        data: Dict[str, Any] | None = None,
        files: Dict[str, Any] | None = None,
        raw: bool = False,
    ) -> Result:
        """Perform an HTTP request against ``/api<path>``.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path below ``/api`` (e.g. ``/users``).
            json_body: JSON body for POST/PUT requests.
            data: Form fields for multipart requests.
            files: Files for multipart requests, as accepted by ``requests``.
            raw: Return the response body as bytes instead of decoding JSON.
        """
        url = f"{self.base_url}/api{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                data=data,
                files=files,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if raw:
                return response.content, None
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict) and err_json.get("error"):
                        message = str(err_json["error"])
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def create_user(self, payload: Dict[str, Any]) -> Result:
        """Register a user.  The result contains the new ``userId``."""
        return self._request("POST", "/users", json_body=payload)

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        return self._list("/users")

    def get_user(self, user_id: str) -> Result:
        return self._request("GET", f"/users/{user_id}")

    def update_user(self, user_id: str, payload: Dict[str, Any]) -> Result:
        """Replace a user's profile.  Fields left out are cleared."""
        return self._request("PUT", f"/users/{user_id}", json_body=payload)

    def delete_user(self, user_id: str) -> Result:
        return self._request("DELETE", f"/users/{user_id}")

    def list_user_events(self, user_id: str) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        return self._list(f"/users/{user_id}/events")

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def create_event(self, payload: Dict[str, Any]) -> Result:
        """Create an event.  ``payload`` must contain ``userId`` and ``eventType``."""
        return self._request("POST", "/events", json_body=payload)

    def list_events(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        return self._list("/events")

    def get_event(self, event_id: str) -> Result:
        return self._request("GET", f"/events/{event_id}")

    def update_event(self, event_id: str, payload: Dict[str, Any]) -> Result:
        return self._request("PUT", f"/events/{event_id}", json_body=payload)

    def delete_event(self, event_id: str) -> Result:
        return self._request("DELETE", f"/events/{event_id}")

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------
    def upload_file(
        self,
        event_id: str,
        file: Union[str, BinaryIO],
        *,
        user_id: Optional[str] = None,
        file_name: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> Result:
        """Upload a file for an event.

        Args:
            event_id: Event the file belongs to.
            file: A path on disk or an open binary file object.
            user_id: Uploading user, sent as the ``userId`` form field.
            file_name: Name to report to the server.  Defaults to the
                base name of ``file``.
            content_type: MIME type to declare for the file part.
        """
        form = {"userId": user_id} if user_id else None
        if isinstance(file, str):
            with open(file, "rb") as fh:
                name = file_name or os.path.basename(file)
                return self._request(
                    "POST",
                    f"/events/{event_id}/files",
                    data=form,
                    files={"file": (name, fh, content_type)},
                )
        name = file_name or os.path.basename(getattr(file, "name", "") or "upload")
        return self._request(
            "POST",
            f"/events/{event_id}/files",
            data=form,
            files={"file": (name, file, content_type)},
        )

    def list_event_files(self, event_id: str) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        return self._list(f"/events/{event_id}/files")

    def download_file(self, file_id: str) -> Tuple[Optional[bytes], Optional[Dict[str, Any]]]:
        return self._request("GET", f"/files/{file_id}/download", raw=True)

    def delete_file(self, file_id: str) -> Result:
        return self._request("DELETE", f"/files/{file_id}")

    # ------------------------------------------------------------------
    # Service
    # ------------------------------------------------------------------
    def statistics(self) -> Result:
        """Return ``{totalUsers, totalEvents, totalFiles}``."""
        return self._request("GET", "/statistics")

    def health(self) -> Result:
        return self._request("GET", "/health")
