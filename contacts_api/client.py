"""Contacts API client.

A thin wrapper around the HTTP surface of the Contacts API using the
``requests`` library.  Every method returns a tuple ``(data, error)``:
on success ``error`` is ``None``; on failure ``data`` is empty and
``error`` is a dictionary with keys ``status_code`` and ``message``.
A 404 from the server is reported as an error with ``status_code``
404, so callers can tell "not found" apart from transport failures
(``status_code`` ``None``).

Example::

    api = ContactsAPI(base_url="http://localhost:8000")
    contact, error = api.create_contact("Alice", "+1", "5551234")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ContactsAPI:
    """Client for the ``/contacts`` endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
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
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` for empty responses such as 204.
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
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None and exc.response.content:
                try:
                    err_json = exc.response.json()
                    message = self._error_message(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _error_message(err_json: Any) -> str:
        """Flatten an error body into a single string.

        FastAPI reports validation failures (422) as a list of
        ``{"loc": [...], "msg": ...}`` entries under ``detail``; those are
        joined as ``"<loc>: <msg>"`` separated by ``"; "``.
        """
        if not isinstance(err_json, dict):
            return str(err_json)
        detail = err_json.get("detail")
        if not detail:
            return str(err_json)
        if isinstance(detail, str):
            return detail
        if isinstance(detail, list):
            parts = []
            for item in detail:
                if isinstance(item, dict) and "msg" in item:
                    loc = ".".join(str(part) for part in item.get("loc", []))
                    parts.append(f"{loc}: {item['msg']}" if loc else str(item["msg"]))
                else:
                    parts.append(str(item))
            return "; ".join(parts)
        return str(detail)

    @staticmethod
    def _payload(name: str, country_code: str, phone_number: str) -> Dict[str, str]:
        return {"Name": name, "CountryCode": country_code, "PhoneNumber": phone_number}

    # ------------------------------------------------------------------
    # Contact operations
    # ------------------------------------------------------------------
    def create_contact(
        self, name: str, country_code: str, phone_number: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a contact and return it with its server-assigned ``Id``."""
        return self._request(
            "POST", "/contacts", json_body=self._payload(name, country_code, phone_number)
        )

    def get_contact(self, contact_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single contact by id."""
        return self._request("GET", f"/contacts/{contact_id}")

    def list_contacts(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all contacts."""
        data, error = self._request("GET", "/contacts")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def update_contact(
        self, contact_id: str, name: str, country_code: str, phone_number: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace all fields of a contact and return the updated record."""
        return self._request(
            "PUT",
            f"/contacts/{contact_id}",
            json_body=self._payload(name, country_code, phone_number),
        )

    def remove_contact(self, contact_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete a contact.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/contacts/{contact_id}")
        if error:
            return False, error
        return True, None
