"""
Client for the Super App service directory.

The directory keeps track of the services available to the Super App
and of the operations ("capabilities") each one exposes.  A service
announces itself by posting its name, its capability names and a
callback URL to ``/register``, authenticated with a pre‑shared key
sent as a bearer token.

Like the other HTTP helpers in this project the client never raises on
transport or protocol errors.  Each call returns a ``(data, error)``
tuple where ``error`` is ``None`` on success and otherwise a
dictionary with ``status_code`` and ``message`` keys.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)


class SuperAppClient:
    """Registers this service with the Super App directory."""

    REGISTER_PATH = "/register"

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the directory, e.g. ``http://superapp:8080``.
            api_key: Pre‑shared key sent as ``Authorization: Bearer <key>``.
            timeout: Per‑request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                try:
                    return response.json(), None
                except ValueError:
                    return {"raw": response.text}, None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("error") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            return None, {"status_code": None, "message": str(exc)}

    def register(
        self, name: str, capabilities: Sequence[str], callback_url: str
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Announce the service and its capabilities to the directory.

        Returns:
            A tuple ``(ack, error)``.  ``ack`` is the directory's response
            body (possibly ``None``) when registration was accepted.
        """
        payload: Dict[str, Any] = {
            "name": name,
            "capabilities": list(capabilities),
            "callback_url": callback_url,
        }
        return self._request("POST", self.REGISTER_PATH, json_body=payload)

    def close(self) -> None:
        self.session.close()
