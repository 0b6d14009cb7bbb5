"""HTTP transport used by the bank service client."""

from __future__ import annotations

import logging
from typing import Any
from typing import Protocol

import requests

from bankserv.core.config import DEFAULT_HTTP_TIMEOUT_SECONDS
from bankserv.core.errors import BankTransportError

logger = logging.getLogger(__name__)

USER_AGENT = "bankserv/0.1"


class TransportResponse(Protocol):
    status_code: int

    @property
    def content(self) -> bytes: ...


class BankTransport:
    """Issue single-attempt HTTP calls through a `requests`-compatible session."""

    def __init__(
        self,
        *,
        token: str = "",
        timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")

        self._token = token
        self._timeout_seconds = timeout_seconds
        self._owns_session = session is None
        self._session = session or requests.Session()

    def send(self, method: str, url: str, body: bytes | None = None) -> TransportResponse:
        """Send one request; connection-level failures raise `BankTransportError`."""
        try:
            return self._session.request(
                method,
                url,
                headers=self._headers(has_body=body is not None),
                data=body,
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.warning("Bank service request %s %s failed: %s", method, url, exc)
            raise BankTransportError(f"Bank service request {method} {url} failed") from exc

    def close(self) -> None:
        """Close the session only when this transport created it."""
        if self._owns_session:
            self._session.close()

    def _headers(self, *, has_body: bool) -> dict[str, Any]:
        headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers
