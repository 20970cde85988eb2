"""Client for the quotation / installation CRUD endpoints."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from solarquote.config import Settings

logger = logging.getLogger(__name__)

QUOTATIONS_PATH = "/api/quotations"
INSTALLATIONS_PATH = "/api/installations"


class ApiError(RuntimeError):
    """Raised when the CRUD service rejects or cannot receive a record."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class QuoteApiClient:
    """Submits quotation and installation records."""

    def __init__(self, base_url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "QuoteApiClient":
        return cls(settings.api_url, timeout=settings.api_timeout)

    def _send(self, method: str, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.info(f"{method} {url}")
        try:
            resp = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ApiError(f"Could not reach {url}: {e}") from e

        if resp.status_code >= 400:
            try:
                body = resp.json()
            except ValueError:
                body = None
            message = resp.text
            if isinstance(body, dict) and body.get("message"):
                message = body["message"]
            logger.error(f"{method} {url} -> {resp.status_code}: {message}")
            raise ApiError(f"{method} {path} failed ({resp.status_code}): {message}", resp.status_code)

        if not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"{method} {url} -> {resp.status_code}: response is not JSON")
            raise ApiError(f"{method} {path} returned a non-JSON response", resp.status_code) from e

    def create_quotation(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", QUOTATIONS_PATH, payload)

    def update_quotation(self, quotation_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("PUT", f"{QUOTATIONS_PATH}/{quotation_id}", payload)

    def create_installation(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("POST", INSTALLATIONS_PATH, payload)

    def update_installation(self, installation_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._send("PUT", f"{INSTALLATIONS_PATH}/{installation_id}", payload)
