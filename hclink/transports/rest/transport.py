from __future__ import annotations

import logging
from typing import Any, Optional

import requests
from requests.auth import HTTPBasicAuth

from hclink.const import ENDPOINT_DEVICES, ENDPOINT_REFRESH_STATES
from hclink.exceptions import AuthenticationError, ProtocolError, TransportError
from hclink.transports.base import HubTransport

_LOGGER = logging.getLogger(__name__)

API_USER_AGENT = "hclink/1.0"


class RestTransport(HubTransport):
    def __init__(
        self,
        address: str,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not address.startswith("http"):
            address = f"http://{address}"
        self.base_url = address.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "User-Agent": API_USER_AGENT,
                "Accept": "application/json",
            }
        )

    def set_credentials(self, login: str, password: str) -> None:
        self.session.auth = HTTPBasicAuth(login, password)

    # ---- helpers ----
    def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        _LOGGER.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        if response.status_code in (401, 403):
            raise AuthenticationError(f"Hub rejected credentials: {response.status_code}")
        if response.status_code != 200:
            raise TransportError(
                f"Hub GET {path} failed: {response.status_code} {response.text[:200]}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise ProtocolError(f"Hub GET {path} returned invalid JSON: {exc}") from exc

    # ---- HubTransport ----
    def get_devices(self) -> Any:
        return self._get(ENDPOINT_DEVICES)

    def get_refresh_status(self) -> Any:
        return self._get(ENDPOINT_REFRESH_STATES)

    def get_changes(self, last: int) -> Any:
        return self._get(ENDPOINT_REFRESH_STATES, params={"last": last})

    def close(self) -> None:
        self.session.close()
