"""
Session with a single hub.

A session walks a fixed sequence of states: it authenticates, loads the
device inventory into its registry, obtains the refresh cursor, and from then
on applies incremental change-sets. Setup failures are fatal and leave the
session in ``SessionState.FAILED``; refresh failures leave it streaming so the
caller can retry.
"""
from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any, Optional

from hclink.config import ClientSettings, CursorPolicy, get_settings
from hclink.domain.device import Device
from hclink.domain.registry import DeviceRegistry
from hclink.domain.view import DeviceReading
from hclink.exceptions import AuthenticationError, HubError, SessionStateError
from hclink.logging import create_logger, find_ring_buffer
from hclink.parsing.refresh import ChangeSet, RefreshStatus, decode_change_set, decode_inventory, decode_refresh_status
from hclink.transports.base import HubTransport
from hclink.transports.rest import RestTransport

_LOGGER = logging.getLogger(__name__)


class SessionState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"
    INVENTORY_LOADED = "inventory_loaded"
    STREAMING = "streaming"
    FAILED = "failed"


class Session:
    def __init__(
        self,
        transport: HubTransport,
        settings: Optional[ClientSettings] = None,
    ) -> None:
        self.transport = transport
        self.settings = settings or get_settings()
        self.registry = DeviceRegistry()
        self.state = SessionState.UNAUTHENTICATED
        self.cursor: Optional[int] = None
        self.refresh_status: Optional[RefreshStatus] = None
        # Guards the registry against reads interleaving with a change-set.
        self.lock = threading.Lock()
        self.logger = create_logger("hclink", self.settings.log_ring_size, self.settings.log_level.upper())

    @classmethod
    def connect(cls, address: Optional[str] = None, settings: Optional[ClientSettings] = None) -> "Session":
        settings = settings or get_settings()
        transport = RestTransport(address or settings.hub_address, timeout=settings.request_timeout)
        return cls(transport, settings=settings)

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self.transport.close()

    # ---- helpers ----
    def _require(self, expected: SessionState) -> None:
        if self.state is not expected:
            raise SessionStateError(
                f"Operation requires session state '{expected.value}', current state is '{self.state.value}'"
            )

    def _setup_step(self, name: str, call) -> Any:
        try:
            return call()
        except HubError as exc:
            self.state = SessionState.FAILED
            _LOGGER.error("setup_failed", extra={"details": {"step": name, "error": str(exc)}})
            raise

    # ---- setup ----
    def login(self, login: str, password: str) -> None:
        """
        Authenticate against the hub.

        The hub has no dedicated login endpoint, so the device listing doubles
        as the credential probe.

        Raises:
            AuthenticationError: If the probe does not succeed for any reason.
        """
        self._require(SessionState.UNAUTHENTICATED)
        self.transport.set_credentials(login, password)

        def probe() -> None:
            try:
                self.transport.get_devices()
            except AuthenticationError:
                raise
            except HubError as exc:
                raise AuthenticationError(f"Could not authenticate to the server: {exc}") from exc

        self._setup_step("login", probe)
        self.state = SessionState.AUTHENTICATED
        _LOGGER.info("login_ok", extra={"details": {"login": login}})

    def load_inventory(self) -> int:
        """Fetch the device list into the registry and return the registry size."""
        self._require(SessionState.AUTHENTICATED)
        payload = self._setup_step("load_inventory", lambda: decode_inventory(self.transport.get_devices()))
        with self.lock:
            self.registry.load_inventory(payload)
            count = len(self.registry)
        self.state = SessionState.INVENTORY_LOADED
        _LOGGER.info("inventory_loaded", extra={"details": {"devices": count, "entries": len(payload)}})
        return count

    def start_streaming(self) -> int:
        """Obtain the initial refresh cursor and return it."""
        self._require(SessionState.INVENTORY_LOADED)
        status = self._setup_step(
            "start_streaming", lambda: decode_refresh_status(self.transport.get_refresh_status())
        )
        self.refresh_status = status
        self.cursor = status.last
        self.state = SessionState.STREAMING
        _LOGGER.info("streaming_started", extra={"details": {"last": status.last, "status": status.status}})
        return status.last

    # ---- streaming ----
    def refresh_once(self, cursor: Optional[int] = None) -> ChangeSet:
        """
        Wait for one change-set and apply it to the registry.

        Blocks until the hub answers the long-poll or the request timeout
        expires. Changes for unknown ids are ignored. The session cursor is
        left untouched; use ``next_cursor`` to pick the next one.

        Args:
            cursor: Cursor to send. Defaults to the one from ``start_streaming``.
        """
        self._require(SessionState.STREAMING)
        cursor = self.cursor if cursor is None else cursor
        change_set = decode_change_set(self.transport.get_changes(cursor))
        with self.lock:
            for change in change_set.changes:
                if self.registry.apply_change(change.id, change.value):
                    change_set.applied.append(change.id)
        _LOGGER.debug(
            "change_set_applied",
            extra={"details": {"cursor": cursor, "changes": len(change_set), "applied": change_set.applied}},
        )
        return change_set

    def next_cursor(self, cursor: int, change_set: ChangeSet) -> int:
        if self.settings.cursor_policy is CursorPolicy.ADVANCE and change_set.last is not None:
            return change_set.last
        return cursor

    # ---- reads ----
    @property
    def devices(self) -> list[Device]:
        with self.lock:
            return self.registry.list()

    def snapshot(self) -> list[DeviceReading]:
        with self.lock:
            return [DeviceReading.from_device(device) for device in self.registry]

    def recent_events(self) -> list[dict]:
        handler = find_ring_buffer(self.logger)
        return handler.get_events() if handler else []
