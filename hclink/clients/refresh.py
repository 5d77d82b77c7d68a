from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hclink.clients.session import Session, SessionState
from hclink.domain.view import DeviceReading
from hclink.exceptions import SessionStateError
from hclink.parsing.refresh import ChangeSet

_LOGGER = logging.getLogger(__name__)


class EventKind(str, Enum):
    CHANGES = "changes"
    FAILURE = "failure"


@dataclass(frozen=True)
class RefreshEvent:
    kind: EventKind
    cursor: int
    change_set: Optional[ChangeSet] = None
    readings: tuple[DeviceReading, ...] = ()
    error: Optional[str] = None


class RefreshLoop:
    """
    Keeps a streaming session in sync with the hub on a background thread.

    The loop is the only writer of the session registry. After every applied
    change-set it publishes a ``RefreshEvent`` with a copy of all device
    values on ``events``; failures are logged, published as failure events,
    and the same request is retried with no limit.

    Usage:
        loop = RefreshLoop(session)
        loop.start()
        event = loop.events.get()
        ...
        loop.stop()
    """

    def __init__(self, session: Session, events: Optional[queue.Queue] = None) -> None:
        self.session = session
        self.settings = session.settings
        self.events: queue.Queue = events if events is not None else queue.Queue(maxsize=self.settings.event_queue_size)
        self.cursor: Optional[int] = None
        self.iterations = 0
        self.failures = 0
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """
        Start the loop thread.

        Streaming is started on the calling thread first, so a hub that cannot
        hand out a cursor fails here rather than inside the loop.

        Raises:
            SessionStateError: If the session has not loaded its inventory.
        """
        if self.running:
            return
        if self.session.state not in (SessionState.INVENTORY_LOADED, SessionState.STREAMING):
            raise SessionStateError(
                f"Refresh loop needs a session with its inventory loaded, current state is '{self.session.state.value}'"
            )
        if self.session.state is SessionState.INVENTORY_LOADED:
            self.session.start_streaming()
        self.cursor = self.session.cursor
        self._stop_event.clear()
        self._thread = threading.Thread(target=self.run, name="hclink-refresh", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        """Ask the loop to exit once the in-flight request returns."""
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def run(self) -> None:
        if self.cursor is None:
            self.cursor = self.session.cursor
        _LOGGER.info("refresh_loop_started", extra={"details": {"cursor": self.cursor}})
        while not self._stop_event.is_set():
            cursor = self.cursor
            try:
                change_set = self.session.refresh_once(cursor)
            except Exception as exc:
                self.failures += 1
                _LOGGER.warning(
                    "refresh_failed",
                    extra={"details": {"cursor": cursor, "error": str(exc), "failures": self.failures}},
                )
                self._publish(RefreshEvent(kind=EventKind.FAILURE, cursor=cursor, error=str(exc)))
                if self.settings.retry_delay > 0:
                    self._stop_event.wait(self.settings.retry_delay)
                continue

            self.iterations += 1
            self._publish(
                RefreshEvent(
                    kind=EventKind.CHANGES,
                    cursor=cursor,
                    change_set=change_set,
                    readings=tuple(self.session.snapshot()),
                )
            )
            self.cursor = self.session.next_cursor(cursor, change_set)
            if self.settings.poll_interval > 0:
                self._stop_event.wait(self.settings.poll_interval)
        _LOGGER.info("refresh_loop_stopped", extra={"details": {"iterations": self.iterations, "failures": self.failures}})

    def _publish(self, event: RefreshEvent) -> None:
        # A slow consumer loses the oldest events, never the newest.
        while True:
            try:
                self.events.put_nowait(event)
                return
            except queue.Full:
                try:
                    self.events.get_nowait()
                except queue.Empty:
                    pass
