from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class HubTransport(ABC):
    """
    Gateway to a hub's REST API.

    Implementations perform the authenticated calls and return decoded JSON;
    shaping it into typed values is left to ``hclink.parsing``.
    """

    @abstractmethod
    def set_credentials(self, login: str, password: str) -> None:
        ...

    @abstractmethod
    def get_devices(self) -> Any:
        ...

    @abstractmethod
    def get_refresh_status(self) -> Any:
        ...

    @abstractmethod
    def get_changes(self, last: int) -> Any:
        """Long-poll for changes since ``last``; blocks up to the request timeout."""
        ...

    def close(self) -> None:
        return None
