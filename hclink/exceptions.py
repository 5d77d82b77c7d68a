"""
Error taxonomy for the hclink library.

Everything raised on purpose by hclink derives from ``HubError`` so callers can
catch the whole family at the session boundary.
"""
from __future__ import annotations


class HubError(Exception):
    """Base class for all hclink errors."""
    pass


class AuthenticationError(HubError):
    """Raised when the hub rejects the supplied credentials."""
    pass


class TransportError(HubError):
    """Raised on a non-success HTTP status or a connection failure."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProtocolError(HubError):
    """Raised when a hub response does not have the expected shape."""
    pass


class ValidationError(HubError):
    """Raised when a device description is not a key-value record."""
    pass


class SessionStateError(HubError):
    """Raised when a session operation is called from the wrong state."""
    pass
