from hclink.clients import EventKind, RefreshEvent, RefreshLoop, Session, SessionState
from hclink.config import ClientSettings, CursorPolicy, get_settings
from hclink.domain import Device, DeviceKind, DeviceRegistry, create_device
from hclink.exceptions import (
    AuthenticationError,
    HubError,
    ProtocolError,
    SessionStateError,
    TransportError,
    ValidationError,
)
from hclink.transports import HubTransport, RestTransport
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "AuthenticationError",
    "ClientSettings",
    "CursorPolicy",
    "Device",
    "DeviceKind",
    "DeviceRegistry",
    "EventKind",
    "HubError",
    "HubTransport",
    "ProtocolError",
    "RefreshEvent",
    "RefreshLoop",
    "RestTransport",
    "Session",
    "SessionState",
    "SessionStateError",
    "TransportError",
    "ValidationError",
    "create_device",
    "get_settings",
]

try:
    __version__ = version("hclink")
except PackageNotFoundError:
    __version__ = "0.0.0"
