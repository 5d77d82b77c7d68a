from unittest.mock import MagicMock

import pytest

from hclink.clients import Session
from hclink.config import ClientSettings
from hclink.transports.base import HubTransport

INVENTORY = [
    {
        "id": 1,
        "name": "Temp",
        "type": "com.fibaro.temperatureSensor",
        "enabled": True,
        "properties": {"value": "20.5", "unit": "C"},
    },
    {"id": 2, "name": "Switch", "type": "com.other.switch", "enabled": True},
]


@pytest.fixture
def settings():
    return ClientSettings(poll_interval=0.0, retry_delay=0.0, request_timeout=5.0)


@pytest.fixture
def transport():
    transport = MagicMock(spec=HubTransport)
    transport.get_devices.return_value = INVENTORY
    transport.get_refresh_status.return_value = {"status": "IDLE", "last": 100, "logs": []}
    transport.get_changes.return_value = {"changes": []}
    return transport


@pytest.fixture
def session(transport, settings):
    return Session(transport, settings=settings)


@pytest.fixture
def streaming_session(session):
    session.login("admin", "admin")
    session.load_inventory()
    session.start_streaming()
    return session
