"""Tests for the REST gateway (mocked HTTP)."""
from unittest.mock import MagicMock

import pytest
import requests
from requests.auth import HTTPBasicAuth

from hclink.exceptions import AuthenticationError, ProtocolError, TransportError
from hclink.transports.rest import RestTransport


def _response(status_code=200, payload=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.json.return_value = payload
    return response


def _transport(response=None, address="http://hub.local:7777/", timeout=30.0):
    session = MagicMock()
    session.headers = {}
    if response is not None:
        session.get.return_value = response
    return RestTransport(address, timeout=timeout, session=session), session


def test_address_without_scheme_gets_http():
    transport, _ = _transport(address="styx.fibaro.com:7777")
    assert transport.base_url == "http://styx.fibaro.com:7777"


def test_get_devices_url_and_timeout():
    transport, session = _transport(_response(payload=[{"id": 1}]), timeout=12.5)
    assert transport.get_devices() == [{"id": 1}]
    session.get.assert_called_once_with("http://hub.local:7777/api/devices", params=None, timeout=12.5)


def test_get_refresh_status_url():
    transport, session = _transport(_response(payload={"last": 1}))
    assert transport.get_refresh_status() == {"last": 1}
    assert session.get.call_args.args[0] == "http://hub.local:7777/api/refreshStates"


def test_get_changes_sends_cursor():
    transport, session = _transport(_response(payload={"changes": []}))
    transport.get_changes(3511)
    assert session.get.call_args.kwargs["params"] == {"last": 3511}


def test_set_credentials_uses_basic_auth():
    transport, session = _transport()
    transport.set_credentials("admin", "secret")
    assert session.auth == HTTPBasicAuth("admin", "secret")


@pytest.mark.parametrize("status", [401, 403])
def test_rejected_credentials(status):
    transport, _ = _transport(_response(status_code=status))
    with pytest.raises(AuthenticationError):
        transport.get_devices()


def test_non_200_is_transport_error():
    transport, _ = _transport(_response(status_code=503, text="busy"))
    with pytest.raises(TransportError) as excinfo:
        transport.get_changes(1)
    assert excinfo.value.status_code == 503


def test_connection_failure_is_transport_error():
    transport, session = _transport()
    session.get.side_effect = requests.ConnectionError("refused")
    with pytest.raises(TransportError):
        transport.get_devices()


def test_timeout_is_transport_error():
    transport, session = _transport()
    session.get.side_effect = requests.Timeout("read timed out")
    with pytest.raises(TransportError):
        transport.get_changes(1)


def test_invalid_json_is_protocol_error():
    response = _response()
    response.json.side_effect = ValueError("Expecting value")
    transport, _ = _transport(response)
    with pytest.raises(ProtocolError):
        transport.get_devices()


def test_close_closes_session():
    transport, session = _transport()
    transport.close()
    session.close.assert_called_once()
