"""Tests for device display lines."""
from hclink.domain.device import Device
from hclink.domain.view import DeviceReading, format_info, format_value, format_values


def test_format_info():
    device = Device.generic(id=2, name="Switch", enabled=True)
    assert format_info(device) == "[2]: Switch is enabled."
    assert format_info(DeviceReading.from_device(device)) == "[2]: Switch is enabled."
    assert format_info(Device.generic(id=8, name="Fan", enabled=False)) == "[8]: Fan is disabled."


def test_format_value_sensor():
    sensor = Device.temperature_sensor(id=1, name="Temp", enabled=True, unit="C", readings=[20.5])
    assert format_value(DeviceReading.from_device(sensor)) == "[1]: Temp - 20.5 C"


def test_format_value_sensor_without_readings():
    sensor = Device.temperature_sensor(id=1, name="Temp", enabled=True, unit="C")
    assert format_value(DeviceReading.from_device(sensor)) == "[1]: Temp - n/a C"


def test_format_values_skips_generic():
    devices = [
        Device.generic(id=2, name="Switch", enabled=True),
        Device.temperature_sensor(id=1, name="Temp", enabled=True, unit="C", readings=[21.0]),
    ]
    lines = format_values([DeviceReading.from_device(d) for d in devices])
    assert lines == ["[1]: Temp - 21 C"]
