"""Tests for the id-indexed device registry."""
import pytest

from hclink.domain.device import DeviceKind
from hclink.domain.registry import DeviceRegistry

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


def _registry(descriptions=INVENTORY) -> DeviceRegistry:
    registry = DeviceRegistry()
    registry.load_inventory(descriptions)
    return registry


def test_load_inventory_builds_typed_devices():
    registry = _registry()
    assert len(registry) == 2
    assert registry.find(1).kind is DeviceKind.TEMPERATURE_SENSOR
    assert registry.find(2).kind is DeviceKind.GENERIC
    assert registry.find(1).temperature == 20.5
    assert registry.find(1).average_temperature == 20.5


def test_entries_without_type_are_skipped():
    registry = DeviceRegistry()
    loaded = registry.load_inventory([{"id": 9, "name": "NoType"}, "garbage", None, *INVENTORY])
    assert loaded == 2
    assert registry.find(9) is None
    assert [d.id for d in registry] == [1, 2]


def test_iteration_keeps_insertion_order():
    registry = _registry(
        [{"id": 30, "type": "a"}, {"id": 10, "type": "b"}, {"id": 20, "type": "c"}]
    )
    assert [d.id for d in registry.list()] == [30, 10, 20]


def test_duplicate_ids_last_write_wins_in_place():
    registry = _registry(
        [
            {"id": 1, "name": "first", "type": "a"},
            {"id": 2, "name": "other", "type": "a"},
            {"id": 1, "name": "second", "type": "com.fibaro.temperatureSensor"},
        ]
    )
    assert len(registry) == 2
    assert registry.find(1).name == "second"
    assert registry.find(1).kind is DeviceKind.TEMPERATURE_SENSOR
    assert [d.name for d in registry] == ["second", "other"]


def test_unidentified_devices_listed_but_not_indexed():
    registry = _registry([{"name": "a", "type": "x"}, {"name": "b", "type": "x"}])
    assert len(registry) == 2
    assert registry.find(-1) is None
    assert -1 not in registry
    assert registry.apply_change(-1, 3.0) is False


def test_apply_change_updates_matching_sensor_only():
    registry = _registry()
    switch = registry.find(2)
    assert registry.apply_change(1, 21.0) is True
    assert registry.find(1).temperature == 21.0
    assert registry.find(1).average_temperature == pytest.approx(20.75)
    assert registry.find(2) is switch
    assert switch.history is None


def test_apply_change_unknown_id_is_noop():
    registry = _registry()
    before = registry.find(1).history.as_list()
    assert registry.apply_change(404, 99.0) is False
    assert registry.find(1).history.as_list() == before


def test_apply_change_to_generic_reports_no_change():
    assert _registry().apply_change(2, 1.0) is False


def test_of_kind():
    registry = _registry()
    assert [d.id for d in registry.of_kind(DeviceKind.TEMPERATURE_SENSOR)] == [1]
    assert [d.id for d in registry.of_kind(DeviceKind.GENERIC)] == [2]
