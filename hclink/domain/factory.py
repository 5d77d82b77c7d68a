from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from hclink.const import TEMPERATURE_SENSOR_TYPE, UNKNOWN_ID, UNKNOWN_NAME, UNKNOWN_UNIT
from hclink.domain.device import Device
from hclink.exceptions import ValidationError

_LOGGER = logging.getLogger(__name__)


def _parse_reading(value: Any) -> Optional[float]:
    # The hub serialises most sensor values as strings, e.g. "22.93".
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _common_fields(description: Mapping[str, Any]) -> dict[str, Any]:
    device_id = description.get("id")
    name = description.get("name")
    enabled = description.get("enabled")
    return {
        "id": device_id if isinstance(device_id, int) and not isinstance(device_id, bool) else UNKNOWN_ID,
        "name": name if isinstance(name, str) else UNKNOWN_NAME,
        "enabled": enabled if isinstance(enabled, bool) else False,
    }


def create_temperature_sensor(description: Mapping[str, Any]) -> Device:
    properties = description.get("properties")
    if not isinstance(properties, Mapping):
        properties = {}

    unit = properties.get("unit")
    readings = []
    if "value" in properties:
        reading = _parse_reading(properties["value"])
        if reading is None:
            _LOGGER.debug("Unparseable reading %r for device %r", properties["value"], description.get("id"))
        else:
            readings.append(reading)

    return Device.temperature_sensor(
        unit=unit if isinstance(unit, str) else UNKNOWN_UNIT,
        readings=readings,
        **_common_fields(description),
    )


def create_device(description: Mapping[str, Any]) -> Device:
    """
    Build the device variant matching a raw hub description.

    Missing or mistyped identity fields fall back to sentinels instead of
    failing, so a single odd entry never aborts an inventory load.

    Args:
        description: One element of the ``/api/devices`` array.

    Returns:
        A temperature sensor for the sensor discriminator, a generic device
        for anything else.

    Raises:
        ValidationError: If ``description`` is not a key-value record.
    """
    if not isinstance(description, Mapping):
        raise ValidationError(
            f"Device description must be an object, got {type(description).__name__}"
        )
    if description.get("type") == TEMPERATURE_SENSOR_TYPE:
        return create_temperature_sensor(description)
    return Device.generic(**_common_fields(description))
