from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from hclink.domain.device import Device, DeviceKind


@dataclass(frozen=True)
class DeviceReading:
    """Point-in-time copy of a device, safe to hand to another thread."""
    id: int
    name: str
    enabled: bool
    kind: DeviceKind
    unit: Optional[str] = None
    current: Optional[float] = None
    average: Optional[float] = None
    history: tuple[float, ...] = ()

    @classmethod
    def from_device(cls, device: Device) -> "DeviceReading":
        history = tuple(device.history) if device.history is not None else ()
        return cls(
            id=device.id,
            name=device.name,
            enabled=device.enabled,
            kind=device.kind,
            unit=device.unit,
            current=device.temperature,
            average=device.average_temperature,
            history=history,
        )


def format_info(reading: DeviceReading | Device) -> str:
    return f"[{reading.id}]: {reading.name} is {'enabled' if reading.enabled else 'disabled'}."


def format_value(reading: DeviceReading) -> Optional[str]:
    """One display line for a device with a value, None for kinds without one."""
    if reading.kind is DeviceKind.GENERIC:
        return None
    if reading.kind is DeviceKind.TEMPERATURE_SENSOR:
        current = "n/a" if reading.current is None else f"{reading.current:g}"
        return f"[{reading.id}]: {reading.name} - {current} {reading.unit}"
    raise ValueError(f"Unsupported device kind: {reading.kind!r}")


def format_values(readings: list[DeviceReading]) -> list[str]:
    lines = []
    for reading in readings:
        line = format_value(reading)
        if line is not None:
            lines.append(line)
    return lines
