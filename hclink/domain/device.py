"""
Typed model of a single device mirrored from the hub.

A device is one of a closed set of kinds (``DeviceKind``). Identity fields are
frozen at construction; the only thing that changes afterwards is the
kind-specific state, and only through ``Device.update_state``.
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Iterable, Iterator, Optional

from hclink.const import HISTORY_SIZE, UNKNOWN_ID, UNKNOWN_UNIT

_LOGGER = logging.getLogger(__name__)


class DeviceKind(str, Enum):
    GENERIC = "generic"
    TEMPERATURE_SENSOR = "temperature_sensor"


class TemperatureHistory:
    """
    Bounded record of the most recent temperature readings.

    Readings are kept oldest to newest. Once ``HISTORY_SIZE`` readings are
    stored, each new one evicts the oldest.
    """

    def __init__(self, readings: Iterable[float] = ()) -> None:
        self._readings: Deque[float] = deque(readings, maxlen=HISTORY_SIZE)

    def push(self, value: float) -> None:
        self._readings.append(value)

    @property
    def current(self) -> Optional[float]:
        """The most recently pushed reading, or None if there is none yet."""
        return self._readings[-1] if self._readings else None

    @property
    def average(self) -> Optional[float]:
        """Arithmetic mean of the retained readings, or None if empty."""
        if not self._readings:
            return None
        return sum(self._readings) / len(self._readings)

    def as_list(self) -> list[float]:
        return list(self._readings)

    def __len__(self) -> int:
        return len(self._readings)

    def __iter__(self) -> Iterator[float]:
        return iter(self._readings)

    def __repr__(self) -> str:
        return f"TemperatureHistory({self.as_list()!r})"


@dataclass(frozen=True, eq=False)
class Device:
    """
    A device known to the hub.

    Attributes:
        id: Hub-assigned identifier. ``UNKNOWN_ID`` when the description had none.
        name: Display name.
        enabled: Whether the hub reports the device as enabled.
        kind: Variant tag; decides which state the device carries.
        unit: Physical unit of the readings (temperature sensors only).
        history: Recent readings (temperature sensors only).
    """
    id: int
    name: str
    enabled: bool
    kind: DeviceKind = DeviceKind.GENERIC
    unit: Optional[str] = None
    history: Optional[TemperatureHistory] = None

    def __post_init__(self) -> None:
        if self.kind is DeviceKind.TEMPERATURE_SENSOR:
            if self.history is None:
                object.__setattr__(self, "history", TemperatureHistory())
            if self.unit is None:
                object.__setattr__(self, "unit", UNKNOWN_UNIT)
        elif self.history is not None or self.unit is not None:
            raise ValueError(f"{self.kind.value} devices carry no readings")

    @classmethod
    def generic(cls, id: int, name: str, enabled: bool) -> "Device":
        return cls(id=id, name=name, enabled=enabled)

    @classmethod
    def temperature_sensor(
        cls,
        id: int,
        name: str,
        enabled: bool,
        unit: str,
        readings: Iterable[float] = (),
    ) -> "Device":
        return cls(
            id=id,
            name=name,
            enabled=enabled,
            kind=DeviceKind.TEMPERATURE_SENSOR,
            unit=unit,
            history=TemperatureHistory(readings),
        )

    @property
    def is_identified(self) -> bool:
        return self.id != UNKNOWN_ID

    @property
    def temperature(self) -> Optional[float]:
        return self.history.current if self.history is not None else None

    @property
    def average_temperature(self) -> Optional[float]:
        return self.history.average if self.history is not None else None

    def update_state(self, value: float) -> bool:
        """
        Apply a value reported by the hub.

        Returns:
            True if the device state changed, False if the kind ignores updates.
        """
        if self.kind is DeviceKind.GENERIC:
            _LOGGER.debug("Generic device %s ignores state update %r", self.id, value)
            return False
        if self.kind is DeviceKind.TEMPERATURE_SENSOR:
            self.history.push(float(value))
            return True
        raise ValueError(f"Unsupported device kind: {self.kind!r}")
