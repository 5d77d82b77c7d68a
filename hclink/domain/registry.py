from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Iterator, Optional

from hclink.domain.device import Device, DeviceKind
from hclink.domain.factory import create_device

_LOGGER = logging.getLogger(__name__)


class DeviceRegistry:
    """
    The set of devices mirrored from the hub, indexed by id.

    Devices are kept in the order they were loaded. A later description with
    an id already present replaces the earlier device in its original
    position (last write wins). Devices without a usable id are listed but
    never indexed, so no change-set can reach them.
    """

    def __init__(self) -> None:
        self._devices: list[Device] = []
        self._index: dict[int, int] = {}

    def add(self, device: Device) -> None:
        if not device.is_identified:
            self._devices.append(device)
            return
        position = self._index.get(device.id)
        if position is None:
            self._index[device.id] = len(self._devices)
            self._devices.append(device)
        else:
            _LOGGER.info("Duplicate device id %s in inventory, keeping the later entry", device.id)
            self._devices[position] = device

    def load_inventory(self, descriptions: Iterable[Any]) -> int:
        """
        Build devices from an inventory snapshot.

        Entries without a ``type`` key (or that are not objects at all) are
        skipped silently.

        Returns:
            The number of devices constructed.
        """
        loaded = 0
        for description in descriptions:
            if not isinstance(description, Mapping) or "type" not in description:
                _LOGGER.debug("Skipping inventory entry without type: %r", description)
                continue
            self.add(create_device(description))
            loaded += 1
        return loaded

    def find(self, device_id: int) -> Optional[Device]:
        position = self._index.get(device_id)
        if position is None:
            return None
        return self._devices[position]

    def apply_change(self, device_id: int, value: float) -> bool:
        """Route a value to the device with ``device_id``; unknown ids are ignored."""
        device = self.find(device_id)
        if device is None:
            _LOGGER.debug("Change for unknown device %s ignored", device_id)
            return False
        return device.update_state(value)

    def list(self) -> list[Device]:
        return list(self._devices)

    def of_kind(self, kind: DeviceKind) -> list[Device]:
        return [device for device in self._devices if device.kind is kind]

    def __iter__(self) -> Iterator[Device]:
        return iter(list(self._devices))

    def __len__(self) -> int:
        return len(self._devices)

    def __contains__(self, device_id: object) -> bool:
        return device_id in self._index
