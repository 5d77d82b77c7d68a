"""
This package defines the domain model of the hclink library: the devices
mirrored from the hub, the factory that builds them from raw descriptions,
and the registry that indexes them by id.
"""
from hclink.domain.device import Device, DeviceKind, TemperatureHistory
from hclink.domain.factory import create_device
from hclink.domain.registry import DeviceRegistry

__all__ = ["Device", "DeviceKind", "DeviceRegistry", "TemperatureHistory", "create_device"]
