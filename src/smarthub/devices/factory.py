"""Factory for creating devices from kind tags.

Importing this module populates the device registry with every built-in
variant.
"""

from __future__ import annotations

from typing import Any

# Import device modules to populate the registry at import time
import smarthub.devices.door
import smarthub.devices.light
import smarthub.devices.thermostat
from smarthub.core.base import Device, DeviceId, DeviceKind
from smarthub.core.registry import DeviceRegistry, get_registry


class DeviceFactory:
    """Creates device variants from kind tags.

    Args:
        registry: Registry to resolve kinds from. Defaults to the global one.
    """

    def __init__(self, registry: DeviceRegistry | None = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> DeviceRegistry:
        """Registry used to resolve kinds."""
        return self._registry if self._registry is not None else get_registry()

    def create(
        self,
        kind: DeviceKind | str,
        device_id: DeviceId,
        **options: Any,
    ) -> Device:
        """Create a device.

        Args:
            kind: Kind tag ("light", "thermostat", "door").
            device_id: Identifier for the new device.
            **options: Variant-specific constructor arguments.

        Returns:
            New device instance.

        Raises:
            UnknownDeviceKindError: If the kind is not registered.
        """
        return self.registry.create(kind, device_id, **options)


def create_device(kind: DeviceKind | str, device_id: DeviceId, **options: Any) -> Device:
    """Create a device using the global registry.

    Convenience function wrapping DeviceFactory().create().
    """
    return DeviceFactory().create(kind, device_id, **options)
