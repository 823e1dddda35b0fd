"""Device variants for the smart-device hub.

This module provides the concrete devices a hub can manage, the access
relay that wraps them, and the factory that creates them from kind tags.
"""

from smarthub.devices.door import DoorLock
from smarthub.devices.factory import DeviceFactory, create_device
from smarthub.devices.light import Light
from smarthub.devices.relay import AccessRelay
from smarthub.devices.thermostat import Thermostat

__all__ = [
    # Devices
    "Light",
    "Thermostat",
    "DoorLock",
    # Access
    "AccessRelay",
    # Factory
    "DeviceFactory",
    "create_device",
]
