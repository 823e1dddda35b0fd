"""Core module for the smart-device hub.

This module provides the foundational pieces of the hub:
- Device base class and kind enum
- Notification channel (subject/observer)
- Device kind registry
- Configuration loading and validation
"""

from smarthub.core.base import Device, DeviceKind
from smarthub.core.events import (
    Event,
    EventType,
    Listener,
    NotificationChannel,
    UnimplementedCapabilityError,
)
from smarthub.core.registry import (
    UnknownDeviceKindError,
    get_registry,
    register_device,
)

__all__ = [
    # Devices
    "Device",
    "DeviceKind",
    # Notifications
    "Event",
    "EventType",
    "Listener",
    "NotificationChannel",
    "UnimplementedCapabilityError",
    # Registry
    "UnknownDeviceKindError",
    "get_registry",
    "register_device",
]
