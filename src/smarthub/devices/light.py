"""Light device implementation."""

from __future__ import annotations

from smarthub.core.base import Device, DeviceKind
from smarthub.core.registry import register_device


@register_device(DeviceKind.LIGHT)
class Light(Device):
    """Switchable light.

    Status is ``on`` or ``off``; a new light starts ``off``.
    """

    kind = DeviceKind.LIGHT
    label = "Light"
