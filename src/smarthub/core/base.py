"""Base class for controllable devices.

Every device variant shares the same capability set:
- turn_on / turn_off: generic power switching
- get_status: human-readable status line
- update: listener hook invoked when the hub sends a notification

Variants override only what differs from the base behaviour and keep
each override self-contained.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from enum import Enum
from typing import ClassVar

from smarthub.core.events import Event, Listener

logger = logging.getLogger(__name__)

DeviceId = Hashable


class DeviceKind(str, Enum):
    """Closed set of supported device kinds (values are factory tags)."""

    LIGHT = "light"
    THERMOSTAT = "thermostat"
    DOOR = "door"


class Device(Listener):
    """Base class for all hub devices.

    Devices are created by the factory, registered with a hub, and never
    removed. Their identifier is opaque and uniqueness is left to the
    caller.

    Attributes:
        kind: Variant tag, set by each subclass.
        label: Name used in status lines, set by each subclass.
        initial_status: Status token a freshly created device reports.
    """

    kind: ClassVar[DeviceKind]
    label: ClassVar[str]
    initial_status: ClassVar[str] = "off"

    def __init__(self, device_id: DeviceId) -> None:
        """Initialize device.

        Args:
            device_id: Opaque identifier, unique within a hub by convention.
        """
        self._id = device_id
        self._status = self.initial_status

    @property
    def id(self) -> DeviceId:
        """Device identifier."""
        return self._id

    @property
    def status(self) -> str:
        """Current status token."""
        return self._status

    def turn_on(self) -> None:
        """Switch the device on."""
        self._status = "on"

    def turn_off(self) -> None:
        """Switch the device off."""
        self._status = "off"

    def get_status(self) -> str:
        """Human-readable status line."""
        return f"{self.label} {self._id} is {self._status}"

    def update(self, event: Event) -> None:
        """Observe a hub notification.

        Devices do not react to each other's changes; the notification is
        only acknowledged.
        """
        logger.debug("%s %s observed %s", self.label, self._id, event.action)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, status={self._status!r})"
