"""Access relay wrapping a single device.

The relay is an interception point in front of a device's mutating
operations. It logs and records every mediated access and always lets
the call through; an authorization check belongs in :meth:`_mediate`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smarthub.core.base import Device, DeviceId

logger = logging.getLogger(__name__)


class AccessRelay:
    """Thin proxy around a device.

    Attributes:
        device: The wrapped device.
        access_log: Names of mediated operations, oldest first.
    """

    def __init__(self, device: Device) -> None:
        """Initialize relay.

        Args:
            device: Device to wrap.
        """
        self._device = device
        self._access_log: list[str] = []

    @property
    def device(self) -> Device:
        """The wrapped device."""
        return self._device

    @property
    def id(self) -> DeviceId:
        """Identifier of the wrapped device."""
        return self._device.id

    @property
    def access_log(self) -> list[str]:
        """Mediated operations so far."""
        return self._access_log.copy()

    def _mediate(self, operation: str) -> None:
        logger.info("Accessing device %s via relay (%s)", self._device.id, operation)
        self._access_log.append(operation)

    def turn_on(self) -> None:
        """Mediated turn_on."""
        self._mediate("turn_on")
        self._device.turn_on()

    def turn_off(self) -> None:
        """Mediated turn_off."""
        self._mediate("turn_off")
        self._device.turn_off()

    def get_status(self) -> str:
        """Status of the wrapped device; not mediated."""
        return self._device.get_status()
