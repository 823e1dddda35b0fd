"""Thermostat device implementation."""

from __future__ import annotations

import logging

from smarthub.core.base import Device, DeviceId, DeviceKind
from smarthub.core.registry import register_device

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 70


def _check_temperature(temperature: object) -> int:
    # bool is an int subclass but never a valid setting
    if not isinstance(temperature, int) or isinstance(temperature, bool):
        msg = f"Temperature must be an integer, got {temperature!r}"
        raise TypeError(msg)
    return temperature


@register_device(DeviceKind.THERMOSTAT)
class Thermostat(Device):
    """Thermostat with a temperature setting.

    Power status is inherited from the base device, but the status line
    reports the temperature setting instead of on/off.

    Attributes:
        temperature: Current temperature setting in degrees.
    """

    kind = DeviceKind.THERMOSTAT
    label = "Thermostat"

    def __init__(
        self,
        device_id: DeviceId,
        temperature: int = DEFAULT_TEMPERATURE,
    ) -> None:
        """Initialize thermostat.

        Args:
            device_id: Device identifier.
            temperature: Initial temperature setting in degrees.

        Raises:
            TypeError: If the temperature is not an integer.
        """
        super().__init__(device_id)
        self._temperature = _check_temperature(temperature)

    @property
    def temperature(self) -> int:
        """Current temperature setting in degrees."""
        return self._temperature

    def set_temperature(self, temperature: int) -> None:
        """Change the temperature setting.

        Args:
            temperature: New setting in degrees.

        Raises:
            TypeError: If the temperature is not an integer.
        """
        self._temperature = _check_temperature(temperature)
        logger.info("Thermostat %s set to %s degrees.", self._id, temperature)

    def get_status(self) -> str:
        """Status line reporting the temperature setting."""
        return f"Thermostat {self._id} is set to {self._temperature} degrees."
