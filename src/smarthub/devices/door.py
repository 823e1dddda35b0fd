"""Door lock device implementation."""

from __future__ import annotations

import logging

from smarthub.core.base import Device, DeviceKind
from smarthub.core.registry import register_device

logger = logging.getLogger(__name__)


@register_device(DeviceKind.DOOR)
class DoorLock(Device):
    """Door lock.

    A new lock starts ``locked``. Locking and unlocking go through
    :meth:`lock` and :meth:`unlock`; the generic turn_on/turn_off switch
    is inherited unchanged and sets ``on``/``off``.
    """

    kind = DeviceKind.DOOR
    label = "Door"
    initial_status = "locked"

    @property
    def locked(self) -> bool:
        """Whether the door is currently locked."""
        return self._status == "locked"

    def lock(self) -> None:
        """Lock the door."""
        self._status = "locked"
        logger.debug("Door %s locked", self._id)

    def unlock(self) -> None:
        """Unlock the door."""
        self._status = "unlocked"
        logger.debug("Door %s unlocked", self._id)
