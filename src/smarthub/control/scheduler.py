"""Recorder for deferred device commands.

The scheduler only stores requests. Nothing here runs on a timer; an
external service is expected to read the task list and carry tasks out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from smarthub.core.base import Device, DeviceId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduledTask:
    """A recorded deferred command.

    Attributes:
        device: Device the command is for.
        time: Time token, stored verbatim.
        command: Command token, stored verbatim.
    """

    device: Device
    time: str
    command: str

    @property
    def device_id(self) -> DeviceId:
        """Identifier of the target device."""
        return self.device.id

    def to_dict(self) -> dict[str, Any]:
        """Convert task to dictionary for serialization."""
        return {
            "device_id": self.device.id,
            "device": self.device.label,
            "time": self.time,
            "command": self.command,
        }


class Scheduler:
    """Ordered list of scheduled tasks.

    Tasks are kept in the order they were scheduled. No validation or
    conflict detection is done: two tasks for the same device and time
    are both kept.
    """

    def __init__(self) -> None:
        self._tasks: list[ScheduledTask] = []

    def schedule(self, device: Device, time: str, command: str) -> ScheduledTask:
        """Record a deferred command.

        Args:
            device: Target device.
            time: When the command should run.
            command: What should be done.

        Returns:
            The recorded task.
        """
        task = ScheduledTask(device=device, time=time, command=command)
        self._tasks.append(task)
        logger.info("Scheduled %s for device %s at %s", command, device.id, time)
        return task

    def list_tasks(self) -> list[ScheduledTask]:
        """All recorded tasks in scheduling order."""
        return list(self._tasks)

    def tasks_for(self, device_id: DeviceId) -> list[ScheduledTask]:
        """Recorded tasks for one device, in scheduling order."""
        return [task for task in self._tasks if task.device.id == device_id]

    def clear(self) -> None:
        """Drop all recorded tasks."""
        self._tasks.clear()

    def __len__(self) -> int:
        return len(self._tasks)
