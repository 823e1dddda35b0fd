"""Central hub coordinating devices, notifications, schedules and rules.

The hub is itself a notification channel. Every device it creates is
appended to its registry and registered as one of its listeners, so the
listener list always mirrors the device list:

1. add_device: factory creates the device, hub registers it twice over
2. turn_on / turn_off: mutate the device, then notify every listener
3. set_schedule: record a deferred command with the scheduler
4. add_trigger / check_triggers: store and evaluate automation rules

Lookups by identifier scan the registry in order and use the first
match. Unknown identifiers are a silent no-op; the operations report
that through their return value instead of raising.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from smarthub.control.automation import AutomationEngine, AutomationRule
from smarthub.control.scheduler import ScheduledTask, Scheduler
from smarthub.core.base import Device, DeviceId, DeviceKind
from smarthub.core.events import EventType, Listener, NotificationChannel
from smarthub.devices.factory import DeviceFactory
from smarthub.devices.relay import AccessRelay

if TYPE_CHECKING:
    from smarthub.devices.door import DoorLock
    from smarthub.devices.thermostat import Thermostat

logger = logging.getLogger(__name__)


class Hub(NotificationChannel):
    """Single-household smart-device hub.

    Thread-safety: This implementation is NOT thread-safe. All operations
    run to completion on the calling thread.
    """

    def __init__(
        self,
        name: str = "Smart Home",
        *,
        max_history: int = 1000,
        factory: DeviceFactory | None = None,
    ) -> None:
        """Initialize hub.

        Args:
            name: Hub name, used as the source of its notifications.
            max_history: Maximum number of notifications to keep in history.
            factory: Device factory. Defaults to one over the global registry.
        """
        super().__init__(max_history=max_history)
        self._name = name
        self._factory = factory or DeviceFactory()
        self._devices: list[Device] = []
        self._scheduler = Scheduler()
        self._automation = AutomationEngine()

    @property
    def name(self) -> str:
        """Hub name."""
        return self._name

    @property
    def devices(self) -> tuple[Device, ...]:
        """Registered devices in registration order."""
        return tuple(self._devices)

    @property
    def scheduler(self) -> Scheduler:
        """Scheduler holding deferred commands."""
        return self._scheduler

    @property
    def automation(self) -> AutomationEngine:
        """Automation engine holding rules."""
        return self._automation

    # =========================================================================
    # Registry
    # =========================================================================

    def add_device(
        self,
        kind: DeviceKind | str,
        device_id: DeviceId,
        **options: Any,
    ) -> Device:
        """Create a device and register it with the hub.

        Identifiers are not checked for uniqueness.

        Args:
            kind: Kind tag ("light", "thermostat", "door").
            device_id: Identifier for the new device.
            **options: Variant-specific constructor arguments.

        Returns:
            The new device.

        Raises:
            UnknownDeviceKindError: If the kind is not registered.
        """
        device = self._factory.create(kind, device_id, **options)
        self._devices.append(device)
        self.add_listener(device)
        logger.debug("Added %s %s to %s", device.label, device_id, self._name)
        return device

    def remove_listener(self, listener: Listener) -> int:
        """Remove an extra listener.

        Registered devices always stay listeners.

        Args:
            listener: The listener to remove (matched by identity).

        Returns:
            Number of registrations removed.

        Raises:
            ValueError: If the listener is a registered device.
        """
        if any(device is listener for device in self._devices):
            msg = f"Cannot remove registered device {listener!r} as a listener"
            raise ValueError(msg)
        return super().remove_listener(listener)

    def get_device(self, device_id: DeviceId) -> Device | None:
        """First registered device with the given identifier, or None."""
        for device in self._devices:
            if device.id == device_id:
                return device
        return None

    def find_first(self, kind: DeviceKind | str) -> Device | None:
        """First registered device of the given kind, or None."""
        key = getattr(kind, "value", kind)
        for device in self._devices:
            if device.kind.value == key:
                return device
        return None

    def relay(self, device_id: DeviceId) -> AccessRelay | None:
        """Access relay around the first device with the given identifier."""
        device = self.get_device(device_id)
        if device is None:
            return None
        return AccessRelay(device)

    # =========================================================================
    # Device control
    # =========================================================================

    def _notify_change(self, event_type: EventType, device: Device) -> None:
        self.notify_simple(
            event_type,
            source=self._name,
            message=f"{device.label} {device.id}: {event_type.action}",
            action=event_type.action,
            device_id=device.id,
        )

    def turn_on(self, device_id: DeviceId) -> bool:
        """Switch a device on and notify all listeners.

        Args:
            device_id: Target device identifier.

        Returns:
            True if a device was found and switched, False otherwise.
        """
        device = self.get_device(device_id)
        if device is None:
            return False
        device.turn_on()
        self._notify_change(EventType.TURN_ON, device)
        return True

    def turn_off(self, device_id: DeviceId) -> bool:
        """Switch a device off and notify all listeners.

        Args:
            device_id: Target device identifier.

        Returns:
            True if a device was found and switched, False otherwise.
        """
        device = self.get_device(device_id)
        if device is None:
            return False
        device.turn_off()
        self._notify_change(EventType.TURN_OFF, device)
        return True

    def _get_door(self, device_id: DeviceId) -> DoorLock | None:
        device = self.get_device(device_id)
        if device is None or device.kind is not DeviceKind.DOOR:
            return None
        return device  # type: ignore[return-value]

    def lock(self, device_id: DeviceId) -> bool:
        """Lock a door and notify all listeners.

        Returns:
            False if no device matches or it is not a door lock.
        """
        door = self._get_door(device_id)
        if door is None:
            return False
        door.lock()
        self._notify_change(EventType.LOCK, door)
        return True

    def unlock(self, device_id: DeviceId) -> bool:
        """Unlock a door and notify all listeners.

        Returns:
            False if no device matches or it is not a door lock.
        """
        door = self._get_door(device_id)
        if door is None:
            return False
        door.unlock()
        self._notify_change(EventType.UNLOCK, door)
        return True

    def set_temperature(self, device_id: DeviceId, temperature: int) -> bool:
        """Change a thermostat setting and notify all listeners.

        Returns:
            False if no device matches or it is not a thermostat.
        """
        device = self.get_device(device_id)
        if device is None or device.kind is not DeviceKind.THERMOSTAT:
            return False
        thermostat: Thermostat = device  # type: ignore[assignment]
        thermostat.set_temperature(temperature)
        self._notify_change(EventType.SET_TEMPERATURE, thermostat)
        return True

    # =========================================================================
    # Scheduling and automation
    # =========================================================================

    def set_schedule(
        self,
        device_id: DeviceId,
        time: str,
        command: str,
    ) -> ScheduledTask | None:
        """Record a deferred command for a device.

        Args:
            device_id: Target device identifier.
            time: Time token, stored verbatim.
            command: Command token, stored verbatim.

        Returns:
            The recorded task, or None if no device matches.
        """
        device = self.get_device(device_id)
        if device is None:
            return None
        return self._scheduler.schedule(device, time, command)

    def add_trigger(self, condition: str, action: str) -> AutomationRule:
        """Add an automation rule."""
        return self._automation.add_rule(condition, action)

    def check_triggers(self) -> list[str]:
        """Evaluate automation rules against the first thermostat.

        Only the first thermostat in registration order is evaluated.

        Returns:
            Actions of the rules that fired; empty if there is no thermostat.
        """
        thermostat = self.find_first(DeviceKind.THERMOSTAT)
        if thermostat is None:
            return []
        return self._automation.evaluate(thermostat)  # type: ignore[arg-type]

    def status_report(self) -> str:
        """Status line of every device in registration order, one per line."""
        return "\n".join(device.get_status() for device in self._devices)
