"""Notification channel for the smart-device hub.

This module provides the subject/observer relationship between a hub and
the devices registered with it. Listeners are notified synchronously, in
registration order, whenever a device changes state.

Notifications can be used for:
- Letting devices observe changes made to other devices
- Logging state changes
- Inspecting recent activity through the notification history
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class UnimplementedCapabilityError(NotImplementedError):
    """Raised when a listener receives a notification it does not handle."""


class EventType(str, Enum):
    """Standard notification types emitted by the hub."""

    TURN_ON = "device.turn_on"
    TURN_OFF = "device.turn_off"
    LOCK = "device.lock"
    UNLOCK = "device.unlock"
    SET_TEMPERATURE = "device.set_temperature"

    CUSTOM = "custom"

    @property
    def action(self) -> str:
        """Short action name (e.g. ``turn_on``)."""
        return self.value.rsplit(".", 1)[-1]


def _type_key(event_type: EventType | str) -> str:
    return event_type.value if isinstance(event_type, EventType) else event_type


@dataclass
class Event:
    """A state-change notification.

    Attributes:
        event_type: Type of notification.
        timestamp: When the notification was created.
        source: Name of the hub or component that sent it.
        data: Payload; hub notifications carry ``action`` and ``device_id``.
        message: Human-readable description.
    """

    event_type: EventType | str
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    source: str = "hub"
    data: dict[str, Any] = field(default_factory=dict)
    message: str = ""

    @property
    def action(self) -> str | None:
        """Action carried by this notification, if any."""
        return self.data.get("action")

    @property
    def device_id(self) -> Hashable | None:
        """Identifier of the device the notification is about, if any."""
        return self.data.get("device_id")

    def __str__(self) -> str:
        """String representation of the event."""
        return (
            f"[{self.timestamp.isoformat()}] {_type_key(self.event_type)} "
            f"from {self.source}: {self.message}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert event to dictionary for serialization.

        Returns:
            Dictionary representation of the event.
        """
        return {
            "event_type": _type_key(self.event_type),
            "timestamp": self.timestamp.isoformat(),
            "source": self.source,
            "data": self.data,
            "message": self.message,
        }


class Listener:
    """Observer contract: anything registered with a channel.

    Concrete listeners must override :meth:`update`.
    """

    def update(self, event: Event) -> None:
        """Receive a notification.

        Args:
            event: The notification being delivered.

        Raises:
            UnimplementedCapabilityError: Always, unless overridden.
        """
        msg = f"{type(self).__name__} does not implement update()"
        raise UnimplementedCapabilityError(msg)


class NotificationChannel:
    """Ordered listener set with synchronous fan-out.

    Listeners are kept in registration order and duplicates are allowed.
    A listener that raises while handling a notification is logged and
    skipped so the remaining listeners still receive it. A listener that
    does not implement :meth:`Listener.update` at all is a programming
    error and the error propagates to the caller.

    Thread-safety: This implementation is NOT thread-safe.
    """

    def __init__(self, *, max_history: int = 1000) -> None:
        """Initialize channel.

        Args:
            max_history: Maximum number of notifications to keep in history.
        """
        self._listeners: list[Listener] = []
        self._history: deque[Event] = deque(maxlen=max_history)
        self._max_history = max_history

    @property
    def listeners(self) -> tuple[Listener, ...]:
        """Registered listeners in registration order."""
        return tuple(self._listeners)

    def add_listener(self, listener: Listener) -> None:
        """Register a listener.

        Args:
            listener: Listener to append. Duplicates are permitted.
        """
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> int:
        """Remove every registration of a listener.

        Args:
            listener: The listener to remove (matched by identity).

        Returns:
            Number of registrations removed.
        """
        before = len(self._listeners)
        self._listeners = [item for item in self._listeners if item is not listener]
        return before - len(self._listeners)

    def notify(self, event: Event) -> None:
        """Deliver a notification to every current listener.

        Args:
            event: The notification to deliver.

        Raises:
            UnimplementedCapabilityError: If a listener lacks ``update``.
        """
        self._history.append(event)

        # Snapshot so listeners may (un)register during fan-out
        for listener in list(self._listeners):
            try:
                listener.update(event)
            except UnimplementedCapabilityError:
                raise
            except Exception:
                logger.exception(
                    "Listener %r failed processing %s notification from %s",
                    listener,
                    _type_key(event.event_type),
                    event.source,
                )

    def notify_simple(
        self,
        event_type: EventType | str,
        source: str,
        message: str = "",
        **data: Any,
    ) -> Event:
        """Send a notification with simpler syntax.

        Args:
            event_type: Type of notification.
            source: Notification source name.
            message: Human-readable message.
            **data: Payload as keyword arguments.

        Returns:
            The delivered event.
        """
        event = Event(
            event_type=event_type,
            source=source,
            message=message,
            data=data,
        )
        self.notify(event)
        return event

    def _iter_history_filtered(
        self,
        event_type: EventType | str | None = None,
        source: str | None = None,
    ) -> Iterator[Event]:
        type_key = _type_key(event_type) if event_type is not None else None

        for event in self._history:
            if type_key is not None and _type_key(event.event_type) != type_key:
                continue
            if source is not None and event.source != source:
                continue
            yield event

    def get_history(
        self,
        event_type: EventType | str | None = None,
        source: str | None = None,
        limit: int | None = None,
    ) -> list[Event]:
        """Get notification history with optional filtering.

        Args:
            event_type: Filter by notification type.
            source: Filter by source.
            limit: Maximum number of notifications to return.

        Returns:
            Notifications matching filters (most recent last).
        """
        filtered = list(self._iter_history_filtered(event_type, source))

        if limit is not None:
            return filtered[-limit:]

        return filtered

    def clear_history(self) -> None:
        """Clear notification history."""
        self._history.clear()
