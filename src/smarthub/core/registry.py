"""Device kind registry for decorator-based registration.

Device variants register themselves with the registry at import time
using the @register_device decorator.

Usage:
    @register_device("light")
    class Light(Device):
        ...

    # Later, retrieve the device class
    registry = get_registry()
    light_class = registry.get("light")
    light = light_class(1)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from smarthub.core.base import Device, DeviceKind

T = TypeVar("T", bound="Device")

# Global registry instance
_registry: DeviceRegistry | None = None


class UnknownDeviceKindError(KeyError):
    """Raised when a device kind tag has no registered class."""

    def __init__(self, kind: str, available: list[str]) -> None:
        self.kind = kind
        self.available = available
        super().__init__(f"Unknown device kind '{kind}'. Available: {available}")

    def __str__(self) -> str:
        return str(self.args[0])


def _kind_key(kind: DeviceKind | str) -> str:
    # DeviceKind is a str enum; normalise to its tag
    return getattr(kind, "value", kind)


class DeviceRegistry:
    """Registry mapping kind tags (e.g. "light") to device classes."""

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._kinds: dict[str, type[Device]] = {}

    def register(self, kind: DeviceKind | str, device_class: type[T]) -> type[T]:
        """Register a device class.

        Args:
            kind: Kind tag the class is created for.
            device_class: The device class to register.

        Returns:
            The registered class (for use as decorator).

        Raises:
            ValueError: If a different class is already registered for the kind.
        """
        key = _kind_key(kind)
        if key in self._kinds:
            existing = self._kinds[key]
            # Reloaded modules create new class objects with the same name
            if existing.__name__ == device_class.__name__:
                self._kinds[key] = device_class
                return device_class
            msg = f"Device kind '{key}' already registered as {existing.__name__}"
            raise ValueError(msg)

        self._kinds[key] = device_class
        return device_class

    def get(self, kind: DeviceKind | str) -> type[Device]:
        """Get the device class registered for a kind.

        Args:
            kind: Kind tag.

        Returns:
            The registered device class.

        Raises:
            UnknownDeviceKindError: If the kind is not registered.
        """
        key = _kind_key(kind)
        if key not in self._kinds:
            raise UnknownDeviceKindError(str(key), self.list_kinds())
        return self._kinds[key]

    def get_or_none(self, kind: DeviceKind | str) -> type[Device] | None:
        """Get a registered device class or None if not found."""
        try:
            return self.get(kind)
        except UnknownDeviceKindError:
            return None

    def list_kinds(self) -> list[str]:
        """List registered kind tags in registration order."""
        return list(self._kinds.keys())

    def create(self, kind: DeviceKind | str, device_id: Any, **options: Any) -> Device:
        """Create a device instance.

        Args:
            kind: Kind tag.
            device_id: Identifier for the new device.
            **options: Additional arguments passed to the device constructor.

        Returns:
            New device instance.
        """
        device_class = self.get(kind)
        return device_class(device_id, **options)

    def clear(self) -> None:
        """Clear all registrations."""
        self._kinds.clear()


def get_registry() -> DeviceRegistry:
    """Get the global device registry.

    Creates the registry on first call.

    Returns:
        The global DeviceRegistry instance.
    """
    global _registry
    if _registry is None:
        _registry = DeviceRegistry()
    return _registry


def reset_registry() -> None:
    """Reset the global registry.

    Primarily useful for testing.
    """
    global _registry
    if _registry is not None:
        _registry.clear()
    _registry = None


def register_device(kind: DeviceKind | str) -> Any:
    """Decorator to register a device class for a kind tag.

    Args:
        kind: Kind tag (e.g. "light").

    Returns:
        Decorator function that registers the class.
    """

    def decorator(cls: type[T]) -> type[T]:
        return get_registry().register(kind, cls)

    return decorator


def list_kinds() -> list[str]:
    """List all registered kind tags."""
    return get_registry().list_kinds()
