"""Shared pytest fixtures for smarthub tests."""

from __future__ import annotations

import pytest

from smarthub.core.events import Event, Listener
from smarthub.hub import Hub

# =============================================================================
# Listener fixtures
# =============================================================================


class RecordingListener(Listener):
    """Listener that keeps every notification it receives."""

    def __init__(self, name: str = "recorder", log: list[str] | None = None) -> None:
        self.name = name
        self.events: list[Event] = []
        self._log = log

    def update(self, event: Event) -> None:
        self.events.append(event)
        if self._log is not None:
            self._log.append(self.name)


class FailingListener(Listener):
    """Listener whose update always raises."""

    def update(self, event: Event) -> None:
        msg = f"cannot handle {event.action}"
        raise RuntimeError(msg)


@pytest.fixture
def recorder() -> RecordingListener:
    """A fresh recording listener."""
    return RecordingListener()


@pytest.fixture
def make_recorder() -> type[RecordingListener]:
    """Recording listener class, for tests that need several."""
    return RecordingListener


@pytest.fixture
def failing_listener() -> FailingListener:
    """A listener that raises on every notification."""
    return FailingListener()


# =============================================================================
# Hub fixtures
# =============================================================================


@pytest.fixture
def hub() -> Hub:
    """An empty hub."""
    return Hub("Test Home")


@pytest.fixture
def demo_hub() -> Hub:
    """Hub with a light (1), thermostat (2) and door lock (3)."""
    hub = Hub("Demo Home")
    hub.add_device("light", 1)
    hub.add_device("thermostat", 2)
    hub.add_device("door", 3)
    return hub
