"""Tests for building a hub from configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from smarthub.core.config import (
    CommandConfig,
    DeviceConfig,
    HubConfig,
    ScheduleConfig,
    TriggerConfig,
    load_config,
    validate_config,
)
from smarthub.core.registry import UnknownDeviceKindError
from smarthub.hub import create_hub_from_config


def get_scenarios_dir() -> Path:
    """Get the examples/scenarios directory."""
    # Find the project root by looking for pyproject.toml
    current = Path(__file__).parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current / "examples" / "scenarios"
        current = current.parent

    return Path("examples/scenarios")


SCENARIOS_DIR = get_scenarios_dir()


class TestCreateHubFromConfig:
    """Tests for create_hub_from_config."""

    def test_empty_config(self) -> None:
        """Empty config builds an empty hub."""
        hub = create_hub_from_config(HubConfig(name="Empty"))

        assert hub.name == "Empty"
        assert hub.devices == ()

    def test_full_config(self) -> None:
        """Devices, commands, schedules and triggers are applied in order."""
        config = HubConfig(
            name="Config Home",
            devices=[
                DeviceConfig(kind="light", id=1),
                DeviceConfig(kind="thermostat", id=2, temperature=80),
                DeviceConfig(kind="door", id=3),
            ],
            commands=[
                CommandConfig(action="turn_on", device_id=1),
                CommandConfig(action="unlock", device_id=3),
            ],
            schedules=[ScheduleConfig(device_id=2, time="06:00", command="Turn On")],
            triggers=[TriggerConfig(condition="temperature > 75", action="turnOff(1)")],
        )

        hub = create_hub_from_config(config)

        assert hub.status_report().splitlines() == [
            "Light 1 is on",
            "Thermostat 2 is set to 80 degrees.",
            "Door 3 is unlocked",
        ]
        assert len(hub.scheduler.list_tasks()) == 1
        assert hub.check_triggers() == ["turnOff(1)"]
        assert len(hub.listeners) == 3

    def test_max_history_applied(self) -> None:
        """History bound comes from config."""
        config = HubConfig(
            max_history=2,
            devices=[DeviceConfig(kind="light", id=1)],
            commands=[CommandConfig(action="turn_on", device_id=1)] * 5,
        )

        hub = create_hub_from_config(config)

        assert len(hub.get_history()) == 2

    def test_unknown_kind_raises(self) -> None:
        """Unknown device kinds propagate."""
        config = HubConfig(devices=[DeviceConfig(kind="toaster", id=1)])

        with pytest.raises(UnknownDeviceKindError):
            create_hub_from_config(config)

    def test_non_integer_temperature_fails_at_load(self) -> None:
        """A thermostat configured with a non-integer setting is rejected."""
        config = validate_config(
            {
                "devices": [{"kind": "thermostat", "id": 2, "temperature": "hot"}],
                "triggers": [{"condition": "temperature > 75", "action": "x"}],
            }
        )

        with pytest.raises(TypeError, match="must be an integer"):
            create_hub_from_config(config)

    def test_unknown_ids_are_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        """Commands and schedules for unknown ids are skipped with a warning."""
        config = HubConfig(
            devices=[DeviceConfig(kind="light", id=1)],
            commands=[CommandConfig(action="turn_on", device_id=9)],
            schedules=[ScheduleConfig(device_id=9, time="06:00", command="Turn On")],
        )

        with caplog.at_level(logging.WARNING, logger="smarthub.hub.factory"):
            hub = create_hub_from_config(config)

        assert hub.status_report() == "Light 1 is off"
        assert hub.scheduler.list_tasks() == []
        assert "Command turn_on skipped" in caplog.text
        assert "Schedule skipped" in caplog.text


class TestBuiltinScenarios:
    """Tests for built-in YAML scenario files."""

    @pytest.mark.skipif(
        not (SCENARIOS_DIR / "demo.yaml").exists(),
        reason="Scenario file not found",
    )
    def test_demo_scenario(self) -> None:
        """demo.yaml reproduces the reference walkthrough."""
        hub = create_hub_from_config(load_config(SCENARIOS_DIR / "demo.yaml"))

        assert hub.status_report().splitlines() == [
            "Light 1 is on",
            "Thermostat 2 is set to 70 degrees.",
            "Door 3 is locked",
        ]
        assert [t.device_id for t in hub.scheduler.list_tasks()] == [2]
        assert hub.check_triggers() == []

    @pytest.mark.skipif(
        not (SCENARIOS_DIR / "hot-afternoon.yaml").exists(),
        reason="Scenario file not found",
    )
    def test_hot_afternoon_scenario(self) -> None:
        """hot-afternoon.yaml fires two of its three triggers."""
        hub = create_hub_from_config(load_config(SCENARIOS_DIR / "hot-afternoon.yaml"))

        assert hub.check_triggers() == ["turnOff(1)", "turnOff(4)"]
        assert "Door 3 is unlocked" in hub.status_report()
