"""Tests for configuration models."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from smarthub.core.config import (
    CommandConfig,
    DeviceConfig,
    HubConfig,
    ScheduleConfig,
    TriggerConfig,
    load_config,
    save_config,
    validate_config,
)


class TestDeviceConfig:
    """Tests for DeviceConfig."""

    def test_basic_creation(self) -> None:
        """Create basic device config."""
        config = DeviceConfig(kind="light", id=1)
        assert config.kind == "light"
        assert config.id == 1

    def test_string_id(self) -> None:
        """Identifiers may be strings."""
        config = DeviceConfig(kind="door", id="front")
        assert config.id == "front"

    def test_extra_fields_allowed(self) -> None:
        """Extra fields are kept for the device constructor."""
        config = DeviceConfig(kind="thermostat", id=2, temperature=80)
        assert config.model_extra == {"temperature": 80}

    def test_kind_required(self) -> None:
        """Error when kind is missing."""
        with pytest.raises(ValidationError):
            DeviceConfig.model_validate({"id": 1})


class TestCommandConfig:
    """Tests for CommandConfig."""

    def test_valid_actions(self) -> None:
        """All supported actions validate."""
        for action in ("turn_on", "turn_off", "lock", "unlock"):
            assert CommandConfig(action=action, device_id=1).action == action

    def test_invalid_action(self) -> None:
        """Error on unsupported action."""
        with pytest.raises(ValidationError):
            CommandConfig.model_validate({"action": "explode", "device_id": 1})


class TestScheduleConfig:
    """Tests for ScheduleConfig."""

    def test_time_stored_verbatim(self) -> None:
        """Time is not validated."""
        config = ScheduleConfig(device_id=2, time="sunrise", command="Turn On")
        assert config.time == "sunrise"


class TestHubConfig:
    """Tests for HubConfig."""

    def test_defaults(self) -> None:
        """Empty config uses defaults."""
        config = HubConfig()
        assert config.name == "Smart Home"
        assert config.max_history == 1000
        assert config.devices == []
        assert config.commands == []
        assert config.schedules == []
        assert config.triggers == []

    def test_duplicate_ids_allowed(self) -> None:
        """Device ids are not deduplicated."""
        config = HubConfig(
            devices=[DeviceConfig(kind="light", id=1), DeviceConfig(kind="door", id=1)]
        )
        assert len(config.devices) == 2

    def test_unknown_top_level_field(self) -> None:
        """Extra top-level fields are rejected."""
        with pytest.raises(ValidationError):
            HubConfig.model_validate({"name": "x", "rooms": []})

    def test_invalid_max_history(self) -> None:
        """max_history must be positive."""
        with pytest.raises(ValidationError):
            HubConfig(max_history=0)

    def test_validate_config(self) -> None:
        """validate_config builds a HubConfig from a dict."""
        config = validate_config(
            {
                "name": "Dict Home",
                "devices": [{"kind": "light", "id": 1}],
                "triggers": [{"condition": "temperature > 75", "action": "fan"}],
            }
        )
        assert config.name == "Dict Home"
        assert config.triggers == [
            TriggerConfig(condition="temperature > 75", action="fan")
        ]


class TestLoadSave:
    """Tests for loading and saving configuration files."""

    def test_load_yaml(self, tmp_path: Path) -> None:
        """Load configuration from YAML."""
        path = tmp_path / "home.yaml"
        path.write_text("""
name: "YAML Home"
devices:
  - kind: light
    id: 1
  - kind: thermostat
    id: 2
    temperature: 72
commands:
  - action: turn_on
    device_id: 1
schedules:
  - device_id: 2
    time: "06:00"
    command: "Turn On"
""")

        config = load_config(path)

        assert config.name == "YAML Home"
        assert len(config.devices) == 2
        assert config.devices[1].model_extra == {"temperature": 72}
        assert config.commands[0].action == "turn_on"
        assert config.schedules[0].time == "06:00"

    def test_load_json(self, tmp_path: Path) -> None:
        """Load configuration from JSON."""
        path = tmp_path / "home.json"
        path.write_text(
            json.dumps({"name": "JSON Home", "devices": [{"kind": "door", "id": 3}]})
        )

        config = load_config(path)

        assert config.name == "JSON Home"
        assert config.devices[0].kind == "door"

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """Error when file does not exist."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_load_invalid(self, tmp_path: Path) -> None:
        """Invalid content raises a ValueError."""
        path = tmp_path / "bad.yaml"
        path.write_text("devices:\n  - id: 1\n")

        with pytest.raises(ValueError):
            load_config(path)

    @pytest.mark.parametrize("suffix", [".yaml", ".json"])
    def test_save_and_reload(self, tmp_path: Path, suffix: str) -> None:
        """Saved configuration loads back unchanged."""
        config = HubConfig(
            name="Saved Home",
            devices=[
                DeviceConfig(kind="light", id=1),
                DeviceConfig(kind="thermostat", id=2, temperature=78),
            ],
            commands=[CommandConfig(action="turn_on", device_id=1)],
            schedules=[ScheduleConfig(device_id=2, time="06:00", command="Turn On")],
            triggers=[TriggerConfig(condition="temperature > 75", action="turnOff(1)")],
        )
        path = tmp_path / "nested" / f"home{suffix}"

        save_config(config, path)
        loaded = load_config(path)

        assert loaded.name == "Saved Home"
        assert loaded.devices[1].model_extra == {"temperature": 78}
        assert loaded.commands == config.commands
        assert loaded.schedules == config.schedules
        assert loaded.triggers == config.triggers
