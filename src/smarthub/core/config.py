"""Pydantic configuration models for the smart-device hub.

This module defines the configuration schema used to set up a hub from a
file. Configuration can be loaded from YAML or JSON files.

The configuration hierarchy:
- HubConfig (top-level)
  - DeviceConfig[]
  - CommandConfig[]
  - ScheduleConfig[]
  - TriggerConfig[]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field


class DeviceConfig(BaseModel):
    """Device configuration.

    Extra fields (e.g. ``temperature`` for a thermostat) are passed to the
    device constructor.
    """

    model_config = ConfigDict(extra="allow")

    kind: str = Field(description="Device kind tag from registry")
    id: int | str = Field(description="Device identifier")


class CommandConfig(BaseModel):
    """A command replayed against the hub after devices are added."""

    model_config = ConfigDict(frozen=True)

    action: Literal["turn_on", "turn_off", "lock", "unlock"]
    device_id: int | str


class ScheduleConfig(BaseModel):
    """A deferred command to record with the scheduler.

    Time and command are free-form and stored verbatim.
    """

    model_config = ConfigDict(frozen=True)

    device_id: int | str
    time: str = Field(description="Time token, e.g. 06:00")
    command: str


class TriggerConfig(BaseModel):
    """Automation rule configuration."""

    model_config = ConfigDict(frozen=True)

    condition: str = Field(description="Condition, e.g. 'temperature > 75'")
    action: str


class HubConfig(BaseModel):
    """Top-level hub configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="Smart Home")
    max_history: Annotated[int, Field(gt=0)] = 1000

    devices: list[DeviceConfig] = Field(default_factory=list)
    commands: list[CommandConfig] = Field(default_factory=list)
    schedules: list[ScheduleConfig] = Field(default_factory=list)
    triggers: list[TriggerConfig] = Field(default_factory=list)


def load_config(path: str | Path) -> HubConfig:
    """Load hub configuration from YAML or JSON file.

    Args:
        path: Path to configuration file.

    Returns:
        Validated HubConfig object.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValueError: If configuration is invalid.
    """
    path = Path(path)

    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open() as f:
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    return HubConfig.model_validate(data)


def save_config(config: HubConfig, path: str | Path) -> None:
    """Save hub configuration to YAML or JSON file.

    Args:
        config: Configuration to save.
        path: Output file path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="json", exclude_none=True)

    with path.open("w") as f:
        if path.suffix in (".yaml", ".yml"):
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, f, indent=2)


def validate_config(data: dict[str, Any]) -> HubConfig:
    """Validate configuration data without loading from file.

    Args:
        data: Configuration dictionary.

    Returns:
        Validated HubConfig object.

    Raises:
        ValueError: If configuration is invalid.
    """
    return HubConfig.model_validate(data)
