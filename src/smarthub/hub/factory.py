"""Factory functions for creating a hub from configuration.

This module is the bridge between YAML/JSON configuration files and a
populated Hub. The main entry point is `create_hub_from_config()`.
"""

from __future__ import annotations

import logging

from smarthub.core.config import CommandConfig, HubConfig
from smarthub.hub.hub import Hub

logger = logging.getLogger(__name__)


def create_hub_from_config(config: HubConfig) -> Hub:
    """Create a populated Hub from a HubConfig.

    This:
    1. Adds every configured device in order
    2. Replays configured commands
    3. Records configured schedules
    4. Adds configured triggers

    Args:
        config: Validated HubConfig (from load_config or direct).

    Returns:
        Hub ready for inspection and trigger checks.

    Raises:
        UnknownDeviceKindError: If a device kind is not registered.
    """
    hub = Hub(config.name, max_history=config.max_history)

    for device_cfg in config.devices:
        # Type-specific options (e.g. temperature) come from extra fields
        options = dict(device_cfg.model_extra or {})
        hub.add_device(device_cfg.kind, device_cfg.id, **options)

    for command_cfg in config.commands:
        if not _apply_command(hub, command_cfg):
            logger.warning(
                "Command %s skipped: no matching device %r",
                command_cfg.action,
                command_cfg.device_id,
            )

    for schedule_cfg in config.schedules:
        task = hub.set_schedule(
            schedule_cfg.device_id, schedule_cfg.time, schedule_cfg.command
        )
        if task is None:
            logger.warning(
                "Schedule skipped: no device %r", schedule_cfg.device_id
            )

    for trigger_cfg in config.triggers:
        hub.add_trigger(trigger_cfg.condition, trigger_cfg.action)

    return hub


def _apply_command(hub: Hub, command: CommandConfig) -> bool:
    """Replay one configured command against the hub.

    Returns:
        Whether the hub found a matching device.
    """
    handlers = {
        "turn_on": hub.turn_on,
        "turn_off": hub.turn_off,
        "lock": hub.lock,
        "unlock": hub.unlock,
    }
    return handlers[command.action](command.device_id)
