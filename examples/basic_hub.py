#!/usr/bin/env python3
"""Basic smart-home hub example.

This script drives the hub through its public API only: it registers a
few devices, switches one on, records a schedule, adds an automation
rule and prints the resulting state.

Run with: uv run python examples/basic_hub.py
"""

from smarthub.hub import Hub


def run_demo() -> None:
    """Register devices, schedule a command and evaluate a trigger."""
    print("=" * 60)
    print("DEMO: Light, thermostat and door lock")
    print("=" * 60)

    hub = Hub("Demo Home")
    hub.add_device("light", 1)
    hub.add_device("thermostat", 2)
    hub.add_device("door", 3)

    hub.turn_on(1)
    hub.set_schedule(2, "06:00", "Turn On")
    hub.add_trigger("temperature > 75", "turnOff(1)")

    print(hub.status_report())
    print()

    print("Scheduled tasks:")
    for task in hub.scheduler.list_tasks():
        print(f"  {task.device.label} {task.device_id} at {task.time}: {task.command}")
    print()

    fired = hub.check_triggers()
    print(f"Triggers fired at 70 degrees: {fired or 'none'}")

    hub.set_temperature(2, 80)
    fired = hub.check_triggers()
    print(f"Triggers fired at 80 degrees: {fired or 'none'}")
    print()

    print("Notification history:")
    for event in hub.get_history():
        print(f"  {event}")


if __name__ == "__main__":
    run_demo()
