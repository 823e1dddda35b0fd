"""CLI interface for smarthub.

This module provides a command-line interface for building a hub from a
YAML configuration file and reporting on it without writing code.

Usage:
    smarthub run my-home.yaml
    smarthub run --scenario demo
    smarthub list
    smarthub init "My Home" -o my-home.yaml
    smarthub validate my-home.yaml
    smarthub kinds
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from smarthub.core.config import (
    CommandConfig,
    DeviceConfig,
    HubConfig,
    ScheduleConfig,
    TriggerConfig,
    load_config,
    save_config,
)
from smarthub.core.registry import UnknownDeviceKindError, list_kinds
from smarthub.hub import Hub, create_hub_from_config

app = typer.Typer(
    name="smarthub",
    help="In-memory smart-device hub: devices, schedules and automation rules.",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()

# Built-in scenario names
BUILTIN_SCENARIOS = ["demo", "hot-afternoon"]


def get_scenarios_dir() -> Path:
    """Get the examples/scenarios directory.

    Looks for scenarios in:
    1. Relative to package root (development)
    2. Relative to current working directory
    """
    pkg_dir = Path(__file__).parent.parent.parent / "examples" / "scenarios"
    if pkg_dir.exists():
        return pkg_dir

    cwd_dir = Path.cwd() / "examples" / "scenarios"
    if cwd_dir.exists():
        return cwd_dir

    return Path("examples/scenarios")


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@app.command()
def run(
    config_path: Annotated[
        Path | None,
        typer.Argument(help="Path to YAML configuration file"),
    ] = None,
    scenario: Annotated[
        str | None,
        typer.Option("--scenario", "-s", help="Built-in scenario name"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Output directory for the report"),
    ] = None,
    format_: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: console, json"),
    ] = "console",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress console output"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log hub activity"),
    ] = False,
) -> None:
    """Build a hub from configuration, check triggers and report."""
    _configure_logging(verbose)

    if config_path and scenario:
        console.print("[red]Error:[/] Cannot specify both config file and --scenario")
        raise typer.Exit(1)

    if scenario:
        if scenario not in BUILTIN_SCENARIOS:
            console.print(f"[red]Error:[/] Unknown scenario '{scenario}'")
            console.print(f"Available: {', '.join(BUILTIN_SCENARIOS)}")
            raise typer.Exit(1)

        config_path = get_scenarios_dir() / f"{scenario}.yaml"
        if not config_path.exists():
            console.print(f"[red]Error:[/] Scenario file not found: {config_path}")
            raise typer.Exit(1)

    if not config_path:
        console.print("[red]Error:[/] Provide a config file or --scenario")
        raise typer.Exit(1)

    try:
        config = load_config(config_path)
    except FileNotFoundError:
        console.print(f"[red]Error:[/] Config file not found: {config_path}")
        raise typer.Exit(1) from None
    except Exception as e:
        console.print(f"[red]Error:[/] Invalid configuration: {escape(str(e))}")
        raise typer.Exit(1) from None

    try:
        hub = create_hub_from_config(config)
    except UnknownDeviceKindError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None
    except Exception as e:
        console.print(f"[red]Error:[/] Failed to create hub: {escape(str(e))}")
        raise typer.Exit(1) from None

    fired = hub.check_triggers()

    if format_ == "console" and not quiet:
        _print_report(hub, fired)

    if output_dir:
        output_dir.mkdir(parents=True, exist_ok=True)
        report_path = output_dir / "report.json"
        report_path.write_text(json.dumps(_build_report(hub, fired), indent=2))
        if not quiet:
            console.print(f"\n[dim]Report saved to {report_path}[/]")
    elif format_ == "json" and not quiet:
        console.print_json(json.dumps(_build_report(hub, fired)))


@app.command("list")
def list_scenarios() -> None:
    """List available built-in scenarios."""
    scenarios_dir = get_scenarios_dir()

    table = Table(title="Available Scenarios")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Devices")

    for name in BUILTIN_SCENARIOS:
        path = scenarios_dir / f"{name}.yaml"
        if path.exists():
            try:
                config = load_config(path)
                table.add_row(name, config.name, str(len(config.devices)))
            except Exception:
                table.add_row(name, "[dim]Error loading[/]", "-")
        else:
            table.add_row(name, "[dim]Not found[/]", "-")

    console.print(table)
    console.print(f"\nScenarios directory: {scenarios_dir}")


@app.command()
def init(
    name: Annotated[str, typer.Argument(help="Name for the new hub")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
) -> None:
    """Generate a starter YAML configuration file."""
    config = HubConfig(
        name=name,
        devices=[
            DeviceConfig(kind="light", id=1),
            DeviceConfig(kind="thermostat", id=2),
            DeviceConfig(kind="door", id=3),
        ],
        commands=[CommandConfig(action="turn_on", device_id=1)],
        schedules=[ScheduleConfig(device_id=2, time="06:00", command="Turn On")],
        triggers=[TriggerConfig(condition="temperature > 75", action="turnOff(1)")],
    )

    if output is None:
        # "My Home" -> "my-home.yaml"
        output = Path(name.lower().replace(" ", "-") + ".yaml")

    save_config(config, output)
    console.print(f"[green]Created:[/] {output}")
    console.print("\nEdit this file to describe your home, then run:")
    console.print(f"  smarthub run {output}")


@app.command()
def validate(
    config_path: Annotated[Path, typer.Argument(help="Path to YAML configuration")],
) -> None:
    """Validate a configuration file without building the hub."""
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        console.print(f"[red]Error:[/] File not found: {config_path}")
        raise typer.Exit(1) from None
    except Exception as e:
        console.print(f"[red]Invalid:[/] {escape(str(e))}")
        raise typer.Exit(1) from None

    unknown = sorted(
        {str(d.kind) for d in config.devices if d.kind not in list_kinds()}
    )
    if unknown:
        console.print(f"[red]Invalid:[/] Unknown device kinds: {', '.join(unknown)}")
        raise typer.Exit(1)

    console.print(f"[green]Valid:[/] {config.name}")
    console.print(f"  Devices: {len(config.devices)}")
    console.print(f"  Commands: {len(config.commands)}")
    console.print(f"  Schedules: {len(config.schedules)}")
    console.print(f"  Triggers: {len(config.triggers)}")


@app.command()
def kinds() -> None:
    """List registered device kinds."""
    for kind in list_kinds():
        console.print(kind)


def _print_report(hub: Hub, fired: list[str]) -> None:
    """Print device status, schedules and fired actions."""
    console.print(f"\n[bold]{hub.name}[/]")

    devices = Table(title="Devices")
    devices.add_column("ID", style="cyan")
    devices.add_column("Kind")
    devices.add_column("Status")
    for device in hub.devices:
        devices.add_row(str(device.id), device.kind.value, device.get_status())
    console.print(devices)

    tasks = hub.scheduler.list_tasks()
    if tasks:
        schedule = Table(title="Schedules")
        schedule.add_column("Device", style="cyan")
        schedule.add_column("Time")
        schedule.add_column("Command")
        for task in tasks:
            schedule.add_row(str(task.device_id), task.time, task.command)
        console.print(schedule)

    if fired:
        console.print("\n[bold]Triggers fired:[/]")
        for action in fired:
            console.print(f"  {action}")
    else:
        console.print("\n[dim]No triggers fired[/]")


def _build_report(hub: Hub, fired: list[str]) -> dict[str, object]:
    """Serializable summary of the hub state."""
    return {
        "name": hub.name,
        "status": hub.status_report().splitlines(),
        "schedules": [task.to_dict() for task in hub.scheduler.list_tasks()],
        "rules": [
            {"condition": rule.condition, "action": rule.action}
            for rule in hub.automation.list_rules()
        ],
        "fired": fired,
    }


def main() -> int:
    """Application entry point.

    Returns:
        Exit code (0 for success).
    """
    try:
        app()
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
