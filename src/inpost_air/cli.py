"""inpost-air CLI - air sensor readings of InPost points."""

from __future__ import annotations

import math
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .client import InPostAirClient
from .config import ClientConfig
from .errors import InPostError
from .models import Point
from .store import FileConfigStore
from .telemetry import configure_telemetry

app = typer.Typer(
    name="inpost-air",
    help="Show air sensor data reported by an InPost point.",
    add_completion=False,
)
console = Console()


def default_config_path() -> Path:
    """Config file named after the executable, next to it."""
    executable = Path(sys.argv[0]).resolve()
    return executable.parent / f"{executable.stem}.config.json"


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_point(point: Point) -> list[tuple[str, str]]:
    """Render the sensor readings of a point as label/value rows."""
    data = point.air_sensor_data
    pm10 = data.pollutants.pm10
    pm25 = data.pollutants.pm25

    if data.updated_until is None:
        updated = "-"
    else:
        local = data.updated_until.astimezone()
        updated = f"{local:%b} {local.day:>2} {local:%H:%M:%S}"

    return [
        ("Point name", point.name),
        ("Temperature", f"{data.weather.temperature:.1f} °C"),
        ("Pressure", f"{_round(data.weather.pressure)} hPa"),
        ("Humidity", f"{_round(data.weather.humidity)}%"),
        ("Dust PM 10", f"{pm10.value:.1f} μg/m³ ({_round(pm10.percent)}%)"),
        ("Dust PM 2.5", f"{pm25.value:.1f} μg/m³ ({_round(pm25.percent)}%)"),
        ("Air quality", data.air_quality.replace("_", " ").lower()),
        ("Last updated", updated),
    ]


def _login(client: InPostAirClient) -> None:
    phone_number = typer.prompt("Phone number").strip()
    client.send_login_code(phone_number)

    sms_code = typer.prompt("SMS code").strip()
    client.confirm_login_code(phone_number, sms_code)

    console.print("[green]Logged in.[/green]")


@app.command()
def main(
    ctx: typer.Context,
    point_id: Optional[str] = typer.Argument(None, help="Point identifier, e.g. KRA01M"),
    login: bool = typer.Option(False, "--login", help="Log in to InPost Mobile"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        envvar="INPOST_CONFIG",
        help="Session file (defaults to <executable>.config.json)",
    ),
) -> None:
    """Print air sensor readings for POINT_ID."""
    if not point_id:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    point_id = point_id.upper()

    try:
        config = ClientConfig.from_env()
        configure_telemetry(config.telemetry)
        store = FileConfigStore(config_path or default_config_path())

        with InPostAirClient(store, config) as client:
            if login:
                _login(client)
            point = client.get_point(point_id)
    except InPostError as e:
        console.print(f"[red]Couldn't get air sensor data for {point_id}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if not point.air_sensor:
        console.print(f"{point_id} has no air sensor.")
        raise typer.Exit(0)

    table = Table(show_header=False, box=None)
    table.add_column("Reading", style="bold")
    table.add_column("Value")
    for label, value in format_point(point):
        table.add_row(label, escape(value))
    console.print(table)


if __name__ == "__main__":
    app()
