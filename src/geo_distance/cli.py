"""CLI entrypoint for geo-distance."""

from __future__ import annotations

import json
import logging
import subprocess
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from geo_distance.calculator import DistanceCalculator, compute_distances
from geo_distance.config import LOG_FORMAT, LOG_LEVEL, WEB_PORT
from geo_distance.models import CoordinatePair, History
from geo_distance.presets import DEFAULT_PRESET, PRESETS
from geo_distance.validation import InvalidCoordinateError

console = Console()

_DEFAULT = PRESETS[DEFAULT_PRESET].pair


def _history_table(history: History, title: str) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right", width=3)
    table.add_column("Point 1")
    table.add_column("Point 2")
    table.add_column("Geodesic (km)", justify="right")
    table.add_column("Euclidean (km)", justify="right")
    table.add_column("Difference (km)", justify="right")

    for i, entry in enumerate(history, start=1):
        origin, dest, res = entry.pair.origin, entry.pair.destination, entry.result
        table.add_row(
            str(i),
            f"({origin.latitude}, {origin.longitude})",
            f"({dest.latitude}, {dest.longitude})",
            f"{res.geodesic_km:.2f}",
            f"{res.euclidean_km:.2f}",
            f"[cyan]{res.difference_km:.2f}[/]",
        )

    return table


@click.group()
@click.option("--log-level", default=LOG_LEVEL, show_default=True,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
def cli(log_level: str):
    """Geo Distance: geodesic vs. Euclidean distance between two points."""
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)


@cli.command()
@click.option("--lat1", default=_DEFAULT.origin.latitude, type=float, help="Origin latitude.")
@click.option("--lon1", default=_DEFAULT.origin.longitude, type=float, help="Origin longitude.")
@click.option("--lat2", default=_DEFAULT.destination.latitude, type=float, help="Destination latitude.")
@click.option("--lon2", default=_DEFAULT.destination.longitude, type=float, help="Destination longitude.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def distance(lat1: float, lon1: float, lat2: float, lon2: float, as_json: bool):
    """Compute both distances for a single pair of points."""
    pair = CoordinatePair.from_flat(lat1, lon1, lat2, lon2)
    try:
        result = compute_distances(pair)
    except InvalidCoordinateError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        payload = dict(pair.to_flat())
        payload.update(
            geodesic_km=round(result.geodesic_km, 2),
            euclidean_km=round(result.euclidean_km, 2),
            difference_km=round(result.difference_km, 2),
        )
        click.echo(json.dumps(payload))
        return

    table = Table(title="Results")
    table.add_column("Measure", style="bold")
    table.add_column("Distance (km)", justify="right")
    table.add_row("Geodesic", f"{result.geodesic_km:.2f}")
    table.add_row("Euclidean", f"{result.euclidean_km:.2f}")
    table.add_row("Difference", f"[cyan]{result.difference_km:.2f}[/]")

    console.print(f"({lat1}, {lon1}) → ({lat2}, {lon2})")
    console.print(table)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print the history as JSON records.")
def presets(as_json: bool):
    """Compute every preset route in order and show the resulting history."""
    calc = DistanceCalculator()
    for name in PRESETS:
        calc.select_preset(name)
        calc.recalculate()

    if as_json:
        click.echo(json.dumps(calc.history.to_records()))
        return

    console.print(_history_table(calc.history, title="Preset Routes"))


@cli.command("web")
@click.option("--port", default=WEB_PORT, help="Streamlit port.")
def web(port: int):
    """Launch the Streamlit web dashboard."""
    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        str(Path(__file__).with_name("dashboard_web.py")),
        "--server.port", str(port),
        "--server.headless", "true",
    ])


if __name__ == "__main__":
    cli()
