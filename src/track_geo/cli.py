"""CLI entrypoint for track-geo."""

from __future__ import annotations

import json
import logging
import math

import click
from rich.console import Console
from rich.table import Table

from track_geo.coerce import to_list
from track_geo.config import LOG_LEVELS, Settings, load_settings
from track_geo.geo import FEET_PER_METER, distance_m, nearest_index, points_within
from track_geo.models import GeoPoint
from track_geo.timeutil import elapsed_seconds
from track_geo.validation import ValidationError, ensure_valid

logger = logging.getLogger(__name__)

console = Console()


class PointParamType(click.ParamType):
    """A ``LAT,LON`` pair on the command line."""

    name = "lat,lon"

    def convert(self, value, param, ctx):
        if isinstance(value, GeoPoint):
            return value
        parts = value.split(",")
        if len(parts) != 2:
            self.fail(f"expected LAT,LON, got {value!r}", param, ctx)
        try:
            return GeoPoint(latitude=float(parts[0]), longitude=float(parts[1]))
        except ValueError:
            self.fail(f"{value!r} is not a pair of numbers", param, ctx)


POINT = PointParamType()


def _check_point(settings: Settings, point, hint: str) -> None:
    if not settings.strict:
        return
    try:
        ensure_valid(point)
    except ValidationError as exc:
        raise click.BadParameter("; ".join(exc.errors), param_hint=hint) from exc


def _timestamp_arg(raw: str):
    # bare numbers on the command line are epoch milliseconds
    try:
        return float(raw)
    except ValueError:
        return raw


@click.group()
@click.option("--strict/--no-strict", default=None,
              help="Reject out-of-range coordinates and unparseable timestamps.")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=None, help="Logging level (default from TRACK_GEO_LOG_LEVEL).")
@click.pass_context
def cli(ctx: click.Context, strict: bool | None, log_level: str | None):
    """Track Geo: distance, proximity and path helpers for GPS tracks."""
    settings = load_settings()
    if strict is not None:
        settings.strict = strict
    if log_level:
        settings.log_level = log_level.upper()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    ctx.obj = settings


@cli.command()
@click.option("--from", "origin", required=True, type=POINT, help="Start point.")
@click.option("--to", "dest", required=True, type=POINT, help="End point.")
@click.option("--unit", default="m", type=click.Choice(["m", "km", "ft"]), help="Output unit.")
@click.pass_obj
def distance(settings: Settings, origin: GeoPoint, dest: GeoPoint, unit: str):
    """Great-circle distance between two points."""
    _check_point(settings, origin, "--from")
    _check_point(settings, dest, "--to")

    meters = distance_m(origin, dest)
    value = {"m": meters, "km": meters / 1000, "ft": meters * FEET_PER_METER}[unit]
    console.print(f"{value:.1f} {unit}")


@cli.command()
@click.option("--from", "origin", required=True, type=POINT, help="First point.")
@click.option("--to", "dest", required=True, type=POINT, help="Second point.")
@click.option("--threshold", type=float, default=None,
              help="Threshold in feet (default from TRACK_GEO_THRESHOLD_FT, else 350).")
@click.pass_obj
def near(settings: Settings, origin: GeoPoint, dest: GeoPoint, threshold: float | None):
    """Check whether two points are within a distance threshold."""
    _check_point(settings, origin, "--from")
    _check_point(settings, dest, "--to")

    if threshold is None:
        threshold = settings.proximity_threshold_ft
    feet = distance_m(origin, dest) * FEET_PER_METER

    if points_within(origin, dest, threshold_ft=threshold):
        console.print(f"[green]within[/] {threshold:g} ft ({feet:.1f} ft apart)")
    else:
        console.print(f"[red]not within[/] {threshold:g} ft ({feet:.1f} ft apart)")


@cli.command()
@click.argument("start")
@click.argument("end")
@click.pass_obj
def elapsed(settings: Settings, start: str, end: str):
    """Seconds elapsed from START to END (ISO 8601 or epoch milliseconds)."""
    seconds = elapsed_seconds(_timestamp_arg(start), _timestamp_arg(end))
    if math.isnan(seconds) and settings.strict:
        raise click.ClickException(f"cannot parse timestamps {start!r} / {end!r}")
    console.print(f"{seconds:.3f} s")


@cli.command()
@click.argument("path_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--to", "target", required=True, type=POINT, help="Query point.")
@click.pass_obj
def nearest(settings: Settings, path_file: str, target: GeoPoint):
    """Find the vertex of a JSON path closest to a point."""
    _check_point(settings, target, "--to")

    try:
        with open(path_file, encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"invalid JSON: {exc}", param_hint="PATH_FILE") from exc

    vertices = list(to_list(data))
    logger.info("Loaded %d vertices from %s", len(vertices), path_file)
    for i, vertex in enumerate(vertices):
        _check_point(settings, vertex, f"PATH_FILE[{i}]")

    idx = nearest_index(vertices, target)
    if not vertices:
        console.print("Path is empty, nearest index 0")
        return

    vertex = GeoPoint.from_record(vertices[idx])
    table = Table(title=f"Nearest vertex ({len(vertices)} in path)")
    table.add_column("Index", justify="right", style="bold")
    table.add_column("Lat", justify="right")
    table.add_column("Lon", justify="right")
    table.add_column("Distance (m)", justify="right")
    table.add_row(
        str(idx),
        f"{vertex.latitude:.6f}",
        f"{vertex.longitude:.6f}",
        f"{distance_m(vertex, target):.1f}",
    )
    console.print(table)
