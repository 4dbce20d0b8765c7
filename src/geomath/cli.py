"""CLI entrypoint for geomath."""

from __future__ import annotations

import logging
import math

import click
from rich.console import Console
from rich.table import Table

from geomath.config import DEFAULT_PRECISION, DEFAULT_RADIUS_KM, LOG_LEVEL
from geomath.geo import (
    calculate_bearing,
    calculate_distance,
    calculate_distance_nautical_miles,
    format_distance,
    format_fixed,
    get_compass_direction,
    is_within_radius,
)
from geomath.models import Coordinate, Leg
from geomath.validation import CoordinateError, require_valid_coordinate, validate_radius

logger = logging.getLogger(__name__)

console = Console()

# Let "-0.1278" through as a positional value instead of an unknown option
POSITIONAL_NEGATIVES = {"ignore_unknown_options": True}


def _points(ctx: click.Context, lat1: float, lon1: float, lat2: float, lon2: float) -> tuple[Coordinate, Coordinate]:
    # click's float type accepts "nan" and "inf"; those never make a usable point
    for value in (lat1, lon1, lat2, lon2):
        if not math.isfinite(value):
            raise click.BadParameter(f"coordinate {value} is not a finite number")
    if not ctx.obj["strict"]:
        return Coordinate(lat1, lon1), Coordinate(lat2, lon2)
    try:
        return require_valid_coordinate(lat1, lon1), require_valid_coordinate(lat2, lon2)
    except CoordinateError as exc:
        raise click.BadParameter("; ".join(exc.errors)) from exc


@click.group()
@click.option("--strict", is_flag=True, help="Reject out-of-range coordinates.")
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, strict: bool, verbose: bool):
    """Geodesic helpers — distance, bearing and radius checks."""
    logging.basicConfig(level=logging.DEBUG if verbose else LOG_LEVEL)
    ctx.ensure_object(dict)
    ctx.obj["strict"] = strict


@cli.command(context_settings=POSITIONAL_NEGATIVES)
@click.argument("lat1", type=float)
@click.argument("lon1", type=float)
@click.argument("lat2", type=float)
@click.argument("lon2", type=float)
@click.option("--nm", is_flag=True, help="Report nautical miles instead of kilometers.")
@click.option("--precision", default=DEFAULT_PRECISION, help="Decimal places for the result.")
@click.pass_context
def distance(ctx: click.Context, lat1: float, lon1: float, lat2: float, lon2: float, nm: bool, precision: int):
    """Great-circle distance between two points."""
    a, b = _points(ctx, lat1, lon1, lat2, lon2)
    if nm:
        nmi = calculate_distance_nautical_miles(a.latitude, a.longitude, b.latitude, b.longitude)
        console.print(f"{format_fixed(nmi, precision)}nmi")
        return
    km = calculate_distance(a.latitude, a.longitude, b.latitude, b.longitude)
    logger.debug("distance %s -> %s = %r km", a, b, km)
    console.print(format_distance(km, precision))


@cli.command(context_settings=POSITIONAL_NEGATIVES)
@click.argument("lat1", type=float)
@click.argument("lon1", type=float)
@click.argument("lat2", type=float)
@click.argument("lon2", type=float)
@click.pass_context
def bearing(ctx: click.Context, lat1: float, lon1: float, lat2: float, lon2: float):
    """Initial bearing from the first point to the second."""
    a, b = _points(ctx, lat1, lon1, lat2, lon2)
    deg = calculate_bearing(a.latitude, a.longitude, b.latitude, b.longitude)
    console.print(f"{deg:.1f}° {get_compass_direction(deg)}")


@cli.command(context_settings=POSITIONAL_NEGATIVES)
@click.argument("center_lat", type=float)
@click.argument("center_lon", type=float)
@click.argument("point_lat", type=float)
@click.argument("point_lon", type=float)
@click.option("--radius", default=DEFAULT_RADIUS_KM, help="Radius in kilometers.")
@click.pass_context
def within(ctx: click.Context, center_lat: float, center_lon: float, point_lat: float, point_lon: float, radius: float):
    """Check whether a point lies within RADIUS km of a center."""
    center, point = _points(ctx, center_lat, center_lon, point_lat, point_lon)
    if ctx.obj["strict"]:
        errors = validate_radius(radius)
        if errors:
            raise click.BadParameter("; ".join(errors), param_hint="--radius")

    inside = is_within_radius(center.latitude, center.longitude, point.latitude, point.longitude, radius)
    km = center.distance_to(point)
    verdict = "[green]yes[/]" if inside else "[red]no[/]"
    console.print(f"{verdict} ({format_distance(km)} of {radius:g}km)")


@cli.command(context_settings=POSITIONAL_NEGATIVES)
@click.argument("lat1", type=float)
@click.argument("lon1", type=float)
@click.argument("lat2", type=float)
@click.argument("lon2", type=float)
@click.pass_context
def leg(ctx: click.Context, lat1: float, lon1: float, lat2: float, lon2: float):
    """Full summary of the hop between two points."""
    a, b = _points(ctx, lat1, lon1, lat2, lon2)
    summary = Leg.between(a, b)

    table = Table(title="Leg")
    table.add_column("Field", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("From", f"{a.latitude:.4f}, {a.longitude:.4f}")
    table.add_row("To", f"{b.latitude:.4f}, {b.longitude:.4f}")
    table.add_row("Distance", summary.formatted_distance(DEFAULT_PRECISION))
    table.add_row("Nautical miles", f"{summary.distance_nmi:.1f}")
    table.add_row("Bearing", f"{summary.bearing_deg:.1f}°")
    table.add_row("Direction", summary.direction)

    console.print(table)
