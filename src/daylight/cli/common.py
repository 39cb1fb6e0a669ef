"""Helpers shared by the command line entry points."""
import logging

import click
from pydantic import ValidationError

from ..model.locations import LocationConfig, get_location

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def resolve_location(location, config, lat, lon) -> LocationConfig:
    """Build the observer from --location or from --lat/--lon.

    Raises:
        click.UsageError: if neither or both forms are given
        click.BadParameter: if the location is unknown or out of range
    """
    if location and (lat is not None or lon is not None):
        raise click.UsageError("use either --location or --lat/--lon, not both")
    if location:
        try:
            return get_location(location, config)
        except KeyError as e:
            raise click.BadParameter(str(e.args[0]), param_hint="--location")
    if lat is None or lon is None:
        raise click.UsageError("--lat and --lon are required without --location")
    try:
        return LocationConfig(name=f"{lat:.4f},{lon:.4f}", latitude=lat, longitude=lon)
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="--lat/--lon")
