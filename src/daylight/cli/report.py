"""CLI command printing the daylight report for one day and place."""

from datetime import datetime, timezone
import logging
import sys

import click

from ..core.daylight import DomainError, calculate_daylight
from .common import resolve_location, setup_logging

logger = logging.getLogger(__name__)


def _fmt(ts: datetime) -> str:
    return ts.strftime("%Y-%m-%d %H:%M:%S UTC")


@click.command()
@click.option("--location", help="Named location from the locations file")
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Locations YAML file (default: bundled locations)",
)
@click.option("--lat", type=float, help="Latitude in degrees, north positive")
@click.option("--lon", type=float, help="Longitude in degrees, east positive")
@click.option(
    "--date",
    "when",
    type=str,
    help="Date or ISO datetime (default: now, UTC)",
)
@click.option("--verbose", is_flag=True, help="Log intermediate values")
def main(location, config, lat, lon, when, verbose):
    """Print twilight, sunrise, noon and sunset for one day.

    Examples:
        daylight-report --location apeldoorn --date 2015-03-27T12:00:00Z

        daylight-report --lat 78.22 --lon 15.65
    """
    setup_logging(verbose)
    loc = resolve_location(location, config, lat, lon)

    if when:
        try:
            moment = datetime.fromisoformat(when.replace("Z", "+00:00"))
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--date")
    else:
        moment = datetime.now(timezone.utc)

    try:
        r = calculate_daylight(moment, loc.latitude, loc.longitude)
    except DomainError as e:
        logger.error("Cannot compute daylight: %s", e)
        sys.exit(1)

    minutes = int(r.day_length.total_seconds()) // 60
    click.echo(f"Daylight for {loc.name}")
    click.echo("=" * (14 + len(loc.name)))
    click.echo(f"Date:                 {moment.isoformat()}")
    if loc.timezone:
        click.echo(f"Timezone:             {loc.timezone}")
    click.echo(f"Latitude/Longitude:   {loc.latitude}/{loc.longitude}")
    click.echo(f"Declination:          {r.declination:.4f}°")
    click.echo(f"Daylength:            {minutes // 60}:{minutes % 60:02d}")
    click.echo(f"Twilight AM:          {_fmt(r.twilight_morning)}")
    click.echo(f"Sunrise:              {_fmt(r.sunrise)}")
    click.echo(f"Noon:                 {_fmt(r.solar_noon)}")
    click.echo(f"Sunset:               {_fmt(r.sunset)}")
    click.echo(f"Twilight PM:          {_fmt(r.twilight_evening)}")
    click.echo(f"Sun altitude:         {r.sun_altitude:.2f}°")


if __name__ == "__main__":
    main()
