"""Civil twilight, sunrise, solar noon and sunset for a date and place.

All instants are UTC and carry whole seconds only. Accuracy is about a
minute: the solar position comes from a truncated series and refraction is a
fixed 34 arcminutes.
"""
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Tuple, Union
import logging
import math

from .angles import sunrise_hour_angle, twilight_hour_angle
from .constants import SECONDS_PER_HOUR
from .solar import days_since_2000, solar_position

logger = logging.getLogger(__name__)

Moment = Union[datetime, date]


class DomainError(ValueError):
  """Coordinates outside the range the model is defined on."""


@dataclass(frozen=True)
class DaylightResult:
  twilight_morning: datetime
  sunrise: datetime
  solar_noon: datetime
  sunset: datetime
  twilight_evening: datetime
  declination: float  # degrees
  day_length: timedelta
  sun_altitude: float  # degrees, at solar noon

  def instants(self) -> Tuple[datetime, ...]:
    return (
      self.twilight_morning,
      self.sunrise,
      self.solar_noon,
      self.sunset,
      self.twilight_evening,
    )


def to_utc(moment: Moment) -> datetime:
  """
  Normalize a moment to an aware UTC datetime.

  Naive datetimes are taken to be UTC already; a bare date means 00:00 UTC.
  """
  if not isinstance(moment, datetime):
    return datetime.combine(moment, time(0), tzinfo=timezone.utc)
  if moment.tzinfo is None:
    return moment.replace(tzinfo=timezone.utc)
  return moment.astimezone(timezone.utc)


def utc_midnight(moment_utc: datetime) -> datetime:
  return moment_utc.replace(hour=0, minute=0, second=0, microsecond=0)


def hours_to_instant(midnight: datetime, hours: float) -> datetime:
  # Sub-second parts are dropped, truncating toward zero.
  return midnight + timedelta(seconds=int(hours * SECONDS_PER_HOUR))


def check_coordinates(latitude: float, longitude: float) -> None:
  if not (math.isfinite(latitude) and math.isfinite(longitude)):
    raise DomainError(f"coordinates must be finite, got ({latitude}, {longitude})")
  if abs(latitude) > 90.0:
    raise DomainError(f"latitude {latitude} outside [-90, 90]")
  if abs(longitude) > 180.0:
    raise DomainError(f"longitude {longitude} outside [-180, 180]")


def max_altitude(latitude: float, declination: float) -> float:
  """Altitude of the sun at solar noon, radians."""
  alt = math.pi / 2 + declination - latitude
  if latitude < declination:
    alt = math.pi - alt
  return alt


def calculate_daylight(moment: Moment, latitude: float, longitude: float) -> DaylightResult:
  """Compute twilight, sunrise, noon and sunset for the UTC date of `moment`.

  Args:
      moment: datetime (aware, or naive meaning UTC) or date
      latitude: degrees, north positive
      longitude: degrees, east positive

  Raises:
      DomainError: if the coordinates are not finite or out of range
  """
  check_coordinates(latitude, longitude)
  utc = to_utc(moment)
  pos = solar_position(days_since_2000(utc))
  lat = math.radians(latitude)

  ha = sunrise_hour_angle(lat, pos.declination)
  hb = twilight_hour_angle(lat, pos.declination)
  half_day = 12.0 * ha / math.pi
  twilight_extra = 12.0 * (hb - ha) / math.pi

  sunrise = 12.0 - half_day - longitude / 15.0 + pos.equation_hours
  sunset = 12.0 + half_day - longitude / 15.0 + pos.equation_hours
  noon = sunrise + half_day
  logger.debug(
    "d=%.5f decl=%.6f eq=%.6fh ha=%.6f hb=%.6f", pos.days,
    pos.declination, pos.equation_hours, ha, hb)

  midnight = utc_midnight(utc)
  return DaylightResult(
    twilight_morning=hours_to_instant(midnight, sunrise - twilight_extra),
    sunrise=hours_to_instant(midnight, sunrise),
    solar_noon=hours_to_instant(midnight, noon),
    sunset=hours_to_instant(midnight, sunset),
    twilight_evening=hours_to_instant(midnight, sunset + twilight_extra),
    declination=math.degrees(pos.declination),
    day_length=timedelta(seconds=math.floor(2.0 * half_day * SECONDS_PER_HOUR)),
    sun_altitude=math.degrees(max_altitude(lat, pos.declination)),
  )


@dataclass
class Daylight:
  """Fixed observer; evaluates each calendar day at 12:00 UTC."""
  latitude: float
  longitude: float = 0.0

  def __post_init__(self):
    check_coordinates(self.latitude, self.longitude)

  def on(self, d: date) -> DaylightResult:
    noon = datetime(d.year, d.month, d.day, 12, 0, tzinfo=timezone.utc)
    return calculate_daylight(noon, self.latitude, self.longitude)

  def sunrise_sunset(self, d: date) -> Tuple[datetime, datetime]:
    r = self.on(d)
    return r.sunrise, r.sunset
