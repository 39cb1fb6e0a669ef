"""Position of the sun from a truncated mean-orbit series."""
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple
import math

from .angles import normalize_angle
from .constants import (
  CENTER_TERM_1,
  CENTER_TERM_2,
  EPOCH_2000,
  MEAN_ANOMALY_BASE,
  MEAN_ANOMALY_RATE,
  MEAN_LONGITUDE_BASE,
  MEAN_LONGITUDE_RATE,
  OBLIQUITY_BASE,
  OBLIQUITY_RATE,
  SECONDS_PER_DAY,
  TWO_PI,
)


@dataclass(frozen=True)
class SolarPosition:
  days: float
  ecliptic_longitude: float
  mean_longitude: float
  obliquity: float
  right_ascension: float
  declination: float
  equation_hours: float


def days_since_2000(moment_utc: datetime) -> float:
  """Days, including the fraction, since 2000-01-01T00:00Z."""
  return (moment_utc - EPOCH_2000).total_seconds() / SECONDS_PER_DAY


def solar_ecliptic_longitude(d: float) -> Tuple[float, float]:
  """Return (ecliptic longitude, mean longitude) in radians for day number d."""
  mean_longitude = normalize_angle(
    math.radians(MEAN_LONGITUDE_BASE) + math.radians(MEAN_LONGITUDE_RATE) * d)
  g = normalize_angle(
    math.radians(MEAN_ANOMALY_BASE) + math.radians(MEAN_ANOMALY_RATE) * d)
  ecliptic_longitude = normalize_angle(
    mean_longitude
    + math.radians(CENTER_TERM_1) * math.sin(g)
    + math.radians(CENTER_TERM_2) * math.sin(2 * g))
  return ecliptic_longitude, mean_longitude


def obliquity(d: float) -> float:
  return math.radians(OBLIQUITY_BASE) - math.radians(OBLIQUITY_RATE) * d


def equation_of_time(mean_longitude: float, right_ascension: float) -> float:
  """Apparent minus mean solar time, in hours."""
  corr = mean_longitude - right_ascension
  # RA from atan2 lies in (-pi, pi]; keep the difference on one branch.
  if corr < math.pi:
    corr += TWO_PI
  return 24.0 * (1.0 - corr / TWO_PI)


def solar_position(d: float) -> SolarPosition:
  lam, mean_longitude = solar_ecliptic_longitude(d)
  eps = obliquity(d)
  alpha = math.atan2(math.cos(eps) * math.sin(lam), math.cos(lam))
  delta = math.asin(math.sin(eps) * math.sin(lam))
  return SolarPosition(
    days=d,
    ecliptic_longitude=lam,
    mean_longitude=mean_longitude,
    obliquity=eps,
    right_ascension=alpha,
    declination=delta,
    equation_hours=equation_of_time(mean_longitude, alpha),
  )
