import math

from .constants import SUNRISE_OFFSET, TWILIGHT_OFFSET, TWO_PI


def normalize_angle(x: float) -> float:
  """Map an angle in radians onto [0, 2*pi)."""
  turns = 0.5 * x / math.pi
  a = TWO_PI * (turns - math.floor(turns))
  if a < 0:
    a += TWO_PI
  return a


def clamped_asin(x: float) -> float:
  # Out-of-domain values mean the sun never crosses the threshold.
  return math.asin(min(1.0, max(-1.0, x)))


def hour_angle(latitude: float, declination: float, offset: float) -> float:
  """
  Hour angle (radians) at which the sun passes `offset` below the horizon.

  latitude and declination are radians. The offset changes sign in the
  southern hemisphere so one formula serves both. A result of 0 means the
  sun stays below the threshold all day, pi means it never drops below it.
  """
  if latitude < 0:
    offset = -offset
  f = math.tan(declination + offset) * math.tan(latitude)
  return clamped_asin(f) + math.pi / 2


def sunrise_hour_angle(latitude: float, declination: float) -> float:
  return hour_angle(latitude, declination, SUNRISE_OFFSET)


def twilight_hour_angle(latitude: float, declination: float) -> float:
  return hour_angle(latitude, declination, TWILIGHT_OFFSET)
