"""Empirical constants of the low-precision solar model.

Values are fixed; changing any of them changes every computed time.
"""
from datetime import datetime, timezone
import math


# 2000-01-01T00:00Z, the reference for day counts.
EPOCH_2000 = datetime(2000, 1, 1, tzinfo=timezone.utc)

SECONDS_PER_DAY = 86400.0
SECONDS_PER_HOUR = 3600.0
TWO_PI = 2.0 * math.pi

# Apparent solar diameter and standard refraction at the horizon, degrees.
SUN_RADIUS_DEG = 0.53
AIR_REFRACTION_DEG = 34.0 / 60.0
CIVIL_TWILIGHT_DEG = 6.0

SUNRISE_OFFSET = math.radians(0.5 * SUN_RADIUS_DEG + AIR_REFRACTION_DEG)
TWILIGHT_OFFSET = math.radians(CIVIL_TWILIGHT_DEG)

# Mean orbit series, degrees and degrees per day.
MEAN_LONGITUDE_BASE = 280.461
MEAN_LONGITUDE_RATE = 0.9856474
MEAN_ANOMALY_BASE = 357.528
MEAN_ANOMALY_RATE = 0.9856003
CENTER_TERM_1 = 1.915
CENTER_TERM_2 = 0.02

OBLIQUITY_BASE = 23.439
OBLIQUITY_RATE = 0.0000004
