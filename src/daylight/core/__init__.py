"""Solar model and daylight computation."""

from .daylight import Daylight, DaylightResult, DomainError, calculate_daylight
from .solar import days_since_2000, solar_ecliptic_longitude, solar_position
from .timebase import Timebase

__all__ = [
    "Daylight",
    "DaylightResult",
    "DomainError",
    "calculate_daylight",
    "days_since_2000",
    "solar_ecliptic_longitude",
    "solar_position",
    "Timebase",
]
