"""Sunrise, sunset and civil twilight times from a low-precision solar model."""

from .core.daylight import Daylight, DaylightResult, DomainError, calculate_daylight

__all__ = [
    "Daylight",
    "DaylightResult",
    "DomainError",
    "calculate_daylight",
]

__version__ = "0.3.0"
