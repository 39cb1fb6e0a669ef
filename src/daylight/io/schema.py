from datetime import date

from pydantic import BaseModel

from ..core.daylight import DaylightResult


class DaylightRow(BaseModel):
  location: str
  date: str
  latitude: float
  longitude: float
  twilight_morning: int
  sunrise: int
  solar_noon: int
  sunset: int
  twilight_evening: int
  day_length_s: int
  declination: float
  sun_altitude: float

  @classmethod
  def from_result(cls, location: str, d: date, latitude: float, longitude: float,
                  r: DaylightResult) -> "DaylightRow":
    return cls(
      location=location,
      date=d.isoformat(),
      latitude=latitude,
      longitude=longitude,
      twilight_morning=int(r.twilight_morning.timestamp()),
      sunrise=int(r.sunrise.timestamp()),
      solar_noon=int(r.solar_noon.timestamp()),
      sunset=int(r.sunset.timestamp()),
      twilight_evening=int(r.twilight_evening.timestamp()),
      day_length_s=int(r.day_length.total_seconds()),
      declination=r.declination,
      sun_altitude=r.sun_altitude,
    )

  def is_ordered(self) -> bool:
    return (self.twilight_morning <= self.sunrise <= self.solar_noon
            <= self.sunset <= self.twilight_evening) and self.day_length_s >= 0
