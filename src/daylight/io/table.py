from typing import List

from ..core.daylight import Daylight
from ..core.timebase import Timebase
from ..model.locations import LocationConfig
from .schema import DaylightRow


def daylight_table(location: LocationConfig, timebase: Timebase) -> List[DaylightRow]:
  """One row per day of the timebase, each evaluated at 12:00 UTC."""
  observer = Daylight(latitude=location.latitude, longitude=location.longitude)
  return [
    DaylightRow.from_result(location.name, d, location.latitude, location.longitude, observer.on(d))
    for d in timebase.days()
  ]
