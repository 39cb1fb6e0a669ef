from daylight.core.summary import summarize_rows
from daylight.core.timebase import Timebase
from daylight.io.table import daylight_table
from daylight.model.locations import get_location


def test_midlatitude_year():
  rows = daylight_table(get_location("apeldoorn"), Timebase.for_year(2015))
  s = summarize_rows(rows)
  assert s["days"] == 365
  assert s["shortest"]["date"].startswith("2015-12")
  assert s["longest"]["date"].startswith("2015-06")
  assert s["polar_night_days"] == 0
  assert s["polar_day_days"] == 0
  assert s["declination_min"] < -23 < 23 < s["declination_max"]


def test_arctic_year_has_polar_day_and_night():
  rows = daylight_table(get_location("longyearbyen"), Timebase.for_year(2015))
  s = summarize_rows(rows)
  assert s["polar_night_days"] > 60
  assert s["polar_day_days"] > 60
  assert s["shortest"]["day_length_s"] == 0
  assert s["longest"]["day_length_s"] == 86400


def test_empty():
  assert summarize_rows([]) == {"days": 0}
