from datetime import date, datetime, timedelta, timezone
import math

import pytest

from daylight import Daylight, DomainError, calculate_daylight

APELDOORN = (52.0 + 13.0 / 60.0, 5.0 + 58.0 / 60.0)
LONGYEARBYEN = (78.22, 15.65)


def ts(dt):
  return int(dt.timestamp())


def test_apeldoorn_regression():
  r = calculate_daylight(datetime(2015, 3, 27, 12, tzinfo=timezone.utc), *APELDOORN)
  assert ts(r.twilight_morning) == 1427432129
  assert ts(r.sunrise) == 1427433766
  assert ts(r.solar_noon) == 1427456487
  assert ts(r.sunset) == 1427479207
  assert ts(r.twilight_evening) == 1427480844
  assert r.day_length == timedelta(seconds=45440)
  assert r.declination == pytest.approx(2.7773, abs=1e-3)
  assert r.sun_altitude == pytest.approx(40.56, abs=1e-2)


def test_polar_midsummer():
  r = calculate_daylight(datetime(2015, 6, 21, 12, tzinfo=timezone.utc), *LONGYEARBYEN)
  assert r.day_length == timedelta(seconds=86400)
  assert r.twilight_morning == r.sunrise
  assert r.sunset == r.twilight_evening
  assert ts(r.sunrise) == 1434841155
  assert ts(r.sunset) == 1434927554


def test_polar_midwinter():
  r = calculate_daylight(datetime(2015, 12, 21, 12, tzinfo=timezone.utc), *LONGYEARBYEN)
  assert {ts(t) for t in r.instants()} == {1450695334}
  assert r.day_length == timedelta(0)
  assert r.declination == pytest.approx(-23.4365, abs=1e-3)


def test_instants_are_utc_whole_seconds():
  r = calculate_daylight(datetime(2021, 8, 3, 9, 15, 27, 123456, tzinfo=timezone.utc), -33.87, 151.21)
  for t in r.instants():
    assert t.tzinfo == timezone.utc
    assert t.microsecond == 0
  assert r.day_length.microseconds == 0


def test_offset_aware_input_normalized():
  utc = calculate_daylight(datetime(2015, 3, 27, 12, tzinfo=timezone.utc), *APELDOORN)
  cet = calculate_daylight(datetime(2015, 3, 27, 13, tzinfo=timezone(timedelta(hours=1))), *APELDOORN)
  naive = calculate_daylight(datetime(2015, 3, 27, 12), *APELDOORN)
  assert utc == cet == naive


def test_date_input_means_utc_midnight():
  a = calculate_daylight(date(2015, 3, 27), *APELDOORN)
  b = calculate_daylight(datetime(2015, 3, 27, tzinfo=timezone.utc), *APELDOORN)
  assert a == b


def test_idempotent():
  args = (datetime(1999, 2, 11, 6, 30, tzinfo=timezone.utc), -12.5, -77.0)
  assert calculate_daylight(*args) == calculate_daylight(*args)


def test_southern_hemisphere_summer_is_long():
  r = calculate_daylight(datetime(2015, 12, 21, 12, tzinfo=timezone.utc), -33.87, 151.21)
  assert r.day_length > timedelta(hours=14)
  assert r.sun_altitude == pytest.approx(90 - 33.87 - r.declination, abs=1e-6)


def test_equator_altitude():
  r = calculate_daylight(datetime(2015, 3, 27, 12, tzinfo=timezone.utc), 0.0, 0.0)
  assert r.sun_altitude == pytest.approx(90 - r.declination, abs=1e-9)
  assert r.sun_altitude <= 90


@pytest.mark.parametrize("lat,lon", [
  (90.5, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -200.0),
  (math.nan, 0.0), (0.0, math.inf),
])
def test_invalid_coordinates_rejected(lat, lon):
  with pytest.raises(DomainError):
    calculate_daylight(datetime(2015, 3, 27, 12, tzinfo=timezone.utc), lat, lon)


def test_domain_error_is_value_error():
  assert issubclass(DomainError, ValueError)


def test_observer_evaluates_at_noon():
  obs = Daylight(*APELDOORN)
  sunrise, sunset = obs.sunrise_sunset(date(2015, 3, 27))
  assert ts(sunrise) == 1427433766
  assert ts(sunset) == 1427479207
  with pytest.raises(DomainError):
    Daylight(latitude=100.0)
