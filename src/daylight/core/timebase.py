from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone


@dataclass
class Timebase:
  start: date
  end: date

  def __post_init__(self):
    if self.end < self.start:
      raise ValueError(f"end {self.end} precedes start {self.start}")

  @classmethod
  def for_year(cls, year: int) -> "Timebase":
    return cls(date(year, 1, 1), date(year, 12, 31))

  def __len__(self):
    return (self.end - self.start).days + 1

  def days(self):
    d = self.start
    while d <= self.end:
      yield d
      d += timedelta(days=1)

  def moments(self, hour: int = 12):
    for d in self.days():
      yield datetime(d.year, d.month, d.day, hour, tzinfo=timezone.utc)
