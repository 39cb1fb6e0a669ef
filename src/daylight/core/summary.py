"""Aggregate statistics over a run of daily rows."""
from typing import Dict, Iterable

import numpy as np

FULL_DAY_SECONDS = 86400


def summarize_rows(rows: Iterable) -> Dict:
  """
  Summarize daily rows (DaylightRow models or equivalent dicts).

  Returns shortest/longest day, mean day length, counts of polar-night and
  polar-day days and the declination range. An empty input yields {"days": 0}.
  """
  rows = [r if isinstance(r, dict) else r.model_dump() for r in rows]
  if not rows:
    return {"days": 0}
  lengths = np.array([r["day_length_s"] for r in rows], dtype=np.int64)
  decl = np.array([r["declination"] for r in rows], dtype=float)
  shortest = int(np.argmin(lengths))
  longest = int(np.argmax(lengths))
  return {
    "days": len(rows),
    "shortest": {"date": rows[shortest]["date"], "day_length_s": int(lengths[shortest])},
    "longest": {"date": rows[longest]["date"], "day_length_s": int(lengths[longest])},
    "mean_day_length_s": float(lengths.mean()),
    "polar_night_days": int(np.count_nonzero(lengths == 0)),
    "polar_day_days": int(np.count_nonzero(lengths >= FULL_DAY_SECONDS)),
    "declination_min": float(decl.min()),
    "declination_max": float(decl.max()),
  }
