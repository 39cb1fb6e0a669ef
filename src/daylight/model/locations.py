from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field

DEFAULT_LOCATIONS = Path(__file__).parent.parent / "config" / "locations.yaml"


class LocationConfig(BaseModel):
  name: str
  latitude: float = Field(ge=-90.0, le=90.0, allow_inf_nan=False)
  longitude: float = Field(ge=-180.0, le=180.0, allow_inf_nan=False)
  timezone: Optional[str] = None


def load_locations(path: Optional[str] = None) -> Dict[str, LocationConfig]:
  """Load named locations, keyed by lower-cased key from the YAML mapping."""
  p = Path(path) if path else DEFAULT_LOCATIONS
  cfg = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
  out = {}
  for key, v in cfg.get("locations", {}).items():
    v = dict(v)
    v.setdefault("name", key)
    out[key.lower()] = LocationConfig(**v)
  return out


def get_location(name: str, path: Optional[str] = None) -> LocationConfig:
  locations = load_locations(path)
  try:
    return locations[name.lower()]
  except KeyError:
    known = ", ".join(sorted(locations))
    raise KeyError(f"unknown location {name!r} (known: {known})") from None
