from pathlib import Path
from typing import List

from .schema import DaylightRow
from .write_jsonl import read_jsonl, write_jsonl
from .write_parquet import read_parquet, write_daylight_parquet


def read_rows(path: str) -> List[dict]:
  """Read a daylight table written as .jsonl or .parquet."""
  suffix = Path(path).suffix.lower()
  if suffix == ".parquet":
    return read_parquet(path)
  if suffix == ".jsonl":
    return read_jsonl(path)
  raise ValueError(f"unsupported table format: {suffix or path}")


__all__ = ["DaylightRow", "read_rows", "write_jsonl", "write_daylight_parquet"]
