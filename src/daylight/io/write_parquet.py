import os
from typing import Iterable, List

import pyarrow as pa
import pyarrow.parquet as pq


def write_daylight_parquet(rows_iter: Iterable, path: str):
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  rows = [r if isinstance(r, dict) else r.model_dump() for r in rows_iter]
  if not rows:
    return
  table = pa.Table.from_pylist(rows)
  pq.write_table(table, path, compression="snappy")


def read_parquet(path: str) -> List[dict]:
  return pq.read_table(path).to_pylist()
