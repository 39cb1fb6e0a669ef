import json
import os
from typing import Iterable, List


def write_jsonl(rows_iter: Iterable, path: str):
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  with open(path, "w", encoding="utf-8") as f:
    for r in rows_iter:
      if not isinstance(r, dict):
        r = r.model_dump()
      f.write(json.dumps(r, ensure_ascii=False) + "\n")


def read_jsonl(path: str) -> List[dict]:
  with open(path, encoding="utf-8") as f:
    return [json.loads(line) for line in f if line.strip()]
