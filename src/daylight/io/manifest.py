import hashlib
import json
import os
from typing import Optional


def file_digest(path: str) -> str:
  h = hashlib.sha256()
  with open(path, "rb") as f:
    for chunk in iter(lambda: f.read(1 << 16), b""):
      h.update(chunk)
  return h.hexdigest()[:16]


def write_manifest(path: str, meta: dict, table_path: Optional[str] = None):
  """Write `meta` as JSON, stamped with a hash of itself and of the table file."""
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  if table_path and os.path.exists(table_path):
    meta["table_sha256"] = file_digest(table_path)
  s = json.dumps(meta, sort_keys=True).encode()
  meta["dataset_hash"] = hashlib.sha256(s).hexdigest()[:16]
  with open(path, "w", encoding="utf-8") as f:
    json.dump(meta, f, indent=2)


def read_manifest(path: str) -> dict:
  with open(path, encoding="utf-8") as f:
    return json.load(f)
