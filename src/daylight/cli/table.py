from pathlib import Path
import logging

import click

from ..core.summary import summarize_rows
from ..core.timebase import Timebase
from ..io.manifest import write_manifest
from ..io.table import daylight_table
from ..io.write_jsonl import write_jsonl
from ..io.write_parquet import write_daylight_parquet
from .common import resolve_location, setup_logging

logger = logging.getLogger(__name__)


@click.command()
@click.option("--location")
@click.option("--config", type=click.Path(exists=True))
@click.option("--lat", type=float)
@click.option("--lon", type=float)
@click.option("--year", required=True, type=int)
@click.option("--out", "out_dir", default="out/", type=click.Path(file_okay=False))
@click.option("--format", "fmt", default="jsonl", type=click.Choice(["jsonl", "parquet"]))
@click.option("--verbose", is_flag=True)
def main(location, config, lat, lon, year, out_dir, fmt, verbose):
  setup_logging(verbose)
  loc = resolve_location(location, config, lat, lon)
  tb = Timebase.for_year(year)
  rows = daylight_table(loc, tb)
  logger.info("Computed %d days for %s", len(rows), loc.name)

  slug = loc.name.lower().replace(" ", "_").replace(",", "_")
  base = Path(out_dir) / f"{year:04d}"
  table_path = base / f"daylight_{slug}_{year:04d}.{fmt}"
  if fmt == "parquet":
    write_daylight_parquet(rows, str(table_path))
  else:
    write_jsonl(rows, str(table_path))

  meta = {
    "location": loc.model_dump(),
    "year": year,
    "format": fmt,
    "table": table_path.name,
    "summary": summarize_rows(rows),
  }
  write_manifest(str(base / "manifest.json"), meta, str(table_path))
  click.echo(f"Done. Wrote {len(rows)} rows to {table_path}")


if __name__ == "__main__":
  main()
