import sys

import click

from ..io import DaylightRow, read_rows


@click.command()
@click.option("--table", required=True, type=click.Path(exists=True))
def main(table):
  try:
    rows = [DaylightRow(**r) for r in read_rows(table)]
  except ValueError as e:
    click.echo(f"ERROR: {e}", err=True)
    sys.exit(1)
  if not rows:
    click.echo("ERROR: no rows found in table", err=True)
    sys.exit(1)
  bad = [r for r in rows if not r.is_ordered()]
  for r in bad:
    click.echo(f"ERROR: {r.location} {r.date}: events out of order", err=True)
  if bad:
    sys.exit(1)
  click.echo(f"Checked {len(rows)} rows")
  click.echo("Validation OK")


if __name__ == "__main__":
  main()
