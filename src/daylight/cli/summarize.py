import click

from ..io.manifest import read_manifest


def _hm(seconds) -> str:
  minutes = int(seconds) // 60
  return f"{minutes // 60}:{minutes % 60:02d}"


@click.command()
@click.option("--manifest", required=True, type=click.Path(exists=True))
def main(manifest):
  m = read_manifest(manifest)
  s = m.get("summary", {})
  loc = m.get("location", {})
  click.echo(f"{loc.get('name')} ({loc.get('latitude')}, {loc.get('longitude')}), year {m.get('year')}")
  if not s.get("days"):
    click.echo("No days in table")
    return
  width = 18
  click.echo("Days".ljust(width) + f" | {s['days']}")
  click.echo("Shortest day".ljust(width) + f" | {s['shortest']['date']} ({_hm(s['shortest']['day_length_s'])})")
  click.echo("Longest day".ljust(width) + f" | {s['longest']['date']} ({_hm(s['longest']['day_length_s'])})")
  click.echo("Mean day length".ljust(width) + f" | {_hm(s['mean_day_length_s'])}")
  click.echo("Polar night days".ljust(width) + f" | {s['polar_night_days']}")
  click.echo("Polar day days".ljust(width) + f" | {s['polar_day_days']}")
  click.echo("Declination".ljust(width) + f" | {s['declination_min']:.2f}° .. {s['declination_max']:.2f}°")


if __name__ == "__main__":
  main()
