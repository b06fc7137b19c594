"""
Command line interface for trackmap.

Usage:
    python -m trackmap summary ride1.gpx run.tcx.gz https://example.com/a.gpx
    python -m trackmap summary *.gpx --strava-csv activities.csv --tooltips
    python -m trackmap merge *.gpx *.fit activities.csv --output all.gpx
"""

import asyncio
import logging
import sys

import click

from trackmap.config import settings
from trackmap.features.strava import enrich_tracks, read_activities_file
from trackmap.features.tracks import (
    build_tooltip,
    collect_tracks,
    format_summary_rows,
    load_many,
    source_kind,
    track_label,
    write_gpx,
)
from trackmap.features.tracks.exceptions import TrackError
from trackmap.features.tracks.loader import is_url, url_file_name
from trackmap.shared.constants import SourceKind

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


@click.group()
def cli():
    """Decode, enrich and merge GPS activity files."""
    setup_logging()


def _partition(sources, strava_csv):
    """Split command line sources into track sources and Strava CSV files."""
    track_sources = []
    csv_files = list(strava_csv)
    for source in sources:
        name = url_file_name(source) if is_url(source) else source
        kind = source_kind(name)
        if kind is SourceKind.STRAVA_CSV and not is_url(source):
            csv_files.append(source)
        elif kind is SourceKind.IMAGE:
            click.echo(f"Skipping image {source}: geotagged images are not handled here")
        else:
            # Unknown extensions still go through the loader, which reports them
            track_sources.append(source)
    return track_sources, csv_files


async def _load(sources, csv_files):
    """Load every source, report failures, apply Strava enrichment."""
    results = await load_many(sources)

    failed = [r for r in results if not r.ok]
    for result in failed:
        click.echo(f"Failed: {result.source}: {result.error}", err=True)

    tracks = collect_tracks(results)
    for csv_file in csv_files:
        try:
            rows = read_activities_file(csv_file)
            tracks = enrich_tracks(tracks, rows)
        except (TrackError, OSError) as e:
            logger.error(f"Failed to apply Strava CSV {csv_file}: {e}")
            click.echo(f"Failed: {csv_file}: {e}", err=True)

    return tracks, failed


@cli.command()
@click.argument("sources", nargs=-1, required=True)
@click.option("--strava-csv", multiple=True, type=click.Path(exists=True, dir_okay=False),
              help="Strava activities.csv to take names, types and durations from")
@click.option("--tooltips", is_flag=True, help="Also print the tooltip text of every track")
def summary(sources, strava_csv, tooltips):
    """
    Load track files and print one report row per track.

    Row format: "name";"date";"elevation gain";"distance km";"url"
    """
    track_sources, csv_files = _partition(sources, strava_csv)
    tracks, failed = asyncio.run(_load(track_sources, csv_files))

    click.echo(format_summary_rows(tracks), nl=False)
    if tooltips:
        for track in tracks:
            click.echo()
            click.echo(track_label(track))
            click.echo(build_tooltip(track))

    if track_sources and len(failed) == len(track_sources):
        sys.exit(1)


@cli.command()
@click.argument("sources", nargs=-1, required=True)
@click.option("--strava-csv", multiple=True, type=click.Path(exists=True, dir_okay=False),
              help="Strava activities.csv to take names, types and durations from")
@click.option("--output", "-o", default=None, type=click.Path(dir_okay=False),
              help="Output GPX path (default: settings.export_filename)")
def merge(sources, strava_csv, output):
    """Load track files and merge them into a single GPX file."""
    track_sources, csv_files = _partition(sources, strava_csv)
    tracks, failed = asyncio.run(_load(track_sources, csv_files))

    if not tracks:
        click.echo("No tracks loaded, nothing to merge.", err=True)
        sys.exit(1)

    path = write_gpx(tracks, output)
    click.echo(f"Merged {len(tracks)} tracks into {path}")
    if failed:
        click.echo(f"{len(failed)} source(s) failed to load", err=True)


if __name__ == "__main__":
    cli()
