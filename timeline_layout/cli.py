"""Command-line interface for inspecting day timeline layouts."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from .config import TimelineConfig
from .dtos import DayFile, load_day_file, parse_anchor_overrides
from .errors import TimelineContractError
from .layout_builder import build_timeline_layout
from .layout_printer import format_anchors, format_resolved, print_layout
from .models import RelativeAnchor
from .resolver import compute_anchor_times, resolve

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="timeline",
    help="Resolve activity times and lay out a day timeline",
    no_args_is_help=True,
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load(day_file: Path, anchor: Optional[list[str]]) -> tuple[DayFile, dict[RelativeAnchor, str]]:
    """Load a day file and merge anchor overrides from file and command line."""
    try:
        day = load_day_file(day_file)
        overrides = dict(day.anchors)
        overrides.update(parse_anchor_overrides(anchor or []))
    except (ValidationError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    return day, overrides


@app.command("layout")
def layout(
    day_file: Annotated[
        Path,
        typer.Argument(help="JSON file with the day's activity records", exists=True, readable=True),
    ],
    anchor: Annotated[
        Optional[list[str]],
        typer.Option("--anchor", "-a", help="Anchor time override, e.g. breakfast=07:30"),
    ] = None,
    title: Annotated[
        str,
        typer.Option("--title", help="Title printed above the layout"),
    ] = "Timeline",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose/debug logging"),
    ] = False,
) -> None:
    """Group, resolve and pack a day's activities into lanes."""
    setup_logging(verbose=verbose)
    day, overrides = _load(day_file, anchor)
    records = day.to_records()
    config = TimelineConfig.from_env()

    try:
        anchors = compute_anchor_times(records, config.anchor_times)
        anchors.update(overrides)
        result = build_timeline_layout(records, config=config, anchors=anchors)
    except TimelineContractError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    logger.info(f"Loaded {len(records)} record(s) from {day_file}")
    print_layout(result, title=title)


@app.command("resolve")
def resolve_times(
    day_file: Annotated[
        Path,
        typer.Argument(help="JSON file with the day's activity records", exists=True, readable=True),
    ],
    anchor: Annotated[
        Optional[list[str]],
        typer.Option("--anchor", "-a", help="Anchor time override, e.g. breakfast=07:30"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose/debug logging"),
    ] = False,
) -> None:
    """Print the resolved start/end time of every record."""
    setup_logging(verbose=verbose)
    day, overrides = _load(day_file, anchor)
    records = day.to_records()
    config = TimelineConfig.from_env()

    anchors = compute_anchor_times(records, config.anchor_times)
    anchors.update(overrides)

    typer.echo("Anchors:")
    typer.echo(format_anchors(anchors))
    typer.echo("-" * 80)

    try:
        for record in records:
            resolved = resolve(record.scheduling, anchors, config)
            typer.echo(format_resolved(record.id, record.name, resolved))
    except TimelineContractError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
