"""Consolidated CLI for the timeline tools using a plugin architecture."""

import typer

# Import CLI subcommands from plugins
from timeline_layout.cli import app as timeline_app

# Create main application
app = typer.Typer(
    name="timeline-layout",
    help="Day timeline scheduling and layout tools",
    no_args_is_help=True,
)

# Register plugin subcommands
app.add_typer(timeline_app, name="timeline", help="Resolve and lay out a day timeline")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
