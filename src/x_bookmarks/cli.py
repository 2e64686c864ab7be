"""CLI interface for x-bookmarks.

Commands:
    convert - Convert a bookmarks JSON export to markdown
    filter  - Filter a bookmarks JSON export by date range

Both commands are also installed as standalone scripts
(x-bookmarks-to-md and x-bookmarks-filter).
"""

import logging
import sys
from pathlib import Path

import click

from .config import DEFAULT_INPUT_FILE, DateRange, default_output_file, resolve_date_range
from .dates import InvalidDateFormat
from .filtering import filter_by_date
from .loader import dump_bookmarks, load_bookmarks
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

# Unknown flags are passed through as positional tokens and then ignored
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
}

CONVERT_EPILOG = """\b
Examples:
  x-bookmarks-to-md bookmarks.json
  x-bookmarks-to-md bookmarks.json --from 2026-01-15
  x-bookmarks-to-md bookmarks.json --from 2026-01-15 --to 2026-01-22 -o weekly.md
"""

FILTER_EPILOG = """\b
Examples:
  x-bookmarks-filter bookmarks.json --from 2026-01-15
  x-bookmarks-filter bookmarks.json --from 2026-01-15 --to 2026-01-22
  x-bookmarks-filter bookmarks.json --to 2026-01-20 -o filtered.json
"""


def _pick_input_file(args: tuple[str, ...]) -> str | None:
    """Pick the input path: the first token that is not a flag."""
    input_file = None
    ignored = []
    for arg in args:
        if input_file is None and not arg.startswith("-"):
            input_file = arg
        else:
            ignored.append(arg)
    if ignored:
        logger.debug("Ignoring unrecognized arguments: %s", " ".join(ignored))
    return input_file


def _resolve_dates_or_exit(from_: str | None, to: str | None) -> DateRange:
    try:
        return resolve_date_range(from_, to)
    except InvalidDateFormat as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _date_options(func):
    func = click.option(
        "--to", "to", metavar="YYYY-MM-DD", default=None,
        help="Include bookmarks up to this date (inclusive)",
    )(func)
    func = click.option(
        "--from", "from_", metavar="YYYY-MM-DD", default=None,
        help="Include bookmarks from this date (inclusive)",
    )(func)
    return func


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def main():
    """X Bookmarks: convert and filter bird bookmark exports."""


@main.command(context_settings=CONTEXT_SETTINGS, epilog=CONVERT_EPILOG)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "-o", "--output", type=click.Path(), default=None,
    help="Output file (default: bookmarks-YYYY-MM-DD.md)",
)
@_date_options
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def convert(args, output, from_, to, verbose):
    """Convert X/Twitter bookmarks JSON to Markdown.

    ARGS is the input JSON file (default: bookmarks.json).
    """
    setup_logging(debug=verbose)
    input_file = _pick_input_file(args)
    date_range = _resolve_dates_or_exit(from_, to)

    input_path = Path(input_file) if input_file else DEFAULT_INPUT_FILE
    output_path = Path(output) if output else default_output_file()

    if not input_path.exists():
        click.echo(f'Error: Input file "{input_path}" not found', err=True)
        click.echo("Usage: x-bookmarks-to-md <input.json> [options]", err=True)
        sys.exit(1)

    # Lazy import so --help stays fast
    from .markdown import render_bookmarks_file

    try:
        bookmarks = load_bookmarks(input_path)
        original_count = len(bookmarks)
        bookmarks = filter_by_date(bookmarks, date_range.from_date, date_range.to_date)

        markdown = render_bookmarks_file(bookmarks)
        output_path.write_text(markdown, encoding="utf-8")
    except (OSError, ValueError) as e:
        click.echo(f"Error processing bookmarks: {e}", err=True)
        sys.exit(1)

    if date_range.is_bounded:
        click.echo(f"Filtered {original_count} → {len(bookmarks)} bookmarks")
    click.echo(f"Successfully converted {len(bookmarks)} bookmarks to {output_path}")


@main.command("filter", context_settings=CONTEXT_SETTINGS, epilog=FILTER_EPILOG)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@_date_options
@click.option(
    "-o", "--output", type=click.Path(), default=None,
    help="Output to file (default: stdout)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def filter_command(ctx, args, from_, to, output, verbose):
    """Filter X/Twitter bookmarks JSON by date range.

    ARGS is the input JSON file. The filtered JSON goes to stdout unless
    -o is given; counts are always reported on stderr.
    """
    if not (args or from_ or to or output or verbose):
        click.echo(ctx.get_help())
        ctx.exit(0)

    setup_logging(debug=verbose)
    input_file = _pick_input_file(args)
    date_range = _resolve_dates_or_exit(from_, to)

    if not input_file:
        click.echo("Error: Input file required", err=True)
        sys.exit(1)

    input_path = Path(input_file)
    if not input_path.exists():
        click.echo(f'Error: Input file "{input_path}" not found', err=True)
        sys.exit(1)

    if not date_range.is_bounded:
        click.echo("Error: At least one of --from or --to is required", err=True)
        sys.exit(1)

    try:
        bookmarks = load_bookmarks(input_path)
        filtered = filter_by_date(bookmarks, date_range.from_date, date_range.to_date)
        payload = dump_bookmarks(filtered)

        if output:
            output_path = Path(output)
            output_path.write_text(payload, encoding="utf-8")
    except (OSError, ValueError) as e:
        click.echo(f"Error processing bookmarks: {e}", err=True)
        sys.exit(1)

    if output:
        click.echo(f"Filtered {len(bookmarks)} → {len(filtered)} bookmarks", err=True)
        click.echo(f"Output written to {output_path}", err=True)
    else:
        click.echo(payload)
        click.echo(f"\nFiltered {len(bookmarks)} → {len(filtered)} bookmarks", err=True)
