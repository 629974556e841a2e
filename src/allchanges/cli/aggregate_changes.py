#!/usr/bin/env python3
"""Command-line tool for aggregating per-version changelog files.

Merges ``CHANGES-<version>.md`` files into a single chronologically ordered
``ALL_CHANGES--<start>-to--<end>.md`` file, optionally on top of the latest
existing aggregate and optionally restricted to a version range.
"""

import sys
from typing import NoReturn

import click
from pydantic import ValidationError

from allchanges.changes.aggregator import ChangesAggregator
from allchanges.changes.models import AggregationResult
from allchanges.changes.naming import DEFAULT_DIRECTORY
from allchanges.changes.versions import parse_bound
from allchanges.config import AggregatorConfig
from allchanges.system.file_manager import FileManager
from allchanges.system.structlog_configurator import configure_structlog, get_logger

logger = get_logger(__name__)


def _validate_version_bound(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> str | None:
    """Reject range bounds that are not valid versions."""
    if value is None or not value.strip():
        return None
    try:
        parse_bound(value)
    except ValueError as e:
        raise click.BadParameter(f"Invalid version string: {e}") from e
    return value.strip()


def print_summary(result: AggregationResult) -> None:
    """Print the aggregation summary block.

    Args:
        result: Outcome of the aggregation run
    """
    click.echo("--- Aggregation Summary ---")
    click.echo(f"Source/Output Directory: {result.target_dir}")
    click.echo(f"Build Mode: {result.build_mode}")
    if not result.version_range.is_empty:
        click.echo(f"Version Filter: {result.version_range.describe()}")
    click.echo(
        f"Versions Included: {len(result.versions)} "
        f"(Range: {result.min_version} to {result.max_version})"
    )
    click.echo(f"Output File: {result.output_path}")
    click.echo("--------------------------")


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"✗ {message}", fg="red", bold=True), err=True)
    sys.exit(1)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-d",
    "--directory",
    default=DEFAULT_DIRECTORY,
    show_default=True,
    help="Directory for individual and aggregated CHANGES files (input/output)",
)
@click.option(
    "--sv",
    "--start-version",
    "start_version",
    callback=_validate_version_bound,
    help="Minimum version (inclusive) to include in the output",
)
@click.option(
    "--ev",
    "--end-version",
    "end_version",
    callback=_validate_version_bound,
    help="Maximum version (inclusive) to include in the output",
)
@click.option(
    "-b",
    "--build-from-files",
    is_flag=True,
    help="Ignore existing aggregated files and build fresh only from individual files found",
)
@click.option(
    "--dr",
    "--dry-run",
    "dry_run",
    is_flag=True,
    help="Show what would be done without writing any files",
)
def cli(
    directory: str,
    start_version: str | None,
    end_version: str | None,
    build_from_files: bool,
    dry_run: bool,
) -> None:
    """Aggregate CHANGES-<version>.md files into one ALL_CHANGES file.

    Examples:
      # Update the latest aggregate in ./CHANGES with new individual files
      aggregate-changes

      # Rebuild from individual files only, limited to the 2.x series
      aggregate-changes -b --sv 2.0.0 --ev 2

      # Preview the result without writing
      aggregate-changes -d docs/changes --dr
    """
    try:
        config = AggregatorConfig(
            directory=directory,
            start_version=start_version,
            end_version=end_version,
            build_from_files=build_from_files,
            dry_run=dry_run,
        )
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    configure_structlog(config.logging)

    target_dir = config.target_dir
    logger.info("Target directory (Input/Output)", path=str(target_dir))
    logger.info("Starting changes aggregation")

    file_manager = FileManager(target_dir)
    try:
        file_manager.ensure_directory()
    except OSError as e:
        logger.error("Could not create target directory", path=str(target_dir), error=str(e))
        _fail(f"Error: Could not create target directory {target_dir}: {e}")

    if config.dry_run:
        logger.info("Dry Run Mode: No files will be written")

    aggregator = ChangesAggregator(file_manager)
    try:
        result = aggregator.aggregate(config)
    except OSError as e:
        _fail(f"Error writing aggregated changes: {e}")
    except Exception as e:
        logger.exception("An unexpected error occurred")
        _fail(f"Unexpected error: {e}")

    if result.is_empty:
        return

    print_summary(result)
    if config.dry_run:
        click.echo("Dry Run complete. No file written.")
    else:
        click.echo(
            click.style(
                f"✓ Successfully wrote aggregated changes to {result.output_path}",
                fg="green",
            )
        )


def main() -> None:
    """Entry point for the changes aggregation CLI."""
    cli()


if __name__ == "__main__":
    main()
