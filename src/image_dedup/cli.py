"""Command-line interface for image-dedup."""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from image_dedup import __version__
from image_dedup.core.detector import HASH_METHODS, RESIZE_FILTERS
from image_dedup.core.models import RunResult
from image_dedup.core.runner import DuplicateRunner
from image_dedup.utils.config import Config
from image_dedup.utils.logger import configure_logging, setup_logger

console = Console()
err_console = Console(stderr=True)
logger = setup_logger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="image-dedup")
@click.argument(
    "directories",
    nargs=-1,
    type=click.Path(path_type=Path),
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write detailed logs to this file",
)
@click.option(
    "--algorithm",
    "-m",
    type=click.Choice(sorted(HASH_METHODS), case_sensitive=False),
    default="dhash",
    show_default=True,
    help="Perceptual hash algorithm (dhash is the gradient hash)",
)
@click.option(
    "--resize-filter",
    type=click.Choice(sorted(RESIZE_FILTERS), case_sensitive=False),
    default="triangle",
    show_default=True,
    help="Filter used to shrink images before hashing",
)
@click.option(
    "--workers",
    "-j",
    type=click.IntRange(min=1),
    help="Directories processed in parallel (default: CPU count)",
)
@click.option(
    "--show-progress/--no-progress",
    default=True,
    help="Show progress bars",
)
@click.option(
    "--summary/--no-summary",
    default=False,
    help="Print a table of per-directory results",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file for the run summary (JSON)",
)
def cli(
    directories: tuple,
    verbose: bool,
    log_file: Optional[Path],
    algorithm: str,
    resize_filter: str,
    workers: Optional[int],
    show_progress: bool,
    summary: bool,
    output: Optional[Path],
) -> None:
    """
    Move visually duplicate images into a 'duplicates' folder.

    Each DIRECTORY is checked independently: images inside it (not in
    sub-directories) that share a perceptual hash are all moved to
    DIRECTORY/duplicates for review.

    Example:
        image-dedup ~/Pictures/2023 ~/Pictures/2024
    """
    if verbose or log_file:
        configure_logging(logging.DEBUG if verbose else logging.INFO, log_file)

    if not directories:
        err_console.print("Missing argument: directory. Try '--help' for more info.")
        return

    config = Config(
        {
            "hash.algorithm": algorithm.lower(),
            "hash.resize_filter": resize_filter.lower(),
            "max_workers": workers,
            "show_progress": show_progress,
        }
    )

    results = DuplicateRunner(config).run(directories)

    for result in results:
        _report_result(result)

    if summary:
        _display_summary(results)

    if output:
        try:
            _save_results_json(results, output)
        except OSError as e:
            err_console.print(f"[red]Error saving results:[/red] {escape(str(e))}")
            sys.exit(1)
        console.print(f"Results saved to: {escape(str(output))}", soft_wrap=True)


def _report_result(result: RunResult) -> None:
    """Print the outcome of one directory."""
    directory = escape(str(result.directory))

    if not result.ok:
        err_console.print(
            f"[red]Error processing {directory}:[/red] {escape(str(result.error))}",
            soft_wrap=True,
        )
        return

    for issue in result.issues:
        err_console.print(
            f"[yellow]Warning:[/yellow] {escape(issue.describe())}", soft_wrap=True
        )

    if not result.duplicates_found:
        console.print(f"No duplicates found in {directory}", soft_wrap=True)


def _display_summary(results: List[RunResult]) -> None:
    """Display per-directory results in a table."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Directory")
    table.add_column("Status")
    table.add_column("Images", justify="right")
    table.add_column("Hashed", justify="right")
    table.add_column("Groups", justify="right")
    table.add_column("Moved", justify="right")
    table.add_column("Warnings", justify="right")

    for result in results:
        status = "[green]ok[/green]" if result.ok else "[red]failed[/red]"
        table.add_row(
            escape(str(result.directory)),
            status,
            str(result.scanned),
            str(result.hashed),
            str(result.duplicate_groups),
            str(len(result.moved)),
            str(len(result.issues)),
        )

    console.print(table)


def _save_results_json(results: List[RunResult], output_path: Path) -> None:
    """Save run results to a JSON file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump([result.to_dict() for result in results], f, indent=2)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
