# src/cli/runner.py

"""Headless runner for the fetch and export stages."""

import logging
from pathlib import Path

from rich.console import Console
from rich.table import Table

from src.config.settings import Settings
from src.errors import BazaarFeedError
from src.services.bazaar_client import BazaarClient
from src.services.pipeline import (
    ExportSummary,
    FetchSummary,
    export_newest,
    fetch_and_store,
)
from src.storage.snapshot_store import SnapshotStore

logger = logging.getLogger("bazaar_feed.cli")

# Status messages go to stderr
_err = Console(stderr=True)


def _print_fetch(summary: FetchSummary) -> None:
    status = "[green]yes[/green]" if summary.ok else "[yellow]no[/yellow]"
    _err.print(f"[bold]Success:[/bold] {status}")
    _err.print(f"[bold]Last updated:[/bold] {summary.last_updated}")
    _err.print(f"[bold]Products:[/bold] {summary.product_count:,}")
    _err.print(f"[dim]Saved snapshot → {summary.snapshot_path}[/dim]")


def _print_export(summary: ExportSummary) -> None:
    table = Table(
        title="CSV Export",
        show_header=False,
        title_style="bold cyan",
    )
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Snapshot", summary.snapshot_path.name)
    table.add_row("Last updated", str(summary.last_updated))
    table.add_row("Products", f"{summary.product_count:,}")
    table.add_row("CSV", str(summary.csv_path))
    _err.print(table)


def run_pipeline(
    fetch: bool = True,
    export: bool = True,
    raw_dir: str | None = None,
    output: str | None = None,
    url: str | None = None,
    sort_rows: bool = False,
) -> int:
    """Run the requested stages in order; return an exit code.

    The first failing stage aborts the run.  Its error is printed to
    stderr and logged with a traceback.
    """
    store = SnapshotStore(Path(raw_dir) if raw_dir else None)
    csv_path = Path(output) if output else Settings.CSV_PATH

    try:
        if fetch:
            client = BazaarClient(url=url)
            try:
                with _err.status("Fetching bazaar feed..."):
                    fetch_summary = fetch_and_store(client, store)
            finally:
                client.close()
            _print_fetch(fetch_summary)

        if export:
            export_summary = export_newest(
                store, csv_path, sort_by_product_id=sort_rows,
            )
            _print_export(export_summary)
    except BazaarFeedError as exc:
        logger.error("Run aborted: %s", exc, exc_info=True)
        _err.print(f"[red]Error ({type(exc).__name__}): {exc}[/red]")
        return 1

    return 0
