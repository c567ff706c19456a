# src/services/pipeline.py

"""The two pipeline stages: fetch-and-store, then load-and-export."""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from src.models.catalog import CatalogSnapshot
from src.services.bazaar_client import BazaarClient
from src.storage.csv_exporter import export_csv
from src.storage.snapshot_store import SnapshotStore

logger = logging.getLogger("bazaar_feed.pipeline")


@dataclass
class FetchSummary:
    """Outcome of one fetch-and-store run."""

    ok: bool
    last_updated: int
    product_count: int
    snapshot_path: Path


@dataclass
class ExportSummary:
    """Outcome of one load-and-export run."""

    snapshot_path: Path
    last_updated: int
    product_count: int
    csv_path: Path


def fetch_and_store(
    client: BazaarClient,
    store: SnapshotStore,
    now: datetime | None = None,
) -> FetchSummary:
    """Fetch the feed once and persist it as a new snapshot."""
    snapshot: CatalogSnapshot = client.fetch()

    logger.info("Success: %s", snapshot.ok)
    logger.info("Last updated: %d", snapshot.as_of_epoch_millis)
    logger.info("Number of products: %d", len(snapshot.products))
    if not snapshot.ok:
        logger.warning(
            "Feed reported success=false; persisting snapshot anyway"
        )

    path = store.write(snapshot, now)
    logger.info("Response saved to: %s", path)

    return FetchSummary(
        ok=snapshot.ok,
        last_updated=snapshot.as_of_epoch_millis,
        product_count=len(snapshot.products),
        snapshot_path=path,
    )


def export_newest(
    store: SnapshotStore,
    csv_path: Path,
    sort_by_product_id: bool = False,
) -> ExportSummary:
    """Export the newest stored snapshot to *csv_path*."""
    snapshot_path = store.newest_path()
    snapshot = store.load(snapshot_path)
    written = export_csv(snapshot, csv_path, sort_by_product_id)

    return ExportSummary(
        snapshot_path=snapshot_path,
        last_updated=snapshot.as_of_epoch_millis,
        product_count=len(snapshot.products),
        csv_path=written,
    )
