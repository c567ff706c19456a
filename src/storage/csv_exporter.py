# src/storage/csv_exporter.py

"""Flatten a catalog snapshot into a one-row-per-product CSV."""

import csv
import io
import logging
from pathlib import Path

from src.errors import StorageError
from src.models.catalog import CatalogSnapshot
from src.storage.atomic_write import atomic_write_text

logger = logging.getLogger("bazaar_feed.export")

HEADER: list[str] = [
    "product_id",
    "sell_price",
    "sell_volume",
    "buy_price",
    "buy_volume",
    "sell_orders",
    "buy_orders",
]


def build_rows(
    snapshot: CatalogSnapshot, sort_by_product_id: bool = False,
) -> list[list[str]]:
    """Build the metadata row, the header and one row per product.

    Products follow the mapping's iteration order unless
    *sort_by_product_id* is set.  That order is not guaranteed to be
    stable across feed responses.
    """
    metadata = ["last_updated", str(snapshot.as_of_epoch_millis)]
    metadata += [""] * (len(HEADER) - len(metadata))
    rows: list[list[str]] = [metadata, list(HEADER)]

    items = list(snapshot.products.items())
    if sort_by_product_id:
        items.sort(key=lambda item: item[0])

    for product_id, product in items:
        status = product.status
        rows.append([
            product_id,
            str(status.sell_price),
            str(status.sell_volume),
            str(status.buy_price),
            str(status.buy_volume),
            str(status.sell_order_count),
            str(status.buy_order_count),
        ])
    return rows


def export_csv(
    snapshot: CatalogSnapshot,
    path: Path,
    sort_by_product_id: bool = False,
) -> Path:
    """Write *snapshot* as CSV to *path*, replacing any previous file."""
    rows = build_rows(snapshot, sort_by_product_id)

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(rows)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        atomic_write_text(path, buffer.getvalue(), newline="")
    except OSError as exc:
        raise StorageError(f"Failed to write CSV {path}: {exc}") from exc

    logger.info(
        "Exported %d products to %s", len(rows) - 2, path,
    )
    return path
