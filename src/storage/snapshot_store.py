# src/storage/snapshot_store.py

"""Directory of timestamped JSON snapshots of the bazaar feed."""

import json
import logging
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings
from src.errors import SchemaError, SnapshotNotFoundError, StorageError
from src.models.catalog import (
    CatalogSnapshot,
    catalog_to_payload,
    parse_catalog_json,
)
from src.storage.atomic_write import atomic_write_text

logger = logging.getLogger("bazaar_feed.storage")


def snapshot_filename(now: datetime) -> str:
    """Return ``YYYYMMDD_SSSSS.json`` for *now*.

    ``SSSSS`` is the zero-padded count of seconds since midnight on
    the wall-clock date of *now* (0-86399).  The fixed width is what
    makes plain string ordering match time ordering.
    """
    seconds = now.hour * 3600 + now.minute * 60 + now.second
    return f"{now:%Y%m%d}_{seconds:05d}.json"


class SnapshotStore:
    """Writes snapshots into one directory and loads the newest one.

    One file per fetch.  Two writes within the same wall-clock second
    share a filename and the later one replaces the earlier.
    """

    def __init__(self, directory: Path | None = None) -> None:
        self.directory: Path = directory or Settings.RAW_DIR
        logger.debug("SnapshotStore initialised, directory=%s", self.directory)

    def write(
        self, snapshot: CatalogSnapshot, now: datetime | None = None,
    ) -> Path:
        """Persist *snapshot* and return the path written.

        ``now`` defaults to the local wall clock.
        """
        stamp = now or datetime.now()
        filepath = self.directory / snapshot_filename(stamp)
        text = json.dumps(catalog_to_payload(snapshot), indent=2)

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            if filepath.exists():
                logger.warning("Overwriting existing snapshot %s", filepath)
            atomic_write_text(filepath, text)
        except OSError as exc:
            raise StorageError(
                f"Failed to write snapshot {filepath}: {exc}"
            ) from exc

        logger.info(
            "Saved snapshot with %d products to %s",
            len(snapshot.products),
            filepath,
        )
        return filepath

    def list_snapshots(self) -> list[Path]:
        """Return candidate snapshot entries sorted by filename.

        Hidden entries (in-flight temp files) are skipped.  Returns an
        empty list when the directory does not exist.
        """
        if not self.directory.is_dir():
            return []
        try:
            entries = [
                p for p in self.directory.iterdir()
                if not p.name.startswith(".")
            ]
        except OSError as exc:
            raise StorageError(
                f"Failed to list {self.directory}: {exc}"
            ) from exc
        return sorted(entries, key=lambda p: p.name)

    def newest_path(self) -> Path:
        """Return the entry with the lexicographically greatest name.

        Raises:
            SnapshotNotFoundError: if there is no candidate entry.
        """
        snapshots = self.list_snapshots()
        if not snapshots:
            raise SnapshotNotFoundError(
                f"No snapshot found in {self.directory}"
            )
        return snapshots[-1]

    def load_newest(self) -> CatalogSnapshot:
        """Load and parse the newest snapshot in the directory."""
        return self.load(self.newest_path())

    def load(self, filepath: Path) -> CatalogSnapshot:
        """Load and parse one snapshot file."""
        try:
            text = filepath.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(
                f"Failed to read snapshot {filepath}: {exc}"
            ) from exc

        try:
            snapshot = parse_catalog_json(text)
        except SchemaError as exc:
            raise SchemaError(f"{filepath.name}: {exc}") from exc

        logger.info(
            "Loaded snapshot %s (%d products, lastUpdated=%d)",
            filepath.name,
            len(snapshot.products),
            snapshot.as_of_epoch_millis,
        )
        return snapshot
