# tests/conftest.py

"""Shared pytest fixtures for all bazaar_feed tests."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_paths(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> Generator[Path, None, None]:
    """Point every configured output path at a per-test temp dir."""
    monkeypatch.setattr(Settings, "LOGS_DIR", tmp_path / "logs")
    monkeypatch.setattr(Settings, "RAW_DIR", tmp_path / "raw")
    monkeypatch.setattr(Settings, "CSV_PATH", tmp_path / "bazaar.csv")
    yield tmp_path
    root_logger = logging.getLogger("bazaar_feed")
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)
