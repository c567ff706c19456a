# src/config/logging_config.py

"""Logging for one bazaar_feed run.

A run is at most two stages, fetch-and-store then load-and-export,
and both write to the same ``logs/run_<YYYYmmdd_HHMMSS>.log``.  The
file keeps everything down to DEBUG (request URL, snapshot path,
product counts, tracebacks of aborted runs).  The terminal only shows
WARNING and above, so the rich status output stays readable; pass
``verbose=True`` to echo the INFO stage summaries as well.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

LOGGER_NAME = "bazaar_feed"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _run_log_path(logs_dir: Path) -> Path:
    """Log file for a run started now, e.g. ``run_20260214_153045.log``."""
    return logs_dir / f"run_{datetime.now():%Y%m%d_%H%M%S}.log"


def setup_logging(verbose: bool = False) -> Path:
    """Attach the run-log and stderr handlers to ``bazaar_feed``.

    Args:
        verbose: Show INFO stage summaries on stderr, not just warnings.

    Returns:
        The path of this run's log file.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = _run_log_path(logs_dir)

    feed_logger = logging.getLogger(LOGGER_NAME)
    feed_logger.setLevel(logging.DEBUG)

    # One handler set per process
    if feed_logger.handlers:
        return log_file

    run_log = logging.FileHandler(log_file, encoding="utf-8")
    run_log.setLevel(logging.DEBUG)
    run_log.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))

    terminal = logging.StreamHandler(sys.stderr)
    terminal.setLevel(logging.INFO if verbose else logging.WARNING)
    terminal.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    feed_logger.addHandler(run_log)
    feed_logger.addHandler(terminal)

    feed_logger.info(
        "Run log %s (raw_dir=%s, csv_path=%s)",
        log_file,
        Settings.RAW_DIR,
        Settings.CSV_PATH,
    )
    return log_file
