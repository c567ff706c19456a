# src/errors.py

"""Error hierarchy for the bazaar feed pipeline."""


class BazaarFeedError(Exception):
    """Base exception for every failure raised by this project."""


class NetworkError(BazaarFeedError):
    """The feed request failed or returned a non-200 status."""


class SchemaError(BazaarFeedError, ValueError):
    """A payload is missing a required field or has the wrong shape."""


class StorageError(BazaarFeedError, OSError):
    """A snapshot or CSV file could not be created, read, or written."""


class SnapshotNotFoundError(BazaarFeedError, FileNotFoundError):
    """No snapshot file exists in the snapshot directory."""


class DivisionByZeroError(BazaarFeedError, ZeroDivisionError):
    """A FixedPoint value was divided by a zero-valued FixedPoint."""
