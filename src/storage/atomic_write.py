# src/storage/atomic_write.py

"""Write-to-temp-then-rename helper shared by the storage modules."""

import os
import tempfile
from pathlib import Path


def atomic_write_text(path: Path, text: str, newline: str | None = None) -> None:
    """Replace *path* with *text* so readers never see a partial file.

    The temporary file is hidden (dot-prefixed) and lives in the same
    directory as *path*, so the final ``os.replace`` is a same-volume
    rename.  Raises ``OSError`` on failure; the temp file is removed.
    """
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent,
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline=newline) as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
