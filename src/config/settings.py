# src/config/settings.py

"""Central configuration for the bazaar_feed pipeline."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the bazaar_feed pipeline."""

    # --- Feed ---
    BAZAAR_URL: str = os.getenv(
        "BAZAAR_URL", "https://api.hypixel.net/v2/skyblock/bazaar"
    )
    REQUEST_TIMEOUT: int = int(
        os.getenv("BAZAAR_REQUEST_TIMEOUT", "15")
    )                                   # Seconds before the GET gives up

    # --- Browser Impersonation ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
    }

    # --- Paths (relative to the working directory) ---
    RAW_DIR: Path = Path(os.getenv("BAZAAR_RAW_DIR", "raw"))
    CSV_PATH: Path = Path(os.getenv("BAZAAR_CSV_PATH", "bazaar.csv"))
    LOGS_DIR: Path = Path(os.getenv("BAZAAR_LOGS_DIR", "logs"))
