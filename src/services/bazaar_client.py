# src/services/bazaar_client.py

"""HTTP client for the public bazaar price feed."""

import json
import logging
from typing import Any

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.errors import NetworkError, SchemaError
from src.models.catalog import CatalogSnapshot, parse_catalog


class BazaarClient:
    """Fetches the bazaar feed with a single blocking GET.

    There is no retry: a failed request surfaces as
    :class:`NetworkError` and the run aborts.
    """

    def __init__(
        self, url: str | None = None, timeout: int | None = None,
    ) -> None:
        self.logger = logging.getLogger("bazaar_feed.client")
        self.settings = Settings()
        self.url = url or self.settings.BAZAAR_URL
        self.timeout = timeout or self.settings.REQUEST_TIMEOUT
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )

    def fetch_payload(self) -> Any:
        """GET the feed and return the decoded JSON body.

        Raises:
            NetworkError: on transport failure or a non-200 status.
            SchemaError: if the body is not JSON.
        """
        self.logger.debug("GET %s (timeout=%ss)", self.url, self.timeout)
        try:
            resp = self.session.get(
                self.url,
                headers=self.settings.DEFAULT_HEADERS,
                timeout=self.timeout,
            )
        except Exception as exc:
            self.logger.error(
                "Request to %s failed: %s", self.url, exc, exc_info=True,
            )
            raise NetworkError(f"Request to {self.url} failed: {exc}") from exc

        if resp.status_code != 200:
            self.logger.error(
                "HTTP %d from %s", resp.status_code, self.url,
            )
            raise NetworkError(
                f"HTTP {resp.status_code} from {self.url}"
            )

        try:
            return json.loads(resp.text)
        except json.JSONDecodeError as exc:
            raise SchemaError(
                f"Response from {self.url} is not valid JSON: {exc}"
            ) from exc

    def fetch(self) -> CatalogSnapshot:
        """Fetch the feed and parse it into a :class:`CatalogSnapshot`."""
        return parse_catalog(self.fetch_payload())

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
