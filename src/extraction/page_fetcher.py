"""
Page Fetcher

Fetches source pages over HTTP with an on-disk HTML cache.

The cache is always written after a successful fetch but only read when
`use_cache` is enabled (USE_CACHE=true for the scrape script), so repeat
runs during development avoid hitting the sources.
"""

from __future__ import annotations

import logging
import os

import requests

from ..common.constants import USER_AGENT
from ..common.text_utils import sanitize_filename

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetches HTML for scrape sources, with an optional read-through cache."""

    def __init__(
        self,
        cache_dir: str = "_cache",
        use_cache: bool = False,
        timeout: int = 30,
        session: requests.Session | None = None,
    ):
        """
        Initialize the fetcher.

        Args:
            cache_dir: Directory for cached page HTML
            use_cache: Serve cached HTML instead of fetching when available
            timeout: Request timeout in seconds
            session: Shared requests session (created if omitted)
        """
        self.cache_dir = cache_dir
        self.use_cache = use_cache
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

        os.makedirs(cache_dir, exist_ok=True)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self) -> None:
        self.session.close()

    def cache_path(self, source_name: str) -> str:
        return os.path.join(self.cache_dir, f"{sanitize_filename(source_name)}.html")

    def fetch(self, source_name: str, url: str) -> str:
        """
        Return the HTML for a source page.

        Args:
            source_name: Human-readable source name (used as cache key)
            url: Page URL

        Returns:
            Page HTML

        Raises:
            requests.RequestException: If the request fails
        """
        cache_file = self.cache_path(source_name)

        if self.use_cache and os.path.exists(cache_file):
            logger.info("Using cached data for %s", source_name)
            with open(cache_file, "r", encoding="utf-8") as f:
                return f.read()

        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        html = response.text

        with open(cache_file, "w", encoding="utf-8") as f:
            f.write(html)

        return html
