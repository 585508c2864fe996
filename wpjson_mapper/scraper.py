"""
Scraper Module

Runs fetch, decode and walk for a single target site.
"""

from typing import Optional

from .errors import DecodeError
from .fetcher import WpJsonFetcher
from .walker import Result, decode_document, walk


class WpJsonScraper:
    """Turns a target site into a Result."""

    def __init__(
        self,
        fetcher: Optional[WpJsonFetcher] = None,
        discover: bool = False,
        verbose: bool = False,
    ):
        """
        Initialize the scraper.

        Args:
            fetcher: Fetcher to use (a default one is created if omitted)
            discover: Look up the advertised API root when /wp-json is not JSON
            verbose: Enable verbose logging
        """
        self.fetcher = fetcher or WpJsonFetcher(verbose=verbose)
        self.discover = discover
        self.verbose = verbose

    def scrape(self, target: str) -> Result:
        """
        Scrape the wp-json document of a target site.

        Args:
            target: Site URL as given by the user

        Returns:
            Unsorted Result for the target

        Raises:
            NetworkError: If a request fails
            DecodeError: If no usable wp-json document is found
        """
        api_url = self.fetcher.build_api_url(target)
        body = self.fetcher.fetch(target)

        try:
            document = decode_document(body)
        except DecodeError:
            if not self.discover:
                raise
            discovered_url = self._discover(target, api_url)
            if discovered_url is None:
                raise
            api_url = discovered_url
            document = decode_document(self.fetcher.fetch_url(api_url))

        result = walk(document)
        result.target = target
        result.api_url = api_url

        if self.verbose:
            print(
                f"    🔗 Found {len(result.endpoints)} endpoints and {len(result.hrefs)} href URLs"
            )

        return result

    def _discover(self, target: str, tried_url: str) -> Optional[str]:
        if self.verbose:
            print(f"    🔎 {tried_url} is not JSON, looking for the advertised API root")

        root = self.fetcher.discover_api_root(target)
        if root is None or root.rstrip("/") == tried_url.rstrip("/"):
            return None
        return root
