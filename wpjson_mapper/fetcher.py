"""
Fetcher Module

Retrieves the REST API discovery document (the wp-json root) of a
WordPress site. Can also look up the API root a site advertises when it
is not served at the conventional location.
"""

import requests
from urllib.parse import urljoin
from typing import Optional
from bs4 import BeautifulSoup

from .errors import NetworkError


WP_JSON_SUFFIX = "/wp-json"

# Link relation WordPress uses to advertise its REST API root
API_LINK_REL = "https://api.w.org/"


class WpJsonFetcher:
    """Fetches wp-json documents over HTTP."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        verbose: bool = False,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds (None leaves the socket default)
            verbose: Enable verbose logging
            session: Existing session to reuse
        """
        self.timeout = timeout
        self.verbose = verbose
        self.session = session or requests.Session()

    @staticmethod
    def build_api_url(target: str) -> str:
        """
        Build the wp-json URL for a target site.

        Args:
            target: Site URL as given by the user

        Returns:
            The target without trailing slashes, followed by /wp-json
        """
        return target.rstrip("/") + WP_JSON_SUFFIX

    def fetch(self, target: str) -> bytes:
        """
        Fetch the wp-json document of a target site.

        Args:
            target: Site URL as given by the user

        Returns:
            Raw response body

        Raises:
            NetworkError: If the request fails
        """
        return self.fetch_url(self.build_api_url(target))

    def fetch_url(self, url: str) -> bytes:
        """
        Fetch a URL and return its body.

        The status code is not checked: error pages are returned like any
        other body and fail later, when they are decoded.

        Args:
            url: Absolute URL to fetch

        Returns:
            Raw response body

        Raises:
            NetworkError: If the request fails
        """
        response = self._get(url)

        if self.verbose:
            if 200 <= response.status_code < 300:
                print(f"    ✅ HTTP {response.status_code}: {url}")
            else:
                print(f"    ⚠️  HTTP {response.status_code}: {url}")

        return response.content

    def discover_api_root(self, target: str) -> Optional[str]:
        """
        Look up the REST API root advertised by a site's home page.

        WordPress announces it both in a Link response header and in a
        <link> tag of the page head, with rel="https://api.w.org/".

        Args:
            target: Site URL as given by the user

        Returns:
            The advertised API root (resolved against the home page), or None
            if the site advertises none

        Raises:
            NetworkError: If the home page cannot be fetched
        """
        home_url = target.rstrip("/") + "/"
        response = self._get(home_url)

        link = response.links.get(API_LINK_REL)
        if link and link.get("url"):
            root = urljoin(home_url, link["url"])
            if self.verbose:
                print(f"    🔎 API root from Link header: {root}")
            return root

        content_type = response.headers.get("content-type", "").lower()
        if "html" not in content_type:
            return None

        soup = BeautifulSoup(response.text, "html.parser")
        for tag in soup.find_all("link", href=True):
            if API_LINK_REL in (tag.get("rel") or []):
                href = tag["href"].strip()
                if href:
                    href = urljoin(home_url, href)
                    if self.verbose:
                        print(f"    🔎 API root from <link> tag: {href}")
                    return href

        return None

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.session.close()

    def _get(self, url: str) -> requests.Response:
        if self.verbose:
            print(f"  📄 Fetching: {url}")

        try:
            return self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(f"{url}: {e}") from e
