"""
Errors raised while scraping a target or writing its results.
"""


class MapperError(Exception):
    """Base class for every error the mapper reports and recovers from."""


class ScrapeError(MapperError):
    """A target could not be turned into a Result."""


class NetworkError(ScrapeError):
    """The HTTP request could not be completed."""


class DecodeError(ScrapeError):
    """The response body is not a usable wp-json document."""


class WriteError(MapperError):
    """An output file could not be created or written."""
