"""
Sorter Module

Puts extracted endpoints and href URLs in ascending order.
"""

from typing import List

from .walker import Result


def sort_strings(values: List[str]) -> List[str]:
    """Sort a list of strings in place (duplicates kept) and return it."""
    values.sort()
    return values


def sort_results(results: List[Result]) -> List[Result]:
    """
    Sort the endpoints and href URLs of every result in place.

    Args:
        results: Batch of results

    Returns:
        The same batch
    """
    for result in results:
        sort_strings(result.endpoints)
        sort_strings(result.hrefs)
    return results
