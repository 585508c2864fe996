"""
Writer Module

Writes each result of a batch to a pair of newline-delimited text files.
"""

from pathlib import Path
from typing import Iterable, List, Union

from .errors import WriteError
from .walker import Result


ENDPOINTS_FILE_TEMPLATE = "endpoints_{index}.txt"
HREF_URLS_FILE_TEMPLATE = "href_urls_{index}.txt"


def output_file_names(index: int) -> List[str]:
    """Return the endpoints and href file names for a batch index."""
    return [
        ENDPOINTS_FILE_TEMPLATE.format(index=index),
        HREF_URLS_FILE_TEMPLATE.format(index=index),
    ]


def write_results(
    results: List[Result], output_dir: Union[str, Path] = "."
) -> List[str]:
    """
    Write every result of a batch to disk.

    Result i goes to endpoints_<i>.txt and href_urls_<i>.txt, one entry
    per line. Existing files are overwritten. Writing stops at the first
    failure; files written before it are left in place.

    Args:
        results: Batch of results, usually already sorted
        output_dir: Directory for the output files (created if missing)

    Returns:
        Paths of the files written, in order

    Raises:
        WriteError: If a file cannot be created or written
    """
    output_path = Path(output_dir)
    written = []

    try:
        output_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(f"cannot create output directory {output_path}: {e}") from e

    for index, result in enumerate(results):
        endpoints_name, hrefs_name = output_file_names(index)
        for file_name, lines in (
            (endpoints_name, result.endpoints),
            (hrefs_name, result.hrefs),
        ):
            file_path = output_path / file_name
            _write_lines(file_path, lines)
            written.append(str(file_path))

    return written


def _write_lines(file_path: Path, lines: Iterable[str]) -> None:
    try:
        with open(file_path, "w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(f"{line}\n")
    except OSError as e:
        raise WriteError(f"cannot write {file_path}: {e}") from e
