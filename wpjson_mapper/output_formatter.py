"""
Output Formatter Module

Formats a scan run into a JSON-serializable summary: per-target counts,
the files each result was written to, and the run parameters.
"""

from pathlib import Path
from typing import List, Dict
from datetime import datetime, timezone

from . import __version__
from .walker import Result
from .writer import output_file_names


class OutputFormatter:
    """Formats scan results into a structured summary."""

    def _format_result(self, index: int, result: Result, written_files: List[str]) -> Dict:
        """
        Format a single result for output.

        Args:
            index: Position of the result in the batch
            result: Result to format
            written_files: Every file path written for the batch

        Returns:
            Formatted result data
        """
        expected_names = output_file_names(index)
        files = [
            path
            for path in written_files
            if Path(path).name in expected_names
        ]

        return {
            "index": index,
            "target": result.target,
            "api_url": result.api_url,
            "endpoint_count": len(result.endpoints),
            "unique_endpoint_count": len(set(result.endpoints)),
            "href_count": len(result.hrefs),
            "unique_href_count": len(set(result.hrefs)),
            "files": files,
        }

    def _generate_scan_summary(
        self, results: List[Result], failed_targets: List[Dict], scan_time: float
    ) -> Dict:
        """Generate high-level statistics for the run."""
        return {
            "targets_attempted": len(results) + len(failed_targets),
            "targets_succeeded": len(results),
            "targets_failed": len(failed_targets),
            "total_endpoints": sum(len(r.endpoints) for r in results),
            "total_href_urls": sum(len(r.hrefs) for r in results),
            "scan_duration_seconds": round(scan_time, 2),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    def format_output(
        self,
        results: List[Result],
        written_files: List[str],
        failed_targets: List[Dict],
        scan_time: float,
        **kwargs,
    ) -> Dict:
        """
        Format the complete scan output.

        Args:
            results: Sorted batch of results
            written_files: Paths returned by the writer
            failed_targets: Dicts with "target" and "error" for skipped targets
            scan_time: Time taken in seconds
            **kwargs: Run parameters to record in the metadata

        Returns:
            Complete formatted output
        """
        return {
            "scan_summary": self._generate_scan_summary(
                results, failed_targets, scan_time
            ),
            "results": [
                self._format_result(index, result, written_files)
                for index, result in enumerate(results)
            ],
            "failed_targets": failed_targets,
            "metadata": self._generate_metadata(kwargs),
        }

    def _generate_metadata(self, kwargs: Dict) -> Dict:
        metadata = {
            "tool_name": "WP-JSON Endpoint Mapper",
            "tool_version": __version__,
            "generation_timestamp": datetime.now(timezone.utc).isoformat(),
            "run_parameters": {
                "output_dir": kwargs.get("output_dir"),
                "timeout": kwargs.get("timeout"),
                "discover_api_root": kwargs.get("discover", False),
                "input_file": kwargs.get("input_file"),
            },
        }

        # Remove None values from run_parameters
        metadata["run_parameters"] = {
            k: v for k, v in metadata["run_parameters"].items() if v is not None
        }

        return metadata
