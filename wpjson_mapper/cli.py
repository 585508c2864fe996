"""
CLI Module - Command Line Interface for WP-JSON Endpoint Mapper

Handles command-line argument parsing and orchestrates fetching, tree
walking, sorting and writing for a single site or a file of sites.
"""

import argparse
import json
import sys
import time
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .errors import ScrapeError, WriteError
from .fetcher import WpJsonFetcher
from .output_formatter import OutputFormatter
from .scraper import WpJsonScraper
from .sorter import sort_results
from .walker import Result
from .writer import write_results


USAGE_MESSAGE = "Debes proporcionar una URL (-u) o un archivo (-f) como entrada."


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Extract endpoint paths and href URLs from WordPress wp-json documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py -u https://example.com
  python main.py -f sites.txt --output-dir results
  python main.py -u https://example.com --discover --verbose
  python main.py -f sites.txt --summary results/summary.json
        """,
    )

    parser.add_argument(
        "-u", "--url", default="", help="URL of the WordPress site to scrape"
    )

    parser.add_argument(
        "-f",
        "--file",
        default="",
        help="File with one WordPress site URL per line",
    )

    parser.add_argument(
        "--output-dir",
        "-o",
        default=".",
        help="Directory for the endpoints_<i>.txt and href_urls_<i>.txt files (default: .)",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: no timeout)",
    )

    parser.add_argument(
        "--discover",
        action="store_true",
        help="If /wp-json is not JSON, look for the API root the site advertises",
    )

    parser.add_argument(
        "--summary",
        help="Also save a JSON summary of the run to this path",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    return parser.parse_args(argv)


def read_targets(file_path: str) -> List[str]:
    """
    Read target URLs from a file, one per line, skipping blank lines.

    Bytes that are not valid UTF-8 are replaced rather than rejected.

    Raises:
        OSError: If the file cannot be opened or read
    """
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        return [line.strip() for line in f if line.strip()]


def scrape_single(scraper: WpJsonScraper, url: str) -> Optional[List[Result]]:
    """Scrape one site; returns None (after reporting) on failure."""
    try:
        return [scraper.scrape(url)]
    except ScrapeError as e:
        print(f"Error al raspar los datos: {e}")
        return None


def scrape_batch(
    scraper: WpJsonScraper, targets: List[str], failed_targets: List[Dict]
) -> List[Result]:
    """
    Scrape every target in order, skipping the ones that fail.

    Args:
        scraper: Scraper to use
        targets: Site URLs in file order
        failed_targets: Receives a {"target", "error"} dict per failure

    Returns:
        Results of the successful targets, in file order
    """
    results = []
    for url in targets:
        try:
            results.append(scraper.scrape(url))
        except ScrapeError as e:
            print(f"Error al raspar los datos de {url}: {e}")
            failed_targets.append({"target": url, "error": str(e)})
    return results


def save_results(results: List[Result], output_dir: str, verbose: bool) -> List[str]:
    """Sort and write a batch; reports write errors instead of raising."""
    sort_results(results)

    try:
        written = write_results(results, output_dir)
    except WriteError as e:
        print(f"Error al escribir los resultados: {e}")
        return []

    if verbose:
        print(f"✅ Wrote {len(written)} files to: {output_dir}")
    return written


def save_summary(summary_path: str, summary: Dict) -> None:
    path = Path(summary_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(json.dumps(summary, indent=2, ensure_ascii=False))
    except OSError as e:
        print(f"Error al escribir los resultados: {e}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the CLI application."""
    args = parse_arguments(argv)

    if not args.url and not args.file:
        print(USAGE_MESSAGE)
        return

    if args.verbose:
        print(f"🚀 Starting scan of: {args.url or args.file}")
        print(f"💾 Output directory: {args.output_dir}")
        print("-" * 50)

    start_time = time.time()
    fetcher = WpJsonFetcher(timeout=args.timeout, verbose=args.verbose)
    scraper = WpJsonScraper(fetcher, discover=args.discover, verbose=args.verbose)
    failed_targets: List[Dict] = []

    try:
        if args.url:
            results = scrape_single(scraper, args.url)
            if results is None:
                return
        else:
            try:
                targets = read_targets(args.file)
            except OSError as e:
                print(f"Error al abrir el archivo: {e}")
                return
            results = scrape_batch(scraper, targets, failed_targets)

        written = save_results(results, args.output_dir, args.verbose)

        if args.summary:
            summary = OutputFormatter().format_output(
                results=results,
                written_files=written,
                failed_targets=failed_targets,
                scan_time=time.time() - start_time,
                output_dir=args.output_dir,
                timeout=args.timeout,
                discover=args.discover,
                input_file=args.file or None,
            )
            save_summary(args.summary, summary)
            if args.verbose:
                print(f"📋 Summary saved to: {args.summary}")

        if args.verbose:
            print(
                f"\n🎉 Scan completed in {time.time() - start_time:.2f} seconds: "
                f"{len(results)} succeeded, {len(failed_targets)} failed"
            )

    except KeyboardInterrupt:
        print("\n❌ Scan interrupted by user")
        sys.exit(1)
    finally:
        fetcher.close()


if __name__ == "__main__":
    main()
