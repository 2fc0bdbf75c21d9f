"""
CLI -- Command interface for urldetect

    urldetect [PATH] [options]

Discovers files under PATH, scans them for URLs and prints a report.
The report goes to stdout (or --output); diagnostics go to stderr
through logging.

Exit codes:
    0  Scan completed (per-file failures are reported, not fatal)
    1  Configuration error, or first per-file failure with --fail-on-error
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from . import __version__
from .config import ConfigManager, OutputConfig, load_patterns_from_file, parse_array_option
from .discovery import discover_files
from .errors import ConfigurationError, FileScanError
from .output import OutputFormatter
from .scanner import UrlScanner

logger = logging.getLogger("urldetect")

LOG_FORMAT = "%(levelname)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="urldetect",
        description="Scan source code and text files for URLs, detecting all discovered URLs",
    )

    parser.add_argument(
        "path", nargs="?", default=".",
        help="Root directory to scan (default: current directory)",
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"urldetect {__version__}",
    )

    # File selection
    selection = parser.add_argument_group("file selection")
    selection.add_argument("--scan", help="Comma-separated glob patterns to scan (default: **/*)")
    selection.add_argument("--exclude", help="Comma-separated glob patterns to exclude")
    selection.add_argument("--scan-file", metavar="FILE", help="File with scan patterns, one per line")
    selection.add_argument("--exclude-file", metavar="FILE", help="File with exclude patterns, one per line")
    selection.add_argument("--max-depth", type=int, help="Maximum directory depth below PATH")

    # Detection
    detection = parser.add_argument_group("detection")
    detection.add_argument("--ignore-domains", help="Comma-separated domains to ignore (subdomains included)")
    detection.add_argument(
        "--include-comments", action="store_const", const=True, default=None,
        help="Also report URLs found in comments",
    )
    detection.add_argument(
        "--include-non-fqdn", action="store_const", const=True, default=None,
        help="Accept single-label hosts such as localhost",
    )
    detection.add_argument(
        "--no-fallback-regex", dest="fallback_regex", action="store_const", const=False, default=None,
        help="Do not regex-scan files without a usable grammar",
    )
    detection.add_argument(
        "--force-fallback", metavar="LANGUAGES",
        help="Comma-separated languages to always scan with the regex fallback",
    )
    detection.add_argument("--context", type=int, help="Lines of context around each match")

    # Output
    output = parser.add_argument_group("output")
    output.add_argument("--format", "-f", help="Output format: table, json or csv (default: table)")
    output.add_argument("--output", "-o", metavar="FILE", help="Write the report to FILE instead of stdout")
    output.add_argument(
        "--only-urls", action="store_const", const=True, default=None,
        help="Print only the URLs, one per line",
    )
    output.add_argument(
        "--no-line-numbers", dest="with_line_numbers", action="store_const", const=False, default=None,
        help="Omit line and column numbers",
    )

    # Execution
    execution = parser.add_argument_group("execution")
    execution.add_argument("--concurrency", type=int, help="Files scanned in parallel (default: 10)")
    execution.add_argument(
        "--fail-on-error", action="store_const", const=True, default=None,
        help="Stop at the first file that cannot be scanned",
    )

    verbosity = execution.add_mutually_exclusive_group()
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log errors")
    verbosity.add_argument("--results-only", action="store_true", help="Print the report and nothing else")
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    return parser


def configure_logging(args: argparse.Namespace) -> None:
    """Route package logs to stderr at the level the flags ask for."""
    if args.results_only:
        level = logging.CRITICAL + 1
    elif args.quiet:
        level = logging.ERROR
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


def _patterns(inline: Optional[str], pattern_file: Optional[str]) -> List[str]:
    patterns = parse_array_option(inline)
    if pattern_file:
        patterns.extend(load_patterns_from_file(pattern_file))
    return patterns


def run(args: argparse.Namespace) -> int:
    """
    Execute a scan for parsed arguments.

    Returns:
        Process exit code
    """
    root = Path(args.path)

    try:
        config = ConfigManager(root if root.is_dir() else None).load()

        scan_config = config.scan.with_overrides(
            include_comments=args.include_comments,
            include_non_fqdn=args.include_non_fqdn,
            fallback_regex=args.fallback_regex,
            force_fallback=parse_array_option(args.force_fallback) or None,
            context_lines=args.context,
            concurrency=args.concurrency,
            fail_on_error=args.fail_on_error,
            ignore_domains=parse_array_option(args.ignore_domains) or None,
        )
        output_config = OutputConfig(
            format=args.format or config.output.format,
            with_line_numbers=(
                config.output.with_line_numbers if args.with_line_numbers is None else args.with_line_numbers
            ),
            only_urls=config.output.only_urls if args.only_urls is None else args.only_urls,
        )

        scan_patterns = _patterns(args.scan, args.scan_file)
        exclude_patterns = _patterns(args.exclude, args.exclude_file)
        files = discover_files(root, scan_patterns, exclude_patterns, args.max_depth)
        logger.debug("Discovered %d files under %s", len(files), root)

        outcome = UrlScanner(scan_config, logger=logger).scan(files)

        formatter = OutputFormatter(
            format=output_config.format,
            with_line_numbers=output_config.with_line_numbers,
            only_urls=output_config.only_urls,
            output_file=args.output,
            logger=logger,
        )
        formatter.emit(outcome.results)

    except (ConfigurationError, FileScanError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if outcome.failures:
        logger.warning("%d file(s) could not be scanned", len(outcome.failures))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the urldetect CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
