"""
UrlScanner -- Bounded-concurrency scan orchestrator

Per file:
    Pending -> LanguageResolved -> Parsed | FallbackText -> Extracted
            -> Filtered -> Done
    Pending -> ReadError (recorded, never extracted)

At most `concurrency` files are in flight; each completion admits the
next pending file. Per-file failures are recorded and the scan goes
on, unless fail_on_error is set: then admission stops, files already
admitted settle, and the first failure is raised. Nothing is cancelled
mid-file, so no parser is ever left checked out.

Results are reordered to the caller's file order before returning.

Usage:
    scanner = UrlScanner(ScanConfig(include_comments=True, context_lines=1))
    outcome = scanner.scan(["src/app.js", "README.md"])
    outcome.total_urls, outcome.unique_urls
"""

import logging
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .config import ScanConfig
from .core.filter import UrlFilter
from .core.matcher import UrlMatcher
from .core.parsing.extractor import SourceDocument, UrlExtractor
from .core.parsing.pool import ParserPool
from .core.parsing.registry import UNKNOWN_LANGUAGE, LanguageRegistry
from .errors import ExtractionError, FileReadError, FileScanError
from .models import FileFailure, FileResult, ScanOutcome, UrlMatch

PathLike = Union[str, Path]


class UrlScanner:
    """
    Scans files for URLs.

    One scanner owns one ParserPool; the pool is the only state shared
    between concurrently running file tasks.
    """

    def __init__(
        self,
        config: Optional[ScanConfig] = None,
        registry: Optional[LanguageRegistry] = None,
        pool: Optional[ParserPool] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize scanner.

        Args:
            config: Scan options (defaults if None)
            registry: Language registry (built-in languages if None)
            pool: Parser pool (sized from config if None)
            logger: Logger for diagnostics

        Raises:
            ConfigurationError: If config is invalid
        """
        self.config = config or ScanConfig()
        self.config.validate()

        self.logger = logger or logging.getLogger(__name__)
        self.registry = registry or LanguageRegistry(logger=self.logger)
        self.pool = pool or ParserPool(self.config.pool_size, logger=self.logger)

        self.matcher = UrlMatcher(self.config.schemes, self.config.include_non_fqdn)
        self.extractor = UrlExtractor(self.matcher, self.config.context_lines)
        self.url_filter = UrlFilter()
        self._force_fallback = {name.lower() for name in self.config.force_fallback}

    # =========================================================================
    # Batch
    # =========================================================================

    def scan(self, files: Sequence[PathLike]) -> ScanOutcome:
        """
        Scan a list of files.

        Args:
            files: Paths, already filtered by discovery; order is kept

        Returns:
            ScanOutcome with results in input order

        Raises:
            FileScanError: First per-file failure, when fail_on_error is set
        """
        paths = [str(f) for f in files]
        if not paths:
            return ScanOutcome()

        completed: Dict[int, FileResult] = {}
        failed: Dict[int, FileFailure] = {}
        first_error: Optional[FileScanError] = None

        pending: Iterator[Tuple[int, str]] = iter(enumerate(paths))
        workers = min(self.config.concurrency, len(paths))

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="urldetect-scan-") as executor:
            in_flight: Dict[Future, int] = {}

            def admit() -> bool:
                for index, path in pending:
                    in_flight[executor.submit(self.scan_file, path)] = index
                    return True
                return False

            for _ in range(workers):
                admit()

            while in_flight:
                done, _ = wait(in_flight, return_when=FIRST_COMPLETED)
                for future in done:
                    index = in_flight.pop(future)
                    try:
                        completed[index] = future.result()
                    except FileScanError as e:
                        self.logger.warning("%s", e)
                        failed[index] = FileFailure(paths[index], e)
                        if first_error is None:
                            first_error = e

                    if first_error is None or not self.config.fail_on_error:
                        admit()

        if first_error is not None and self.config.fail_on_error:
            raise first_error

        return self._build_outcome(completed, failed)

    def _build_outcome(self, completed: Dict[int, FileResult], failed: Dict[int, FileFailure]) -> ScanOutcome:
        ordered = [completed[i] for i in sorted(completed)]
        stats = self.url_filter.compute_stats(ordered)

        if not self.config.keep_empty_files:
            ordered = [result for result in ordered if result.urls]

        self.logger.info(
            "Scanned %d files, found %d URLs (%d unique), %d failed",
            stats.files_scanned, stats.total_urls, stats.unique_urls, len(failed),
        )
        return ScanOutcome(
            results=ordered,
            stats=stats,
            failures=[failed[i] for i in sorted(failed)],
        )

    # =========================================================================
    # Single File
    # =========================================================================

    def scan_file(self, path: PathLike) -> FileResult:
        """
        Scan one file and return its filtered matches.

        Raises:
            FileReadError: File unreadable or undecodable
            ExtractionError: Unexpected failure during parse/walk/match
        """
        path = str(path)
        document = self._read(path)
        if document is None:
            return FileResult(file=path)

        language = self.registry.detect_language_from_path(path)
        self.logger.debug("Scanning %s as %s", path, language)

        try:
            matches = self._extract(path, language, document)
        except FileScanError:
            raise
        except Exception as e:
            raise ExtractionError(path, cause=e) from e

        return self.url_filter.filter(
            [FileResult(file=path, urls=matches)],
            self.config.ignore_domains,
            self.config.include_non_fqdn,
        )[0]

    def _read(self, path: str) -> Optional[SourceDocument]:
        """Read and decode a file; None if it is over the size limit."""
        try:
            raw = Path(path).read_bytes()
        except OSError as e:
            raise FileReadError(path, cause=e) from e

        limit = self.config.max_file_size
        if limit and len(raw) > limit:
            self.logger.info("Skipping %s: %d bytes exceeds limit of %d", path, len(raw), limit)
            return None

        try:
            return SourceDocument.from_bytes(path, raw)
        except UnicodeDecodeError as e:
            raise FileReadError(path, reason=f"not valid UTF-8 ({e.reason} at byte {e.start})", cause=e) from e

    def _extract(self, path: str, language: str, document: SourceDocument) -> List[UrlMatch]:
        forced = language.lower() in self._force_fallback

        grammar = None
        if language != UNKNOWN_LANGUAGE and not forced:
            grammar = self.registry.get_language(language)

        if grammar is None:
            if forced or self.config.fallback_regex:
                return self.extractor.extract_from_text(document)
            self.logger.debug("No grammar for %s and regex fallback disabled", path)
            return []

        try:
            parser = self.pool.acquire(language, grammar)
        except Exception as e:
            raise ExtractionError(path, reason=f"could not acquire {language} parser: {e}", cause=e) from e

        try:
            tree = parser.parse(document.raw)
            return self.extractor.extract_from_tree(
                document, tree, grammar, include_comments=self.config.include_comments,
            )
        finally:
            self.pool.release(language, parser)


def scan_files(
    files: Sequence[PathLike],
    config: Optional[ScanConfig] = None,
    logger: Optional[logging.Logger] = None,
) -> ScanOutcome:
    """Convenience wrapper: scan files with a fresh scanner."""
    return UrlScanner(config, logger=logger).scan(files)
