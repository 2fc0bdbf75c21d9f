"""
ParserPool -- Reusable parser instances per language

Creating a parser and binding it to a grammar costs far more than
parsing a typical source file, so parsers are pooled per language and
handed out with an acquire/release protocol:

    parser = pool.acquire("javascript", grammar)
    try:
        tree = parser.parse(source)
    finally:
        pool.release("javascript", parser)

Design principles:
- One bucket per language, each with its own lock (single mutation point)
- Capacity is fixed per pool instance and independent per bucket
- Overflow never blocks: it logs a warning and shares the first entry
- release() never raises (it runs from cleanup paths)
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ...errors import ConfigurationError
from .grammar import Grammar

DEFAULT_POOL_SIZE = 10


class PooledParser:
    """
    Parser handle given out by the pool.

    Wraps the grammar's parser object. parse() calls are serialized
    with a private lock, so the shared handle returned on pool overflow
    is never driven by two threads at once.
    """

    def __init__(self, language: str, parser: Any):
        self.language = language
        self.parser = parser
        self._lock = threading.Lock()

    def parse(self, source: bytes) -> Any:
        """Parse source bytes into a syntax tree."""
        with self._lock:
            return self.parser.parse(source)

    def __repr__(self) -> str:
        return f"PooledParser({self.language!r}, id={id(self):#x})"


@dataclass
class ParserPoolEntry:
    """A pooled parser and its availability flag."""
    parser: PooledParser
    in_use: bool = False


class _Bucket:
    """Parsers for one language, guarded by their own lock."""

    def __init__(self):
        self.entries: List[ParserPoolEntry] = []
        self.lock = threading.Lock()


@dataclass
class PoolStats:
    """Snapshot for observability."""
    languages: int = 0
    parsers: int = 0
    in_use: int = 0
    overflows: int = 0

    def to_dict(self) -> dict:
        return {
            "languages": self.languages,
            "parsers": self.parsers,
            "in_use": self.in_use,
            "overflows": self.overflows,
        }


class ParserPool:
    """
    Per-language pool of reusable parsers.

    The pool is an explicit object owned by whoever creates it
    (normally one UrlScanner); it is not global state.
    """

    def __init__(self, pool_size: int = DEFAULT_POOL_SIZE, logger: Optional[logging.Logger] = None):
        """
        Args:
            pool_size: Maximum parsers kept per language (>= 1)
            logger: Logger for exhaustion warnings

        Raises:
            ConfigurationError: If pool_size < 1
        """
        if pool_size < 1:
            raise ConfigurationError("Pool size must be >= 1")
        self.pool_size = pool_size
        self.logger = logger or logging.getLogger(__name__)
        self._buckets: Dict[str, _Bucket] = {}
        self._buckets_lock = threading.Lock()
        self._overflows = 0

    def _bucket(self, language: str, create: bool) -> Optional[_Bucket]:
        bucket = self._buckets.get(language)
        if bucket is None and create:
            with self._buckets_lock:
                bucket = self._buckets.setdefault(language, _Bucket())
        return bucket

    def acquire(self, language: str, grammar: Grammar) -> PooledParser:
        """
        Acquire a parser for language.

        1. Reuse a free entry if one exists
        2. Else, under capacity: construct, bind, register a new entry
        3. Else (overflow): warn and return the bucket's first entry

        Args:
            language: Language id (bucket key)
            grammar: Grammar used to construct new parsers

        Returns:
            PooledParser, marked in use
        """
        bucket = self._bucket(language, create=True)

        with bucket.lock:
            for entry in bucket.entries:
                if not entry.in_use:
                    entry.in_use = True
                    return entry.parser

            if len(bucket.entries) < self.pool_size:
                entry = ParserPoolEntry(
                    parser=PooledParser(language, grammar.create_parser()),
                    in_use=True,
                )
                bucket.entries.append(entry)
                return entry.parser

            with self._buckets_lock:
                self._overflows += 1
            entry = bucket.entries[0]
            entry.in_use = True

        self.logger.warning(
            "Parser pool exhausted for %s, reusing parser (consider increasing pool size)",
            language,
        )
        return entry.parser

    def release(self, language: str, parser: PooledParser) -> None:
        """
        Return a parser to its bucket.

        Unknown languages and untracked parsers are ignored.
        """
        bucket = self._buckets.get(language)
        if bucket is None:
            return

        with bucket.lock:
            for entry in bucket.entries:
                if entry.parser is parser:
                    entry.in_use = False
                    return

    def clear(self) -> None:
        """Discard every bucket and the parsers in it."""
        with self._buckets_lock:
            self._buckets.clear()

    def get_pool_size(self, language: str) -> int:
        """Number of parsers currently held for language."""
        bucket = self._buckets.get(language)
        if bucket is None:
            return 0
        with bucket.lock:
            return len(bucket.entries)

    def get_available_count(self, language: str) -> int:
        """Number of free parsers for language."""
        bucket = self._buckets.get(language)
        if bucket is None:
            return 0
        with bucket.lock:
            return sum(1 for entry in bucket.entries if not entry.in_use)

    def stats(self) -> PoolStats:
        """Get pool statistics."""
        with self._buckets_lock:
            buckets = list(self._buckets.values())

        stats = PoolStats(languages=len(buckets), overflows=self._overflows)
        for bucket in buckets:
            with bucket.lock:
                stats.parsers += len(bucket.entries)
                stats.in_use += sum(1 for entry in bucket.entries if entry.in_use)
        return stats
