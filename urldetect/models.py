"""
Models -- Result types produced by a scan

- UrlMatch: one URL occurrence with position and context (immutable)
- FileResult: all matches for one file, in file order
- FileFailure: a file that could not be scanned, with its error
- ScanStats: corpus-wide counters
- ScanOutcome: ordered file results + failures + counters

Positions are character offsets into the decoded file text.
Line and column are 1-based, start/end are 0-based.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from .errors import FileScanError


class SourceType(str, Enum):
    """Where a URL was found."""
    STRING = "string"    # String literal (grammar-driven)
    COMMENT = "comment"  # Comment (grammar-driven, comments enabled)
    TEXT = "text"        # Raw text (regex fallback)


@dataclass(frozen=True)
class UrlMatch:
    """
    A single URL occurrence.

    Immutable once produced. end > start always.
    """
    url: str
    line: int
    column: int
    start: int
    end: int
    context: Tuple[str, ...] = ()
    source_type: SourceType = SourceType.TEXT

    def __post_init__(self):
        if self.end <= self.start:
            raise ValueError(f"Invalid match span [{self.start}, {self.end}) for {self.url}")

    def to_dict(self, with_line_numbers: bool = True) -> Dict[str, Any]:
        """Serialize for JSON output."""
        data: Dict[str, Any] = {"url": self.url}
        if with_line_numbers:
            data["line"] = self.line
            data["column"] = self.column
        data["start"] = self.start
        data["end"] = self.end
        data["context"] = list(self.context)
        data["sourceType"] = self.source_type.value
        return data


@dataclass
class FileResult:
    """Matches found in one file."""
    file: str
    urls: List[UrlMatch] = field(default_factory=list)

    @property
    def url_count(self) -> int:
        return len(self.urls)


@dataclass(frozen=True)
class FileFailure:
    """A file that did not complete extraction."""
    file: str
    error: FileScanError

    @property
    def stage(self) -> str:
        return self.error.stage

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass(frozen=True)
class ScanStats:
    """Counters recomputed from a (filtered) result set."""
    files_scanned: int = 0
    total_urls: int = 0
    unique_urls: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "totalFiles": self.files_scanned,
            "totalUrls": self.total_urls,
            "uniqueUrls": self.unique_urls,
        }


@dataclass
class ScanOutcome:
    """
    Complete result of a scan.

    results follow the caller's file enumeration order, regardless of
    completion order. failures lists files that hit a read or
    extraction error (only populated when fail-fast is off).
    """
    results: List[FileResult] = field(default_factory=list)
    stats: ScanStats = field(default_factory=ScanStats)
    failures: List[FileFailure] = field(default_factory=list)

    @property
    def files_scanned(self) -> int:
        return self.stats.files_scanned

    @property
    def total_urls(self) -> int:
        return self.stats.total_urls

    @property
    def unique_urls(self) -> int:
        return self.stats.unique_urls

    def all_urls(self) -> List[str]:
        """Every matched URL, in report order (duplicates kept)."""
        return [match.url for result in self.results for match in result.urls]
