"""
BaseRenderer -- Abstract base class for report renderers

Every renderer turns an ordered list of FileResult into a string.
Provides the shared helpers: truncation, safe string conversion and
corpus statistics for summaries.
"""

from abc import ABC, abstractmethod
from pathlib import PurePath
from typing import List

from ..core.filter import UrlFilter
from ..models import FileResult, ScanStats

ELLIPSIS = "..."


class BaseRenderer(ABC):
    """
    Abstract base class for all renderers.

    Subclasses must implement render().
    """

    def __init__(self, with_line_numbers: bool = True):
        """
        Initialize renderer.

        Args:
            with_line_numbers: Include line/column positions where the
                format supports omitting them
        """
        self.with_line_numbers = with_line_numbers

    @abstractmethod
    def render(self, results: List[FileResult]) -> str:
        """
        Render scan results.

        Args:
            results: File results in report order

        Returns:
            Formatted report (no trailing newline)
        """
        pass

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def stats(self, results: List[FileResult]) -> ScanStats:
        """Counters for the results being rendered."""
        return UrlFilter().compute_stats(results)

    def file_name(self, path: str) -> str:
        return PurePath(path).name

    def truncate(self, text: str, length: int) -> str:
        """
        Truncate text to length, ending with "..." when cut.

        Example:
            truncate("abcdefgh", 6)  # "abc..."
        """
        if not text:
            return ""
        if len(text) <= length:
            return text
        if length <= len(ELLIPSIS):
            return text[:length]
        return text[:length - len(ELLIPSIS)] + ELLIPSIS

    def safe_str(self, value) -> str:
        if value is None:
            return ""
        return str(value)
