"""
TableRenderer -- Fixed-width text table for terminals

Columns: FilePath | FileName | Line:Col | URL, one row per match.
Values wider than their column are cut with "...".
"""

from typing import List

from .base import BaseRenderer
from ..models import FileResult

EMPTY_MESSAGE = "No URLs found."

# (header, width)
COLUMNS = (
    ("FilePath", 50),
    ("FileName", 25),
    ("Line:Col", 10),
    ("URL", 80),
)


class TableRenderer(BaseRenderer):
    """
    Render matches as an ASCII table.

    Usage:
        print(TableRenderer().render(outcome.results))
    """

    def render(self, results: List[FileResult]) -> str:
        rows = [
            [
                result.file,
                self.file_name(result.file),
                f"{match.line}:{match.column}" if self.with_line_numbers else "",
                match.url,
            ]
            for result in results
            for match in result.urls
        ]
        if not rows:
            return EMPTY_MESSAGE

        widths = [width for _, width in COLUMNS]
        lines = [
            self._separator(widths),
            self._row([header for header, _ in COLUMNS], widths),
            self._separator(widths),
        ]
        lines.extend(self._row(row, widths) for row in rows)
        lines.append(self._separator(widths))
        return "\n".join(lines)

    # =========================================================================
    # Row Rendering
    # =========================================================================

    def _separator(self, widths: List[int]) -> str:
        return "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def _row(self, values: List[str], widths: List[int]) -> str:
        cells = [
            " " + self.truncate(self.safe_str(value), w).ljust(w) + " "
            for value, w in zip(values, widths)
        ]
        return "|" + "|".join(cells) + "|"
