"""
CsvRenderer -- One row per match, RFC 4180 quoting

Header: FilePath,FileName,LineNumber,ColumnPosition,URL
Fields containing commas, quotes or newlines are quoted; embedded
quotes are doubled.
"""

import csv
import io
from typing import List

from .base import BaseRenderer
from ..models import FileResult

HEADER = ("FilePath", "FileName", "LineNumber", "ColumnPosition", "URL")


class CsvRenderer(BaseRenderer):
    """Render matches as CSV."""

    def render(self, results: List[FileResult]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
        writer.writerow(HEADER)
        for result in results:
            name = self.file_name(result.file)
            for match in result.urls:
                if self.with_line_numbers:
                    writer.writerow([result.file, name, match.line, match.column, match.url])
                else:
                    writer.writerow([result.file, name, "", "", match.url])
        return buffer.getvalue().rstrip("\n")
