"""
Output Module -- Report rendering for scan results

The scanner produces FileResult lists; renderers turn them into text.
Format switching (table, json, csv) never touches the scan layer.

Usage:
    from urldetect.output import OutputFormatter

    formatter = OutputFormatter(format="json", with_line_numbers=False)
    formatter.emit(outcome.results)               # stdout

    OutputFormatter(format="csv", output_file="urls.csv").emit(outcome.results)
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Union

from ..models import FileResult
from .base import BaseRenderer
from .csv import CsvRenderer
from .json import JsonRenderer
from .table import TableRenderer
from .urls import UrlListRenderer


# =============================================================================
# Format Registry
# =============================================================================

# Maps format name to renderer class
RENDERERS = {
    "table": TableRenderer,
    "json": JsonRenderer,
    "csv": CsvRenderer,
}

# Valid format values for config/CLI
VALID_FORMATS = tuple(RENDERERS)


def get_renderer(format: str, with_line_numbers: bool = True, only_urls: bool = False) -> BaseRenderer:
    """
    Get renderer instance.

    Args:
        format: Format name from VALID_FORMATS
        with_line_numbers: Include line/column where the format allows
        only_urls: Bare URL list, regardless of format

    Returns:
        Renderer instance

    Raises:
        ValueError: If format is unknown
    """
    if only_urls:
        return UrlListRenderer(with_line_numbers=with_line_numbers)

    renderer_class = RENDERERS.get(format)
    if renderer_class is None:
        raise ValueError(f"Unknown output format: {format}")
    return renderer_class(with_line_numbers=with_line_numbers)


def render(results: List[FileResult], format: str = "table", **options) -> str:
    """Render results to a string (see get_renderer for options)."""
    return get_renderer(format, **options).render(results)


# =============================================================================
# Formatter
# =============================================================================

class OutputFormatter:
    """
    Renders results and delivers them to a file or a stream.

    Only the report goes to the stream; diagnostics go through logging.
    """

    def __init__(
        self,
        format: str = "table",
        with_line_numbers: bool = True,
        only_urls: bool = False,
        output_file: Optional[Union[str, Path]] = None,
        stream: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.format = format
        self.with_line_numbers = with_line_numbers
        self.only_urls = only_urls
        self.output_file = Path(output_file) if output_file else None
        self.stream = stream
        self.logger = logger or logging.getLogger(__name__)

    def format_results(self, results: List[FileResult]) -> str:
        """
        Render results in the configured format.

        Raises:
            ValueError: If the format is unknown
        """
        renderer = get_renderer(self.format, self.with_line_numbers, self.only_urls)
        return renderer.render(results)

    def emit(self, results: List[FileResult]) -> str:
        """
        Render results and write them out.

        Returns:
            The rendered report

        Raises:
            ValueError: If the format is unknown
            OSError: If the output file cannot be written
        """
        output = self.format_results(results)

        if self.output_file is not None:
            self.output_file.write_text(output + "\n", encoding="utf-8")
            self.logger.info("Output written to %s", self.output_file)
        else:
            stream = self.stream or sys.stdout
            stream.write(output + "\n")
            stream.flush()

        return output


__all__ = [
    "BaseRenderer",
    "TableRenderer",
    "JsonRenderer",
    "CsvRenderer",
    "UrlListRenderer",
    "RENDERERS",
    "VALID_FORMATS",
    "get_renderer",
    "render",
    "OutputFormatter",
]
