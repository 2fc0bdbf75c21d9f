"""
UrlListRenderer -- Bare URL list, one per line, for piping.
"""

from typing import List

from .base import BaseRenderer
from ..models import FileResult


class UrlListRenderer(BaseRenderer):
    """Render every matched URL in report order (duplicates kept)."""

    def render(self, results: List[FileResult]) -> str:
        return "\n".join(match.url for result in results for match in result.urls)
