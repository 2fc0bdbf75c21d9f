"""
JsonRenderer -- Machine-readable report

Shape:
    {
      "summary": {"totalFiles": 2, "totalUrls": 3, "uniqueUrls": 3},
      "files": [{"file": "...", "urlCount": 2, "urls": [UrlMatch...]}]
    }

line/column are omitted from each match when line numbers are disabled.
"""

import json
from typing import Any, Dict, List

from .base import BaseRenderer
from ..models import FileResult


class JsonRenderer(BaseRenderer):
    """Render results as pretty-printed JSON."""

    def render(self, results: List[FileResult]) -> str:
        return json.dumps(self.to_report(results), ensure_ascii=False, indent=2)

    def to_report(self, results: List[FileResult]) -> Dict[str, Any]:
        """Build the report structure before serialization."""
        return {
            "summary": self.stats(results).to_dict(),
            "files": [
                {
                    "file": result.file,
                    "urlCount": result.url_count,
                    "urls": [m.to_dict(self.with_line_numbers) for m in result.urls],
                }
                for result in results
            ],
        }
