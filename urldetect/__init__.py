"""
urldetect -- Find URLs in source code and text files

Parses each file with a tree-sitter grammar and reports URLs found in
string literals (and, optionally, comments), falling back to a plain
regex scan for files no grammar covers.

Usage:
    urldetect src/ --include-comments --format json
    urldetect . --exclude "tests/**" --ignore-domains example.com
    urldetect . --only-urls > urls.txt

    from urldetect import ScanConfig, UrlScanner
    outcome = UrlScanner(ScanConfig(context_lines=1)).scan(["app.js"])
"""

__version__ = "0.1.0"

# Results
from .models import FileFailure, FileResult, ScanOutcome, ScanStats, SourceType, UrlMatch
from .errors import (
    ConfigurationError,
    ExtractionError,
    FileReadError,
    FileScanError,
    GrammarLoadError,
    UrlDetectError,
)

# Engine
from .config import Config, ConfigManager, OutputConfig, ScanConfig
from .core.filter import UrlFilter
from .core.matcher import UrlMatcher
from .core.parsing import Grammar, LanguageConfig, LanguageRegistry, ParserPool, TreeSitterGrammar
from .discovery import discover_files
from .scanner import UrlScanner, scan_files

__all__ = [
    "__version__",
    # Results
    "UrlMatch",
    "FileResult",
    "FileFailure",
    "ScanStats",
    "ScanOutcome",
    "SourceType",
    # Errors
    "UrlDetectError",
    "ConfigurationError",
    "GrammarLoadError",
    "FileScanError",
    "FileReadError",
    "ExtractionError",
    # Engine
    "Config",
    "ConfigManager",
    "OutputConfig",
    "ScanConfig",
    "UrlFilter",
    "UrlMatcher",
    "Grammar",
    "TreeSitterGrammar",
    "LanguageConfig",
    "LanguageRegistry",
    "ParserPool",
    "UrlScanner",
    "scan_files",
    "discover_files",
]
