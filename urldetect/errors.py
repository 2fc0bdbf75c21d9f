"""
Errors -- Failure taxonomy for the detection engine

- ConfigurationError: invalid option, raised at construction
- GrammarLoadError: grammar could not be loaded (recovered locally)
- FileReadError: file unreadable or undecodable (per-file)
- ExtractionError: unexpected failure while parsing/walking/matching (per-file)

Per-file errors are recorded and scanning continues, unless fail-fast
is enabled, in which case the first one is re-raised by the scanner.
Parser pool exhaustion is not an error (it is logged and degraded).
"""

from typing import Optional


class UrlDetectError(Exception):
    """Base class for all urldetect errors."""


class ConfigurationError(UrlDetectError, ValueError):
    """Raised when an option is invalid (never silently defaulted)."""


class GrammarLoadError(UrlDetectError):
    """
    Raised when a language grammar fails to load.

    The registry catches this, logs a warning, and the affected file
    degrades to fallback extraction.
    """

    def __init__(self, language: str, reason: str = ""):
        self.language = language
        self.reason = reason
        message = f"Failed to load {language} parser"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FileScanError(UrlDetectError):
    """Per-file failure. Carries the path of the file that failed."""

    stage = "scan"

    def __init__(self, file: str, reason: str = "", cause: Optional[BaseException] = None):
        self.file = file
        self.reason = reason or (str(cause) if cause else "")
        self.cause = cause
        super().__init__(f"{self.stage} failed for {file}: {self.reason}")


class FileReadError(FileScanError):
    """File could not be read or decoded."""

    stage = "read"


class ExtractionError(FileScanError):
    """Unexpected failure inside a file's parse, walk or match step."""

    stage = "extraction"
