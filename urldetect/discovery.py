"""
File discovery -- Expands scan globs into the ordered file list.

- Scan patterns are globs relative to the root (default: every file)
- Exclude patterns are globs matched against the root-relative path
- Directories such as .git and node_modules are always skipped, as are
  common binary formats (they cannot be decoded as text)
- max_depth limits how many directories deep a file may sit
  (0 = files directly in root)

The result is sorted and de-duplicated so reports are reproducible.
"""

import fnmatch
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from .errors import ConfigurationError

DEFAULT_SCAN_PATTERNS = ("**/*",)

DEFAULT_EXCLUDED_DIRS = frozenset({
    # Version control
    ".git", ".svn", ".hg",
    # Dependencies / environments
    "node_modules", "bower_components", ".venv", "venv", "site-packages",
    # Caches
    "__pycache__", ".pytest_cache", ".mypy_cache", ".ruff_cache", ".tox", ".cache",
    # IDE
    ".idea", ".vscode",
})

BINARY_EXTENSIONS = frozenset({
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico", ".webp", ".tiff",
    ".pdf", ".zip", ".gz", ".tgz", ".bz2", ".xz", ".7z", ".rar", ".jar", ".war",
    ".exe", ".dll", ".so", ".dylib", ".o", ".a", ".class", ".pyc", ".pyo",
    ".woff", ".woff2", ".ttf", ".otf", ".eot",
    ".mp3", ".mp4", ".wav", ".avi", ".mov", ".webm",
    ".sqlite", ".db",
})


def discover_files(
    root: Union[str, Path] = ".",
    scan: Optional[Sequence[str]] = None,
    exclude: Optional[Sequence[str]] = None,
    max_depth: Optional[int] = None,
) -> List[Path]:
    """
    Expand scan patterns into a sorted list of files.

    Args:
        root: Directory the patterns are relative to
        scan: Glob patterns to include (default: all files)
        exclude: Glob patterns to drop
        max_depth: Maximum directory depth below root (None = unlimited)

    Returns:
        Sorted, unique file paths

    Raises:
        ConfigurationError: If max_depth is negative or root is not a directory
    """
    if max_depth is not None and max_depth < 0:
        raise ConfigurationError("Max depth must be >= 0")

    root = Path(root)
    if not root.is_dir():
        raise ConfigurationError(f"Not a directory: {root}")

    patterns = list(scan) if scan else list(DEFAULT_SCAN_PATTERNS)
    excludes = list(exclude or [])

    found = set()
    for pattern in patterns:
        for path in root.glob(pattern):
            if not path.is_file():
                continue
            relative = path.relative_to(root)
            if _is_excluded(relative, excludes, max_depth):
                continue
            found.add(path)

    return sorted(found)


def _is_excluded(relative: Path, excludes: Iterable[str], max_depth: Optional[int]) -> bool:
    parts = relative.parts
    if any(part in DEFAULT_EXCLUDED_DIRS for part in parts[:-1]):
        return True
    if relative.suffix.lower() in BINARY_EXTENSIONS:
        return True
    if max_depth is not None and len(parts) - 1 > max_depth:
        return True

    posix = relative.as_posix()
    for pattern in excludes:
        if fnmatch.fnmatch(posix, pattern) or relative.match(pattern):
            return True
        # "**/" also matches at the root
        if pattern.startswith("**/") and fnmatch.fnmatch(posix, pattern[3:]):
            return True
        # "dir/" or "dir" excludes everything below it
        stripped = pattern.rstrip("/")
        if stripped and stripped in parts[:-1]:
            return True
    return False
