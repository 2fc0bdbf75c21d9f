"""
Tests for file discovery -- scan/exclude globs, default skips, depth.
"""

import pytest

from urldetect.discovery import discover_files
from urldetect.errors import ConfigurationError


@pytest.fixture
def tree(tmp_path):
    """
    A small project:
        README.md
        logo.png
        src/app.js
        src/lib/util.py
        tests/test_app.js
        node_modules/pkg/index.js
        .git/config
    """
    for name in (
        "README.md",
        "logo.png",
        "src/app.js",
        "src/lib/util.py",
        "tests/test_app.js",
        "node_modules/pkg/index.js",
        ".git/config",
    ):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("x")
    return tmp_path


def relative(root, paths):
    return [p.relative_to(root).as_posix() for p in paths]


class TestDiscoverFiles:
    def test_defaults(self, tree):
        """Everything except default-excluded dirs and binaries, sorted."""
        assert relative(tree, discover_files(tree)) == [
            "README.md",
            "src/app.js",
            "src/lib/util.py",
            "tests/test_app.js",
        ]

    def test_scan_patterns(self, tree):
        assert relative(tree, discover_files(tree, scan=["**/*.js"])) == [
            "src/app.js",
            "tests/test_app.js",
        ]

    def test_overlapping_patterns_deduplicated(self, tree):
        found = discover_files(tree, scan=["**/*.js", "src/*"])
        assert relative(tree, found) == ["src/app.js", "tests/test_app.js"]

    def test_exclude_glob(self, tree):
        assert "tests/test_app.js" not in relative(tree, discover_files(tree, exclude=["tests/**"]))

    def test_exclude_directory_name(self, tree):
        """A bare directory name excludes everything below it."""
        found = relative(tree, discover_files(tree, exclude=["src/"]))
        assert found == ["README.md", "tests/test_app.js"]

    def test_exclude_recursive_extension(self, tree):
        """**/ patterns also match files at the root."""
        found = relative(tree, discover_files(tree, exclude=["**/*.md", "**/*.py"]))
        assert found == ["src/app.js", "tests/test_app.js"]

    def test_max_depth(self, tree):
        assert relative(tree, discover_files(tree, max_depth=0)) == ["README.md"]
        assert relative(tree, discover_files(tree, max_depth=1)) == [
            "README.md",
            "src/app.js",
            "tests/test_app.js",
        ]

    def test_negative_depth(self, tree):
        with pytest.raises(ConfigurationError, match="Max depth must be >= 0"):
            discover_files(tree, max_depth=-1)

    def test_not_a_directory(self, tree):
        with pytest.raises(ConfigurationError, match="Not a directory"):
            discover_files(tree / "README.md")
