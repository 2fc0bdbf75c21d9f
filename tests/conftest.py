"""
Shared pytest fixtures for the urldetect test suite.

Scanner-level tests run against FakeGrammar (see factories.py) so they
need no compiled grammars. Tests that need real tree-sitter grammars
are marked requires_tree_sitter in their own modules.

Usage in tests:
    def test_something(fake_registry, write_file):
        path = write_file("app.fake", 'x = "https://example.com"')
        scanner = UrlScanner(registry=fake_registry)
"""

import logging

import pytest

from urldetect.core.parsing.registry import LanguageRegistry
from tests.factories import FAKE_CONFIG, FakeGrammar


@pytest.fixture
def test_logger():
    """A named logger that propagates to caplog."""
    logger = logging.getLogger("tests.urldetect")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def fake_grammar():
    return FakeGrammar()


@pytest.fixture
def fake_registry(fake_grammar, test_logger):
    """
    Registry knowing only the fake language (.fake files).

    Every other extension resolves to "unknown" and goes through the
    regex fallback.
    """
    registry = LanguageRegistry(languages=[], logger=test_logger)
    registry.add_language(FAKE_CONFIG, grammar=fake_grammar)
    return registry


@pytest.fixture
def write_file(tmp_path):
    """
    Write a file under tmp_path and return its path as a string.

    Example:
        path = write_file("src/app.fake", 'u = "https://example.com"')
        path = write_file("bad.txt", b"\\xff\\xfe")
    """
    def _write(name, content):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
