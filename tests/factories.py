"""
Test factories -- Fake grammars and result builders.

The fake grammar parses a tiny C-like language without tree-sitter:
  - "..." is a `string` node (with a `string_fragment` child)
  - // to end of line is a `comment` node
Node offsets are UTF-8 byte offsets, like tree-sitter's.

This lets the scanner, pool and extractor be exercised with exact
positions on machines without tree-sitter-language-pack.
"""

import threading
import time
from typing import List, Optional

from urldetect.core.parsing.config import LanguageConfig
from urldetect.core.parsing.grammar import Grammar
from urldetect.models import FileResult, SourceType, UrlMatch


FAKE_CONFIG = LanguageConfig(
    name="fake",
    grammar_source="fake",
    extensions=(".fake",),
    display_name="Fake",
)


class FakeNode:
    """Minimal stand-in for tree_sitter.Node."""

    def __init__(self, type: str, start_byte: int, end_byte: int, children: Optional[List["FakeNode"]] = None):
        self.type = type
        self.start_byte = start_byte
        self.end_byte = end_byte
        self.children = children or []

    def __repr__(self) -> str:
        return f"FakeNode({self.type!r}, {self.start_byte}, {self.end_byte})"


class FakeTree:
    def __init__(self, root_node: FakeNode):
        self.root_node = root_node


class FakeParser:
    """Parses strings and line comments out of raw bytes."""

    def __init__(self, grammar: "FakeGrammar"):
        self.grammar = grammar

    def parse(self, source: bytes) -> FakeTree:
        self.grammar.on_parse()

        children = []
        i, n = 0, len(source)
        while i < n:
            if source[i:i + 1] == b'"':
                close = source.find(b'"', i + 1)
                end = n if close == -1 else close + 1
                fragment = FakeNode("string_fragment", i + 1, max(i + 1, end - 1))
                children.append(FakeNode("string", i, end, [fragment]))
                i = end
            elif source.startswith(b"//", i):
                newline = source.find(b"\n", i)
                end = n if newline == -1 else newline
                children.append(FakeNode("comment", i, end))
                i = end
            else:
                i += 1
        return FakeTree(FakeNode("program", 0, n, children))


class FakeGrammar(Grammar):
    """
    Grammar adapter backed by FakeParser.

    Args:
        config: Language config (defaults to FAKE_CONFIG)
        fail_create: Raise from create_parser()
        fail_parse: Raise from every parse()
        delay: Seconds each parse() sleeps (to overlap tasks)
    """

    def __init__(self, config: LanguageConfig = FAKE_CONFIG, fail_create: bool = False,
                 fail_parse: bool = False, delay: float = 0.0):
        super().__init__(config)
        self.fail_create = fail_create
        self.fail_parse = fail_parse
        self.delay = delay
        self.created = 0
        self.parse_calls = 0

        self._lock = threading.Lock()
        self.active = 0
        self.max_active = 0

    def create_parser(self) -> FakeParser:
        if self.fail_create:
            raise RuntimeError("cannot create parser")
        with self._lock:
            self.created += 1
        return FakeParser(self)

    def on_parse(self) -> None:
        with self._lock:
            self.parse_calls += 1
        if self.fail_parse:
            raise RuntimeError("parser crashed")
        with self._lock:
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        try:
            if self.delay:
                time.sleep(self.delay)
        finally:
            with self._lock:
                self.active -= 1


def make_match(url: str, line: int = 1, column: int = 1, start: int = 0,
               source_type: SourceType = SourceType.STRING) -> UrlMatch:
    """Build a UrlMatch whose span covers the URL."""
    return UrlMatch(
        url=url,
        line=line,
        column=column,
        start=start,
        end=start + len(url),
        source_type=source_type,
    )


def make_result(file: str, *urls: str) -> FileResult:
    """Build a FileResult with one match per URL, one per line."""
    return FileResult(
        file=file,
        urls=[make_match(url, line=i + 1) for i, url in enumerate(urls)],
    )
