"""
Grammar adapters -- One interface over every supported grammar.

A Grammar knows how to build parsers for its language and how to
classify syntax nodes as string-literal or comment candidates.
The registry hands Grammar instances to the scanner; the parser
pool calls create_parser() when it needs a new instance.

Uses tree-sitter-language-pack for the actual grammars. Loading is
lazy so the engine still works (through regex fallback) when the
package is not installed.
"""

import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TYPE_CHECKING

from ...errors import GrammarLoadError
from .config import LanguageConfig

if TYPE_CHECKING:
    from tree_sitter import Language, Node, Parser, Tree


# Process-wide cache of loaded tree-sitter Language objects (grammar id -> Language)
_language_cache: Dict[str, "Language"] = {}
_language_cache_lock = threading.Lock()

_language_pack_available: Optional[bool] = None


def _check_language_pack() -> bool:
    """Check if tree-sitter-language-pack is available."""
    global _language_pack_available
    if _language_pack_available is None:
        try:
            import tree_sitter_language_pack  # noqa: F401
            _language_pack_available = True
        except ImportError:
            _language_pack_available = False
    return _language_pack_available


def load_language(grammar_source: str) -> "Language":
    """
    Load a tree-sitter Language by grammar id, caching per process.

    Args:
        grammar_source: Grammar id (e.g., "python", "typescript")

    Returns:
        Loaded tree_sitter.Language

    Raises:
        GrammarLoadError: If the language pack is missing or the grammar
            cannot be loaded
    """
    cached = _language_cache.get(grammar_source)
    if cached is not None:
        return cached

    if not _check_language_pack():
        raise GrammarLoadError(grammar_source, "tree-sitter-language-pack not installed")

    with _language_cache_lock:
        cached = _language_cache.get(grammar_source)
        if cached is not None:
            return cached
        try:
            from tree_sitter_language_pack import get_language
            language = get_language(grammar_source)
        except Exception as e:
            raise GrammarLoadError(grammar_source, str(e)) from e
        _language_cache[grammar_source] = language
        return language


class Grammar(ABC):
    """
    Adapter interface for a language grammar.

    Implementations must be safe to share between threads: parser
    instances are never shared through the adapter itself, only
    through the parser pool.
    """

    def __init__(self, config: LanguageConfig):
        self.config = config

    @property
    def name(self) -> str:
        return self.config.name

    def is_string_node(self, node: Any) -> bool:
        """True if node is a string-literal construct."""
        return node.type in self.config.string_node_types

    def is_comment_node(self, node: Any) -> bool:
        """True if node is a comment construct."""
        return node.type in self.config.comment_node_types

    @abstractmethod
    def create_parser(self) -> Any:
        """Construct a new parser bound to this grammar."""

    def parse(self, source: bytes, parser: Any = None) -> Any:
        """
        Parse source bytes into a syntax tree.

        Args:
            source: Raw file bytes (UTF-8)
            parser: Parser from create_parser(); a fresh one is built if None

        Returns:
            Tree exposing root_node
        """
        if parser is None:
            parser = self.create_parser()
        return parser.parse(source)


class TreeSitterGrammar(Grammar):
    """Grammar backed by tree-sitter-language-pack."""

    def __init__(self, config: LanguageConfig, language: "Language"):
        super().__init__(config)
        self.language = language

    @classmethod
    def load(cls, config: LanguageConfig) -> "TreeSitterGrammar":
        """
        Build an adapter for config, loading its grammar.

        Raises:
            GrammarLoadError: If the grammar cannot be loaded
        """
        try:
            language = load_language(config.grammar_source)
        except GrammarLoadError as e:
            raise GrammarLoadError(config.name, e.reason) from e
        return cls(config, language)

    def create_parser(self) -> "Parser":
        from tree_sitter import Parser
        return Parser(self.language)

    def __repr__(self) -> str:
        return f"TreeSitterGrammar({self.config.name!r})"
