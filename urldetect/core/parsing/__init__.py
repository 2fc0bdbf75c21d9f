"""
Parsing module -- Language-aware candidate selection via tree-sitter.

- LanguageConfig: Per-language routing and node-type rules
- Grammar: Adapter that creates parsers and classifies nodes
- LanguageRegistry: Extension/filename routing, lazy grammar loading
- ParserPool: Reusable parsers per language
- UrlExtractor: Candidate spans -> UrlMatch results

Design principle: Add new languages via config, not code changes.

Usage:
    from urldetect.core.parsing import LanguageConfig, LanguageRegistry

    registry = LanguageRegistry()
    registry.add_language(LanguageConfig(
        name="lua",
        grammar_source="lua",
        extensions=(".lua",),
    ))
    registry.detect_language_from_path("init.lua")  # "lua"
"""

from .config import LanguageConfig
from .grammar import Grammar, TreeSitterGrammar
from .registry import UNKNOWN_LANGUAGE, LanguageRegistry
from .pool import ParserPool, PooledParser
from .extractor import CandidateSpan, SourceDocument, UrlExtractor

__all__ = [
    'LanguageConfig',
    'Grammar',
    'TreeSitterGrammar',
    'LanguageRegistry',
    'UNKNOWN_LANGUAGE',
    'ParserPool',
    'PooledParser',
    'CandidateSpan',
    'SourceDocument',
    'UrlExtractor',
]
