"""
Language Registry -- Routes files to language grammars.

Central registry mapping language names, file extensions and exact
file names to LanguageConfig instances, and lazily materializing the
Grammar adapter for each language.

Usage:
    registry = LanguageRegistry()
    registry.detect_language_from_path("src/app.tsx")   # "tsx"
    grammar = registry.get_language(".py")              # Grammar or None

    registry.add_language(LanguageConfig(
        name="lua", grammar_source="lua", extensions=(".lua",),
    ))
"""

import logging
import threading
from pathlib import PurePath
from typing import Dict, Iterable, List, Optional, Tuple

from ...errors import GrammarLoadError
from .config import LanguageConfig
from .grammar import Grammar, TreeSitterGrammar

UNKNOWN_LANGUAGE = "unknown"

# Marks a language whose grammar failed to load (reported once)
_LOAD_FAILED = object()


class LanguageRegistry:
    """
    Registry of language configurations and their grammars.

    Thread-safe: lookups and lazy grammar loading may happen from
    concurrent scan tasks.
    """

    def __init__(
        self,
        languages: Optional[Iterable[LanguageConfig]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize registry.

        Args:
            languages: Initial configs (defaults to the built-in set)
            logger: Logger for load-failure warnings
        """
        self.logger = logger or logging.getLogger(__name__)
        self._configs: Dict[str, LanguageConfig] = {}  # key -> config (insertion ordered)
        self._adapters: Dict[str, Grammar] = {}  # key -> explicitly registered adapter
        self._grammars: Dict[str, object] = {}  # key -> loaded Grammar or _LOAD_FAILED
        self._lock = threading.RLock()

        if languages is None:
            from .languages import DEFAULT_LANGUAGES
            languages = DEFAULT_LANGUAGES

        for config in languages:
            self.add_language(config)

    # =========================================================================
    # Registration
    # =========================================================================

    def add_language(self, config: LanguageConfig, grammar: Optional[Grammar] = None) -> None:
        """
        Add or replace a language configuration.

        An existing name (case-insensitive) is replaced in place, keeping
        the language count unchanged; a new name is appended.

        Args:
            config: Language configuration
            grammar: Optional adapter instance; if omitted the grammar is
                loaded lazily from config.grammar_source
        """
        key = config.key
        with self._lock:
            self._configs[key] = config
            self._grammars.pop(key, None)
            if grammar is not None:
                self._adapters[key] = grammar
            else:
                self._adapters.pop(key, None)

    # =========================================================================
    # Lookup
    # =========================================================================

    def get_language_config(self, name: str) -> Optional[LanguageConfig]:
        """Get config by language name (case-insensitive)."""
        return self._configs.get(name.lower()) if name else None

    def get_language(self, extension_or_name: str) -> Optional[Grammar]:
        """
        Resolve an extension (".js") or a name ("JavaScript") to a grammar.

        Loads and caches the grammar on first use. A load failure is
        logged as a warning and yields None.

        Args:
            extension_or_name: Leading-dot extension or bare language name

        Returns:
            Grammar adapter, or None if unknown or failed to load
        """
        if not extension_or_name:
            return None

        if extension_or_name.startswith("."):
            config = self._config_for_extension(extension_or_name)
        else:
            config = self.get_language_config(extension_or_name)

        if config is None:
            return None
        return self._materialize(config)

    def detect_language_from_path(self, path: str) -> str:
        """
        Detect language id for a file path.

        Resolution order:
        1. Exact file name match (e.g., "Dockerfile")
        2. Longest registered extension match, case-insensitive
        3. "unknown"

        Args:
            path: File path (only the final component is inspected)

        Returns:
            Language name, or "unknown"
        """
        if not path:
            return UNKNOWN_LANGUAGE

        filename = PurePath(str(path)).name
        if not filename:
            return UNKNOWN_LANGUAGE

        with self._lock:
            configs = list(self._configs.values())

        for config in configs:
            if filename in config.filenames:
                return config.name

        lowered = filename.lower()
        best: Optional[Tuple[int, LanguageConfig]] = None
        for config in configs:
            for ext in config.extensions:
                ext_lower = ext.lower()
                # A dot-file such as ".gitignore" has no extension
                if len(lowered) > len(ext_lower) and lowered.endswith(ext_lower):
                    if best is None or len(ext_lower) > best[0]:
                        best = (len(ext_lower), config)

        return best[1].name if best else UNKNOWN_LANGUAGE

    def get_supported_languages(self) -> Tuple[str, ...]:
        """Snapshot of registered language names."""
        with self._lock:
            return tuple(config.name for config in self._configs.values())

    def get_supported_language_display_names(self) -> Tuple[str, ...]:
        """Snapshot of display names (falling back to names)."""
        with self._lock:
            return tuple(config.label for config in self._configs.values())

    def supported_extensions(self) -> List[str]:
        """All registered extensions, lowercased and sorted."""
        with self._lock:
            return sorted({
                ext.lower()
                for config in self._configs.values()
                for ext in config.extensions
            })

    # =========================================================================
    # Internals
    # =========================================================================

    def _config_for_extension(self, extension: str) -> Optional[LanguageConfig]:
        with self._lock:
            for config in self._configs.values():
                if config.matches_extension(extension):
                    return config
        return None

    def _materialize(self, config: LanguageConfig) -> Optional[Grammar]:
        key = config.key
        cached = self._grammars.get(key)
        if cached is _LOAD_FAILED:
            return None
        if cached is not None:
            return cached

        with self._lock:
            cached = self._grammars.get(key)
            if cached is not None:
                return None if cached is _LOAD_FAILED else cached

            adapter = self._adapters.get(key)
            if adapter is None:
                try:
                    adapter = TreeSitterGrammar.load(config)
                except GrammarLoadError as e:
                    self.logger.warning("%s", e)
                    self._grammars[key] = _LOAD_FAILED
                    return None

            self._grammars[key] = adapter
            return adapter

    def __len__(self) -> int:
        return len(self._configs)

    def __contains__(self, name: str) -> bool:
        return bool(name) and name.lower() in self._configs
