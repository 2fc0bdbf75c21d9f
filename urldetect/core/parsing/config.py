"""
Parsing configuration data structures.

Defines LanguageConfig -- the per-language rules for locating
URL-bearing nodes in a tree-sitter syntax tree.

Design principle: New languages are added via config, not code changes.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class LanguageConfig:
    """
    Configuration for scanning a specific language.

    Attributes:
        name: Registry key, matched case-insensitively (e.g., "javascript")
        grammar_source: Grammar id in tree-sitter-language-pack (e.g., "javascript")
        extensions: File extensions with leading dot (e.g., ('.js', '.mjs'))
        filenames: Exact file names (e.g., ('Dockerfile',))
        display_name: Human-readable name (falls back to name)
        string_node_types: Node types treated as string-literal candidates
        comment_node_types: Node types treated as comment candidates
    """
    # Identity
    name: str
    grammar_source: str
    extensions: Tuple[str, ...] = ()
    filenames: Tuple[str, ...] = ()
    display_name: Optional[str] = None

    # Candidate node rules
    string_node_types: FrozenSet[str] = field(default_factory=lambda: frozenset({"string"}))
    comment_node_types: FrozenSet[str] = field(default_factory=lambda: frozenset({"comment"}))

    def __post_init__(self):
        # Accept any iterable from callers, store immutable snapshots
        object.__setattr__(self, "extensions", tuple(self.extensions))
        object.__setattr__(self, "filenames", tuple(self.filenames))
        object.__setattr__(self, "string_node_types", frozenset(self.string_node_types))
        object.__setattr__(self, "comment_node_types", frozenset(self.comment_node_types))

    @property
    def key(self) -> str:
        """Case-insensitive registry key."""
        return self.name.lower()

    @property
    def label(self) -> str:
        """Display name, falling back to name."""
        return self.display_name or self.name

    def matches_extension(self, ext: str) -> bool:
        """Check if this config handles the given extension."""
        ext = ext.lower()
        return any(e.lower() == ext for e in self.extensions)
