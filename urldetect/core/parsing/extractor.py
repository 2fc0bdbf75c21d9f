"""
UrlExtractor -- Turns candidate spans into UrlMatch results.

Two strategies feed the same matching step:
- Grammar-driven: walk the syntax tree, select string-literal nodes
  (and comment nodes when comments are enabled) as candidate spans
- Regex fallback: the whole file is a single "text" candidate

Candidate text is kept verbatim (quotes and escapes intact) so every
match offset maps back to the original file: offset = span start +
match index. Line, column and context always come from the file's
LineIndex, whichever strategy produced the span.

Usage:
    document = SourceDocument.from_bytes("app.js", raw)
    extractor = UrlExtractor(UrlMatcher(), context_lines=1)

    tree = parser.parse(document.raw)
    matches = extractor.extract_from_tree(document, tree, grammar, include_comments=True)

    # or, without a grammar
    matches = extractor.extract_from_text(document)
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

from ...models import SourceType, UrlMatch
from ..matcher import LineIndex, UrlMatcher
from .grammar import Grammar


@dataclass(frozen=True)
class CandidateSpan:
    """A contiguous source region selected for URL matching."""
    start: int  # character offset into the document text
    end: int
    source_type: SourceType


class SourceDocument:
    """
    Decoded file content plus the raw bytes it came from.

    tree-sitter reports byte offsets; results use character offsets.
    For pure-ASCII files the two coincide, otherwise a byte -> char
    table is built on first use.
    """

    def __init__(self, path: str, raw: bytes, text: str):
        self.path = path
        self.raw = raw
        self.text = text
        self.lines = LineIndex(text)
        self._byte_to_char: Optional[List[int]] = None

    @classmethod
    def from_bytes(cls, path: str, raw: bytes, encoding: str = "utf-8") -> "SourceDocument":
        """
        Decode raw bytes.

        Raises:
            UnicodeDecodeError: If raw is not valid in encoding
        """
        text = raw.decode(encoding)
        if encoding.lower().replace("-", "") != "utf8":
            raw = text.encode("utf-8")
        return cls(path, raw, text)

    @classmethod
    def from_text(cls, path: str, text: str) -> "SourceDocument":
        return cls(path, text.encode("utf-8"), text)

    @property
    def is_ascii(self) -> bool:
        return len(self.raw) == len(self.text)

    def char_offset(self, byte_offset: int) -> int:
        """Convert a UTF-8 byte offset to a character offset."""
        if self.is_ascii:
            return byte_offset
        if self._byte_to_char is None:
            table: List[int] = []
            for index, char in enumerate(self.text):
                table.extend([index] * len(char.encode("utf-8")))
            table.append(len(self.text))
            self._byte_to_char = table
        return self._byte_to_char[byte_offset]


# =============================================================================
# Candidate Selection
# =============================================================================

def tree_candidates(
    document: SourceDocument,
    tree: Any,
    grammar: Grammar,
    include_comments: bool = False,
) -> List[CandidateSpan]:
    """
    Select string (and optionally comment) nodes from a syntax tree.

    Walks every descendant of the root in document order, without
    recursion. A selected node's children are not visited, so spans
    never overlap. Comments are skipped entirely when include_comments
    is False.

    Args:
        document: Source the tree was parsed from
        tree: Parsed tree exposing root_node
        grammar: Adapter classifying node types
        include_comments: Whether comment nodes are candidates

    Returns:
        Candidate spans in document order
    """
    spans: List[CandidateSpan] = []
    for node, source_type in _walk(tree.root_node, grammar, include_comments):
        start = document.char_offset(node.start_byte)
        end = document.char_offset(node.end_byte)
        if end > start:
            spans.append(CandidateSpan(start, end, source_type))
    return spans


def _walk(root: Any, grammar: Grammar, include_comments: bool) -> Iterator[Tuple[Any, SourceType]]:
    stack = [root]
    while stack:
        node = stack.pop()
        if grammar.is_string_node(node):
            yield node, SourceType.STRING
            continue
        if grammar.is_comment_node(node):
            if include_comments:
                yield node, SourceType.COMMENT
            continue
        # Reversed so the leftmost child is popped first
        stack.extend(reversed(node.children))


def text_candidates(document: SourceDocument) -> List[CandidateSpan]:
    """Regex fallback: the whole file as one candidate."""
    if not document.text:
        return []
    return [CandidateSpan(0, len(document.text), SourceType.TEXT)]


# =============================================================================
# Extraction
# =============================================================================

class UrlExtractor:
    """
    Matches URLs inside candidate spans and builds UrlMatch results.

    Stateless apart from its configuration; one instance is shared by
    every scan task.
    """

    def __init__(self, matcher: UrlMatcher, context_lines: int = 0):
        self.matcher = matcher
        self.context_lines = context_lines

    def extract_from_tree(
        self,
        document: SourceDocument,
        tree: Any,
        grammar: Grammar,
        include_comments: bool = False,
    ) -> List[UrlMatch]:
        """Grammar-driven extraction."""
        spans = tree_candidates(document, tree, grammar, include_comments)
        return self.match_spans(document, spans)

    def extract_from_text(self, document: SourceDocument) -> List[UrlMatch]:
        """Regex fallback extraction over the full file."""
        return self.match_spans(document, text_candidates(document))

    def match_spans(self, document: SourceDocument, spans: List[CandidateSpan]) -> List[UrlMatch]:
        """
        Run the matcher over each span.

        Args:
            document: Source document
            spans: Non-overlapping candidate spans

        Returns:
            UrlMatch list in document order
        """
        text = document.text
        lines = document.lines
        matches: List[UrlMatch] = []

        for span in spans:
            for raw in self.matcher.find_all(text[span.start:span.end]):
                start = span.start + raw.start
                line, column = lines.position(start)
                matches.append(UrlMatch(
                    url=raw.url,
                    line=line,
                    column=column,
                    start=start,
                    end=span.start + raw.end,
                    context=lines.context(line, self.context_lines),
                    source_type=span.source_type,
                ))

        return matches
