"""
Tests for UrlExtractor -- candidate selection and match construction.

Uses the fake grammar from factories.py, whose trees carry byte
offsets exactly like tree-sitter's.
"""

from urldetect.core.matcher import UrlMatcher
from urldetect.core.parsing.extractor import (
    SourceDocument,
    UrlExtractor,
    text_candidates,
    tree_candidates,
)
from urldetect.models import SourceType
from tests.factories import FakeGrammar, FakeNode, FakeTree


SOURCE = (
    'const api = "https://api.example.com/v1";\n'
    '// docs: https://docs.example.com/guide\n'
    'const x = 1;\n'
)


def parse(grammar, document):
    return grammar.create_parser().parse(document.raw)


class TestSourceDocument:
    """Decoding and offset conversion."""

    def test_ascii_offsets_are_identity(self):
        document = SourceDocument.from_text("a.fake", "plain ascii")
        assert document.is_ascii
        assert document.char_offset(6) == 6

    def test_multibyte_offsets(self):
        """Byte offsets after a multi-byte char shift back to char offsets."""
        document = SourceDocument.from_text("a.fake", 'é"x"')
        assert not document.is_ascii
        assert document.char_offset(0) == 0
        assert document.char_offset(2) == 1  # the quote after "é"
        assert document.char_offset(len(document.raw)) == len(document.text)

    def test_from_bytes_other_encoding(self):
        """Non-UTF-8 input is re-encoded so trees parse the same bytes."""
        document = SourceDocument.from_bytes("a.fake", "café".encode("latin-1"), encoding="latin-1")
        assert document.text == "café"
        assert document.raw == "café".encode("utf-8")


class TestCandidateSelection:
    """Which regions are matched."""

    def test_strings_only_by_default(self):
        """Comments are not candidates unless enabled."""
        grammar = FakeGrammar()
        document = SourceDocument.from_text("a.fake", SOURCE)
        spans = tree_candidates(document, parse(grammar, document), grammar)

        assert [s.source_type for s in spans] == [SourceType.STRING]
        assert document.text[spans[0].start:spans[0].end] == '"https://api.example.com/v1"'

    def test_comments_when_enabled(self):
        grammar = FakeGrammar()
        document = SourceDocument.from_text("a.fake", SOURCE)
        spans = tree_candidates(document, parse(grammar, document), grammar, include_comments=True)

        assert [s.source_type for s in spans] == [SourceType.STRING, SourceType.COMMENT]

    def test_selected_nodes_are_not_descended(self):
        """A string nested inside a string yields only the outer span."""
        grammar = FakeGrammar()
        document = SourceDocument.from_text("a.fake", '"outer "inner" end"')
        inner = FakeNode("string", 7, 14)
        outer = FakeNode("string", 0, 19, [inner])
        tree = FakeTree(FakeNode("program", 0, 19, [outer]))

        spans = tree_candidates(document, tree, grammar)
        assert [(s.start, s.end) for s in spans] == [(0, 19)]

    def test_spans_in_document_order(self):
        grammar = FakeGrammar()
        document = SourceDocument.from_text("a.fake", '"a" // b\n"c"')
        spans = tree_candidates(document, parse(grammar, document), grammar, include_comments=True)

        starts = [s.start for s in spans]
        assert starts == sorted(starts)
        assert len(spans) == 3

    def test_text_candidate_is_whole_file(self):
        document = SourceDocument.from_text("notes.txt", SOURCE)
        [span] = text_candidates(document)
        assert (span.start, span.end, span.source_type) == (0, len(SOURCE), SourceType.TEXT)

    def test_empty_file_has_no_candidates(self):
        assert text_candidates(SourceDocument.from_text("empty.txt", "")) == []


class TestUrlExtractor:
    """Match construction from spans."""

    def test_tree_match_positions(self):
        """start/end index the file text; line/column are 1-based."""
        grammar = FakeGrammar()
        document = SourceDocument.from_text("a.fake", SOURCE)
        extractor = UrlExtractor(UrlMatcher())

        [match] = extractor.extract_from_tree(document, parse(grammar, document), grammar)

        assert match.url == "https://api.example.com/v1"
        assert match.start == 13
        assert match.end == 13 + len(match.url)
        assert SOURCE[match.start:match.end] == match.url
        assert (match.line, match.column) == (1, 14)
        assert match.source_type == SourceType.STRING
        assert match.context == ()

    def test_comment_match(self):
        grammar = FakeGrammar()
        document = SourceDocument.from_text("a.fake", SOURCE)
        extractor = UrlExtractor(UrlMatcher())

        matches = extractor.extract_from_tree(
            document, parse(grammar, document), grammar, include_comments=True,
        )

        assert [m.url for m in matches] == [
            "https://api.example.com/v1",
            "https://docs.example.com/guide",
        ]
        assert (matches[1].line, matches[1].column) == (2, 10)
        assert matches[1].source_type == SourceType.COMMENT

    def test_fallback_finds_everything(self):
        """The regex fallback sees comments too, as text."""
        document = SourceDocument.from_text("notes.txt", SOURCE)
        matches = UrlExtractor(UrlMatcher()).extract_from_text(document)

        assert [m.url for m in matches] == [
            "https://api.example.com/v1",
            "https://docs.example.com/guide",
        ]
        assert all(m.source_type == SourceType.TEXT for m in matches)

    def test_context_lines(self):
        document = SourceDocument.from_text("notes.txt", SOURCE)
        matches = UrlExtractor(UrlMatcher(), context_lines=1).extract_from_text(document)

        assert matches[0].context == (
            'const api = "https://api.example.com/v1";',
            '// docs: https://docs.example.com/guide',
        )
        assert len(matches[1].context) == 3

    def test_columns_count_characters(self):
        """A multi-byte char earlier in the file does not skew positions."""
        text = 'title = "café"\nurl = "https://api.example.com/v1"\n'
        grammar = FakeGrammar()
        document = SourceDocument.from_text("a.fake", text)

        [match] = UrlExtractor(UrlMatcher()).extract_from_tree(
            document, parse(grammar, document), grammar,
        )

        assert match.start == text.index("https://")
        assert (match.line, match.column) == (2, 8)

    def test_no_urls(self):
        grammar = FakeGrammar()
        document = SourceDocument.from_text("a.fake", 'x = "no links here"')
        assert UrlExtractor(UrlMatcher()).extract_from_tree(document, parse(grammar, document), grammar) == []
