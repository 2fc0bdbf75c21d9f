"""
Tests for UrlMatcher and LineIndex -- URL recognition and positions.

Tests validate:
- Scheme/host/port/path recognition and where a URL ends
- FQDN policy (single-label hosts only when enabled)
- Trailing punctuation trimming
- Linear-time behavior on adversarial input
- Offset -> line/column conversion and context windows
"""

import pytest

from urldetect.core.matcher import LineIndex, UrlMatcher, build_url_pattern


def urls(text, **kwargs):
    return [m.url for m in UrlMatcher(**kwargs).find_all(text)]


# =============================================================================
# UrlMatcher Tests
# =============================================================================

class TestUrlMatcher:
    """URL shape recognition."""

    def test_offsets_relative_to_text(self):
        """Match offsets index into the scanned text."""
        text = 'see "https://example.com/a".'
        [match] = list(UrlMatcher().find_all(text))

        assert match.url == "https://example.com/a"
        assert match.start == 5
        assert match.end == 26
        assert text[match.start:match.end] == match.url

    def test_http_and_https(self):
        """Both default schemes match."""
        assert urls("http://a.example.com https://b.example.com") == [
            "http://a.example.com",
            "https://b.example.com",
        ]

    def test_port_query_fragment(self):
        """Port, query and fragment stay part of the URL."""
        assert urls("x https://example.com:8443/v1/users?id=7&x=y#top y") == [
            "https://example.com:8443/v1/users?id=7&x=y#top",
        ]

    def test_overlong_port_ends_at_host(self):
        """Six digits are not a port; no truncated port is reported."""
        assert urls("https://example.com:123456/path") == ["https://example.com"]
        assert urls("https://example.com:65535/path") == ["https://example.com:65535/path"]

    def test_trailing_punctuation_trimmed(self):
        """Sentence punctuation after a URL is not part of it."""
        assert urls("Visit https://example.com/docs.") == ["https://example.com/docs"]
        assert urls("See https://example.com, then") == ["https://example.com"]
        assert urls("Really https://example.com/path?!") == ["https://example.com/path"]

    def test_trailing_dot_after_host(self):
        """A dot ending the sentence does not become part of the host."""
        assert urls("Go to https://example.com.") == ["https://example.com"]

    def test_ends_at_quotes_and_brackets(self):
        """Quotes, angle brackets and whitespace end a URL."""
        assert urls("'https://example.com/a'") == ["https://example.com/a"]
        assert urls("<https://example.com/b>") == ["https://example.com/b"]
        assert urls("`https://example.com/c` and") == ["https://example.com/c"]

    def test_balanced_parentheses_kept(self):
        """Balanced parens in a path are kept, an unmatched closer ends it."""
        assert urls("(see https://en.wikipedia.org/wiki/Foo_(bar))") == [
            "https://en.wikipedia.org/wiki/Foo_(bar)",
        ]

    def test_unmatched_paren_ends_url(self):
        """A URL inside parentheses does not swallow the closing paren."""
        assert urls("(https://example.com/x)") == ["https://example.com/x"]

    def test_case_insensitive_scheme(self):
        """Scheme and host match regardless of case; text is preserved."""
        assert urls("HTTPS://Example.COM/Path") == ["HTTPS://Example.COM/Path"]

    def test_requires_fqdn_by_default(self):
        """Single-label hosts are rejected unless enabled."""
        assert urls("http://localhost:3000/api") == []
        assert urls("http://localhost:3000/api", include_non_fqdn=True) == [
            "http://localhost:3000/api",
        ]

    def test_scheme_must_start_a_token(self):
        """A scheme glued to a preceding word is not a URL start."""
        assert urls("xhttps://example.com") == []

    def test_no_host_no_match(self):
        """A bare scheme is not a URL."""
        assert urls("https:// and http://") == []

    def test_custom_schemes(self):
        """Only the configured schemes are recognized."""
        assert urls("ftp://files.example.com/x http://example.com", schemes=("ftp",)) == [
            "ftp://files.example.com/x",
        ]

    def test_empty_schemes_rejected(self):
        """Building a pattern without schemes fails."""
        with pytest.raises(ValueError):
            build_url_pattern(())

    def test_adversarial_host_is_linear(self):
        """A huge label with no dot finishes quickly and matches nothing."""
        text = "'https://" + "a" * 50_000 + "'"
        assert urls(text) == []

    def test_long_path(self):
        """A very long path is matched in full."""
        path = "/seg" * 2_000
        assert urls(f"https://example.com{path} tail") == [f"https://example.com{path}"]

    def test_matcher_is_reusable(self):
        """One matcher serves many texts."""
        matcher = UrlMatcher()
        assert len(list(matcher.find_all("https://a.example.com"))) == 1
        assert len(list(matcher.find_all("https://b.example.com"))) == 1


# =============================================================================
# LineIndex Tests
# =============================================================================

class TestLineIndex:
    """Offset to line/column conversion."""

    @pytest.fixture
    def index(self):
        return LineIndex("first\nsecond line\r\nthird")

    def test_line_count(self, index):
        assert index.line_count == 3

    def test_position_is_one_based(self, index):
        """Offsets map to 1-based line and column."""
        assert index.position(0) == (1, 1)
        assert index.position(4) == (1, 5)
        assert index.position(6) == (2, 1)
        assert index.position(13) == (2, 8)
        assert index.position(19) == (3, 1)

    def test_line_text_strips_terminators(self, index):
        """CRLF endings do not leak into line text."""
        assert index.line_text(1) == "first"
        assert index.line_text(2) == "second line"
        assert index.line_text(3) == "third"

    def test_context_zero_is_empty(self, index):
        assert index.context(2, 0) == ()

    def test_context_window(self, index):
        """Radius 1 returns the line and its neighbours."""
        assert index.context(2, 1) == ("first", "second line", "third")

    def test_context_clipped_to_file(self, index):
        """Windows never run past the first or last line."""
        assert index.context(1, 1) == ("first", "second line")
        assert index.context(3, 5) == ("first", "second line", "third")

    def test_trailing_newline_adds_empty_line(self):
        index = LineIndex("only\n")
        assert index.line_count == 2
        assert index.line_text(2) == ""
