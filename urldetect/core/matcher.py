"""
URL Matcher -- Finds URL-shaped substrings and maps them to positions.

UrlMatcher:
    scheme "://" host [":" port] [path/query/fragment]

    - scheme: http/https by default, extendable
    - host: dot-separated alphanumeric/hyphen labels; two or more labels
      unless non-FQDN mode is on (then "localhost" style hosts match)
    - port: at most five digits; a longer digit run is not a port and
      the URL ends at the host
    - path: ends at whitespace, quotes, backticks, angle brackets,
      backslashes, or an unmatched closing ) ] }
    - trailing sentence punctuation is trimmed

    The pattern has no nested unbounded quantifiers, so matching is
    linear in the input. Compiled patterns are immutable and shared
    safely between threads.

LineIndex:
    Line-start offset table built once per file; converts offsets to
    1-based line/column and extracts context windows.
"""

import re
from bisect import bisect_right
from typing import Iterator, List, NamedTuple, Sequence, Tuple

DEFAULT_SCHEMES = ("http", "https")

# One DNS label: 1-63 chars, no leading/trailing hyphen
_LABEL = r"[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?"

# Characters allowed in a path outside bracket groups
_PATH_CHAR = r"[^\s\"'`<>\\()\[\]{}]"

# Balanced one-level bracket groups keep "wiki/Foo_(bar)" intact while an
# unmatched closer ends the URL
_PATH = (
    rf"(?:{_PATH_CHAR}"
    rf"|\({_PATH_CHAR}*\)"
    rf"|\[{_PATH_CHAR}*\]"
    rf"|\{{{_PATH_CHAR}*\}})*"
)

_TRAILING_PUNCTUATION = ".,;:!?*"


class RawMatch(NamedTuple):
    """A URL found in a piece of text (offsets relative to that text)."""
    start: int
    end: int
    url: str


def build_url_pattern(schemes: Sequence[str] = DEFAULT_SCHEMES, include_non_fqdn: bool = False) -> "re.Pattern":
    """
    Compile the URL pattern.

    Args:
        schemes: Accepted schemes (e.g., ("http", "https", "ftp"))
        include_non_fqdn: Accept single-label hosts such as "localhost"

    Returns:
        Compiled, case-insensitive pattern
    """
    if not schemes:
        raise ValueError("At least one scheme is required")

    # Longest first so "https" wins over "http"
    alternatives = "|".join(
        re.escape(s) for s in sorted({s.lower() for s in schemes}, key=len, reverse=True)
    )
    host_repeat = "*" if include_non_fqdn else "+"

    return re.compile(
        rf"(?<![\w+.-])"
        rf"(?:{alternatives})://"
        rf"{_LABEL}(?:\.{_LABEL}){host_repeat}"
        rf"(?::\d{{1,5}}(?!\d))?"
        rf"(?:[/?#]{_PATH})?",
        re.IGNORECASE,
    )


class UrlMatcher:
    """
    Stateless URL finder.

    Example:
        matcher = UrlMatcher()
        list(matcher.find_all('see "https://example.com/a".'))
        # [RawMatch(start=5, end=26, url='https://example.com/a')]
    """

    def __init__(self, schemes: Sequence[str] = DEFAULT_SCHEMES, include_non_fqdn: bool = False):
        self.schemes = tuple(schemes)
        self.include_non_fqdn = include_non_fqdn
        self._pattern = build_url_pattern(self.schemes, include_non_fqdn)

    def find_all(self, text: str) -> Iterator[RawMatch]:
        """
        Yield non-overlapping URL matches, left to right.

        Args:
            text: Text to scan (a candidate span or a whole file)

        Yields:
            RawMatch with offsets relative to text
        """
        for match in self._pattern.finditer(text):
            # Hosts end in an alphanumeric, so trimming never reaches them
            url = match.group(0).rstrip(_TRAILING_PUNCTUATION)
            start = match.start()
            yield RawMatch(start, start + len(url), url)


class LineIndex:
    """
    Maps character offsets in a file to lines and columns.

    Built once per file in a single linear pass. Lines are split on
    "\\n"; a trailing "\\r" is dropped from context lines.
    """

    def __init__(self, text: str):
        self.text = text
        starts: List[int] = [0]
        find = text.find
        pos = find("\n")
        while pos != -1:
            starts.append(pos + 1)
            pos = find("\n", pos + 1)
        self._starts = starts

    @property
    def line_count(self) -> int:
        return len(self._starts)

    def position(self, offset: int) -> Tuple[int, int]:
        """
        Convert an offset to (line, column), both 1-based.
        """
        index = bisect_right(self._starts, offset) - 1
        return index + 1, offset - self._starts[index] + 1

    def line_text(self, line: int) -> str:
        """Text of a 1-based line, without its line terminator."""
        start = self._starts[line - 1]
        if line < len(self._starts):
            end = self._starts[line] - 1
        else:
            end = len(self.text)
        return self.text[start:end].rstrip("\r")

    def context(self, line: int, radius: int) -> Tuple[str, ...]:
        """
        Lines surrounding a 1-based line, clipped to the file.

        Args:
            line: Line of the match
            radius: Lines before and after to include (0 = none)

        Returns:
            Tuple of lines, in file order
        """
        if radius <= 0:
            return ()
        first = max(1, line - radius)
        last = min(self.line_count, line + radius)
        return tuple(self.line_text(n) for n in range(first, last + 1))
