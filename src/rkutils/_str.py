"""String helpers for quoting, slicing and URL path segments.

All indices are character indices, so slicing never splits a code point.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Set

ROOT_TOKEN = "/"
DEFAULT_QUOTES: frozenset[str] = frozenset({'"', "'"})


def is_quoted(s: str) -> bool:
    """Return True if `s` starts with a quote and ends with the same character."""
    return s.startswith(("'", '"')) and s[0] == s[-1]


def substring(s: str, start: int, end: int) -> str:
    """Return a slice of `s` between two possibly negative indices.

    A negative `start` counts from the end of the string. An `end` of zero or
    less also counts from the end, so ``substring(s, 3, 0)`` is everything
    from index 3 on. An empty string is returned when the resolved start lies
    past the resolved end.

    Example:
        >>> substring("Hello, World!", -6, -1)
        'World'

    """
    length = len(s)
    begin = max(length + start, 0) if start < 0 else min(start, length)
    stop = max(length + end, 0) if end <= 0 else min(end, length)
    if begin > stop:
        return ""
    return s[begin:stop]


def unquote(s: str, *, unescape: bool = True, quote_set: Set[str] | None = None) -> str:
    """Strip matching surrounding quotes from `s`.

    Args:
        s: The string to unquote.
        unescape: Replace escaped quote characters (``\\'``) in the body with
            the bare quote character.
        quote_set: Characters accepted as quotes. Defaults to single and
            double quotes.

    Returns:
        The unquoted body, or `s` unchanged when it is not quoted with a
        character from `quote_set`.

    """
    if len(s) < 2:
        return s

    quote = s[0]
    if quote != s[-1]:
        return s
    if quote not in (DEFAULT_QUOTES if quote_set is None else quote_set):
        return s

    body = substring(s, 1, -1)
    if unescape:
        return body.replace(f"\\{quote}", quote)
    return body


def url_to_nodes(url: str) -> list[str]:
    """Split a URL path into trie tokens.

    The result always starts with `ROOT_TOKEN`; empty segments are dropped.

    Example:
        >>> url_to_nodes("/cloud//instance/")
        ['/', 'cloud', 'instance']

    """
    return [ROOT_TOKEN, *(segment for segment in url.split("/") if segment)]


def ensure_prefix(s: str, prefix: str) -> str:
    return s if s.startswith(prefix) else f"{prefix}{s}"


def ensure_suffix(s: str, suffix: str) -> str:
    return s if s.endswith(suffix) else f"{s}{suffix}"


def drop_prefix(s: str, prefix: str) -> str:
    return s[len(prefix) :] if s.startswith(prefix) else s


def drop_suffix(s: str, suffix: str) -> str:
    # An empty suffix would slice to s[:0]
    if suffix and s.endswith(suffix):
        return s[: -len(suffix)]
    return s


def join_path_segment(url: str, segment: str) -> str:
    """Append one path segment to `url` with exactly one slash between them."""
    return ensure_suffix(url, "/") + drop_prefix(segment, "/")


def join_path_segments(url: str, segments: Iterable[str]) -> str:
    """Append each of `segments` to `url` in turn.

    Example:
        >>> join_path_segments("http://example.com/", ["/api", "v1"])
        'http://example.com/api/v1'

    """
    for segment in segments:
        url = join_path_segment(url, segment)
    return url
