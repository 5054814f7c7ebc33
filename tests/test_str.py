"""Tests for the string helpers in rkutils._str."""

import pytest

from rkutils._str import (
    ROOT_TOKEN,
    drop_prefix,
    drop_suffix,
    ensure_prefix,
    ensure_suffix,
    is_quoted,
    join_path_segment,
    join_path_segments,
    substring,
    unquote,
    url_to_nodes,
)


class TestSubstring:
    def test_positive_indices(self) -> None:
        s = "Hello, World!"
        assert substring(s, 0, 5) == "Hello"
        assert substring(s, 7, 12) == "World"

    def test_negative_indices(self) -> None:
        assert substring("Hello, World!", -6, -1) == "World"

    def test_zero_end_means_end_of_string(self) -> None:
        assert substring("Hello", 1, 0) == "ello"

    def test_start_after_end_is_empty(self) -> None:
        assert substring("Hello", 3, 1) == ""

    def test_out_of_range_indices_clamp(self) -> None:
        assert substring("abc", -10, 2) == "ab"
        assert substring("abc", 1, 99) == "bc"

    def test_indexes_characters_not_bytes(self) -> None:
        assert substring("héllo wörld", 1, 3) == "él"
        assert substring("héllo wörld", -5, -3) == "wö"


class TestIsQuoted:
    @pytest.mark.parametrize("s", ['"Hello World!"', "'Hello World!'", "''"])
    def test_quoted(self, s: str) -> None:
        assert is_quoted(s)

    @pytest.mark.parametrize("s", ["Hello World!", "'Hello World!\"", "", "Hello'"])
    def test_not_quoted(self, s: str) -> None:
        assert not is_quoted(s)


class TestUnquote:
    def test_double_quotes(self) -> None:
        assert unquote('"Hello World!"') == "Hello World!"

    def test_single_quotes(self) -> None:
        assert unquote("'Hello World!'") == "Hello World!"

    def test_unescapes_inner_quote(self) -> None:
        assert unquote("'Hello \\'World!'") == "Hello 'World!"
        assert unquote("'\\'Hello, World!\\''") == "'Hello, World!'"

    def test_without_unescape_keeps_backslashes(self) -> None:
        assert unquote("'Hello \\'World!'", unescape=False) == "Hello \\'World!"

    def test_mismatched_quotes_are_left_alone(self) -> None:
        assert unquote("'Hello\"") == "'Hello\""

    def test_short_strings_are_left_alone(self) -> None:
        assert unquote("") == ""
        assert unquote("'") == "'"

    def test_custom_quote_set(self) -> None:
        assert unquote("`code`", quote_set={"`"}) == "code"
        assert unquote('"text"', quote_set={"'"}) == '"text"'

    def test_unquoted_string_is_returned_unchanged(self) -> None:
        assert unquote("plain") == "plain"


class TestUrlToNodes:
    def test_leading_root_token(self) -> None:
        assert url_to_nodes("/cloud/instance/") == [ROOT_TOKEN, "cloud", "instance"]

    def test_root(self) -> None:
        assert url_to_nodes("/") == ["/"]
        assert url_to_nodes("") == ["/"]

    def test_empty_segments_are_dropped(self) -> None:
        assert url_to_nodes("//a///b") == ["/", "a", "b"]

    def test_relative_path(self) -> None:
        assert url_to_nodes("builder") == ["/", "builder"]


class TestPrefixSuffix:
    def test_ensure_prefix(self) -> None:
        assert ensure_prefix("api", "/") == "/api"
        assert ensure_prefix("/api", "/") == "/api"

    def test_ensure_suffix(self) -> None:
        assert ensure_suffix("http://example.com", "/") == "http://example.com/"
        assert ensure_suffix("http://example.com/", "/") == "http://example.com/"

    def test_drop_prefix(self) -> None:
        assert drop_prefix("/path", "/") == "path"
        assert drop_prefix("path", "/") == "path"

    def test_drop_suffix(self) -> None:
        assert drop_suffix("file.toml", ".toml") == "file"
        assert drop_suffix("file.toml", ".json") == "file.toml"

    def test_drop_empty_suffix(self) -> None:
        assert drop_suffix("abc", "") == "abc"


class TestJoinPathSegments:
    @pytest.mark.parametrize(
        ("base", "segment"),
        [
            ("http://example.com", "/path"),
            ("http://example.com", "path"),
            ("http://example.com/", "path"),
            ("http://example.com/", "/path"),
        ],
    )
    def test_single_slash_between(self, base: str, segment: str) -> None:
        assert join_path_segments(base, [segment]) == "http://example.com/path"

    def test_multiple_segments(self) -> None:
        assert join_path_segments("http://example.com", ["api/", "/v1", "users"]) == "http://example.com/api/v1/users"

    def test_no_segments(self) -> None:
        assert join_path_segments("http://example.com", []) == "http://example.com"

    def test_join_path_segment(self) -> None:
        assert join_path_segment("/api", "/v1") == "/api/v1"
