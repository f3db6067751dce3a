"""Tests for query parsing and URL joining."""

import pytest

from abuseipdb_sdk._internal.dispatch.query import (
    QueryParseError,
    encode_query,
    join_url,
    parse_query,
)


class TestParseQuery:
    """Tests for parse_query function."""

    def test_parses_pairs_in_order(self):
        """Should decode pairs and keep their order."""
        assert parse_query("ipAddress=1.2.3.4&maxAgeInDays=30") == [
            ("ipAddress", "1.2.3.4"),
            ("maxAgeInDays", "30"),
        ]

    def test_empty_query(self):
        """Should return no pairs for an empty string."""
        assert parse_query("") == []

    def test_skips_empty_segments(self):
        """Should ignore doubled separators."""
        assert parse_query("a=1&&b=2&") == [("a", "1"), ("b", "2")]

    def test_key_without_value(self):
        """Should give a bare key an empty value."""
        assert parse_query("verbose") == [("verbose", "")]

    def test_decodes_plus_and_escapes(self):
        """Should decode "+" and percent-escapes."""
        assert parse_query("comment=SSH+login%3A%20root") == [("comment", "SSH login: root")]

    def test_repeated_keys(self):
        """Should keep every value of a repeated key."""
        assert parse_query("c=18&c=22") == [("c", "18"), ("c", "22")]

    @pytest.mark.parametrize("query", ["%zz", "a=%", "a=%4", "%g1=x"])
    def test_invalid_escape(self, query):
        """Should reject malformed percent-escapes."""
        with pytest.raises(QueryParseError, match="invalid URL escape"):
            parse_query(query)

    def test_semicolon_separator(self):
        """Should reject ";" as a separator."""
        with pytest.raises(QueryParseError, match="semicolon"):
            parse_query("a=1;b=2")

    def test_invalid_utf8(self):
        """Should reject escapes that are not UTF-8."""
        with pytest.raises(QueryParseError):
            parse_query("a=%ff%fe")


class TestEncodeQuery:
    """Tests for encode_query function."""

    def test_sorts_by_key(self):
        """Should sort keys and keep value order per key."""
        pairs = [("b", "2"), ("a", "x"), ("b", "1")]
        assert encode_query(pairs) == "a=x&b=2&b=1"

    def test_percent_encodes(self):
        """Should escape reserved characters."""
        assert encode_query([("categories", "18,22")]) == "categories=18%2C22"

    def test_empty(self):
        """Should encode nothing as an empty string."""
        assert encode_query([]) == ""


class TestJoinUrl:
    """Tests for join_url function."""

    @pytest.mark.parametrize(
        ("root", "path"),
        [
            ("https://api.test/v2", "check"),
            ("https://api.test/v2/", "check"),
            ("https://api.test/v2", "/check"),
            ("https://api.test/v2/", "/check/"),
        ],
    )
    def test_single_separator(self, root, path):
        """Should join with exactly one slash."""
        assert join_url(root, path) == "https://api.test/v2/check"

    def test_collapses_inner_slashes(self):
        """Should collapse repeated slashes inside the path."""
        assert join_url("https://api.test/v2", "a//b") == "https://api.test/v2/a/b"

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("check?x", "check%3Fx"),
            ("check#x", "check%23x"),
            ("a b", "a%20b"),
            ("already%20escaped", "already%20escaped"),
            ("user:name@host", "user:name@host"),
        ],
    )
    def test_escapes_segments(self, path, expected):
        """Should escape URL delimiters once and leave path-safe characters."""
        assert join_url("https://api.test/v2", path) == f"https://api.test/v2/{expected}"

    def test_empty_path(self):
        """Should return the root for an empty path."""
        assert join_url("https://api.test/v2/", "/") == "https://api.test/v2"
