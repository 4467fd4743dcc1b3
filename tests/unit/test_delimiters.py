#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_delimiters.py
"""Unit tests for the delimiter table and delimiter formatting."""

import pytest

from somedoc.formats import FormatFamily, MarkdownFlavor
from somedoc.utils.delimiters import DELIMITERS, Delimiter, DelimiterKind, Feature, is_supported, lookup


@pytest.mark.unit
class TestDelimiterFormatting:
    """Tests for each placement rule."""

    def test_none_returns_value(self):
        assert Delimiter.none().format("v") == "v"
        assert Delimiter.none().opener == ""
        assert Delimiter.none().is_none

    def test_just_ignores_value(self):
        assert Delimiter.just("----").format("ignored") == "----"

    def test_prefix_and_suffix(self):
        assert Delimiter.prefix("!").format("a") == "!a"
        assert Delimiter.suffix("!").format("a") == "a!"

    def test_pair(self):
        assert Delimiter.pair("*").format("x") == "*x*"
        assert Delimiter.pair("[[image:", "]]").format("a.png") == "[[image:a.png]]"

    def test_padded(self):
        assert Delimiter.padded_prefix("-").format("a") == "- a"
        assert Delimiter.padded_suffix("!").format("a") == "a !"
        assert Delimiter.padded_pair("=").format("T") == "= T ="

    def test_multiplied(self):
        assert Delimiter.multiplied_prefix("#", " ").format_with_multiple("H", 2) == "## H"
        assert Delimiter.multiplied_pair("=", " ").format_with_multiple("T", 3) == "=== T ==="
        assert Delimiter.multiplied_prefix("#").format_with_multiple("H", 3) == "###H"

    def test_multiple_below_one_treated_as_one(self):
        assert Delimiter.multiplied_prefix("#", " ").opener_with_multiple(0) == "# "

    def test_line_prefix(self):
        assert Delimiter.line_prefix("> ").format("a\nb") == "> a\n> b"

    def test_opener_and_closer(self):
        delimiter = Delimiter.padded_pair("{{", "}}")
        assert delimiter.opener == "{{ "
        assert delimiter.closer == " }}"
        assert Delimiter.prefix("!").closer == ""
        assert Delimiter.suffix("!").opener == ""

    def test_kind(self):
        assert Delimiter.multiplied_pair("=").kind is DelimiterKind.PAIR
        assert Delimiter.multiplied_pair("=", " ").kind is DelimiterKind.PADDED_PAIR


@pytest.mark.unit
class TestDelimiterLookup:
    """Tests for table lookup with flavor fallback."""

    def test_flavor_entry_preferred(self):
        strict = lookup(FormatFamily.MARKDOWN, MarkdownFlavor.STRICT, Feature.BLOCK_CODE)
        assert strict.kind is DelimiterKind.LINE_PREFIX

    def test_falls_back_to_family(self):
        assert lookup(FormatFamily.MARKDOWN, MarkdownFlavor.GITHUB, Feature.BLOCK_CODE) == Delimiter.pair("```")
        assert lookup(FormatFamily.MARKDOWN, None, Feature.BOLD) == Delimiter.pair("**")

    def test_missing_entry_is_none(self):
        assert lookup(FormatFamily.MARKDOWN, MarkdownFlavor.COMMONMARK, Feature.STRIKETHROUGH).is_none
        assert lookup(FormatFamily.HTML, None, Feature.BOLD).is_none

    def test_flavored_features(self):
        assert lookup(FormatFamily.MARKDOWN, MarkdownFlavor.GITHUB, Feature.STRIKETHROUGH) == Delimiter.pair("~~")
        assert is_supported(FormatFamily.MARKDOWN, MarkdownFlavor.MULTI, Feature.INLINE_MATH)
        assert not is_supported(FormatFamily.MARKDOWN, MarkdownFlavor.PHP_EXTRA, Feature.INLINE_MATH)

    def test_xwiki_entries(self):
        assert lookup(FormatFamily.XWIKI, None, Feature.ITALIC).format("x") == "//x//"
        assert lookup(FormatFamily.XWIKI, None, Feature.BLOCK_HEADING).format_with_multiple("H", 2) == "== H =="
        assert is_supported(FormatFamily.XWIKI, None, Feature.UNDERLINE)
        assert not is_supported(FormatFamily.MARKDOWN, MarkdownFlavor.GITHUB, Feature.UNDERLINE)

    def test_xwiki_entries_are_flavorless(self):
        assert all(flavor is None for family, flavor, _ in DELIMITERS if family is FormatFamily.XWIKI)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            DELIMITERS[(FormatFamily.MARKDOWN, None, Feature.BOLD)] = Delimiter.pair("__")  # type: ignore[index]
