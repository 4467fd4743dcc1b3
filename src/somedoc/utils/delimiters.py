#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/utils/delimiters.py
"""Delimiter lookup table for lexical markup features.

Text-based writers decorate content with delimiters: emphasis markers around
a span, hashes before a heading, a bullet before a list item. This module
describes those decorations as :class:`Delimiter` values and stores them in a
table keyed by ``(FormatFamily, MarkdownFlavor | None, Feature)``.

A lookup first tries the flavored key and then falls back to the family-wide
key (flavor ``None``), so flavors only list what differs from the family.

Examples
--------
    >>> heading = lookup(FormatFamily.MARKDOWN, MarkdownFlavor.GITHUB, Feature.BLOCK_HEADING)
    >>> heading.format_with_multiple("Intro", 2)
    '## Intro'
    >>> lookup(FormatFamily.MARKDOWN, MarkdownFlavor.STRICT, Feature.STRIKETHROUGH).is_none
    True

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from somedoc.formats import FormatFamily, MarkdownFlavor


class Feature(Enum):
    """Lexical features that have a delimiter in some format."""

    EMOJI = "emoji"
    ITALIC = "italic"
    SLANTED = "slanted"
    BOLD = "bold"
    MONO = "mono"
    CODE = "code"
    STRIKETHROUGH = "strikethrough"
    UNDERLINE = "underline"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"
    INLINE_IMAGE = "inline_image"
    INLINE_MATH = "inline_math"
    LINE_BREAK = "line_break"
    BLOCK_HEADING = "block_heading"
    ORDERED_LIST = "ordered_list"
    UNORDERED_LIST = "unordered_list"
    FORMATTED = "formatted"
    BLOCK_CODE = "block_code"
    BLOCK_MATH = "block_math"
    BLOCK_QUOTE = "block_quote"
    THEMATIC_BREAK = "thematic_break"
    SEPARATOR = "separator"


class DelimiterKind(Enum):
    """How a delimiter is placed around a value."""

    NONE = "none"
    JUST = "just"
    PREFIX = "prefix"
    SUFFIX = "suffix"
    PAIR = "pair"
    PADDED_PREFIX = "padded_prefix"
    PADDED_SUFFIX = "padded_suffix"
    PADDED_PAIR = "padded_pair"
    LINE_PREFIX = "line_prefix"


@dataclass(frozen=True)
class Delimiter:
    """A textual decoration rule.

    Parameters
    ----------
    kind : DelimiterKind
        Placement rule
    start : str, default = ""
        Text placed before the value (or the whole output for ``JUST``)
    end : str, default = ""
        Text placed after the value
    padding : str, default = ""
        Text between a delimiter and the value for the padded kinds
    multiply_prefix : bool, default = False
        Repeat ``start`` when formatting with a multiple
    multiply_suffix : bool, default = False
        Repeat ``end`` when formatting with a multiple

    """

    kind: DelimiterKind
    start: str = ""
    end: str = ""
    padding: str = ""
    multiply_prefix: bool = False
    multiply_suffix: bool = False

    @classmethod
    def none(cls) -> Delimiter:
        return cls(DelimiterKind.NONE)

    @classmethod
    def just(cls, text: str) -> Delimiter:
        """A delimiter that replaces the value entirely."""
        return cls(DelimiterKind.JUST, start=text)

    @classmethod
    def prefix(cls, text: str) -> Delimiter:
        return cls(DelimiterKind.PREFIX, start=text)

    @classmethod
    def suffix(cls, text: str) -> Delimiter:
        return cls(DelimiterKind.SUFFIX, end=text)

    @classmethod
    def pair(cls, start: str, end: str | None = None) -> Delimiter:
        """A delimiter on both sides; ``end`` defaults to ``start``."""
        return cls(DelimiterKind.PAIR, start=start, end=start if end is None else end)

    @classmethod
    def padded_prefix(cls, text: str, padding: str = " ") -> Delimiter:
        return cls(DelimiterKind.PADDED_PREFIX, start=text, padding=padding)

    @classmethod
    def padded_suffix(cls, text: str, padding: str = " ") -> Delimiter:
        return cls(DelimiterKind.PADDED_SUFFIX, end=text, padding=padding)

    @classmethod
    def padded_pair(cls, start: str, end: str | None = None, padding: str = " ") -> Delimiter:
        return cls(DelimiterKind.PADDED_PAIR, start=start, end=start if end is None else end, padding=padding)

    @classmethod
    def multiplied_prefix(cls, text: str, padding: str = "") -> Delimiter:
        """A prefix repeated by the multiple, e.g. ``#`` per heading level."""
        kind = DelimiterKind.PADDED_PREFIX if padding else DelimiterKind.PREFIX
        return cls(kind, start=text, padding=padding, multiply_prefix=True)

    @classmethod
    def multiplied_pair(cls, text: str, padding: str = "") -> Delimiter:
        """A pair repeated on both sides by the multiple, e.g. ``=`` per wiki heading level."""
        kind = DelimiterKind.PADDED_PAIR if padding else DelimiterKind.PAIR
        return cls(kind, start=text, end=text, padding=padding, multiply_prefix=True, multiply_suffix=True)

    @classmethod
    def line_prefix(cls, text: str) -> Delimiter:
        """A prefix placed at the start of every line of the value."""
        return cls(DelimiterKind.LINE_PREFIX, start=text)

    @property
    def is_none(self) -> bool:
        return self.kind is DelimiterKind.NONE

    @property
    def opener(self) -> str:
        """Text emitted before streamed content (with padding where applicable)."""
        return self.opener_with_multiple(1)

    @property
    def closer(self) -> str:
        """Text emitted after streamed content (with padding where applicable)."""
        return self.closer_with_multiple(1)

    def opener_with_multiple(self, times: int) -> str:
        times = max(times, 1)
        start = self.start * times if self.multiply_prefix else self.start
        if self.kind in (DelimiterKind.PREFIX, DelimiterKind.PAIR, DelimiterKind.LINE_PREFIX, DelimiterKind.JUST):
            return start
        if self.kind in (DelimiterKind.PADDED_PREFIX, DelimiterKind.PADDED_PAIR):
            return start + self.padding
        return ""

    def closer_with_multiple(self, times: int) -> str:
        times = max(times, 1)
        end = self.end * times if self.multiply_suffix else self.end
        if self.kind in (DelimiterKind.SUFFIX, DelimiterKind.PAIR):
            return end
        if self.kind in (DelimiterKind.PADDED_SUFFIX, DelimiterKind.PADDED_PAIR):
            return self.padding + end
        return ""

    def format(self, value: str = "") -> str:
        """Decorate ``value``."""
        return self.format_with_multiple(value, 1)

    def format_with_multiple(self, value: str, times: int) -> str:
        """Decorate ``value``, repeating multiplied delimiters ``times`` times.

        ``NONE`` returns the value unchanged and ``JUST`` ignores it.
        """
        if self.kind is DelimiterKind.NONE:
            return value
        if self.kind is DelimiterKind.JUST:
            return self.opener_with_multiple(times)
        if self.kind is DelimiterKind.LINE_PREFIX:
            prefix = self.opener_with_multiple(times)
            return "\n".join(f"{prefix}{line}" for line in value.split("\n"))
        return f"{self.opener_with_multiple(times)}{value}{self.closer_with_multiple(times)}"


DelimiterKey = tuple[FormatFamily, Optional[MarkdownFlavor], Feature]

_MD = FormatFamily.MARKDOWN
_WIKI = FormatFamily.XWIKI

_TABLE: dict[DelimiterKey, Delimiter] = {
    # Markdown, shared by every flavor
    (_MD, None, Feature.EMOJI): Delimiter.pair(":"),
    (_MD, None, Feature.ITALIC): Delimiter.pair("*"),
    (_MD, None, Feature.SLANTED): Delimiter.pair("*"),
    (_MD, None, Feature.BOLD): Delimiter.pair("**"),
    (_MD, None, Feature.MONO): Delimiter.pair("`"),
    (_MD, None, Feature.CODE): Delimiter.pair("`"),
    (_MD, None, Feature.INLINE_IMAGE): Delimiter.prefix("!"),
    (_MD, None, Feature.LINE_BREAK): Delimiter.just("  \n"),
    (_MD, None, Feature.BLOCK_HEADING): Delimiter.multiplied_prefix("#", " "),
    (_MD, None, Feature.ORDERED_LIST): Delimiter.just("1. "),
    (_MD, None, Feature.UNORDERED_LIST): Delimiter.just("* "),
    (_MD, None, Feature.FORMATTED): Delimiter.line_prefix("    "),
    (_MD, None, Feature.BLOCK_CODE): Delimiter.pair("```"),
    (_MD, None, Feature.BLOCK_QUOTE): Delimiter.multiplied_prefix(">", " "),
    (_MD, None, Feature.THEMATIC_BREAK): Delimiter.just("-----"),
    (_MD, None, Feature.SEPARATOR): Delimiter.just("\n"),
    # Markdown, per flavor
    (_MD, MarkdownFlavor.STRICT, Feature.BLOCK_CODE): Delimiter.line_prefix("    "),
    (_MD, MarkdownFlavor.GITHUB, Feature.STRIKETHROUGH): Delimiter.pair("~~"),
    (_MD, MarkdownFlavor.GITHUB, Feature.INLINE_MATH): Delimiter.pair("$"),
    (_MD, MarkdownFlavor.GITHUB, Feature.BLOCK_MATH): Delimiter.pair("$$\n", "\n$$"),
    (_MD, MarkdownFlavor.MULTI, Feature.INLINE_MATH): Delimiter.pair("$"),
    (_MD, MarkdownFlavor.MULTI, Feature.BLOCK_MATH): Delimiter.pair("$$\n", "\n$$"),
    # XWiki
    (_WIKI, None, Feature.ITALIC): Delimiter.pair("//"),
    (_WIKI, None, Feature.SLANTED): Delimiter.pair("//"),
    (_WIKI, None, Feature.BOLD): Delimiter.pair("**"),
    (_WIKI, None, Feature.MONO): Delimiter.pair("##"),
    (_WIKI, None, Feature.CODE): Delimiter.pair("##"),
    (_WIKI, None, Feature.STRIKETHROUGH): Delimiter.pair("--"),
    (_WIKI, None, Feature.UNDERLINE): Delimiter.pair("__"),
    (_WIKI, None, Feature.SUPERSCRIPT): Delimiter.pair("^^"),
    (_WIKI, None, Feature.SUBSCRIPT): Delimiter.pair(",,"),
    (_WIKI, None, Feature.EMOJI): Delimiter.pair(":"),
    (_WIKI, None, Feature.INLINE_IMAGE): Delimiter.pair("[[image:", "]]"),
    (_WIKI, None, Feature.INLINE_MATH): Delimiter.pair("{{formula}}", "{{/formula}}"),
    (_WIKI, None, Feature.BLOCK_MATH): Delimiter.pair("{{formula}}\n", "\n{{/formula}}"),
    (_WIKI, None, Feature.LINE_BREAK): Delimiter.just("\\\\"),
    (_WIKI, None, Feature.BLOCK_HEADING): Delimiter.multiplied_pair("=", " "),
    (_WIKI, None, Feature.ORDERED_LIST): Delimiter.just("1"),
    (_WIKI, None, Feature.UNORDERED_LIST): Delimiter.just("*"),
    (_WIKI, None, Feature.FORMATTED): Delimiter.pair("{{{\n", "\n}}}"),
    (_WIKI, None, Feature.BLOCK_CODE): Delimiter.pair("{{code}}\n", "\n{{/code}}"),
    (_WIKI, None, Feature.BLOCK_QUOTE): Delimiter.multiplied_prefix(">", " "),
    (_WIKI, None, Feature.THEMATIC_BREAK): Delimiter.just("----"),
    (_WIKI, None, Feature.SEPARATOR): Delimiter.just("\n"),
}

DELIMITERS: Mapping[DelimiterKey, Delimiter] = MappingProxyType(_TABLE)

_NONE = Delimiter.none()


def lookup(family: FormatFamily, flavor: Optional[MarkdownFlavor], feature: Feature) -> Delimiter:
    """Find the delimiter for a feature.

    Parameters
    ----------
    family : FormatFamily
        Writer family
    flavor : MarkdownFlavor or None
        Flavor within the family, if any
    feature : Feature
        The lexical feature

    Returns
    -------
    Delimiter
        The flavored entry, else the family entry, else ``Delimiter.none()``

    """
    if flavor is not None:
        delimiter = DELIMITERS.get((family, flavor, feature))
        if delimiter is not None:
            return delimiter
    return DELIMITERS.get((family, None, feature), _NONE)


def is_supported(family: FormatFamily, flavor: Optional[MarkdownFlavor], feature: Feature) -> bool:
    """Check whether a feature has a delimiter for the family/flavor."""
    return not lookup(family, flavor, feature).is_none


__all__ = [
    "DELIMITERS",
    "Delimiter",
    "DelimiterKey",
    "DelimiterKind",
    "Feature",
    "is_supported",
    "lookup",
]
