#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/formats.py
"""Output format and markdown flavor selectors.

:class:`OutputFormat` names every writer target, one member per writer
configuration. Markdown targets carry a :class:`MarkdownFlavor`; the other
formats have none. Both enums parse the user-facing names and aliases.

Examples
--------
    >>> OutputFormat.parse("md")
    <OutputFormat.MARKDOWN_COMMONMARK: 'markdown+commonmark'>
    >>> OutputFormat.parse("markdown+gfm").flavor
    <MarkdownFlavor.GITHUB: 'gfm'>
    >>> str(OutputFormat.LATEX)
    'latex'

"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from somedoc.exceptions import FormatError


class MarkdownFlavor(Enum):
    """Markdown dialects supported by the markdown writer."""

    STRICT = "strict"
    COMMONMARK = "commonmark"
    GITHUB = "gfm"
    MULTI = "multi"
    PHP_EXTRA = "extra"

    @classmethod
    def default(cls) -> MarkdownFlavor:
        return cls.COMMONMARK

    @classmethod
    def parse(cls, name: str) -> MarkdownFlavor:
        """Parse a flavor name or alias, case-insensitively.

        Parameters
        ----------
        name : str
            One of ``strict``/``og``, ``cm``/``common``/``commonmark``,
            ``gfm``/``github``, ``mmd``/``multi``, ``php_extra``/``mdextra``/``extra``

        Returns
        -------
        MarkdownFlavor
            The matching flavor

        Raises
        ------
        FormatError
            If the name is not a known flavor

        """
        flavor = _FLAVOR_ALIASES.get(name.strip().lower())
        if flavor is None:
            raise FormatError(format_type=name, supported_formats=sorted(_FLAVOR_ALIASES))
        return flavor

    def __str__(self) -> str:
        return self.value


_FLAVOR_ALIASES: dict[str, MarkdownFlavor] = {
    "strict": MarkdownFlavor.STRICT,
    "og": MarkdownFlavor.STRICT,
    "cm": MarkdownFlavor.COMMONMARK,
    "common": MarkdownFlavor.COMMONMARK,
    "commonmark": MarkdownFlavor.COMMONMARK,
    "gfm": MarkdownFlavor.GITHUB,
    "github": MarkdownFlavor.GITHUB,
    "mmd": MarkdownFlavor.MULTI,
    "multi": MarkdownFlavor.MULTI,
    "php_extra": MarkdownFlavor.PHP_EXTRA,
    "mdextra": MarkdownFlavor.PHP_EXTRA,
    "extra": MarkdownFlavor.PHP_EXTRA,
}


class FormatFamily(Enum):
    """Writer families; all markdown flavors share one family."""

    MARKDOWN = "markdown"
    HTML = "html"
    LATEX = "latex"
    JSON = "json"
    XWIKI = "xwiki"


class OutputFormat(Enum):
    """A complete output target: a format family plus, for markdown, a flavor."""

    MARKDOWN_STRICT = "markdown+strict"
    MARKDOWN_COMMONMARK = "markdown+commonmark"
    MARKDOWN_GITHUB = "markdown+gfm"
    MARKDOWN_MULTI = "markdown+multi"
    MARKDOWN_PHP_EXTRA = "markdown+extra"
    HTML = "html"
    LATEX = "latex"
    JSON = "json"
    XWIKI = "xwiki"

    @property
    def family(self) -> FormatFamily:
        """Get the writer family of this format."""
        if self.value.startswith("markdown+"):
            return FormatFamily.MARKDOWN
        return FormatFamily(self.value)

    @property
    def flavor(self) -> Optional[MarkdownFlavor]:
        """Get the markdown flavor, or None for non-markdown formats."""
        if self.family is FormatFamily.MARKDOWN:
            return MarkdownFlavor(self.value.split("+", 1)[1])
        return None

    @property
    def file_extension(self) -> str:
        return _FILE_EXTENSIONS[self.family]

    @classmethod
    def markdown(cls, flavor: MarkdownFlavor | None = None) -> OutputFormat:
        """Get the markdown format for ``flavor`` (CommonMark when omitted)."""
        flavor = flavor or MarkdownFlavor.default()
        return cls(f"markdown+{flavor.value}")

    @classmethod
    def parse(cls, name: str) -> OutputFormat:
        """Parse a format name.

        Accepted forms are the member values (``markdown+gfm``, ``html``...),
        ``markdown`` or ``md`` (CommonMark), ``markdown+<flavor alias>``,
        a bare flavor alias, ``tex`` and ``wiki``.

        Parameters
        ----------
        name : str
            Format name, case-insensitive

        Returns
        -------
        OutputFormat
            The matching format

        Raises
        ------
        FormatError
            If the name is not a known format

        """
        key = name.strip().lower()
        if key in _FORMAT_ALIASES:
            return _FORMAT_ALIASES[key]

        prefix, sep, flavor_name = key.partition("+")
        if sep and prefix in ("markdown", "md"):
            try:
                return cls.markdown(MarkdownFlavor.parse(flavor_name))
            except FormatError as e:
                raise FormatError(format_type=name, supported_formats=supported_format_names(), original_error=e) from e

        if key in _FLAVOR_ALIASES:
            return cls.markdown(_FLAVOR_ALIASES[key])

        raise FormatError(format_type=name, supported_formats=supported_format_names())

    def __str__(self) -> str:
        return self.value


_FORMAT_ALIASES: dict[str, OutputFormat] = {
    **{member.value: member for member in OutputFormat},
    "markdown": OutputFormat.MARKDOWN_COMMONMARK,
    "md": OutputFormat.MARKDOWN_COMMONMARK,
    "tex": OutputFormat.LATEX,
    "wiki": OutputFormat.XWIKI,
}

_FILE_EXTENSIONS: dict[FormatFamily, str] = {
    FormatFamily.MARKDOWN: ".md",
    FormatFamily.HTML: ".html",
    FormatFamily.LATEX: ".tex",
    FormatFamily.JSON: ".json",
    FormatFamily.XWIKI: ".xwiki",
}


def supported_format_names() -> list[str]:
    """List the canonical names of every output format."""
    return [member.value for member in OutputFormat]


__all__ = [
    "FormatFamily",
    "MarkdownFlavor",
    "OutputFormat",
    "supported_format_names",
]
