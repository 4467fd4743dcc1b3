#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/utils/flavors.py
"""Markdown dialect capability profiles.

Each :class:`~somedoc.formats.MarkdownFlavor` has a static profile stating
which constructs it can express. The markdown renderer consults the profile
to decide what to emit, degrade, or omit, so flavor checks stay out of the
rendering logic. Inline markup such as strikethrough and math is not part of
the profile; it comes from the delimiter table in
:mod:`somedoc.utils.delimiters`.

Supported Dialects
------------------
- Strict: the original Markdown syntax, no fenced code, no tables
- CommonMark: strict CommonMark with fenced code blocks
- GitHub: CommonMark plus tables, strikethrough and math
- MultiMarkdown: tables, definition lists, math, bracketed labels
- PHP Markdown Extra: tables, definition lists, ``{#id}`` labels

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from somedoc.constants import LabelPlacement, MetadataStyle
from somedoc.formats import MarkdownFlavor


class MarkdownDialect(ABC):
    """Abstract base class for markdown dialect profiles.

    A dialect defines which markdown features are supported. Subclasses
    implement a capability check for every extended feature.

    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the dialect name.

        Returns
        -------
        str
            Human-readable dialect name

        """
        pass

    @abstractmethod
    def supports_tables(self) -> bool:
        """Check if this dialect supports pipe tables.

        Returns
        -------
        bool
            True if pipe tables are supported

        """
        pass

    @abstractmethod
    def supports_fenced_code(self) -> bool:
        """Check if this dialect supports fenced code blocks.

        Returns
        -------
        bool
            True if code may be fenced, False if it must be indented

        """
        pass

    @abstractmethod
    def supports_code_language(self) -> bool:
        """Check if fenced code blocks may carry a language tag."""
        pass

    @abstractmethod
    def supports_definition_lists(self) -> bool:
        """Check if this dialect supports ``term`` / ``: text`` definition lists."""
        pass

    def metadata_style(self) -> MetadataStyle:
        """Get how document metadata is written.

        Returns
        -------
        {'link_comment', 'yaml'}
            Hidden link-reference comments, or a YAML front matter block

        """
        return "link_comment"

    def label_placement(self) -> LabelPlacement:
        """Get where block labels are written.

        Returns
        -------
        {'none', 'before', 'after'}
            ``before`` writes ``[label] `` ahead of the block, ``after``
            writes `` {#label}`` at its end

        """
        return "none"


class StrictDialect(MarkdownDialect):
    """The original Markdown syntax.

    No extensions: code blocks are indented, tables are omitted and metadata
    is hidden in link-reference comments.

    """

    @property
    def name(self) -> str:
        return "Strict"

    def supports_tables(self) -> bool:
        return False

    def supports_fenced_code(self) -> bool:
        return False

    def supports_code_language(self) -> bool:
        return False

    def supports_definition_lists(self) -> bool:
        return False


class CommonMarkDialect(MarkdownDialect):
    """Strict CommonMark specification.

    References
    ----------
    https://spec.commonmark.org/

    """

    @property
    def name(self) -> str:
        return "CommonMark"

    def supports_tables(self) -> bool:
        return False

    def supports_fenced_code(self) -> bool:
        return True

    def supports_code_language(self) -> bool:
        return True

    def supports_definition_lists(self) -> bool:
        return False


class GFMDialect(MarkdownDialect):
    """GitHub Flavored Markdown.

    CommonMark plus pipe tables, strikethrough and ``$`` math, with metadata
    written as YAML front matter.

    References
    ----------
    https://github.github.com/gfm/

    """

    @property
    def name(self) -> str:
        return "GFM"

    def supports_tables(self) -> bool:
        return True

    def supports_fenced_code(self) -> bool:
        return True

    def supports_code_language(self) -> bool:
        return True

    def supports_definition_lists(self) -> bool:
        return False

    def metadata_style(self) -> MetadataStyle:
        return "yaml"


class MultiMarkdownDialect(MarkdownDialect):
    """MultiMarkdown.

    Tables, definition lists and math; labels are written as ``[label]``
    before the labeled block.

    References
    ----------
    https://fletcher.github.io/MultiMarkdown-6/

    """

    @property
    def name(self) -> str:
        return "MultiMarkdown"

    def supports_tables(self) -> bool:
        return True

    def supports_fenced_code(self) -> bool:
        return True

    def supports_code_language(self) -> bool:
        return True

    def supports_definition_lists(self) -> bool:
        return True

    def metadata_style(self) -> MetadataStyle:
        return "yaml"

    def label_placement(self) -> LabelPlacement:
        return "before"


class PhpExtraDialect(MarkdownDialect):
    """PHP Markdown Extra.

    Tables and definition lists; fenced code without a language tag; labels
    are written as `` {#label}`` after the labeled block.

    References
    ----------
    https://michelf.ca/projects/php-markdown/extra/

    """

    @property
    def name(self) -> str:
        return "PHP Markdown Extra"

    def supports_tables(self) -> bool:
        return True

    def supports_fenced_code(self) -> bool:
        return True

    def supports_code_language(self) -> bool:
        return False

    def supports_definition_lists(self) -> bool:
        return True

    def label_placement(self) -> LabelPlacement:
        return "after"


_DIALECTS: dict[MarkdownFlavor, MarkdownDialect] = {
    MarkdownFlavor.STRICT: StrictDialect(),
    MarkdownFlavor.COMMONMARK: CommonMarkDialect(),
    MarkdownFlavor.GITHUB: GFMDialect(),
    MarkdownFlavor.MULTI: MultiMarkdownDialect(),
    MarkdownFlavor.PHP_EXTRA: PhpExtraDialect(),
}


def get_dialect(flavor: MarkdownFlavor) -> MarkdownDialect:
    """Get the capability profile for a flavor."""
    return _DIALECTS[flavor]


__all__ = [
    "MarkdownDialect",
    "StrictDialect",
    "CommonMarkDialect",
    "GFMDialect",
    "MultiMarkdownDialect",
    "PhpExtraDialect",
    "get_dialect",
]
