#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/renderers/xwiki.py
"""XWiki 2.x syntax rendering from the document model.

Markup comes from the XWiki entries of the delimiter table. Text content is
written unescaped.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from somedoc.ast.labels import Label
from somedoc.ast.metadata import Metadata
from somedoc.ast.nodes import (
    Alignment,
    Character,
    CodeBlock,
    Column,
    Document,
    Emoji,
    Formatted,
    HeadingLevel,
    HyperLink,
    Image,
    ImageBlock,
    ListKind,
    Math,
    MathBlock,
    OtherCharacter,
    SpanStyle,
    SpanStyleType,
    Text,
)
from somedoc.ast.visitors import (
    BlockVisitor,
    CharacterContent,
    DocumentVisitor,
    InlineVisitor,
    TableVisitor,
    walk_document,
)
from somedoc.formats import FormatFamily
from somedoc.options.xwiki import XWikiRendererOptions
from somedoc.renderers._line_output import QuotedLineOutput
from somedoc.renderers.base import BaseRenderer
from somedoc.utils.delimiters import Delimiter, Feature, lookup
from somedoc.utils.metadata import format_yaml_entry
from somedoc.utils.text import xwiki_anchor

logger = logging.getLogger(__name__)

_SPAN_FEATURES: dict[SpanStyle, Feature] = {
    SpanStyle.ITALIC: Feature.ITALIC,
    SpanStyle.SLANTED: Feature.SLANTED,
    SpanStyle.BOLD: Feature.BOLD,
    SpanStyle.MONO: Feature.MONO,
    SpanStyle.CODE: Feature.CODE,
    SpanStyle.STRIKETHROUGH: Feature.STRIKETHROUGH,
    SpanStyle.UNDERLINE: Feature.UNDERLINE,
    SpanStyle.SUPERSCRIPT: Feature.SUPERSCRIPT,
    SpanStyle.SUBSCRIPT: Feature.SUBSCRIPT,
}

_CHARACTERS: dict[Character, str] = {
    Character.SPACE: " ",
    Character.NON_BREAK_SPACE: "&nbsp;",
    Character.HYPHEN: "-",
    Character.EM_DASH: "---",
    Character.EN_DASH: "--",
}

_COMMENT_OPEN = "{{comment}}"
_COMMENT_CLOSE = "{{/comment}}"


def _delimiter(feature: Feature) -> Delimiter:
    return lookup(FormatFamily.XWIKI, None, feature)


class XWikiRenderer(QuotedLineOutput, DocumentVisitor, BlockVisitor, TableVisitor, InlineVisitor, BaseRenderer):
    """Render a document to XWiki 2.x syntax.

    Parameters
    ----------
    options : XWikiRendererOptions or None, default = None
        XWiki rendering options

    """

    def __init__(self, options: XWikiRendererOptions | None = None):
        """Initialize the XWiki renderer with options."""
        BaseRenderer._validate_options_type(options, XWikiRendererOptions, "xwiki")
        options = options or XWikiRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: XWikiRendererOptions = options
        self._reset_state()

    def _reset_state(self) -> None:
        self._reset_line_state()
        self._list_stack: list[ListKind] = []
        self._span_stack: list[list[Delimiter]] = []
        self._metadata_entries: list[str] = []

    def render_to_string(self, doc: Document) -> str:
        """Render a document to an XWiki string.

        Parameters
        ----------
        doc : Document
            The document to render

        Returns
        -------
        str
            XWiki text

        """
        self._reset_state()
        walk_document(doc, self)
        return self._take_output()

    # -------------------------------------------------------------------------
    # Output helpers
    # -------------------------------------------------------------------------

    def _quote_delimiter(self) -> Delimiter:
        return _delimiter(Feature.BLOCK_QUOTE)

    # -------------------------------------------------------------------------
    # DocumentVisitor
    # -------------------------------------------------------------------------

    def start_metadata(self) -> None:
        self._metadata_entries = []

    def metadata(self, datum: Metadata) -> None:
        if self.options.metadata_as_comment:
            self._metadata_entries.append(format_yaml_entry(datum))

    def end_metadata(self) -> None:
        if not self._metadata_entries:
            logger.debug("XWiki metadata comment disabled, metadata dropped")
            return
        self._write(_COMMENT_OPEN + "\n" + "".join(self._metadata_entries) + _COMMENT_CLOSE + "\n")
        self._metadata_entries = []
        self._need_blank_line = True

    def block_visitor(self) -> Optional[BlockVisitor]:
        return self

    # -------------------------------------------------------------------------
    # BlockVisitor
    # -------------------------------------------------------------------------

    def comment(self, value: str) -> None:
        self._write(f"{_COMMENT_OPEN}\n{value}\n{_COMMENT_CLOSE}\n")

    def start_heading(self, level: HeadingLevel, label: Optional[Label]) -> None:
        if label is not None:
            self._write(f'(% id="{label}" %)\n')
        self._write(_delimiter(Feature.BLOCK_HEADING).opener_with_multiple(int(level)))

    def end_heading(self, level: HeadingLevel, label: Optional[Label]) -> None:
        self._write(_delimiter(Feature.BLOCK_HEADING).closer_with_multiple(int(level)) + "\n")

    def image_block(self, value: ImageBlock) -> None:
        self.image(value.image)
        self._write("\n")

    def math_block(self, value: MathBlock) -> None:
        self._write(_delimiter(Feature.BLOCK_MATH).format(value.math.value) + "\n")

    def start_list(self, kind: ListKind, label: Optional[Label]) -> None:
        self._list_stack.append(kind)

    def end_list(self, kind: ListKind, label: Optional[Label]) -> None:
        self._list_stack.pop()

    def _list_marker(self) -> str:
        marker = "".join(
            _delimiter(Feature.ORDERED_LIST if kind is ListKind.ORDERED else Feature.UNORDERED_LIST).format()
            for kind in self._list_stack
        )
        if self._list_stack[-1] is ListKind.ORDERED:
            marker += "."
        return marker + " "

    def start_list_item(self, label: Optional[Label]) -> None:
        self._write(self._list_marker())

    def end_list_item(self, label: Optional[Label]) -> None:
        self._write("\n")

    def start_definition_list_term(self) -> None:
        self._write("; ")

    def end_definition_list_term(self) -> None:
        self._write("\n")

    def start_definition_list_text(self) -> None:
        self._write(": ")

    def end_definition_list_text(self) -> None:
        self._write("\n")

    def formatted(self, value: Formatted) -> None:
        self._write(_delimiter(Feature.FORMATTED).format(value.text) + "\n")

    def code_block(self, value: CodeBlock) -> None:
        fence = _delimiter(Feature.BLOCK_CODE)
        opener = f'{{{{code language="{value.language}"}}}}\n' if value.language else fence.opener
        self._write(opener + value.code + fence.closer + "\n")

    def end_paragraph(self, alignment: Optional[Alignment], label: Optional[Label]) -> None:
        self._write("\n")

    def start_quote(self, label: Optional[Label]) -> None:
        self._quote_depth += 1

    def end_quote(self, label: Optional[Label]) -> None:
        self._quote_depth -= 1

    def thematic_break(self) -> None:
        self._write(_delimiter(Feature.THEMATIC_BREAK).format() + "\n")

    def table_visitor(self) -> Optional[TableVisitor]:
        return self

    def inline_visitor(self) -> Optional[InlineVisitor]:
        return self

    # -------------------------------------------------------------------------
    # TableVisitor
    # -------------------------------------------------------------------------

    def table_header_cell(self, column: Column, index: int) -> None:
        self._write(f"|={column.text}")

    def end_table_header_row(self) -> None:
        self._write("\n")

    def start_table_cell(self, index: int, label: Optional[Label]) -> None:
        self._write("|")

    def end_table_row(self, index: int) -> None:
        self._write("\n")

    # -------------------------------------------------------------------------
    # InlineVisitor
    # -------------------------------------------------------------------------

    def link(self, value: HyperLink) -> None:
        if value.is_internal:
            caption = value.caption if value.caption is not None else str(value.target)
            self._write(f'[[{caption}>>||anchor="H{xwiki_anchor(str(value.target))}"]]')
        elif value.caption is not None:
            self._write(f"[[{value.caption}>>{value.target}]]")
        else:
            self._write(f"[[{value.target}]]")

    def image(self, value: Image) -> None:
        target = str(value.link.target)
        if value.link.caption:
            target = f'{target}||alt="{value.link.caption}"'
        self._write(_delimiter(Feature.INLINE_IMAGE).format(target))

    def text(self, value: Text) -> None:
        self._write(value.value)

    def math(self, value: Math) -> None:
        self._write(_delimiter(Feature.INLINE_MATH).format(value.value))

    def character(self, value: CharacterContent) -> None:
        if isinstance(value, Emoji):
            self._write(_delimiter(Feature.EMOJI).format(value.name))
        elif isinstance(value, OtherCharacter):
            self._write(value.char)
        else:
            self._write(_CHARACTERS[value])

    def line_break(self) -> None:
        self._write(_delimiter(Feature.LINE_BREAK).format())

    def start_span(self, styles: Sequence[SpanStyleType]) -> None:
        delimiters: list[Delimiter] = []
        for style in styles:
            if style is SpanStyle.PLAIN:
                delimiters = []
                continue
            feature = _SPAN_FEATURES.get(style) if isinstance(style, SpanStyle) else None
            if feature is None:
                logger.debug(f"Span style {style} has no XWiki equivalent, dropped")
                continue
            delimiters.append(_delimiter(feature))
        self._write("".join(delimiter.opener for delimiter in delimiters))
        self._span_stack.append(delimiters)

    def end_span(self, styles: Sequence[SpanStyleType]) -> None:
        delimiters = self._span_stack.pop()
        self._write("".join(delimiter.closer for delimiter in reversed(delimiters)))


__all__ = ["XWikiRenderer"]
