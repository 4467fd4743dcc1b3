#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/renderers/markdown.py
"""Markdown rendering from the document model.

This module provides the MarkdownRenderer class which writes a document as
markdown text. The renderer supports the Strict, CommonMark, GitHub,
MultiMarkdown and PHP Markdown Extra flavors.

The renderer implements every visitor capability set and is driven by
:func:`~somedoc.ast.visitors.walk_document`. It maintains context (block
separation, quote depth, list nesting, open spans) during traversal; markup
comes from the delimiter table and flavor support from the dialect profile.

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
from somedoc.constants import MARKDOWN_COMMENT_TEMPLATE, MARKDOWN_METADATA_TEMPLATE
from somedoc.formats import FormatFamily, MarkdownFlavor
from somedoc.options.markdown import MarkdownRendererOptions
from somedoc.renderers._line_output import QuotedLineOutput
from somedoc.renderers.base import BaseRenderer
from somedoc.utils.delimiters import Delimiter, Feature, lookup
from somedoc.utils.escape import escape_inline_code, escape_markdown
from somedoc.utils.flavors import get_dialect
from somedoc.utils.metadata import format_yaml_frontmatter
from somedoc.utils.text import slugify

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

_CODE_STYLES = (SpanStyle.MONO, SpanStyle.CODE)

_CHARACTERS: dict[Character, str] = {
    Character.SPACE: " ",
    Character.NON_BREAK_SPACE: "&nbsp;",
    Character.HYPHEN: "-",
    Character.EM_DASH: "---",
    Character.EN_DASH: "--",
}

_SEPARATOR_CELLS: dict[Alignment, str] = {
    Alignment.JUSTIFIED: "-----",
    Alignment.LEFT: ":----",
    Alignment.RIGHT: "----:",
    Alignment.CENTERED: "--:--",
}

_LIST_INDENTS: dict[ListKind, str] = {
    ListKind.ORDERED: "   ",
    ListKind.UNORDERED: "  ",
}


class MarkdownRenderer(QuotedLineOutput, DocumentVisitor, BlockVisitor, TableVisitor, InlineVisitor, BaseRenderer):
    """Render a document to markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
    Basic usage:

        >>> from somedoc.ast import Document, Heading
        >>> doc = Document().add_heading(Heading.section("Title"))
        >>> renderer = MarkdownRenderer(MarkdownRendererOptions(flavor="gfm"))
        >>> print(renderer.render_to_string(doc), end="")
        # Title

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._flavor: MarkdownFlavor = options.flavor  # type: ignore[assignment]
        self._dialect = get_dialect(self._flavor)
        self._reset_state()

    def _reset_state(self) -> None:
        self._reset_line_state()
        self._list_stack: list[ListKind] = []
        self._span_stack: list[tuple[list[Delimiter], bool]] = []
        self._code_depth: int = 0
        self._in_table_cell: bool = False
        self._separator_row: list[str] = []
        self._yaml_metadata: list[Metadata] = []

    def render_to_string(self, doc: Document) -> str:
        """Render a document to a markdown string.

        Parameters
        ----------
        doc : Document
            The document to render

        Returns
        -------
        str
            Markdown text; empty for an empty document, otherwise ending in a
            single newline

        """
        self._reset_state()
        walk_document(doc, self)
        return self._take_output()

    # -------------------------------------------------------------------------
    # Output helpers
    # -------------------------------------------------------------------------

    def _delimiter(self, feature: Feature) -> Delimiter:
        return lookup(FormatFamily.MARKDOWN, self._flavor, feature)

    def _quote_delimiter(self) -> Delimiter:
        return self._delimiter(Feature.BLOCK_QUOTE)

    def _escape(self, text: str, context: str = "text") -> str:
        if self._code_depth > 0:
            return text
        if self._in_table_cell and context == "text":
            context = "table"
        if not self.options.escape_special:
            return text.replace("|", r"\|") if context == "table" else text
        return escape_markdown(text, context)

    def _label_before(self, label: Optional[Label]) -> None:
        if label is not None and self._dialect.label_placement() == "before":
            self._write(f"[{label}] ")

    def _label_after(self, label: Optional[Label]) -> None:
        if label is not None and self._dialect.label_placement() == "after":
            self._write(f" {{#{label}}}")

    # -------------------------------------------------------------------------
    # DocumentVisitor
    # -------------------------------------------------------------------------

    def start_metadata(self) -> None:
        self._yaml_metadata = []

    def metadata(self, datum: Metadata) -> None:
        if self._dialect.metadata_style() == "yaml":
            self._yaml_metadata.append(datum)
            return
        value = datum.value_string().replace('"', '\\"')
        self._write(MARKDOWN_METADATA_TEMPLATE.format(key=datum.key, value=value) + "\n")

    def end_metadata(self) -> None:
        if self._yaml_metadata:
            self._write(format_yaml_frontmatter(self._yaml_metadata))
            self._yaml_metadata = []
        self._need_blank_line = True

    def block_visitor(self) -> Optional[BlockVisitor]:
        return self

    # -------------------------------------------------------------------------
    # BlockVisitor
    # -------------------------------------------------------------------------

    def comment(self, value: str) -> None:
        for line in value.split("\n"):
            self._write(MARKDOWN_COMMENT_TEMPLATE.format(line=line.replace('"', '\\"')) + "\n")

    def start_heading(self, level: HeadingLevel, label: Optional[Label]) -> None:
        self._write(self._delimiter(Feature.BLOCK_HEADING).opener_with_multiple(int(level)))

    def end_heading(self, level: HeadingLevel, label: Optional[Label]) -> None:
        if label is not None:
            placement = self._dialect.label_placement()
            if placement == "before":
                self._write(f" [{label}]")
            elif placement == "after":
                self._write(f" {{#{label}}}")
        self._write("\n")

    def image_block(self, value: ImageBlock) -> None:
        self._label_before(value.label)
        self.image(value.image)
        self._label_after(value.label)
        self._write("\n")

    def math_block(self, value: MathBlock) -> None:
        self._label_before(value.label)
        delimiter = self._delimiter(Feature.BLOCK_MATH)
        if delimiter.is_none:
            self.math(value.math)
        else:
            self._write(delimiter.format(value.math.value))
        self._label_after(value.label)
        self._write("\n")

    def start_list(self, kind: ListKind, label: Optional[Label]) -> None:
        self._list_stack.append(kind)

    def end_list(self, kind: ListKind, label: Optional[Label]) -> None:
        self._list_stack.pop()

    def start_list_item(self, label: Optional[Label]) -> None:
        indent = "".join(_LIST_INDENTS[kind] for kind in self._list_stack[:-1])
        feature = Feature.ORDERED_LIST if self._list_stack[-1] is ListKind.ORDERED else Feature.UNORDERED_LIST
        self._write(indent + self._delimiter(feature).format())

    def end_list_item(self, label: Optional[Label]) -> None:
        self._write("\n")

    def start_definition_list_term(self) -> None:
        if not self._dialect.supports_definition_lists():
            self._write(self._delimiter(Feature.BOLD).opener)

    def end_definition_list_term(self) -> None:
        if self._dialect.supports_definition_lists():
            self._write("\n")
        else:
            self._write(self._delimiter(Feature.BOLD).closer + ":- ")

    def start_definition_list_text(self) -> None:
        if self._dialect.supports_definition_lists():
            self._write(": ")

    def end_definition_list_text(self) -> None:
        self._write("\n")

    def formatted(self, value: Formatted) -> None:
        self._write(self._delimiter(Feature.FORMATTED).format(value.text) + "\n")

    def code_block(self, value: CodeBlock) -> None:
        if not self._dialect.supports_fenced_code():
            indented = lookup(FormatFamily.MARKDOWN, MarkdownFlavor.STRICT, Feature.BLOCK_CODE)
            self._write(indented.format(value.code) + "\n")
            return

        fence = self._delimiter(Feature.BLOCK_CODE)
        language = value.language if value.language and self._dialect.supports_code_language() else ""
        self._write(f"{fence.opener}{language}\n{value.code}\n{fence.closer}\n")

    def start_paragraph(self, alignment: Optional[Alignment], label: Optional[Label]) -> None:
        self._label_before(label)

    def end_paragraph(self, alignment: Optional[Alignment], label: Optional[Label]) -> None:
        self._label_after(label)
        self._write("\n")

    def start_quote(self, label: Optional[Label]) -> None:
        self._quote_depth += 1

    def end_quote(self, label: Optional[Label]) -> None:
        self._quote_depth -= 1

    def thematic_break(self) -> None:
        self._write(self._delimiter(Feature.THEMATIC_BREAK).format() + "\n")

    def table_visitor(self) -> Optional[TableVisitor]:
        if self._dialect.supports_tables():
            return self
        logger.debug(f"{self._dialect.name} markdown has no tables, skipping table")
        return None

    def inline_visitor(self) -> Optional[InlineVisitor]:
        return self

    # -------------------------------------------------------------------------
    # TableVisitor
    # -------------------------------------------------------------------------

    def start_table(self, caption: Optional[str], label: Optional[Label]) -> None:
        self._separator_row = []

    def table_header_cell(self, column: Column, index: int) -> None:
        self._write("|" + self._escape(column.text, "table"))
        self._separator_row.append(_SEPARATOR_CELLS[column.alignment])

    def end_table_header_row(self) -> None:
        self._write("|\n")
        self._write("|" + "|".join(self._separator_row) + "|\n")
        self._separator_row = []

    def start_table_cell(self, index: int, label: Optional[Label]) -> None:
        self._write("|")
        self._in_table_cell = True

    def end_table_cell(self, index: int, label: Optional[Label]) -> None:
        self._in_table_cell = False

    def end_table_row(self, index: int) -> None:
        self._write("|\n")

    # -------------------------------------------------------------------------
    # InlineVisitor
    # -------------------------------------------------------------------------

    def _link_text(self, link: HyperLink) -> str:
        if link.is_internal:
            target = f"#{slugify(str(link.target))}"
        else:
            target = str(link.target)
        if link.title:
            title = link.title.replace('"', '\\"')
            return f"({target} \"{title}\")"
        return f"({target})"

    def link(self, value: HyperLink) -> None:
        if value.caption is None and not value.is_internal:
            self._write(f"<{value.target}>")
            return
        caption = value.caption if value.caption is not None else str(value.target)
        self._write(f"[{self._escape(caption, 'link')}]{self._link_text(value)}")

    def image(self, value: Image) -> None:
        alt_text = self._escape(value.link.caption or "", "link")
        prefix = self._delimiter(Feature.INLINE_IMAGE).opener
        self._write(f"{prefix}[{alt_text}]{self._link_text(value.link)}")

    def text(self, value: Text) -> None:
        self._write(self._escape(value.value))

    def math(self, value: Math) -> None:
        delimiter = self._delimiter(Feature.INLINE_MATH)
        if not delimiter.is_none:
            self._write(delimiter.format(value.value))
            return
        code, fence = escape_inline_code(value.value)
        self._write(f"{fence}{code}{fence}")

    def character(self, value: CharacterContent) -> None:
        if isinstance(value, Emoji):
            self._write(self._delimiter(Feature.EMOJI).format(value.name))
        elif isinstance(value, OtherCharacter):
            self._write(self._escape(value.char))
        else:
            self._write(_CHARACTERS[value])

    def line_break(self) -> None:
        self._write(self._delimiter(Feature.LINE_BREAK).format())

    def _span_delimiters(self, styles: Sequence[SpanStyleType]) -> tuple[list[Delimiter], bool]:
        delimiters: list[Delimiter] = []
        is_code = False
        for style in styles:
            if style is SpanStyle.PLAIN:
                delimiters = []
                is_code = False
                continue
            feature = _SPAN_FEATURES.get(style) if isinstance(style, SpanStyle) else None
            delimiter = self._delimiter(feature) if feature is not None else None
            if delimiter is None or delimiter.is_none:
                logger.debug(f"Span style {style} has no {self._dialect.name} markdown equivalent, dropped")
                continue
            delimiters.append(delimiter)
            is_code = is_code or style in _CODE_STYLES
        return delimiters, is_code

    def start_span(self, styles: Sequence[SpanStyleType]) -> None:
        delimiters, is_code = self._span_delimiters(styles)
        self._write("".join(delimiter.opener for delimiter in delimiters))
        self._span_stack.append((delimiters, is_code))
        if is_code:
            self._code_depth += 1

    def end_span(self, styles: Sequence[SpanStyleType]) -> None:
        delimiters, is_code = self._span_stack.pop()
        if is_code:
            self._code_depth -= 1
        self._write("".join(delimiter.closer for delimiter in reversed(delimiters)))


__all__ = ["MarkdownRenderer"]
