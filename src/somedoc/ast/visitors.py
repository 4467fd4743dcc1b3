#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/ast/visitors.py
"""Visitor protocol and the document traversal algorithm.

Rendering is split into four capability sets. A writer implements the
callbacks it cares about; every callback defaults to a no-op. Higher-level
visitors hand out lower-level ones on request, and declining (returning
``None``) means the whole subtree is skipped:

- :class:`DocumentVisitor` - document bracket, metadata, front matter and
  abstract hooks; hands out a :class:`BlockVisitor`.
- :class:`BlockVisitor` - one callback or start/end pair per block kind;
  hands out a :class:`TableVisitor` and an :class:`InlineVisitor`.
- :class:`TableVisitor` - table, header row, body row and cell brackets.
- :class:`InlineVisitor` - one callback per inline kind plus a span bracket.

:func:`walk_document` is the single traversal algorithm. Writers never
traverse the tree themselves, they only react to callbacks. Any exception
raised by a callback aborts the walk and propagates to the caller unchanged.

Examples
--------
Count the headings in a document:

    >>> class HeadingCounter(DocumentVisitor, BlockVisitor):
    ...     def __init__(self):
    ...         self.count = 0
    ...     def block_visitor(self):
    ...         return self
    ...     def start_heading(self, level, label):
    ...         self.count += 1
    >>> counter = HeadingCounter()
    >>> walk_document(document, counter)

"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, Union

from somedoc.ast.labels import Label
from somedoc.ast.metadata import Metadata
from somedoc.ast.nodes import (
    Alignment,
    BlockContent,
    Cell,
    Character,
    CodeBlock,
    Column,
    Comment,
    Definition,
    DefinitionList,
    Document,
    Emoji,
    Formatted,
    FrontMatter,
    Heading,
    HeadingLevel,
    HyperLink,
    Image,
    ImageBlock,
    InlineContent,
    Item,
    LineBreak,
    List,
    ListKind,
    Math,
    MathBlock,
    OtherCharacter,
    Paragraph,
    Quote,
    Span,
    SpanStyleType,
    Table,
    Text,
    ThematicBreak,
)

logger = logging.getLogger(__name__)

CharacterContent = Union[Character, Emoji, OtherCharacter]


class InlineVisitor:
    """Callbacks for inline content."""

    def link(self, value: HyperLink) -> None:
        pass

    def image(self, value: Image) -> None:
        pass

    def text(self, value: Text) -> None:
        pass

    def math(self, value: Math) -> None:
        pass

    def character(self, value: CharacterContent) -> None:
        pass

    def line_break(self) -> None:
        pass

    def start_span(self, styles: Sequence[SpanStyleType]) -> None:
        pass

    def end_span(self, styles: Sequence[SpanStyleType]) -> None:
        pass


class TableVisitor:
    """Callbacks for tables.

    The header row callbacks are only made when the table has columns. Body
    rows are padded with empty cells up to the column count.
    """

    def start_table(self, caption: Optional[str], label: Optional[Label]) -> None:
        pass

    def end_table(self, caption: Optional[str], label: Optional[Label]) -> None:
        pass

    def start_table_header_row(self) -> None:
        pass

    def table_header_cell(self, column: Column, index: int) -> None:
        pass

    def end_table_header_row(self) -> None:
        pass

    def start_table_row(self, index: int) -> None:
        pass

    def end_table_row(self, index: int) -> None:
        pass

    def start_table_cell(self, index: int, label: Optional[Label]) -> None:
        pass

    def end_table_cell(self, index: int, label: Optional[Label]) -> None:
        pass

    def inline_visitor(self) -> Optional[InlineVisitor]:
        """Return the visitor for cell content, or None to skip it."""
        return None


class BlockVisitor:
    """Callbacks for block content.

    Every block, including blocks nested in a quote, is bracketed by
    :meth:`start_block` and :meth:`end_block`. List items and definitions are
    not blocks.
    """

    def start_block(self) -> None:
        pass

    def end_block(self) -> None:
        pass

    def comment(self, value: str) -> None:
        pass

    def start_heading(self, level: HeadingLevel, label: Optional[Label]) -> None:
        pass

    def end_heading(self, level: HeadingLevel, label: Optional[Label]) -> None:
        pass

    def image_block(self, value: ImageBlock) -> None:
        pass

    def math_block(self, value: MathBlock) -> None:
        pass

    def start_list(self, kind: ListKind, label: Optional[Label]) -> None:
        pass

    def end_list(self, kind: ListKind, label: Optional[Label]) -> None:
        pass

    def start_list_item(self, label: Optional[Label]) -> None:
        pass

    def end_list_item(self, label: Optional[Label]) -> None:
        pass

    def start_definition_list(self, label: Optional[Label]) -> None:
        pass

    def end_definition_list(self, label: Optional[Label]) -> None:
        pass

    def start_definition(self, label: Optional[Label]) -> None:
        pass

    def end_definition(self, label: Optional[Label]) -> None:
        pass

    def start_definition_list_term(self) -> None:
        pass

    def end_definition_list_term(self) -> None:
        pass

    def start_definition_list_text(self) -> None:
        pass

    def end_definition_list_text(self) -> None:
        pass

    def formatted(self, value: Formatted) -> None:
        pass

    def code_block(self, value: CodeBlock) -> None:
        pass

    def start_paragraph(self, alignment: Optional[Alignment], label: Optional[Label]) -> None:
        pass

    def end_paragraph(self, alignment: Optional[Alignment], label: Optional[Label]) -> None:
        pass

    def start_quote(self, label: Optional[Label]) -> None:
        pass

    def end_quote(self, label: Optional[Label]) -> None:
        pass

    def thematic_break(self) -> None:
        pass

    def table_visitor(self) -> Optional[TableVisitor]:
        """Return the visitor for tables, or None to omit tables."""
        return None

    def inline_visitor(self) -> Optional[InlineVisitor]:
        """Return the visitor for inline content, or None to skip it."""
        return None


class DocumentVisitor:
    """Callbacks for the document as a whole."""

    def start_document(self) -> None:
        pass

    def end_document(self) -> None:
        pass

    def start_metadata(self) -> None:
        pass

    def metadata(self, datum: Metadata) -> None:
        pass

    def end_metadata(self) -> None:
        pass

    def front_matter(self, items: Sequence[FrontMatter]) -> None:
        pass

    def start_abstract(self) -> None:
        pass

    def end_abstract(self) -> None:
        pass

    def block_visitor(self) -> Optional[BlockVisitor]:
        """Return the visitor for the document body, or None to skip it.

        Called exactly once per walk, after all metadata callbacks.
        """
        return None


# -----------------------------------------------------------------------------
# Traversal
# -----------------------------------------------------------------------------


def walk_document(document: Document, visitor: DocumentVisitor) -> None:
    """Walk a document, invoking ``visitor`` callbacks in document order.

    The order is fixed:

    1. ``start_document``
    2. if there is metadata: ``start_metadata``, ``metadata`` per entry,
       ``end_metadata``
    3. if there is front matter: ``front_matter``
    4. ``block_visitor()``; when it returns a visitor, the abstract (if any)
       bracketed by ``start_block``/``start_abstract`` ... ``end_abstract``/``end_block``,
       then each top-level block
    5. ``end_document``

    Parameters
    ----------
    document : Document
        The document to walk; it is not modified
    visitor : DocumentVisitor
        Receiver of the callbacks

    Raises
    ------
    Exception
        Whatever the first failing callback raised; the walk stops there

    """
    visitor.start_document()

    if document.metadata:
        visitor.start_metadata()
        for datum in document.metadata:
            visitor.metadata(datum)
        visitor.end_metadata()

    if document.front_matter:
        visitor.front_matter(document.front_matter)

    block_visitor = visitor.block_visitor()
    if block_visitor is not None:
        if document.abstract:
            block_visitor.start_block()
            visitor.start_abstract()
            for block in document.abstract:
                walk_block(block, block_visitor)
            visitor.end_abstract()
            block_visitor.end_block()
        for block in document.content:
            walk_block(block, block_visitor)
    else:
        logger.debug("%s provides no block visitor, document body skipped", type(visitor).__name__)

    visitor.end_document()


def walk_block(block: BlockContent, visitor: BlockVisitor) -> None:
    """Walk a single block, bracketed by ``start_block``/``end_block``."""
    handler = _BLOCK_DISPATCH.get(type(block))
    if handler is None:
        raise TypeError(f"Unknown block content type: {type(block).__name__}")
    visitor.start_block()
    handler(block, visitor)
    visitor.end_block()


def _walk_heading(heading: Heading, visitor: BlockVisitor) -> None:
    visitor.start_heading(heading.level, heading.label)
    _walk_inline_with(heading.inner, visitor.inline_visitor())
    visitor.end_heading(heading.level, heading.label)


def _walk_paragraph(paragraph: Paragraph, visitor: BlockVisitor) -> None:
    visitor.start_paragraph(paragraph.alignment, paragraph.label)
    _walk_inline_with(paragraph.inner, visitor.inline_visitor())
    visitor.end_paragraph(paragraph.alignment, paragraph.label)


def _walk_quote(quote: Quote, visitor: BlockVisitor) -> None:
    visitor.start_quote(quote.label)
    for block in quote.content:
        walk_block(block, visitor)
    visitor.end_quote(quote.label)


def walk_list(list_block: List, visitor: BlockVisitor) -> None:
    """Walk a list and its nested sub-lists."""
    visitor.start_list(list_block.kind, list_block.label)
    inline_visitor = visitor.inline_visitor()
    for entry in list_block.inner:
        if isinstance(entry, List):
            walk_list(entry, visitor)
        elif isinstance(entry, Item):
            visitor.start_list_item(entry.label)
            _walk_inline_with(entry.inner, inline_visitor)
            visitor.end_list_item(entry.label)
        else:
            raise TypeError(f"Unknown list entry type: {type(entry).__name__}")
    visitor.end_list(list_block.kind, list_block.label)


def walk_definition_list(definition_list: DefinitionList, visitor: BlockVisitor) -> None:
    """Walk a definition list and its nested sub-lists."""
    visitor.start_definition_list(definition_list.label)
    inline_visitor = visitor.inline_visitor()
    for entry in definition_list.inner:
        if isinstance(entry, DefinitionList):
            walk_definition_list(entry, visitor)
        elif isinstance(entry, Definition):
            visitor.start_definition(entry.label)
            visitor.start_definition_list_term()
            _walk_inline_with(entry.term, inline_visitor)
            visitor.end_definition_list_term()
            visitor.start_definition_list_text()
            _walk_inline_with(entry.text, inline_visitor)
            visitor.end_definition_list_text()
            visitor.end_definition(entry.label)
        else:
            raise TypeError(f"Unknown definition list entry type: {type(entry).__name__}")
    visitor.end_definition_list(definition_list.label)


def _walk_table_block(table: Table, visitor: BlockVisitor) -> None:
    table_visitor = visitor.table_visitor()
    if table_visitor is None:
        logger.debug("%s provides no table visitor, table skipped", type(visitor).__name__)
        return
    walk_table(table, table_visitor)


def walk_table(table: Table, visitor: TableVisitor) -> None:
    """Walk a table, padding short rows with empty cells."""
    visitor.start_table(table.caption, table.label)
    inline_visitor = visitor.inline_visitor()
    column_count = len(table.columns)

    if table.columns:
        visitor.start_table_header_row()
        for index, column in enumerate(table.columns):
            visitor.table_header_cell(column, index)
        visitor.end_table_header_row()

    for row_index, row in enumerate(table.rows):
        cells = list(row.cells)
        if len(cells) < column_count:
            logger.warning(
                "Table row %d has %d cells for %d columns, padding with empty cells",
                row_index,
                len(cells),
                column_count,
            )
            cells.extend(Cell.skip() for _ in range(column_count - len(cells)))
        visitor.start_table_row(row_index)
        for cell_index, cell in enumerate(cells):
            visitor.start_table_cell(cell_index, cell.label)
            _walk_inline_with(cell.inner, inline_visitor)
            visitor.end_table_cell(cell_index, cell.label)
        visitor.end_table_row(row_index)

    visitor.end_table(table.caption, table.label)


def walk_inline(content: Sequence[InlineContent], visitor: InlineVisitor) -> None:
    """Walk inline content in order, recursing into spans."""
    for node in content:
        if isinstance(node, Span):
            visitor.start_span(node.styles)
            walk_inline(node.inner, visitor)
            visitor.end_span(node.styles)
            continue
        handler = _INLINE_DISPATCH.get(type(node))
        if handler is None:
            raise TypeError(f"Unknown inline content type: {type(node).__name__}")
        handler(node, visitor)


def _walk_inline_with(content: Sequence[InlineContent], visitor: Optional[InlineVisitor]) -> None:
    if visitor is not None:
        walk_inline(content, visitor)


_BLOCK_DISPATCH: dict[type, Callable[[object, BlockVisitor], None]] = {
    Comment: lambda b, v: v.comment(b.text),
    Heading: _walk_heading,
    ImageBlock: lambda b, v: v.image_block(b),
    MathBlock: lambda b, v: v.math_block(b),
    List: walk_list,
    DefinitionList: walk_definition_list,
    Formatted: lambda b, v: v.formatted(b),
    CodeBlock: lambda b, v: v.code_block(b),
    Paragraph: _walk_paragraph,
    Quote: _walk_quote,
    Table: _walk_table_block,
    ThematicBreak: lambda b, v: v.thematic_break(),
}

_INLINE_DISPATCH: dict[type, Callable[[object, InlineVisitor], None]] = {
    HyperLink: lambda n, v: v.link(n),
    Image: lambda n, v: v.image(n),
    Text: lambda n, v: v.text(n),
    Math: lambda n, v: v.math(n),
    Character: lambda n, v: v.character(n),
    Emoji: lambda n, v: v.character(n),
    OtherCharacter: lambda n, v: v.character(n),
    LineBreak: lambda n, v: v.line_break(),
}


__all__ = [
    "BlockVisitor",
    "CharacterContent",
    "DocumentVisitor",
    "InlineVisitor",
    "TableVisitor",
    "walk_block",
    "walk_definition_list",
    "walk_document",
    "walk_inline",
    "walk_list",
    "walk_table",
]
