#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_visitors.py
"""Unit tests for the visitor protocol and walk_document.

Tests cover:
- The fixed callback order for document, metadata, abstract and body
- Block bracketing, including blocks nested in quotes
- List and definition list nesting
- Table header callbacks and ragged row padding
- Declined visitors skipping their subtrees
- Exception propagation from callbacks

"""

import logging

import pytest

from somedoc.ast import (
    BlockVisitor,
    Character,
    Column,
    Definition,
    DefinitionList,
    Document,
    DocumentVisitor,
    Emoji,
    FrontMatter,
    Heading,
    InlineVisitor,
    List,
    ListKind,
    OtherCharacter,
    Paragraph,
    Quote,
    Row,
    Span,
    SpanStyle,
    Table,
    TableVisitor,
    Text,
    walk_block,
    walk_document,
    walk_inline,
)


class RecordingVisitor(DocumentVisitor, BlockVisitor, TableVisitor, InlineVisitor):
    """Record callback names (and a short argument) in call order."""

    def __init__(self, tables: bool = True):
        self.events: list[str] = []
        self.tables = tables

    def start_document(self):
        self.events.append("start_document")

    def end_document(self):
        self.events.append("end_document")

    def start_metadata(self):
        self.events.append("start_metadata")

    def metadata(self, datum):
        self.events.append(f"metadata:{datum.key}")

    def end_metadata(self):
        self.events.append("end_metadata")

    def front_matter(self, items):
        self.events.append(f"front_matter:{len(items)}")

    def start_abstract(self):
        self.events.append("start_abstract")

    def end_abstract(self):
        self.events.append("end_abstract")

    def block_visitor(self):
        self.events.append("block_visitor")
        return self

    def start_block(self):
        self.events.append("start_block")

    def end_block(self):
        self.events.append("end_block")

    def start_heading(self, level, label):
        self.events.append(f"start_heading:{int(level)}")

    def end_heading(self, level, label):
        self.events.append("end_heading")

    def start_paragraph(self, alignment, label):
        self.events.append("start_paragraph")

    def end_paragraph(self, alignment, label):
        self.events.append("end_paragraph")

    def start_quote(self, label):
        self.events.append("start_quote")

    def end_quote(self, label):
        self.events.append("end_quote")

    def start_list(self, kind, label):
        self.events.append(f"start_list:{kind.value}")

    def end_list(self, kind, label):
        self.events.append("end_list")

    def start_list_item(self, label):
        self.events.append("start_list_item")

    def end_list_item(self, label):
        self.events.append("end_list_item")

    def start_definition_list(self, label):
        self.events.append("start_definition_list")

    def end_definition_list(self, label):
        self.events.append("end_definition_list")

    def start_definition(self, label):
        self.events.append("start_definition")

    def end_definition(self, label):
        self.events.append("end_definition")

    def start_definition_list_term(self):
        self.events.append("start_term")

    def end_definition_list_term(self):
        self.events.append("end_term")

    def start_definition_list_text(self):
        self.events.append("start_text")

    def end_definition_list_text(self):
        self.events.append("end_text")

    def thematic_break(self):
        self.events.append("thematic_break")

    def table_visitor(self):
        return self if self.tables else None

    def inline_visitor(self):
        return self

    def start_table(self, caption, label):
        self.events.append("start_table")

    def end_table(self, caption, label):
        self.events.append("end_table")

    def start_table_header_row(self):
        self.events.append("start_header")

    def table_header_cell(self, column, index):
        self.events.append(f"header:{column.text}")

    def end_table_header_row(self):
        self.events.append("end_header")

    def start_table_row(self, index):
        self.events.append(f"start_row:{index}")

    def end_table_row(self, index):
        self.events.append("end_row")

    def start_table_cell(self, index, label):
        self.events.append(f"start_cell:{index}")

    def end_table_cell(self, index, label):
        self.events.append("end_cell")

    def text(self, value):
        self.events.append(f"text:{value.value}")

    def character(self, value):
        self.events.append(f"character:{type(value).__name__}")

    def start_span(self, styles):
        self.events.append(f"start_span:{len(styles)}")

    def end_span(self, styles):
        self.events.append("end_span")


@pytest.mark.unit
class TestDocumentOrder:
    """Tests for the fixed document-level callback order."""

    def test_full_order(self):
        doc = Document().set_title("T").add_front_matter(FrontMatter.TABLE_OF_CONTENTS)
        doc.set_abstract([Paragraph.text("abs")])
        doc.add_heading(Heading.section("H"))
        visitor = RecordingVisitor()

        walk_document(doc, visitor)

        assert visitor.events == [
            "start_document",
            "start_metadata",
            "metadata:title",
            "end_metadata",
            "front_matter:1",
            "block_visitor",
            "start_block",
            "start_abstract",
            "start_block",
            "start_paragraph",
            "text:abs",
            "end_paragraph",
            "end_block",
            "end_abstract",
            "end_block",
            "start_block",
            "start_heading:1",
            "text:H",
            "end_heading",
            "end_block",
            "end_document",
        ]

    def test_empty_document(self):
        visitor = RecordingVisitor()
        walk_document(Document(), visitor)
        assert visitor.events == ["start_document", "block_visitor", "end_document"]

    def test_metadata_in_insertion_order(self):
        doc = Document().add_author("Ada").set_title("T").add_author("Bob")
        visitor = RecordingVisitor()
        walk_document(doc, visitor)
        assert [e for e in visitor.events if e.startswith("metadata:")] == [
            "metadata:author",
            "metadata:title",
            "metadata:author",
        ]

    def test_declined_block_visitor_skips_body(self):
        class MetadataOnly(DocumentVisitor):
            def __init__(self):
                self.keys = []

            def metadata(self, datum):
                self.keys.append(datum.key)

        doc = Document().set_title("T").add_paragraph(Paragraph.text("body"))
        visitor = MetadataOnly()
        walk_document(doc, visitor)
        assert visitor.keys == ["title"]

    def test_document_not_modified(self, rich_document):
        before = repr(rich_document)
        walk_document(rich_document, RecordingVisitor())
        assert repr(rich_document) == before


@pytest.mark.unit
class TestBlockWalking:
    """Tests for block bracketing and nesting."""

    def test_quote_children_are_blocks(self):
        visitor = RecordingVisitor()
        walk_block(Quote([Paragraph.text("a"), Quote.paragraph(Paragraph.text("b"))]), visitor)
        assert visitor.events == [
            "start_block",
            "start_quote",
            "start_block",
            "start_paragraph",
            "text:a",
            "end_paragraph",
            "end_block",
            "start_block",
            "start_quote",
            "start_block",
            "start_paragraph",
            "text:b",
            "end_paragraph",
            "end_block",
            "end_quote",
            "end_block",
            "end_quote",
            "end_block",
        ]

    def test_nested_list_is_not_a_block(self):
        visitor = RecordingVisitor()
        walk_block(List.ordered().add_item_from("a").add_sub_list(List.unordered().add_item_from("b")), visitor)
        assert visitor.events == [
            "start_block",
            "start_list:Ordered",
            "start_list_item",
            "text:a",
            "end_list_item",
            "start_list:Unordered",
            "start_list_item",
            "text:b",
            "end_list_item",
            "end_list",
            "end_list",
            "end_block",
        ]

    def test_definition_list(self):
        visitor = RecordingVisitor()
        walk_block(DefinitionList().add_definition(Definition.from_strings("t", "d")), visitor)
        assert visitor.events == [
            "start_block",
            "start_definition_list",
            "start_definition",
            "start_term",
            "text:t",
            "end_term",
            "start_text",
            "text:d",
            "end_text",
            "end_definition",
            "end_definition_list",
            "end_block",
        ]

    def test_list_kind_passed_to_callbacks(self):
        kinds = []

        class KindVisitor(BlockVisitor):
            def start_list(self, kind, label):
                kinds.append(kind)

        walk_block(List.unordered().add_sub_list(List.ordered()), KindVisitor())
        assert kinds == [ListKind.UNORDERED, ListKind.ORDERED]

    def test_unknown_block_type(self):
        with pytest.raises(TypeError, match="Unknown block content type"):
            walk_block(object(), RecordingVisitor())


@pytest.mark.unit
class TestTableWalking:
    """Tests for table callbacks."""

    def test_header_and_rows(self):
        visitor = RecordingVisitor()
        walk_block(Table([Column("A")], [Row.from_strings("1")]), visitor)
        assert visitor.events == [
            "start_block",
            "start_table",
            "start_header",
            "header:A",
            "end_header",
            "start_row:0",
            "start_cell:0",
            "text:1",
            "end_cell",
            "end_row",
            "end_table",
            "end_block",
        ]

    def test_no_header_without_columns(self):
        visitor = RecordingVisitor()
        walk_block(Table(rows=[Row.from_strings("1")]), visitor)
        assert "start_header" not in visitor.events

    def test_short_rows_padded(self, caplog):
        visitor = RecordingVisitor()
        table = Table([Column("A"), Column("B"), Column("C")], [Row.from_strings("1")])
        with caplog.at_level(logging.WARNING, logger="somedoc.ast.visitors"):
            walk_block(table, visitor)
        assert [e for e in visitor.events if e.startswith("start_cell")] == [
            "start_cell:0",
            "start_cell:1",
            "start_cell:2",
        ]
        assert "padding with empty cells" in caplog.text
        assert len(table.rows[0].cells) == 1

    def test_declined_table_visitor(self):
        visitor = RecordingVisitor(tables=False)
        walk_block(Table([Column("A")], [Row.from_strings("1")]), visitor)
        assert visitor.events == ["start_block", "end_block"]


@pytest.mark.unit
class TestInlineWalking:
    """Tests for inline callbacks."""

    def test_characters_share_one_callback(self):
        visitor = RecordingVisitor()
        walk_inline([Character.SPACE, Emoji("smile"), OtherCharacter("x")], visitor)
        assert visitor.events == ["character:Character", "character:Emoji", "character:OtherCharacter"]

    def test_spans_bracket_inner_content(self):
        visitor = RecordingVisitor()
        walk_inline([Span([Text("a"), Span.italic("b")], [SpanStyle.BOLD])], visitor)
        assert visitor.events == ["start_span:1", "text:a", "start_span:1", "text:b", "end_span", "end_span"]

    def test_unknown_inline_type(self):
        with pytest.raises(TypeError, match="Unknown inline content type"):
            walk_inline(["raw string"], RecordingVisitor())

    def test_callback_exception_stops_walk(self):
        class Failing(RecordingVisitor):
            def text(self, value):
                if value.value == "boom":
                    raise RuntimeError("boom")
                super().text(value)

        visitor = Failing()
        doc = Document().add_paragraph(Paragraph.text("boom")).add_paragraph(Paragraph.text("after"))
        with pytest.raises(RuntimeError, match="boom"):
            walk_document(doc, visitor)
        assert "text:after" not in visitor.events
        assert "end_document" not in visitor.events
