#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_nodes.py
"""Unit tests for the document model node classes and metadata."""

import pytest

from somedoc.ast import (
    Author,
    Cell,
    Character,
    Copyright,
    Document,
    Emoji,
    FrontMatter,
    Heading,
    HeadingLevel,
    HyperLink,
    Image,
    Item,
    Keywords,
    Label,
    LineBreak,
    List,
    ListKind,
    OtherCharacter,
    Other,
    Paragraph,
    Quote,
    Row,
    SiteClass,
    Span,
    SpanStyle,
    Table,
    Text,
    ThematicBreak,
    Title,
    inline_text,
)
from somedoc.exceptions import LabelError, ValidationError


@pytest.mark.unit
class TestHeading:
    """Tests for heading construction."""

    def test_level_coerced_from_int(self):
        heading = Heading(2, [Text("x")])
        assert heading.level is HeadingLevel.SUB_SECTION

    @pytest.mark.parametrize("level", [-1, 8, 42])
    def test_out_of_range_level_rejected(self, level):
        with pytest.raises(ValidationError) as exc_info:
            Heading(level)
        assert exc_info.value.parameter_name == "level"

    def test_named_constructors(self):
        assert Heading.title("x").level is HeadingLevel.TITLE
        assert Heading.section("x").level is HeadingLevel.SECTION
        assert Heading.sub_sub_sub_sub_sub_section("x").level is HeadingLevel.SUB_SUB_SUB_SUB_SUB_SECTION
        assert Heading.paragraph("x").level is HeadingLevel.PARAGRAPH

    def test_label_coerced_from_string(self):
        heading = Heading(1, label="intro")
        assert heading.label == Label("intro")

    def test_invalid_label_string_rejected(self):
        with pytest.raises(LabelError):
            Heading.section("x").set_label("not valid")

    def test_auto_label_from_text(self):
        heading = Heading.section("Getting Started").auto_label()
        assert heading.label == Label("Getting_Started")


@pytest.mark.unit
class TestInlineNodes:
    """Tests for inline content construction."""

    @pytest.mark.parametrize("name", ["smile", "thumbs_up", "Tada"])
    def test_valid_emoji(self, name):
        assert Emoji(name).name == name

    @pytest.mark.parametrize("name", ["", "sm1le", "_smile", "two words"])
    def test_invalid_emoji(self, name):
        with pytest.raises(ValidationError):
            Emoji(name)

    def test_other_character_must_be_single(self):
        assert OtherCharacter("§").char == "§"
        with pytest.raises(ValidationError):
            OtherCharacter("ab")

    def test_link_kinds(self):
        assert HyperLink.internal("intro").is_internal
        assert HyperLink.internal("intro").target == Label("intro")
        assert not HyperLink.external("https://example.com").is_internal

    def test_image_new(self):
        image = Image.new("a.png", "alt")
        assert image.link.target == "a.png"
        assert image.link.caption == "alt"

    def test_span_styles_kept_in_order(self):
        span = Span.bold("x").add_style(SpanStyle.ITALIC)
        assert span.styles == [SpanStyle.BOLD, SpanStyle.ITALIC]

    def test_inline_text(self):
        content = [
            Text("a"),
            Character.EM_DASH,
            Span.bold("b"),
            Emoji("smile"),
            LineBreak(),
            HyperLink.external("https://x.org"),
        ]
        assert inline_text(content) == "a—b:smile: https://x.org"


@pytest.mark.unit
class TestContainers:
    """Tests for container blocks and the fluent builders."""

    def test_document_chaining(self):
        doc = Document().set_title("T").add_author("Ada").add_heading(Heading.section("H"))
        assert doc.metadata == [Title("T"), Author("Ada")]
        assert doc.has_inner()
        assert isinstance(doc.content[0], Heading)

    def test_document_thematic_break_and_front_matter(self):
        doc = Document().add_thematic_break().add_front_matter(FrontMatter.TABLE_OF_CONTENTS)
        assert doc.content == [ThematicBreak()]
        assert doc.front_matter == [FrontMatter.TABLE_OF_CONTENTS]

    def test_list_builders(self):
        nested = List.unordered().add_item_from("b")
        outer = List.ordered().add_item(Item.text("a")).add_sub_list(nested)
        assert outer.kind is ListKind.ORDERED
        assert outer.inner == [Item([Text("a")]), nested]

    def test_cell_skip_and_empty(self):
        assert Cell.skip().inner == []
        assert Cell.empty().inner == [Character.NON_BREAK_SPACE]

    def test_row_from_strings(self):
        row = Row.from_strings("a", "b")
        assert [cell.inner for cell in row.cells] == [[Text("a")], [Text("b")]]

    def test_table_has_inner(self):
        assert not Table().has_inner()
        assert Table().add_row(Row.from_strings("a")).has_inner()

    def test_quote_nesting(self):
        quote = Quote.paragraph(Paragraph.text("a")).add_block_quote(Quote.paragraph(Paragraph.text("b")))
        assert len(quote.inner()) == 2
        assert isinstance(quote.content[1], Quote)

    def test_paragraph_plain_str(self):
        paragraph = Paragraph.plain_str("x")
        assert paragraph.inner == [Span([Text("x")], [SpanStyle.PLAIN])]


@pytest.mark.unit
class TestMetadata:
    """Tests for metadata keys and values."""

    def test_author_value_string(self):
        assert Author("Ada", "ada@example.com", "Engines").value_string() == "Ada <ada@example.com> - Engines"
        assert Author("Ada").to_yaml_value() == "Ada"
        assert Author("Ada", "a@x").to_yaml_value() == {"name": "Ada", "email": "a@x"}

    def test_copyright_value_string(self):
        assert Copyright(2024, "ACME", "MIT").value_string() == "2024 ACME (MIT)"
        assert Copyright(2024).to_yaml_value() == {"year": 2024}

    def test_keywords(self):
        assert Keywords(["a", "b"]).value_string() == "a, b"
        assert Keywords(["a"]).key == "keywords"

    def test_site_class(self):
        assert SiteClass("report", ["a4paper"]).value_string() == "report [a4paper]"
        assert SiteClass("report").key == "class"
        assert SiteClass("report").to_yaml_value() == "report"

    def test_other_uses_name_as_key(self):
        other = Other("project", "somedoc")
        assert other.key == "project"
        assert other.value_string() == "somedoc"
