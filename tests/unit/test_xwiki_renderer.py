#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_xwiki_renderer.py
"""Unit tests for the XWiki renderer."""

import pytest

from somedoc.ast import (
    Character,
    CodeBlock,
    Column,
    Comment,
    DefinitionList,
    Document,
    Emoji,
    Formatted,
    Heading,
    HyperLink,
    Image,
    ImageBlock,
    LineBreak,
    List,
    Math,
    MathBlock,
    Paragraph,
    Quote,
    Row,
    Span,
    SpanStyle,
    Table,
    Text,
)
from somedoc.options import XWikiRendererOptions
from somedoc.renderers import XWikiRenderer


def render(document: Document, **kwargs) -> str:
    return XWikiRenderer(XWikiRendererOptions(**kwargs)).render_to_string(document)


def inline(*content) -> str:
    return render(Document().add_paragraph(Paragraph(list(content))))


@pytest.mark.unit
class TestDocument:
    """Tests for metadata and block separation."""

    def test_empty_document(self):
        assert render(Document()) == ""

    def test_metadata_comment(self):
        doc = Document().set_title("T").add_paragraph(Paragraph.text("p"))
        assert render(doc) == "{{comment}}\ntitle: T\n{{/comment}}\n\np\n"

    def test_metadata_dropped(self):
        doc = Document().set_title("T").add_paragraph(Paragraph.text("p"))
        assert render(doc, metadata_as_comment=False) == "p\n"

    def test_blocks_separated(self):
        doc = Document().add_heading(Heading.section("H")).add_paragraph(Paragraph.text("p"))
        assert render(doc) == "= H =\n\np\n"


@pytest.mark.unit
class TestBlocks:
    """Tests for XWiki block syntax."""

    def test_heading_levels(self):
        assert render(Document().add_heading(Heading.title("H"))) == "= H =\n"
        assert render(Document().add_heading(Heading.sub_section("H"))) == "== H ==\n"

    def test_heading_label(self):
        assert render(Document().add_heading(Heading.section("H").set_label("intro"))) == (
            '(% id="intro" %)\n= H =\n'
        )

    def test_nested_list(self):
        doc = Document().add_list(List.unordered().add_item_from("a").add_sub_list(List.ordered().add_item_from("b")))
        assert render(doc) == "* a\n*1. b\n"

    def test_ordered_list(self):
        assert render(Document().add_list(List.ordered().add_item_from("a"))) == "1. a\n"

    def test_definition_list(self):
        doc = Document().add_definition_list(DefinitionList().add_definition_from("term", "meaning"))
        assert render(doc) == "; term\n: meaning\n"

    def test_code_block(self):
        assert render(Document().add_code_block(CodeBlock("x", "python"))) == (
            '{{code language="python"}}\nx\n{{/code}}\n'
        )
        assert render(Document().add_code_block(CodeBlock("x"))) == "{{code}}\nx\n{{/code}}\n"

    def test_formatted(self):
        assert render(Document().add_formatted(Formatted("x"))) == "{{{\nx\n}}}\n"

    def test_table(self):
        table = Table([Column("A"), Column("B")], [Row.from_strings("1", "2")])
        assert render(Document().add_table(table)) == "|=A|=B\n|1|2\n"

    def test_quote(self):
        assert render(Document().add_block_quote(Quote.paragraph(Paragraph.text("q")))) == "> q\n"

    def test_quoted_code_block_keeps_prefix_on_blank_lines(self):
        doc = Document().add_block_quote(Quote().add_content(CodeBlock("a\n\nb")))
        text = render(doc)
        assert text == "> {{code}}\n> a\n>\n> b\n> {{/code}}\n"
        assert all(line.startswith(">") for line in text.splitlines())

    def test_quoted_formatted_keeps_prefix_on_blank_lines(self):
        doc = Document().add_block_quote(Quote().add_content(Formatted("a\n\nb")))
        assert render(doc) == "> {{{\n> a\n>\n> b\n> }}}\n"

    def test_quoted_comment_keeps_prefix_on_blank_lines(self):
        doc = Document().add_block_quote(Quote().add_content(Comment("x\n\ny")))
        text = render(doc)
        assert all(line.startswith(">") for line in text.splitlines())

    def test_quote_blocks_separated_inside_quote(self):
        quote = Quote().add_paragraph(Paragraph.text("a")).add_paragraph(Paragraph.text("b"))
        assert render(Document().add_block_quote(quote)) == "> a\n>\n> b\n"

    def test_thematic_break(self):
        assert render(Document().add_thematic_break()) == "----\n"

    def test_comment(self):
        assert render(Document().add_comment(Comment("note"))) == "{{comment}}\nnote\n{{/comment}}\n"

    def test_image_block(self):
        assert render(Document().add_image(ImageBlock(Image.new("a.png")))) == "[[image:a.png]]\n"

    def test_math_block(self):
        assert render(Document().add_math(MathBlock(Math("x")))) == "{{formula}}\nx\n{{/formula}}\n"


@pytest.mark.unit
class TestInline:
    """Tests for XWiki inline syntax."""

    def test_links(self):
        assert inline(HyperLink.external("https://x.org", "X")) == "[[X>>https://x.org]]\n"
        assert inline(HyperLink.external("https://x.org")) == "[[https://x.org]]\n"

    def test_internal_link(self):
        assert inline(HyperLink.internal("sec:intro", "Intro")) == '[[Intro>>||anchor="Hsecintro"]]\n'

    def test_image(self):
        assert inline(Image.new("a.png", "alt")) == '[[image:a.png||alt="alt"]]\n'

    def test_math(self):
        assert inline(Math("x")) == "{{formula}}x{{/formula}}\n"

    def test_text_not_escaped(self):
        assert inline(Text("**raw**")) == "**raw**\n"

    @pytest.mark.parametrize(
        "style,expected",
        [
            (SpanStyle.UNDERLINE, "__x__"),
            (SpanStyle.STRIKETHROUGH, "--x--"),
            (SpanStyle.SUPERSCRIPT, "^^x^^"),
            (SpanStyle.SUBSCRIPT, ",,x,,"),
            (SpanStyle.MONO, "##x##"),
            (SpanStyle.SMALL_CAPS, "x"),
        ],
    )
    def test_span_styles(self, style, expected):
        assert inline(Span.with_style("x", style)) == expected + "\n"

    def test_bold_italic(self):
        assert inline(Span([Text("x")], [SpanStyle.BOLD, SpanStyle.ITALIC])) == "**//x//**\n"

    def test_characters(self):
        assert inline(Character.NON_BREAK_SPACE, Character.EM_DASH, Emoji("smile")) == "&nbsp;---:smile:\n"

    def test_line_break(self):
        assert inline(Text("a"), LineBreak(), Text("b")) == "a\\\\b\n"
