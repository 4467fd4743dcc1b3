#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_renderer.py
"""Unit tests for the markdown renderer across flavors."""

import io

import pytest

from somedoc.ast import (
    Alignment,
    Cell,
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
    Size,
    Sized,
    Span,
    SpanStyle,
    Table,
    Text,
)
from somedoc.formats import MarkdownFlavor
from somedoc.options import MarkdownRendererOptions
from somedoc.renderers import MarkdownRenderer


def render(document: Document, flavor: MarkdownFlavor = MarkdownFlavor.COMMONMARK, **kwargs) -> str:
    return MarkdownRenderer(MarkdownRendererOptions(flavor=flavor, **kwargs)).render_to_string(document)


def paragraph_doc(*inline) -> Document:
    return Document().add_paragraph(Paragraph(list(inline)))


def table_doc() -> Document:
    table = Table(
        columns=[Column("A"), Column("B", Alignment.RIGHT)],
        rows=[Row.from_strings("1", "2")],
        caption="Numbers",
    )
    return Document().add_table(table)


@pytest.mark.unit
class TestDocumentStructure:
    """Tests for metadata, block separation and headings."""

    def test_empty_document(self):
        assert render(Document()) == ""

    def test_commonmark_document(self, simple_document):
        assert render(simple_document) == '[_metadata_:title]:- "T"\n\n# T\n\n* one\n* two\n'

    def test_yaml_metadata(self):
        doc = Document().set_title("T").add_heading(Heading.section("H"))
        assert render(doc, MarkdownFlavor.GITHUB) == "---\ntitle: T\n---\n\n# H\n"
        assert render(doc, MarkdownFlavor.MULTI) == "---\ntitle: T\n---\n\n# H\n"

    def test_metadata_quotes_escaped(self):
        doc = Document().set_title('Say "hi"')
        assert render(doc) == '[_metadata_:title]:- "Say \\"hi\\""\n'

    def test_heading_levels(self):
        doc = Document().add_heading(Heading.sub_sub_section("Deep"))
        assert render(doc) == "### Deep\n"
        assert render(Document().add_heading(Heading.title("Top"))) == "# Top\n"

    def test_blocks_separated_by_blank_line(self):
        doc = Document().add_paragraph(Paragraph.text("a")).add_paragraph(Paragraph.text("b"))
        assert render(doc) == "a\n\nb\n"

    def test_ends_with_single_newline(self, rich_document):
        for flavor in MarkdownFlavor:
            text = render(rich_document, flavor)
            assert text.endswith("\n")
            assert not text.endswith("\n\n")


@pytest.mark.unit
class TestLabels:
    """Tests for label placement per flavor."""

    def test_heading_labels(self):
        doc = Document().add_heading(Heading.section("H").set_label("h"))
        assert render(doc, MarkdownFlavor.MULTI) == "# H [h]\n"
        assert render(doc, MarkdownFlavor.PHP_EXTRA) == "# H {#h}\n"
        assert render(doc, MarkdownFlavor.GITHUB) == "# H\n"

    def test_paragraph_labels(self):
        doc = Document().add_paragraph(Paragraph.text("text").set_label("p"))
        assert render(doc, MarkdownFlavor.MULTI) == "[p] text\n"
        assert render(doc, MarkdownFlavor.PHP_EXTRA) == "text {#p}\n"
        assert render(doc, MarkdownFlavor.COMMONMARK) == "text\n"


@pytest.mark.unit
class TestBlocks:
    """Tests for lists, quotes, code and other blocks."""

    def test_nested_list(self):
        inner = List.unordered().add_item_from("b")
        outer = List.ordered().add_item_from("a").add_sub_list(inner).add_item_from("c")
        assert render(Document().add_list(outer)) == "1. a\n   * b\n1. c\n"

    def test_quote(self):
        assert render(Document().add_block_quote(Quote.paragraph(Paragraph.text("q")))) == "> q\n"

    def test_quote_with_two_paragraphs(self):
        quote = Quote().add_paragraph(Paragraph.text("a")).add_paragraph(Paragraph.text("b"))
        assert render(Document().add_block_quote(quote)) == "> a\n>\n> b\n"

    def test_nested_quote(self):
        quote = Quote().add_block_quote(Quote.paragraph(Paragraph.text("deep")))
        assert render(Document().add_block_quote(quote)) == ">> deep\n"

    def test_fenced_code(self):
        doc = Document().add_code_block(CodeBlock("x = 1", "python"))
        assert render(doc) == "```python\nx = 1\n```\n"
        assert render(doc, MarkdownFlavor.PHP_EXTRA) == "```\nx = 1\n```\n"

    def test_strict_code_is_indented(self):
        doc = Document().add_code_block(CodeBlock("x = 1\ny = 2", "python"))
        assert render(doc, MarkdownFlavor.STRICT) == "    x = 1\n    y = 2\n"

    def test_code_not_escaped(self):
        assert render(Document().add_code_block(CodeBlock("a_b*c"))) == "```\na_b*c\n```\n"

    def test_formatted(self):
        assert render(Document().add_formatted(Formatted("a\nb"))) == "    a\n    b\n"

    def test_thematic_break(self):
        assert render(Document().add_thematic_break()) == "-----\n"

    def test_comment(self):
        assert render(Document().add_comment(Comment("note"))) == '[//]: # "note"\n'

    def test_multiline_comment(self):
        assert render(Document().add_comment(Comment("a\nb"))) == '[//]: # "a"\n[//]: # "b"\n'

    def test_definition_list(self):
        doc = Document().add_definition_list(DefinitionList().add_definition_from("term", "meaning"))
        assert render(doc) == "**term**:- meaning\n"
        assert render(doc, MarkdownFlavor.GITHUB) == "**term**:- meaning\n"
        assert render(doc, MarkdownFlavor.MULTI) == "term\n: meaning\n"
        assert render(doc, MarkdownFlavor.PHP_EXTRA) == "term\n: meaning\n"

    def test_image_block(self):
        doc = Document().add_image(ImageBlock(Image.new("a.png", "alt")))
        assert render(doc) == "![alt](a.png)\n"

    def test_math_block(self):
        doc = Document().add_math(MathBlock(Math("x")))
        assert render(doc, MarkdownFlavor.GITHUB) == "$$\nx\n$$\n"
        assert render(doc, MarkdownFlavor.COMMONMARK) == "`x`\n"


@pytest.mark.unit
class TestTables:
    """Tests for pipe tables."""

    def test_gfm_table(self):
        assert render(table_doc(), MarkdownFlavor.GITHUB) == "|A|B|\n|:----|----:|\n|1|2|\n"

    def test_alignments(self):
        table = Table(columns=[Column("C", Alignment.CENTERED), Column("J", Alignment.JUSTIFIED)])
        assert render(Document().add_table(table), MarkdownFlavor.MULTI) == "|C|J|\n|--:--|-----|\n"

    def test_ragged_row(self):
        table = Table(columns=[Column("A"), Column("B")], rows=[Row.from_strings("1")])
        assert render(Document().add_table(table), MarkdownFlavor.GITHUB).endswith("|1||\n")

    def test_pipe_escaped_in_cell(self):
        table = Table(columns=[Column("A")], rows=[Row([Cell.text("a|b")])])
        assert render(Document().add_table(table), MarkdownFlavor.GITHUB).endswith("|a\\|b|\n")

    @pytest.mark.parametrize("flavor", [MarkdownFlavor.STRICT, MarkdownFlavor.COMMONMARK])
    def test_tables_omitted(self, flavor):
        doc = table_doc().add_paragraph(Paragraph.text("after"))
        assert render(doc, flavor) == "after\n"


@pytest.mark.unit
class TestInline:
    """Tests for inline content."""

    def test_escaping(self):
        assert render(paragraph_doc(Text("a*b_c"))) == "a\\*b\\_c\n"
        assert render(paragraph_doc(Text("a*b")), escape_special=False) == "a*b\n"

    def test_bold_italic(self):
        span = Span([Text("x")], [SpanStyle.BOLD, SpanStyle.ITALIC])
        assert render(paragraph_doc(span)) == "***x***\n"

    def test_strikethrough_by_flavor(self):
        span = Span.with_style("x", SpanStyle.STRIKETHROUGH)
        assert render(paragraph_doc(span), MarkdownFlavor.GITHUB) == "~~x~~\n"
        assert render(paragraph_doc(span)) == "x\n"

    def test_unsupported_styles_dropped(self):
        span = Span.with_style("x", SpanStyle.SMALL_CAPS, Sized(Size.LARGE), SpanStyle.UNDERLINE)
        assert render(paragraph_doc(span)) == "x\n"

    def test_plain_resets_styles(self):
        span = Span([Text("x")], [SpanStyle.BOLD, SpanStyle.PLAIN, SpanStyle.ITALIC])
        assert render(paragraph_doc(span)) == "*x*\n"

    def test_mono_not_escaped(self):
        assert render(paragraph_doc(Span.mono("a_b"))) == "`a_b`\n"

    def test_characters(self):
        doc = paragraph_doc(Text("a"), Character.EM_DASH, Text("b"), Character.NON_BREAK_SPACE, Emoji("smile"))
        assert render(doc) == "a---b&nbsp;:smile:\n"

    def test_en_dash_and_space(self):
        assert render(paragraph_doc(Text("1"), Character.EN_DASH, Text("2"), Character.SPACE)) == "1--2 \n"

    def test_links(self):
        assert render(paragraph_doc(HyperLink.external("https://x.org"))) == "<https://x.org>\n"
        assert render(paragraph_doc(HyperLink.external("https://x.org", "X", "T"))) == '[X](https://x.org "T")\n'

    def test_internal_link(self):
        assert render(paragraph_doc(HyperLink.internal("sec:intro", "Intro"))) == "[Intro](#secintro)\n"

    def test_internal_link_without_caption(self):
        assert render(paragraph_doc(HyperLink.internal("intro"))) == "[intro](#intro)\n"

    def test_image(self):
        assert render(paragraph_doc(Image.new("a.png", "alt"))) == "![alt](a.png)\n"

    def test_math(self):
        assert render(paragraph_doc(Math("x^2")), MarkdownFlavor.GITHUB) == "$x^2$\n"
        assert render(paragraph_doc(Math("x^2")), MarkdownFlavor.MULTI) == "$x^2$\n"
        assert render(paragraph_doc(Math("x^2"))) == "`x^2`\n"

    def test_line_break(self):
        assert render(paragraph_doc(Text("a"), LineBreak(), Text("b"))) == "a  \nb\n"

    def test_line_break_inside_quote(self):
        quote = Quote.paragraph(Paragraph([Text("a"), LineBreak(), Text("b")]))
        assert render(Document().add_block_quote(quote)) == "> a  \n> b\n"


@pytest.mark.unit
class TestRendererReuse:
    """A renderer instance can be reused."""

    def test_same_output_twice(self, rich_document):
        renderer = MarkdownRenderer(MarkdownRendererOptions(flavor="gfm"))
        assert renderer.render_to_string(rich_document) == renderer.render_to_string(rich_document)

    def test_render_to_stream(self, simple_document):
        buffer = io.StringIO()
        MarkdownRenderer().render(simple_document, buffer)
        assert buffer.getvalue() == render(simple_document)
