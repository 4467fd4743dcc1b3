#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_html_renderer.py
"""Unit tests for the HTML renderer."""

import pytest

from somedoc.ast import (
    Alignment,
    Author,
    Character,
    CodeBlock,
    Column,
    Comment,
    DefinitionList,
    Document,
    Emoji,
    Formatted,
    Heading,
    HeadingLevel,
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
    SiteClass,
    Size,
    Sized,
    Span,
    SpanStyle,
    Table,
    Text,
)
from somedoc.constants import DEFAULT_MATHJAX_URL
from somedoc.options import HtmlRendererOptions
from somedoc.renderers import HtmlRenderer


def render(document: Document, **kwargs) -> str:
    options = HtmlRendererOptions(**{"include_assets": False, **kwargs})
    return HtmlRenderer(options).render_to_string(document)


def body(document: Document) -> str:
    """Render without indentation and return the text between the body tags."""
    text = render(document, indent_width=0)
    return text.split("<body>\n", 1)[1].split("</body>\n", 1)[0]


def inline(*content) -> str:
    return body(Document().add_paragraph(Paragraph(list(content))))


@pytest.mark.unit
class TestPageStructure:
    """Tests for the html/head/body skeleton."""

    def test_paragraph_page(self):
        doc = Document().add_paragraph(Paragraph.text("Hello"))
        assert render(doc) == (
            "<html>\n  <head>\n  </head>\n  <body>\n    <p>Hello</p>\n  </body>\n</html>\n"
        )

    def test_empty_document(self):
        assert render(Document(), indent_width=0) == "<html>\n<head>\n</head>\n<body>\n</body>\n</html>\n"

    def test_assets(self):
        text = HtmlRenderer().render_to_string(Document())
        assert f'<script id="MathJax-script" src="{DEFAULT_MATHJAX_URL}"></script>' in text
        assert 'rel="stylesheet"' in text

    def test_metadata_in_head(self):
        doc = Document().set_title("T").add_metadata(Author("Ada", "ada@example.com"))
        doc.add_metadata(SiteClass("style.css"))
        head = render(doc, indent_width=0).split("</head>")[0]
        assert "<title>T</title>\n" in head
        assert '<meta name="author" content="Ada &lt;ada@example.com&gt;">\n' in head
        assert '<link rel="stylesheet" href="style.css">\n' in head

    def test_abstract(self):
        doc = Document().set_abstract([Paragraph.text("sum")]).add_paragraph(Paragraph.text("body"))
        assert body(doc) == '<section class="abstract">\n<p>sum</p>\n</section>\n<p>body</p>\n'

    def test_indentation(self):
        doc = Document().add_list(List.unordered().add_item_from("a").add_sub_list(List.ordered().add_item_from("b")))
        assert render(doc) == (
            "<html>\n"
            "  <head>\n"
            "  </head>\n"
            "  <body>\n"
            "    <ul>\n"
            "      <li>a</li>\n"
            "      <li>\n"
            "        <ol>\n"
            "          <li>b</li>\n"
            "        </ol>\n"
            "      </li>\n"
            "    </ul>\n"
            "  </body>\n"
            "</html>\n"
        )


@pytest.mark.unit
class TestBlocks:
    """Tests for block elements."""

    def test_heading_with_id(self):
        assert body(Document().add_heading(Heading.section("Intro").set_label("intro"))) == (
            '<h1 id="intro">Intro</h1>\n'
        )

    @pytest.mark.parametrize(
        "level,tag",
        [(HeadingLevel.TITLE, "h1"), (HeadingLevel.SUB_SECTION, "h2"), (HeadingLevel.PARAGRAPH, "h6")],
    )
    def test_heading_levels_clamped(self, level, tag):
        assert body(Document().add_heading(Heading.text(level, "x"))) == f"<{tag}>x</{tag}>\n"

    def test_comment(self):
        assert body(Document().add_comment(Comment("a--b"))) == "<!-- a- -b -->\n"

    def test_code_block(self):
        assert body(Document().add_code_block(CodeBlock("x < 1", "python"))) == (
            '<pre><code class="language-python">x &lt; 1</code></pre>\n'
        )
        assert body(Document().add_code_block(CodeBlock("x"))) == "<pre><code>x</code></pre>\n"

    def test_formatted(self):
        assert body(Document().add_formatted(Formatted("a\nb"))) == "<pre>a\nb</pre>\n"

    def test_paragraph_alignment(self):
        doc = Document().add_paragraph(Paragraph.text("c").set_alignment(Alignment.CENTERED))
        assert body(doc) == '<p style="text-align: center">c</p>\n'

    def test_paragraph_label(self):
        assert body(Document().add_paragraph(Paragraph.text("x").set_label("sec:one"))) == (
            '<p id="sec:one">x</p>\n'
        )

    def test_quote(self):
        assert body(Document().add_block_quote(Quote.paragraph(Paragraph.text("q")))) == (
            "<blockquote>\n<p>q</p>\n</blockquote>\n"
        )

    def test_thematic_break(self):
        assert body(Document().add_thematic_break()) == "<hr/>\n"

    def test_definition_list(self):
        doc = Document().add_definition_list(DefinitionList().add_definition_from("term", "meaning"))
        assert body(doc) == "<dl>\n<dt>term</dt>\n<dd>meaning</dd>\n</dl>\n"

    def test_image_block(self):
        assert body(Document().add_image(ImageBlock(Image.new("a.png", "alt")))) == (
            '<div><img src="a.png" alt="alt"/></div>\n'
        )

    def test_image_block_with_caption(self):
        block = ImageBlock(Image.new("a.png", "alt"), caption="Cap").set_label("fig")
        assert body(Document().add_image(block)) == (
            '<figure id="fig">\n<img src="a.png" alt="alt"/>\n<figcaption>Cap</figcaption>\n</figure>\n'
        )

    def test_math_block(self):
        assert body(Document().add_math(MathBlock(Math("x")))) == '<div class="math">\\[ x \\]</div>\n'


@pytest.mark.unit
class TestTables:
    """Tests for table markup."""

    def test_table(self):
        table = Table([Column("A"), Column("B", Alignment.RIGHT)], [Row.from_strings("1", "2")], "Cap", "tab")
        assert body(Document().add_table(table)) == (
            '<table id="tab">\n'
            "<caption>Cap</caption>\n"
            "<thead>\n<tr>\n"
            "<th>A</th>\n"
            '<th style="text-align: right">B</th>\n'
            "</tr>\n</thead>\n"
            "<tbody>\n<tr>\n"
            "<td>1</td>\n"
            "<td>2</td>\n"
            "</tr>\n</tbody>\n"
            "</table>\n"
        )

    def test_table_without_rows(self):
        table = Table([Column("A")])
        assert body(Document().add_table(table)) == "<table>\n<thead>\n<tr>\n<th>A</th>\n</tr>\n</thead>\n</table>\n"

    def test_ragged_row_padded(self):
        table = Table([Column("A"), Column("B")], [Row.from_strings("1")])
        assert "<td>1</td>\n<td></td>\n" in body(Document().add_table(table))


@pytest.mark.unit
class TestInline:
    """Tests for inline content."""

    def test_text_escaped(self):
        assert inline(Text("<b>&")) == "<p>&lt;b&gt;&amp;</p>\n"

    def test_bold_italic(self):
        assert inline(Span([Text("x")], [SpanStyle.BOLD, SpanStyle.ITALIC])) == "<p><strong><em>x</em></strong></p>\n"

    def test_small_caps(self):
        assert inline(Span.with_style("x", SpanStyle.SMALL_CAPS)) == (
            '<p><span style="font-variant: small-caps">x</span></p>\n'
        )

    def test_size_dropped(self):
        assert inline(Span.with_style("x", Sized(Size.LARGE))) == "<p>x</p>\n"

    def test_plain_resets(self):
        assert inline(Span([Text("x")], [SpanStyle.BOLD, SpanStyle.PLAIN, SpanStyle.SUPERSCRIPT])) == (
            "<p><sup>x</sup></p>\n"
        )

    def test_characters(self):
        assert inline(Character.EM_DASH, Character.NON_BREAK_SPACE, Emoji("smile")) == (
            "<p>&mdash;&nbsp;:smile:</p>\n"
        )

    def test_links(self):
        assert inline(HyperLink.external("https://x.org", "X", "T")) == (
            '<p><a href="https://x.org" title="T">X</a></p>\n'
        )
        assert inline(HyperLink.external("https://x.org")) == '<p><a href="https://x.org">https://x.org</a></p>\n'

    def test_internal_link(self):
        assert inline(HyperLink.internal("sec:intro", "Intro")) == '<p><a href="#sec:intro">Intro</a></p>\n'

    def test_image(self):
        assert inline(Image.new("a.png", "alt")) == '<p><img src="a.png" alt="alt"/></p>\n'

    def test_math(self):
        assert inline(Math("x < 1")) == "<p>\\( x &lt; 1 \\)</p>\n"

    def test_line_break(self):
        assert inline(Text("a"), LineBreak(), Text("b")) == "<p>a<br/>b</p>\n"

    def test_attribute_quotes_escaped(self):
        assert inline(HyperLink.external('https://x.org/?q="a"', "X")) == (
            '<p><a href="https://x.org/?q=&quot;a&quot;">X</a></p>\n'
        )
