#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/renderers/html.py
"""HTML rendering from the document model.

This module provides the HtmlRenderer class which writes a complete HTML
document. Metadata becomes ``<head>`` content; the first request for a block
visitor closes the head and opens the body. Block elements are written one
per line and indented by nesting level; inline content stays on the line of
its enclosing element.

"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence

from somedoc.ast.labels import Label
from somedoc.ast.metadata import Metadata, SiteClass, Title
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
    Size,
    Sized,
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
from somedoc.options.html import HtmlRendererOptions
from somedoc.renderers.base import BaseRenderer
from somedoc.utils.escape import escape_html
from somedoc.utils.text import html_id

logger = logging.getLogger(__name__)


class _State(Enum):
    EMPTY = "empty"
    HEAD = "head"
    BODY = "body"


_SPAN_TAGS: dict[SpanStyle, tuple[str, str]] = {
    SpanStyle.ITALIC: ("<em>", "</em>"),
    SpanStyle.SLANTED: ("<em>", "</em>"),
    SpanStyle.BOLD: ("<strong>", "</strong>"),
    SpanStyle.MONO: ("<code>", "</code>"),
    SpanStyle.CODE: ("<code>", "</code>"),
    SpanStyle.STRIKETHROUGH: ("<del>", "</del>"),
    SpanStyle.UNDERLINE: ("<ins>", "</ins>"),
    SpanStyle.SMALL_CAPS: ('<span style="font-variant: small-caps">', "</span>"),
    SpanStyle.SUPERSCRIPT: ("<sup>", "</sup>"),
    SpanStyle.SUBSCRIPT: ("<sub>", "</sub>"),
}

_CHARACTERS: dict[Character, str] = {
    Character.SPACE: "&#32;",
    Character.NON_BREAK_SPACE: "&nbsp;",
    Character.HYPHEN: "&dash;",
    Character.EM_DASH: "&mdash;",
    Character.EN_DASH: "&ndash;",
}

_TEXT_ALIGN: dict[Alignment, str] = {
    Alignment.LEFT: "left",
    Alignment.RIGHT: "right",
    Alignment.CENTERED: "center",
    Alignment.JUSTIFIED: "justify",
}

_LIST_TAGS: dict[ListKind, str] = {
    ListKind.ORDERED: "ol",
    ListKind.UNORDERED: "ul",
}


def _tag(name: str, attributes: Sequence[tuple[str, Optional[str]]] = (), closed: bool = False) -> str:
    """Format a start tag; attributes with a None value are left out."""
    parts = [name]
    parts.extend(f'{key}="{escape_html(value, quote=True)}"' for key, value in attributes if value is not None)
    return f"<{' '.join(parts)}{'/' if closed else ''}>"


def _id(label: Optional[Label]) -> Optional[str]:
    return html_id(str(label)) if label is not None else None


class HtmlRenderer(DocumentVisitor, BlockVisitor, TableVisitor, InlineVisitor, BaseRenderer):
    """Render a document to an HTML page.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from somedoc.ast import Document, Paragraph
        >>> doc = Document().add_paragraph(Paragraph.text("Hello"))
        >>> html = HtmlRenderer(HtmlRendererOptions(include_assets=False)).render_to_string(doc)
        >>> print(html, end="")
        <html>
          <head>
          </head>
          <body>
            <p>Hello</p>
          </body>
        </html>

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._reset_state()

    def _reset_state(self) -> None:
        self._output: list[str] = []
        self._state = _State.EMPTY
        self._indent_level: int = 0
        self._list_depth: int = 0
        self._definition_depth: int = 0
        self._span_stack: list[list[str]] = []
        self._in_table_body: bool = False

    def render_to_string(self, doc: Document) -> str:
        """Render a document to an HTML string.

        Parameters
        ----------
        doc : Document
            The document to render

        Returns
        -------
        str
            HTML text

        """
        self._reset_state()
        walk_document(doc, self)
        result = "".join(self._output)
        self._output.clear()
        return result

    # -------------------------------------------------------------------------
    # Output helpers
    # -------------------------------------------------------------------------

    def _start_line(self) -> None:
        self._output.append(" " * (self._indent_level * self.options.indent_width))

    def _line(self, text: str) -> None:
        self._start_line()
        self._output.append(text + "\n")

    def _open(self, text: str) -> None:
        self._line(text)
        self._indent_level += 1

    def _close(self, text: str) -> None:
        self._indent_level -= 1
        self._line(text)

    # -------------------------------------------------------------------------
    # DocumentVisitor
    # -------------------------------------------------------------------------

    def start_document(self) -> None:
        self._open("<html>")
        self._open("<head>")
        if self.options.include_assets:
            self._line(_tag("link", [("rel", "stylesheet"), ("href", self.options.highlight_css_url)]))
            self._line(_tag("script", [("src", self.options.highlight_js_url)]) + "</script>")
            self._line(_tag("script", [("id", "MathJax-script"), ("src", self.options.mathjax_url)]) + "</script>")
        self._state = _State.HEAD

    def metadata(self, datum: Metadata) -> None:
        if isinstance(datum, Title):
            self._line(f"<title>{escape_html(datum.value)}</title>")
        elif isinstance(datum, SiteClass):
            self._line(_tag("link", [("rel", "stylesheet"), ("href", datum.name_or_path)]))
        else:
            self._line(_tag("meta", [("name", datum.key), ("content", datum.value_string())]))

    def block_visitor(self) -> Optional[BlockVisitor]:
        if self._state is _State.HEAD:
            self._close("</head>")
            self._open("<body>")
            self._state = _State.BODY
        return self

    def start_abstract(self) -> None:
        self._open('<section class="abstract">')

    def end_abstract(self) -> None:
        self._close("</section>")

    def end_document(self) -> None:
        if self._state is _State.HEAD:
            self._close("</head>")
            self._close("</html>")
        elif self._state is _State.BODY:
            self._close("</body>")
            self._close("</html>")
        self._state = _State.EMPTY

    # -------------------------------------------------------------------------
    # BlockVisitor
    # -------------------------------------------------------------------------

    def comment(self, value: str) -> None:
        self._line(f"<!-- {value.replace('--', '- -')} -->")

    @staticmethod
    def _heading_tag(level: HeadingLevel) -> str:
        return f"h{min(max(int(level), 1), 6)}"

    def start_heading(self, level: HeadingLevel, label: Optional[Label]) -> None:
        self._start_line()
        self._output.append(_tag(self._heading_tag(level), [("id", _id(label))]))

    def end_heading(self, level: HeadingLevel, label: Optional[Label]) -> None:
        self._output.append(f"</{self._heading_tag(level)}>\n")

    def image_block(self, value: ImageBlock) -> None:
        if value.caption is None:
            self._start_line()
            self._output.append(_tag("div", [("id", _id(value.label))]))
            self.image(value.image)
            self._output.append("</div>\n")
            return
        self._open(_tag("figure", [("id", _id(value.label))]))
        self._start_line()
        self.image(value.image)
        self._output.append("\n")
        self._line(f"<figcaption>{escape_html(value.caption)}</figcaption>")
        self._close("</figure>")

    def math_block(self, value: MathBlock) -> None:
        self._line(
            _tag("div", [("id", _id(value.label)), ("class", "math")])
            + f"\\[ {escape_html(value.math.value)} \\]</div>"
        )

    def start_list(self, kind: ListKind, label: Optional[Label]) -> None:
        if self._list_depth > 0:
            self._open("<li>")
        self._open(_tag(_LIST_TAGS[kind], [("id", _id(label))]))
        self._list_depth += 1

    def end_list(self, kind: ListKind, label: Optional[Label]) -> None:
        self._list_depth -= 1
        self._close(f"</{_LIST_TAGS[kind]}>")
        if self._list_depth > 0:
            self._close("</li>")

    def start_list_item(self, label: Optional[Label]) -> None:
        self._start_line()
        self._output.append(_tag("li", [("id", _id(label))]))

    def end_list_item(self, label: Optional[Label]) -> None:
        self._output.append("</li>\n")

    def start_definition_list(self, label: Optional[Label]) -> None:
        if self._definition_depth > 0:
            self._open("<dd>")
        self._open(_tag("dl", [("id", _id(label))]))
        self._definition_depth += 1

    def end_definition_list(self, label: Optional[Label]) -> None:
        self._definition_depth -= 1
        self._close("</dl>")
        if self._definition_depth > 0:
            self._close("</dd>")

    def start_definition_list_term(self) -> None:
        self._start_line()
        self._output.append("<dt>")

    def end_definition_list_term(self) -> None:
        self._output.append("</dt>\n")

    def start_definition_list_text(self) -> None:
        self._start_line()
        self._output.append("<dd>")

    def end_definition_list_text(self) -> None:
        self._output.append("</dd>\n")

    def formatted(self, value: Formatted) -> None:
        self._line(_tag("pre", [("id", _id(value.label))]) + escape_html(value.text) + "</pre>")

    def code_block(self, value: CodeBlock) -> None:
        language_class = f"language-{value.language}" if value.language else None
        self._line(
            _tag("pre", [("id", _id(value.label))])
            + _tag("code", [("class", language_class)])
            + escape_html(value.code)
            + "</code></pre>"
        )

    def start_paragraph(self, alignment: Optional[Alignment], label: Optional[Label]) -> None:
        style = f"text-align: {_TEXT_ALIGN[alignment]}" if alignment is not None else None
        self._start_line()
        self._output.append(_tag("p", [("id", _id(label)), ("style", style)]))

    def end_paragraph(self, alignment: Optional[Alignment], label: Optional[Label]) -> None:
        self._output.append("</p>\n")

    def start_quote(self, label: Optional[Label]) -> None:
        self._open(_tag("blockquote", [("id", _id(label))]))

    def end_quote(self, label: Optional[Label]) -> None:
        self._close("</blockquote>")

    def thematic_break(self) -> None:
        self._line("<hr/>")

    def table_visitor(self) -> Optional[TableVisitor]:
        return self

    def inline_visitor(self) -> Optional[InlineVisitor]:
        return self

    # -------------------------------------------------------------------------
    # TableVisitor
    # -------------------------------------------------------------------------

    def start_table(self, caption: Optional[str], label: Optional[Label]) -> None:
        self._in_table_body = False
        self._open(_tag("table", [("id", _id(label))]))
        if caption:
            self._line(f"<caption>{escape_html(caption)}</caption>")

    def end_table(self, caption: Optional[str], label: Optional[Label]) -> None:
        if self._in_table_body:
            self._close("</tbody>")
            self._in_table_body = False
        self._close("</table>")

    def start_table_header_row(self) -> None:
        self._open("<thead>")
        self._open("<tr>")

    def table_header_cell(self, column: Column, index: int) -> None:
        style = None if column.alignment is Alignment.LEFT else f"text-align: {_TEXT_ALIGN[column.alignment]}"
        self._line(_tag("th", [("style", style)]) + escape_html(column.text) + "</th>")

    def end_table_header_row(self) -> None:
        self._close("</tr>")
        self._close("</thead>")

    def start_table_row(self, index: int) -> None:
        if not self._in_table_body:
            self._open("<tbody>")
            self._in_table_body = True
        self._open("<tr>")

    def end_table_row(self, index: int) -> None:
        self._close("</tr>")

    def start_table_cell(self, index: int, label: Optional[Label]) -> None:
        self._start_line()
        self._output.append(_tag("td", [("id", _id(label))]))

    def end_table_cell(self, index: int, label: Optional[Label]) -> None:
        self._output.append("</td>\n")

    # -------------------------------------------------------------------------
    # InlineVisitor
    # -------------------------------------------------------------------------

    @staticmethod
    def _href(link: HyperLink) -> str:
        if link.is_internal:
            return f"#{html_id(str(link.target))}"
        return str(link.target)

    def link(self, value: HyperLink) -> None:
        caption = value.caption if value.caption is not None else str(value.target)
        self._output.append(_tag("a", [("href", self._href(value)), ("title", value.title)]))
        self._output.append(escape_html(caption) + "</a>")

    def image(self, value: Image) -> None:
        self._output.append(
            _tag(
                "img",
                [("src", self._href(value.link)), ("alt", value.link.caption), ("title", value.link.title)],
                closed=True,
            )
        )

    def text(self, value: Text) -> None:
        self._output.append(escape_html(value.value))

    def math(self, value: Math) -> None:
        self._output.append(f"\\( {escape_html(value.value)} \\)")

    def character(self, value: CharacterContent) -> None:
        if isinstance(value, Emoji):
            self._output.append(f":{value.name}:")
        elif isinstance(value, OtherCharacter):
            self._output.append(escape_html(value.char))
        else:
            self._output.append(_CHARACTERS[value])

    def line_break(self) -> None:
        self._output.append("<br/>")

    def start_span(self, styles: Sequence[SpanStyleType]) -> None:
        openers: list[str] = []
        closers: list[str] = []
        for style in styles:
            if style is SpanStyle.PLAIN:
                openers, closers = [], []
            elif isinstance(style, Sized):
                if style.size is not Size.NORMAL:
                    logger.debug(f"Size {style.size.value} has no HTML tag, dropped")
            else:
                opener, closer = _SPAN_TAGS[style]
                openers.append(opener)
                closers.append(closer)
        self._output.append("".join(openers))
        self._span_stack.append(closers)

    def end_span(self, styles: Sequence[SpanStyleType]) -> None:
        closers = self._span_stack.pop()
        self._output.append("".join(reversed(closers)))


__all__ = ["HtmlRenderer"]
