"""somedoc - A Python library for building documents once and rendering them to many markup formats.

somedoc provides an in-memory document model (headings, paragraphs, lists,
tables, images, math, code and inline styling) and a set of renderers that
turn the same document into Markdown, HTML, LaTeX, XWiki or a JSON
interchange form.

Key Features
------------
- Five Markdown flavors: strict, CommonMark, GitHub, MultiMarkdown and PHP Markdown Extra
- Complete HTML pages with optional stylesheet, highlighting and MathJax assets
- LaTeX source with a configurable preamble
- XWiki 2.x markup
- Lossless JSON interchange for storing and reloading documents
- Visitor protocols for writing custom renderers

Supported Formats
-----------------
- **Markdown**: ``markdown+strict``, ``markdown+commonmark``, ``markdown+gfm``,
  ``markdown+multi``, ``markdown+extra``
- **Other**: ``html``, ``latex``, ``xwiki``, ``json``

Requirements
------------
- Python 3.10+
- PyYAML for metadata front matter

Examples
--------
Build a document and render it:

    >>> from somedoc import Document, Heading, Paragraph, render
    >>> doc = Document().set_title("Notes")
    >>> doc.add_heading(Heading.section("Intro")).add_paragraph(Paragraph.text("Hello"))
    >>> markdown = render(doc, "markdown+gfm")
    >>> render(doc, "latex", "notes.tex")

Store and reload the document:

    >>> from somedoc import document_to_json, json_to_document
    >>> json_to_document(document_to_json(doc)) == doc
    True

See Also
--------
somedoc.ast : Document model, visitors and serialization
somedoc.renderers : Renderer classes

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "somedoc requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from somedoc.api import get_renderer, render, write_document
from somedoc.ast import (
    Alignment,
    Author,
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
    Item,
    Label,
    LineBreak,
    List,
    ListKind,
    Math,
    MathBlock,
    OtherCharacter,
    Paragraph,
    Quote,
    Row,
    Size,
    Sized,
    Span,
    SpanStyle,
    Table,
    Text,
    ThematicBreak,
    dict_to_document,
    document_to_dict,
    document_to_json,
    json_to_document,
)
from somedoc.exceptions import (
    FormatError,
    InvalidOptionsError,
    LabelError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    SomedocError,
    ValidationError,
)
from somedoc.formats import MarkdownFlavor, OutputFormat
from somedoc.logging_utils import configure_logging
from somedoc.options import (
    BaseRendererOptions,
    HtmlRendererOptions,
    JsonRendererOptions,
    LatexRendererOptions,
    MarkdownRendererOptions,
    XWikiRendererOptions,
)

__all__ = [
    "__version__",
    # API
    "render",
    "get_renderer",
    "write_document",
    "configure_logging",
    # Formats
    "MarkdownFlavor",
    "OutputFormat",
    # Model
    "Alignment",
    "Author",
    "Cell",
    "Character",
    "CodeBlock",
    "Column",
    "Comment",
    "Definition",
    "DefinitionList",
    "Document",
    "Emoji",
    "Formatted",
    "FrontMatter",
    "Heading",
    "HeadingLevel",
    "HyperLink",
    "Image",
    "ImageBlock",
    "Item",
    "Label",
    "LineBreak",
    "List",
    "ListKind",
    "Math",
    "MathBlock",
    "OtherCharacter",
    "Paragraph",
    "Quote",
    "Row",
    "Size",
    "Sized",
    "Span",
    "SpanStyle",
    "Table",
    "Text",
    "ThematicBreak",
    # Serialization
    "dict_to_document",
    "document_to_dict",
    "document_to_json",
    "json_to_document",
    # Options
    "BaseRendererOptions",
    "HtmlRendererOptions",
    "JsonRendererOptions",
    "LatexRendererOptions",
    "MarkdownRendererOptions",
    "XWikiRendererOptions",
    # Exceptions
    "SomedocError",
    "ValidationError",
    "LabelError",
    "InvalidOptionsError",
    "FormatError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
]
