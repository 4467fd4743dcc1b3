#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/ast/__init__.py
"""Document model for somedoc.

The module consists of several components:

- nodes: block and inline content classes and the Document root
- labels: validated cross-reference identifiers
- metadata: document metadata variants
- visitors: visitor protocols and the ``walk_*`` traversal functions
- serialization: the JSON interchange form

Examples
--------
Basic usage:

    >>> from somedoc.ast import Document, Heading, Paragraph
    >>> from somedoc.renderers.markdown import MarkdownRenderer
    >>>
    >>> doc = Document().set_title("Notes")
    >>> doc.add_heading(Heading.section("Intro")).add_paragraph(Paragraph.text("Hello world"))
    >>> markdown = MarkdownRenderer().render_to_string(doc)

"""

from __future__ import annotations

from somedoc.ast.labels import Label
from somedoc.ast.metadata import (
    METADATA_TYPES,
    Author,
    Copyright,
    Date,
    Keywords,
    Metadata,
    Other,
    Revision,
    SiteClass,
    Status,
    Title,
)
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
    Row,
    Size,
    Sized,
    Span,
    SpanStyle,
    SpanStyleType,
    Table,
    Text,
    ThematicBreak,
    inline_text,
)
from somedoc.ast.serialization import dict_to_document, document_to_dict, document_to_json, json_to_document
from somedoc.ast.visitors import (
    BlockVisitor,
    CharacterContent,
    DocumentVisitor,
    InlineVisitor,
    TableVisitor,
    walk_block,
    walk_definition_list,
    walk_document,
    walk_inline,
    walk_list,
    walk_table,
)

__all__ = [
    # Nodes
    "Alignment",
    "BlockContent",
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
    "InlineContent",
    "Item",
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
    "SpanStyleType",
    "Table",
    "Text",
    "ThematicBreak",
    "inline_text",
    # Labels and metadata
    "Label",
    "METADATA_TYPES",
    "Author",
    "Copyright",
    "Date",
    "Keywords",
    "Metadata",
    "Other",
    "Revision",
    "SiteClass",
    "Status",
    "Title",
    # Visitors
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
    # Serialization
    "dict_to_document",
    "document_to_dict",
    "document_to_json",
    "json_to_document",
]
