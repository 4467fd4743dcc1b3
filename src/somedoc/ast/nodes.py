#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/ast/nodes.py
"""Content model classes for document representation.

This module defines the in-memory document tree that every writer renders.
The tree is strictly owned top-down: a block owns its nested blocks and
inline content, and the only cross-reference is a :class:`~somedoc.ast.labels.Label`
used as a lookup key by internal hyperlinks.

Node Hierarchy
--------------
Block content (closed set, see ``BlockContent``):
    - Comment, Heading, ImageBlock, MathBlock, List, DefinitionList
    - Formatted, CodeBlock, Paragraph, Quote, Table, ThematicBreak

Inline content (closed set, see ``InlineContent``):
    - HyperLink, Image, Text, Math, LineBreak, Span
    - Character, Emoji, OtherCharacter

Container blocks support append-only construction, each ``add_*`` method
returns the container so calls can be chained::

    >>> doc = Document().set_title("Notes").add_heading(Heading.section("Intro"))
    >>> doc.add_list(List.unordered().add_item(Item.text("one")).add_item(Item.text("two")))

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Union

from somedoc.ast.labels import Label
from somedoc.ast.metadata import Author, Metadata, Title
from somedoc.exceptions import ValidationError

# -----------------------------------------------------------------------------
# Enumerations
# -----------------------------------------------------------------------------


class Alignment(Enum):
    """Horizontal alignment for paragraphs and table columns."""

    LEFT = "Left"
    RIGHT = "Right"
    CENTERED = "Centered"
    JUSTIFIED = "Justified"


class HeadingLevel(IntEnum):
    """Heading depth, from the document title down to a run-in paragraph heading."""

    TITLE = 0
    SECTION = 1
    SUB_SECTION = 2
    SUB_SUB_SECTION = 3
    SUB_SUB_SUB_SECTION = 4
    SUB_SUB_SUB_SUB_SECTION = 5
    SUB_SUB_SUB_SUB_SUB_SECTION = 6
    PARAGRAPH = 7


class ListKind(Enum):
    """Ordering of a list."""

    ORDERED = "Ordered"
    UNORDERED = "Unordered"


class Size(Enum):
    """Relative text size for :class:`Sized` spans."""

    LARGEST = "Largest"
    LARGER = "Larger"
    LARGE = "Large"
    NORMAL = "Normal"
    SMALL = "Small"
    SMALLER = "Smaller"
    SMALLEST = "Smallest"


class SpanStyle(Enum):
    """Character styles applied by a :class:`Span`.

    ``PLAIN`` resets any styles accumulated before it in the same list.
    """

    PLAIN = "Plain"
    ITALIC = "Italic"
    SLANTED = "Slanted"
    BOLD = "Bold"
    MONO = "Mono"
    CODE = "Code"
    STRIKETHROUGH = "Strikethrough"
    UNDERLINE = "Underline"
    SMALL_CAPS = "SmallCaps"
    SUPERSCRIPT = "Superscript"
    SUBSCRIPT = "Subscript"


@dataclass(frozen=True)
class Sized:
    """A sizing span style."""

    size: Size


SpanStyleType = Union[SpanStyle, Sized]


class FrontMatter(Enum):
    """Generated lists placed before the document body."""

    TABLE_OF_CONTENTS = "TableOfContents"
    TABLE_OF_FIGURES = "TableOfFigures"
    TABLE_OF_TABLES = "TableOfTables"
    TABLE_OF_EQUATIONS = "TableOfEquations"
    TABLE_OF_LISTINGS = "TableOfListings"


def _coerce_label(label: Label | str | None) -> Optional[Label]:
    if label is None or isinstance(label, Label):
        return label
    return Label(label)


# -----------------------------------------------------------------------------
# Inline content
# -----------------------------------------------------------------------------


class Character(Enum):
    """Special characters with a distinct rendering in most formats."""

    SPACE = "Space"
    NON_BREAK_SPACE = "NonBreakSpace"
    HYPHEN = "Hyphen"
    EM_DASH = "EmDash"
    EN_DASH = "EnDash"


@dataclass(frozen=True)
class Emoji:
    """A named emoji such as ``:smile:``.

    Parameters
    ----------
    name : str
        Emoji short name; letters, optionally separated by underscores

    Raises
    ------
    ValidationError
        If the name is empty or contains anything but letters and underscores

    """

    name: str

    def __post_init__(self) -> None:
        """Validate the emoji name."""
        if not self.name:
            raise ValidationError("Emoji name must not be empty", parameter_name="name", parameter_value=self.name)
        if not self.name.replace("_", "").isalpha() or self.name.startswith("_"):
            raise ValidationError(
                f"Illegal character in emoji name {self.name!r}", parameter_name="name", parameter_value=self.name
            )


@dataclass(frozen=True)
class OtherCharacter:
    """Any single character written as-is by every format."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValidationError(
                f"Expected a single character, got {self.char!r}", parameter_name="char", parameter_value=self.char
            )


@dataclass
class Text:
    """Plain text; writers escape it for their syntax."""

    value: str


@dataclass
class Math:
    """A raw formula string, passed through unescaped (LaTeX math syntax)."""

    value: str


@dataclass
class LineBreak:
    """A hard line break inside inline content."""


@dataclass
class HyperLink:
    """A hyperlink to an external URL or an internal label.

    Parameters
    ----------
    target : str or Label
        A URL string for external links, a Label for internal ones
    caption : str or None, default = None
        Link text; writers fall back to the target when absent
    title : str or None, default = None
        Tooltip/title text

    """

    target: Union[str, Label]
    caption: str | None = None
    title: str | None = None

    @classmethod
    def external(cls, url: str, caption: str | None = None, title: str | None = None) -> HyperLink:
        return cls(url, caption, title)

    @classmethod
    def internal(cls, label: Label | str, caption: str | None = None, title: str | None = None) -> HyperLink:
        return cls(Label(label), caption, title)

    @property
    def is_internal(self) -> bool:
        """Check whether the link targets a label in this document."""
        return isinstance(self.target, Label)


@dataclass
class Image:
    """An inline image, addressed by a hyperlink."""

    link: HyperLink

    @classmethod
    def new(cls, url: str, alt_text: str | None = None) -> Image:
        return cls(HyperLink(url, alt_text))


@dataclass
class Span:
    """Styled inline content.

    Parameters
    ----------
    inner : list of InlineContent
        Nested inline content
    styles : list of SpanStyle or Sized
        Styles applied in order

    """

    inner: list[InlineContent] = field(default_factory=list)
    styles: list[SpanStyleType] = field(default_factory=list)

    @classmethod
    def with_style(cls, text: str, *styles: SpanStyleType) -> Span:
        return cls([Text(text)], list(styles))

    @classmethod
    def plain(cls, text: str) -> Span:
        return cls.with_style(text, SpanStyle.PLAIN)

    @classmethod
    def bold(cls, text: str) -> Span:
        return cls.with_style(text, SpanStyle.BOLD)

    @classmethod
    def italic(cls, text: str) -> Span:
        return cls.with_style(text, SpanStyle.ITALIC)

    @classmethod
    def mono(cls, text: str) -> Span:
        return cls.with_style(text, SpanStyle.MONO)

    def add_style(self, style: SpanStyleType) -> Span:
        self.styles.append(style)
        return self

    def add_inline(self, content: InlineContent) -> Span:
        self.inner.append(content)
        return self

    def has_inner(self) -> bool:
        return bool(self.inner)


InlineContent = Union[HyperLink, Image, Text, Math, Character, Emoji, OtherCharacter, LineBreak, Span]


class _InlineContainer:
    """Append-only helpers shared by blocks that hold inline content."""

    inner: list[InlineContent]

    def add_inline(self, content: InlineContent):
        self.inner.append(content)
        return self

    def add_text(self, text: str):
        return self.add_inline(Text(text))

    def add_space(self):
        return self.add_inline(Character.SPACE)

    def add_link(self, link: HyperLink):
        return self.add_inline(link)

    def add_line_break(self):
        return self.add_inline(LineBreak())

    def has_inner(self) -> bool:
        return bool(self.inner)


# -----------------------------------------------------------------------------
# Block content
# -----------------------------------------------------------------------------


@dataclass
class Comment:
    """A comment; writers use their native comment syntax or drop it."""

    text: str


@dataclass
class Heading(_InlineContainer):
    """A heading.

    Parameters
    ----------
    level : HeadingLevel or int
        Heading depth, 0 (title) to 7 (paragraph)
    inner : list of InlineContent
        Heading text
    label : Label or str or None, default = None
        Anchor for internal links

    """

    level: HeadingLevel
    inner: list[InlineContent] = field(default_factory=list)
    label: Optional[Label] = None

    def __post_init__(self) -> None:
        """Coerce the level and label."""
        try:
            self.level = HeadingLevel(self.level)
        except ValueError as e:
            raise ValidationError(
                f"Heading level must be 0-7, got {self.level}",
                parameter_name="level",
                parameter_value=self.level,
                original_error=e,
            ) from e
        self.label = _coerce_label(self.label)

    @classmethod
    def text(cls, level: HeadingLevel | int, text: str) -> Heading:
        return cls(HeadingLevel(level), [Text(text)])

    @classmethod
    def title(cls, text: str) -> Heading:
        return cls.text(HeadingLevel.TITLE, text)

    @classmethod
    def section(cls, text: str) -> Heading:
        return cls.text(HeadingLevel.SECTION, text)

    @classmethod
    def sub_section(cls, text: str) -> Heading:
        return cls.text(HeadingLevel.SUB_SECTION, text)

    @classmethod
    def sub_sub_section(cls, text: str) -> Heading:
        return cls.text(HeadingLevel.SUB_SUB_SECTION, text)

    @classmethod
    def sub_sub_sub_section(cls, text: str) -> Heading:
        return cls.text(HeadingLevel.SUB_SUB_SUB_SECTION, text)

    @classmethod
    def sub_sub_sub_sub_section(cls, text: str) -> Heading:
        return cls.text(HeadingLevel.SUB_SUB_SUB_SUB_SECTION, text)

    @classmethod
    def sub_sub_sub_sub_sub_section(cls, text: str) -> Heading:
        return cls.text(HeadingLevel.SUB_SUB_SUB_SUB_SUB_SECTION, text)

    @classmethod
    def paragraph(cls, text: str) -> Heading:
        return cls.text(HeadingLevel.PARAGRAPH, text)

    def set_label(self, label: Label | str) -> Heading:
        self.label = _coerce_label(label)
        return self

    def auto_label(self) -> Heading:
        """Label the heading from its plain text, see :meth:`Label.safe_from`."""
        self.label = Label.safe_from(inline_text(self.inner))
        return self


@dataclass
class Paragraph(_InlineContainer):
    """A paragraph of inline content.

    Parameters
    ----------
    inner : list of InlineContent
        Paragraph content
    alignment : Alignment or None, default = None
        ``None`` is the plain style; otherwise the paragraph is aligned
    label : Label or str or None, default = None
        Anchor for internal links

    """

    inner: list[InlineContent] = field(default_factory=list)
    alignment: Optional[Alignment] = None
    label: Optional[Label] = None

    def __post_init__(self) -> None:
        self.label = _coerce_label(self.label)

    @classmethod
    def text(cls, text: str) -> Paragraph:
        return cls([Text(text)])

    @classmethod
    def plain_str(cls, text: str) -> Paragraph:
        return cls([Span.plain(text)])

    def set_alignment(self, alignment: Alignment | None) -> Paragraph:
        self.alignment = alignment
        return self

    def set_label(self, label: Label | str) -> Paragraph:
        self.label = _coerce_label(label)
        return self


@dataclass
class ImageBlock:
    """A stand-alone image with optional caption and label."""

    image: Image
    caption: str | None = None
    label: Optional[Label] = None

    def __post_init__(self) -> None:
        self.label = _coerce_label(self.label)

    def set_caption(self, caption: str) -> ImageBlock:
        self.caption = caption
        return self

    def set_label(self, label: Label | str) -> ImageBlock:
        self.label = _coerce_label(label)
        return self


@dataclass
class MathBlock:
    """A display equation with optional caption and label."""

    math: Math
    caption: str | None = None
    label: Optional[Label] = None

    def __post_init__(self) -> None:
        self.label = _coerce_label(self.label)

    def set_caption(self, caption: str) -> MathBlock:
        self.caption = caption
        return self

    def set_label(self, label: Label | str) -> MathBlock:
        self.label = _coerce_label(label)
        return self


@dataclass
class Item(_InlineContainer):
    """A leaf list item."""

    inner: list[InlineContent] = field(default_factory=list)
    label: Optional[Label] = None

    def __post_init__(self) -> None:
        self.label = _coerce_label(self.label)

    @classmethod
    def text(cls, text: str) -> Item:
        return cls([Text(text)])

    @classmethod
    def plain_str(cls, text: str) -> Item:
        return cls([Span.plain(text)])

    def set_label(self, label: Label | str) -> Item:
        self.label = _coerce_label(label)
        return self


@dataclass
class List:
    """An ordered or unordered list; each entry is an :class:`Item` or a sub-list.

    Parameters
    ----------
    kind : ListKind
        Ordered or unordered
    inner : list of Item or List
        Entries in order
    label : Label or str or None, default = None
        Anchor for internal links

    """

    kind: ListKind = ListKind.UNORDERED
    inner: list[Union[Item, List]] = field(default_factory=list)
    label: Optional[Label] = None

    def __post_init__(self) -> None:
        self.label = _coerce_label(self.label)

    @classmethod
    def ordered(cls) -> List:
        return cls(ListKind.ORDERED)

    @classmethod
    def unordered(cls) -> List:
        return cls(ListKind.UNORDERED)

    def add_item(self, item: Item) -> List:
        self.inner.append(item)
        return self

    def add_item_from(self, text: str) -> List:
        return self.add_item(Item.text(text))

    def add_sub_list(self, sub_list: List) -> List:
        self.inner.append(sub_list)
        return self

    def set_label(self, label: Label | str) -> List:
        self.label = _coerce_label(label)
        return self

    def has_inner(self) -> bool:
        return bool(self.inner)


@dataclass
class Definition:
    """A term and its definition text."""

    term: list[InlineContent] = field(default_factory=list)
    text: list[InlineContent] = field(default_factory=list)
    label: Optional[Label] = None

    def __post_init__(self) -> None:
        self.label = _coerce_label(self.label)

    @classmethod
    def from_strings(cls, term: str, text: str) -> Definition:
        return cls([Text(term)], [Text(text)])


@dataclass
class DefinitionList:
    """A definition list; each entry is a :class:`Definition` or a sub-list."""

    inner: list[Union[Definition, DefinitionList]] = field(default_factory=list)
    label: Optional[Label] = None

    def __post_init__(self) -> None:
        self.label = _coerce_label(self.label)

    def add_definition(self, definition: Definition) -> DefinitionList:
        self.inner.append(definition)
        return self

    def add_definition_from(self, term: str, text: str) -> DefinitionList:
        return self.add_definition(Definition.from_strings(term, text))

    def add_sub_list(self, sub_list: DefinitionList) -> DefinitionList:
        self.inner.append(sub_list)
        return self

    def has_inner(self) -> bool:
        return bool(self.inner)


@dataclass
class Formatted:
    """Preformatted text, whitespace preserved."""

    text: str
    label: Optional[Label] = None

    def __post_init__(self) -> None:
        self.label = _coerce_label(self.label)


@dataclass
class CodeBlock:
    """A code listing with optional language, caption and label."""

    code: str
    language: str | None = None
    caption: str | None = None
    label: Optional[Label] = None

    def __post_init__(self) -> None:
        self.label = _coerce_label(self.label)

    def set_caption(self, caption: str) -> CodeBlock:
        self.caption = caption
        return self

    def set_label(self, label: Label | str) -> CodeBlock:
        self.label = _coerce_label(label)
        return self


@dataclass
class ThematicBreak:
    """A horizontal rule between sections."""


@dataclass
class Column:
    """A table column header with its alignment."""

    text: str
    alignment: Alignment = Alignment.LEFT


@dataclass
class Cell(_InlineContainer):
    """A table cell."""

    inner: list[InlineContent] = field(default_factory=list)
    label: Optional[Label] = None

    def __post_init__(self) -> None:
        self.label = _coerce_label(self.label)

    @classmethod
    def text(cls, text: str) -> Cell:
        return cls([Text(text)])

    @classmethod
    def skip(cls) -> Cell:
        """An empty cell with no content."""
        return cls()

    @classmethod
    def empty(cls) -> Cell:
        """A visibly empty cell holding a single non-breaking space."""
        return cls([Character.NON_BREAK_SPACE])


@dataclass
class Row:
    """A table body row."""

    cells: list[Cell] = field(default_factory=list)
    label: Optional[Label] = None

    def __post_init__(self) -> None:
        self.label = _coerce_label(self.label)

    @classmethod
    def from_strings(cls, *values: str) -> Row:
        return cls([Cell.text(value) for value in values])

    def add_cell(self, cell: Cell) -> Row:
        self.cells.append(cell)
        return self


@dataclass
class Table:
    """A table of columns and rows.

    Rows are not required to have as many cells as there are columns;
    writers treat missing trailing cells as empty.

    """

    columns: list[Column] = field(default_factory=list)
    rows: list[Row] = field(default_factory=list)
    caption: str | None = None
    label: Optional[Label] = None

    def __post_init__(self) -> None:
        self.label = _coerce_label(self.label)

    def add_column(self, column: Column) -> Table:
        self.columns.append(column)
        return self

    def add_row(self, row: Row) -> Table:
        self.rows.append(row)
        return self

    def set_caption(self, caption: str) -> Table:
        self.caption = caption
        return self

    def set_label(self, label: Label | str) -> Table:
        self.label = _coerce_label(label)
        return self

    def has_inner(self) -> bool:
        return bool(self.rows)


@dataclass
class Quote:
    """A block quote containing nested blocks."""

    content: list[BlockContent] = field(default_factory=list)
    label: Optional[Label] = None

    def __post_init__(self) -> None:
        self.label = _coerce_label(self.label)

    @classmethod
    def paragraph(cls, paragraph: Paragraph) -> Quote:
        return cls([paragraph])

    def add_content(self, block: BlockContent) -> Quote:
        self.content.append(block)
        return self

    def add_paragraph(self, paragraph: Paragraph) -> Quote:
        return self.add_content(paragraph)

    def add_block_quote(self, quote: Quote) -> Quote:
        return self.add_content(quote)

    def has_inner(self) -> bool:
        return bool(self.content)

    def inner(self) -> list[BlockContent]:
        return self.content


BlockContent = Union[
    Comment,
    Heading,
    ImageBlock,
    MathBlock,
    List,
    DefinitionList,
    Formatted,
    CodeBlock,
    Paragraph,
    Quote,
    Table,
    ThematicBreak,
]


# -----------------------------------------------------------------------------
# Document
# -----------------------------------------------------------------------------


@dataclass
class Document:
    """Root of the content tree.

    Parameters
    ----------
    content : list of BlockContent
        Top-level blocks in order
    metadata : list of Metadata
        Metadata entries, rendered in insertion order
    front_matter : list of FrontMatter
        Generated lists requested before the body
    abstract : list of BlockContent or None, default = None
        Optional abstract rendered before the body

    """

    content: list[BlockContent] = field(default_factory=list)
    metadata: list[Metadata] = field(default_factory=list)
    front_matter: list[FrontMatter] = field(default_factory=list)
    abstract: Optional[list[BlockContent]] = None

    def add_metadata(self, datum: Metadata) -> Document:
        self.metadata.append(datum)
        return self

    def set_title(self, title: str) -> Document:
        return self.add_metadata(Title(title))

    def add_author(self, name: str, email: str | None = None, organization: str | None = None) -> Document:
        return self.add_metadata(Author(name, email, organization))

    def add_front_matter(self, item: FrontMatter) -> Document:
        self.front_matter.append(item)
        return self

    def set_abstract(self, blocks: list[BlockContent]) -> Document:
        self.abstract = blocks
        return self

    def add_content(self, block: BlockContent) -> Document:
        self.content.append(block)
        return self

    add_comment = add_content
    add_heading = add_content
    add_image = add_content
    add_math = add_content
    add_list = add_content
    add_definition_list = add_content
    add_formatted = add_content
    add_code_block = add_content
    add_paragraph = add_content
    add_block_quote = add_content
    add_table = add_content

    def add_thematic_break(self) -> Document:
        return self.add_content(ThematicBreak())

    def has_inner(self) -> bool:
        return bool(self.content)

    def inner(self) -> list[BlockContent]:
        return self.content


def inline_text(content: list[InlineContent]) -> str:
    """Flatten inline content to its plain text.

    Link captions (or targets), image alt text and character replacements are
    included; styles are ignored.

    """
    parts: list[str] = []
    for node in content:
        if isinstance(node, (Text, Math)):
            parts.append(node.value)
        elif isinstance(node, Span):
            parts.append(inline_text(node.inner))
        elif isinstance(node, HyperLink):
            parts.append(node.caption or str(node.target))
        elif isinstance(node, Image):
            parts.append(node.link.caption or "")
        elif isinstance(node, Character):
            parts.append(_CHARACTER_TEXT[node])
        elif isinstance(node, Emoji):
            parts.append(f":{node.name}:")
        elif isinstance(node, OtherCharacter):
            parts.append(node.char)
        elif isinstance(node, LineBreak):
            parts.append(" ")
    return "".join(parts)


_CHARACTER_TEXT = {
    Character.SPACE: " ",
    Character.NON_BREAK_SPACE: " ",
    Character.HYPHEN: "-",
    Character.EM_DASH: "—",
    Character.EN_DASH: "–",
}


__all__ = [
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
]
