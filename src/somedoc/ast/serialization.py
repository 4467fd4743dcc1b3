#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/ast/serialization.py
"""JSON serialization and deserialization for documents.

This module converts a :class:`~somedoc.ast.nodes.Document` to and from a
JSON-compatible dictionary, so documents can be stored, transmitted and
rendered later by another process.

The format uses externally tagged variants: a node with fields is a single-key
object mapping the variant name to its fields, a node with a single value maps
the variant name to that value, and a node without data is a bare string.
Optional fields are omitted when unset.

    {"Heading": {"level": "Section", "inner": [{"Text": "Intro"}], "label": "intro"}}
    {"Text": "hello"}
    "ThematicBreak"

The root object carries the package version that wrote it; reading accepts a
root without one.

Examples
--------
    >>> from somedoc.ast import Document, Heading
    >>> doc = Document().add_heading(Heading.section("Intro"))
    >>> text = document_to_json(doc)
    >>> json_to_document(text) == doc
    True

"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Callable, Optional, TypeVar, Union

from somedoc.ast.labels import Label
from somedoc.ast.metadata import (
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
)
from somedoc.constants import JSON_VERSION_KEY
from somedoc.exceptions import ParsingError, ValidationError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def _variant_name(member: Enum) -> str:
    """Convert an enum member name to its tag, e.g. ``SUB_SECTION`` to ``SubSection``."""
    return "".join(part.capitalize() for part in member.name.split("_"))


def _tagged(tag: str, body: Any) -> dict[str, Any]:
    return {tag: body}


def _put_optional(result: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        result[key] = str(value) if isinstance(value, Label) else value


# =============================================================================
# Serialization
# =============================================================================


def _metadata_to_dict(datum: Metadata) -> Any:
    if isinstance(datum, Author):
        body: dict[str, Any] = {"name": datum.name}
        _put_optional(body, "email", datum.email)
        _put_optional(body, "organization", datum.organization)
        return _tagged("Author", body)
    if isinstance(datum, SiteClass):
        body = {"name_or_path": datum.name_or_path}
        if datum.options:
            body["options"] = list(datum.options)
        return _tagged("Class", body)
    if isinstance(datum, Copyright):
        body = {"year": datum.year}
        _put_optional(body, "organization", datum.organization)
        _put_optional(body, "comment", datum.comment)
        return _tagged("Copyright", body)
    if isinstance(datum, Keywords):
        return _tagged("Keywords", list(datum.values))
    if isinstance(datum, Other):
        return _tagged("Other", {"name": datum.name, "value": datum.value})
    if isinstance(datum, (Date, Revision, Status, Title)):
        return _tagged(type(datum).__name__, datum.value)
    raise TypeError(f"Unknown metadata type: {type(datum).__name__}")


def _link_body(link: HyperLink) -> dict[str, Any]:
    target = _tagged("Internal", str(link.target)) if link.is_internal else _tagged("External", link.target)
    body: dict[str, Any] = {"target": target}
    _put_optional(body, "caption", link.caption)
    _put_optional(body, "title", link.title)
    return body


def _style_to_value(style: SpanStyleType) -> Any:
    if isinstance(style, Sized):
        return _tagged("Sized", _variant_name(style.size))
    return _variant_name(style)


def _inline_to_dict(node: InlineContent) -> Any:
    if isinstance(node, Text):
        return _tagged("Text", node.value)
    if isinstance(node, Math):
        return _tagged("Math", node.value)
    if isinstance(node, HyperLink):
        return _tagged("HyperLink", _link_body(node))
    if isinstance(node, Image):
        return _tagged("Image", {"link": _link_body(node.link)})
    if isinstance(node, Character):
        return _tagged("Character", _variant_name(node))
    if isinstance(node, Emoji):
        return _tagged("Emoji", node.name)
    if isinstance(node, OtherCharacter):
        return _tagged("OtherCharacter", node.char)
    if isinstance(node, LineBreak):
        return "LineBreak"
    if isinstance(node, Span):
        return _tagged(
            "Span",
            {"inner": _inlines_to_list(node.inner), "styles": [_style_to_value(style) for style in node.styles]},
        )
    raise TypeError(f"Unknown inline content type: {type(node).__name__}")


def _inlines_to_list(content: list[InlineContent]) -> list[Any]:
    return [_inline_to_dict(node) for node in content]


def _list_to_dict(list_block: List) -> dict[str, Any]:
    entries: list[Any] = []
    for entry in list_block.inner:
        if isinstance(entry, List):
            entries.append(_tagged("List", _list_to_dict(entry)))
        else:
            item: dict[str, Any] = {"inner": _inlines_to_list(entry.inner)}
            _put_optional(item, "label", entry.label)
            entries.append(_tagged("Item", item))
    body: dict[str, Any] = {"kind": _variant_name(list_block.kind), "inner": entries}
    _put_optional(body, "label", list_block.label)
    return body


def _definition_list_to_dict(definition_list: DefinitionList) -> dict[str, Any]:
    entries: list[Any] = []
    for entry in definition_list.inner:
        if isinstance(entry, DefinitionList):
            entries.append(_tagged("DefinitionList", _definition_list_to_dict(entry)))
        else:
            definition: dict[str, Any] = {"term": _inlines_to_list(entry.term), "text": _inlines_to_list(entry.text)}
            _put_optional(definition, "label", entry.label)
            entries.append(_tagged("Definition", definition))
    body: dict[str, Any] = {"inner": entries}
    _put_optional(body, "label", definition_list.label)
    return body


def _table_to_dict(table: Table) -> dict[str, Any]:
    rows: list[dict[str, Any]] = []
    for row in table.rows:
        cells: list[dict[str, Any]] = []
        for cell in row.cells:
            cell_body: dict[str, Any] = {"inner": _inlines_to_list(cell.inner)}
            _put_optional(cell_body, "label", cell.label)
            cells.append(cell_body)
        row_body: dict[str, Any] = {"cells": cells}
        _put_optional(row_body, "label", row.label)
        rows.append(row_body)
    body: dict[str, Any] = {
        "columns": [{"text": column.text, "alignment": _variant_name(column.alignment)} for column in table.columns],
        "rows": rows,
    }
    _put_optional(body, "caption", table.caption)
    _put_optional(body, "label", table.label)
    return body


def _block_to_dict(block: BlockContent) -> Any:
    if isinstance(block, ThematicBreak):
        return "ThematicBreak"
    if isinstance(block, Comment):
        return _tagged("Comment", block.text)

    body: dict[str, Any]
    if isinstance(block, Heading):
        body = {"level": _variant_name(block.level), "inner": _inlines_to_list(block.inner)}
    elif isinstance(block, Paragraph):
        body = {"inner": _inlines_to_list(block.inner)}
        if block.alignment is not None:
            body["alignment"] = _variant_name(block.alignment)
    elif isinstance(block, ImageBlock):
        body = {"image": {"link": _link_body(block.image.link)}}
        _put_optional(body, "caption", block.caption)
    elif isinstance(block, MathBlock):
        body = {"math": block.math.value}
        _put_optional(body, "caption", block.caption)
    elif isinstance(block, List):
        return _tagged("List", _list_to_dict(block))
    elif isinstance(block, DefinitionList):
        return _tagged("DefinitionList", _definition_list_to_dict(block))
    elif isinstance(block, Formatted):
        body = {"text": block.text}
    elif isinstance(block, CodeBlock):
        body = {"code": block.code}
        _put_optional(body, "language", block.language)
        _put_optional(body, "caption", block.caption)
    elif isinstance(block, Quote):
        body = {"content": [_block_to_dict(child) for child in block.content]}
    elif isinstance(block, Table):
        return _tagged("Table", _table_to_dict(block))
    else:
        raise TypeError(f"Unknown block content type: {type(block).__name__}")

    _put_optional(body, "label", block.label)
    return _tagged(type(block).__name__, body)


def document_to_dict(document: Document) -> dict[str, Any]:
    """Convert a document to a JSON-compatible dictionary.

    Parameters
    ----------
    document : Document
        The document to serialize

    Returns
    -------
    dict
        Root object with ``version``, ``metadata`` and ``front_matter``
        (both omitted when empty), ``abstract`` (omitted when unset) and
        ``content``

    Raises
    ------
    TypeError
        If the tree holds an object that is not a document node

    """
    from somedoc import __version__

    result: dict[str, Any] = {JSON_VERSION_KEY: __version__}
    if document.metadata:
        result["metadata"] = [_metadata_to_dict(datum) for datum in document.metadata]
    if document.front_matter:
        result["front_matter"] = [_variant_name(item) for item in document.front_matter]
    if document.abstract is not None:
        result["abstract"] = [_block_to_dict(block) for block in document.abstract]
    result["content"] = [_block_to_dict(block) for block in document.content]
    return result


def document_to_json(document: Document, indent: Optional[int] = None) -> str:
    """Serialize a document to a JSON string.

    Parameters
    ----------
    document : Document
        The document to serialize
    indent : int or None, default = None
        Indentation for pretty-printing; None gives compact output

    Returns
    -------
    str
        JSON text

    """
    return json.dumps(document_to_dict(document), indent=indent, ensure_ascii=False)


# =============================================================================
# Deserialization
# =============================================================================


def _fail(message: str, stage: str = "structure") -> ParsingError:
    return ParsingError(message, parsing_stage=stage)


def _untag(value: Any, where: str) -> tuple[str, Any]:
    """Split an externally tagged value into its tag and body."""
    if isinstance(value, str):
        return value, None
    if isinstance(value, dict) and len(value) == 1:
        tag, body = next(iter(value.items()))
        return tag, body
    raise _fail(f"Expected a tagged {where} value, got {value!r}")


def _expect(value: Any, expected: type, where: str) -> Any:
    if not isinstance(value, expected):
        raise _fail(f"Expected {expected.__name__} for {where}, got {type(value).__name__}")
    return value


def _required(body: Any, key: str, where: str) -> Any:
    _expect(body, dict, where)
    if key not in body:
        raise _fail(f"Missing field '{key}' in {where}")
    return body[key]


def _optional_str(body: dict[str, Any], key: str, where: str) -> Optional[str]:
    value = body.get(key)
    if value is not None:
        _expect(value, str, f"{where}.{key}")
    return value


def _optional_label(body: dict[str, Any], where: str) -> Optional[Label]:
    value = _optional_str(body, "label", where)
    return Label(value) if value is not None else None


def _enum_from_name(enum_type: type[E], name: Any, where: str) -> E:
    _expect(name, str, where)
    for member in enum_type:
        if _variant_name(member) == name:
            return member
    raise _fail(f"Unknown {enum_type.__name__} value '{name}' in {where}")


def _metadata_from_dict(value: Any) -> Metadata:
    tag, body = _untag(value, "metadata")
    if tag == "Author":
        return Author(
            _expect(_required(body, "name", "Author"), str, "Author.name"),
            _optional_str(body, "email", "Author"),
            _optional_str(body, "organization", "Author"),
        )
    if tag == "Class":
        options = _expect(body.get("options", []), list, "Class.options")
        return SiteClass(_expect(_required(body, "name_or_path", "Class"), str, "Class.name_or_path"), list(options))
    if tag == "Copyright":
        return Copyright(
            _expect(_required(body, "year", "Copyright"), int, "Copyright.year"),
            _optional_str(body, "organization", "Copyright"),
            _optional_str(body, "comment", "Copyright"),
        )
    if tag == "Keywords":
        return Keywords(list(_expect(body, list, "Keywords")))
    if tag == "Other":
        return Other(
            _expect(_required(body, "name", "Other"), str, "Other.name"),
            _expect(_required(body, "value", "Other"), str, "Other.value"),
        )
    simple: dict[str, Callable[[str], Metadata]] = {
        "Date": Date,
        "Revision": Revision,
        "Status": Status,
        "Title": Title,
    }
    if tag in simple:
        return simple[tag](_expect(body, str, tag))
    raise _fail(f"Unknown metadata tag '{tag}'")


def _link_from_body(body: Any, where: str) -> HyperLink:
    target_tag, target = _untag(_required(body, "target", where), f"{where}.target")
    _expect(target, str, f"{where}.target")
    link_target: Union[str, Label]
    if target_tag == "External":
        link_target = target
    elif target_tag == "Internal":
        link_target = Label(target)
    else:
        raise _fail(f"Unknown link target tag '{target_tag}' in {where}")
    return HyperLink(link_target, _optional_str(body, "caption", where), _optional_str(body, "title", where))


def _style_from_value(value: Any) -> SpanStyleType:
    if isinstance(value, dict):
        tag, body = _untag(value, "span style")
        if tag != "Sized":
            raise _fail(f"Unknown span style tag '{tag}'")
        return Sized(_enum_from_name(Size, body, "Sized"))
    return _enum_from_name(SpanStyle, value, "Span.styles")


def _inline_from_dict(value: Any) -> InlineContent:
    tag, body = _untag(value, "inline")
    if tag == "Text":
        return Text(_expect(body, str, "Text"))
    if tag == "Math":
        return Math(_expect(body, str, "Math"))
    if tag == "HyperLink":
        return _link_from_body(body, "HyperLink")
    if tag == "Image":
        return Image(_link_from_body(_required(body, "link", "Image"), "Image.link"))
    if tag == "Character":
        return _enum_from_name(Character, body, "Character")
    if tag == "Emoji":
        return Emoji(_expect(body, str, "Emoji"))
    if tag == "OtherCharacter":
        return OtherCharacter(_expect(body, str, "OtherCharacter"))
    if tag == "LineBreak":
        return LineBreak()
    if tag == "Span":
        styles = _expect(_required(body, "styles", "Span"), list, "Span.styles")
        return Span(_inlines_from_list(_required(body, "inner", "Span")), [_style_from_value(s) for s in styles])
    raise _fail(f"Unknown inline tag '{tag}'")


def _inlines_from_list(value: Any) -> list[InlineContent]:
    return [_inline_from_dict(node) for node in _expect(value, list, "inline content")]


def _list_from_body(body: Any) -> List:
    entries: list[Union[Item, List]] = []
    for entry in _expect(_required(body, "inner", "List"), list, "List.inner"):
        tag, entry_body = _untag(entry, "list entry")
        if tag == "List":
            entries.append(_list_from_body(entry_body))
        elif tag == "Item":
            inner = _inlines_from_list(_required(entry_body, "inner", "Item"))
            entries.append(Item(inner, _optional_label(entry_body, "Item")))
        else:
            raise _fail(f"Unknown list entry tag '{tag}'")
    kind = _enum_from_name(ListKind, _required(body, "kind", "List"), "List.kind")
    return List(kind, entries, _optional_label(body, "List"))


def _definition_list_from_body(body: Any) -> DefinitionList:
    entries: list[Union[Definition, DefinitionList]] = []
    for entry in _expect(_required(body, "inner", "DefinitionList"), list, "DefinitionList.inner"):
        tag, entry_body = _untag(entry, "definition list entry")
        if tag == "DefinitionList":
            entries.append(_definition_list_from_body(entry_body))
        elif tag == "Definition":
            entries.append(
                Definition(
                    _inlines_from_list(_required(entry_body, "term", "Definition")),
                    _inlines_from_list(_required(entry_body, "text", "Definition")),
                    _optional_label(entry_body, "Definition"),
                )
            )
        else:
            raise _fail(f"Unknown definition list entry tag '{tag}'")
    return DefinitionList(entries, _optional_label(body, "DefinitionList"))


def _table_from_body(body: Any) -> Table:
    columns = [
        Column(
            _expect(_required(column, "text", "Column"), str, "Column.text"),
            _enum_from_name(Alignment, column.get("alignment", "Left"), "Column.alignment"),
        )
        for column in _expect(_required(body, "columns", "Table"), list, "Table.columns")
    ]
    rows = []
    for row in _expect(_required(body, "rows", "Table"), list, "Table.rows"):
        cells = [
            Cell(_inlines_from_list(_required(cell, "inner", "Cell")), _optional_label(cell, "Cell"))
            for cell in _expect(_required(row, "cells", "Row"), list, "Row.cells")
        ]
        rows.append(Row(cells, _optional_label(row, "Row")))
    return Table(columns, rows, _optional_str(body, "caption", "Table"), _optional_label(body, "Table"))


def _block_from_dict(value: Any) -> BlockContent:
    tag, body = _untag(value, "block")
    if tag == "ThematicBreak":
        return ThematicBreak()
    if tag == "Comment":
        return Comment(_expect(body, str, "Comment"))
    if tag == "Heading":
        return Heading(
            _enum_from_name(HeadingLevel, _required(body, "level", "Heading"), "Heading.level"),
            _inlines_from_list(_required(body, "inner", "Heading")),
            _optional_label(body, "Heading"),
        )
    if tag == "Paragraph":
        alignment = body.get("alignment") if isinstance(body, dict) else None
        return Paragraph(
            _inlines_from_list(_required(body, "inner", "Paragraph")),
            _enum_from_name(Alignment, alignment, "Paragraph.alignment") if alignment is not None else None,
            _optional_label(body, "Paragraph"),
        )
    if tag == "ImageBlock":
        image = _required(body, "image", "ImageBlock")
        return ImageBlock(
            Image(_link_from_body(_required(image, "link", "ImageBlock.image"), "ImageBlock.image.link")),
            _optional_str(body, "caption", "ImageBlock"),
            _optional_label(body, "ImageBlock"),
        )
    if tag == "MathBlock":
        return MathBlock(
            Math(_expect(_required(body, "math", "MathBlock"), str, "MathBlock.math")),
            _optional_str(body, "caption", "MathBlock"),
            _optional_label(body, "MathBlock"),
        )
    if tag == "List":
        return _list_from_body(body)
    if tag == "DefinitionList":
        return _definition_list_from_body(body)
    if tag == "Formatted":
        text = _expect(_required(body, "text", "Formatted"), str, "Formatted.text")
        return Formatted(text, _optional_label(body, "Formatted"))
    if tag == "CodeBlock":
        return CodeBlock(
            _expect(_required(body, "code", "CodeBlock"), str, "CodeBlock.code"),
            _optional_str(body, "language", "CodeBlock"),
            _optional_str(body, "caption", "CodeBlock"),
            _optional_label(body, "CodeBlock"),
        )
    if tag == "Quote":
        content = _expect(_required(body, "content", "Quote"), list, "Quote.content")
        return Quote([_block_from_dict(child) for child in content], _optional_label(body, "Quote"))
    if tag == "Table":
        return _table_from_body(body)
    raise _fail(f"Unknown block tag '{tag}'")


def dict_to_document(data: dict[str, Any]) -> Document:
    """Rebuild a document from its dictionary form.

    Parameters
    ----------
    data : dict
        Root object as produced by :func:`document_to_dict`

    Returns
    -------
    Document
        The reconstructed document

    Raises
    ------
    ParsingError
        If the data has an unknown tag, a missing field, a value of the wrong
        type, or an invalid label or emoji name

    """
    _expect(data, dict, "document")
    version = data.get(JSON_VERSION_KEY)
    if version is None:
        logger.debug("Document JSON has no version, reading as current format")

    try:
        document = Document()
        for datum in _expect(data.get("metadata", []), list, "metadata"):
            document.add_metadata(_metadata_from_dict(datum))
        for item in _expect(data.get("front_matter", []), list, "front_matter"):
            document.add_front_matter(_enum_from_name(FrontMatter, item, "front_matter"))
        if "abstract" in data:
            document.set_abstract([_block_from_dict(block) for block in _expect(data["abstract"], list, "abstract")])
        for block in _expect(_required(data, "content", "document"), list, "content"):
            document.add_content(_block_from_dict(block))
    except ValidationError as e:
        raise ParsingError(f"Invalid value in document JSON: {e}", parsing_stage="validation", original_error=e) from e
    return document


def json_to_document(text: str) -> Document:
    """Deserialize a document from a JSON string.

    Parameters
    ----------
    text : str
        JSON text as produced by :func:`document_to_json`

    Returns
    -------
    Document
        The reconstructed document

    Raises
    ------
    ParsingError
        If the text is not valid JSON or does not describe a document

    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Malformed document JSON: {e.msg}", parsing_stage="decode", original_error=e) from e
    return dict_to_document(data)


__all__ = [
    "dict_to_document",
    "document_to_dict",
    "document_to_json",
    "json_to_document",
]
