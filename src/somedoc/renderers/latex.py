#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/renderers/latex.py
r"""LaTeX rendering from the document model.

This module provides the LatexRenderer class which writes a complete LaTeX
source file: a preamble (document class, packages, command definitions and
title block) followed by the document body. Metadata is collected while the
walk is in the metadata section and flushed as part of the preamble when the
body starts.

The preamble is a list of :data:`PreambleItem` values. The default list comes
from :class:`~somedoc.options.latex.LatexRendererOptions`; callers may pass
their own list, typically the default extended with extra items:

    >>> preamble = default_preamble(LatexRendererOptions())
    >>> preamble.append(Package("fontenc", ("T1",)))
    >>> renderer = LatexRenderer(preamble=preamble)

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from somedoc.ast.labels import Label
from somedoc.ast.metadata import Author, Keywords, Metadata, SiteClass
from somedoc.ast.nodes import (
    Alignment,
    Character,
    CodeBlock,
    Column,
    Document,
    Emoji,
    Formatted,
    FrontMatter,
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
from somedoc.constants import LATEX_THEMATIC_BREAK_BODY, LATEX_THEMATIC_BREAK_COMMAND
from somedoc.options.latex import LatexRendererOptions
from somedoc.renderers.base import BaseRenderer
from somedoc.utils.escape import escape_latex

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Preamble
# -----------------------------------------------------------------------------


def _bracketed(values: Sequence[str]) -> str:
    return f"[{', '.join(values)}]" if values else ""


@dataclass(frozen=True)
class DocumentClass:
    r"""The ``\documentclass`` declaration; only the first one in a preamble is used."""

    name: str
    options: tuple[str, ...] = ()

    def to_latex(self) -> str:
        return f"\\documentclass{_bracketed(self.options)}{{{self.name}}}"


@dataclass(frozen=True)
class Package:
    r"""A package loaded with ``\usepackage``."""

    name: str
    options: tuple[str, ...] = ()

    def to_latex(self) -> str:
        return f"\\usepackage{_bracketed(self.options)}{{{self.name}}}"


@dataclass(frozen=True)
class Command:
    r"""A ``\newcommand`` (or ``\renewcommand``) definition."""

    name: str
    define: str
    arg_count: int = 0
    renew: bool = False

    def to_latex(self) -> str:
        command = "renewcommand" if self.renew else "newcommand"
        args = f"[{self.arg_count}]" if self.arg_count > 0 else ""
        return f"\\{command}{{\\{self.name}}}{args}{{{self.define}}}"


@dataclass(frozen=True)
class Environment:
    r"""A ``\newenvironment`` (or ``\renewenvironment``) definition."""

    name: str
    before: str
    after: str
    arg_count: int = 0
    default_values: tuple[str, ...] = ()
    renew: bool = False

    def to_latex(self) -> str:
        command = "renewenvironment" if self.renew else "newenvironment"
        args = f"[{self.arg_count}]" if self.arg_count > 0 else ""
        return (
            f"\\{command}{{{self.name}}}{args}{_bracketed(self.default_values)}\n"
            f"  {{{self.before}}}\n"
            f"  {{{self.after}}}"
        )


PreambleItem = Union[DocumentClass, Package, Command, Environment]


def default_preamble(options: LatexRendererOptions) -> list[PreambleItem]:
    """Build the preamble items described by ``options``.

    The list always ends with the ``thematicbreak`` command the writer uses
    for thematic breaks.
    """
    items: list[PreambleItem] = [DocumentClass(options.document_class, options.class_options)]
    items.extend(Package(name) for name in options.packages)
    items.append(Command(LATEX_THEMATIC_BREAK_COMMAND, LATEX_THEMATIC_BREAK_BODY))
    return items


# -----------------------------------------------------------------------------
# Lookup tables
# -----------------------------------------------------------------------------

_SECTION_COMMANDS: dict[HeadingLevel, str] = {
    HeadingLevel.TITLE: "part",
    HeadingLevel.SECTION: "section",
    HeadingLevel.SUB_SECTION: "subsection",
    HeadingLevel.SUB_SUB_SECTION: "subsubsection",
    HeadingLevel.SUB_SUB_SUB_SECTION: "paragraph",
    HeadingLevel.SUB_SUB_SUB_SUB_SECTION: "subparagraph",
    HeadingLevel.SUB_SUB_SUB_SUB_SUB_SECTION: "subparagraph",
    HeadingLevel.PARAGRAPH: "subparagraph",
}

_LIST_ENVIRONMENTS: dict[ListKind, str] = {
    ListKind.ORDERED: "enumerate",
    ListKind.UNORDERED: "itemize",
}

_ALIGNMENT_ENVIRONMENTS: dict[Alignment, str] = {
    Alignment.LEFT: "flushleft",
    Alignment.RIGHT: "flushright",
    Alignment.CENTERED: "center",
}

_COLUMN_SPEC: dict[Alignment, str] = {
    Alignment.LEFT: "l",
    Alignment.JUSTIFIED: "l",
    Alignment.RIGHT: "r",
    Alignment.CENTERED: "c",
}

_FRONT_MATTER_COMMANDS: dict[FrontMatter, str] = {
    FrontMatter.TABLE_OF_CONTENTS: "tableofcontents",
    FrontMatter.TABLE_OF_FIGURES: "listoffigures",
    FrontMatter.TABLE_OF_TABLES: "listoftables",
    FrontMatter.TABLE_OF_LISTINGS: "lstlistoflistings",
}

_SPAN_COMMANDS: dict[SpanStyle, str] = {
    SpanStyle.ITALIC: "\\textit{",
    SpanStyle.SLANTED: "\\textsl{",
    SpanStyle.BOLD: "\\textbf{",
    SpanStyle.MONO: "\\texttt{",
    SpanStyle.CODE: "\\texttt{",
    SpanStyle.STRIKETHROUGH: "\\sout{",
    SpanStyle.UNDERLINE: "\\underline{",
    SpanStyle.SMALL_CAPS: "\\textsc{",
    SpanStyle.SUPERSCRIPT: "\\textsuperscript{",
    SpanStyle.SUBSCRIPT: "\\textsubscript{",
}

_SIZE_COMMANDS: dict[Size, str] = {
    Size.LARGEST: "{\\LARGE ",
    Size.LARGER: "{\\Large ",
    Size.LARGE: "{\\large ",
    Size.NORMAL: "{\\normalsize ",
    Size.SMALL: "{\\small ",
    Size.SMALLER: "{\\footnotesize ",
    Size.SMALLEST: "{\\scriptsize ",
}

_CHARACTERS: dict[Character, str] = {
    Character.SPACE: " ",
    Character.NON_BREAK_SPACE: "~",
    Character.HYPHEN: "-",
    Character.EN_DASH: "--",
    Character.EM_DASH: "---",
}

_TITLE_BLOCK_KEYS = ("title", "author", "date")


def _escape_url(url: str) -> str:
    return url.replace("\\", "/").replace("%", "\\%").replace("#", "\\#")


class LatexRenderer(DocumentVisitor, BlockVisitor, TableVisitor, InlineVisitor, BaseRenderer):
    r"""Render a document to LaTeX source.

    Parameters
    ----------
    options : LatexRendererOptions or None, default = None
        LaTeX rendering options
    preamble : sequence of PreambleItem or None, default = None
        Preamble to write; when None it is built from ``options`` with
        :func:`default_preamble`. A ``class`` metadatum in the document
        replaces the preamble's document class.

    Notes
    -----
    Only ``title``, ``author`` and ``date`` metadata have LaTeX commands;
    any other metadata is written as ``%`` comments at the end of the
    preamble.

    """

    def __init__(
        self, options: LatexRendererOptions | None = None, preamble: Optional[Sequence[PreambleItem]] = None
    ):
        """Initialize the LaTeX renderer with options."""
        BaseRenderer._validate_options_type(options, LatexRendererOptions, "latex")
        options = options or LatexRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: LatexRendererOptions = options
        self.preamble: list[PreambleItem] = list(preamble) if preamble is not None else default_preamble(options)
        self._reset_state()

    def _reset_state(self) -> None:
        self._output: list[str] = []
        self._indent_level: int = 0
        self._metadata: dict[str, list[str]] = {}
        self._document_class: Optional[DocumentClass] = None
        self._front_matter: list[FrontMatter] = []
        self._in_document: bool = False
        self._block_marks: list[int] = []
        self._definition_label: Optional[Label] = None
        self._list_marks: list[int] = []
        self._item_counts: list[int] = []
        self._paragraph_environment: Optional[str] = None
        self._span_stack: list[list[str]] = []
        self._table_head: list[Column] = []
        self._tabular_open: bool = False
        self._tabular_placeholder: Optional[int] = None
        self._table_width: int = 0

    def render_to_string(self, doc: Document) -> str:
        """Render a document to a LaTeX string.

        Parameters
        ----------
        doc : Document
            The document to render

        Returns
        -------
        str
            LaTeX source

        """
        self._reset_state()
        walk_document(doc, self)
        result = "".join(self._output)
        self._output.clear()
        return result

    # -------------------------------------------------------------------------
    # Output helpers
    # -------------------------------------------------------------------------

    def _escape(self, text: str) -> str:
        return escape_latex(text) if self.options.escape_special else text

    def _begin_line(self) -> None:
        self._output.append(" " * (self._indent_level * self.options.indent_width))

    def _line(self, text: str) -> None:
        self._begin_line()
        self._output.append(text + "\n")

    def _begin_env(self, env: str, args: Sequence[str] = (), label: Optional[Label] = None) -> None:
        prefix = f"\\label{{{label}}}" if label is not None else ""
        self._line(f"{prefix}\\begin{{{env}}}{_bracketed(args)}")
        self._indent_level += 1

    def _end_env(self, env: str) -> None:
        self._indent_level -= 1
        self._line(f"\\end{{{env}}}")

    def _raw(self, text: str) -> None:
        """Write verbatim content unindented, ending with a newline."""
        self._output.append(text if text.endswith("\n") else text + "\n")

    @staticmethod
    def _label(label: Optional[Label]) -> str:
        return f"\\label{{{label}}}" if label is not None else ""

    # -------------------------------------------------------------------------
    # DocumentVisitor
    # -------------------------------------------------------------------------

    def metadata(self, datum: Metadata) -> None:
        if isinstance(datum, SiteClass):
            self._document_class = DocumentClass(datum.name_or_path, tuple(datum.options))
        elif isinstance(datum, Author):
            parts = [datum.name, datum.email, datum.organization]
            author = " \\\\ ".join(self._escape(part) for part in parts if part)
            self._metadata.setdefault("author", []).append(author)
        elif isinstance(datum, Keywords):
            self._metadata.setdefault("keywords", []).extend(self._escape(value) for value in datum.values)
        elif datum.key in ("title", "date", "copyright", "revision", "status"):
            self._metadata[datum.key] = [self._escape(datum.value_string())]
        else:
            self._metadata.setdefault(datum.key, []).append(self._escape(datum.value_string()))

    def front_matter(self, items: Sequence[FrontMatter]) -> None:
        self._front_matter = list(items)

    def block_visitor(self) -> Optional[BlockVisitor]:
        if not self._in_document:
            self._write_preamble()
        return self

    def _write_preamble(self) -> None:
        document_class = self._document_class
        if document_class is None:
            document_class = next(
                (item for item in self.preamble if isinstance(item, DocumentClass)),
                DocumentClass(self.options.document_class),
            )
        self._output.append(document_class.to_latex() + "\n\n")

        for item in self.preamble:
            if not isinstance(item, DocumentClass):
                self._output.append(item.to_latex() + "\n")
        self._output.append("\n")

        if "title" in self._metadata:
            self._output.append(f"\\title{{{self._metadata['title'][0]}}}\n")
        if "author" in self._metadata:
            authors = " \\and ".join(self._metadata["author"])
            self._output.append(f"\\author{{{authors}}}\n")
        if "date" in self._metadata:
            self._output.append(f"\\date{{{self._metadata['date'][0]}}}\n")
        for key, values in self._metadata.items():
            if key not in _TITLE_BLOCK_KEYS:
                self._output.append(f"% {key}: {', '.join(values)}\n")
        if self._metadata:
            self._output.append("\n")

        self._output.append("\\begin{document}\n\n")
        self._in_document = True

        if "title" in self._metadata:
            self._output.append("\\maketitle\n\n")

        for item in self._front_matter:
            command = _FRONT_MATTER_COMMANDS.get(item)
            if command is None:
                logger.debug(f"Front matter {item.value} has no LaTeX command, skipped")
                continue
            self._output.append(f"\\{command}\n\n")

    def start_abstract(self) -> None:
        self._begin_env("abstract")

    def end_abstract(self) -> None:
        self._end_env("abstract")

    def end_document(self) -> None:
        if self._in_document:
            self._output.append("\\end{document}\n")
            self._in_document = False

    # -------------------------------------------------------------------------
    # BlockVisitor
    # -------------------------------------------------------------------------

    def start_block(self) -> None:
        self._block_marks.append(len(self._output))

    def end_block(self) -> None:
        mark = self._block_marks.pop()
        if len(self._output) > mark:
            self._output.append("\n")

    def comment(self, value: str) -> None:
        for line in value.split("\n"):
            self._line(f"%% {line}")

    def start_heading(self, level: HeadingLevel, label: Optional[Label]) -> None:
        self._begin_line()
        self._output.append(f"\\{_SECTION_COMMANDS[level]}{{")

    def end_heading(self, level: HeadingLevel, label: Optional[Label]) -> None:
        self._output.append("}" + self._label(label) + "\n")

    def image_block(self, value: ImageBlock) -> None:
        self._begin_env("figure", ["h!bt"])
        self._line("\\centering")
        self._begin_line()
        self.image(value.image)
        self._output.append("\n")
        if value.caption:
            self._line(f"\\caption{{{self._escape(value.caption)}}}")
        if value.label is not None:
            self._line(self._label(value.label))
        self._end_env("figure")

    def math_block(self, value: MathBlock) -> None:
        self._begin_env("equation")
        for line in value.math.value.strip("\n").split("\n"):
            self._line(line)
        if value.label is not None:
            self._line(self._label(value.label))
        self._end_env("equation")

    def _start_item_list(self, env: str, label: Optional[Label]) -> None:
        if self._item_counts:
            if self._item_counts[-1] == 0:
                # A nested list cannot open its parent list.
                self._line("\\item")
            self._item_counts[-1] += 1
        self._list_marks.append(len(self._output))
        self._item_counts.append(0)
        self._begin_env(env, label=label)

    def _end_item_list(self, env: str) -> None:
        mark = self._list_marks.pop()
        if self._item_counts.pop() == 0:
            logger.debug(f"Empty {env} environment skipped")
            del self._output[mark:]
            self._indent_level -= 1
            return
        self._end_env(env)

    def start_list(self, kind: ListKind, label: Optional[Label]) -> None:
        self._start_item_list(_LIST_ENVIRONMENTS[kind], label)

    def end_list(self, kind: ListKind, label: Optional[Label]) -> None:
        self._end_item_list(_LIST_ENVIRONMENTS[kind])

    def start_list_item(self, label: Optional[Label]) -> None:
        self._item_counts[-1] += 1
        self._begin_line()
        self._output.append("\\item" + self._label(label) + " ")

    def end_list_item(self, label: Optional[Label]) -> None:
        self._output.append("\n")

    def start_definition_list(self, label: Optional[Label]) -> None:
        self._start_item_list("description", label)

    def end_definition_list(self, label: Optional[Label]) -> None:
        self._end_item_list("description")

    def start_definition(self, label: Optional[Label]) -> None:
        self._item_counts[-1] += 1
        self._definition_label = label
        self._begin_line()
        self._output.append("\\item")

    def start_definition_list_term(self) -> None:
        self._output.append("[{")

    def end_definition_list_term(self) -> None:
        self._output.append("}]")

    def start_definition_list_text(self) -> None:
        self._output.append(self._label(self._definition_label) + " ")
        self._definition_label = None

    def end_definition_list_text(self) -> None:
        self._output.append("\n")

    def formatted(self, value: Formatted) -> None:
        self._begin_env("verbatim", label=value.label)
        self._raw(value.text)
        self._end_env("verbatim")

    def code_block(self, value: CodeBlock) -> None:
        args: list[str] = []
        if value.language:
            args.append(f"language={value.language}")
        if value.caption:
            args.append(f"caption={{{value.caption}}}")
        if value.label is not None:
            args.append(f"label={value.label}")
        self._begin_env("lstlisting", args)
        self._raw(value.code)
        self._end_env("lstlisting")

    def start_paragraph(self, alignment: Optional[Alignment], label: Optional[Label]) -> None:
        self._paragraph_environment = _ALIGNMENT_ENVIRONMENTS.get(alignment) if alignment is not None else None
        if self._paragraph_environment is not None:
            self._begin_env(self._paragraph_environment)
        self._begin_line()
        self._output.append(self._label(label))

    def end_paragraph(self, alignment: Optional[Alignment], label: Optional[Label]) -> None:
        self._output.append("\n")
        if self._paragraph_environment is not None:
            self._end_env(self._paragraph_environment)
            self._paragraph_environment = None

    def start_quote(self, label: Optional[Label]) -> None:
        self._begin_env("displayquote", label=label)

    def end_quote(self, label: Optional[Label]) -> None:
        self._end_env("displayquote")

    def thematic_break(self) -> None:
        self._line(f"\\{LATEX_THEMATIC_BREAK_COMMAND}")

    def table_visitor(self) -> Optional[TableVisitor]:
        return self

    def inline_visitor(self) -> Optional[InlineVisitor]:
        return self

    # -------------------------------------------------------------------------
    # TableVisitor
    # -------------------------------------------------------------------------

    def _open_tabular(self) -> None:
        # The column spec is filled in by end_table once the widest row is known.
        self._tabular_placeholder = len(self._output)
        self._output.append("")
        self._indent_level += 1
        self._tabular_open = True

    def _tabular_opening(self, column_spec: Sequence[str]) -> str:
        indent = " " * ((self._indent_level - 1) * self.options.indent_width)
        return f"{indent}\\begin{{tabular}}{{| {' | '.join(column_spec)} |}}\n{indent}  \\hline\n"

    def start_table(self, caption: Optional[str], label: Optional[Label]) -> None:
        self._table_head = []
        self._table_width = 0
        self._tabular_open = False
        self._tabular_placeholder = None
        self._begin_env("table", ["h!bt"])
        self._line("\\centering")

    def table_header_cell(self, column: Column, index: int) -> None:
        self._table_head.append(column)

    def end_table_header_row(self) -> None:
        self._open_tabular()
        self._line(" & ".join(self._escape(column.text) for column in self._table_head) + " \\\\")
        self._line("\\hline\\hline")

    def start_table_row(self, index: int) -> None:
        if not self._tabular_open:
            self._open_tabular()
        self._begin_line()

    def start_table_cell(self, index: int, label: Optional[Label]) -> None:
        if index > 0:
            self._output.append(" & ")
        self._output.append(self._label(label))
        self._table_width = max(self._table_width, index + 1)

    def end_table_row(self, index: int) -> None:
        self._output.append(" \\\\\n")

    def end_table(self, caption: Optional[str], label: Optional[Label]) -> None:
        if self._tabular_open:
            column_spec = [_COLUMN_SPEC[column.alignment] for column in self._table_head]
            width = max(self._table_width, len(column_spec), 1)
            column_spec.extend(["l"] * (width - len(column_spec)))
            if self._tabular_placeholder is not None:
                self._output[self._tabular_placeholder] = self._tabular_opening(column_spec)
                self._tabular_placeholder = None
            self._line("\\hline")
            self._end_env("tabular")
            self._tabular_open = False
        if caption:
            self._line(f"\\caption{{{self._escape(caption)}}}")
        if label is not None:
            self._line(self._label(label))
        self._end_env("table")

    # -------------------------------------------------------------------------
    # InlineVisitor
    # -------------------------------------------------------------------------

    def link(self, value: HyperLink) -> None:
        if value.is_internal:
            if value.caption is not None:
                self._output.append(f"\\hyperref[{value.target}]{{{self._escape(value.caption)}}}")
            else:
                self._output.append(f"\\ref{{{value.target}}}")
        elif value.caption is not None:
            self._output.append(f"\\href{{{_escape_url(str(value.target))}}}{{{self._escape(value.caption)}}}")
        else:
            self._output.append(f"\\url{{{_escape_url(str(value.target))}}}")

    def image(self, value: Image) -> None:
        self._output.append(f"\\includegraphics{{{value.link.target}}}")

    def text(self, value: Text) -> None:
        self._output.append(self._escape(value.value))

    def math(self, value: Math) -> None:
        self._output.append(f"\\({value.value}\\)")

    def character(self, value: CharacterContent) -> None:
        if isinstance(value, Emoji):
            self._output.append(f"\\texttt{{:{self._escape(value.name)}:}}")
        elif isinstance(value, OtherCharacter):
            self._output.append(self._escape(value.char))
        else:
            self._output.append(_CHARACTERS[value])

    def line_break(self) -> None:
        self._output.append("\\newline ")

    def start_span(self, styles: Sequence[SpanStyleType]) -> None:
        openers: list[str] = []
        for style in styles:
            if style is SpanStyle.PLAIN:
                openers = []
            elif isinstance(style, Sized):
                openers.append(_SIZE_COMMANDS[style.size])
            else:
                openers.append(_SPAN_COMMANDS[style])
        self._output.append("".join(openers))
        self._span_stack.append(openers)

    def end_span(self, styles: Sequence[SpanStyleType]) -> None:
        openers = self._span_stack.pop()
        self._output.append("}" * len(openers))


__all__ = [
    "Command",
    "DocumentClass",
    "Environment",
    "LatexRenderer",
    "Package",
    "PreambleItem",
    "default_preamble",
]
