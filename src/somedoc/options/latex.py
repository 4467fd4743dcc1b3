#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for LaTeX rendering."""
# src/somedoc/options/latex.py

from __future__ import annotations

from dataclasses import dataclass, field

from somedoc.constants import (
    DEFAULT_ESCAPE_SPECIAL,
    DEFAULT_LATEX_CLASS_OPTIONS,
    DEFAULT_LATEX_DOCUMENT_CLASS,
    DEFAULT_LATEX_INDENT_WIDTH,
    DEFAULT_LATEX_PACKAGES,
)
from somedoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class LatexRendererOptions(BaseRendererOptions):
    r"""LaTeX rendering options.

    Parameters
    ----------
    document_class : str, default "article"
        Document class used when the document has no ``class`` metadata
    class_options : tuple of str, default ("twoside", "12pt", "letterpaper")
        Options passed to ``\documentclass``
    packages : tuple of str
        Packages loaded with ``\usepackage``; the writer relies on amsmath,
        csquotes, graphicx, hyperref, listings and ulem
    indent_width : int, default 2
        Spaces per environment nesting level
    escape_special : bool, default True
        Escape LaTeX special characters in text content

    """

    document_class: str = field(
        default=DEFAULT_LATEX_DOCUMENT_CLASS,
        metadata={"help": "LaTeX document class", "importance": "core"},
    )
    class_options: tuple[str, ...] = field(
        default=DEFAULT_LATEX_CLASS_OPTIONS,
        metadata={"help": "Options for the document class", "importance": "advanced"},
    )
    packages: tuple[str, ...] = field(
        default=DEFAULT_LATEX_PACKAGES,
        metadata={"help": "LaTeX packages to include in preamble", "importance": "advanced"},
    )
    indent_width: int = field(
        default=DEFAULT_LATEX_INDENT_WIDTH,
        metadata={"help": "Spaces per environment nesting level", "type": int, "importance": "advanced"},
    )
    escape_special: bool = field(
        default=DEFAULT_ESCAPE_SPECIAL,
        metadata={"help": "Escape special LaTeX characters", "cli_name": "no-escape-special", "importance": "security"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and ensure immutability for LaTeX renderer options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        object.__setattr__(self, "class_options", tuple(self.class_options))
        object.__setattr__(self, "packages", tuple(self.packages))

        if not self.document_class:
            raise ValueError("document_class must not be empty")
        if self.indent_width < 0:
            raise ValueError(f"indent_width must be non-negative, got {self.indent_width}")


__all__ = ["LatexRendererOptions"]
