#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown rendering.

This module defines options for Markdown output with flavor support.
"""
# src/somedoc/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from somedoc.constants import DEFAULT_ESCAPE_SPECIAL, DEFAULT_MARKDOWN_FLAVOR
from somedoc.exceptions import FormatError
from somedoc.formats import MarkdownFlavor
from somedoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    r"""Markdown rendering options.

    Parameters
    ----------
    flavor : MarkdownFlavor or str, default "commonmark"
        Markdown dialect to produce. Strings are parsed with
        :meth:`MarkdownFlavor.parse`, so aliases such as ``"gfm"`` or
        ``"mmd"`` are accepted; the stored value is always a MarkdownFlavor.
    escape_special : bool, default True
        Whether to escape special Markdown characters in text content.
        When True, characters like \*, \_, #, [, ], \\ are escaped to prevent
        unintended formatting. Code spans are never escaped.

    Examples
    --------
        >>> MarkdownRendererOptions(flavor="github").flavor
        <MarkdownFlavor.GITHUB: 'gfm'>

    """

    flavor: Union[MarkdownFlavor, str] = field(
        default=DEFAULT_MARKDOWN_FLAVOR,
        metadata={
            "help": "Markdown flavor to render",
            "choices": ["strict", "commonmark", "gfm", "multi", "extra"],
            "importance": "core",
        },
    )
    escape_special: bool = field(
        default=DEFAULT_ESCAPE_SPECIAL,
        metadata={
            "help": "Escape special Markdown characters (e.g. asterisks) in text content",
            "cli_name": "no-escape-special",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Normalize the flavor.

        Raises
        ------
        ValueError
            If the flavor is not a known markdown flavor.

        """
        super().__post_init__()

        if not isinstance(self.flavor, MarkdownFlavor):
            try:
                object.__setattr__(self, "flavor", MarkdownFlavor.parse(str(self.flavor)))
            except FormatError as e:
                raise ValueError(f"Unknown markdown flavor: {self.flavor!r}") from e


__all__ = ["MarkdownRendererOptions"]
