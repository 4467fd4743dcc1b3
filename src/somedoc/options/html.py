#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering."""
# src/somedoc/options/html.py

from __future__ import annotations

from dataclasses import dataclass, field

from somedoc.constants import (
    DEFAULT_HIGHLIGHT_CSS_URL,
    DEFAULT_HIGHLIGHT_JS_URL,
    DEFAULT_HTML_INCLUDE_ASSETS,
    DEFAULT_HTML_INDENT_WIDTH,
    DEFAULT_MATHJAX_URL,
)
from somedoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """HTML rendering options.

    Parameters
    ----------
    include_assets : bool, default True
        Link the syntax highlighting stylesheet/script and the MathJax script
        from ``<head>``
    indent_width : int, default 2
        Spaces per nesting level
    highlight_css_url : str
        Stylesheet URL for code highlighting
    highlight_js_url : str
        Script URL for code highlighting
    mathjax_url : str
        Script URL for math typesetting

    """

    include_assets: bool = field(
        default=DEFAULT_HTML_INCLUDE_ASSETS,
        metadata={
            "help": "Link highlighting and MathJax assets in the document head",
            "cli_name": "no-include-assets",
            "importance": "core",
        },
    )
    indent_width: int = field(
        default=DEFAULT_HTML_INDENT_WIDTH,
        metadata={"help": "Spaces per indentation level", "type": int, "importance": "advanced"},
    )
    highlight_css_url: str = field(
        default=DEFAULT_HIGHLIGHT_CSS_URL,
        metadata={"help": "Stylesheet URL for code highlighting", "importance": "advanced"},
    )
    highlight_js_url: str = field(
        default=DEFAULT_HIGHLIGHT_JS_URL,
        metadata={"help": "Script URL for code highlighting", "importance": "advanced"},
    )
    mathjax_url: str = field(
        default=DEFAULT_MATHJAX_URL,
        metadata={"help": "Script URL for math typesetting", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges for HTML renderer options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.indent_width < 0:
            raise ValueError(f"indent_width must be non-negative, got {self.indent_width}")


__all__ = ["HtmlRendererOptions"]
