#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the somedoc renderers.

Each renderer has its own frozen Options dataclass with format-specific
parameters. Options are immutable; derive modified copies with
``create_updated``.
"""

from __future__ import annotations

from somedoc.options.base import BaseRendererOptions, CloneFrozenMixin
from somedoc.options.html import HtmlRendererOptions
from somedoc.options.json import JsonRendererOptions
from somedoc.options.latex import LatexRendererOptions
from somedoc.options.markdown import MarkdownRendererOptions
from somedoc.options.xwiki import XWikiRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "JsonRendererOptions",
    "LatexRendererOptions",
    "MarkdownRendererOptions",
    "XWikiRendererOptions",
]
