#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/somedoc/renderers/__init__.py
"""Renderers for converting documents to the supported output formats.

Available renderers:
- MarkdownRenderer: Render to Markdown in one of five flavors
- HtmlRenderer: Render to a complete HTML page
- LatexRenderer: Render to LaTeX source with preamble
- XWikiRenderer: Render to XWiki 2.x markup
- JsonRenderer: Render to the JSON interchange form

Use :func:`somedoc.api.get_renderer` to pick the renderer for an
:class:`~somedoc.formats.OutputFormat`.

Examples
--------
    >>> from somedoc.ast import Document, Heading
    >>> from somedoc.renderers import MarkdownRenderer
    >>> from somedoc.options import MarkdownRendererOptions
    >>> doc = Document().add_heading(Heading.section("Title"))
    >>> renderer = MarkdownRenderer(MarkdownRendererOptions())
    >>> markdown = renderer.render_to_string(doc)

"""

from somedoc.renderers.base import BaseRenderer
from somedoc.renderers.html import HtmlRenderer
from somedoc.renderers.json import JsonRenderer
from somedoc.renderers.latex import LatexRenderer
from somedoc.renderers.markdown import MarkdownRenderer
from somedoc.renderers.xwiki import XWikiRenderer

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "JsonRenderer",
    "LatexRenderer",
    "MarkdownRenderer",
    "XWikiRenderer",
]
