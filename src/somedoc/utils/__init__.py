#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/utils/__init__.py
"""Utility modules for somedoc.

This package contains the delimiter table, markdown dialect descriptions,
escaping and anchor helpers, YAML metadata formatting and output writing
shared by the renderers.
"""

from somedoc.utils.delimiters import Feature, is_supported, lookup
from somedoc.utils.escape import escape_html, escape_latex, escape_markdown
from somedoc.utils.text import html_id, slugify, xwiki_anchor

__all__ = [
    "Feature",
    "escape_html",
    "escape_latex",
    "escape_markdown",
    "html_id",
    "is_supported",
    "lookup",
    "slugify",
    "xwiki_anchor",
]
