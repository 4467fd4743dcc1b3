#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/constants.py
"""Constants and default values for the somedoc library.

This module centralizes the hardcoded values used across the renderers so
that options classes and writers share a single source of defaults.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Model Constants - Label and emoji rules
3. Format-Specific Constants - Settings for each output format
4. Interchange Constants - JSON schema identification
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

MetadataStyle = Literal["link_comment", "yaml"]
LabelPlacement = Literal["none", "before", "after"]

# =============================================================================
# Model Constants
# =============================================================================

# First character must be a letter, the remainder letters, digits or _-.:
LABEL_PATTERN = re.compile(r"^[^\W\d_][\w\-.:]*\Z")
LABEL_ILLEGAL_CHAR = re.compile(r"[^\w\-.:]")
GENERATED_LABEL_PREFIX = "gen_"
GENERATED_LABEL_LENGTH = 12

# =============================================================================
# Markdown Constants
# =============================================================================

DEFAULT_MARKDOWN_FLAVOR = "commonmark"
DEFAULT_ESCAPE_SPECIAL = True
MARKDOWN_METADATA_TEMPLATE = '[_metadata_:{key}]:- "{value}"'
MARKDOWN_COMMENT_TEMPLATE = '[//]: # "{line}"'

# =============================================================================
# HTML Constants
# =============================================================================

DEFAULT_HTML_INDENT_WIDTH = 2
DEFAULT_HTML_INCLUDE_ASSETS = True
DEFAULT_HIGHLIGHT_CSS_URL = "https://cdnjs.cloudflare.com/ajax/libs/highlight.js/10.5.0/styles/default.min.css"
DEFAULT_HIGHLIGHT_JS_URL = "https://cdnjs.cloudflare.com/ajax/libs/highlight.js/10.5.0/highlight.min.js"
DEFAULT_MATHJAX_URL = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"
HTML_ID_ILLEGAL_CHARS = re.compile(r"[#&% \t\n]+")

# =============================================================================
# LaTeX Constants
# =============================================================================

DEFAULT_LATEX_DOCUMENT_CLASS = "article"
DEFAULT_LATEX_CLASS_OPTIONS: tuple[str, ...] = ("twoside", "12pt", "letterpaper")
DEFAULT_LATEX_PACKAGES: tuple[str, ...] = (
    "amsmath",
    "csquotes",
    "graphicx",
    "hyperref",
    "listings",
    "ulem",
)
DEFAULT_LATEX_INDENT_WIDTH = 2
LATEX_THEMATIC_BREAK_COMMAND = "thematicbreak"
LATEX_THEMATIC_BREAK_BODY = r"\par\bigskip\noindent\hrulefill\par\bigskip"

# =============================================================================
# XWiki Constants
# =============================================================================

DEFAULT_XWIKI_METADATA_AS_COMMENT = True

# =============================================================================
# Interchange Constants
# =============================================================================

JSON_VERSION_KEY = "version"
DEFAULT_JSON_INDENT: int | None = None
