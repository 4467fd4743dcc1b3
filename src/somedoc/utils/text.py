#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/utils/text.py
"""Text processing utilities for anchors and identifiers.

Functions
---------
slugify : Convert a label to a markdown anchor slug
html_id : Convert a label to a usable HTML ``id`` attribute value
xwiki_anchor : Convert a label to an XWiki heading anchor

Examples
--------
    >>> slugify("My Heading Title")
    'my-heading-title'
    >>> xwiki_anchor("Getting started, again")
    'Gettingstartedagain'

"""

from __future__ import annotations

import re
import string
import unicodedata

from somedoc.constants import HTML_ID_ILLEGAL_CHARS

_XWIKI_ANCHOR_STRIP = set(string.whitespace) | set(string.punctuation)


def slugify(text: str) -> str:
    """Create a GitHub-style anchor slug from a label or heading text.

    Accents are stripped after NFD normalization, whitespace and underscores
    become hyphens, and anything other than ``a-z``, ``0-9`` and ``-`` is
    dropped. Text with nothing left falls back to ``"section"``.

    Examples
    --------
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("Café résumé")
        'cafe-resume'

    """
    normalized = unicodedata.normalize("NFD", text)
    normalized = "".join(char for char in normalized if unicodedata.category(char) != "Mn")

    slug = re.sub(r"[\s_]+", "-", normalized.lower())
    slug = re.sub(r"[^a-z0-9\-]", "", slug)
    slug = re.sub(r"-+", "-", slug).strip("-")
    return slug or "section"


def html_id(value: str) -> str:
    """Replace runs of characters that break an HTML ``id`` with ``_``.

    Examples
    --------
        >>> html_id("part one#2")
        'part_one_2'

    """
    return HTML_ID_ILLEGAL_CHARS.sub("_", str(value))


def xwiki_anchor(value: str) -> str:
    """Strip whitespace and punctuation from a label to form an XWiki anchor."""
    return "".join(char for char in str(value) if char not in _XWIKI_ANCHOR_STRIP)


__all__ = [
    "html_id",
    "slugify",
    "xwiki_anchor",
]
