#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for XWiki rendering."""
# src/somedoc/options/xwiki.py

from __future__ import annotations

from dataclasses import dataclass, field

from somedoc.constants import DEFAULT_XWIKI_METADATA_AS_COMMENT
from somedoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class XWikiRendererOptions(BaseRendererOptions):
    """XWiki 2.x rendering options.

    Parameters
    ----------
    metadata_as_comment : bool, default True
        Write document metadata as YAML inside a ``{{comment}}`` macro; when
        False metadata is dropped

    """

    metadata_as_comment: bool = field(
        default=DEFAULT_XWIKI_METADATA_AS_COMMENT,
        metadata={
            "help": "Write metadata as YAML inside a comment macro",
            "cli_name": "no-metadata-as-comment",
            "importance": "core",
        },
    )


__all__ = ["XWikiRendererOptions"]
