#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/utils/metadata.py
"""Metadata formatting shared by the text-based renderers."""

from __future__ import annotations

from typing import Sequence

import yaml

from somedoc.ast.metadata import Metadata


def format_yaml_entry(datum: Metadata) -> str:
    """Format a single metadata entry as a YAML mapping.

    Each entry is dumped on its own so repeated keys (several authors, for
    example) are all kept, in insertion order.

    Parameters
    ----------
    datum : Metadata
        The metadata entry

    Returns
    -------
    str
        YAML text ending with a newline

    Examples
    --------
        >>> format_yaml_entry(Title("My Document"))
        'title: My Document\\n'

    """
    yaml_content = yaml.safe_dump(
        {datum.key: datum.to_yaml_value()},
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
    if not yaml_content.endswith("\n"):
        yaml_content += "\n"
    return yaml_content


def format_yaml_frontmatter(metadata: Sequence[Metadata]) -> str:
    """Format metadata as YAML front matter.

    Parameters
    ----------
    metadata : sequence of Metadata
        Entries in document order

    Returns
    -------
    str
        YAML front matter with ``---`` delimiters, or an empty string if there
        is no metadata

    Examples
    --------
        >>> print(format_yaml_frontmatter([Title("My Document"), Keywords(["a", "b"])]), end="")
        ---
        title: My Document
        keywords:
        - a
        - b
        ---

    """
    if not metadata:
        return ""
    return "---\n" + "".join(format_yaml_entry(datum) for datum in metadata) + "---\n"


__all__ = ["format_yaml_entry", "format_yaml_frontmatter"]
