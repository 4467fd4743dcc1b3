#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the JSON interchange renderer."""
# src/somedoc/options/json.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from somedoc.constants import DEFAULT_JSON_INDENT
from somedoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class JsonRendererOptions(BaseRendererOptions):
    """JSON rendering options.

    Parameters
    ----------
    indent : int or None, default None
        Indentation for pretty-printing; None writes compact JSON

    """

    indent: Optional[int] = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "JSON indentation (None for compact)", "type": int, "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the indentation.

        Raises
        ------
        ValueError
            If indent is negative.

        """
        super().__post_init__()

        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")


__all__ = ["JsonRendererOptions"]
