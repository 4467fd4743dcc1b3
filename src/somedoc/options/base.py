#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/options/base.py
"""Base classes for renderer options.

This module defines the foundation classes for all format-specific options
used by the somedoc renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderers convert a :class:`~somedoc.ast.nodes.Document` into an output
    format. Options are immutable; use :meth:`create_updated` to derive a
    modified copy.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen
    dataclass fields, each with ``help`` and ``importance`` metadata.

    """

    def __post_init__(self) -> None:
        """Validate field values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        pass


__all__ = ["BaseRendererOptions", "CloneFrozenMixin"]
