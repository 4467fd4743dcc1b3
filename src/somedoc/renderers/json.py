#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/renderers/json.py
"""JSON interchange rendering from the document model.

This module provides the JsonRenderer class which serializes a document with
:mod:`somedoc.ast.serialization`. Unlike the other renderers it does not walk
the document with visitor callbacks; the output can be read back with
:func:`~somedoc.ast.serialization.json_to_document`.
"""

from __future__ import annotations

from somedoc.ast.nodes import Document
from somedoc.ast.serialization import document_to_json
from somedoc.options.json import JsonRendererOptions
from somedoc.renderers.base import BaseRenderer


class JsonRenderer(BaseRenderer):
    """Render a document to its JSON interchange form.

    Parameters
    ----------
    options : JsonRendererOptions or None, default = None
        JSON rendering options

    Examples
    --------
    Pretty-printed output:
        >>> renderer = JsonRenderer(JsonRendererOptions(indent=2))
        >>> json_str = renderer.render_to_string(doc)

    """

    def __init__(self, options: JsonRendererOptions | None = None):
        """Initialize the JSON renderer with options."""
        BaseRenderer._validate_options_type(options, JsonRendererOptions, "json")
        options = options or JsonRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: JsonRendererOptions = options

    def render_to_string(self, doc: Document) -> str:
        """Render a document to a JSON string.

        Parameters
        ----------
        doc : Document
            The document to render

        Returns
        -------
        str
            JSON text

        """
        return document_to_json(doc, indent=self.options.indent)


__all__ = ["JsonRenderer"]
