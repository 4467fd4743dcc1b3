#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/renderers/base.py
"""Base classes for document renderers.

This module defines the abstract base class that all renderers inherit from.
The BaseRenderer provides a consistent interface for converting a somedoc
:class:`~somedoc.ast.nodes.Document` into the various output formats.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from somedoc.ast.nodes import Document
from somedoc.exceptions import InvalidOptionsError
from somedoc.options.base import BaseRendererOptions
from somedoc.utils.io_utils import OutputDestination, write_content


class BaseRenderer(ABC):
    """Abstract base class for all renderers.

    A renderer instance may be reused: every call to :meth:`render_to_string`
    starts from fresh state, so rendering the same document twice gives
    identical output. A single instance must not be shared between threads
    while rendering.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class WordCountRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return str(len(doc.content))

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Format-specific rendering options. If None, default options will be used.

        """
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the document to a string.

        Parameters
        ----------
        doc : Document
            Document to render

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render(self, doc: Document, output: OutputDestination) -> None:
        """Render the document and write it to ``output``.

        The text is fully rendered before anything is written, so a failing
        render leaves the destination untouched.

        Parameters
        ----------
        doc : Document
            Document to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination (file path or file-like object)

        Raises
        ------
        OutputWriteError
            If writing to a file path fails

        """
        text = self.render_to_string(doc)
        self.write_text_output(text, output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: OutputDestination) -> None:
        """Write text output to file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination. Can be:
            - File path (str or Path)
            - File-like object in binary mode (IO[bytes])
            - File-like object in text mode (IO[str])

        Examples
        --------
        Write to StringIO:
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("# Hello", buffer)
            >>> print(buffer.getvalue())
            # Hello

        """
        write_content(text, output)


__all__ = ["BaseRenderer"]
