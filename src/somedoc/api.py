#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/api.py
"""Main API for rendering documents.

This module picks the renderer for an output format and runs it, returning
the rendered text or writing it to a path or stream.

Examples
--------
    >>> from somedoc import Document, Heading, render
    >>> doc = Document().set_title("Notes").add_heading(Heading.section("Intro"))
    >>> markdown = render(doc, "markdown+gfm")
    >>> render(doc, OutputFormat.HTML, "notes.html", include_assets=False)

"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Optional, Union

from somedoc.ast.nodes import Document
from somedoc.exceptions import RenderingError, SomedocError
from somedoc.formats import FormatFamily, OutputFormat
from somedoc.options.base import BaseRendererOptions
from somedoc.options.html import HtmlRendererOptions
from somedoc.options.json import JsonRendererOptions
from somedoc.options.latex import LatexRendererOptions
from somedoc.options.markdown import MarkdownRendererOptions
from somedoc.options.xwiki import XWikiRendererOptions
from somedoc.renderers.base import BaseRenderer
from somedoc.renderers.html import HtmlRenderer
from somedoc.renderers.json import JsonRenderer
from somedoc.renderers.latex import LatexRenderer
from somedoc.renderers.markdown import MarkdownRenderer
from somedoc.renderers.xwiki import XWikiRenderer
from somedoc.utils.io_utils import OutputDestination

logger = logging.getLogger(__name__)

FormatSpec = Union[OutputFormat, str]

_RENDERERS: dict[FormatFamily, tuple[type[BaseRenderer], type[BaseRendererOptions]]] = {
    FormatFamily.MARKDOWN: (MarkdownRenderer, MarkdownRendererOptions),
    FormatFamily.HTML: (HtmlRenderer, HtmlRendererOptions),
    FormatFamily.LATEX: (LatexRenderer, LatexRendererOptions),
    FormatFamily.JSON: (JsonRenderer, JsonRendererOptions),
    FormatFamily.XWIKI: (XWikiRenderer, XWikiRendererOptions),
}


def _resolve_format(fmt: FormatSpec) -> OutputFormat:
    if isinstance(fmt, OutputFormat):
        return fmt
    return OutputFormat.parse(fmt)


def _get_renderer_options_class_for_format(fmt: OutputFormat) -> type[BaseRendererOptions]:
    return _RENDERERS[fmt.family][1]


def _create_renderer_options_from_kwargs(fmt: OutputFormat, **kwargs: Any) -> BaseRendererOptions:
    """Create format-specific renderer options from keyword arguments.

    Keyword arguments that are not fields of the format's options class are
    skipped with a debug log.
    """
    options_class = _get_renderer_options_class_for_format(fmt)
    option_names = [field.name for field in fields(options_class)]
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    missing = [k for k in kwargs if k not in valid_kwargs]
    if missing:
        logger.debug(f"Skipping unknown renderer options: {missing}")
    return options_class(**valid_kwargs)


def get_renderer(fmt: FormatSpec, options: Optional[BaseRendererOptions] = None) -> BaseRenderer:
    """Create the renderer for an output format.

    Parameters
    ----------
    fmt : OutputFormat or str
        Target format; strings are parsed with :meth:`OutputFormat.parse`
    options : BaseRendererOptions or None, default = None
        Options for the renderer; for markdown formats the flavor named by
        ``fmt`` replaces the flavor in ``options``

    Returns
    -------
    BaseRenderer
        A fresh renderer instance

    Raises
    ------
    FormatError
        If ``fmt`` is an unknown format name
    InvalidOptionsError
        If ``options`` is not the options class of the format

    """
    output_format = _resolve_format(fmt)
    renderer_class, _ = _RENDERERS[output_format.family]

    flavor = output_format.flavor
    if flavor is not None:
        if options is None:
            options = MarkdownRendererOptions(flavor=flavor)
        elif isinstance(options, MarkdownRendererOptions) and options.flavor is not flavor:
            logger.debug(f"Markdown flavor {options.flavor} replaced by {flavor} from format {output_format}")
            options = options.create_updated(flavor=flavor)

    logger.debug(f"Using {renderer_class.__name__} for {output_format}")
    return renderer_class(options)  # type: ignore[call-arg]


def render(
    document: Document,
    fmt: FormatSpec,
    output: Optional[OutputDestination] = None,
    *,
    options: Optional[BaseRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Render a document to a target format.

    The text is fully rendered before anything is written, so a failed
    render leaves ``output`` untouched.

    Parameters
    ----------
    document : Document
        The document to render
    fmt : OutputFormat or str
        Target format (e.g. ``OutputFormat.LATEX``, ``"markdown+gfm"``, ``"html"``)
    output : str, Path, IO[bytes], IO[str], or None, optional
        Output destination. If None, the rendered text is returned.
    options : BaseRendererOptions, optional
        Renderer options for the target format
    kwargs : Any
        Renderer option values that override ``options``

    Returns
    -------
    str or None
        The rendered text if ``output`` is None, otherwise None

    Raises
    ------
    FormatError
        If ``fmt`` is an unknown format name
    InvalidOptionsError
        If ``options`` is not the options class of the format
    RenderingError
        If rendering fails with an unexpected error
    OutputWriteError
        If writing to a file path fails

    Examples
    --------
    Render to a string:
        >>> text = render(doc, "latex")

    Render to a file with option overrides:
        >>> render(doc, "html", "out.html", indent_width=4)

    """
    output_format = _resolve_format(fmt)

    final_options: Optional[BaseRendererOptions]
    if kwargs and options:
        final_options = options.create_updated(**kwargs)
    elif kwargs:
        final_options = _create_renderer_options_from_kwargs(output_format, **kwargs)
    else:
        final_options = options

    renderer = get_renderer(output_format, final_options)
    try:
        text = renderer.render_to_string(document)
    except SomedocError:
        raise
    except Exception as e:
        raise RenderingError(
            f"Rendering to {output_format} failed: {e!r}", rendering_stage="render", original_error=e
        ) from e

    if output is None:
        return text
    renderer.write_text_output(text, output)
    return None


def write_document(document: Document, fmt: FormatSpec, output: OutputDestination) -> None:
    """Render a document with default options and write it to ``output``.

    Parameters
    ----------
    document : Document
        The document to render
    fmt : OutputFormat or str
        Target format
    output : str, Path, IO[bytes], or IO[str]
        Output destination

    """
    render(document, fmt, output)


__all__ = ["get_renderer", "render", "write_document"]
