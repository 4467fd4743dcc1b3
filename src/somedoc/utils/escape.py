#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/utils/escape.py
"""Escaping helpers for the text-based output formats."""

from __future__ import annotations

import html

_MARKDOWN_SPECIAL_CHARS = r"\`*_{}[]#"

_LATEX_SPECIAL_CHARS = {
    "\\": r"\textbackslash{}",
    "{": r"\{",
    "}": r"\}",
    "$": r"\$",
    "%": r"\%",
    "&": r"\&",
    "#": r"\#",
    "_": r"\_",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

_LATEX_TRANSLATION = str.maketrans(_LATEX_SPECIAL_CHARS)


def escape_markdown(text: str, context: str = "text") -> str:
    r"""Escape markdown with context awareness.

    Parameters
    ----------
    text : str
        Text to escape
    context : {'text', 'table', 'link'}, default = 'text'
        Context where text will be used; table cells additionally escape
        pipes, link captions only escape square brackets

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_markdown("Text with [brackets]")
        'Text with \\[brackets\\]'
        >>> escape_markdown("a | b", "table")
        'a \\| b'

    """
    if not text:
        return text

    if context == "link":
        return text.replace("[", r"\[").replace("]", r"\]")

    result = "".join("\\" + char if char in _MARKDOWN_SPECIAL_CHARS else char for char in text)
    if context == "table":
        result = result.replace("|", r"\|")
    return result


def escape_inline_code(code: str, delimiter: str = "`") -> tuple[str, str]:
    """Escape inline code and determine appropriate delimiter.

    Handles cases where code contains the delimiter character by using a
    longer delimiter sequence.

    Parameters
    ----------
    code : str
        Code content to escape
    delimiter : str, default = '`'
        Preferred delimiter character

    Returns
    -------
    tuple[str, str]
        (escaped_code, delimiter_to_use)

    Examples
    --------
        >>> escape_inline_code("simple code")
        ('simple code', '`')
        >>> escape_inline_code("code with ` backtick")
        ('code with ` backtick', '``')

    """
    if not code:
        return code, delimiter

    max_consecutive = 0
    current_consecutive = 0
    for char in code:
        if char == delimiter:
            current_consecutive += 1
            max_consecutive = max(max_consecutive, current_consecutive)
        else:
            current_consecutive = 0

    if max_consecutive == 0:
        return code, delimiter

    final_delimiter = delimiter * (max_consecutive + 1)
    if code.startswith(delimiter) or code.endswith(delimiter):
        code = " " + code + " "
    return code, final_delimiter


def escape_html(text: str, quote: bool = False) -> str:
    """Escape HTML special characters to entities.

    Parameters
    ----------
    text : str
        Text to escape
    quote : bool, default = False
        Also escape quote characters, for attribute values

    Returns
    -------
    str
        Text with HTML entities

    Examples
    --------
        >>> escape_html("<b>&</b>")
        '&lt;b&gt;&amp;&lt;/b&gt;'

    """
    if not text:
        return text
    return html.escape(text, quote=quote)


def escape_latex(text: str) -> str:
    r"""Escape LaTeX special characters.

    Each character is replaced independently, so the braces introduced for
    ``\textbackslash{}`` are not escaped again.

    Examples
    --------
        >>> escape_latex("50% of $x_1$")
        '50\\% of \\$x\\_1\\$'

    """
    if not text:
        return text
    return text.translate(_LATEX_TRANSLATION)


__all__ = [
    "escape_html",
    "escape_inline_code",
    "escape_latex",
    "escape_markdown",
]
