#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/utils/io_utils.py
"""I/O utilities for handling output destinations.

This module provides a single place to write rendered text to the supported
destinations: file paths, binary streams and text streams.

"""

from __future__ import annotations

import io
import logging
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from somedoc.exceptions import OutputWriteError

logger = logging.getLogger(__name__)

OutputDestination = Union[str, Path, IO[bytes], IO[str]]


def _is_binary_stream(output: object) -> bool:
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: OutputDestination) -> None:
    """Write text to a path or a file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Paths are written as UTF-8; binary streams
        receive UTF-8 bytes; text streams receive the string unchanged.

    Raises
    ------
    OutputWriteError
        If writing to a file path fails
    TypeError
        If the output type is not supported

    Notes
    -----
    Errors raised by a caller-supplied stream propagate unchanged.

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("# Hello", buffer)
        >>> buffer.getvalue()
        b'# Hello'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        logger.debug("Wrote %d characters to %s", len(content), output_path)
        return

    if hasattr(output, "write"):
        if _is_binary_stream(output):
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["OutputDestination", "write_content"]
