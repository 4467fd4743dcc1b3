#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/renderers/_line_output.py
"""Shared line-oriented output buffer for the text renderers.

Markdown and XWiki both mark quoted content with a repeated line prefix and
separate blocks with one blank line. This module holds the buffer that does
both, so every line written inside a quote, blank lines included, carries the
prefix of the current quote depth. Used by the Markdown and XWiki renderers.
"""

from __future__ import annotations

from typing import Optional

from somedoc.utils.delimiters import Delimiter


class QuotedLineOutput:
    """Mixin providing quote-aware line output and blank-line block separation.

    Subclasses supply :meth:`_quote_delimiter` and call
    :meth:`_reset_line_state` before each render. The mixin must precede the
    visitor base classes so its ``start_block``/``end_block`` take effect.
    """

    def _reset_line_state(self) -> None:
        self._output: list[str] = []
        self._at_line_start: bool = True
        self._need_blank_line: bool = False
        self._pending_blank_depth: Optional[int] = None
        self._block_marks: list[int] = []
        self._quote_depth: int = 0

    def _quote_delimiter(self) -> Delimiter:
        raise NotImplementedError

    def _take_output(self) -> str:
        result = "".join(self._output)
        self._output.clear()
        return result

    def _quote_prefix(self, depth: int) -> str:
        if depth <= 0:
            return ""
        return self._quote_delimiter().opener_with_multiple(depth)

    def _flush_pending_blank(self) -> None:
        depth = self._pending_blank_depth
        self._pending_blank_depth = None
        if depth is None:
            return
        self._output.append(self._quote_prefix(depth).rstrip() + "\n")
        self._at_line_start = True

    def _write(self, text: str) -> None:
        """Append text, placing the quote prefix at the start of every line.

        Empty lines get the prefix without its trailing padding, so a quote
        stays one quote across blank lines in its content.
        """
        if not text:
            return
        self._flush_pending_blank()
        for index, line in enumerate(text.split("\n")):
            if index > 0:
                if self._at_line_start:
                    bare_prefix = self._quote_prefix(self._quote_depth).rstrip()
                    if bare_prefix:
                        self._output.append(bare_prefix)
                self._output.append("\n")
                self._at_line_start = True
            if line:
                if self._at_line_start:
                    prefix = self._quote_prefix(self._quote_depth)
                    if prefix:
                        self._output.append(prefix)
                    self._at_line_start = False
                self._output.append(line)

    def _end_line(self) -> None:
        if not self._at_line_start:
            self._write("\n")

    def start_block(self) -> None:
        if self._need_blank_line:
            self._need_blank_line = False
            if self._pending_blank_depth is None:
                self._pending_blank_depth = self._quote_depth
        self._block_marks.append(len(self._output))

    def end_block(self) -> None:
        mark = self._block_marks.pop()
        if len(self._output) > mark:
            self._end_line()
            self._need_blank_line = True


__all__ = ["QuotedLineOutput"]
