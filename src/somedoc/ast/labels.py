#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/ast/labels.py
"""Cross-reference labels and validated names.

A :class:`Label` is an identifier attached to block content so that internal
hyperlinks can refer to it. Labels are plain string keys, not pointers: the
model never resolves them, writers turn them into anchors in their own syntax.

Examples
--------
    >>> Label("sec:intro")
    Label('sec:intro')
    >>> Label.safe_from("hello world")
    Label('hello_world')
    >>> Label("1abc")
    Traceback (most recent call last):
    ...
    somedoc.exceptions.LabelError: Illegal character '1' at position 0 in label '1abc'

"""

from __future__ import annotations

import secrets
import string

from somedoc.constants import (
    GENERATED_LABEL_LENGTH,
    GENERATED_LABEL_PREFIX,
    LABEL_ILLEGAL_CHAR,
    LABEL_PATTERN,
)
from somedoc.exceptions import LabelError

_GENERATED_ALPHABET = string.ascii_lowercase + string.digits


def _first_illegal_position(value: str) -> int | None:
    if not value[0].isalpha():
        return 0
    match = LABEL_ILLEGAL_CHAR.search(value, 1)
    return match.start() if match else None


class Label:
    """A validated cross-reference identifier.

    A label is non-empty, starts with a letter, and otherwise contains only
    letters, digits and the characters ``_``, ``-``, ``.`` and ``:``.

    Parameters
    ----------
    value : str
        The label text

    Raises
    ------
    LabelError
        If ``value`` is empty or contains an illegal character

    """

    __slots__ = ("_value",)

    def __init__(self, value: str):
        """Validate and store the label text."""
        if isinstance(value, Label):
            value = value.value
        if not value:
            raise LabelError(value, "empty")
        if not LABEL_PATTERN.match(value):
            raise LabelError(value, "illegal_character", _first_illegal_position(value))
        self._value = value

    @property
    def value(self) -> str:
        """Get the label text."""
        return self._value

    @staticmethod
    def is_valid(value: str) -> bool:
        """Check whether ``value`` would be accepted as a label."""
        return bool(value) and LABEL_PATTERN.match(value) is not None

    @classmethod
    def safe_from(cls, value: str) -> Label:
        """Create a label from arbitrary text by replacing illegal characters.

        Every character outside the label alphabet is replaced with ``_``. If
        the result does not start with a letter an ``a`` is prepended; empty
        input produces a generated label.

        Parameters
        ----------
        value : str
            Arbitrary text, such as a heading

        Returns
        -------
        Label
            A valid label derived from ``value``

        Examples
        --------
            >>> Label.safe_from("hello world").value
            'hello_world'
            >>> Label.safe_from("2nd try").value
            'a2nd_try'

        """
        if not value:
            return cls.generate()
        safe = LABEL_ILLEGAL_CHAR.sub("_", value)
        if not safe[0].isalpha():
            safe = f"a{safe}"
        return cls(safe)

    @classmethod
    def generate(cls) -> Label:
        """Create a new random label with the ``gen_`` prefix."""
        suffix = "".join(secrets.choice(_GENERATED_ALPHABET) for _ in range(GENERATED_LABEL_LENGTH))
        return cls(f"{GENERATED_LABEL_PREFIX}{suffix}")

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Label({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Label):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


__all__ = ["Label"]
