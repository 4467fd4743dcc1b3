#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/somedoc/ast/metadata.py
"""Document metadata variants.

Metadata is a closed set of value types attached to a :class:`~somedoc.ast.nodes.Document`.
Each variant knows its ``key`` (the name used by text-based writers), a
single-line ``value_string()`` and a plain-data ``to_yaml_value()`` used for
YAML front matter. Writers are free to map each variant to their own
conventions (HTML ``<meta>`` tags, LaTeX ``\\author``, etc.).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class Author:
    """A document author.

    Parameters
    ----------
    name : str
        The author's name
    email : str or None, default = None
        Contact address
    organization : str or None, default = None
        Affiliation

    """

    name: str
    email: str | None = None
    organization: str | None = None

    key = "author"

    def value_string(self) -> str:
        """Format as ``name <email> - organization``."""
        result = self.name
        if self.email:
            result += f" <{self.email}>"
        if self.organization:
            result += f" - {self.organization}"
        return result

    def to_yaml_value(self) -> Any:
        if not self.email and not self.organization:
            return self.name
        value: dict[str, str] = {"name": self.name}
        if self.email:
            value["email"] = self.email
        if self.organization:
            value["organization"] = self.organization
        return value


@dataclass
class SiteClass:
    """The document class or stylesheet.

    For LaTeX this is the ``\\documentclass``; for HTML a stylesheet link.

    Parameters
    ----------
    name_or_path : str
        Class name or stylesheet path/URL
    options : list of str, default = empty list
        Class options (LaTeX only)

    """

    name_or_path: str
    options: list[str] = field(default_factory=list)

    key = "class"

    def value_string(self) -> str:
        if self.options:
            return f"{self.name_or_path} [{', '.join(self.options)}]"
        return self.name_or_path

    def to_yaml_value(self) -> Any:
        if not self.options:
            return self.name_or_path
        return {"name": self.name_or_path, "options": list(self.options)}


@dataclass
class Copyright:
    """A copyright statement.

    Parameters
    ----------
    year : int
        Copyright year
    organization : str or None, default = None
        Holder of the copyright
    comment : str or None, default = None
        Free-form note such as a license name

    """

    year: int
    organization: str | None = None
    comment: str | None = None

    key = "copyright"

    def value_string(self) -> str:
        """Format as ``year organization (comment)``."""
        result = str(self.year)
        if self.organization:
            result += f" {self.organization}"
        if self.comment:
            result += f" ({self.comment})"
        return result

    def to_yaml_value(self) -> Any:
        value: dict[str, Any] = {"year": self.year}
        if self.organization:
            value["organization"] = self.organization
        if self.comment:
            value["comment"] = self.comment
        return value


@dataclass
class Date:
    """Document date, kept as the caller's string."""

    value: str

    key = "date"

    def value_string(self) -> str:
        return self.value

    def to_yaml_value(self) -> Any:
        return self.value


@dataclass
class Keywords:
    """Document keywords."""

    values: list[str] = field(default_factory=list)

    key = "keywords"

    def value_string(self) -> str:
        return ", ".join(self.values)

    def to_yaml_value(self) -> Any:
        return list(self.values)


@dataclass
class Revision:
    """Document revision identifier."""

    value: str

    key = "revision"

    def value_string(self) -> str:
        return self.value

    def to_yaml_value(self) -> Any:
        return self.value


@dataclass
class Status:
    """Document status, e.g. ``draft``."""

    value: str

    key = "status"

    def value_string(self) -> str:
        return self.value

    def to_yaml_value(self) -> Any:
        return self.value


@dataclass
class Title:
    """Document title."""

    value: str

    key = "title"

    def value_string(self) -> str:
        return self.value

    def to_yaml_value(self) -> Any:
        return self.value


@dataclass
class Other:
    """Any other key/value pair.

    Parameters
    ----------
    name : str
        Metadata key
    value : str
        Metadata value

    """

    name: str
    value: str

    @property
    def key(self) -> str:  # type: ignore[override]
        return self.name

    def value_string(self) -> str:
        return self.value

    def to_yaml_value(self) -> Any:
        return self.value


Metadata = Union[Author, SiteClass, Copyright, Date, Keywords, Revision, Status, Title, Other]

METADATA_TYPES: tuple[type, ...] = (Author, SiteClass, Copyright, Date, Keywords, Revision, Status, Title, Other)


__all__ = [
    "Author",
    "SiteClass",
    "Copyright",
    "Date",
    "Keywords",
    "Revision",
    "Status",
    "Title",
    "Other",
    "Metadata",
    "METADATA_TYPES",
]
