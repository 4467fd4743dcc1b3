"""Pytest configuration and shared fixtures for the somedoc test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from somedoc.ast import (
    Alignment,
    Cell,
    CodeBlock,
    Column,
    Definition,
    DefinitionList,
    Document,
    Heading,
    HyperLink,
    Item,
    List,
    Paragraph,
    Quote,
    Row,
    Span,
    SpanStyle,
    Table,
    Text,
)

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "property: Property-based tests using Hypothesis")


@pytest.fixture
def simple_document() -> Document:
    """Provide the title/heading/list document used by several writers.

    Returns
    -------
    Document
        Document with a title, one section heading and a two item list.

    """
    doc = Document().set_title("T")
    doc.add_heading(Heading.section("T"))
    doc.add_list(List.unordered().add_item_from("one").add_item_from("two"))
    return doc


@pytest.fixture
def rich_document() -> Document:
    """Provide a document exercising every block kind.

    Returns
    -------
    Document
        Document with metadata, nested lists, a quote, code and a table.

    """
    doc = Document().set_title("Report").add_author("Ada", "ada@example.com")
    doc.add_heading(Heading.section("Introduction").set_label("intro"))
    doc.add_paragraph(
        Paragraph(
            [
                Text("See "),
                HyperLink.internal("intro", "the intro"),
                Text(" and "),
                Span.bold("bold"),
                Text("."),
            ]
        )
    )
    doc.add_list(
        List.ordered()
        .add_item_from("first")
        .add_sub_list(List.unordered().add_item_from("nested"))
        .add_item(Item.text("second"))
    )
    doc.add_definition_list(DefinitionList().add_definition(Definition.from_strings("term", "meaning")))
    doc.add_block_quote(Quote.paragraph(Paragraph.text("quoted")))
    doc.add_code_block(CodeBlock("print(1)", language="python"))
    doc.add_table(
        Table([Column("Name"), Column("Value", Alignment.RIGHT)], [Row([Cell.text("a"), Cell.text("1")])]).set_caption(
            "Values"
        )
    )
    doc.add_thematic_break()
    doc.add_paragraph(Paragraph([Span.with_style("done", SpanStyle.ITALIC)]))
    return doc
