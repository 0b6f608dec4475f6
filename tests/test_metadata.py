from bs4 import BeautifulSoup

from newsdigest.ingestion.metadata import (
    StructuredData,
    first_non_empty,
    load_structured_data,
    meta_property,
    parse_structured_block,
    resolve_metadata,
)
from newsdigest.ingestion.errors import ParseError

import pytest


def test_first_non_empty_returns_first_usable_value():
    calls = []

    def resolver(value):
        def _resolve():
            calls.append(value)
            return value
        return _resolve

    result = first_non_empty([resolver(None), resolver("  "), resolver("hit"), resolver("late")])

    assert result == "hit"
    assert calls == [None, "  ", "hit"]


def test_first_non_empty_default():
    assert first_non_empty([lambda: None, lambda: ""], default="fallback") == "fallback"
    assert first_non_empty([]) is None


def test_parse_structured_block_raises_parse_error():
    with pytest.raises(ParseError):
        parse_structured_block("{broken")


def test_parse_structured_block_flattens_lists():
    objects = parse_structured_block('[{"headline": "A"}, "noise", {"headline": "B"}]')
    assert [o["headline"] for o in objects] == ["A", "B"]


def test_load_structured_data_skips_malformed_blocks():
    soup = BeautifulSoup(
        '<script type="application/ld+json">nope</script>'
        '<script type="application/ld+json">{"headline": "Good"}</script>'
        '<script>{"headline": "Not structured data"}</script>',
        "html.parser",
    )
    objects = load_structured_data(soup)
    assert objects == [{"headline": "Good"}]


def test_structured_data_image_and_author_shapes():
    ld = StructuredData([
        {"image": "https://cdn.example/plain.png", "author": "Just a string"},
        {"author": {"name": "Named"}},
    ])
    assert ld.image() == "https://cdn.example/plain.png"
    assert ld.author() == "Named"


def test_meta_property_reads_property_or_name():
    soup = BeautifulSoup(
        '<meta property="og:title" content="OG">'
        '<meta name="og:description" content="Named description">',
        "html.parser",
    )
    assert meta_property(soup, "og:title") == "OG"
    assert meta_property(soup, "og:description") == "Named description"
    assert meta_property(soup, "og:image") is None


def test_resolve_metadata_priority(reference):
    html = (
        '<meta property="og:title" content="Meta title">'
        '<script type="application/ld+json">{"headline": "LD title"}</script>'
        "<h1>Heading title</h1>"
    )
    soup = BeautifulSoup(html, "html.parser")
    metadata = resolve_metadata(soup, reference, "Default Author")

    assert metadata.title == "LD title"
    assert metadata.author == "Default Author"
    assert metadata.date == reference.date
