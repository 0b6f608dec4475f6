"""
Post metadata resolution.

Each field is resolved through an ordered chain of resolvers; the first one
yielding a non-empty value wins:

    title           JSON-LD headline > og:title > first <h1> > listing title
    date            JSON-LD datePublished (long form) > listing date
    subtitle        JSON-LD description > og:description > ""
    featured_image  JSON-LD image.url > og:image > None
    author          JSON-LD author.name > site default
"""
import re
import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from bs4 import BeautifulSoup

from .errors import ParseError
from .models import PostReference
from ..utils.date import to_long_date


logger = logging.getLogger(__name__)

Resolver = Callable[[], Optional[str]]


def first_non_empty(resolvers: Iterable[Resolver], default=None):
    """Run resolvers in order and return the first non-empty (stripped) value."""
    for resolve in resolvers:
        value = resolve()
        if isinstance(value, str):
            value = value.strip()
        if value:
            return value
    return default


def _flatten(data: Any) -> List[Dict[str, Any]]:
    """Top-level arrays and @graph containers both hold candidate objects."""
    items = data if isinstance(data, list) else [data]
    objects = []
    for item in items:
        if not isinstance(item, dict):
            continue
        objects.append(item)
        graph = item.get("@graph")
        if isinstance(graph, list):
            objects.extend(g for g in graph if isinstance(g, dict))
    return objects


def parse_structured_block(raw: str) -> List[Dict[str, Any]]:
    try:
        return _flatten(json.loads(raw))
    except (ValueError, TypeError) as e:
        raise ParseError("JSON-LD block", e) from e


def load_structured_data(soup: BeautifulSoup) -> List[Dict[str, Any]]:
    """
    Parse every JSON-LD script of the page. Malformed blocks are skipped.
    """
    objects = []
    for script in soup.find_all("script", attrs={"type": "application/ld+json"}):
        raw = script.string or script.get_text() or ""
        try:
            objects.extend(parse_structured_block(raw))
        except ParseError as e:
            logger.debug(f"Skipping structured data: {e}")
    return objects


def _image_url(value: Any) -> Optional[str]:
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, dict):
        return value.get("url")
    if isinstance(value, str):
        return value
    return None


def _author_name(value: Any) -> Optional[str]:
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, dict):
        return value.get("name")
    return None


class StructuredData:
    """Field lookups across the JSON-LD objects of a page, first object wins."""

    def __init__(self, objects: List[Dict[str, Any]]):
        self.objects = objects

    def first(self, field: str, transform: Callable[[Any], Optional[str]] = None):
        for obj in self.objects:
            value = obj.get(field)
            if transform is not None:
                value = transform(value)
            if isinstance(value, str) and value.strip():
                return value
        return None

    def headline(self) -> Optional[str]:
        return self.first("headline")

    def date_published(self) -> Optional[str]:
        return self.first("datePublished", to_long_date)

    def description(self) -> Optional[str]:
        return self.first("description")

    def image(self) -> Optional[str]:
        return self.first("image", _image_url)

    def author(self) -> Optional[str]:
        return self.first("author", _author_name)


def meta_property(soup: BeautifulSoup, name: str) -> Optional[str]:
    tag = soup.find("meta", attrs={"property": name}) or \
        soup.find("meta", attrs={"name": name})
    return tag.get("content") if tag else None


def first_heading(soup: BeautifulSoup) -> Optional[str]:
    h1 = soup.find("h1")
    if not h1:
        return None
    return re.sub(r"\s+", " ", h1.get_text()).strip()


@dataclass(frozen=True)
class PostMetadata:
    title: str
    date: str
    subtitle: str
    author: str
    featured_image: Optional[str]


def resolve_metadata(
    soup: BeautifulSoup,
    reference: PostReference,
    default_author: str,
) -> PostMetadata:
    """Resolve post metadata from the full page soup (before any cleanup)."""
    ld = StructuredData(load_structured_data(soup))

    title = first_non_empty([
        ld.headline,
        lambda: meta_property(soup, "og:title"),
        lambda: first_heading(soup),
        lambda: reference.title,
    ], default="")

    date = first_non_empty([
        ld.date_published,
        lambda: reference.date,
    ], default="")

    subtitle = first_non_empty([
        ld.description,
        lambda: meta_property(soup, "og:description"),
    ], default="")

    featured_image = first_non_empty([
        ld.image,
        lambda: meta_property(soup, "og:image"),
    ])

    author = first_non_empty([ld.author], default=default_author)

    return PostMetadata(
        title=title,
        date=date,
        subtitle=subtitle,
        author=author,
        featured_image=featured_image,
    )
