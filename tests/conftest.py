import json
import pytest

from newsdigest.ingestion.errors import FetchError
from newsdigest.ingestion.models import PostReference
from newsdigest.ingestion.sites import SiteConfig, ListingRules, PaginationRules


class FakeFetcher:
    """Serves canned markup by URL and records every fetch."""

    def __init__(self, pages=None, failures=None):
        self.pages = dict(pages or {})
        self.failures = dict(failures or {})
        self.calls = []
        self.closed = False

    def close(self):
        self.closed = True

    def fetch(self, url):
        self.calls.append(url)
        if url in self.failures:
            raise self.failures[url]
        if url not in self.pages:
            raise FetchError(404, url)
        return self.pages[url]


class RecordingSleep:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


def superhuman_card(slug, title, date):
    return f"""
    <div class="card">
      <div class="relative">
        <a href="/p/{slug}"><img src="https://cdn.example/{slug}.png" alt="{title} thumbnail"></a>
      </div>
      <div class="relative">
        <a href="/p/{slug}"><h2>{title}</h2></a>
      </div>
      <span>{date}</span>
    </div>
    """


def superhuman_listing(posts):
    cards = "".join(superhuman_card(*post) for post in posts)
    return f"<html><body><main><div class='grid'>{cards}</div></main></body></html>"


def code_listing(posts):
    cards = "".join(
        f'<a href="/p/{slug}"><h3>{title}</h3><p>{date}</p></a>'
        for slug, title, date in posts
    )
    return f"<html><body><div class='archive'>{cards}</div></body></html>"


def post_page(title="Body heading", ld=None, og=None, body="<p>Hello world.</p>",
              container='<div id="content-blocks">{body}</div>'):
    scripts = ""
    for block in ld or []:
        raw = block if isinstance(block, str) else json.dumps(block)
        scripts += f'<script type="application/ld+json">{raw}</script>'
    metas = "".join(
        f'<meta property="og:{key}" content="{value}">'
        for key, value in (og or {}).items()
    )
    heading = f"<h1>{title}</h1>" if title else ""
    return (
        f"<html><head>{metas}{scripts}</head>"
        f"<body><nav><a href='/'>Home</a></nav>{heading}"
        f"{container.format(body=body)}"
        f"<footer>Footer text</footer></body></html>"
    )


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def example_site():
    return SiteConfig(
        key="example",
        name="Example Weekly",
        base_url="https://sourcesite.example",
        listing=ListingRules(card_depth=2, title_selector="h2", date_selector="span"),
        pagination=PaginationRules(style="archive", listing_path="/archive"),
        default_author="Example Editor",
        default_count=3,
        max_count=10,
        noise_selectors=[
            "script", "style", "noscript", "nav", "header", "footer", "form",
            "button", '[class*="subscribe"]', '[class*="share"]', ".advertisement",
        ],
    )


@pytest.fixture
def reference():
    return PostReference(
        title="Listing title",
        date="3 hours ago",
        url="https://sourcesite.example/p/listing-title",
        slug="listing-title",
    )
