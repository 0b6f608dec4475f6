import re
import time
import logging
from typing import Callable, List, Optional
from urllib.parse import urljoin, urlparse

from scrapy import Selector

from .models import PostReference
from .parser import extract_domain
from .sites import SiteConfig


logger = logging.getLogger(__name__)


def selector_text(selector) -> str:
    """All descendant text of a selector, whitespace-collapsed."""
    if selector is None:
        return ""
    return re.sub(r"\s+", " ", "".join(selector.css("::text").getall())).strip()


def _card_for(link: Selector, depth: int) -> Selector:
    """Ancestor `depth` levels above the anchor, or the anchor itself."""
    if depth <= 0:
        return link
    ancestors = link.xpath("/".join([".."] * depth))
    return ancestors[0] if ancestors else link


def _first(card: Selector, css: str) -> Optional[Selector]:
    matches = card.css(css)
    return matches[0] if matches else None


def extract_listings(markup: str, base_url: str, site: SiteConfig) -> List[PostReference]:
    """
    Parse a listing/archive page into post references.

    Every anchor pointing at a post path (on the site host) yields one
    reference; duplicate hrefs (thumbnail link + title link of the same card)
    are collapsed, first occurrence wins.

    Args:
        markup: Raw HTML of the listing page
        base_url: URL the page was fetched from, for resolving hrefs
        site: Site rules (post prefix, card shape)

    Returns:
        References in document order
    """
    selector = Selector(text=markup)
    prefix = site.post_path_prefix
    site_host = extract_domain(site.base_url)
    rules = site.listing

    seen = set()
    references = []

    for link in selector.css("a[href]"):
        href = (link.attrib.get("href") or "").strip()
        if not href:
            continue
        resolved = urlparse(urljoin(base_url, href))
        if extract_domain(resolved.geturl()) != site_host:
            continue
        path = resolved.path
        if not path.startswith(prefix) or path in seen:
            continue
        seen.add(path)

        slug = path[len(prefix):].strip("/")
        if not slug:
            continue
        url = f"{site.base_url.rstrip('/')}{path}"
        card = _card_for(link, rules.card_depth)

        title = (
            selector_text(_first(card, rules.title_selector))
            or (card.css("img::attr(alt)").get() or "").strip()
            or slug.replace("-", " ")
        )
        date = selector_text(_first(card, rules.date_selector))

        references.append(PostReference(title=title, date=date, url=url, slug=slug))

    logger.info(f"Found {len(references)} post links on {base_url}")
    return references


class ListingPaginator:
    """
    Walks listing pages until `count` references are collected or a page
    yields nothing new. Sleeps `delay` seconds before every page but the first.
    """

    def __init__(
        self,
        site: SiteConfig,
        fetcher,
        delay: float = 0.3,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.site = site
        self.fetcher = fetcher
        self.delay = delay
        self.sleep = sleep

    def fetch_page(self, page: int) -> List[PostReference]:
        url = self.site.listing_url(page)
        markup = self.fetcher.fetch(url)
        return extract_listings(markup, url, self.site)

    def collect(self, count: int) -> List[PostReference]:
        """
        Collect up to `count` references with unique URLs.
        Listing fetch errors propagate to the caller.
        """
        if count <= 0:
            return []

        if self.site.pagination.style == "single":
            return self.fetch_page(1)[:count]

        collected: List[PostReference] = []
        seen = set()
        page = 1

        while len(collected) < count:
            if page > 1:
                self.sleep(self.delay)

            batch = [ref for ref in self.fetch_page(page) if ref.url not in seen]
            if not batch:
                logger.info(
                    f"Page {page} of {self.site.name} yielded no new posts, stopping"
                )
                break

            for ref in batch:
                seen.add(ref.url)
                collected.append(ref)
            page += 1

        return collected[:count]
