import re
import time
import logging
from typing import List
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from .errors import ExtractionError
from .metadata import resolve_metadata
from .models import ExternalLink, PostContent, PostReference
from .parser import domain_matches, extract_domain, html_to_markdown
from .sites import SiteConfig


logger = logging.getLogger(__name__)


class PostExtractor:
    """
    Turns a post reference into PostContent: fetch the page, resolve metadata,
    isolate the content region, strip noise and sponsor blocks, convert to
    markdown and collect the outbound links.
    """

    def __init__(self, site: SiteConfig, fetcher):
        self.site = site
        self.fetcher = fetcher
        self.sponsor_patterns = [
            re.compile(p, re.IGNORECASE) for p in site.sponsor_patterns
        ]

    def extract(self, reference: PostReference) -> PostContent:
        """
        Fetch and extract a single post.

        Raises:
            ExtractionError: wrapping the fetch or extraction failure
        """
        start_time = time.time()
        try:
            markup = self.fetcher.fetch(reference.url)
            content = self.extract_from_markup(reference, markup)
        except Exception as e:
            raise ExtractionError(reference, e) from e

        elapsed_time = time.time() - start_time
        logger.info(
            f"Extracted '{content.title}' ({len(content.body_markdown)} chars, "
            f"{len(content.external_links)} links) in {elapsed_time:.1f}s"
        )
        return content

    def extract_from_markup(self, reference: PostReference, markup: str) -> PostContent:
        soup = BeautifulSoup(markup, "html.parser")
        metadata = resolve_metadata(soup, reference, self.site.default_author)

        region = self.select_content_region(soup)
        self.strip_noise(region)
        self.strip_sponsors(region)

        body = html_to_markdown(region.decode_contents())
        links = self.collect_links(region, reference.url)

        return PostContent(
            title=metadata.title,
            date=metadata.date,
            url=reference.url,
            slug=reference.slug,
            author=metadata.author,
            subtitle=metadata.subtitle,
            body_markdown=body,
            external_links=links,
            featured_image=metadata.featured_image,
        )

    def select_content_region(self, soup: BeautifulSoup):
        for css in self.site.content_selectors:
            region = soup.select_one(css)
            if region is not None:
                return region
        logger.debug("No content container matched, falling back to <body>")
        return soup.body or soup

    def strip_noise(self, region) -> None:
        for css in self.site.noise_selectors:
            for el in region.select(css):
                if not el.decomposed:
                    el.decompose()

    def is_sponsored(self, text: str) -> bool:
        return any(p.search(text) for p in self.sponsor_patterns)

    def strip_sponsors(self, region) -> None:
        for el in region.select(self.site.sponsor_selectors):
            # already removed together with a sponsored ancestor
            if el.decomposed:
                continue
            if self.is_sponsored(el.get_text(" ", strip=True)):
                el.decompose()

    def is_outbound(self, url: str) -> bool:
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https"):
            return False
        domain = extract_domain(url)
        if domain_matches(domain, self.site.own_domains):
            return False
        stripped = f"{domain}{parsed.path}"
        return not any(
            stripped.startswith(prefix) for prefix in self.site.excluded_link_prefixes
        )

    def collect_links(self, region, page_url: str) -> List[ExternalLink]:
        """Outbound links of the cleaned region, unique by URL, document order."""
        seen = set()
        links = []
        for a in region.select("a[href]"):
            href = (a.get("href") or "").strip()
            text = re.sub(r"\s+", " ", a.get_text(" ", strip=True))
            if not href or href.startswith("#") or not text:
                continue
            url = urljoin(page_url, href)
            if url in seen or not self.is_outbound(url):
                continue
            seen.add(url)
            links.append(ExternalLink(text=text, url=url))
        return links

