"""
Submodule for all scraping-related logic.
Includes the fetcher, listing discovery, post extraction and site rules.
"""

from .errors import NewsdigestError, FetchError, ParseError, ExtractionError
from .models import PostReference, PostContent, ExternalLink, ExtractionOutcome
from .sites import SiteConfig, SUPERHUMAN, THE_CODE, SITES, get_site
from .fetcher import MarkupFetcher
from .listing import extract_listings, ListingPaginator
from .post_article import PostExtractor
from .parser import extract_domain, html_to_markdown, clean_markdown

__all__ = [
    "NewsdigestError",
    "FetchError",
    "ParseError",
    "ExtractionError",
    "PostReference",
    "PostContent",
    "ExternalLink",
    "ExtractionOutcome",
    "SiteConfig",
    "SUPERHUMAN",
    "THE_CODE",
    "SITES",
    "get_site",
    "MarkupFetcher",
    "extract_listings",
    "ListingPaginator",
    "PostExtractor",
    "extract_domain",
    "html_to_markdown",
    "clean_markdown",
]
