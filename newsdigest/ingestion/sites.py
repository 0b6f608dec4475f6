"""
Declarative scraping rules for the supported newsletter archives.

Both sites are hosted on Beehiiv and share one pipeline; everything that
differs between them (card shape, pagination, default author, bounds) lives
in a SiteConfig record.
"""
from typing import Dict, List, Literal
from urllib.parse import urlparse
from pydantic import BaseModel, Field


SPONSOR_PATTERNS = [r"presented by", r"sponsored by", r"advertisement"]

BASE_NOISE_SELECTORS = [
    "script",
    "style",
    "noscript",
    "nav",
    "header",
    "footer",
    "form",
    "button",
]

SHARE_ENDPOINTS = [
    "twitter.com/intent",
    "x.com/intent",
    "facebook.com/sharer",
    "linkedin.com/sharing",
]


class ListingRules(BaseModel):
    """Where a post card keeps its fields on a listing page."""
    card_depth: int = Field(
        0, ge=0, description="Ancestor levels from the anchor to the card."
    )
    title_selector: str = Field("h2", description="Heading holding the title.")
    date_selector: str = Field("span", description="Inline element holding the date.")


class PaginationRules(BaseModel):
    style: Literal["archive", "single"] = Field(
        "archive", description="Sequential archive pages or one fixed page."
    )
    listing_path: str = Field("/archive", description="Archive endpoint path.")
    page_param: str = Field("page", description="Query parameter for the page number.")
    homepage_first: bool = Field(
        True, description="Page 1 is the site root instead of the archive."
    )


class SiteConfig(BaseModel):
    """Scraping rules for one newsletter archive."""
    key: str
    name: str
    base_url: str
    post_path_prefix: str = "/p/"
    listing: ListingRules = Field(default_factory=ListingRules)
    pagination: PaginationRules = Field(default_factory=PaginationRules)
    default_author: str
    default_count: int = 5
    max_count: int = 30
    content_selectors: List[str] = Field(
        default_factory=lambda: ["#content-blocks", ".rendered-post", "main"]
    )
    noise_selectors: List[str] = Field(
        default_factory=lambda: list(BASE_NOISE_SELECTORS)
    )
    sponsor_selectors: str = "h1, h2, h3, h4, h5, p"
    sponsor_patterns: List[str] = Field(
        default_factory=lambda: list(SPONSOR_PATTERNS)
    )
    excluded_link_domains: List[str] = Field(default_factory=lambda: ["beehiiv.com"])
    excluded_link_prefixes: List[str] = Field(
        default_factory=lambda: list(SHARE_ENDPOINTS)
    )

    model_config = {
        "frozen": True,
    }

    @property
    def domain(self) -> str:
        netloc = urlparse(self.base_url).netloc
        return netloc[4:] if netloc.startswith("www.") else netloc

    @property
    def own_domains(self) -> List[str]:
        """Domains whose links never count as outbound."""
        return [self.domain] + list(self.excluded_link_domains)

    def listing_url(self, page: int = 1) -> str:
        """URL of the listing page with the given 1-based number."""
        base = self.base_url.rstrip("/")
        rules = self.pagination
        if rules.style == "single":
            return f"{base}{rules.listing_path}"
        if page == 1 and rules.homepage_first:
            return base
        return f"{base}{rules.listing_path}?{rules.page_param}={page}"


SUPERHUMAN = SiteConfig(
    key="superhuman",
    name="Superhuman AI Newsletter",
    base_url="https://www.superhuman.ai",
    # a > div.relative > div.card, title in <h2>, date in the first <span>
    listing=ListingRules(card_depth=2, title_selector="h2", date_selector="span"),
    pagination=PaginationRules(style="archive", listing_path="/archive"),
    default_author="Zain Kahn",
    default_count=7,
    max_count=30,
    noise_selectors=BASE_NOISE_SELECTORS + [
        '[class*="subscribe"]',
        '[class*="share"]',
        '[class*="follow"]',
        '[class*="feedback"]',
        '[class*="poll"]',
        ".advertisement",
    ],
)

THE_CODE = SiteConfig(
    key="the_code",
    name="The Code Newsletter",
    base_url="https://codenewsletter.ai",
    # the whole card is one <a> with an <h3> title and a <p> date
    listing=ListingRules(card_depth=0, title_selector="h3", date_selector="p"),
    # the archive serves ~9 posts without JavaScript and does not paginate
    pagination=PaginationRules(style="single", listing_path="/archive"),
    default_author="The Code team",
    default_count=5,
    max_count=9,
    noise_selectors=BASE_NOISE_SELECTORS + [
        '[class*="subscribe"]',
        '[class*="feedback"]',
        ".advertisement",
    ],
)

SITES: Dict[str, SiteConfig] = {site.key: site for site in (SUPERHUMAN, THE_CODE)}


def get_site(key: str) -> SiteConfig:
    try:
        return SITES[key]
    except KeyError:
        raise ValueError(
            f"Unknown site '{key}'. Available sites: {', '.join(SITES)}"
        ) from None
