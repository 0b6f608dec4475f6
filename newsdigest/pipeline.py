import time
import logging
from typing import Callable, List, Optional, Sequence

from .digest.formatter import format_digest
from .ingestion.fetcher import MarkupFetcher
from .ingestion.listing import ListingPaginator
from .ingestion.models import ExtractionOutcome, PostContent, PostReference
from .ingestion.post_article import PostExtractor
from .ingestion.sites import SiteConfig


logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.3


class DigestPipeline:
    """
    Sequential digest build for one site:
    collect references -> extract each post (with a politeness delay
    between fetches) -> format.
    """

    def __init__(
        self,
        site: SiteConfig,
        fetcher=None,
        delay: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.site = site
        self.fetcher = fetcher or MarkupFetcher()
        self.delay = DEFAULT_DELAY if delay is None else delay
        self.sleep = sleep
        self.paginator = ListingPaginator(site, self.fetcher, self.delay, sleep)
        self.extractor = PostExtractor(site, self.fetcher)

    @classmethod
    def from_config(cls, site: SiteConfig, config: dict, **kwargs) -> "DigestPipeline":
        return cls(
            site,
            fetcher=MarkupFetcher.from_config(config),
            delay=config.get("fetch_delay_seconds"),
            **kwargs,
        )

    def collect(self, count: int) -> List[PostReference]:
        references = self.paginator.collect(count)
        logger.info(f"Collected {len(references)} references from {self.site.name}")
        return references

    def resolve(self, references: Sequence[PostReference]) -> List[ExtractionOutcome]:
        """
        Extract every reference, one at a time. A failed post becomes a
        failed outcome; it never aborts the remaining ones.
        """
        outcomes = []
        for i, reference in enumerate(references):
            try:
                content = self.extractor.extract(reference)
                outcomes.append(ExtractionOutcome.ok(reference, content))
            except Exception as e:
                logger.warning(f"Could not extract {reference.url}: {e}")
                outcomes.append(ExtractionOutcome.failed(reference, str(e)))

            if i < len(references) - 1:
                self.sleep(self.delay)
        return outcomes

    def extract_posts(self, references: Sequence[PostReference]) -> List[PostContent]:
        """One PostContent per reference, placeholders standing in for failures."""
        outcomes = self.resolve(references)

        failed = sum(1 for outcome in outcomes if not outcome.is_ok)
        if failed:
            logger.warning(f"{failed}/{len(outcomes)} posts could not be extracted")

        return [outcome.to_content(self.site.default_author) for outcome in outcomes]

    def build(self, count: int) -> str:
        """
        Build the digest for the `count` most recent posts.
        Listing fetch errors propagate; post failures become placeholders.
        """
        return self.render(self.collect(count))

    def render(self, references: Sequence[PostReference]) -> str:
        """Resolve the given references and format them as a digest."""
        return format_digest(self.site.name, self.extract_posts(references))

    def close(self) -> None:
        """Release the fetcher's connection pool."""
        self.fetcher.close()

    def __enter__(self) -> "DigestPipeline":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
