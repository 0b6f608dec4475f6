import logging
from typing import Optional

import requests

from .errors import FetchError


logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_ACCEPT = (
    "text/html,application/xhtml+xml,"
    "application/xml;q=0.9,*/*;q=0.8"
)


class MarkupFetcher:
    """
    Plain GET fetcher with a browser-like identity.
    One attempt per URL; non-success statuses raise FetchError.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        accept: str = DEFAULT_ACCEPT,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": user_agent,
            "Accept": accept,
        })

    @classmethod
    def from_config(cls, config: dict) -> "MarkupFetcher":
        return cls(
            user_agent=config.get("user_agent") or DEFAULT_USER_AGENT,
            accept=config.get("accept") or DEFAULT_ACCEPT,
            timeout=config.get("request_timeout"),
        )

    def fetch(self, url: str) -> str:
        """
        Retrieve the raw markup of a page.

        Args:
            url: Absolute URL to GET

        Returns:
            Response body as text

        Raises:
            FetchError: on a non-success status or a transport failure
        """
        logger.debug(f"Fetching {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Request failed for {url}: {e}")
            raise FetchError(None, url, f"Request failed fetching {url}: {e}") from e

        if not response.ok:
            raise FetchError(response.status_code, url)

        return response.text

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "MarkupFetcher":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
