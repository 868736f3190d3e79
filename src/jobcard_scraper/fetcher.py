# fetcher.py

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from bs4 import UnicodeDammit

from .config import ScraperConfig
from .errors import FetchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a page fetch: either the HTML body or the error that stopped it."""

    html: Optional[str] = None
    error: Optional[FetchError] = None

    @classmethod
    def success(cls, html: str) -> "FetchResult":
        return cls(html=html)

    @classmethod
    def failure(cls, error: FetchError) -> "FetchResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        if self.error is not None:
            raise self.error from self.error.cause
        return self.html


def decode_body(response: requests.Response) -> str:
    """
    Decode the response body to text.

    requests falls back to ISO-8859-1 for text/html without a charset, so in
    that case the body is tried as UTF-8 first, then the meta tag charset,
    then a sniffed encoding.
    """
    content_type = response.headers.get("Content-Type", "")
    if "charset=" in content_type.lower():
        return response.text
    markup = UnicodeDammit(response.content, ["utf-8"], is_html=True).unicode_markup
    return markup if markup is not None else response.text


class PageFetcher:
    def __init__(self, config: ScraperConfig):
        self.config = config
        self.session = requests.Session()
        if config.user_agent:
            self.session.headers.update({"User-Agent": config.user_agent})

    def fetch(self) -> FetchResult:
        """Download the search page once. Transport errors and non-2xx statuses come back as a failure."""
        url = self.config.target.url
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.config.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            return FetchResult.failure(FetchError(url, e))

        logger.info("Fetched %s (%s, %d bytes)", url, response.status_code, len(response.content))
        return FetchResult.success(decode_body(response))

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
