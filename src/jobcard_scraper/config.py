"""
Configuration settings for the job card scraper

This module contains the search target, listener settings and the
selectors used to pull job titles out of the search results page.
"""

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import quote, urlencode

# ==================== SEARCH TARGET ====================

SEARCH_BASE_URL = "https://www.indeed.com/jobs"
DEFAULT_KEYWORD = "junior web developer"
DEFAULT_LOCATION = "Remote"
DEFAULT_TRACKING_TOKEN = "92343f459a8aa675"  # opaque "vjk" value from the search page

# ==================== LISTENER SETTINGS ====================

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000

# ==================== HTTP SETTINGS ====================

HTTP_TIMEOUT: Optional[float] = None  # None = let requests decide
USER_AGENT: Optional[str] = None

# ==================== CSS SELECTORS ====================

CARD_SELECTOR = ".jobCard_mainContent"
TITLE_TAG = "h2"
TITLE_PART_TAG = "span"

# Two spans in the heading means a 3 character fragment precedes the title
PREFIXED_SPAN_COUNT = 2
PREFIX_LENGTH = 3


@dataclass(frozen=True)
class SearchTarget:
    """A single search results page, identified by its query parameters."""

    keyword: str = DEFAULT_KEYWORD
    location: str = DEFAULT_LOCATION
    tracking_token: str = DEFAULT_TRACKING_TOKEN
    base_url: str = SEARCH_BASE_URL

    @property
    def url(self) -> str:
        params = [("q", self.keyword), ("l", self.location)]
        if self.tracking_token:
            params.append(("vjk", self.tracking_token))
        return f"{self.base_url}?{urlencode(params, quote_via=quote)}"


@dataclass(frozen=True)
class ScraperConfig:
    target: SearchTarget = field(default_factory=SearchTarget)
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    timeout: Optional[float] = HTTP_TIMEOUT
    user_agent: Optional[str] = USER_AGENT
    card_selector: str = CARD_SELECTOR


def default_config() -> ScraperConfig:
    """Build the configuration for one scrape run from the module defaults."""
    return ScraperConfig()
