"""Exceptions raised by the scraper."""


class ScraperError(Exception):
    """Base class for scraper failures."""


class FetchError(ScraperError):
    """The search page could not be downloaded."""

    def __init__(self, url, cause):
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to load page {url}: {cause}")


class ParseError(ScraperError):
    """The HTML parser could not build a document from the response body."""
