"""
Job Card Scraper

Fetches one job search results page and prints the job titles found on it.
"""

from .config import ScraperConfig, SearchTarget, default_config
from .errors import FetchError, ParseError, ScraperError
from .extractor import JobCardExtractor, derive_title, parse_document
from .fetcher import FetchResult, PageFetcher
from .job_scraper import JobScraper, report_jobs

__version__ = "0.1.0"

__all__ = [
    'ScraperConfig',
    'SearchTarget',
    'default_config',
    'FetchError',
    'ParseError',
    'ScraperError',
    'JobCardExtractor',
    'derive_title',
    'parse_document',
    'FetchResult',
    'PageFetcher',
    'JobScraper',
    'report_jobs',
]
