import logging
import sys
from pprint import pprint
from typing import List, Optional

from .config import ScraperConfig, default_config
from .errors import ScraperError
from .extractor import JobCardExtractor, JobRecord
from .fetcher import PageFetcher

logger = logging.getLogger(__name__)


class JobScraper:
    def __init__(self, config: Optional[ScraperConfig] = None):
        self.config = config or default_config()
        self.extractor = JobCardExtractor(self.config.card_selector)

    def fetch_jobs(self) -> Optional[List[JobRecord]]:
        """
        Fetch the search page once and extract its job titles.

        Returns None when the page could not be fetched or parsed; the
        error is logged and nothing is retried.
        """
        with PageFetcher(self.config) as fetcher:
            result = fetcher.fetch()

        try:
            return self.parse_jobs(result.unwrap())
        except ScraperError as e:
            logger.error("%s", e)
            return None

    def parse_jobs(self, html) -> List[JobRecord]:
        return self.extractor.extract(html)


def report_jobs(jobs: List[JobRecord], stream=None):
    pprint(jobs, stream=stream or sys.stdout, sort_dicts=False)
