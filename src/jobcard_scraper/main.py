# main.py

import logging
import threading
from typing import Optional

from .config import ScraperConfig, default_config
from .job_scraper import JobScraper, report_jobs
from .server import start_listener, stop_listener

logger = logging.getLogger(__name__)


def configure_logging(level=logging.INFO):
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def wait_forever():
    threading.Event().wait()


def main(config: Optional[ScraperConfig] = None, serve: bool = True):
    configure_logging()
    config = config or default_config()

    scraper = JobScraper(config)
    jobs = scraper.fetch_jobs()
    if jobs is not None:
        report_jobs(jobs)

    if not serve:
        return
    try:
        server = start_listener(config.host, config.port)
    except (OSError, SystemExit) as e:
        # werkzeug exits instead of raising when the port is taken
        logger.error("Could not start listener on port %d: %s", config.port, e)
        return
    try:
        wait_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        stop_listener(server)


if __name__ == "__main__":
    main()
