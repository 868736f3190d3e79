import dataclasses
import unittest

from jobcard_scraper.config import DEFAULT_PORT, ScraperConfig, SearchTarget, default_config


class TestSearchTarget(unittest.TestCase):

    def test_default_url(self):
        self.assertEqual(
            SearchTarget().url,
            'https://www.indeed.com/jobs?q=junior%20web%20developer&l=Remote&vjk=92343f459a8aa675',
        )

    def test_url_without_tracking_token(self):
        target = SearchTarget(keyword="data engineer", location="New York, NY", tracking_token="")
        self.assertEqual(target.url, 'https://www.indeed.com/jobs?q=data%20engineer&l=New%20York%2C%20NY')

    def test_is_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            SearchTarget().keyword = "other"


class TestScraperConfig(unittest.TestCase):

    def test_defaults(self):
        config = default_config()
        self.assertEqual(config.port, DEFAULT_PORT)
        self.assertEqual(config.card_selector, '.jobCard_mainContent')
        self.assertIsNone(config.timeout)
        self.assertEqual(config.target, SearchTarget())

    def test_each_config_gets_its_own_target(self):
        custom = ScraperConfig(target=SearchTarget(keyword="qa"))
        self.assertEqual(default_config().target.keyword, "junior web developer")
        self.assertEqual(custom.target.keyword, "qa")


if __name__ == '__main__':
    unittest.main()
