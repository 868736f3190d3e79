"""
Job title extraction from a search results page.

Each element matching the card selector becomes exactly one record, in
document order. The title is the concatenated text of the spans inside
the card's first heading; when the heading holds exactly two spans the
text starts with a short fragment that is dropped.
"""

import logging
from typing import Dict, List

from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup

from .config import (
    CARD_SELECTOR,
    PREFIX_LENGTH,
    PREFIXED_SPAN_COUNT,
    TITLE_PART_TAG,
    TITLE_TAG,
)
from .errors import ParseError

logger = logging.getLogger(__name__)

JobRecord = Dict[str, str]


def parse_document(html) -> BeautifulSoup:
    """Build a queryable tree from raw HTML. Malformed markup is tolerated."""
    if not isinstance(html, (str, bytes)):
        raise ParseError(f"Expected HTML text, got {type(html).__name__}")
    try:
        return BeautifulSoup(html, "html.parser")
    except (FeatureNotFound, ParserRejectedMarkup) as e:
        raise ParseError(f"Could not parse HTML: {e}") from e


def derive_title(card) -> str:
    heading = card.find(TITLE_TAG)
    spans = heading.find_all(TITLE_PART_TAG) if heading is not None else []
    raw_title = "".join(span.get_text() for span in spans)
    if len(spans) == PREFIXED_SPAN_COUNT:
        return raw_title[PREFIX_LENGTH:]
    return raw_title


class JobCardExtractor:
    def __init__(self, card_selector: str = CARD_SELECTOR):
        self.card_selector = card_selector

    def extract(self, html) -> List[JobRecord]:
        soup = parse_document(html)
        cards = soup.select(self.card_selector)
        logger.info("Found %d job cards", len(cards))
        return [{"jobTitle": derive_title(card)} for card in cards]
