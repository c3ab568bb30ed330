"""Choosing a scraper by source name."""

from __future__ import annotations

from scrape.base import ArticleScraper, LinkScraper
from scrape.go_doc import GoDocScraper
from scrape.guardian import GuardianScraper
from scrape.microsoft_learn import MicrosoftLearnScraper
from scrape.tofugu import TofuguScraper

_LINK_SCRAPERS: dict[str, type[LinkScraper]] = {
    "guardian": GuardianScraper,
}

_ARTICLE_SCRAPERS: dict[str, type[ArticleScraper]] = {
    "guardian": GuardianScraper,
    "microsoft": MicrosoftLearnScraper,
    "go": GoDocScraper,
    "tofugu": TofuguScraper,
}


class UnsupportedSourceError(ValueError):
    """Raised when no scraper exists for a source name."""

    def __init__(self, source_type: str) -> None:
        super().__init__(f"source {source_type} is not supported")
        self.source_type = source_type


def create_link_scraper(source_type: str) -> LinkScraper:
    """Return a link scraper for ``source_type``."""
    try:
        return _LINK_SCRAPERS[source_type]()
    except KeyError:
        raise UnsupportedSourceError(source_type) from None


def create_article_scraper(source_type: str) -> ArticleScraper:
    """Return an article scraper for ``source_type``."""
    try:
        return _ARTICLE_SCRAPERS[source_type]()
    except KeyError:
        raise UnsupportedSourceError(source_type) from None