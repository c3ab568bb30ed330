"""Scraper interfaces and page fetching."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from urllib.parse import urldefrag, urljoin

import requests
from bs4 import BeautifulSoup

USER_AGENT = "scrape/0.1"
TIMEOUT_SECONDS = 10


class ScrapeError(Exception):
    """Raised when a page cannot be fetched."""


@dataclass
class Page:
    """A fetched page: the final URL and its parsed document."""

    url: str
    document: BeautifulSoup

    def absolute_url(self, href: str) -> str:
        """Resolve ``href`` against the page (or its ``<base>``), without fragment."""
        if href.startswith("#"):
            return ""
        base = self.url
        base_tag = self.document.find("base", href=True)
        if base_tag is not None:
            base = urljoin(self.url, base_tag["href"])
        resolved, _ = urldefrag(urljoin(base, href))
        return resolved


def fetch_page(url: str) -> Page:
    """Download ``url`` and parse it as HTML.

    Responses that are not HTML yield an empty document.
    """
    try:
        response = requests.get(
            url, headers={"User-Agent": USER_AGENT}, timeout=TIMEOUT_SECONDS
        )
    except requests.RequestException as exc:
        raise ScrapeError(f"failed to fetch {url}: {exc}") from exc

    if response.status_code >= 203:
        raise ScrapeError(f"{url}: {response.status_code} {response.reason}")

    content_type = response.headers.get("Content-Type", "").lower()
    if "html" not in content_type:
        return Page(url=response.url, document=BeautifulSoup("", "html.parser"))

    encoding = response.encoding if "charset" in content_type else None
    document = BeautifulSoup(response.content, "html.parser", from_encoding=encoding)
    return Page(url=response.url, document=document)


class LinkScraper(ABC):
    """Something that collects article links from a page."""

    @abstractmethod
    def scrape_links(self, url: str) -> dict[str, str]:
        """Return a mapping of link text to absolute URL found at ``url``."""


class ArticleScraper(ABC):
    """Something that turns an article page into markdown."""

    @abstractmethod
    def scrape_article(self, url: str) -> str:
        """Return the article at ``url`` as markdown."""