"""Scraper for Guardian front pages and articles."""

from __future__ import annotations

from scrape.base import ArticleScraper, LinkScraper, fetch_page

# Each selector is rendered over the whole page before the next one.
_ARTICLE_SECTIONS = (
    ("h1", "# {}\n\n"),
    ("div[data-gu-name=standfirst] p", "## {}\n\n"),
    ("div.article-body-commercial-selector p", "{}\n\n"),
)


class GuardianScraper(LinkScraper, ArticleScraper):
    """Collects headline links and converts Guardian articles to markdown."""

    def scrape_links(self, url: str) -> dict[str, str]:
        """Return a mapping of link label to absolute URL for lead stories."""
        page = fetch_page(url)
        return {
            anchor.get("aria-label", ""): page.absolute_url(anchor.get("href", ""))
            for anchor in page.document.find_all("a")
            if "group-0" in anchor.get("data-link-name", "")
        }

    def scrape_article(self, url: str) -> str:
        """Return the title, standfirst and body paragraphs as markdown."""
        document = fetch_page(url).document
        return "".join(
            template.format(element.get_text())
            for selector, template in _ARTICLE_SECTIONS
            for element in document.select(selector)
        )