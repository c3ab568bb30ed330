"""Scraper for Microsoft Learn documentation pages."""

from __future__ import annotations

from collections.abc import Iterator

from bs4 import Tag

from scrape.base import ArticleScraper, fetch_page


class MicrosoftLearnScraper(ArticleScraper):
    """Converts Microsoft Learn articles to markdown."""

    def scrape_article(self, url: str) -> str:
        """Return the page's titles and content as markdown."""
        document = fetch_page(url).document
        parts = [f"# {h1.get_text()}\n\n" for h1 in document.find_all("h1")]
        for content in document.select("div.content"):
            parts.extend(_render_content(content))
        return "".join(parts)


def _render_content(content: Tag) -> Iterator[str]:
    for child in content.find_all(True, recursive=False):
        name = child.name
        if name == "p":
            yield f"{parse_microsoft_paragraph(child)}\n\n"
        elif name == "ul":
            for item in child.find_all("li"):
                yield f"* {parse_microsoft_paragraph(item)}\n"
            yield "\n"
        elif name == "div" and "NOTE" in child.get("class", ()):
            for paragraph in child.find_all("p"):
                if "alert" not in paragraph.get("class", ()):
                    yield f"> {parse_microsoft_paragraph(paragraph)}\n\n"
            yield "\n"
        elif name == "h2":
            yield f"## {child.get_text()}\n\n"
        elif name == "h3":
            yield f"### {child.get_text()}\n\n"


def parse_microsoft_paragraph(element: Tag) -> str:
    """Render the element descendants of ``element`` as inline markdown.

    Spans (usually icons) become ``_image_``; every other descendant is
    emphasised.
    """
    return "".join(
        "_image_" if child.name == "span" else f"**{parse_microsoft_paragraph(child)}**"
        for child in element.find_all(True)
    )