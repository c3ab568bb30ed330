"""Scraper for Go documentation pages."""

from __future__ import annotations

from collections.abc import Iterator

from bs4 import Tag

from scrape.base import ArticleScraper, fetch_page


class GoDocScraper(ArticleScraper):
    """Converts Go documentation articles to markdown."""

    def scrape_article(self, url: str) -> str:
        """Return the page's titles and article content as markdown."""
        document = fetch_page(url).document
        parts = [f"# {h1.get_text()}\n\n" for h1 in document.find_all("h1")]
        for article in document.find_all("article"):
            parts.extend(_render_article(article))
        return "".join(parts)


def _render_article(article: Tag) -> Iterator[str]:
    for child in article.find_all(True, recursive=False):
        name = child.name
        if name == "h2":
            yield f"## {child.get_text()}\n\n"
        elif name == "h3":
            yield f"### {child.get_text()}\n\n"
        elif name == "p":
            yield f"{parse_go_doc_paragraph(child)}\n\n"
        elif name == "ul":
            for item in child.find_all("li"):
                yield f"* {parse_go_doc_paragraph(item)}\n"
            yield "\n"
        elif name == "div" and "NOTE" in child.get("class", ()):
            for paragraph in child.find_all("p"):
                if "alert" not in paragraph.get("class", ()):
                    yield f"> {parse_go_doc_paragraph(paragraph)}\n\n"
            yield "\n"
        elif name == "pre":
            yield "```\n"
            for code in child.find_all("code"):
                yield f"{parse_go_doc_paragraph(code)}\n"
            yield "```\n\n"


def parse_go_doc_paragraph(element: Tag) -> str:
    """Render the element descendants of ``element`` as inline markdown.

    Images become ``_image_``; other descendants with content are emphasised,
    and a list nested in a list item becomes an indented sub-list.
    """
    parts = []
    for child in element.find_all(True):
        if child.name == "img":
            parts.append("_image_")
            continue
        text = parse_go_doc_paragraph(child)
        if not text:
            continue
        if element.name == "li" and child.name == "ul":
            parts.extend(
                f"  * {parse_go_doc_paragraph(item)}\n" for item in child.find_all("li")
            )
            continue
        parts.append(f"**{text}**")
    return "".join(parts)