"""Scraper for Tofugu articles."""

from __future__ import annotations

from bs4 import Tag

from scrape.base import ArticleScraper, fetch_page
from scrape.util import remove_extra_spaces, trim_spaces_and_line_breaks

_HEADING_LEVELS = {"h2": 2, "h3": 3, "h4": 4, "h5": 5}
_BODY_SELECTORS = (
    "article div.main",
    "article div.article-content div.container",
)


class TofuguScraper(ArticleScraper):
    """Converts Tofugu articles to markdown."""

    def scrape_article(self, url: str) -> str:
        """Return the title, meta line and article body as markdown."""
        document = fetch_page(url).document
        parts = [
            f"# {trim_spaces_and_line_breaks(title.get_text())}\n\n"
            for title in document.select("h1.article-title")
        ]
        parts.extend(
            f"{trim_spaces_and_line_breaks(meta.get_text())}\n\n"
            for meta in document.select("div.article-header-elements ul.meta")
        )
        for selector in _BODY_SELECTORS:
            parts.extend(_parse_article(body) for body in document.select(selector))
        return "".join(parts)


def _parse_article(container: Tag) -> str:
    parts = []
    for child in container.find_all(True, recursive=False):
        name = child.name
        if name in _HEADING_LEVELS:
            hashes = "#" * _HEADING_LEVELS[name]
            parts.append(f"{hashes} {remove_extra_spaces(child.get_text())}\n\n")
        elif name == "p":
            parts.append(f"{remove_extra_spaces(child.get_text())}\n\n")
        elif name == "ul":
            if "example-sentence" in child.get("class", ()):
                parts.append(_parse_example_list(child))
            else:
                parts.append(_parse_table_of_contents(child))
        elif name == "ol":
            for number, item in enumerate(child.find_all("li"), start=1):
                parts.append(f"{number}. {trim_spaces_and_line_breaks(item.get_text())}\n")
            parts.append("\n")
        elif name == "table":
            parts.append(_parse_table(child))
        elif name == "blockquote":
            parts.append(f"> {parse_tofugu_blockquote(child.get_text())}\n\n")
    return "".join(parts)


def _parse_table_of_contents(listing: Tag) -> str:
    parts = []
    for item in listing.find_all("li"):
        if len(item.find_parents("ul")) > 1:
            # nested items are written below, under their parent item
            continue
        parts.append(_parse_list_item(item, 0))
        for sub_item in item.find_all("li"):
            parts.append(_parse_list_item(sub_item, 1))
            parts.extend(
                _parse_list_item(sub_sub_item, 2) for sub_sub_item in sub_item.find_all("li")
            )
    parts.append("\n")
    return "".join(parts)


def _parse_list_item(item: Tag, level: int) -> str:
    return f"{'  ' * level}* {first_line(item.get_text())}\n"


def _parse_example_list(listing: Tag) -> str:
    labels = {0: "- Japanese:\n", 1: "- English:\n"}
    parts = ["Example\n\n"]
    for index, item in enumerate(listing.find_all("li")):
        parts.append(labels.get(index, ""))
        parts.append(f"  * {trim_spaces_and_line_breaks(item.get_text())}\n")
        parts.append("\n")
    parts.append("\n")
    return "".join(parts)


def _parse_table(table: Tag) -> str:
    parts: list[str] = []
    for row_index, row in enumerate(table.find_all("tr")):
        headers = row.find_all("th")
        cells = row.find_all("td")
        parts.extend(f"| {parse_tofugu_table_cell(th.get_text())} " for th in headers)
        if row_index == 0:
            if parts:
                parts.append("|\n")
                parts.extend("| --- " for _ in headers)
            else:
                # no header cells: write an empty header row so markdown renders a table
                parts.append("| " * len(cells) + "|\n")
                parts.append("|---" * len(cells) + "|\n")
        parts.extend(f"| {parse_tofugu_table_cell(td.get_text())} " for td in cells)
        parts.append("|\n")
    parts.append("\n")
    return "".join(parts)


def first_line(text: str) -> str:
    """Return ``text`` up to its first line feed."""
    return text.split("\n", 1)[0]


def parse_tofugu_table_cell(text: str) -> str:
    """Flatten cell text onto one line, joining its lines with ``"; "``."""
    return trim_spaces_and_line_breaks(text).replace("\n\n", "\n").replace("\n", "; ")


def parse_tofugu_blockquote(text: str) -> str:
    """Trim quote text and prefix each following line with ``"> "``."""
    return trim_spaces_and_line_breaks(text).replace("\n", "\n> ")