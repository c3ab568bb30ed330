"""Command line interface: scrape links and articles."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from scrape.base import ScrapeError
from scrape.factory import (
    UnsupportedSourceError,
    create_article_scraper,
    create_link_scraper,
)

ARTICLE_FORMATS = ("markdown",)
ARTICLE_SOURCES = ("guardian", "microsoft", "go", "tofugu")
LINK_SOURCES = ("guardian",)


class OptionsError(ValueError):
    """Raised when command options are invalid."""


class _CommandFailed(Exception):
    pass


@dataclass
class ArticleOptions:
    """Options of the ``article`` command."""

    format: str = "markdown"
    source: str = ""
    url: str = ""

    def validate(self) -> ArticleOptions:
        """Check format, then source, then URL; return the options."""
        if self.format not in ARTICLE_FORMATS:
            raise OptionsError(f"invalid format: {self.format}")
        if self.source not in ARTICLE_SOURCES:
            raise OptionsError(f"invalid source: {self.source}")
        if not self.url:
            raise OptionsError("url is required")
        return self


@dataclass
class LinksOptions:
    """Options of the ``links`` command."""

    source: str = ""
    url: str = ""

    def validate(self) -> LinksOptions:
        """Check source, then URL; return the options."""
        if self.source not in LINK_SOURCES:
            raise OptionsError(f"invalid source: {self.source}")
        if not self.url:
            raise OptionsError("url is required")
        return self


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scrape", description="A CLI tool scrape links and articles"
    )
    parser.add_argument(
        "--config", default="", help="config file (default is $HOME/.scrape.yaml)"
    )
    commands = parser.add_subparsers(dest="command")

    article = commands.add_parser("article", help="Scrape an article")
    article.add_argument("--format", default="markdown", help="Output format (markdown)")
    article.add_argument(
        "--source", required=True, help="Source type (e.g., guardian, etc)"
    )
    article.add_argument(
        "-u", "--url", required=True, help="URL of the article to scrape"
    )

    links = commands.add_parser("links", help="scrape links")
    links.add_argument("-u", "--url", required=True, help="URL of the links to scrape")
    links.add_argument(
        "--source", required=True, help="Source type (e.g., guardian, etc)"
    )
    return parser


def _run_article(options: ArticleOptions) -> None:
    try:
        scraper = create_article_scraper(options.source)
    except UnsupportedSourceError as exc:
        raise _CommandFailed(f"error creating scraper: {exc}") from exc
    try:
        markdown = scraper.scrape_article(options.url)
    except ScrapeError as exc:
        raise _CommandFailed(f"error scraping article: {exc}") from exc
    print(markdown)


def _run_links(options: LinksOptions) -> None:
    try:
        scraper = create_link_scraper(options.source)
    except UnsupportedSourceError as exc:
        raise _CommandFailed(f"error creating scraper: {exc}") from exc
    try:
        links = scraper.scrape_links(options.url)
    except ScrapeError as exc:
        raise _CommandFailed(f"error scraping links: {exc}") from exc
    for text, article_url in links.items():
        print(f"[{text}]({article_url})")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "article":
            _run_article(
                ArticleOptions(format=args.format, source=args.source, url=args.url).validate()
            )
        elif args.command == "links":
            _run_links(LinksOptions(source=args.source, url=args.url).validate())
        else:
            parser.print_help()
    except (OptionsError, _CommandFailed) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())