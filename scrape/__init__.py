"""Scrape article links and convert articles to Markdown."""

__version__ = "0.1.0"