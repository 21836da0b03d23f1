"""Construction of the scrapeables that start a scrape."""

from __future__ import annotations

from ilias_scraper.scraper.scrapeables.folder import IliasFolder


def build_root_node(index: int, name: str, url: str) -> IliasFolder:
    """The folder a course is scraped from, without a parent."""
    return IliasFolder(index, None, url, name)