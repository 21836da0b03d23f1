"""Scraping of media libraries, whose video list is loaded asynchronously."""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from bs4 import BeautifulSoup, Tag

from ilias_scraper.scraper.options import ScrapeOptions
from ilias_scraper.scraper.request import request_page
from ilias_scraper.scraper.scrapable import Scrapeable, build_scrapeable
from ilias_scraper.scraper.scrape_object import ScrapeObject
from ilias_scraper.scraper.scrape_type import ScrapeType
from ilias_scraper.utils.sanitize import sanitize_name

_BASE_URL = "https://ilias.studium.kit.edu"
_ASYNC_PREFIX = "url: '"
_ASYNC_START = _ASYNC_PREFIX + "/ilias.php"
_ASYNC_SUFFIX = "&async=true"
_ASYNC_END = _ASYNC_SUFFIX + "'"

_ROWS = "table.table > tbody > tr"
_BUTTONS = "div.btn-group-vertical > a"
_CELLS = "td.std.small"
_TITLE_CELL = 2
_DATE_CELL = 5


def _row_entry(row: Tag) -> tuple[str, str] | None:
    """Return the download link and title of a table row, if it has both."""
    buttons = row.select(_BUTTONS)
    if not buttons or not buttons[-1].has_attr("href"):
        return None
    href = buttons[-1]["href"]

    cells = row.select(_CELLS)
    if len(cells) <= _DATE_CELL:
        return None
    title_name = cells[_TITLE_CELL].get_text()
    date = cells[_DATE_CELL].get_text()

    title = f"{sanitize_name(title_name).strip()} ({sanitize_name(date.strip()).strip()})"
    return href, title


@dataclass
class IliasMediaLibrary(Scrapeable):
    """A media library; its children are the videos it offers for download.

    The videos are only looked at when the options ask for them.
    """

    async def scrape(
        self, client: httpx.AsyncClient, options: ScrapeOptions
    ) -> tuple[ScrapeObject, list[Scrapeable]]:
        result = ScrapeObject(
            self.order_index, self.parent, ScrapeType.MEDIA_LIBRARY, self.url, self.name
        )
        if not options.videos:
            return result, []

        text = await request_page(self.url, client)

        start = text.find(_ASYNC_START)
        if start == -1:
            raise ValueError(
                "Failed to find the start of the media library url in the page text"
            )
        end = text.find(_ASYNC_END)
        if end == -1:
            raise ValueError("Failed to find the end of the media library url in the page text")
        if end < start:
            raise ValueError("Media library url markers are out of order in the page text")

        async_url = _BASE_URL + text[start + len(_ASYNC_PREFIX):end + len(_ASYNC_SUFFIX)]

        listing = await request_page(async_url, client)
        document = BeautifulSoup(listing, "html.parser")

        children = []
        for index, row in enumerate(document.select(_ROWS)):
            entry = _row_entry(row)
            if entry is None:
                continue
            href, title = entry
            children.append(build_scrapeable(index, result.id, href, title, options))
        return result, children