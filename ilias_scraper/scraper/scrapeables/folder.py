"""Scraping of folders."""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from bs4 import BeautifulSoup

from ilias_scraper.scraper.options import ScrapeOptions
from ilias_scraper.scraper.request import request_page
from ilias_scraper.scraper.scrapable import Scrapeable, build_scrapeable
from ilias_scraper.scraper.scrape_object import ScrapeObject
from ilias_scraper.scraper.scrape_type import ScrapeType
from ilias_scraper.utils.sanitize import sanitize_name


@dataclass
class IliasFolder(Scrapeable):
    """A folder page listing its items."""

    async def scrape(
        self, client: httpx.AsyncClient, options: ScrapeOptions
    ) -> tuple[ScrapeObject, list[Scrapeable]]:
        text = await request_page(self.url, client)
        document = BeautifulSoup(text, "html.parser")

        result = ScrapeObject(self.order_index, self.parent, ScrapeType.FOLDER, self.url, self.name)

        children = [
            build_scrapeable(
                index, result.id, link["href"], sanitize_name(link.decode_contents()), options
            )
            for index, link in enumerate(document.select("a.il_ContainerItemTitle"))
            if link.has_attr("href")
        ]
        return result, children