"""Scraping of link collections."""

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
class IliasLinkLibrary(Scrapeable):
    """A table of links; each cell's first element is the link."""

    async def scrape(
        self, client: httpx.AsyncClient, options: ScrapeOptions
    ) -> tuple[ScrapeObject, list[Scrapeable]]:
        text = await request_page(self.url, client)
        document = BeautifulSoup(text, "html.parser")

        result = ScrapeObject(
            self.order_index, self.parent, ScrapeType.LINK_LIBRARY, self.url, self.name
        )

        children = []
        for index, cell in enumerate(document.select("td.std")):
            element = cell.find(True, recursive=False)
            if element is None or not element.has_attr("href"):
                continue
            children.append(
                build_scrapeable(
                    index,
                    result.id,
                    element["href"],
                    sanitize_name(element.decode_contents()),
                    options,
                )
            )
        return result, children