"""Scraping of links, resolved to the address they redirect to."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

import httpx

from ilias_scraper.scraper.options import ScrapeOptions
from ilias_scraper.scraper.scrapable import Scrapeable
from ilias_scraper.scraper.scrape_object import ScrapeObject
from ilias_scraper.scraper.scrape_type import ScrapeType


@dataclass
class IliasLink(Scrapeable):
    """A link object; its target is read from the redirect it answers with."""

    async def scrape(
        self, client: httpx.AsyncClient, options: ScrapeOptions
    ) -> tuple[ScrapeObject, list[Scrapeable]]:
        async with await options.auth.authed_client(False) as own_client:
            response = await own_client.get(self.url)

        location = response.headers.get("location")
        if location is None:
            raise ValueError("No location header found in redirect response")
        if not urlsplit(location).scheme:
            raise ValueError(f"Could not parse redirect url: {location}")

        return ScrapeObject(self.order_index, self.parent, ScrapeType.LINK, location, self.name), []