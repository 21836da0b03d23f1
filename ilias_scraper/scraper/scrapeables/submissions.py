"""Scraping of an exercise overview listing its assignments."""

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

_OVERVIEW_URL = (
    "https://ilias.studium.kit.edu/ilias.php?baseClass=ilexercisehandlergui"
    "&cmd=showOverview&ref_id={}&mode=all"
)


@dataclass
class IliasSubmissions(Scrapeable):
    """An exercise; its children are the assignments in the overview."""

    async def scrape(
        self, client: httpx.AsyncClient, options: ScrapeOptions
    ) -> tuple[ScrapeObject, list[Scrapeable]]:
        object_id = self.url.split("/")[-1]
        overview_url = _OVERVIEW_URL.format(object_id)

        text = await request_page(overview_url, client)
        document = BeautifulSoup(text, "html.parser")

        result = ScrapeObject(
            self.order_index, self.parent, ScrapeType.SUBMISSIONS, overview_url, self.name
        )

        children = []
        for index, item in enumerate(document.select(".il-std-item-container")):
            anchor = item.select_one(".il-item-title > a")
            if anchor is None or not anchor.has_attr("href"):
                continue
            name = sanitize_name(anchor.get_text().strip())
            children.append(build_scrapeable(index, result.id, anchor["href"], name, options))
        return result, children