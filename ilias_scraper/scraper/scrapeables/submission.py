"""Scraping of a single assignment and its files."""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from bs4 import BeautifulSoup

from ilias_scraper.scraper.options import ScrapeOptions
from ilias_scraper.scraper.request import request_page
from ilias_scraper.scraper.scrapable import Scrapeable, build_scrapeable
from ilias_scraper.scraper.scrape_object import ScrapeObject
from ilias_scraper.scraper.scrape_type import ScrapeType
from ilias_scraper.utils.sanitize import remove_extension, sanitize_name

_ROWS = ".panel-primary > .panel-body > .panel-sub:nth-child(2)  .row"


@dataclass
class IliasSubmission(Scrapeable):
    """An assignment; its children are the files offered for it."""

    async def scrape(
        self, client: httpx.AsyncClient, options: ScrapeOptions
    ) -> tuple[ScrapeObject, list[Scrapeable]]:
        page_url = self.url.replace("ilExSubmissionFileGUI", "ilAssignmentPresentationGUI")
        text = await request_page(page_url, client)
        document = BeautifulSoup(text, "html.parser")

        result = ScrapeObject(
            self.order_index, self.parent, ScrapeType.SUBMISSION, self.url, self.name
        )

        children = []
        for index, row in enumerate(document.select(_ROWS)):
            anchor = row.select_one("a")
            if anchor is None or not anchor.has_attr("href"):
                continue
            label = row.select_one("div.control-label > p")
            if label is None:
                continue
            # file titles carry their extension, which is added again on download
            name = remove_extension(sanitize_name(label.get_text().strip()))
            children.append(build_scrapeable(index, result.id, anchor["href"], name, options))
        return result, children