"""Scraping of video pages to find the stream address."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

import httpx

from ilias_scraper.scraper.options import ScrapeOptions
from ilias_scraper.scraper.request import request_page
from ilias_scraper.scraper.scrapable import Scrapeable
from ilias_scraper.scraper.scrape_object import ScrapeObject
from ilias_scraper.scraper.scrape_type import ScrapeType

_SOURCE_START = '[{"src":"'
_SOURCE_END = '","mimetype":"'


@dataclass
class IliasVideo(Scrapeable):
    """A video page; the result points at the video file itself."""

    async def scrape(
        self, client: httpx.AsyncClient, options: ScrapeOptions
    ) -> tuple[ScrapeObject, list[Scrapeable]]:
        text = await request_page(self.url, client)

        start = text.find(_SOURCE_START)
        if start == -1:
            raise ValueError("Failed to find the start of the video URL in the page text")
        end = text.find(_SOURCE_END)
        if end == -1:
            raise ValueError("Failed to find the end of the video URL in the page text")

        video_url = text[start + len(_SOURCE_START):end]
        if not urlsplit(video_url).scheme:
            raise ValueError(f"Failed to parse the video URL: {video_url!r}")

        return ScrapeObject(self.order_index, self.parent, ScrapeType.VIDEO, video_url, self.name), []