"""Things that can be scraped and how to build them from links."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from uuid import UUID

import httpx

from ilias_scraper.scraper.options import ScrapeOptions
from ilias_scraper.scraper.scrape_object import ScrapeObject
from ilias_scraper.scraper.scrape_type import ScrapeType, type_from_url

_BASE_URL = "https://ilias.studium.kit.edu/"


@dataclass
class Scrapeable(ABC):
    """A not yet scraped object: where it is and where it belongs."""

    order_index: int
    parent: UUID | None
    url: str
    name: str

    @abstractmethod
    async def scrape(
        self, client: httpx.AsyncClient, options: ScrapeOptions
    ) -> tuple[ScrapeObject, list[Scrapeable]]:
        """Scrape the object, returning it and the children still to scrape."""


@dataclass
class TransientScrapeable(Scrapeable):
    """An object whose scraped form is known without any request."""

    item_type: ScrapeType = ScrapeType.IGNORE

    async def scrape(
        self, client: httpx.AsyncClient, options: ScrapeOptions
    ) -> tuple[ScrapeObject, list[Scrapeable]]:
        obj = ScrapeObject(self.order_index, self.parent, self.item_type, self.url, self.name)
        return obj, []


def fix_url(url: str) -> str:
    """Make a link taken from a page absolute."""
    if url.startswith("https"):
        return url
    return _BASE_URL + url


def get_scrapable(
    scrape_type: ScrapeType, order_index: int, parent: UUID | None, url: str, name: str
) -> Scrapeable:
    """Create the scrapeable that handles objects of ``scrape_type``."""
    from ilias_scraper.scraper.scrapeables.folder import IliasFolder
    from ilias_scraper.scraper.scrapeables.link import IliasLink
    from ilias_scraper.scraper.scrapeables.link_library import IliasLinkLibrary
    from ilias_scraper.scraper.scrapeables.media_library import IliasMediaLibrary
    from ilias_scraper.scraper.scrapeables.submission import IliasSubmission
    from ilias_scraper.scraper.scrapeables.submissions import IliasSubmissions
    from ilias_scraper.scraper.scrapeables.video import IliasVideo

    handlers = {
        ScrapeType.FOLDER: IliasFolder,
        ScrapeType.MEDIA_LIBRARY: IliasMediaLibrary,
        ScrapeType.LINK: IliasLink,
        ScrapeType.LINK_LIBRARY: IliasLinkLibrary,
        ScrapeType.SUBMISSIONS: IliasSubmissions,
        ScrapeType.SUBMISSION: IliasSubmission,
        ScrapeType.VIDEO: IliasVideo,
    }
    handler = handlers.get(scrape_type)
    if handler is None:
        return TransientScrapeable(order_index, parent, url, name, scrape_type)
    return handler(order_index, parent, url, name)


def build_scrapeable(
    index: int, parent: UUID | None, url: str, name: str, options: ScrapeOptions
) -> Scrapeable:
    """Create the right scrapeable for a link found on a page."""
    url = fix_url(url)
    return get_scrapable(type_from_url(url), index, parent, url, name)