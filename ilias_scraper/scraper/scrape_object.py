"""A scraped remote object and its place in the remote tree."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from pathlib import Path
from uuid import UUID, uuid4

import httpx
from termcolor import colored

from ilias_scraper.scraper.scrape_type import ScrapeType
from ilias_scraper.tree.comparer import compare_trees
from ilias_scraper.tree.download import download_file, save_link
from ilias_scraper.tree.node import TreeNode

_CONTAINER_TYPES = frozenset(
    {
        ScrapeType.FOLDER,
        ScrapeType.LINK_LIBRARY,
        ScrapeType.MEDIA_LIBRARY,
        ScrapeType.SUBMISSIONS,
        ScrapeType.SUBMISSION,
    }
)


@dataclass
class ScrapeObject(TreeNode):
    """One object found on the platform, with its scraped children."""

    order_index: int
    parent: UUID | None
    item_type: ScrapeType
    url: str
    name: str
    children: list = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)

    def color(self, indent: int) -> str:
        if indent == 0:
            return "red"
        return self.item_type.color()

    def is_container(self) -> bool:
        return self.item_type in _CONTAINER_TYPES

    def link_url(self) -> str | None:
        return self.url

    def should_print(self) -> bool:
        return self.item_type is not ScrapeType.IGNORE

    def with_children(self, children: Iterable) -> ScrapeObject:
        return replace(self, children=list(children))

    def compare_as_remote(self, other) -> ScrapeObject:
        """Keep what ``other``, the local tree, lacks from this tree."""
        return compare_trees(other, self)

    def compare_as_local(self, other):
        """Keep what this tree lacks from ``other``."""
        return compare_trees(self, other)

    def should_download(self, options) -> bool:
        """Files and links are always fetched, videos only when asked for."""
        return self.item_type in (ScrapeType.FILE, ScrapeType.LINK) or (
            options.videos and self.item_type is ScrapeType.VIDEO
        )

    async def download_node(self, client: httpx.AsyncClient, path) -> None:
        """Store this object in ``path``: links as shortcuts, the rest as files."""
        url = self.link_url()
        if url is None:
            return
        path = Path(path)
        if self.item_type is ScrapeType.LINK:
            save_link(url, self.name, path)
        else:
            print(f">> Downloading {colored(self.name, self.color(1))} to {path}")
            await download_file(client, url, self.name, path)