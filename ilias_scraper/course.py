"""A course on the platform and how it is synced to disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import httpx
from termcolor import colored

from ilias_scraper.scraper.builder import build_root_node
from ilias_scraper.scraper.options import ScrapeOptions
from ilias_scraper.scraper.scrapable import Scrapeable
from ilias_scraper.scraper.scrape_object import ScrapeObject
from ilias_scraper.tree.download import download_tree
from ilias_scraper.tree.local import LocalTreeNode, build_tree

_ROOT_URL = "https://ilias.studium.kit.edu/goto.php/fold/{}"


@dataclass
class Course:
    """A course, stored locally in a folder named after it."""

    name: str
    id: int

    def root_url(self) -> str:
        """Address of the course's root folder."""
        return _ROOT_URL.format(self.id)

    def build_remote_root(self, index: int) -> Scrapeable:
        """The scrapeable the course's remote tree starts from."""
        return build_root_node(index, self.name, self.root_url())

    def tree_local(self, base_path) -> LocalTreeNode:
        """The course's files as they are stored below ``base_path``."""
        return build_tree(self, base_path)

    async def sync(
        self,
        base_path,
        client: httpx.AsyncClient,
        remote_root: ScrapeObject,
        options: ScrapeOptions,
    ) -> None:
        """Download whatever of ``remote_root`` is missing below ``base_path``."""
        base_path = Path(base_path)
        local = self.tree_local(base_path)

        missing = remote_root.compare_as_remote(local)
        missing.print()

        print(f">> Downloading course: {colored(self.name, 'blue')}")
        await download_tree(missing, client, base_path, options)