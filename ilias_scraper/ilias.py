"""The application state: configured courses, storage path and login."""

from __future__ import annotations

import httpx

from ilias_scraper.auth.provider import AuthProvider, SessionAuthProvider
from ilias_scraper.config import Config, get_config_dir
from ilias_scraper.course import Course
from ilias_scraper.scraper.engine import scrape_courses
from ilias_scraper.scraper.options import ScrapeOptions
from ilias_scraper.tree.connector import TreeConnectorNode, connect_trees


class Ilias:
    """Configured courses together with a lazily authenticated client.

    ``provider_factory`` is called with the configuration directory and the
    session file to create the authentication provider.
    """

    def __init__(self, provider_factory=SessionAuthProvider) -> None:
        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)

        config = Config.load()
        self.courses: list[Course] = [entry.into_course() for entry in config.courses]
        self.auth_provider: AuthProvider = provider_factory(
            config_dir, config_dir / "session.json"
        )
        self.base_path = config.path
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> Ilias:
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = await self.auth_provider.authenticate(True)
        return self._client

    def config(self) -> Config:
        """The configuration as currently stored on disk."""
        return Config.load()

    def filtered_courses(self, options: ScrapeOptions) -> list[Course]:
        """The courses selected by ``options``: one course or all of them."""
        if options.course_id is None:
            return list(self.courses)
        return [course for course in self.courses if str(course.id) == options.course_id]

    async def sync(self, options: ScrapeOptions) -> None:
        """Download whatever the selected courses have that is missing locally."""
        client = await self._get_client()
        pairs = await scrape_courses(client, self.filtered_courses(options), options)
        for course, root in pairs:
            await course.sync(self.base_path, client, root, options)

    def local_tree(self) -> TreeConnectorNode:
        """The stored trees of all courses under one root."""
        return connect_trees(
            (course.tree_local(self.base_path) for course in self.courses), "local"
        )

    async def remote_tree(self, options: ScrapeOptions) -> TreeConnectorNode:
        """The scraped trees of the selected courses under one root."""
        client = await self._get_client()
        pairs = await scrape_courses(client, self.filtered_courses(options), options)
        return connect_trees((root for _, root in pairs), "ilias")