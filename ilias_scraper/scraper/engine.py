"""Concurrent scraping of whole course trees."""

from __future__ import annotations

import asyncio
import sys
import time
from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from uuid import UUID

import httpx
from termcolor import colored

from ilias_scraper.scraper.options import ScrapeOptions
from ilias_scraper.scraper.scrapable import Scrapeable
from ilias_scraper.scraper.scrape_object import ScrapeObject

_CONCURRENCY = 10


async def scrape_courses(
    client: httpx.AsyncClient, courses: Sequence, options: ScrapeOptions
) -> list[tuple]:
    """Scrape the given courses and pair each with its remote tree."""
    courses = list(courses)
    roots = [course.build_remote_root(index) for index, course in enumerate(courses)]

    names = ", ".join(course.name for course in courses)
    print(colored(f">> Scraping courses: {names}", "blue"), flush=True)

    scraped = await scrape_trees(client, roots, options)

    pairs = []
    for root in scraped:
        course = next((c for c in courses if c.root_url() == root.url), None)
        if course is not None:
            pairs.append((course, root))
    return pairs


async def scrape_trees(
    client: httpx.AsyncClient, roots: Iterable[Scrapeable], options: ScrapeOptions
) -> list[ScrapeObject]:
    """Scrape everything reachable from ``roots`` and return the assembled trees."""
    start = time.perf_counter()

    nodes = await scrape_all_nodes(client, roots, options)
    trees = assemble_tree(nodes)

    print(f" ({time.perf_counter() - start:.3f}s)")
    return trees


async def scrape_all_nodes(
    client: httpx.AsyncClient, roots: Iterable[Scrapeable], options: ScrapeOptions
) -> dict[UUID, ScrapeObject]:
    """Scrape all objects reachable from ``roots``, a limited number at a time.

    Objects that fail to scrape are reported and left out with everything
    below them.
    """
    nodes: dict[UUID, ScrapeObject] = {}
    semaphore = asyncio.Semaphore(_CONCURRENCY)

    async def visit(item: Scrapeable) -> list[Scrapeable]:
        async with semaphore:
            try:
                result, children = await item.scrape(client, options)
            except Exception as err:  # one broken page must not stop the run
                print(f"Error scraping {item.url}: {err!r}", file=sys.stderr)
                return []
        nodes[result.id] = result
        return children

    pending = {asyncio.ensure_future(visit(root)) for root in roots}
    while pending:
        done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            pending.update(asyncio.ensure_future(visit(child)) for child in task.result())

    return nodes


def assemble_tree(nodes: Mapping[UUID, ScrapeObject]) -> list[ScrapeObject]:
    """Link scraped objects to their parents and return the roots.

    Roots and every list of children are ordered by ``order_index``.
    Objects whose parent is unknown are dropped.
    """
    by_parent: dict[UUID | None, list[ScrapeObject]] = defaultdict(list)
    for node in nodes.values():
        by_parent[node.parent].append(node)

    def order(node: ScrapeObject) -> int:
        return node.order_index

    def attach(node: ScrapeObject) -> ScrapeObject:
        children = sorted(by_parent.get(node.id, ()), key=order)
        return node.with_children(attach(child) for child in children)

    return [attach(root) for root in sorted(by_parent.get(None, ()), key=order)]