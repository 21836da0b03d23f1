"""Fetching pages as text."""

from __future__ import annotations

import httpx


async def request_page(url: str, client: httpx.AsyncClient) -> str:
    """GET ``url`` and return the body as text."""
    response = await client.get(url)
    return response.text