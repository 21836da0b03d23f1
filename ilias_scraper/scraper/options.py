"""Options that steer a scraping or syncing run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ScrapeOptions:
    """Settings shared by every step of a scrape.

    ``auth`` is the authentication provider used for requests that need
    their own client, such as resolving link redirects.
    """

    videos: bool = False
    course_id: str | None = None
    verbose: bool = False
    auth: Any = None