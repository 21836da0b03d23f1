"""Sources of authenticated HTTP clients."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import httpx

from ilias_scraper.auth.session_store import load_session


class AuthProvider(ABC):
    """Something that can hand out clients logged in to the platform."""

    @abstractmethod
    async def authenticate(self, follow_redirects: bool = True) -> httpx.AsyncClient:
        """Log in and return an authenticated client."""

    @abstractmethod
    async def authed_client(self, follow_redirects: bool = True) -> httpx.AsyncClient:
        """Return a client built from the already stored session."""


@dataclass
class SessionAuthProvider(AuthProvider):
    """Authenticates with the session cookies stored in ``session_file``."""

    config_dir: Path
    session_file: Path

    async def authenticate(self, follow_redirects: bool = True) -> httpx.AsyncClient:
        try:
            return load_session(follow_redirects, False, self.session_file)
        except (OSError, ValueError) as err:
            raise RuntimeError("Failed to authenticate with the stored session") from err

    async def authed_client(self, follow_redirects: bool = True) -> httpx.AsyncClient:
        return load_session(follow_redirects, False, self.session_file)