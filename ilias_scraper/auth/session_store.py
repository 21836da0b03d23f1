"""Persist and restore the cookies of a logged-in session."""

from __future__ import annotations

import json
from pathlib import Path

import httpx

_HOST = "ilias.studium.kit.edu"


def store_session(response: httpx.Response, session_file) -> dict[str, str]:
    """Save the cookies set by ``response`` to ``session_file`` as JSON.

    Only ``Set-Cookie`` values of the plain ``name=value`` form are kept.
    Returns the stored cookies.
    """
    cookies: dict[str, str] = {}
    for value in response.headers.get_list("set-cookie"):
        name_value = value.split(";")[0].split("=")
        if len(name_value) == 2:
            cookies[name_value[0].strip()] = name_value[1].strip()

    Path(session_file).write_text(json.dumps(cookies), encoding="utf-8")
    return cookies


def load_cookies(session_file) -> dict[str, str]:
    """Read the cookies stored in ``session_file``."""
    with Path(session_file).open(encoding="utf-8") as file:
        cookies = json.load(file)
    if not isinstance(cookies, dict) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in cookies.items()
    ):
        raise ValueError("Could not read session file")
    return cookies


def load_session(follow_redirects: bool, print_cookies: bool, session_file) -> httpx.AsyncClient:
    """Create a client that carries the cookies stored in ``session_file``."""
    stored = load_cookies(session_file)
    if print_cookies:
        cookie_str = "".join(f"{key}={value};" for key, value in stored.items())
        print(f"Cookies loaded: {cookie_str}")

    jar = httpx.Cookies()
    for key, value in stored.items():
        jar.set(key, value, domain=_HOST)

    return httpx.AsyncClient(follow_redirects=follow_redirects, cookies=jar)


def session_available(session_file) -> bool:
    """Whether a stored session file can be opened."""
    try:
        with Path(session_file).open("rb"):
            return True
    except OSError:
        return False