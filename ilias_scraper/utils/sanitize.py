"""Helpers that turn scraped titles into safe file names."""

from __future__ import annotations

import html
from pathlib import PurePath

_FORBIDDEN = '/\\:*?"<>|'
_REPLACEMENTS = str.maketrans({char: "-" for char in _FORBIDDEN})


def sanitize_name(name: str) -> str:
    """Make a scraped title usable as a file or directory name."""
    if name.startswith(" "):
        name = name[1:]
    if name.endswith(" "):
        name = name[:-1]

    name = name.translate(_REPLACEMENTS)
    name = html.unescape(name)

    if name.endswith("."):
        name = name[:-1]
    return name


def remove_extension(filename: str) -> str:
    """Return the file name without its last extension."""
    base = PurePath(filename).name
    if base in ("", ".."):
        return filename
    dot = base.rfind(".")
    if dot <= 0:
        return base
    return base[:dot]