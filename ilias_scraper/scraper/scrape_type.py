"""Kinds of objects found on the learning platform and how to recognise them."""

from __future__ import annotations

from enum import Enum
from urllib.parse import parse_qsl, urlsplit

_GOTO_MARKER = "/goto.php/"


class ScrapeType(Enum):
    """The kind of a scraped object."""

    FOLDER = "folder"
    FORUM = "forum"
    MEDIA_LIBRARY = "media_library"
    LINK = "link"
    LINK_LIBRARY = "link_library"
    SUBMISSIONS = "submissions"
    SUBMISSION = "submission"
    FILE = "file"
    VIDEO = "video"
    CALENDAR = "calendar"
    IGNORE = "ignore"

    def color(self) -> str:
        """Terminal colour used when printing objects of this kind."""
        return _COLORS[self]


_COLORS = {
    ScrapeType.FOLDER: "blue",
    ScrapeType.FORUM: "yellow",
    ScrapeType.MEDIA_LIBRARY: "magenta",
    ScrapeType.LINK: "green",
    ScrapeType.LINK_LIBRARY: "blue",
    ScrapeType.SUBMISSIONS: "cyan",
    ScrapeType.SUBMISSION: "cyan",
    ScrapeType.FILE: "green",
    ScrapeType.VIDEO: "red",
    ScrapeType.CALENDAR: "green",
    ScrapeType.IGNORE: "green",
}

_GOTO_TYPES = {
    "fold": ScrapeType.FOLDER,
    "frm": ScrapeType.FORUM,
    "exc": ScrapeType.SUBMISSIONS,
    "book": ScrapeType.CALENDAR,
    "svy": ScrapeType.IGNORE,  # survey block
}

_CMD_TYPES = {
    "forward": ScrapeType.MEDIA_LIBRARY,
    "sendfile": ScrapeType.FILE,
    "downloadFile": ScrapeType.FILE,  # submission uploads
    "download": ScrapeType.FILE,  # direct video downloads in media libraries
    "calldirectlink": ScrapeType.LINK,
    "callLink": ScrapeType.LINK,
    "streamVideo": ScrapeType.VIDEO,
}


def _type_from_goto(url: str, index: int) -> ScrapeType:
    goto = url[index + len(_GOTO_MARKER):].split("/")[0]
    scrape_type = _GOTO_TYPES.get(goto)
    if scrape_type is None:
        print(f"{goto}, goto not handled for {url}")
        return ScrapeType.IGNORE
    return scrape_type


def type_from_url(url: str) -> ScrapeType:
    """Determine the kind of object a URL points to."""
    index = url.find(_GOTO_MARKER)
    if index != -1:
        return _type_from_goto(url, index)

    pairs = parse_qsl(urlsplit(url).query, keep_blank_values=True)

    cmd = next((value for key, value in pairs if key == "cmd"), None)
    if cmd is not None:
        return _CMD_TYPES.get(cmd, ScrapeType.LINK_LIBRARY)

    if any(key == "ass_id" for key, _ in pairs):
        return ScrapeType.SUBMISSION

    return ScrapeType.IGNORE