import asyncio
from pathlib import Path

import httpx
import pytest

from ilias_scraper.scraper.options import ScrapeOptions
from ilias_scraper.scraper.scrape_object import ScrapeObject
from ilias_scraper.scraper.scrape_type import ScrapeType
from ilias_scraper.tree.download import file_name_with_extension
from ilias_scraper.tree.local import LocalTreeNode, make_local_node

URL = "https://example.com/item"


def _obj(item_type, name="item", children=()):
    return ScrapeObject(0, None, item_type, URL, name, list(children))


def test_new_objects_get_unique_ids_and_no_children():
    a, b = _obj(ScrapeType.FILE), _obj(ScrapeType.FILE)
    assert a.id != b.id
    assert a.children == []


def test_with_children_keeps_identity():
    parent = _obj(ScrapeType.FOLDER)
    child = _obj(ScrapeType.FILE)
    copy = parent.with_children([child])
    assert copy.id == parent.id
    assert copy.children == [child]
    assert parent.children == []


@pytest.mark.parametrize(
    "item_type, expected",
    [
        (ScrapeType.FOLDER, True),
        (ScrapeType.LINK_LIBRARY, True),
        (ScrapeType.MEDIA_LIBRARY, True),
        (ScrapeType.SUBMISSIONS, True),
        (ScrapeType.SUBMISSION, True),
        (ScrapeType.FILE, False),
        (ScrapeType.VIDEO, False),
        (ScrapeType.LINK, False),
        (ScrapeType.FORUM, False),
    ],
)
def test_is_container(item_type, expected):
    assert _obj(item_type).is_container() is expected


def test_ignored_objects_are_not_printed():
    assert _obj(ScrapeType.IGNORE).should_print() is False
    assert _obj(ScrapeType.FILE).should_print() is True


def test_color_depends_on_depth_and_type():
    video = _obj(ScrapeType.VIDEO)
    folder = _obj(ScrapeType.FOLDER)
    assert folder.color(0) == "red"
    assert folder.color(1) == ScrapeType.FOLDER.color()
    assert video.color(2) == ScrapeType.VIDEO.color()


def test_should_download():
    plain = ScrapeOptions()
    videos = ScrapeOptions(videos=True)
    assert _obj(ScrapeType.FILE).should_download(plain)
    assert _obj(ScrapeType.LINK).should_download(plain)
    assert not _obj(ScrapeType.VIDEO).should_download(plain)
    assert _obj(ScrapeType.VIDEO).should_download(videos)
    assert not _obj(ScrapeType.FOLDER).should_download(videos)


def test_represent_links_to_url():
    assert URL in _obj(ScrapeType.FILE).represent()


def test_link_download_writes_shortcut(tmp_path):
    link = _obj(ScrapeType.LINK, name="Homepage")
    asyncio.run(link.download_node(None, tmp_path))
    assert (tmp_path / "Homepage.url").read_text() == f"[InternetShortcut]\nURL={URL}"


def test_file_download_fetches_content(tmp_path):
    disposition = 'filename="s.pdf"'

    def handler(request):
        return httpx.Response(200, content=b"data", headers={"content-disposition": disposition})

    item = _obj(ScrapeType.FILE, name="sheet")

    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            await item.download_node(client, tmp_path)

    asyncio.run(go())
    expected = file_name_with_extension(
        tmp_path / item.name, httpx.Headers({"content-disposition": disposition})
    )
    assert expected == tmp_path / "sheet.pdf"
    assert expected.read_bytes() == b"data"


def test_compare_as_remote_against_local_tree():
    remote = _obj(
        ScrapeType.FOLDER,
        name="course",
        children=[_obj(ScrapeType.FILE, "a"), _obj(ScrapeType.FILE, "b")],
    )
    local = LocalTreeNode(
        True, Path("course"), "course", "", [make_local_node(False, Path("a.pdf"), "a.pdf")]
    )
    result = remote.compare_as_remote(local)
    assert [child.name for child in result.children] == ["b"]
    assert result.id == remote.id


def test_compare_as_local_against_other_remote():
    mine = _obj(ScrapeType.FOLDER, name="c", children=[_obj(ScrapeType.FILE, "a")])
    other = _obj(
        ScrapeType.FOLDER,
        name="c",
        children=[_obj(ScrapeType.FILE, "a"), _obj(ScrapeType.FILE, "z")],
    )
    assert [child.name for child in mine.compare_as_local(other).children] == ["z"]