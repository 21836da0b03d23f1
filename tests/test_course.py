import asyncio

import httpx

from ilias_scraper.course import Course
from ilias_scraper.scraper.options import ScrapeOptions
from ilias_scraper.scraper.scrape_object import ScrapeObject
from ilias_scraper.scraper.scrape_type import ScrapeType
from ilias_scraper.scraper.scrapeables.folder import IliasFolder


def test_root_url():
    assert Course("Algebra", 42).root_url() == "https://ilias.studium.kit.edu/goto.php/fold/42"


def test_build_remote_root():
    course = Course("Algebra", 42)
    root = course.build_remote_root(5)
    assert isinstance(root, IliasFolder)
    assert root.url == course.root_url()
    assert root.name == "Algebra"
    assert root.order_index == 5
    assert root.parent is None


def test_tree_local_reads_course_folder(tmp_path):
    folder = tmp_path / "Algebra"
    (folder / "Week").mkdir(parents=True)
    (folder / "sheet.pdf").write_bytes(b"x")

    tree = Course("Algebra", 1).tree_local(tmp_path)

    assert tree.name == "Algebra"
    assert tree.is_container()
    assert sorted(child.name for child in tree.children) == ["Week", "sheet"]


def test_sync_downloads_only_missing(tmp_path):
    course = Course("Course", 7)
    folder = tmp_path / "Course"
    folder.mkdir()
    (folder / "a.pdf").write_bytes(b"old")

    root = ScrapeObject(0, None, ScrapeType.FOLDER, course.root_url(), "Course")
    root.children.extend(
        [
            ScrapeObject(0, root.id, ScrapeType.FILE, "https://files.example.com/a", "a"),
            ScrapeObject(1, root.id, ScrapeType.FILE, "https://files.example.com/b", "b"),
            ScrapeObject(2, root.id, ScrapeType.LINK, "https://docs.example.com/", "Docs"),
            ScrapeObject(3, root.id, ScrapeType.VIDEO, "https://files.example.com/v", "v"),
        ]
    )

    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(
            200,
            content=b"new",
            headers={"content-disposition": 'attachment; filename="b.pdf"'},
        )

    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            await course.sync(tmp_path, client, root, ScrapeOptions(videos=False))

    asyncio.run(go())

    assert seen == ["https://files.example.com/b"]
    assert (folder / "b.pdf").read_bytes() == b"new"
    assert (folder / "a.pdf").read_bytes() == b"old"
    assert (folder / "Docs.url").read_text() == (
        "[InternetShortcut]\nURL=https://docs.example.com/"
    )
    assert len(root.children) == 4