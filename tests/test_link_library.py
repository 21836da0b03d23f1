import asyncio

import httpx

from ilias_scraper.scraper.options import ScrapeOptions
from ilias_scraper.scraper.scrape_type import ScrapeType
from ilias_scraper.scraper.scrapeables.link import IliasLink
from ilias_scraper.scraper.scrapeables.link_library import IliasLinkLibrary

PAGE = """
<table>
<tr><td class="std"><a href="ilias.php?cmd=callLink&amp;ref_id=1">Slides: A</a></td></tr>
<tr><td class="std">plain text</td></tr>
<tr><td class="std"><span>no href</span></td></tr>
<tr><td class="std"><a href="https://ilias.studium.kit.edu/ilias.php?cmd=calldirectlink">Tool</a></td></tr>
<tr><td class="other"><a href="https://example.com">skip</a></td></tr>
</table>
"""

LIB_URL = "https://ilias.studium.kit.edu/ilias.php?cmd=render&ref_id=5"


def _scrape(page=PAGE):
    async def go():
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text=page))
        async with httpx.AsyncClient(transport=transport) as client:
            return await IliasLinkLibrary(1, None, LIB_URL, "Links").scrape(
                client, ScrapeOptions()
            )

    return asyncio.run(go())


def test_result_is_link_library():
    result, _ = _scrape()
    assert (result.item_type, result.url, result.name, result.order_index) == (
        ScrapeType.LINK_LIBRARY,
        LIB_URL,
        "Links",
        1,
    )


def test_children_from_first_element_with_href():
    result, children = _scrape()
    assert [child.order_index for child in children] == [0, 3]
    assert all(isinstance(child, IliasLink) for child in children)
    assert all(child.parent == result.id for child in children)


def test_children_names_and_urls():
    _, children = _scrape()
    assert [child.name for child in children] == ["Slides- A", "Tool"]
    assert children[0].url == "https://ilias.studium.kit.edu/ilias.php?cmd=callLink&ref_id=1"


def test_empty_library():
    _, children = _scrape("<table></table>")
    assert children == []