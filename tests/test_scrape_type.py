import pytest
from termcolor import COLORS

from ilias_scraper.scraper.scrape_type import ScrapeType, type_from_url

BASE = "https://ilias.studium.kit.edu"


@pytest.mark.parametrize(
    "goto, expected",
    [
        ("fold", ScrapeType.FOLDER),
        ("frm", ScrapeType.FORUM),
        ("exc", ScrapeType.SUBMISSIONS),
        ("book", ScrapeType.CALENDAR),
        ("svy", ScrapeType.IGNORE),
    ],
)
def test_goto_urls(goto, expected):
    assert type_from_url(f"{BASE}/goto.php/{goto}/123") is expected


def test_unknown_goto_is_ignored_and_reported(capsys):
    url = f"{BASE}/goto.php/wiki/5"
    assert type_from_url(url) is ScrapeType.IGNORE
    out = capsys.readouterr().out
    assert "goto not handled" in out
    assert url in out


@pytest.mark.parametrize(
    "cmd, expected",
    [
        ("forward", ScrapeType.MEDIA_LIBRARY),
        ("sendfile", ScrapeType.FILE),
        ("downloadFile", ScrapeType.FILE),
        ("download", ScrapeType.FILE),
        ("calldirectlink", ScrapeType.LINK),
        ("callLink", ScrapeType.LINK),
        ("streamVideo", ScrapeType.VIDEO),
        ("somethingElse", ScrapeType.LINK_LIBRARY),
    ],
)
def test_cmd_urls(cmd, expected):
    assert type_from_url(f"{BASE}/ilias.php?ref_id=1&cmd={cmd}") is expected


def test_goto_takes_precedence_over_cmd():
    assert type_from_url(f"{BASE}/goto.php/fold/1?cmd=sendfile") is ScrapeType.FOLDER


def test_cmd_takes_precedence_over_assignment_id():
    assert type_from_url(f"{BASE}/ilias.php?ass_id=3&cmd=sendfile") is ScrapeType.FILE


def test_assignment_id_means_submission():
    assert type_from_url(f"{BASE}/ilias.php?ref_id=1&ass_id=3") is ScrapeType.SUBMISSION


def test_plain_url_is_ignored():
    assert type_from_url(f"{BASE}/ilias.php?ref_id=1") is ScrapeType.IGNORE


def test_colors_match_kinds():
    assert ScrapeType.FOLDER.color() == "blue"
    assert ScrapeType.VIDEO.color() == "red"
    assert ScrapeType.FORUM.color() == "yellow"


@pytest.mark.parametrize("member", list(ScrapeType))
def test_every_color_is_a_terminal_color(member):
    assert ScrapeType.color(member) in COLORS