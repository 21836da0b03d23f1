import pytest

from ilias_scraper.utils.sanitize import remove_extension, sanitize_name


def test_forbidden_characters_become_dashes():
    assert sanitize_name('a/b\\c:d*e?f"g<h>i|j') == "a-b-c-d-e-f-g-h-i-j"


def test_single_surrounding_spaces_are_removed():
    assert sanitize_name(" name ") == "name"


def test_only_one_space_is_removed_on_each_side():
    assert sanitize_name("  name  ") == " name "


def test_html_entities_are_decoded():
    assert sanitize_name("Tom &amp; Jerry") == "Tom & Jerry"


def test_decoded_entities_are_not_replaced_again():
    assert sanitize_name("&lt;b&gt;") == "<b>"


def test_one_trailing_dot_is_removed():
    assert sanitize_name("notes.") == "notes"
    assert sanitize_name("notes..") == "notes."


def test_plain_name_is_unchanged():
    assert sanitize_name("Lecture 01") == "Lecture 01"


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("report.pdf", "report"),
        ("archive.tar.gz", "archive.tar"),
        (".hidden", ".hidden"),
        ("noext", "noext"),
        ("trailing.", "trailing"),
        ("", ""),
    ],
)
def test_remove_extension(filename, expected):
    assert remove_extension(filename) == expected