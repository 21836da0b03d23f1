import pytest

from ilias_scraper.cli.completion import CommandCompleter


@pytest.fixture
def completer():
    return CommandCompleter()


def test_top_level_commands(completer):
    assert completer.suggestions("") == ["tree", "sync", "cli", "config"]


def test_prefix_filters_commands(completer):
    assert completer.suggestions("t") == ["tree"]
    assert completer.suggestions("c") == ["cli", "config"]


def test_long_flags_of_tree(completer):
    assert completer.suggestions("tree --") == ["--course", "--verbose", "--videos"]


def test_long_flag_comes_before_short(completer):
    assert completer.suggestions("sync -") == ["--course", "--verbose", "-v", "--videos"]


def test_positional_values(completer):
    assert completer.suggestions("tree l") == ["local"]
    assert completer.suggestions("tree i") == ["ilias"]


def test_nested_subcommands(completer):
    assert completer.suggestions("config s") == ["show"]
    assert completer.suggestions("config course u") == ["update-id"]


def test_unknown_token_stops_descent(completer):
    assert completer.suggestions("bogus t") == ["tree"]


def test_no_match(completer):
    assert completer.suggestions("zzz") == []


def test_completion_replaces_last_word(completer):
    assert completer.completion("config sh", "show") == "config show"


def test_completion_of_empty_input(completer):
    assert completer.completion("", "tree") == "tree"


def test_completion_without_suggestion_drops_word(completer):
    assert completer.completion("config sh", None) == "config "