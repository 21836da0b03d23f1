"""Suggestions for partly typed command lines."""

from __future__ import annotations

import argparse
from collections.abc import Iterable

from ilias_scraper.cli.app import build_parser

_SKIPPED = (argparse._SubParsersAction, argparse._HelpAction, argparse._VersionAction)


def _subcommands(parser: argparse.ArgumentParser) -> dict[str, argparse.ArgumentParser]:
    found: dict[str, argparse.ArgumentParser] = {}
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            found.update(action.choices)
    return found


def _find_command(
    parser: argparse.ArgumentParser, tokens: Iterable[str]
) -> argparse.ArgumentParser:
    for token in tokens:
        sub = _subcommands(parser).get(token)
        if sub is None:
            break
        parser = sub
    return parser


class CommandCompleter:
    """Completes commands, flags and argument values of the command line."""

    def __init__(self, parser: argparse.ArgumentParser | None = None) -> None:
        self._root = parser if parser is not None else build_parser()

    def suggestions(self, text: str) -> list[str]:
        """Everything that could replace the last word of ``text``."""
        tokens = text.split()
        last = tokens[-1] if tokens else ""
        command = _find_command(self._root, tokens[:-1])

        found = [name for name in _subcommands(command) if name.startswith(last)]
        for action in command._actions:
            if isinstance(action, _SKIPPED):
                continue
            longs = [flag for flag in action.option_strings if flag.startswith("--")]
            shorts = [flag for flag in action.option_strings if not flag.startswith("--")]
            found.extend(flag for flag in (*longs, *shorts) if flag.startswith(last))
            if not action.option_strings and action.choices:
                found.extend(
                    str(value) for value in action.choices if str(value).startswith(last)
                )
        return found

    def completion(self, text: str, suggestion: str | None) -> str:
        """``text`` with its last word replaced by ``suggestion``."""
        parts = text.split()
        if parts:
            parts.pop()
        parts.append(suggestion or "")
        return " ".join(parts)