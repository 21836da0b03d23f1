"""The command line: one-shot commands and an interactive prompt."""

from __future__ import annotations

import argparse
import asyncio
import io
import sys
from contextlib import redirect_stdout

import httpx
from termcolor import colored

from ilias_scraper.config import CourseConfig, get_config_dir
from ilias_scraper.ilias import Ilias
from ilias_scraper.scraper.options import ScrapeOptions

_VERSION = "2.3.0"
_MAX_COURSE_ID = 2**32
_EMPTY_COMMAND = "error:: empty command\n\nUsage: [COMMAND]\n\nFor more information, try help."
_FAILURES = (OSError, ValueError, LookupError, RuntimeError, httpx.HTTPError)


class CommandError(Exception):
    """A command line that could not be understood."""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        usage = self.format_usage().strip()
        raise CommandError(f"error: {message}\n\n{usage}\n\nFor more information, try '--help'.")


def _course_id(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid course ID: {value!r}") from None
    if not 0 <= number < _MAX_COURSE_ID:
        raise argparse.ArgumentTypeError(f"course ID out of range: {value!r}")
    return number


def _add_scrape_arguments(parser: argparse.ArgumentParser, what: str) -> None:
    parser.add_argument(
        "--course",
        help=f"Identifier course if only one course should be {what} (e.g. 12345678)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--videos", action="store_true", help="Include videos")


def build_parser() -> argparse.ArgumentParser:
    """The parser for every command the tool understands."""
    parser = _Parser(prog="ilias", description="A command-line tool to scrape data from Ilias.")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    tree = commands.add_parser("tree", help="Fetch a course tree")
    tree.add_argument("source", choices=("ilias", "local"), help="Source to scrape from")
    _add_scrape_arguments(tree, "scraped")

    sync = commands.add_parser("sync", help="Sync courses to local storage")
    _add_scrape_arguments(sync, "synced")

    commands.add_parser("cli", help="Start interactive command line interface")

    config = commands.add_parser("config", help="Show or edit configuration")
    config_commands = config.add_subparsers(
        dest="config_command", metavar="COMMAND", required=True
    )
    config_commands.add_parser("show", help="Show configuration")

    course = config_commands.add_parser("course", help="Manage configured courses")
    course_commands = course.add_subparsers(
        dest="course_command", metavar="COMMAND", required=True
    )
    course_commands.add_parser("ls", help="List all courses")
    add = course_commands.add_parser("add", help="Add a course")
    add.add_argument("name", help="Course name")
    add.add_argument("id", type=_course_id, help="Course ID")
    remove = course_commands.add_parser("remove", help="Remove a course")
    remove.add_argument("id", type=_course_id, help="Course ID")
    rename = course_commands.add_parser("rename", help="Rename a course")
    rename.add_argument("id", type=_course_id, help="Course ID")
    rename.add_argument("name", help="New name")
    update_id = course_commands.add_parser("update-id", help="Change a course ID")
    update_id.add_argument("old_id", type=_course_id, help="Old course ID")
    update_id.add_argument("new_id", type=_course_id, help="New course ID")

    config_commands.add_parser("path", help="Show path to configuration file")
    return parser


def _process_message(message: str) -> str:
    return (
        message.replace("ilias ", "").replace("'--help'", "help").replace("subcommand", "command")
    )


def parse_interactive_command(text: str) -> argparse.Namespace | None:
    """Parse a line typed at the prompt; ``None`` means the user wants to leave.

    Help output and parse errors are raised as :class:`CommandError`.
    """
    text = text.strip()
    if text in ("exit", "quit"):
        return None
    if not text:
        raise CommandError(_EMPTY_COMMAND)

    tokens = text.split()
    if tokens[0] == "help":
        tokens = [*tokens[1:], "--help"]

    output = io.StringIO()
    try:
        with redirect_stdout(output):
            args = build_parser().parse_args(tokens)
    except CommandError as err:
        raise CommandError(_process_message(str(err))) from None
    except SystemExit:
        # help and version output end the parse; show it as the answer
        raise CommandError(_process_message(output.getvalue().rstrip("\n"))) from None

    if args.command == "cli":
        raise CommandError("`cli` is not allowed inside interactive mode")
    if args.command is None:
        raise CommandError("No command provided")
    return args


def _scrape_options(ilias: Ilias, args: argparse.Namespace) -> ScrapeOptions:
    return ScrapeOptions(
        videos=args.videos, course_id=args.course, verbose=args.verbose, auth=ilias.auth_provider
    )


def _execute_course_command(ilias: Ilias, args: argparse.Namespace) -> None:
    command = args.course_command
    if command == "ls":
        print("Configured courses:")
        for course in ilias.courses:
            print(f"{colored(course.name, 'green')} - {colored(str(course.id), 'blue')}")
        return

    config = ilias.config()
    if command == "add":
        config.add_course(CourseConfig(args.name, args.id))
        config.save()
        print(f"Added course: {colored(args.name, 'green')} ({colored(str(args.id), 'blue')})")
    elif command == "remove":
        config.remove_course(args.id)
        config.save()
        print(f"Removed course with ID: {colored(str(args.id), 'blue')}")
    elif command == "rename":
        config.get_course(args.id).name = args.name
        config.save()
        print(f"Renamed course ID {colored(str(args.id), 'blue')} to {colored(args.name, 'green')}")
    elif command == "update-id":
        config.get_course(args.old_id).id = args.new_id
        config.save()
        print(
            f"Updated course ID from {colored(str(args.old_id), 'blue')} "
            f"to {colored(str(args.new_id), 'blue')}"
        )


async def execute_command(ilias: Ilias, args: argparse.Namespace) -> None:
    """Carry out a parsed command."""
    if args.command == "tree":
        if args.source == "ilias":
            (await ilias.remote_tree(_scrape_options(ilias, args))).print()
        else:
            ilias.local_tree().print()
    elif args.command == "sync":
        await ilias.sync(_scrape_options(ilias, args))
    elif args.command == "config":
        if args.config_command == "path":
            print(f"Configuration file path: {get_config_dir() / 'config.json'}")
        elif args.config_command == "show":
            print(f"Current configuration:\n{ilias.config()}")
        else:
            _execute_course_command(ilias, args)
    else:
        print("Unsupported command in non-interactive mode.")


async def run_interactive(ilias: Ilias) -> None:
    """Read and run commands until the user leaves or input ends."""
    while True:
        try:
            text = input("? ")
        except EOFError:
            break
        try:
            args = parse_interactive_command(text)
        except CommandError as err:
            print(err)
            continue
        if args is None:
            break
        await execute_command(ilias, args)


async def _run(args: argparse.Namespace) -> int:
    ilias = Ilias()
    async with ilias:
        if args.command is None:
            await run_interactive(ilias)
        else:
            await execute_command(ilias, args)
    return 0


def main(argv=None) -> int:
    """Run one command, or the interactive prompt when none is given."""
    try:
        args = build_parser().parse_args(argv)
    except CommandError as err:
        print(err, file=sys.stderr)
        return 2
    try:
        return asyncio.run(_run(args))
    except _FAILURES as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1