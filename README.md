# ilias_scraper

A command-line tool that scrapes course material from Ilias and mirrors it
into a local directory. It walks folders, link libraries, exercise
submissions, media libraries and videos, prints the course trees, and
downloads whatever is missing locally.

## Installation

```
pip install .
```

This installs the `ilias` command.

## Configuration

Settings live in `config.json` inside the user configuration directory for
`ilias`, as given by `platformdirs`. If that directory ends in a `config`
folder, the folder above it is used instead. The file must exist before any
command is run. It holds the target directory and the list of courses:

```json
{
  "path": "/home/me/Studium",
  "courses": [
    {"name": "Algorithms", "id": 1234567}
  ]
}
```

Course IDs are the numbers that appear in the course's folder address
(`https://ilias.studium.kit.edu/goto.php/fold/<id>`). Each course is stored
in a folder named after the course inside `path`.

### Session

Requests are made with the cookies stored in `session.json` in the same
directory: a JSON object that maps cookie names to values, for example

```json
{"PHPSESSID": "placeholder"}
```

The cookies are sent to `ilias.studium.kit.edu`.

## Usage

```
ilias tree ilias            # print the remote course trees
ilias tree local            # print what is already on disk
ilias sync                  # download everything that is missing
ilias sync --course 1234567 --videos --verbose
ilias config path           # print the location of config.json
```

`tree` and `sync` take these options:

- `--course ID` limits the command to the configured course with that ID.
- `--videos` includes media libraries and downloads videos; without it,
  media libraries are listed without content and videos are skipped.
- `-v`, `--verbose` is accepted for more detailed logging.

`sync` compares the remote tree with the local one by name (local file names
are compared without their extension), prints what is missing, and then
creates the missing folders and downloads the missing files. Links are saved
as `.url` internet shortcut files. A file whose download fails is reported
and the sync goes on with the next one.

Managing courses:

```
ilias config show
ilias config course ls
ilias config course add Algorithms 1234567
ilias config course rename 1234567 "Algorithms I"
ilias config course update-id 1234567 7654321
ilias config course remove 7654321
```

Adding a course whose ID is already configured prints a notice and leaves the
configuration unchanged; renaming, changing or removing an unknown ID is an
error.

### Interactive prompt

Started without a command, `ilias` opens a prompt that accepts the same
commands (without the leading `ilias`). `help`, optionally followed by a
command, shows its help. `exit` or `quit`, or the end of input, leaves the
prompt. `cli` is refused inside the prompt.

`ilias_scraper.cli.completion.CommandCompleter` offers suggestions for partly
typed command lines (commands, flags and argument values); the prompt itself
does not use it.

## What it does not do

The tool does not log in. It has no way to obtain session cookies itself:
`session.json` has to be filled with the cookies of a session that is already
logged in, and when they have expired, requests fail until the file is
replaced.

## Tests

```
pip install .[test]
pytest
```