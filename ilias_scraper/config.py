"""Persistent configuration: where courses are stored and which are synced."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

import platformdirs
from termcolor import colored

from ilias_scraper.course import Course

_APP_NAME = "ilias"
_CONFIG_FILE = "config.json"
_MAX_COURSE_ID = 2**32


def get_config_dir() -> Path:
    """The directory holding the configuration and the stored session."""
    directory = Path(platformdirs.user_config_dir(_APP_NAME, appauthor=False))
    # some platforms put an extra "config" level below the application folder
    if directory.name == "config":
        directory = directory.parent
    return directory


@dataclass
class CourseConfig:
    """A configured course: its local folder name and its platform ID."""

    name: str
    id: int

    def into_course(self) -> Course:
        """The course this entry describes."""
        return Course(self.name, self.id)


def _parse_course(entry) -> CourseConfig:
    if not isinstance(entry, dict):
        raise ValueError("Failed to parse config.json")
    name = entry.get("name")
    course_id = entry.get("id")
    if (
        not isinstance(name, str)
        or not isinstance(course_id, int)
        or isinstance(course_id, bool)
        or not 0 <= course_id < _MAX_COURSE_ID
    ):
        raise ValueError("Failed to parse config.json")
    return CourseConfig(name, course_id)


@dataclass
class Config:
    """Where courses are stored locally and which courses are synced."""

    path: Path
    courses: list[CourseConfig] = field(default_factory=list)

    @classmethod
    def load(cls) -> Config:
        """Read the configuration file from the configuration directory."""
        file = get_config_dir() / _CONFIG_FILE
        with file.open(encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as err:
                raise ValueError("Failed to parse config.json") from err

        if not isinstance(data, dict):
            raise ValueError("Failed to parse config.json")
        path = data.get("path")
        courses = data.get("courses")
        if not isinstance(path, str) or not isinstance(courses, list):
            raise ValueError("Failed to parse config.json")
        return cls(Path(path), [_parse_course(entry) for entry in courses])

    def save(self) -> None:
        """Write the configuration back to the configuration file."""
        data = {
            "path": str(self.path),
            "courses": [{"name": course.name, "id": course.id} for course in self.courses],
        }
        (get_config_dir() / _CONFIG_FILE).write_text(
            json.dumps(data, indent=2), encoding="utf-8"
        )

    def add_course(self, course: CourseConfig) -> bool:
        """Add ``course`` unless its ID is taken; return whether it was added."""
        if any(existing.id == course.id for existing in self.courses):
            print(f"Course with ID {colored(str(course.id), 'blue')} already exists.")
            return False
        self.courses.append(course)
        return True

    def remove_course(self, course_id: int) -> None:
        """Remove the course with ``course_id``."""
        self.courses.remove(self.get_course(course_id))

    def get_course(self, course_id: int) -> CourseConfig:
        """The course entry with ``course_id``, which may be changed in place."""
        for course in self.courses:
            if course.id == course_id:
                return course
        raise LookupError(f"Course with ID {course_id} not found.")

    def __str__(self) -> str:
        lines = [f"Path: {self.path}", "Courses:"]
        lines.extend(f"  - {course.name} ({course.id})" for course in self.courses)
        return "\n".join(lines) + "\n"