"""The tree of files already stored on disk."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from pathlib import Path

from ilias_scraper.tree.comparer import compare_trees
from ilias_scraper.tree.node import TreeNode


def _extension(path: Path) -> str | None:
    base = path.name
    if base in ("", ".."):
        return None
    dot = base.rfind(".")
    if dot <= 0:
        return None
    return base[dot + 1:]


@dataclass
class LocalTreeNode(TreeNode):
    """A file or folder on disk; file names are kept without extension."""

    is_folder: bool
    path: Path
    name: str
    extension: str = ""
    children: list = field(default_factory=list)

    def color(self, indent: int) -> str:
        if indent == 0:
            return "red"
        return "blue" if self.is_folder else "green"

    def is_container(self) -> bool:
        return self.is_folder

    def link_url(self) -> str | None:
        if not self.path.is_absolute():
            return None
        return self.path.as_uri()

    def should_print(self) -> bool:
        return True

    def with_children(self, children: Iterable) -> LocalTreeNode:
        return replace(self, children=list(children))

    def compare_as_remote(self, other) -> LocalTreeNode:
        """Treat this tree as remote and keep what ``other`` lacks."""
        return compare_trees(other, self)

    def compare_as_local(self, other):
        """Treat this tree as local and keep what it lacks from ``other``."""
        return compare_trees(self, other)


def make_local_node(is_folder: bool, path, name: str) -> LocalTreeNode:
    """Create a node, splitting the extension off file names."""
    path = Path(path)
    extension = None if is_folder else _extension(path)
    if extension is None:
        return LocalTreeNode(is_folder, path, name, "")
    return LocalTreeNode(is_folder, path, name.replace(f".{extension}", ""), extension)


def _build_recursive(path: Path) -> LocalTreeNode:
    is_folder = path.is_dir()
    node = make_local_node(is_folder, path, path.name)
    if is_folder:
        try:
            entries = sorted(path.iterdir())
        except OSError:
            entries = []
        node.children.extend(_build_recursive(entry) for entry in entries)
    return node


def build_tree(course, base_path) -> LocalTreeNode:
    """Read the stored tree of ``course`` below ``base_path``."""
    return _build_recursive(Path(base_path) / course.name)