"""Common behaviour of every printable tree node."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from termcolor import colored

_BRANCH = "├── "
_PIPE = "│   "


def hyperlink(uri: str, label: str) -> str:
    """Wrap ``label`` in an OSC 8 terminal hyperlink to ``uri``."""
    return f"\x1b]8;;{uri}\x1b\\{label}\x1b]8;;\x1b\\"


class TreeNode(ABC):
    """A named node with children that can be compared, printed and linked.

    Subclasses provide ``name`` and ``children`` attributes.
    """

    name: str
    children: list

    @abstractmethod
    def color(self, indent: int) -> str:
        """Terminal colour for this node at the given depth."""

    @abstractmethod
    def is_container(self) -> bool:
        """Whether the node holds other nodes."""

    @abstractmethod
    def link_url(self) -> str | None:
        """URL the node points to, if any."""

    @abstractmethod
    def should_print(self) -> bool:
        """Whether the node appears in printed output."""

    @abstractmethod
    def with_children(self, children: Iterable) -> TreeNode:
        """Return a copy of the node with other children."""

    def represent(self) -> str:
        """The node's label, as a hyperlink when it has a URL."""
        url = self.link_url()
        if url is None:
            return self.name
        return hyperlink(url, self.name)

    def _lines(self, indent: int = 0) -> Iterator[tuple[str, str, str]]:
        if self.should_print():
            prefix = "" if indent == 0 else _PIPE * (indent - 1) + _BRANCH
            yield prefix, self.represent(), self.color(indent)
        for child in self.children:
            yield from child._lines(indent + 1)

    def render(self) -> str:
        """The tree as plain text, one node per line."""
        return "\n".join(prefix + text for prefix, text, _ in self._lines())

    def print(self) -> None:
        """Print the tree with colours."""
        for prefix, text, color in self._lines():
            print(prefix + colored(text, color))