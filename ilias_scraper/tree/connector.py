"""A named root that joins several trees for printing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from ilias_scraper.tree.node import TreeNode


@dataclass
class TreeConnectorNode(TreeNode):
    """A synthetic container whose children are whole trees."""

    name: str
    children: list = field(default_factory=list)

    def color(self, indent: int) -> str:
        return "red"

    def is_container(self) -> bool:
        return True

    def link_url(self) -> str | None:
        return None

    def should_print(self) -> bool:
        return True

    def with_children(self, children: Iterable) -> TreeConnectorNode:
        return replace(self, children=list(children))


def connect_trees(tree_list: Iterable, name: str) -> TreeConnectorNode:
    """Put the given trees under one root called ``name``."""
    return TreeConnectorNode(name, list(tree_list))