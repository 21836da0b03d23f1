"""Find which parts of a remote tree are missing locally."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def compare_trees(local_tree, remote_tree: T) -> T:
    """Return a copy of ``remote_tree`` holding only what ``local_tree`` lacks.

    Children are matched by name. Containers present on both sides are
    compared recursively and kept only when something inside is missing.
    """
    children = []
    for remote_child in remote_tree.children:
        found = False
        for local_child in local_tree.children:
            if local_child.name != remote_child.name:
                continue
            if local_child.is_container() and remote_child.is_container():
                folder = compare_trees(local_child, remote_child)
                if folder.children:
                    children.append(folder)
            found = True
        if not found:
            children.append(remote_child)

    return remote_tree.with_children(children)