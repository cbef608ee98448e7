# python
"""
fme/tree.py
In-memory namespace tree: directories and empty files with name-sorted children.
"""
from __future__ import annotations

import bisect
from typing import Iterable, Iterator, List, Optional, Sequence

from .paths import SEPARATOR


def _node_name(node: "Node") -> str:
    return node.name


class Node:
    """
    A directory or file entry.

    Children are kept in a list sorted by name, so lookups are binary
    searches and iteration order is stable for rendering. A file never has
    children.
    """

    __slots__ = ("name", "is_directory", "children")

    def __init__(self, name: str, is_directory: bool, children: Iterable["Node"] = ()):
        self.name = name
        self.is_directory = is_directory
        self.children: List[Node] = sorted(children, key=_node_name)
        if self.children and not is_directory:
            raise TypeError(f"file '{name}' cannot have children")

    def __repr__(self) -> str:
        kind = "dir" if self.is_directory else "file"
        return f"Node({self.name!r}, {kind}, children={len(self.children)})"

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator["Node"]:
        return iter(self.children)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find_child(name) is not None

    def _position(self, name: str) -> int:
        return bisect.bisect_left(self.children, name, key=_node_name)

    def find_child(self, name: str) -> Optional["Node"]:
        pos = self._position(name)
        if pos < len(self.children) and self.children[pos].name == name:
            return self.children[pos]
        return None

    def resolve(self, segments: Sequence[str]) -> Optional["Node"]:
        """
        Walk `segments` down from this node.

        Returns None as soon as a segment is missing or when a segment other
        than the last one names a file. An empty sequence resolves to self.
        """
        node = self
        for segment in segments:
            if not node.is_directory:
                return None
            node = node.find_child(segment)
            if node is None:
                return None
        return node

    def resolve_directory(self, segments: Sequence[str]) -> Optional["Node"]:
        """Like resolve(), but only returns directories."""
        node = self.resolve(segments)
        if node is None or not node.is_directory:
            return None
        return node

    def insert(
        self, name: str, is_directory: bool, children: Iterable["Node"] = ()
    ) -> Optional["Node"]:
        """
        Insert a new child at its sorted position and return it.

        `children` are taken over by the new node as they are. Returns None,
        leaving the tree untouched, if a child with this name already exists.
        """
        if not self.is_directory:
            raise TypeError(f"cannot insert into file '{self.name}'")
        pos = self._position(name)
        if pos < len(self.children) and self.children[pos].name == name:
            return None
        node = Node(name, is_directory, children)
        self.children.insert(pos, node)
        return node

    def remove_child(self, name: str) -> Optional["Node"]:
        """Detach and return the named child with its subtree; None if absent."""
        pos = self._position(name)
        if pos < len(self.children) and self.children[pos].name == name:
            return self.children.pop(pos)
        return None

    def clone(self, name: Optional[str] = None) -> "Node":
        """Deep copy of this subtree, optionally under a new name."""
        copy = Node(self.name if name is None else name, self.is_directory)
        stack = [(self, copy)]
        while stack:
            source, target = stack.pop()
            # source children are already sorted, so appending keeps the order
            for child in source.children:
                child_copy = Node(child.name, child.is_directory)
                target.children.append(child_copy)
                stack.append((child, child_copy))
        return copy

    def walk(self) -> Iterator["Node"]:
        """Pre-order iteration over this node and all descendants."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def count(self) -> int:
        return sum(1 for _ in self.walk())

    def render(self, prefix: str = "") -> Iterator[str]:
        """
        Yield the tree listing line by line, depth-first pre-order.

        The node rendered with an empty prefix prints as "/"; below it every
        entry is "<prefix>_<name>", directories with a trailing "/", and each
        level of depth extends the prefix by " |".
        """
        stack = [(prefix, self)]
        while stack:
            line_prefix, node = stack.pop()
            if line_prefix:
                suffix = SEPARATOR if node.is_directory else ""
                yield f"{line_prefix}_{node.name}{suffix}"
                child_prefix = line_prefix + " |"
            else:
                yield SEPARATOR
                child_prefix = "|"
            stack.extend((child_prefix, child) for child in reversed(node.children))


def new_root() -> Node:
    return Node("", True)
