# python
"""
fme/handlers/__init__.py
Resolution helpers shared by the command handlers.

Each handler module exposes `run(root, args)` where `args` is a list of
already split paths. Handlers raise CommandError subclasses and only mutate
the tree once every check has passed.
"""
from dataclasses import dataclass
from typing import Tuple

from ..errors import (
    InvalidMoveError,
    NameCollisionError,
    ResolutionError,
    RootViolationError,
)
from ..paths import Path, base_name, is_within, join_path, parent_of
from ..tree import Node


def describe(node: Node) -> str:
    return "directory" if node.is_directory else "file"


def resolve_parent(root: Node, path: Path, message: str) -> Node:
    """Return the directory that should contain `path`, or raise ResolutionError."""
    parent = root.resolve_directory(parent_of(path))
    if parent is None:
        raise ResolutionError(join_path(path), message)
    return parent


def resolve_existing(root: Node, path: Path) -> Tuple[Node, Node]:
    """Return (parent, node) for an existing non-root path."""
    parent = root.resolve_directory(parent_of(path))
    node = parent.find_child(base_name(path)) if parent is not None else None
    if node is None:
        raise ResolutionError(join_path(path), "file or directory doesn't exist")
    return parent, node


@dataclass
class Transfer:
    """Where a cp/mv source lives and where it will land."""

    source_parent: Node
    source: Node
    target: Node
    target_path: Path
    name: str


def plan_transfer(
    root: Node,
    command: str,
    source_path: Path,
    destination_path: Path,
    forbid_nested: bool = False,
) -> Transfer:
    """
    Work out the destination directory and name for cp/mv.

    If the destination resolves to a directory the entry keeps its base name
    and goes inside it; otherwise the destination's parent must exist and
    its last segment becomes the new name. Existing entries are never
    overwritten.
    """
    if not source_path:
        raise RootViolationError(command)
    source_parent, source = resolve_existing(root, source_path)

    destination = root.resolve(destination_path)
    if destination is not None and destination.is_directory:
        target = destination
        target_path = tuple(destination_path)
        name = base_name(source_path)
    elif destination is not None:
        raise NameCollisionError(
            join_path(destination_path), f"file already exists at {command} destination"
        )
    else:
        target_path = parent_of(destination_path)
        target = root.resolve_directory(target_path)
        if target is None:
            raise ResolutionError(
                join_path(destination_path), "destination directory doesn't exist"
            )
        name = base_name(destination_path)

    if forbid_nested and is_within(target_path, source_path):
        raise InvalidMoveError(join_path(source_path), join_path(destination_path))

    existing = target.find_child(name)
    if existing is not None:
        raise NameCollisionError(
            join_path(target_path + (name,)),
            f"{describe(existing)} with the same name already exists at {command} destination",
        )
    return Transfer(source_parent, source, target, target_path, name)
