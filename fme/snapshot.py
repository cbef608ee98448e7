"""JSON snapshot helpers: convert trees to and from {"type", "name", "children"} dicts."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import jsonschema

from .errors import SnapshotError
from .paths import SEPARATOR, join_path
from .tree import Node

logger = logging.getLogger(__name__)

FS_NODE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "type": {"type": "string", "enum": ["dir", "file"]},
        "name": {"type": "string"},
        "children": {
            "type": "array",
            "items": {"$ref": "#"},
        },
    },
    "required": ["type", "name"],
    "additionalProperties": False,
}

FS_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "$id": "fme-tree.schema.json",
    **FS_NODE_SCHEMA,
}


def _entry(node: Node) -> Dict[str, Any]:
    if not node.is_directory:
        return {"type": "file", "name": node.name}
    return {"type": "dir", "name": node.name, "children": []}


def tree_to_dict(node: Node) -> Dict[str, Any]:
    top = _entry(node)
    stack = [(node, top)]
    while stack:
        source, entry = stack.pop()
        for child in source.children:
            child_entry = _entry(child)
            entry["children"].append(child_entry)
            stack.append((child, child_entry))
    return top


def _build(raw: Mapping[str, Any], segments: tuple) -> Node:
    where = join_path(segments)
    is_directory = raw["type"] == "dir"
    raw_children = raw.get("children", [])
    if raw_children and not is_directory:
        raise SnapshotError("a file cannot have children", where)
    children = []
    seen = set()
    for child in raw_children:
        name = child["name"]
        if not name or SEPARATOR in name:
            raise SnapshotError(f"invalid entry name {name!r}", where)
        if name in seen:
            raise SnapshotError(f"duplicate entry name {name!r}", where)
        seen.add(name)
        children.append(_build(child, segments + (name,)))
    return Node(raw["name"] if segments else "", is_directory, children)


def tree_from_dict(raw: Mapping[str, Any]) -> Node:
    """
    Validate a snapshot dict against FS_SCHEMA and build a root Node from it.

    The top-level entry must be a directory; its own name is ignored.
    """
    try:
        jsonschema.validate(instance=raw, schema=FS_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise SnapshotError(exc.message) from exc
    except RecursionError as exc:
        raise SnapshotError("entries are nested too deeply") from exc
    if raw["type"] != "dir":
        raise SnapshotError("the root entry must be a directory")
    try:
        root = _build(raw, ())
    except RecursionError as exc:
        raise SnapshotError("entries are nested too deeply") from exc
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Built tree with %d nodes from snapshot", root.count())
    return root


def load_snapshot(path: Union[str, Path]) -> Node:
    """Read a JSON snapshot file and return its root."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SnapshotError(f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"not valid JSON ({exc.msg})") from exc
    except RecursionError as exc:
        raise SnapshotError("entries are nested too deeply") from exc
    return tree_from_dict(raw)


def dump_snapshot(node: Node, indent: int = 2) -> str:
    return json.dumps(tree_to_dict(node), indent=indent, ensure_ascii=False)
