# python
"""
fme/handlers/md.py
Handler for `md <path>`: create a directory without creating intermediate ones.
"""
import logging

from ..errors import NameCollisionError
from ..paths import base_name, join_path
from . import describe, resolve_parent

logger = logging.getLogger(__name__)


def run(root, args):
    """
    Create an empty directory at args[0]. Fails if the parent is missing or
    if any entry (file or directory) already has that name.
    """
    path = args[0]
    if not path:
        raise NameCollisionError("/", "cannot create directory, the root already exists")
    parent = resolve_parent(
        root, path, "md should not create any intermediate directories in the path"
    )
    name = base_name(path)
    existing = parent.find_child(name)
    if existing is not None:
        raise NameCollisionError(
            join_path(path),
            f"cannot create directory, {describe(existing)} with the same name already exists",
        )
    node = parent.insert(name, True)
    logger.debug("md %s", join_path(path))
    return node
