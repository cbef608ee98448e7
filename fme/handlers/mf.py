# python
"""
fme/handlers/mf.py
Handler for `mf <path>`: create an empty file; an existing file is left as is.
"""
import logging

from ..errors import NameCollisionError
from ..paths import base_name, join_path
from . import resolve_parent

logger = logging.getLogger(__name__)


def run(root, args):
    path = args[0]
    if not path:
        raise NameCollisionError("/", "cannot create file, the root is a directory")
    parent = resolve_parent(
        root, path, "mf should not create any intermediate directories in the path"
    )
    name = base_name(path)
    existing = parent.find_child(name)
    if existing is None:
        node = parent.insert(name, False)
        logger.debug("mf %s", join_path(path))
        return node
    if existing.is_directory:
        raise NameCollisionError(
            join_path(path),
            "cannot create file, because directory with the same name already exists",
        )
    logger.debug("mf %s: file already exists, nothing to do", join_path(path))
    return existing
