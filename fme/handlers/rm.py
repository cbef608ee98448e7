# python
"""
fme/handlers/rm.py
Handler for `rm <path>`: remove a file or a directory with all its contents.
"""
import logging

from ..errors import RootViolationError
from ..paths import join_path
from . import resolve_existing

logger = logging.getLogger(__name__)


def run(root, args):
    path = args[0]
    if not path:
        raise RootViolationError("rm")
    parent, node = resolve_existing(root, path)
    removed = parent.remove_child(node.name)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("rm %s (%d nodes)", join_path(path), removed.count())
    return removed
