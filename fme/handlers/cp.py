# python
"""
fme/handlers/cp.py
Handler for `cp <source> <destination>`: copy a file or directory with its contents.
"""
import logging

from ..paths import join_path
from . import plan_transfer

logger = logging.getLogger(__name__)


def run(root, args):
    """
    Deep-copy args[0] into the directory args[1], or to args[1] under a new
    base name when args[1] does not exist yet. The copy shares no nodes with
    the source.
    """
    source_path, destination_path = args
    plan = plan_transfer(root, "cp", source_path, destination_path)
    children = [child.clone() for child in plan.source.children]
    node = plan.target.insert(plan.name, plan.source.is_directory, children)
    logger.debug(
        "cp %s -> %s", join_path(source_path), join_path(plan.target_path + (plan.name,))
    )
    return node
