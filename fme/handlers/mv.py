# python
"""
fme/handlers/mv.py
Handler for `mv <source> <destination>`: relocate a file or directory with its contents.
"""
import logging

from ..paths import join_path
from . import plan_transfer

logger = logging.getLogger(__name__)


def run(root, args):
    """
    Detach args[0] from its parent and attach it at the destination computed
    like cp. Descendants are carried over as the same node objects.
    """
    source_path, destination_path = args
    plan = plan_transfer(root, "mv", source_path, destination_path, forbid_nested=True)
    detached = plan.source_parent.remove_child(plan.source.name)
    node = plan.target.insert(plan.name, detached.is_directory, detached.children)
    logger.debug(
        "mv %s -> %s", join_path(source_path), join_path(plan.target_path + (plan.name,))
    )
    return node
