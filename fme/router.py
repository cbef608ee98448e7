# python
"""
fme/router.py
Command router that validates a batch line and dispatches it to a handler.
"""
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional

from .errors import ArgumentCountError, EmptyCommandError, UnknownCommandError
from .handlers import cp, md, mf, mv, rm
from .paths import Path, split_path
from .tree import Node, new_root

logger = logging.getLogger(__name__)

Handler = Callable[[Node, List[Path]], Optional[Node]]


@dataclass(frozen=True)
class CommandSpec:
    name: str
    arity: int
    handler: Handler
    summary: str


COMMANDS: Mapping[str, CommandSpec] = MappingProxyType(
    {
        "md": CommandSpec("md", 1, md.run, "create a directory"),
        "mf": CommandSpec("mf", 1, mf.run, "create a file"),
        "rm": CommandSpec("rm", 1, rm.run, "remove a file or a directory with its contents"),
        "cp": CommandSpec("cp", 2, cp.run, "copy a file or a directory"),
        "mv": CommandSpec("mv", 2, mv.run, "move a file or a directory"),
    }
)


@dataclass
class ParsedCommand:
    spec: CommandSpec
    args: List[Path]
    raw: str


class Router:
    """Owns the namespace tree and applies one command line at a time."""

    def __init__(self, root: Optional[Node] = None):
        self.root = root if root is not None else new_root()

    def parse(self, line: str) -> ParsedCommand:
        """
        Tokenise and validate a command line without touching the tree.

        Checks, in order: blank line, command name, path syntax of every
        argument, argument count.
        """
        argv = (line or "").split()
        if not argv:
            raise EmptyCommandError()

        cmd = argv[0]
        spec = COMMANDS.get(cmd)
        if spec is None:
            raise UnknownCommandError(cmd)

        args = [split_path(arg) for arg in argv[1:]]
        if len(args) != spec.arity:
            raise ArgumentCountError(cmd, spec.arity, len(args))
        return ParsedCommand(spec=spec, args=args, raw=line.strip())

    def dispatch(self, line: str) -> Optional[Node]:
        """
        Apply a single batch line to the tree and return the node it created,
        removed or relocated. Raises a CommandError subclass on failure, in
        which case the tree is unchanged.
        """
        command = self.parse(line)
        return command.spec.handler(self.root, command.args)

    def render(self) -> List[str]:
        return list(self.root.render())
