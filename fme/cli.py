# python
"""
fme/cli.py
Command line entry point: run a batch file and print the resulting tree.
"""
import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import OUTPUT_FORMATS, load_config
from .errors import EventLogError, SnapshotError
from .router import COMMANDS, Router
from .session import BatchSession
from .snapshot import dump_snapshot, load_snapshot

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1


def _build_parser(config: dict) -> argparse.ArgumentParser:
    commands = "\n".join(
        f"  {spec.name} {' '.join(['<path>'] * spec.arity)}: {spec.summary}"
        for spec in COMMANDS.values()
    )
    parser = argparse.ArgumentParser(
        prog="fme",
        description="Apply a batch of md/mf/rm/cp/mv commands to an in-memory tree.",
        epilog="commands:\n" + commands,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("batch_file", help="path of the batch file to execute")
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=config["output"]["format"],
        help="output format of the final tree (default: %(default)s)",
    )
    parser.add_argument("--seed", help="JSON snapshot to start from instead of an empty root")
    parser.add_argument(
        "--events",
        default=config["paths"]["events_file"],
        help="append JSONL command events to this file",
    )
    parser.add_argument(
        "--log-level",
        default=config["logging"]["level"],
        help="logging level (default: %(default)s)",
    )
    parser.add_argument(
        "--legacy-exit",
        action="store_true",
        default=config["exit"]["legacy"],
        help="exit with status 0 even when a command fails",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    config = load_config()
    args = _build_parser(config).parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        root = load_snapshot(args.seed) if args.seed else None
    except (OSError, SnapshotError) as exc:
        print(f"ERROR: cannot load seed snapshot: {exc}", file=sys.stderr)
        return EXIT_FAILED

    session = BatchSession(router=Router(root), events_file=args.events)
    try:
        with open(args.batch_file, encoding="utf-8") as src:
            result = session.run(src)
    except EventLogError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_FAILED
    except UnicodeDecodeError as exc:
        print(
            f"ERROR: cannot decode batch file: {exc.reason} at byte {exc.start}",
            file=sys.stderr,
        )
        return EXIT_FAILED
    except OSError as exc:
        print(f"ERROR: cannot process batch file: {exc}", file=sys.stderr)
        return EXIT_FAILED

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return EXIT_OK if args.legacy_exit else EXIT_FAILED

    if args.format == "json":
        try:
            output = dump_snapshot(session.router.root)
        except RecursionError:
            print("ERROR: tree is nested too deeply for JSON output", file=sys.stderr)
            return EXIT_FAILED
        print(output)
    else:
        for line in session.render():
            print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
