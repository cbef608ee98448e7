# python
"""
fme/session.py
Fail-fast batch runner with command history and optional JSONL event logging.
"""
from dataclasses import dataclass, field
import datetime
import json
import logging
import pathlib
import uuid
from typing import Any, Iterable, List, Optional

from .errors import CommandError, EventLogError
from .router import Router

logger = logging.getLogger(__name__)


def iso_ts():
    """
    Return a timezone-aware UTC ISO timestamp (Z suffix) for logging.
    """
    dt = datetime.datetime.now(datetime.timezone.utc).replace(microsecond=0)
    return dt.isoformat().replace("+00:00", "Z")


def ensure_dir(path: pathlib.Path):
    path.mkdir(parents=True, exist_ok=True)


@dataclass
class BatchResult:
    ok: bool
    executed: int
    line_number: Optional[int] = None
    line: Optional[str] = None
    error: Optional[CommandError] = None


@dataclass
class BatchSession:
    router: Router = field(default_factory=Router)
    events_file: Optional[str] = None
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    history: List[str] = field(default_factory=list, repr=False)

    def log(self, event: str, line_number: Optional[int] = None, **fields: Any) -> None:
        if not self.events_file:
            return
        rec = {
            "ts": iso_ts(),
            "session_id": self.session_id,
            "event": event,
            "line_number": line_number,
            "payload": fields or {},
        }
        path = pathlib.Path(self.events_file)
        try:
            ensure_dir(path.parent)
            with open(path, "a", encoding="utf-8") as f:
                f.write(json.dumps(rec, ensure_ascii=False) + "\n")
        except OSError as exc:
            raise EventLogError(str(path), exc.strerror or str(exc)) from exc

    def run(self, lines: Iterable[str]) -> BatchResult:
        """
        Dispatch lines in order and stop at the first failing command.

        Commands applied before the failure stay applied; nothing after it
        runs.
        """
        if self.events_file:
            self.log("batch.start", nodes=self.router.root.count())
        executed = 0
        for line_number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            try:
                self.router.dispatch(line)
            except CommandError as exc:
                logger.info("Line %d (%r) failed: %s", line_number, line, exc)
                self.log(
                    "command.error",
                    line_number,
                    raw=line,
                    error=type(exc).__name__,
                    message=str(exc),
                )
                self.log("batch.end", ok=False, executed=executed)
                return BatchResult(
                    ok=False, executed=executed, line_number=line_number, line=line, error=exc
                )
            executed += 1
            self.history.append(line.strip())
            self.log("command.ok", line_number, raw=line)

        if logger.isEnabledFor(logging.INFO):
            logger.info(
                "Batch finished: %d commands, %d nodes", executed, self.router.root.count()
            )
        self.log("batch.end", ok=True, executed=executed)
        return BatchResult(ok=True, executed=executed)

    def render(self) -> List[str]:
        return self.router.render()
