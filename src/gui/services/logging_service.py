"""In-process log capture for the graph widgets.

A ``LogCapture`` handler keeps the newest records in a bounded buffer so a
diagnostics panel, the ``python -m gui`` entry point or a test can inspect
what the data model and view model reported (pie slices dropped beyond the
cap, tooltip dates past a period's end, degenerate drawing scales).

``configure_logging`` is the one call an application makes at start-up: it
sets the level of the ``domain``, ``utils`` and ``gui`` loggers and hooks the
process-wide capture onto the root logger.
"""

from __future__ import annotations

import json
import logging
from collections import deque
from dataclasses import asdict, dataclass
from pathlib import Path
from threading import RLock
from typing import Callable, Iterable, List, Optional

from config import settings

__all__ = [
    "LogCapture",
    "LogEntry",
    "LoggingService",
    "configure_logging",
    "get_logging_service",
]

log = logging.getLogger(__name__)

PACKAGE_LOGGERS = ("domain", "utils", "gui")
DEFAULT_EXPORT_NAME = "graphview-logs.jsonl"

LogListener = Callable[["LogEntry"], None]


@dataclass(frozen=True)
class LogEntry:
    level: str
    name: str
    message: str
    created: float
    pathname: str
    lineno: int

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "LogEntry":
        return cls(
            level=record.levelname,
            name=record.name,
            message=record.getMessage(),
            created=record.created,
            pathname=record.pathname,
            lineno=record.lineno,
        )

    def matches(self, level: str | None, name_contains: str | None) -> bool:
        if level and self.level != level.upper():
            return False
        return not name_contains or name_contains in self.name

    def to_json(self) -> str:
        return json.dumps(asdict(self), sort_keys=True)


class LogCapture(logging.Handler):
    """Handler that buffers entries and fans them out to listeners.

    A listener that raises is dropped; its failure is reported through this
    module's logger once it is no longer subscribed, so the report cannot
    recurse into it.
    """

    def __init__(self, capacity: int) -> None:
        super().__init__(level=logging.DEBUG)
        self._buffer: deque[LogEntry] = deque(maxlen=capacity)
        self._listeners: List[LogListener] = []
        self._guard = RLock()

    @property
    def listeners(self) -> List[LogListener]:
        with self._guard:
            return list(self._listeners)

    def add_listener(self, listener: LogListener) -> None:
        with self._guard:
            self._listeners.append(listener)

    def remove_listener(self, listener: LogListener) -> None:
        with self._guard:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def emit(self, record: logging.LogRecord) -> None:
        entry = LogEntry.from_record(record)
        with self._guard:
            self._buffer.append(entry)
            listeners = list(self._listeners)
        failed = []
        for listener in listeners:
            try:
                listener(entry)
            except Exception:  # noqa: BLE001 - a broken panel must not break logging
                self.remove_listener(listener)
                failed.append(listener)
        for listener in failed:
            log.exception("log listener %r failed; unsubscribed", listener)

    def snapshot(self) -> List[LogEntry]:
        with self._guard:
            return list(self._buffer)

    def reset(self) -> None:
        with self._guard:
            self._buffer.clear()


class LoggingService:
    """Owns one ``LogCapture`` and the logger it is attached to."""

    def __init__(self, capacity: int = settings.LOG_BUFFER_CAPACITY) -> None:
        self._capture = LogCapture(capacity)
        self._target: Optional[logging.Logger] = None

    @property
    def capacity(self) -> int:
        return self._capture._buffer.maxlen or 0

    @property
    def attached(self) -> bool:
        return self._target is not None

    def attach_root(self) -> None:
        """Capture every record reaching the root logger; repeated calls are no-ops."""
        if self._target is not None:
            return
        root = logging.getLogger()
        root.addHandler(self._capture)
        if root.level > self._capture.level:
            root.setLevel(self._capture.level)
        self._target = root

    def detach_root(self) -> None:
        if self._target is None:
            return
        self._target.removeHandler(self._capture)
        self._target = None

    def subscribe(self, listener: LogListener) -> None:
        self._capture.add_listener(listener)

    def unsubscribe(self, listener: LogListener) -> None:
        self._capture.remove_listener(listener)

    def listeners(self) -> List[LogListener]:
        return self._capture.listeners

    # Queries ---------------------------------------------------------
    def recent(self, limit: Optional[int] = None) -> List[LogEntry]:
        entries = self._capture.snapshot()
        if limit is None:
            return entries
        return entries[-limit:] if limit > 0 else []

    def filter(self, *, level: str | None = None, name_contains: str | None = None) -> List[LogEntry]:
        return [e for e in self.recent() if e.matches(level, name_contains)]

    def clear(self) -> None:
        self._capture.reset()

    def export_jsonl(
        self,
        path: str | Path | None = None,
        *,
        level: str | None = None,
        name_contains: str | None = None,
        append: bool = False,
    ) -> int:
        """Write the matching entries as JSON Lines and return how many were written.

        Without ``path`` the file lands in the working directory as
        ``graphview-logs.jsonl``.
        """
        entries = self.filter(level=level, name_contains=name_contains)
        target = Path(path) if path is not None else Path.cwd() / DEFAULT_EXPORT_NAME
        _write_lines(target, (e.to_json() for e in entries), append=append)
        return len(entries)


def _write_lines(target: Path, lines: Iterable[str], *, append: bool) -> None:
    with target.open("a" if append else "w", encoding="utf-8") as fh:
        for line in lines:
            fh.write(line + "\n")


_service: LoggingService | None = None


def get_logging_service() -> LoggingService:
    """Process-wide service, created on first use."""
    global _service
    if _service is None:
        _service = LoggingService()
    return _service


def configure_logging(level: str | int = settings.LOG_LEVEL) -> LoggingService:
    """Apply ``level`` to the package loggers and start capturing on the root logger."""
    if isinstance(level, str):
        level = level.upper()
    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(level)
    svc = get_logging_service()
    svc.attach_root()
    log.debug("package loggers set to %s", logging.getLevelName(logging.getLogger(PACKAGE_LOGGERS[0]).level))
    return svc
