"""Timestamped event log written to a file."""

from __future__ import annotations

import os
import time
from types import TracebackType

DEFAULT_LOG_FILE = "default_log.txt"


class AuditLogger:
    """Writes one "<unix seconds>: <event>" line per event to a fresh file."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_LOG_FILE) -> None:
        self.path = path
        self._file = open(path, "w", encoding="utf-8")

    def log_event(self, event: str) -> None:
        """Append an event line stamped with the current time."""
        self._file.write(f"{int(time.time())}: {event}\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> AuditLogger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()