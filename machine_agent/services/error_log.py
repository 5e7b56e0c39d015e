"""Append-only error log kept next to the running executable.

Only failures are recorded here; the success path never touches the file.
Every record opens the file, appends, and closes it again, so concurrent
requests rely on the OS append semantics and may interleave.

Record layout::

    2024-05-01 12:00:00 - ERROR - /execute - <message> - Command: <cmd>
    Detail: <detail>

The ``Command:`` suffix and the ``Detail:`` line are both optional.
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from machine_agent.config import Settings, settings
from machine_agent.utils.logging import get_logger

log = get_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def executable_dir() -> Path:
    """Directory holding the running program, or ``.`` if it is unknown.

    A frozen build reports itself through ``sys.executable``; otherwise the
    launched entry script (``sys.argv[0]``) is used.
    """
    if getattr(sys, "frozen", False):
        candidate = sys.executable
    else:
        candidate = sys.argv[0] if sys.argv else ""
    if not candidate:
        return Path(".")
    try:
        return Path(candidate).resolve().parent
    except OSError:
        return Path(".")


def log_file_path(cfg: Settings | None = None) -> Path:
    cfg = cfg or settings
    base = Path(cfg.agent_error_log_dir) if cfg.agent_error_log_dir else executable_dir()
    return base / cfg.agent_error_log_name


def format_record(
    endpoint: str,
    message: str,
    command: Optional[str] = None,
    detail: Optional[str] = None,
    now: Optional[datetime] = None,
) -> str:
    ts = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    entry = f"{ts} - ERROR - {endpoint} - {message}"
    if command is not None:
        entry += f" - Command: {command}"
    entry += "\n"
    if detail is not None:
        entry += f"Detail: {detail}\n"
    return entry


class ErrorLogger:
    """Writes failure records to the error log file."""

    def __init__(self, cfg: Settings | None = None) -> None:
        self._cfg = cfg or settings

    @property
    def path(self) -> Path:
        return log_file_path(self._cfg)

    def log_error(
        self,
        endpoint: str,
        message: str,
        command: Optional[str] = None,
        detail: Optional[str] = None,
    ) -> None:
        """Append one record.  Never raises on I/O problems.

        A file that cannot be opened or written is reported on stderr and
        the record is dropped.
        """
        path = self.path
        entry = format_record(endpoint, message, command=command, detail=detail)
        try:
            with path.open("a", encoding="utf-8", errors="replace") as fh:
                fh.write(entry)
        except (OSError, ValueError) as exc:
            log.error("error_log.write_failed", path=str(path), error=str(exc))


# Singleton
error_logger = ErrorLogger()
