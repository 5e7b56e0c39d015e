"""Shell command execution, synchronous and fire-and-forget.

Both paths spawn ``<shell> <flag> <command>`` in the agent's working
directory through asyncio, so a long-running command only suspends the
request that started it.  There is no timeout: a synchronous command runs
for as long as it runs, and a background command is never cancelled.

Background commands are reaped by an unsupervised task per process.  Nobody
awaits those tasks; what happens inside them is visible only as debug events
on the operator log.
"""

from __future__ import annotations

import asyncio
from asyncio.subprocess import DEVNULL, PIPE
from datetime import datetime

from machine_agent.models.commands import AsyncExecuteResponse, ExecuteResponse
from machine_agent.services.error_log import ErrorLogger, error_logger
from machine_agent.services.shell import shell_argv, working_directory
from machine_agent.services.validator import EmptyCommandError, validate_command
from machine_agent.utils.logging import get_logger

log = get_logger(__name__)

STARTED_MESSAGE = "Command started successfully"


class CommandExecutor:
    """Runs shell commands and records spawn failures in the error log."""

    def __init__(self, errors: ErrorLogger | None = None) -> None:
        self._errors = errors or error_logger
        self._reapers: set[asyncio.Task[None]] = set()

    @property
    def errors(self) -> ErrorLogger:
        return self._errors

    @property
    def reapers(self) -> frozenset[asyncio.Task[None]]:
        """Reaper tasks whose process has not been collected yet."""
        return frozenset(self._reapers)

    # ── validation ────────────────────────────────────────────────────

    def validate(self, raw_command: str, endpoint: str) -> str:
        """Trim *raw_command*; log and re-raise if it turns out empty."""
        try:
            return validate_command(raw_command)
        except EmptyCommandError as exc:
            log.info("command.rejected", endpoint=endpoint)
            self._errors.log_error(endpoint, str(exc), command=raw_command)
            raise

    # ── synchronous ───────────────────────────────────────────────────

    async def run_sync(self, command: str, endpoint: str = "/execute") -> ExecuteResponse:
        """Run *command* to completion and capture its output."""
        # ValueError: NUL bytes or text the OS cannot encode
        try:
            proc = await asyncio.create_subprocess_exec(
                *shell_argv(command),
                cwd=str(working_directory()),
                stdin=DEVNULL,
                stdout=PIPE,
                stderr=PIPE,
            )
        except (OSError, ValueError) as exc:
            log.warning("command.spawn_failed", endpoint=endpoint, error=str(exc))
            self._errors.log_error(
                endpoint,
                f"Command execution failed: {exc}",
                command=command,
                detail=repr(exc),
            )
            return ExecuteResponse(success=False, command=command, error=str(exc))

        log.debug("command.started", pid=proc.pid, mode="sync")
        stdout, stderr = await proc.communicate()

        # Negative return codes mean the process died from a signal.
        return_code = proc.returncode
        if return_code is not None and return_code < 0:
            return_code = None
        log.info("command.finished", pid=proc.pid, rc=proc.returncode)

        return ExecuteResponse(
            success=True,
            command=command,
            stdout=stdout.decode(errors="replace"),
            stderr=stderr.decode(errors="replace"),
            return_code=return_code,
            executed=True,
        )

    # ── fire and forget ───────────────────────────────────────────────

    async def start_async(
        self,
        command: str,
        endpoint: str = "/execute-async",
    ) -> AsyncExecuteResponse:
        """Start *command* with its output discarded and return at once."""
        try:
            proc = await asyncio.create_subprocess_exec(
                *shell_argv(command),
                cwd=str(working_directory()),
                stdin=DEVNULL,
                stdout=DEVNULL,
                stderr=DEVNULL,
            )
        except (OSError, ValueError) as exc:
            log.warning("command.spawn_failed", endpoint=endpoint, error=str(exc))
            self._errors.log_error(
                endpoint,
                f"Failed to start command: {exc}",
                command=command,
                detail=repr(exc),
            )
            return AsyncExecuteResponse(success=False, command=command, error=str(exc))

        started_at = datetime.now().astimezone().isoformat()
        self._detach(proc)
        log.info("command.detached", pid=proc.pid)

        return AsyncExecuteResponse(
            success=True,
            message=STARTED_MESSAGE,
            command=command,
            pid=proc.pid,
            started_at=started_at,
            status="running",
        )

    def _detach(self, proc: asyncio.subprocess.Process) -> None:
        task = asyncio.create_task(_reap(proc), name=f"reap-{proc.pid}")
        self._reapers.add(task)
        task.add_done_callback(self._reapers.discard)

    # ── lifecycle ─────────────────────────────────────────────────────

    async def shutdown(self) -> None:
        """Stop waiting on background processes.  The processes keep running."""
        pending = list(self._reapers)
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        if pending:
            log.info("reaper.abandoned", count=len(pending))


async def _reap(proc: asyncio.subprocess.Process) -> None:
    try:
        rc = await proc.wait()
    except Exception as exc:
        log.debug("reaper.failed", pid=proc.pid, error=str(exc))
        return
    log.debug("reaper.exited", pid=proc.pid, rc=rc)


# Singleton
command_executor = CommandExecutor()
