"""Command execution endpoints.

No authentication or allow-listing happens here: the request body is run
through the host shell as-is.
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from machine_agent.models.commands import (
    AsyncExecuteResponse,
    ExecuteRequest,
    ExecuteResponse,
)
from machine_agent.services.executor import command_executor
from machine_agent.services.validator import EmptyCommandError

router = APIRouter(tags=["execute"])


@router.post(
    "/execute",
    response_model=ExecuteResponse,
    response_model_exclude_none=True,
)
async def execute_command(req: ExecuteRequest, response: Response) -> ExecuteResponse:
    """Run a command and wait for it to exit.

    A non-zero exit code is still a successful call; only a failure to
    spawn the shell is reported as an error.
    """
    try:
        command = command_executor.validate(req.command, "/execute")
    except EmptyCommandError as exc:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return ExecuteResponse(success=False, command="", error=str(exc))

    result = await command_executor.run_sync(command, "/execute")
    if not result.success:
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return result


@router.post(
    "/execute-async",
    response_model=AsyncExecuteResponse,
)
async def execute_command_async(
    req: ExecuteRequest,
    response: Response,
) -> AsyncExecuteResponse:
    """Start a command in the background and return its pid."""
    try:
        command = command_executor.validate(req.command, "/execute-async")
    except EmptyCommandError as exc:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return AsyncExecuteResponse(success=False, command="", error=str(exc))

    result = await command_executor.start_async(command, "/execute-async")
    if not result.success:
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return result
