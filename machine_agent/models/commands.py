"""Request and response bodies for the command execution endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer


class ExecuteRequest(BaseModel):
    """Request body shared by POST /execute and POST /execute-async."""

    command: str = Field(description="Shell text, passed verbatim to the platform shell")
    timeout: int = Field(
        default=30,
        description="Seconds; advisory only, execution is never cut short",
    )


class ExecuteResponse(BaseModel):
    """Result of a synchronous execution.

    Either the execution fields (stdout, stderr, return_code, executed) or
    ``error`` are set.  ``return_code`` stays unset when the process was
    terminated by a signal.
    """

    success: bool
    command: str
    stdout: Optional[str] = None
    stderr: Optional[str] = None
    return_code: Optional[int] = None
    executed: Optional[bool] = None
    error: Optional[str] = None


class AsyncExecuteResponse(BaseModel):
    """Handle for a command started in the background.

    ``message`` is always serialized (null on failure); ``error`` only when set.
    """

    success: bool
    message: Optional[str] = None
    command: str
    pid: int = 0
    started_at: str = ""
    status: str = ""
    error: Optional[str] = None

    @model_serializer(mode="wrap")
    def _omit_unset_error(self, handler: SerializerFunctionWrapHandler):
        data = handler(self)
        if data.get("error") is None:
            data.pop("error", None)
        return data
