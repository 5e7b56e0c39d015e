"""Shared pytest fixtures."""

from __future__ import annotations

import asyncio
import os
import tempfile

# Keep the default error log out of the interpreter's bin directory
os.environ.setdefault("AGENT_ERROR_LOG_DIR", tempfile.mkdtemp(prefix="machine-agent-"))
os.environ.setdefault("AGENT_SHOW_BANNER", "false")

import pytest
from httpx import ASGITransport, AsyncClient

from machine_agent.config import Settings
from machine_agent.services.error_log import ErrorLogger
from machine_agent.services.executor import CommandExecutor


@pytest.fixture
def test_settings(tmp_path):
    """Settings with the error log pointed at a per-test directory."""
    return Settings(agent_error_log_dir=str(tmp_path))


@pytest.fixture
def error_log(test_settings):
    return ErrorLogger(test_settings)


@pytest.fixture
async def executor(error_log):
    """A fresh executor; background commands are collected on teardown."""
    ex = CommandExecutor(error_log)
    yield ex
    if ex.reapers:
        await asyncio.wait(ex.reapers, timeout=10)
    await ex.shutdown()


@pytest.fixture
async def client(executor):
    """Async test client with the per-test executor injected."""
    import machine_agent.routers.execute as rx

    original = rx.command_executor
    rx.command_executor = executor

    from machine_agent.main import app as fastapi_app

    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    rx.command_executor = original


@pytest.fixture
def read_log(error_log):
    """Return a callable giving the current error log contents."""

    def _read() -> str:
        path = error_log.path
        return path.read_text(encoding="utf-8") if path.exists() else ""

    return _read
