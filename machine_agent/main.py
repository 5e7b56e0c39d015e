"""FastAPI application entry-point."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from machine_agent import __version__
from machine_agent.routers import execute, health
from machine_agent.services.error_log import error_logger
from machine_agent.services.executor import command_executor
from machine_agent.utils.logging import get_logger, setup_logging

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown hooks."""
    setup_logging()
    log.info("agent.started", version=__version__, error_log=str(error_logger.path))
    yield
    # Background commands keep running; only their reapers are dropped
    await command_executor.shutdown()
    log.info("agent.stopped")


app = FastAPI(
    title="Machine Agent",
    description="Runs shell commands on this host on behalf of HTTP callers",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(execute.router)
