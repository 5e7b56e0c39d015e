"""Common API response models."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    platform: str


class HomeResponse(BaseModel):
    message: str
    endpoints: dict[str, str]
