"""Shared Pydantic models for API responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Error body returned for request-level failures."""

    model_config = ConfigDict(extra="forbid")

    error: str
    code: str
    details: dict[str, Any] | list[Any] | str | None = None
    trace_id: str
