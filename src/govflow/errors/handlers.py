"""FastAPI exception handlers producing the JSON error envelope."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from govflow.errors.exceptions import AuthenticationError, GovFlowError
from govflow.models.common import ErrorResponse

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(GovFlowError)
    async def govflow_error_handler(request: Request, exc: GovFlowError):
        trace_id = getattr(request.state, "trace_id", "unknown")
        if isinstance(exc, AuthenticationError):
            logger.warning(
                "unauthenticated_request",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "trace_id": trace_id,
                },
            )
        error_response = ErrorResponse(
            error=exc.message,
            code=exc.code,
            details=exc.details,
            trace_id=trace_id,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response.model_dump(mode="json", exclude_none=True),
        )
