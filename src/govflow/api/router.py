"""Master API router mounted at /api/v1."""

from fastapi import APIRouter
from govflow.api.routes import (
    boards,
    health,
    organizations,
    proposals,
    workflow,
    workflow_templates,
)

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(organizations.router)
api_router.include_router(proposals.router)
api_router.include_router(boards.router)
api_router.include_router(workflow.router)
api_router.include_router(workflow_templates.router)
