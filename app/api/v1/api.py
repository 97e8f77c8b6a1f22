from fastapi import APIRouter
from app.core.config import settings
from app.api.v1.endpoints import (
    auth, health, engineers, projects, assignments, analytics, seed
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Resource endpoints
api_router.include_router(engineers.router, prefix="/engineers", tags=["engineers"])
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(assignments.router, prefix="/assignments", tags=["assignments"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])

# Development-only, destructive
if settings.ENABLE_SEED_ENDPOINT:
    api_router.include_router(seed.router, prefix="/seed", tags=["admin"])
