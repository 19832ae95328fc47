from fastapi import APIRouter

from api.v1.routes import (
    health,
)

api_router = APIRouter()

# Health check (no auth required)
api_router.include_router(health.router, prefix="/health", tags=["health"])
