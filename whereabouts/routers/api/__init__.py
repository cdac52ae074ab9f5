"""API routes package."""

from fastapi import APIRouter

from whereabouts.routers.api import locations

# Create main API router with /api prefix
ROUTER = APIRouter(prefix="/api")

# Include all sub-routers
ROUTER.include_router(locations.ROUTER)

__all__ = [
    "locations",
    "ROUTER",
]
