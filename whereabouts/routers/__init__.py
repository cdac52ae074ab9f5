"""Routers package."""

from whereabouts.routers.api import ROUTER as api_router

__all__ = ["api_router"]
