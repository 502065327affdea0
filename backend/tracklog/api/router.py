"""
API Router

Combines all route modules.
"""

from fastapi import APIRouter

from tracklog.api.routes import elevation, logs, view

api_router = APIRouter()

api_router.include_router(elevation.router, tags=["Elevation"])
api_router.include_router(logs.router, tags=["Logs"])
api_router.include_router(view.router, tags=["Viewer"])
