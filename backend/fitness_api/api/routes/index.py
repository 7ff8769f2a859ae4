"""Informational Routes: unprotected welcome and version index."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["info"])

RESOURCE_ROUTES = {
    "workout": "/api/v1/workout",
    "progress": "/api/v1/progress",
    "user": "/api/v1/user",
}


@router.get("/", response_class=PlainTextResponse)
async def welcome():
    return "Welcome to the Fitness Tracker API! Visit /api/v1 for available routes."


@router.get("/api/v1")
async def api_index():
    """List the resource route groups of API v1."""
    return {
        "message": "Fitness Tracker API v1 is running!",
        "routes": RESOURCE_ROUTES,
    }
