"""
HTTP routes.
"""

from fastapi import APIRouter

from devcamper.api.routes.bootcamps import router as bootcamps_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(bootcamps_router)

__all__ = ["api_router"]
