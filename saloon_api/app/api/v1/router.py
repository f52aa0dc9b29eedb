"""
Top‑level router for version 1 of the API.

When new endpoint modules are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import audit, saloons

router = APIRouter()

router.include_router(saloons.router, prefix="/saloons", tags=["saloons"])
router.include_router(audit.router, prefix="/audit", tags=["audit"])
