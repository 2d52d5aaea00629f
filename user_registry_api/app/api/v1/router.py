"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified
prefix.  When new domains are introduced, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import users

# Create a router for version 1 and include sub‑routers for each domain.
router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
