"""
Top-level router for version 1 of the API.

This router aggregates the domain-specific routers.  When new
endpoints are added, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import greetings, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
# Greeting routes sit at the root ("/", "/echo", "/hey/{id}") and
# therefore take no prefix.
router.include_router(greetings.router, tags=["greetings"])
