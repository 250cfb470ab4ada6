"""
Shared FastAPI dependencies.
"""

from fastapi import Request

from user_directory_api.app.services.user_store import UserStore


def get_store(request: Request) -> UserStore:
    """Return the user store owned by the running application."""
    return request.app.state.store
