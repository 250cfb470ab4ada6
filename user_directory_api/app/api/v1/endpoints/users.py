"""
User endpoints for API v1.

Thin adapters over ``UserStore``: each route pulls its arguments from
the path or JSON body, calls exactly one store operation and returns
the result.  A missing user surfaces as ``UserNotFoundError``, which
the application turns into a plain-text 404 response.  Collections
are returned as a JSON object keyed by user id.
"""

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends

from user_directory_api.app.api.deps import get_store
from user_directory_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from user_directory_api.app.services.user_store import UserStore


logger = logging.getLogger(__name__)

router = APIRouter()


def _by_id(users: List[UserRead]) -> Dict[str, UserRead]:
    return {user.id: user for user in users}


@router.get("/", response_model=Dict[str, UserRead])
async def list_users(store: UserStore = Depends(get_store)) -> Dict[str, UserRead]:
    """Return every user, keyed by id."""
    return _by_id(store.list())


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, store: UserStore = Depends(get_store)) -> UserRead:
    """Return a single user; 404 if the id is unknown."""
    return store.get(user_id)


@router.post("/", response_model=UserRead)
async def create_user(user: UserCreate, store: UserStore = Depends(get_store)) -> UserRead:
    """Add a user.

    The identifier is assigned by the server; an ``id`` in the body is
    ignored.  Responds with the stored record.
    """
    created = store.create(user.name)
    logger.info("Created user %s", created.id)
    return created


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: str,
    user: UserUpdate,
    store: UserStore = Depends(get_store),
) -> UserRead:
    """Rename a user; 404 if the id is unknown."""
    updated = store.update(user_id, user.name)
    logger.info("Updated user %s", user_id)
    return updated


@router.delete("/{user_id}", response_model=Dict[str, UserRead])
async def delete_user(user_id: str, store: UserStore = Depends(get_store)) -> Dict[str, UserRead]:
    """Delete a user and return the users that remain.

    Deleting an unknown id is not an error; the remaining users are
    returned unchanged.
    """
    remaining = store.delete(user_id)
    logger.info("Deleted user %s (%d remaining)", user_id, len(remaining))
    return _by_id(remaining)
