"""
Pydantic models for user data.

A user is nothing more than an identifier assigned by the server and
a free-form name.  Request bodies carry only the name; any other keys
a client sends (including an ``id``) are ignored.
"""

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., examples=["Alice"])


class UserCreate(UserBase):
    """Schema for creating a user."""


class UserUpdate(UserBase):
    """Schema for renaming an existing user."""


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: str = Field(..., examples=["1"])
