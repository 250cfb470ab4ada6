"""
Application package initializer.

The API is split into a few small pieces: ``core`` (settings and
logging), ``schemas`` (request and response models), ``services``
(the in-memory user store) and ``api`` (versioned routers under
``api/<version>/``).
"""

from .main import app, create_app  # noqa: F401
