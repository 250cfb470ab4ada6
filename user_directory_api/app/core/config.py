"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field.  The directory
keeps no state on disk, so apart from logging the only knobs are the
listener address, an optional route prefix and how the store hands
out identifiers.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Address the uvicorn server binds to when started via ``run.py``.
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8080"))

    # Prefix under which all routes are mounted, e.g. ``/api/v1``.
    # Empty by default so that the users resource lives at ``/users/``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Identifier policy for new users: ``sequential`` never reuses an
    # identifier, ``count`` derives it from the current number of users
    # (compatible with earlier releases).
    id_policy: str = os.getenv("ID_POLICY", "sequential")

    # Name of the user inserted at startup under identifier "1".
    seed_user_name: str = os.getenv("SEED_USER_NAME", "Alice")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
