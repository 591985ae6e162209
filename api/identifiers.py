"""Identifier generation for movie records."""

import uuid


def new_movie_id() -> uuid.UUID:
    """Return a fresh random 128-bit identifier (UUID4)."""
    return uuid.uuid4()
