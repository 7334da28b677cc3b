"""Identifier generation."""

import uuid
from collections.abc import Callable

IdFactory = Callable[[], str]


def new_id() -> str:
    """Return a new opaque, globally unique identifier."""
    return str(uuid.uuid4())
