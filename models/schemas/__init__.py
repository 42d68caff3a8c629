"""Collection schemas organized by collection type."""

from models.schemas.user import Exercise, User

__all__ = [
    "Exercise",
    "User",
]
