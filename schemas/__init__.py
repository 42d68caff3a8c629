"""Request/response schemas for the HTTP API."""

from schemas.user import UserResponse, UserSummary
from schemas.exercise import ExerciseResponse, LogEntry, LogResponse

__all__ = [
    "UserResponse",
    "UserSummary",
    "ExerciseResponse",
    "LogEntry",
    "LogResponse",
]
