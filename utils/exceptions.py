"""
Custom exceptions for the exercise tracker.

Each exception carries the HTTP status code it is reported with; the API
layer renders them as ``{"error": message}``.
"""


class ExerciseTrackerError(Exception):
    """Base exception for all exercise tracker errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(ExerciseTrackerError):
    """Raised when client-supplied data fails a validation rule."""

    status_code = 400


class NotFoundError(ExerciseTrackerError):
    """Raised when a referenced user does not exist."""

    status_code = 404


class ConflictError(ExerciseTrackerError):
    """Raised when a unique key (the username) is already taken."""

    status_code = 400


class StoreError(ExerciseTrackerError):
    """Raised when the underlying store fails for reasons unrelated to input."""

    status_code = 500

    def __init__(self, message: str = "Server error"):
        super().__init__(message)
