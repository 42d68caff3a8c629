"""Exercise tracker service: users, exercises and logs."""

from typing import Any, Dict, List, Optional

from models.schemas import Exercise
from services.log_query import build_log
from services.store import ExerciseStore
from services.validation import (
    Clock,
    validate_date,
    validate_description,
    validate_duration,
    validate_user_id,
    validate_username,
)
from utils.exceptions import NotFoundError
from utils.helpers import format_date, serialize_user, utc_now
from utils.logger import setup_logger

logger = setup_logger(__name__)


class ExerciseService:
    """Validates requests and runs them against a store.

    Args:
        store: Persistence backend
        clock: Callable returning the current time, used for exercises
            submitted without a date
    """

    def __init__(self, store: ExerciseStore, clock: Clock = utc_now):
        self.store = store
        self.clock = clock

    async def register_user(self, username: Any) -> Dict[str, str]:
        """Create a user and return ``{username, _id}``."""
        name = validate_username(username)
        user = await self.store.create_user(name)
        logger.info(f"Created user: {user['username']} ({user['_id']})")
        return {"username": user["username"], "_id": user["_id"]}

    async def list_users(self) -> List[Dict[str, str]]:
        """Return ``{_id, username}`` of every user."""
        return [serialize_user(user) for user in await self.store.list_users()]

    async def _get_user(self, user_id: Any) -> Dict[str, Any]:
        user_id = validate_user_id(user_id)
        user = await self.store.find_user(user_id)
        if not user:
            logger.info(f"User not found: {user_id}")
            raise NotFoundError("User not found")
        return user

    async def add_exercise(
        self,
        user_id: Any,
        description: Any,
        duration: Any,
        date: Any = None,
    ) -> Dict[str, Any]:
        """Append an exercise to a user's log.

        The user id is checked and the user looked up first; the exercise
        fields are validated before the store is written to.
        """
        user = await self._get_user(user_id)

        exercise = Exercise(
            description=validate_description(description),
            duration=validate_duration(duration),
            date=validate_date(date, self.clock),
        ).model_dump()

        updated = await self.store.append_exercise(user["_id"], exercise)
        if not updated:
            raise NotFoundError("User not found")
        logger.info(f"Exercise added for user {updated['_id']}: {exercise}")

        return {
            "username": updated["username"],
            "description": exercise["description"],
            "duration": exercise["duration"],
            "date": format_date(exercise["date"]),
            "_id": updated["_id"],
        }

    async def get_log(
        self,
        user_id: Any,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Return a user's log filtered by date range and limit."""
        user = await self._get_user(user_id)
        result = build_log(user, date_from, date_to, limit)
        logger.info(f"Returning {result['count']} log entries for user {user['_id']}")
        return result
