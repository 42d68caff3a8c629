"""Storage backends for users and their exercise logs."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidDocument, InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from models.schemas import User
from utils.exceptions import ConflictError, InvalidInputError, StoreError
from utils.logger import setup_logger

logger = setup_logger(__name__)

USERNAME_TAKEN = "Username already taken"


class ExerciseStore(ABC):
    """Persistence port used by the exercise service.

    User documents are plain dicts of the shape
    ``{"_id": str, "username": str, "log": [exercise, ...]}``, exercises being
    ``{"description": str, "duration": int, "date": datetime}``.
    """

    @abstractmethod
    async def create_user(self, username: str) -> Dict[str, Any]:
        """Insert a new user, raising ConflictError if the username exists."""

    @abstractmethod
    async def find_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Return the user with the given id, or None."""

    @abstractmethod
    async def list_users(self) -> List[Dict[str, Any]]:
        """Return ``{_id, username}`` for every user."""

    @abstractmethod
    async def append_exercise(
        self, user_id: str, exercise: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Append an exercise to a user's log and return the updated user."""

    async def close(self) -> None:
        """Release resources held by the store."""


def _user_from_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a MongoDB user document for use outside the store."""
    return {
        "_id": str(document["_id"]),
        "username": document["username"],
        "log": list(document.get("log") or []),
    }


class MongoExerciseStore(ExerciseStore):
    """Store backed by a MongoDB users collection.

    The collection needs a unique index on ``username``; ``init_mongo``
    creates it.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create_user(self, username: str) -> Dict[str, Any]:
        document = User(username=username).model_dump()
        try:
            result = await self.collection.insert_one(document)
        except DuplicateKeyError:
            logger.info(f"Username already taken: {username}")
            raise ConflictError(USERNAME_TAKEN)
        except PyMongoError as e:
            logger.error(f"Error creating user: {e}", exc_info=True)
            raise StoreError() from e

        document["_id"] = result.inserted_id
        return _user_from_document(document)

    async def find_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        try:
            document = await self.collection.find_one({"_id": ObjectId(user_id)})
        except InvalidId:
            return None
        except PyMongoError as e:
            logger.error(f"Error fetching user {user_id}: {e}", exc_info=True)
            raise StoreError() from e

        if not document:
            return None
        return _user_from_document(document)

    async def list_users(self) -> List[Dict[str, Any]]:
        try:
            cursor = self.collection.find({}, {"_id": 1, "username": 1})
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error listing users: {e}", exc_info=True)
            raise StoreError() from e

        return [{"_id": str(doc["_id"]), "username": doc["username"]} for doc in documents]

    async def append_exercise(
        self, user_id: str, exercise: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        try:
            document = await self.collection.find_one_and_update(
                {"_id": ObjectId(user_id)},
                {"$push": {"log": exercise}},
                return_document=ReturnDocument.AFTER,
            )
        except InvalidId:
            return None
        except (OverflowError, InvalidDocument) as e:
            logger.info(f"Exercise for user {user_id} can't be stored: {e}")
            raise InvalidInputError("Exercise can't be stored") from e
        except PyMongoError as e:
            logger.error(f"Error appending exercise for user {user_id}: {e}", exc_info=True)
            raise StoreError() from e

        if not document:
            return None
        return _user_from_document(document)


class InMemoryExerciseStore(ExerciseStore):
    """Store keeping users in process memory.

    Identifiers are generated ObjectIds, so ids look the same as with
    MongoDB. Returned documents are copies; mutating them doesn't touch the
    store.
    """

    def __init__(self):
        self._users: Dict[str, Dict[str, Any]] = {}

    @staticmethod
    def _copy(user: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "_id": user["_id"],
            "username": user["username"],
            "log": [dict(entry) for entry in user["log"]],
        }

    async def create_user(self, username: str) -> Dict[str, Any]:
        if any(user["username"] == username for user in self._users.values()):
            logger.info(f"Username already taken: {username}")
            raise ConflictError(USERNAME_TAKEN)

        user = {"_id": str(ObjectId()), **User(username=username).model_dump()}
        self._users[user["_id"]] = user
        return self._copy(user)

    async def find_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        user = self._users.get(user_id.lower())
        return self._copy(user) if user else None

    async def list_users(self) -> List[Dict[str, Any]]:
        return [{"_id": user["_id"], "username": user["username"]} for user in self._users.values()]

    async def append_exercise(
        self, user_id: str, exercise: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        user = self._users.get(user_id.lower())
        if not user:
            return None
        user["log"].append(dict(exercise))
        return self._copy(user)

    async def close(self) -> None:
        self._users.clear()
