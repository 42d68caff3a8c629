"""Database models and connection setup."""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ASCENDING
from typing import Optional
from config.settings import settings
from utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_DATABASE = "exercise_tracker"


class Database:
    """Database connection manager."""

    client: Optional[AsyncIOMotorClient] = None


db = Database()


async def connect_to_mongo():
    """Create database connection."""
    db.client = AsyncIOMotorClient(settings.mongodb_url)
    logger.info("Connected to MongoDB")


async def close_mongo_connection():
    """Close database connection."""
    if db.client:
        db.client.close()
        db.client = None
        logger.info("Disconnected from MongoDB")


async def init_mongo():
    """Initialize MongoDB connection and the users collection with indexes."""
    await connect_to_mongo()

    # Usernames are unique across users
    users_collection = get_users_collection()
    await users_collection.create_index([("username", ASCENDING)], unique=True)

    logger.info("MongoDB initialized: users collection created with indexes")


def get_database():
    """Get database instance."""
    if db.client is None:
        raise RuntimeError("MongoDB client is not connected")
    # Database named in the connection URL, else the default
    return db.client.get_default_database(DEFAULT_DATABASE)


def get_users_collection() -> AsyncIOMotorCollection:
    """Get users collection."""
    return get_database().users
