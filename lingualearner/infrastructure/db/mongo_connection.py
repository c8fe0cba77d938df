# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import Settings, get_settings
from ...domain.constants import PostFields, UserFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
POSTS_COLLECTION = "posts"


class MongoConnection:
    """
    Owns the MongoDB client for one application lifetime.

    Created and opened by the app lifespan, handed to the DI container, and
    closed on shutdown. Nothing else holds a reference to the client.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> AsyncIOMotorDatabase:
        """
        Open the client and verify the server answers.

        Raises:
            pymongo.errors.PyMongoError: If the server cannot be reached
        """
        if self._database is not None:
            return self._database

        timeout_ms = self.settings.mongo_timeout_ms
        client = AsyncIOMotorClient(
            self.settings.mongo_uri,
            serverSelectionTimeoutMS=timeout_ms,
            timeoutMS=timeout_ms,
        )
        try:
            await client.admin.command("ping")
        except Exception:
            client.close()
            raise

        self._client = client
        self._database = client[self.settings.mongo_database_name]
        logger.info(f"Connected to MongoDB database '{self.settings.mongo_database_name}'")
        return self._database

    async def ensure_indexes(self) -> None:
        """Create the indexes the repositories rely on (idempotent)."""
        await self.users.create_index([(UserFields.EMAIL, ASCENDING)], unique=True)
        await self.posts.create_index([(PostFields.CREATED_AT, DESCENDING)])
        await self.posts.create_index([(PostFields.AUTHOR_ID, ASCENDING)])

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._database = None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._database is None:
            raise RuntimeError("MongoDB connection is not open")
        return self._database

    @property
    def users(self) -> AsyncIOMotorCollection:
        """
        Get users collection from MongoDB

        Returns:
            MongoDB collection for users
        """
        return self.database[USERS_COLLECTION]

    @property
    def posts(self) -> AsyncIOMotorCollection:
        """
        Get posts collection from MongoDB

        Returns:
            MongoDB collection for posts
        """
        return self.database[POSTS_COLLECTION]
