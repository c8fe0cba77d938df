# Standard library imports
from typing import Dict, Iterable, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User, normalize_email
from ...domain.constants import UserFields
from ...domain.exceptions import UserAlreadyExistsError, UserNotFoundError
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_errors import translate_store_error


def _to_object_id(value: str) -> Optional[ObjectId]:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for (normalized before lookup)

        Returns:
            User domain model if found, None otherwise
        """
        email = normalize_email(email)
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            raise translate_store_error("finding user by email", e)
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        object_id = _to_object_id(user_id) if user_id else None
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise translate_store_error("finding user by ID", e)
        if document is None:
            return None
        return self._document_to_user(document)

    async def list_all(self) -> List[User]:
        users: List[User] = []
        try:
            cursor = self.user_collection.find({}).sort(UserFields.MONGO_ID, ASCENDING)
            async for document in cursor:
                users.append(self._document_to_user(document))
        except PyMongoError as e:
            raise translate_store_error("listing users", e)
        return users

    async def find_names_by_ids(self, user_ids: Iterable[str]) -> Dict[str, str]:
        object_ids = [oid for oid in (_to_object_id(uid) for uid in set(user_ids)) if oid is not None]
        if not object_ids:
            return {}

        names: Dict[str, str] = {}
        try:
            cursor = self.user_collection.find(
                {UserFields.MONGO_ID: {"$in": object_ids}},
                {UserFields.NAME: 1},
            )
            async for document in cursor:
                names[str(document[UserFields.MONGO_ID])] = document.get(UserFields.NAME, "")
        except PyMongoError as e:
            raise translate_store_error("resolving user names", e)
        return names

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            UserAlreadyExistsError: If another user already owns the email
            UserNotFoundError: If an update targets a user that no longer exists
        """
        now = utc_now()
        user_dict = self._user_to_dict(user)
        user_dict[UserFields.UPDATED_AT] = now

        try:
            if user.id:
                object_id = _to_object_id(user.id)
                if object_id is None:
                    raise UserNotFoundError()
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise UserNotFoundError()
                document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
                if document is None:
                    raise UserNotFoundError()
                return self._document_to_user(document)

            user_dict[UserFields.CREATED_AT] = now
            result = await self.user_collection.insert_one(user_dict)
            user_dict[UserFields.MONGO_ID] = result.inserted_id
            return self._document_to_user(user_dict)
        except DuplicateKeyError:
            raise UserAlreadyExistsError()
        except PyMongoError as e:
            raise translate_store_error("saving user", e)

    async def delete(self, user_id: str) -> bool:
        object_id = _to_object_id(user_id) if user_id else None
        if object_id is None:
            return False
        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise translate_store_error("deleting user", e)
        return result.deleted_count > 0

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            bio=document.get(UserFields.BIO),
            profile_picture=document.get(UserFields.PROFILE_PICTURE),
            social_links=dict(document.get(UserFields.SOCIAL_LINKS) or {}),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(UserFields.UPDATED_AT)),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document (without _id)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.BIO: user.bio,
            UserFields.PROFILE_PICTURE: user.profile_picture,
            UserFields.SOCIAL_LINKS: dict(user.social_links),
        }
