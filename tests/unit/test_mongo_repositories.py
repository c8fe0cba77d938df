"""
Unit tests for the Mongo repositories against a mocked motor collection.

These pin the exact filter and update documents, since the conditional
filters are what keeps likes and comment edits race-free.
"""
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, OperationFailure, ServerSelectionTimeoutError

from lingualearner.application.mappers.post_mapper import PostMapper
from lingualearner.domain.exceptions import (
    StoreError,
    StoreUnavailableError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from lingualearner.domain.models.post import AuthorSnapshot, Comment, Like, Post
from lingualearner.domain.models.user import User
from lingualearner.infrastructure.db.mongo_post_repository import MongoPostRepository
from lingualearner.infrastructure.db.mongo_user_repository import MongoUserRepository

HASH = "$2b$04$abcdefghijklmnopqrstuu5Xy0bNqYJx2w0pWkKp0n1lUJY5yq8y6"
POST_ID = ObjectId()
USER_ID = ObjectId()


def post_document(**overrides):
    document = {
        "_id": POST_ID,
        "title": "Hola",
        "content": "Body",
        "img": None,
        "author": {"id": str(USER_ID), "name": "Alice"},
        "likes": [],
        "comments": [],
        "created_at": datetime(2025, 1, 1, 12, 0, 0),
        "updated_at": datetime(2025, 1, 1, 12, 0, 0),
    }
    document.update(overrides)
    return document


class FakeCursor:
    def __init__(self, documents):
        self._documents = iter(documents)

    def __aiter__(self):
        return self

    async def __anext__(self):
        try:
            return next(self._documents)
        except StopIteration:
            raise StopAsyncIteration


@pytest.fixture
def post_collection():
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.find_one_and_update = AsyncMock()
    collection.insert_one = AsyncMock()
    return collection


@pytest.fixture
def user_collection():
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection


class TestMongoPostRepository:
    @pytest.mark.asyncio
    async def test_add_like_filters_out_existing_like(self, post_collection):
        post_collection.find_one_and_update.return_value = post_document(
            likes=[{"user_id": "u2", "name": "Bob"}]
        )
        repo = MongoPostRepository(post_collection)

        post = await repo.add_like(str(POST_ID), Like(user_id="u2", name="Bob"))

        query, update = post_collection.find_one_and_update.call_args.args
        assert query == {"_id": POST_ID, "likes.user_id": {"$ne": "u2"}}
        assert update["$push"] == {"likes": {"user_id": "u2", "name": "Bob"}}
        assert post_collection.find_one_and_update.call_args.kwargs["return_document"] == ReturnDocument.AFTER
        assert post.is_liked_by("u2")
        assert post.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_add_like_no_match_returns_none(self, post_collection):
        post_collection.find_one_and_update.return_value = None
        repo = MongoPostRepository(post_collection)

        assert await repo.add_like(str(POST_ID), Like(user_id="u2", name="Bob")) is None

    @pytest.mark.asyncio
    async def test_malformed_id_never_hits_the_store(self, post_collection):
        repo = MongoPostRepository(post_collection)

        assert await repo.find_by_id("not-an-object-id") is None
        assert await repo.add_like("not-an-object-id", Like(user_id="u2", name="Bob")) is None
        post_collection.find_one.assert_not_called()
        post_collection.find_one_and_update.assert_not_called()

    @pytest.mark.asyncio
    async def test_remove_like_matches_on_post_only(self, post_collection):
        post_collection.find_one_and_update.return_value = post_document()
        repo = MongoPostRepository(post_collection)

        await repo.remove_like(str(POST_ID), "u2")

        query, update = post_collection.find_one_and_update.call_args.args
        assert query == {"_id": POST_ID}
        assert update["$pull"] == {"likes": {"user_id": "u2"}}
        assert set(update["$set"]) == {"updated_at"}

    @pytest.mark.asyncio
    async def test_remove_existing_like_requires_like(self, post_collection):
        post_collection.find_one_and_update.return_value = post_document()
        repo = MongoPostRepository(post_collection)

        await repo.remove_existing_like(str(POST_ID), "u2")

        query, update = post_collection.find_one_and_update.call_args.args
        assert query == {"_id": POST_ID, "likes.user_id": "u2"}
        assert update["$pull"] == {"likes": {"user_id": "u2"}}

    @pytest.mark.asyncio
    async def test_add_comment_assigns_id(self, post_collection):
        post_collection.find_one_and_update.return_value = post_document()
        repo = MongoPostRepository(post_collection)
        comment = Comment(id=None, user_id="u2", text="hola", created_at=datetime(2025, 1, 2))

        await repo.add_comment(str(POST_ID), comment)

        _, update = post_collection.find_one_and_update.call_args.args
        pushed = update["$push"]["comments"]
        assert ObjectId.is_valid(pushed["id"])
        assert pushed["user_id"] == "u2"
        assert pushed["text"] == "hola"

    @pytest.mark.asyncio
    async def test_update_comment_guarded_by_author(self, post_collection):
        post_collection.find_one_and_update.return_value = post_document()
        repo = MongoPostRepository(post_collection)

        await repo.update_comment_text(str(POST_ID), "c1", "u2", "edited")

        query, update = post_collection.find_one_and_update.call_args.args
        assert query == {"_id": POST_ID, "comments": {"$elemMatch": {"id": "c1", "user_id": "u2"}}}
        assert update["$set"]["comments.$.text"] == "edited"
        assert "comments.$.created_at" not in update["$set"]

    @pytest.mark.asyncio
    async def test_remove_comment_guarded_by_author(self, post_collection):
        post_collection.find_one_and_update.return_value = post_document()
        repo = MongoPostRepository(post_collection)

        await repo.remove_comment(str(POST_ID), "c1", "u2")

        query, update = post_collection.find_one_and_update.call_args.args
        assert query["comments"] == {"$elemMatch": {"id": "c1", "user_id": "u2"}}
        assert update["$pull"] == {"comments": {"id": "c1"}}

    @pytest.mark.asyncio
    async def test_legacy_document_loads_and_serializes(self, post_collection):
        post_collection.find_one.return_value = post_document(
            title="t" * 250,
            comments=[{"id": "c1", "user_id": "u2", "text": ""}],
        )
        repo = MongoPostRepository(post_collection)

        post = await repo.find_by_id(str(POST_ID))

        assert len(post.title) == 250
        response = PostMapper.to_response(post)
        assert response.comments[0].text == ""
        assert response.comments[0].created_at is None

    @pytest.mark.asyncio
    async def test_create_stamps_timestamps(self, post_collection):
        post_collection.insert_one.return_value = MagicMock(inserted_id=POST_ID)
        repo = MongoPostRepository(post_collection)

        post = await repo.create(
            Post(id=None, title="T", content="C", author=AuthorSnapshot(id="u1", name="Alice"))
        )

        document = post_collection.insert_one.call_args.args[0]
        assert document["author"] == {"id": "u1", "name": "Alice"}
        assert document["likes"] == []
        assert post.id == str(POST_ID)
        assert post.created_at is not None

    @pytest.mark.asyncio
    async def test_timeout_maps_to_unavailable(self, post_collection):
        post_collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")
        repo = MongoPostRepository(post_collection)

        with pytest.raises(StoreUnavailableError) as exc_info:
            await repo.find_by_id(str(POST_ID))
        assert exc_info.value.status_code == 503
        assert "no servers" not in exc_info.value.message

    @pytest.mark.asyncio
    async def test_other_driver_error_maps_to_store_error(self, post_collection):
        post_collection.find_one_and_update.side_effect = OperationFailure("boom")
        repo = MongoPostRepository(post_collection)

        with pytest.raises(StoreError) as exc_info:
            await repo.remove_like(str(POST_ID), "u2")
        assert exc_info.value.status_code == 500


class TestMongoUserRepository:
    @pytest.mark.asyncio
    async def test_find_by_email_normalizes(self, user_collection):
        user_collection.find_one.return_value = None
        repo = MongoUserRepository(user_collection)

        await repo.find_by_email("  Alice@Lingua.IO ")

        user_collection.find_one.assert_awaited_once_with({"email": "alice@lingua.io"})

    @pytest.mark.asyncio
    async def test_insert_new_user(self, user_collection):
        user_collection.insert_one.return_value = MagicMock(inserted_id=USER_ID)
        repo = MongoUserRepository(user_collection)

        saved = await repo.save(User(id=None, name="Alice", email="alice@lingua.io", hashed_password=HASH))

        document = user_collection.insert_one.call_args.args[0]
        assert document["hashed_password"] == HASH
        assert "password" not in document
        assert "created_at" in document
        assert saved.id == str(USER_ID)

    @pytest.mark.asyncio
    async def test_duplicate_email_maps_to_conflict(self, user_collection):
        user_collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")
        repo = MongoUserRepository(user_collection)

        with pytest.raises(UserAlreadyExistsError):
            await repo.save(User(id=None, name="Alice", email="alice@lingua.io", hashed_password=HASH))

    @pytest.mark.asyncio
    async def test_update_of_vanished_user(self, user_collection):
        user_collection.update_one.return_value = MagicMock(matched_count=0)
        repo = MongoUserRepository(user_collection)

        with pytest.raises(UserNotFoundError):
            await repo.save(User(id=str(USER_ID), name="Alice", email="alice@lingua.io", hashed_password=HASH))

    @pytest.mark.asyncio
    async def test_list_all_in_insertion_order(self, user_collection):
        other_id = ObjectId()
        user_collection.find.return_value.sort.return_value = FakeCursor([
            {"_id": USER_ID, "name": "Alice", "email": "alice@lingua.io", "hashed_password": HASH},
            {"_id": other_id, "name": "Bob", "email": "bob@lingua.io", "hashed_password": HASH},
        ])
        repo = MongoUserRepository(user_collection)

        users = await repo.list_all()

        user_collection.find.assert_called_once_with({})
        user_collection.find.return_value.sort.assert_called_once_with("_id", ASCENDING)
        assert [user.id for user in users] == [str(USER_ID), str(other_id)]

    @pytest.mark.asyncio
    async def test_list_all_timeout_maps_to_unavailable(self, user_collection):
        user_collection.find.side_effect = ServerSelectionTimeoutError("no servers")
        repo = MongoUserRepository(user_collection)

        with pytest.raises(StoreUnavailableError):
            await repo.list_all()

    @pytest.mark.asyncio
    async def test_delete(self, user_collection):
        user_collection.delete_one.return_value = MagicMock(deleted_count=1)
        repo = MongoUserRepository(user_collection)

        assert await repo.delete(str(USER_ID)) is True
        user_collection.delete_one.assert_awaited_once_with({"_id": USER_ID})
        assert await repo.delete("bad-id") is False
