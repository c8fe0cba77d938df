# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import AuthorSnapshot, Comment, Like, Post
from ...domain.constants import CommentFields, LikeFields, PostFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_errors import translate_store_error


LIKES_USER_ID = f"{PostFields.LIKES}.{LikeFields.USER_ID}"
COMMENT_TEXT_POSITIONAL = f"{PostFields.COMMENTS}.$.{CommentFields.TEXT}"


def _to_object_id(value: str) -> Optional[ObjectId]:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class MongoPostRepository(PostRepository):
    """
    MongoDB implementation of PostRepository.

    Likes and comments live inside the post document, so each mutation is a
    single find_one_and_update whose filter carries the precondition
    (e.g. "this user has not liked yet"). MongoDB applies filter and update
    atomically per document, which rules out duplicate likes under
    concurrent requests.
    """

    def __init__(self, post_collection: AsyncIOMotorCollection) -> None:
        self.post_collection = post_collection

    async def create(self, post: Post) -> Post:
        now = utc_now()
        document = self._post_to_dict(post)
        document[PostFields.CREATED_AT] = now
        document[PostFields.UPDATED_AT] = now
        try:
            result = await self.post_collection.insert_one(document)
        except PyMongoError as e:
            raise translate_store_error("creating post", e)
        document[PostFields.MONGO_ID] = result.inserted_id
        return self._document_to_post(document)

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None
        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise translate_store_error("finding post by ID", e)
        if document is None:
            return None
        return self._document_to_post(document)

    async def list_all(self) -> List[Post]:
        posts: List[Post] = []
        try:
            cursor = self.post_collection.find({}).sort(
                [(PostFields.CREATED_AT, DESCENDING), (PostFields.MONGO_ID, DESCENDING)]
            )
            async for document in cursor:
                posts.append(self._document_to_post(document))
        except PyMongoError as e:
            raise translate_store_error("listing posts", e)
        return posts

    async def add_like(self, post_id: str, like: Like) -> Optional[Post]:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None
        return await self._find_and_update(
            "adding like",
            {PostFields.MONGO_ID: object_id, LIKES_USER_ID: {"$ne": like.user_id}},
            {
                "$push": {PostFields.LIKES: {LikeFields.USER_ID: like.user_id, LikeFields.NAME: like.name}},
                "$set": {PostFields.UPDATED_AT: utc_now()},
            },
        )

    async def remove_like(self, post_id: str, user_id: str) -> Optional[Post]:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None
        return await self._find_and_update(
            "removing like",
            {PostFields.MONGO_ID: object_id},
            {
                "$pull": {PostFields.LIKES: {LikeFields.USER_ID: str(user_id)}},
                "$set": {PostFields.UPDATED_AT: utc_now()},
            },
        )

    async def remove_existing_like(self, post_id: str, user_id: str) -> Optional[Post]:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None
        return await self._find_and_update(
            "removing like",
            {PostFields.MONGO_ID: object_id, LIKES_USER_ID: str(user_id)},
            {
                "$pull": {PostFields.LIKES: {LikeFields.USER_ID: str(user_id)}},
                "$set": {PostFields.UPDATED_AT: utc_now()},
            },
        )

    async def add_comment(self, post_id: str, comment: Comment) -> Optional[Post]:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None
        return await self._find_and_update(
            "adding comment",
            {PostFields.MONGO_ID: object_id},
            {
                "$push": {PostFields.COMMENTS: self._comment_to_dict(comment, str(ObjectId()))},
                "$set": {PostFields.UPDATED_AT: utc_now()},
            },
        )

    async def update_comment_text(
        self, post_id: str, comment_id: str, author_id: str, text: str
    ) -> Optional[Post]:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None
        return await self._find_and_update(
            "updating comment",
            {
                PostFields.MONGO_ID: object_id,
                PostFields.COMMENTS: {
                    "$elemMatch": {CommentFields.ID: str(comment_id), CommentFields.USER_ID: str(author_id)}
                },
            },
            {"$set": {COMMENT_TEXT_POSITIONAL: text, PostFields.UPDATED_AT: utc_now()}},
        )

    async def remove_comment(self, post_id: str, comment_id: str, author_id: str) -> Optional[Post]:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None
        return await self._find_and_update(
            "deleting comment",
            {
                PostFields.MONGO_ID: object_id,
                PostFields.COMMENTS: {
                    "$elemMatch": {CommentFields.ID: str(comment_id), CommentFields.USER_ID: str(author_id)}
                },
            },
            {
                "$pull": {PostFields.COMMENTS: {CommentFields.ID: str(comment_id)}},
                "$set": {PostFields.UPDATED_AT: utc_now()},
            },
        )

    async def _find_and_update(
        self, action: str, query: Dict[str, Any], update: Dict[str, Any]
    ) -> Optional[Post]:
        try:
            document = await self.post_collection.find_one_and_update(
                query, update, return_document=ReturnDocument.AFTER
            )
        except PyMongoError as e:
            raise translate_store_error(action, e)
        if document is None:
            return None
        return self._document_to_post(document)

    def _document_to_post(self, document: Dict[str, Any]) -> Post:
        author = document.get(PostFields.AUTHOR) or {}
        return Post(
            id=str(document[PostFields.MONGO_ID]),
            title=document.get(PostFields.TITLE, ""),
            content=document.get(PostFields.CONTENT, ""),
            img=document.get(PostFields.IMG),
            author=AuthorSnapshot(id=str(author.get("id", "")), name=author.get("name", "")),
            likes=[
                Like(user_id=str(like.get(LikeFields.USER_ID)), name=like.get(LikeFields.NAME, ""))
                for like in document.get(PostFields.LIKES) or []
            ],
            comments=[
                Comment(
                    id=str(comment.get(CommentFields.ID)),
                    user_id=str(comment.get(CommentFields.USER_ID)),
                    text=comment.get(CommentFields.TEXT, ""),
                    created_at=ensure_utc(comment.get(CommentFields.CREATED_AT)),
                )
                for comment in document.get(PostFields.COMMENTS) or []
            ],
            created_at=ensure_utc(document.get(PostFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(PostFields.UPDATED_AT)),
        )

    def _post_to_dict(self, post: Post) -> Dict[str, Any]:
        return {
            PostFields.TITLE: post.title,
            PostFields.CONTENT: post.content,
            PostFields.IMG: post.img,
            PostFields.AUTHOR: {"id": post.author.id, "name": post.author.name},
            PostFields.LIKES: [
                {LikeFields.USER_ID: like.user_id, LikeFields.NAME: like.name} for like in post.likes
            ],
            PostFields.COMMENTS: [
                self._comment_to_dict(comment, comment.id or str(ObjectId())) for comment in post.comments
            ],
        }

    @staticmethod
    def _comment_to_dict(comment: Comment, comment_id: str) -> Dict[str, Any]:
        return {
            CommentFields.ID: comment_id,
            CommentFields.USER_ID: comment.user_id,
            CommentFields.TEXT: comment.text,
            CommentFields.CREATED_AT: comment.created_at,
        }
