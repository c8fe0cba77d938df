"""Constants for Post model field names"""


class PostFields:
    """MongoDB field names for posts collection"""

    MONGO_ID = "_id"

    TITLE = "title"
    CONTENT = "content"
    IMG = "img"

    # Denormalized author snapshot
    AUTHOR = "author"
    AUTHOR_ID = "author.id"

    LIKES = "likes"
    COMMENTS = "comments"

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


class LikeFields:
    """Field names inside an embedded like entry"""

    USER_ID = "user_id"
    NAME = "name"


class CommentFields:
    """Field names inside an embedded comment"""

    ID = "id"
    USER_ID = "user_id"
    TEXT = "text"
    CREATED_AT = "created_at"
