"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    HASHED_PASSWORD = "hashed_password"
    BIO = "bio"
    PROFILE_PICTURE = "profile_picture"
    SOCIAL_LINKS = "social_links"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    SOCIAL_PLATFORMS = ("facebook", "twitter", "instagram", "linkedin")
