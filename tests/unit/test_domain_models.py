"""
Unit tests for the User and Post domain models.
"""
from datetime import datetime, timezone

import pytest
from lingualearner.domain.exceptions import ValidationError
from lingualearner.domain.models.post import AuthorSnapshot, Comment, Like, Post
from lingualearner.domain.models.user import User, validate_password

HASH = "$2b$04$abcdefghijklmnopqrstuu5Xy0bNqYJx2w0pWkKp0n1lUJY5yq8y6"


def make_post(**overrides):
    fields = dict(
        title="Hello",
        content="First post",
        author=AuthorSnapshot(id="u1", name="Alice"),
    )
    fields.update(overrides)
    return Post.create(**fields)


class TestUser:
    def test_normalizes_name_and_email(self):
        user = User(id=None, name="  Alice ", email="  Alice@Lingua.IO ", hashed_password=HASH)
        assert user.name == "Alice"
        assert user.email == "alice@lingua.io"

    def test_rejects_short_name(self):
        with pytest.raises(ValidationError):
            User(id=None, name="A", email="a@lingua.io", hashed_password=HASH)

    def test_rejects_plaintext_password(self):
        with pytest.raises(ValidationError):
            User(id=None, name="Alice", email="a@lingua.io", hashed_password="secret123")

    def test_rejects_non_url_profile_picture(self):
        with pytest.raises(ValidationError):
            User(
                id=None,
                name="Alice",
                email="a@lingua.io",
                hashed_password=HASH,
                profile_picture="avatar.png",
            )


class TestValidatePassword:
    def test_accepts_up_to_72_bytes(self):
        validate_password("secret")
        validate_password("x" * 72)

    def test_rejects_short(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_password("12345")
        assert exc_info.value.message == "Password must be at least 6 characters long"

    @pytest.mark.parametrize("password", ["x" * 100, "\u00e9" * 40])
    def test_rejects_over_72_bytes(self, password):
        with pytest.raises(ValidationError) as exc_info:
            validate_password(password)
        assert exc_info.value.message == "Password cannot exceed 72 bytes"


class TestPost:
    def test_requires_title_and_content(self):
        with pytest.raises(ValidationError) as exc_info:
            make_post(title="   ")
        assert exc_info.value.message == "Title and content are required"

    def test_title_length_limit(self):
        make_post(title="t" * 200)
        with pytest.raises(ValidationError):
            make_post(title="t" * 201)

    def test_img_must_be_url(self):
        assert make_post(img="https://cdn.lingua.io/a.png").img == "https://cdn.lingua.io/a.png"
        with pytest.raises(ValidationError):
            make_post(img="ftp://cdn.lingua.io/a.png")

    def test_create_trims_fields(self):
        post = make_post(title="  Hello ", content=" Body  ", img="")
        assert post.id is None
        assert (post.title, post.content, post.img) == ("Hello", "Body", None)

    def test_stored_post_loads_without_write_rules(self):
        post = Post(
            id="p1",
            title="t" * 250,
            content="Body",
            author=AuthorSnapshot(id="u1", name="Alice"),
            comments=[Comment(id="c1", user_id="u2", text="")],
        )
        assert len(post.title) == 250
        assert post.comments[0].created_at is None

    def test_is_liked_by_compares_string_ids(self):
        post = make_post()
        post.likes.append(Like(user_id="u2", name="Bob"))
        assert post.is_liked_by("u2") is True
        assert post.is_liked_by("u3") is False

    def test_find_comment(self):
        comment = Comment(id="c1", user_id="u2", text="Nice", created_at=datetime.now(timezone.utc))
        post = make_post()
        post.comments.append(comment)
        assert post.find_comment("c1") is comment
        assert post.find_comment("missing") is None


class TestComment:
    def test_text_is_trimmed(self):
        comment = Comment.create(user_id="u1", text="  hi  ", created_at=datetime.now(timezone.utc))
        assert comment.text == "hi"
        assert comment.id is None

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_blank_text_rejected(self, text):
        with pytest.raises(ValidationError):
            Comment.create(user_id="u1", text=text, created_at=datetime.now(timezone.utc))

    def test_text_length_limit(self):
        with pytest.raises(ValidationError):
            Comment.create(user_id="u1", text="x" * 1001, created_at=datetime.now(timezone.utc))
