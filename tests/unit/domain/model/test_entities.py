"""Unit tests for Comment, Tag and User entities."""

import pytest

from blog.domain.model import Comment, Tag, User
from blog.domain.value import (
    CommentContent,
    CreationTimestamp,
    EmailAddress,
    Identifier,
    TagColor,
    TagName,
    TagSlug,
    UserId,
    UserRole,
)
from tests.conftest import make_comment, make_tag, make_user


class TestComment:
    """Tests for Comment."""

    def test_create_links_post_and_author(self, post):
        author_id = UserId(Identifier.generate())

        comment = make_comment(post, author_id=author_id)

        assert comment.post_id == post.id
        assert comment.author_id == author_id
        assert comment.content.value == "Nice post"

    def test_update_content_returns_new_comment(self, post):
        comment = make_comment(post)

        updated = comment.update_content(CommentContent.from_string("Edited text"))

        assert updated.content.value == "Edited text"
        assert updated.id == comment.id
        assert comment.content.value == "Nice post"

    def test_direct_construction_is_rejected(self, post):
        with pytest.raises(TypeError):
            Comment(
                id=Identifier.generate(),
                content=CommentContent.from_string("Sneaky"),
                post_id=post.id,
                author_id=UserId(Identifier.generate()),
                created_at=CreationTimestamp.now(),
            )


class TestTag:
    """Tests for Tag."""

    def test_create(self):
        tag = make_tag("Machine Learning")

        assert tag.name.value == "Machine Learning"
        assert tag.slug.value == "machine-learning"
        assert tag.color.value == "#3B82F6"

    def test_update_properties_replaces_all_three(self):
        tag = make_tag("Python")

        updated = tag.update_properties(
            name=TagName.from_string("Rust"),
            slug=TagSlug.from_string("rust-lang"),
            color=TagColor.red(),
        )

        assert (updated.name.value, updated.slug.value, updated.color.value) == (
            "Rust",
            "rust-lang",
            "#EF4444",
        )
        assert updated.id == tag.id
        assert updated.created_at == tag.created_at

    def test_direct_construction_is_rejected(self):
        with pytest.raises(TypeError):
            Tag(
                id=Identifier.generate(),
                name=TagName.from_string("Python"),
                slug=TagSlug.from_string("python"),
                color=TagColor.blue(),
                created_at=CreationTimestamp.now(),
            )


class TestUser:
    """Tests for User."""

    def test_create_defaults_to_user_role(self):
        user = make_user()

        assert user.role is UserRole.USER
        assert not user.is_admin()

    def test_create_with_explicit_role(self):
        assert make_user(role=UserRole.ADMIN).is_admin()

    def test_change_password_replaces_hash_only(self):
        user = make_user()

        updated = user.change_password("hashed:new-secret")

        assert updated.password_hash == "hashed:new-secret"
        assert updated.email == user.email
        assert updated.role == user.role

    def test_promote_to_admin(self):
        promoted = make_user().promote_to_admin()

        assert promoted.is_admin()
        assert promoted.promote_to_admin().is_admin()

    def test_empty_password_hash_is_rejected(self):
        with pytest.raises(ValueError):
            User.create(email=EmailAddress.from_string("bob@example.com"), password_hash="")

    def test_direct_construction_is_rejected(self):
        with pytest.raises(TypeError):
            User(
                id=Identifier.generate(),
                email=EmailAddress.from_string("bob@example.com"),
                password_hash="hashed:x",
                role=UserRole.USER,
                created_at=CreationTimestamp.now(),
            )
