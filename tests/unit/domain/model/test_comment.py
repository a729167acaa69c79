"""Unit tests for the Comment entity."""

from datetime import datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError

from blog.domain.model import Comment
from blog.domain.value import ArticleId, CommentId, UserId


def build(**overrides) -> Comment:
    values = {
        "id": CommentId(uuid4()),
        "article_id": ArticleId(uuid4()),
        "content": "Hello",
        "created_at": datetime(2024, 1, 1),
    }
    values.update(overrides)
    return Comment(**values)


class TestCommentAuthor:
    """Exactly one of author_user_id / author_name."""

    def test_guest_comment(self):
        comment = build(author_name="Guest")

        assert comment.is_guest

    def test_registered_comment(self):
        comment = build(author_user_id=UserId(uuid4()))

        assert not comment.is_guest

    def test_neither_author_is_rejected(self):
        with pytest.raises(ValidationError, match="author name"):
            build()

    def test_both_authors_are_rejected(self):
        with pytest.raises(ValidationError):
            build(author_user_id=UserId(uuid4()), author_name="Guest")


class TestCommentContent:
    def test_empty_content_is_rejected(self):
        with pytest.raises(ValidationError):
            build(author_name="Guest", content="")

    def test_content_limit(self):
        build(author_name="Guest", content="x" * 5000)
        with pytest.raises(ValidationError):
            build(author_name="Guest", content="x" * 5001)

    def test_comment_is_immutable(self):
        comment = build(author_name="Guest")

        with pytest.raises(ValidationError):
            comment.content = "changed"
