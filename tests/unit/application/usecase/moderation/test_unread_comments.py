"""Unit tests for the moderation use cases."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from blog.application.usecase.moderation import (
    GetUnreadCommentsRequest,
    GetUnreadCommentsUseCase,
    GetUnreadCountRequest,
    GetUnreadCountUseCase,
    MarkCommentReadRequest,
    MarkCommentReadUseCase,
)
from blog.domain.error import NotAuthorizedError
from blog.domain.repository import (
    ArticleRepository,
    CommentRepository,
    UserRepository,
)
from blog.domain.value import UserRole
from tests.factories import make_comment, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

BASE = datetime(2024, 5, 1, 10, 0)
ADMIN_ID = str(uuid4())


async def seed(unit_env, article, count: int):
    await (await unit_env.get(ArticleRepository)).save(article)
    repo = await unit_env.get(CommentRepository)
    return [
        await repo.save(make_comment(article.id, BASE + timedelta(minutes=i)))
        for i in range(count)
    ]


class TestGetUnreadComments:
    """Tests for GetUnreadCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_newest_first_with_article(self, unit_env, article):
        # Arrange
        use_case = await unit_env.get(GetUnreadCommentsUseCase)
        comments = await seed(unit_env, article, 3)

        # Act
        response = await use_case.execute(
            GetUnreadCommentsRequest(user_id=ADMIN_ID, role=UserRole.ADMIN)
        )

        # Assert
        assert response.limit == 20
        assert [c.id for c in response.comments] == [
            str(c.id) for c in reversed(comments)
        ]
        assert response.comments[0].article.slug == str(article.slug)
        assert response.comments[0].article.title == article.title
        assert response.comments[0].user is None

    @pytest.mark.asyncio
    async def test_registered_author_is_summarized(self, unit_env, article):
        # Arrange
        use_case = await unit_env.get(GetUnreadCommentsUseCase)
        await (await unit_env.get(ArticleRepository)).save(article)
        author = await (await unit_env.get(UserRepository)).save(make_user("Linus"))
        await (await unit_env.get(CommentRepository)).save(
            make_comment(article.id, BASE, author_user_id=author.id, author_name=None)
        )

        # Act
        response = await use_case.execute(
            GetUnreadCommentsRequest(user_id=ADMIN_ID, role=UserRole.ADMIN)
        )

        # Assert
        assert response.comments[0].user.name == "Linus"
        assert response.comments[0].author_name is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "requested, expected", [(0, 1), (-5, 1), (2, 2), (1000, 100)]
    )
    async def test_limit_is_clamped(self, unit_env, article, requested, expected):
        use_case = await unit_env.get(GetUnreadCommentsUseCase)
        await seed(unit_env, article, 3)

        response = await use_case.execute(
            GetUnreadCommentsRequest(
                user_id=ADMIN_ID, role=UserRole.ADMIN, limit=requested
            )
        )

        assert response.limit == expected
        assert len(response.comments) == min(expected, 3)

    @pytest.mark.asyncio
    async def test_regular_user_is_refused(self, unit_env):
        use_case = await unit_env.get(GetUnreadCommentsUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                GetUnreadCommentsRequest(user_id=str(uuid4()), role=UserRole.USER)
            )


class TestMarkCommentRead:
    """Tests for MarkCommentReadUseCase."""

    @pytest.mark.asyncio
    async def test_marks_whole_article(self, unit_env, article):
        # Arrange
        mark_read = await unit_env.get(MarkCommentReadUseCase)
        count_unread = await unit_env.get(GetUnreadCountUseCase)
        comments = await seed(unit_env, article, 3)

        # Act
        response = await mark_read.execute(
            MarkCommentReadRequest(
                comment_id=str(comments[0].id), user_id=ADMIN_ID, role=UserRole.ADMIN
            )
        )
        remaining = await count_unread.execute(
            GetUnreadCountRequest(user_id=ADMIN_ID, role=UserRole.ADMIN)
        )

        # Assert
        assert response.id == str(comments[0].id)
        assert response.is_read is True
        assert response.read_by == ADMIN_ID
        assert response.marked_count == 3
        assert remaining.count == 0

    @pytest.mark.asyncio
    async def test_regular_user_is_refused(self, unit_env, article):
        mark_read = await unit_env.get(MarkCommentReadUseCase)
        comments = await seed(unit_env, article, 1)

        with pytest.raises(NotAuthorizedError):
            await mark_read.execute(
                MarkCommentReadRequest(
                    comment_id=str(comments[0].id),
                    user_id=str(uuid4()),
                    role=UserRole.USER,
                )
            )


class TestGetUnreadCount:
    """Tests for GetUnreadCountUseCase."""

    @pytest.mark.asyncio
    async def test_counts_unread(self, unit_env, article):
        use_case = await unit_env.get(GetUnreadCountUseCase)
        await seed(unit_env, article, 2)

        response = await use_case.execute(
            GetUnreadCountRequest(user_id=ADMIN_ID, role=UserRole.ADMIN)
        )

        assert response.count == 2
