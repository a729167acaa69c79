"""End-to-end tests for the comment endpoints."""

import pytest

from blog.domain.repository import UserRepository
from blog.domain.value import UserRole
from tests.factories import make_user


async def post_comment(client, slug, headers=None, **body):
    body.setdefault("content", "A comment")
    return await client.post(f"/articles/{slug}/comments", json=body, headers=headers)


class TestCommentThreads:
    """GET/POST /articles/{slug}/comments."""

    @pytest.mark.asyncio
    async def test_empty_thread(self, client, published_article):
        response = await client.get(f"/articles/{published_article.slug}/comments")

        assert response.status_code == 200
        data = response.json()
        assert data["comments"] == []
        assert data["total"] == 0

    @pytest.mark.asyncio
    async def test_guest_comment_and_reply_build_a_thread(
        self, client, published_article
    ):
        # Arrange
        slug = str(published_article.slug)
        root = await post_comment(client, slug, content="Root", author_name="Ada")
        assert root.status_code == 201
        root_id = root.json()["id"]

        # Act
        reply = await post_comment(
            client, slug, content="Reply", author_name="Bob", parent_id=root_id
        )
        thread = await client.get(f"/articles/{slug}/comments")

        # Assert
        assert reply.status_code == 201
        data = thread.json()
        assert data["total"] == 2
        assert len(data["comments"]) == 1
        node = data["comments"][0]
        assert node["id"] == root_id
        assert node["replies"][0]["content"] == "Reply"
        assert node["replies"][0]["replies"] == []

    @pytest.mark.asyncio
    async def test_signed_in_comment_has_no_guest_name(
        self, client, published_article, auth_cookies
    ):
        response = await post_comment(
            client,
            published_article.slug,
            headers=auth_cookies(),
            author_name="Nobody",
        )

        assert response.status_code == 201
        assert response.json()["author_name"] is None
        assert response.json()["author_user_id"] is not None

    @pytest.mark.asyncio
    async def test_thread_shows_signed_in_author_name(
        self, client, container, published_article, auth_cookies
    ):
        # Arrange
        author = await (await container.get(UserRepository)).save(
            make_user("Margaret Hamilton")
        )
        slug = str(published_article.slug)
        await post_comment(
            client, slug, headers=auth_cookies(user_id=str(author.id)), content="Hi"
        )
        await post_comment(client, slug, author_name="Guest", content="Hello & welcome")

        # Act
        thread = await client.get(f"/articles/{slug}/comments")

        # Assert
        by_content = {c["content"]: c for c in thread.json()["comments"]}
        registered, guest = by_content["Hi"], by_content["Hello & welcome"]
        assert registered["user"] == {
            "id": str(author.id),
            "name": "Margaret Hamilton",
            "image": None,
        }
        assert guest["user"] is None

    @pytest.mark.asyncio
    async def test_guest_without_name_gets_400(self, client, published_article):
        response = await post_comment(client, published_article.slug)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_overlong_content_gets_400(self, client, published_article):
        response = await post_comment(
            client, published_article.slug, content="x" * 5001, author_name="Ada"
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_article_gets_404(self, client):
        get_response = await client.get("/articles/missing/comments")
        post_response = await post_comment(client, "missing", author_name="Ada")

        assert get_response.status_code == 404
        assert post_response.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_parent_gets_404(self, client, published_article):
        response = await post_comment(
            client,
            published_article.slug,
            author_name="Ada",
            parent_id="00000000-0000-0000-0000-000000000000",
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_thread_depth_is_capped(self, client, published_article):
        """Five nested comments fit; a sixth level is refused."""
        # Arrange
        slug = str(published_article.slug)
        parent_id = None
        for level in range(5):
            response = await post_comment(
                client, slug, author_name="Ada", parent_id=parent_id
            )
            assert response.status_code == 201, level
            parent_id = response.json()["id"]

        # Act
        response = await post_comment(
            client, slug, author_name="Ada", parent_id=parent_id
        )

        # Assert
        assert response.status_code == 400
        assert "5" in response.json()["detail"]


class TestDeleteComment:
    """DELETE /comments/{comment_id}."""

    @pytest.mark.asyncio
    async def test_requires_authentication(self, client):
        response = await client.delete("/comments/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_requires_admin(self, client, published_article, auth_cookies):
        created = await post_comment(client, published_article.slug, author_name="A")

        response = await client.delete(
            f"/comments/{created.json()['id']}", headers=auth_cookies(UserRole.USER)
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_deletes_subtree(self, client, published_article, auth_cookies):
        # Arrange
        slug = str(published_article.slug)
        root = (await post_comment(client, slug, author_name="A")).json()
        child = (
            await post_comment(client, slug, author_name="B", parent_id=root["id"])
        ).json()
        await post_comment(client, slug, author_name="C", parent_id=child["id"])
        await post_comment(client, slug, author_name="D")

        # Act
        response = await client.delete(
            f"/comments/{root['id']}", headers=auth_cookies(UserRole.ADMIN)
        )
        thread = (await client.get(f"/articles/{slug}/comments")).json()

        # Assert
        assert response.status_code == 200
        assert response.json()["deleted"] == 3
        assert thread["total"] == 1

    @pytest.mark.asyncio
    async def test_missing_comment_gets_404(self, client, auth_cookies):
        response = await client.delete(
            "/comments/00000000-0000-0000-0000-000000000000",
            headers=auth_cookies(UserRole.ADMIN),
        )

        assert response.status_code == 404


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["max_comment_depth"] == 5
