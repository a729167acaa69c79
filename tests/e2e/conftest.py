"""Fixtures for API tests against the in-memory container."""

from uuid import uuid4

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from blog.config import AuthSettings
from blog.domain.repository import ArticleRepository
from blog.domain.value import UserRole
from blog.interface.api.app import create_app
from blog.util.jwt import create_token
from tests.di import build_test_container
from tests.factories import make_article


@pytest_asyncio.fixture
async def container():
    test_container = build_test_container()
    yield test_container
    await test_container.close()


@pytest_asyncio.fixture
async def client(container):
    app = create_app(container)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def published_article(container):
    repo = await container.get(ArticleRepository)
    return await repo.save(make_article("Threads all the way down"))


@pytest_asyncio.fixture
async def auth_cookies(container):
    """Build cookie headers for a freshly minted user of the given role."""
    settings = await container.get(AuthSettings)

    def _cookies(role: UserRole = UserRole.USER, user_id: str | None = None):
        token = create_token(user_id or str(uuid4()), "Tester", role, settings)
        return {"Cookie": f"auth_token={token}"}

    return _cookies
