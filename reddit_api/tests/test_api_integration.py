"""
Integration tests for the complete API workflow.

Covers the end-to-end subreddit/post flow, store failures surfacing as 500,
health reporting, and application lifespan handling.
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
from sqlalchemy.exc import OperationalError

from reddit_api.api.main import create_app
from reddit_api.config.settings import settings
from reddit_api.core.document_store import DocumentStore
from reddit_api.core.errors import RedditApiError


def _failing_store() -> MagicMock:
    error = OperationalError("SELECT 1", {}, Exception("connection refused"))
    collection = MagicMock()
    collection.find_one = AsyncMock(side_effect=error)
    collection.find = AsyncMock(side_effect=error)
    collection.insert_one = AsyncMock(side_effect=error)
    collection.update_one = AsyncMock(side_effect=error)
    store = MagicMock(spec=DocumentStore)
    store.collection.return_value = collection
    store.ping = AsyncMock(return_value=False)
    return store


async def _request(app, method, url, **kwargs):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.request(method, url, **kwargs)


class TestAPIIntegration:

    def test_only_api_errors_have_a_handler(self):
        """Unexpected failures are converted by each route, not by a catch-all handler."""
        app = create_app(store=_failing_store())

        assert RedditApiError in app.exception_handlers
        assert Exception not in app.exception_handlers

    async def test_subreddit_post_workflow(self, client):
        created = await client.post("/subreddits", json={"name": "go", "description": "golang"})
        assert created.status_code == 201
        assert "subredditId" in created.json()

        post = await client.post("/subreddits/go/posts", json={"title": "t", "content": "c"})
        assert post.status_code == 201

        listing = await client.get("/subreddits/go/posts")
        assert listing.status_code == 200
        posts = listing.json()
        assert len(posts) == 1
        assert posts[0]["title"] == "t"
        assert posts[0]["id"] == post.json()["postId"]

    async def test_store_failures_are_internal_errors(self):
        app = create_app(store=_failing_store())
        requests = [
            ("POST", "/subreddits", {"json": {"name": "go", "description": "golang"}}),
            ("POST", "/subreddits/go/posts", {"json": {"title": "t", "content": "c"}}),
            ("GET", "/subreddits/go/posts", {}),
            ("GET", "/subreddits/go/posts/1/comments", {}),
            ("PUT", "/subreddits/go/posts/1", {"json": {"title": "t", "content": "c"}}),
        ]

        for method, url, kwargs in requests:
            response = await _request(app, method, url, **kwargs)
            assert response.status_code == 500, url
            assert response.json() == {"message": "Internal server error"}


class TestHealthEndpoint:

    async def test_health_connected(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["service"] == settings.APP_NAME

    async def test_health_degraded(self):
        response = await _request(create_app(store=_failing_store()), "GET", "/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
        assert response.json()["database"] == "unavailable"


class TestLifespan:

    async def test_injected_store_is_not_closed(self, store):
        app = create_app(store=store)

        async with app.router.lifespan_context(app):
            assert app.state.store is store

        assert app.state.store is store
        assert await store.ping() is True

    async def test_store_built_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        app = create_app()

        async with app.router.lifespan_context(app):
            assert isinstance(app.state.store, DocumentStore)
            assert await app.state.store.ping() is True

        assert app.state.store is None
