import os

import httpx
import pytest_asyncio
from dotenv import load_dotenv
from sqlalchemy.pool import StaticPool

project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))

# Load test environment variables from .env.test in the project root
dotenv_path = os.path.join(project_root, '.env.test')
if os.path.exists(dotenv_path):
    load_dotenv(dotenv_path=dotenv_path)

# In-memory SQLite keeps the suite self-contained; StaticPool shares the one
# connection between sessions so the tables outlive a single checkout.
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from reddit_api.api.main import create_app
from reddit_api.core.document_store import DocumentStore


@pytest_asyncio.fixture
async def store():
    """Yield a connected store with empty collections."""
    engine_kwargs = {"poolclass": StaticPool} if TEST_DATABASE_URL.startswith("sqlite") else {}
    document_store = DocumentStore(TEST_DATABASE_URL, **engine_kwargs)
    await document_store.connect(create_schema=True)
    yield document_store
    await document_store.close()


@pytest_asyncio.fixture
async def app(store):
    return create_app(store=store)


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
