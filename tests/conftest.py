import httpx
import pytest
import pytest_asyncio

from catalog_client.config import Settings as ClientSettings
from catalog_client.main import create_app as create_client_app
from catalog_server.config import Settings as ServerSettings
from catalog_server.database import create_sessionmaker, init_models
from catalog_server.main import create_app as create_server_app

BACKEND_URL = "http://catalog-server"


@pytest.fixture
def server_settings(tmp_path):
    return ServerSettings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}",
        create_schema_on_startup=False,
    )


@pytest_asyncio.fixture
async def server_app(server_settings):
    """Backend app with its tables created (ASGI transports skip startup events)."""
    app = create_server_app(server_settings)
    await init_models(app.state.engine)
    yield app
    await app.state.engine.dispose()


@pytest_asyncio.fixture
async def session(server_app):
    async with create_sessionmaker(server_app.state.engine)() as session:
        yield session


@pytest_asyncio.fixture
async def backend_client(server_app):
    """HTTP client that reaches the backend app in-process."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=server_app),
        base_url=BACKEND_URL
    ) as client:
        yield client


@pytest_asyncio.fixture
async def api(backend_client):
    """Client for the REST frontend wired to the real backend."""
    app = create_client_app(
        ClientSettings(graphql_endpoint=f"{BACKEND_URL}/graphql"),
        http_client=backend_client
    )
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://catalog"
    ) as client:
        yield client
