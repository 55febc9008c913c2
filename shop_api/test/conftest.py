# shop_api/test/conftest.py

import os

# Configuração de teste antes de importar a aplicação
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("BLACKLIST_CLEANUP_ON_STARTUP", "false")
os.environ.setdefault("ENVIRONMENT", "testing")

from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from shop_api.main import app
from shop_api.adapters.outbound.persistence.database import get_db
from shop_api.adapters.outbound.persistence.models import Base

API = "/api"
TEST_PASSWORD = "TestPassword123"


@pytest_asyncio.fixture
async def engine():
    """Banco SQLite em memória, recriado a cada teste."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def async_client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def user_payload():
    return {
        "username": "alice",
        "email": f"usertest-{uuid4().hex[:8]}@example.com",
        "password": TEST_PASSWORD,
        "role": "user",
    }


@pytest_asyncio.fixture
async def registered_user(async_client: AsyncClient, user_payload):
    """
    Registra um usuário pela API e retorna (payload, data da resposta).
    """
    response = await async_client.post(f"{API}/auth/register", json=user_payload)
    assert response.status_code == 201, f"Erro ao registrar usuário: {response.text}"
    return user_payload, response.json()["data"]


@pytest_asyncio.fixture
async def auth_token(async_client: AsyncClient, registered_user) -> str:
    """
    Faz login com o usuário registrado e retorna o token.
    """
    payload, _ = registered_user
    response = await async_client.post(
        f"{API}/auth/login",
        json={"email": payload["email"], "password": payload["password"]},
    )
    assert response.status_code == 200, f"Erro ao fazer login: {response.text}"
    return response.json()["token"]


@pytest.fixture
def auth_headers(auth_token):
    return {"Authorization": f"Bearer {auth_token}"}
