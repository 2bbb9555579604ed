"""Pytest fixtures: in-memory database, services and an HTTP client.

Each test gets its own in-memory SQLite database, so tests never share users.
"""

import os

# Must be set before restapi_tutor is imported: settings are read at import time.
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("CREATE_TABLES", "false")

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from restapi_tutor.core.security import PasswordHasher, SessionIssuer  # noqa: E402
from restapi_tutor.db.base import Base  # noqa: E402
from restapi_tutor.db.session import build_engine, get_db  # noqa: E402
from restapi_tutor.main import create_app  # noqa: E402
from restapi_tutor.services.accounts import AccountService  # noqa: E402
from restapi_tutor.services.progress import ProgressService  # noqa: E402

TEST_SECRET = os.environ["SECRET_KEY"]
TEST_BCRYPT_ROUNDS = int(os.environ["BCRYPT_ROUNDS"])


@pytest_asyncio.fixture
async def engine():
    engine = build_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def issuer() -> SessionIssuer:
    return SessionIssuer(TEST_SECRET)


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def accounts(db, issuer, hasher) -> AccountService:
    return AccountService(db, issuer, hasher)


@pytest.fixture
def progress_service(db) -> ProgressService:
    return ProgressService(db)


@pytest_asyncio.fixture
async def client(session_factory):
    app = create_app()

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def register(client: httpx.AsyncClient, username: str = "alice", email: str | None = None,
                   password: str = "secret123") -> httpx.Response:
    """POST /auth/register with sensible defaults."""
    return await client.post(
        "/auth/register",
        json={"username": username, "email": email or f"{username}@example.com", "password": password},
    )


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
