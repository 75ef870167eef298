"""Shared builders for tests: in-memory database, JWT settings and a wired TestClient."""

from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import JwtSettings, Settings
from app.core.database import get_db
from app.core.security import PasswordHasher, TokenIssuer
from app.main import create_app
from app.models import Base
from app.repositories.users import UserStore
from app.services.identity import CredentialService

TEST_SECRET = "test-secret-for-the-catalog-suite-0123456789"

TEST_JWT = JwtSettings(
    secret=TEST_SECRET,
    issuer="catalog-tests",
    audience="catalog-tests-clients",
    expire_minutes=30,
)


def make_session_factory() -> sessionmaker:
    """Fresh in-memory SQLite database with all tables; one shared connection."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def make_credential_service(db: Session) -> CredentialService:
    return CredentialService(UserStore(db), PasswordHasher(), TokenIssuer(TEST_JWT))


def make_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "JWT_SECRET": TEST_SECRET,
        "JWT_ISSUER": TEST_JWT.issuer,
        "JWT_AUDIENCE": TEST_JWT.audience,
        "JWT_EXPIRE_MINUTES": TEST_JWT.expire_minutes,
        "DATABASE_URL": "sqlite://",
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_client(
    session_factory: sessionmaker,
    raise_server_exceptions: bool = True,
) -> TestClient:
    """TestClient for a fresh app whose get_db yields sessions from session_factory."""
    application = create_app(make_settings())

    def override_get_db() -> Generator[Session, None, None]:
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    application.dependency_overrides[get_db] = override_get_db
    return TestClient(application, raise_server_exceptions=raise_server_exceptions)


def auth_header(client: TestClient, username: str = "alice", password: str = "pw") -> dict[str, str]:
    """Register (if needed) and log in; return the Authorization header."""
    client.post("/api/auth/register", json={"username": username, "password": password})
    response = client.post("/api/auth/login", json={"username": username, "password": password})
    return {"Authorization": f"Bearer {response.json()['token']}"}
