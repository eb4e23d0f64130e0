"""
Test configuration for pytest
"""

import pytest
import os
from datetime import datetime, timezone
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session
from typing import Generator

# Test environment variables
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret"
os.environ["DEFAULT_TIMEZONE"] = "UTC"

from fastapi import Depends  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

import glambook.models  # noqa: E402,F401
from glambook.core.database import get_session  # noqa: E402
from glambook.core.dependencies import get_current_tenant, get_salon_service, get_tenant_store  # noqa: E402
from glambook.main import app  # noqa: E402
from glambook.models.tenant import Tenant  # noqa: E402
from glambook.services.salon import SalonService  # noqa: E402
from glambook.services.tenant_store import InMemoryTenantStore, TenantStore  # noqa: E402


# One in-memory SQLite database shared by every connection of a test
test_engine = create_engine(
    "sqlite://",
    echo=False,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

FIXED_NOW = datetime(2026, 3, 15, 14, 30, tzinfo=timezone.utc)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a clean database session for each test"""
    SQLModel.metadata.create_all(test_engine)

    with Session(test_engine) as session:
        yield session

    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture(scope="function")
def client(db: Session, fixed_clock) -> Generator[TestClient, None, None]:
    """API client bound to the test database and a fixed clock"""

    def override_get_session():
        yield db

    def override_get_salon_service(
        tenant: Tenant = Depends(get_current_tenant),
        store: TenantStore = Depends(get_tenant_store),
    ) -> SalonService:
        return SalonService(store, tenant.id, clock=fixed_clock)

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_salon_service] = override_get_salon_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def memory_store() -> InMemoryTenantStore:
    return InMemoryTenantStore()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


def _sign_up_and_in(client: TestClient, email: str = "owner@example.com", password: str = "password123",
                    name: str = "Salon Owner", salon_name: str = "My Salon") -> dict:
    """Register an account and return auth headers for it"""
    response = client.post("/api/v1/auth/signup", json={
        "email": email,
        "password": password,
        "name": name,
        "salonName": salon_name,
    })
    assert response.status_code == 201, response.text

    response = client.post("/api/v1/auth/signin", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_account(client: TestClient):
    """Factory fixture: sign up and sign in, returning auth headers"""
    return lambda **kwargs: _sign_up_and_in(client, **kwargs)


@pytest.fixture
def auth_headers(make_account) -> dict:
    return make_account()
