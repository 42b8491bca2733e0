"""
Pytest configuration and shared fixtures.

Provides:
- Test environment variables (in-memory SQLite through aiosqlite)
- Async SQLAlchemy engine/session fixtures with a fresh schema per test
- Seed helpers for organizations and employees
- The 3-row employee fixture used by the list query scenarios
- An httpx AsyncClient bound to the app with the test session injected
"""

from __future__ import annotations

import os
import sys
from collections.abc import AsyncGenerator
from datetime import date
from pathlib import Path
from typing import Any

ROOT = Path(__file__).resolve().parents[1]

# Add app to path for imports
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Set test environment variables before importing app
os.environ.setdefault("DATABASE_URL_APP", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("OBSERVABILITY_STRUCTURED_LOGS", "false")

import httpx  # noqa: E402 (import after env setup)
import pytest  # noqa: E402 (import after env setup)
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession  # noqa: E402

from app.core.db import create_fresh_async_engine, init_models, make_sessionmaker  # noqa: E402
from app.core.dependencies import get_async_db_session  # noqa: E402
from app.db.models import Employee, Organization  # noqa: E402
from app.main import create_app  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# =============================================================================
# AnyIO Backend Configuration
# =============================================================================
# Per AnyIO testing docs: https://anyio.readthedocs.io/en/stable/testing.html
# This fixture ensures async fixtures work with AnyIO's pytest plugin.
@pytest.fixture
def anyio_backend():
    return "asyncio"


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
async def async_engine(anyio_backend) -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory database with all tables created."""
    engine = create_fresh_async_engine(TEST_DATABASE_URL)
    await init_models(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    session_maker = make_sessionmaker(async_engine)
    async with session_maker() as session:
        yield session


# ============================================================================
# Seed Helpers
# ============================================================================


async def acreate_organization_in_db(db: AsyncSession, name: str = "Acme Corp") -> Organization:
    organization = Organization(name=name)
    db.add(organization)
    await db.commit()
    return organization


async def acreate_employee_in_db(
    db: AsyncSession,
    organization: Organization,
    **overrides: Any,
) -> Employee:
    """Create an Employee with sensible defaults; keyword arguments override columns."""
    fields: dict[str, Any] = {
        "first_name": "Test",
        "last_name": "Employee",
        "date_of_joining": date(2020, 1, 1),
        "date_of_birth": date(1990, 1, 1),
        "salary": 50000.0,
        "title": "Engineer",
        "department": "Engineering",
        "organization_id": organization.id,
    }
    fields.update(overrides)
    employee = Employee(**fields)
    db.add(employee)
    await db.commit()
    return employee


@pytest.fixture
async def organization(db_session: AsyncSession) -> Organization:
    return await acreate_organization_in_db(db_session)


@pytest.fixture
async def three_employees(
    db_session: AsyncSession, organization: Organization
) -> dict[str, Employee]:
    """
    Two Engineering rows (60000, 40000) and one Sales row (90000).

    Joining dates increase in the order senior, junior, sales.
    """
    senior = await acreate_employee_in_db(
        db_session,
        organization,
        first_name="Grace",
        last_name="Hopper",
        title="Senior Engineer",
        department="Engineering",
        salary=60000.0,
        date_of_joining=date(2019, 5, 1),
    )
    junior = await acreate_employee_in_db(
        db_session,
        organization,
        first_name="Alan",
        last_name="Turing",
        title="Junior Engineer",
        department="Engineering",
        salary=40000.0,
        date_of_joining=date(2021, 9, 15),
    )
    sales = await acreate_employee_in_db(
        db_session,
        organization,
        first_name="Mary",
        last_name="Jackson",
        title="Account Executive",
        department="Sales",
        salary=90000.0,
        date_of_joining=date(2023, 2, 1),
    )
    return {"senior": senior, "junior": junior, "sales": sales}


# ============================================================================
# API Client Fixtures
# ============================================================================


@pytest.fixture
async def api_client(async_engine: AsyncEngine) -> AsyncGenerator[httpx.AsyncClient]:
    """
    AsyncClient bound to a fresh app whose sessions use the test engine.

    Runs in the test's event loop, so the aiosqlite engine is shared safely.
    """
    app = create_app()
    session_maker = make_sessionmaker(async_engine)

    async def _override_session() -> AsyncGenerator[AsyncSession]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_async_db_session] = _override_session

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
