import random
import uuid
from datetime import date, datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from dental_api.core.base import Base
from dental_api.core.db import get_session
from dental_api.core.docstore import DocumentStore
from dental_api.main import create_app
from dental_api.modules.patients.models import Patient
from dental_api.modules.patients.repository import PatientRepository
import dental_api.modules.records.models  # noqa: F401  registers patient_records on Base.metadata


@pytest.fixture()
def store():
    """Isolated in-memory patient store."""
    with DocumentStore(in_memory=True) as s:
        yield s


@pytest.fixture()
def patient_repo(store):
    return PatientRepository(store)


@pytest.fixture()
async def session_factory():
    """In-memory SQLite record store, one connection shared across sessions."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    await engine.dispose()


@pytest.fixture()
async def session(session_factory):
    async with session_factory() as s:
        yield s


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def make_patient(patient_repo):
    def _make(first_name="Jane", last_name="Doe", **overrides) -> Patient:
        patient = Patient(
            id=overrides.pop("id", uuid.uuid4()),
            first_name=first_name,
            last_name=last_name,
            date_of_birth=overrides.pop("date_of_birth", date(1985, 4, 12)),
            last_appointment=overrides.pop(
                "last_appointment", datetime(2024, 1, 10, 9, 30, tzinfo=timezone.utc)
            ),
            **overrides,
        )
        return patient_repo.insert(patient)
    return _make


@pytest.fixture()
async def client(store, session_factory):
    """HTTP client against the app, wired to the in-memory stores (lifespan not run)."""
    app = create_app()
    app.state.document_store = store

    async def _session():
        async with session_factory() as s:
            yield s

    app.dependency_overrides[get_session] = _session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
