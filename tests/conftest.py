from __future__ import annotations

import os
from datetime import datetime
from decimal import Decimal

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from starlette.testclient import TestClient  # noqa: E402

from careerpath.core.dependencies import get_session  # noqa: E402
from careerpath.db.base import Base  # noqa: E402
from careerpath.db.models import CareerHistory, Role  # noqa: E402
from careerpath.db.session import build_engine, build_sessionmaker  # noqa: E402
from careerpath.main import app  # noqa: E402
from careerpath.services.employee_repository import EmployeeRepository  # noqa: E402
from tests.factories import make_employee  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def engine():
    engine = build_engine(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session_factory(engine):
    return build_sessionmaker(engine)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


@pytest.fixture
async def repository(session):
    return EmployeeRepository(session)


@pytest.fixture
async def async_client(session_factory):
    async def _session_override():
        async with session_factory() as s:
            yield s

    app.dependency_overrides[get_session] = _session_override
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def three_employees(session):
    """Three employees joined on strictly increasing dates; the last one is inactive."""
    employees = [
        make_employee("John Doe", datetime(2020, 1, 15), phone_number="12345678"),
        make_employee("rocky", datetime(2021, 6, 1), phone_number="888888888"),
        make_employee("Steve Smith", datetime(2022, 9, 30), status="Inactive", phone_number="83462309123"),
    ]
    session.add_all(employees)
    await session.commit()
    return employees


@pytest.fixture
async def career_graph(session):
    """A manager without a manager of their own, and a report with two positions."""
    lead = Role(title="Tech Lead", level="Lead", hierarchy_level=4)
    senior = Role(title="Senior Software Engineer", level="Senior", hierarchy_level=3)
    mid = Role(title="Software Engineer", level="Mid", hierarchy_level=2)
    session.add_all([lead, senior, mid])

    boss = make_employee("Grace Hopper", datetime(2010, 1, 4), phone_number="555-0100")
    report = make_employee("Alan Turing", datetime(2015, 3, 2))
    session.add_all([boss, report])
    await session.flush()

    session.add_all(
        [
            CareerHistory(
                employee_id=boss.id,
                role_id=lead.id,
                manager_id=None,
                department="Engineering",
                salary=Decimal("150000.00"),
                start_date=datetime(2010, 1, 4),
                notes="Head of engineering",
            ),
            CareerHistory(
                employee_id=report.id,
                role_id=mid.id,
                manager_id=boss.id,
                department="Platform",
                salary=Decimal("70000.00"),
                start_date=datetime(2015, 3, 2),
                end_date=datetime(2018, 3, 1),
            ),
            CareerHistory(
                employee_id=report.id,
                role_id=senior.id,
                manager_id=boss.id,
                department="Platform",
                salary=Decimal("95000.50"),
                start_date=datetime(2018, 3, 2),
            ),
        ]
    )
    await session.commit()
    return {"boss": boss, "report": report}
