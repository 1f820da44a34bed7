"""Populate-if-empty bootstrap for employees, roles and career history.

Each table is loaded from its JSON file only when the table has no rows, so
running the seed repeatedly is harmless. Career history rows reference
employees by email and roles by title; the references are resolved against
whatever is in the database when the history is loaded.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from careerpath.core.dates import utc_now
from careerpath.db.models import CareerHistory, Employee, Role

logger = logging.getLogger(__name__)

DEFAULT_SEED_DIR = Path(__file__).parent / "seed_data"

EMPLOYEES_FILE = "employees.json"
ROLES_FILE = "roles.json"
CAREER_HISTORY_FILE = "career_history.json"


class SeedDataError(Exception):
    pass


def _load_json(path: Path) -> list[dict[str, Any]]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise SeedDataError(f"Seed file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise SeedDataError(f"Seed file is not valid JSON: {path}: {e}") from e

    if not isinstance(data, list):
        raise SeedDataError(f"Seed file must contain a JSON list: {path}")
    return data


def _parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value)


async def _is_empty(session: AsyncSession, model: type) -> bool:
    count = (await session.execute(select(func.count()).select_from(model))).scalar_one()
    return count == 0


def build_employee(raw: dict[str, Any]) -> Employee:
    return Employee(
        name=raw["name"],
        address=raw.get("address"),
        phone_number=raw.get("phone_number"),
        email=raw["email"],
        status=raw.get("status", "Active"),
        date_of_joining=_parse_datetime(raw.get("date_of_joining")) or utc_now(),
        date_of_exit=_parse_datetime(raw.get("date_of_exit")),
    )


def build_role(raw: dict[str, Any]) -> Role:
    return Role(
        title=raw["title"],
        level=raw["level"],
        hierarchy_level=raw.get("hierarchy_level", 0),
        description=raw.get("description"),
    )


def build_career_history(
    raw: dict[str, Any],
    employee_ids: dict[str, int],
    role_ids: dict[str, int],
) -> CareerHistory:
    employee_email = raw["employee_email"]
    role_title = raw["role_title"]
    manager_email = raw.get("manager_email")

    if employee_email not in employee_ids:
        raise SeedDataError(f"Unknown employee in career history: {employee_email}")
    if role_title not in role_ids:
        raise SeedDataError(f"Unknown role in career history: {role_title}")
    if manager_email and manager_email not in employee_ids:
        raise SeedDataError(f"Unknown manager in career history: {manager_email}")

    return CareerHistory(
        employee_id=employee_ids[employee_email],
        role_id=role_ids[role_title],
        manager_id=employee_ids[manager_email] if manager_email else None,
        department=raw["department"],
        salary=Decimal(str(raw.get("salary", 0))),
        start_date=_parse_datetime(raw["start_date"]),
        end_date=_parse_datetime(raw.get("end_date")),
        notes=raw.get("notes", ""),
    )


async def seed_database(session: AsyncSession, data_dir: Path | str | None = None) -> dict[str, int]:
    """Load seed data into empty tables and return the number of rows added per table."""
    seed_dir = Path(data_dir) if data_dir else DEFAULT_SEED_DIR
    added = {"employees": 0, "roles": 0, "career_histories": 0}

    if await _is_empty(session, Employee):
        employees = [build_employee(raw) for raw in _load_json(seed_dir / EMPLOYEES_FILE)]
        session.add_all(employees)
        await session.commit()
        added["employees"] = len(employees)

    if await _is_empty(session, Role):
        roles = [build_role(raw) for raw in _load_json(seed_dir / ROLES_FILE)]
        session.add_all(roles)
        await session.commit()
        added["roles"] = len(roles)

    if await _is_empty(session, CareerHistory):
        employee_rows = await session.execute(select(Employee.email, Employee.id))
        employee_ids = {email: id_ for email, id_ in employee_rows.all()}
        role_rows = await session.execute(select(Role.title, Role.id))
        role_ids = {title: id_ for title, id_ in role_rows.all()}
        histories = [
            build_career_history(raw, employee_ids, role_ids)
            for raw in _load_json(seed_dir / CAREER_HISTORY_FILE)
        ]
        session.add_all(histories)
        await session.commit()
        added["career_histories"] = len(histories)

    logger.info(
        "Seed complete: %d employees, %d roles, %d career histories added",
        added["employees"],
        added["roles"],
        added["career_histories"],
    )
    return added
