from __future__ import annotations

from datetime import datetime

from careerpath.db.models import Employee


def make_employee(
    name: str,
    joined: datetime,
    *,
    status: str = "Active",
    email: str | None = None,
    phone_number: str | None = None,
    date_of_exit: datetime | None = None,
) -> Employee:
    return Employee(
        name=name,
        email=email or f"{name.lower().replace(' ', '.')}@example.com",
        phone_number=phone_number,
        status=status,
        date_of_joining=joined,
        date_of_exit=date_of_exit,
    )
