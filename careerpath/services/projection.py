"""Shape loaded employee graphs into API responses."""

from __future__ import annotations

from datetime import datetime

from careerpath.core.dates import format_currency, to_iso_date, utc_now
from careerpath.db.models import CareerHistory, Employee, Role
from careerpath.models.employee import CareerHistoryDetail, EmployeeDetail, RoleSummary


def to_role_summary(role: Role) -> RoleSummary:
    return RoleSummary(title=role.title, level=role.level)


def to_career_history_detail(history: CareerHistory, now: datetime | None = None) -> CareerHistoryDetail:
    manager = history.manager
    return CareerHistoryDetail(
        role=to_role_summary(history.role),
        manager_name=manager.name if manager is not None else None,
        department=history.department,
        salary=format_currency(history.salary),
        start_date=to_iso_date(history.start_date),
        end_date=to_iso_date(history.end_date),
        notes=history.notes or "",
        duration_in_months=history.duration_in_months(now),
    )


def to_employee_detail(employee: Employee, now: datetime | None = None) -> EmployeeDetail:
    """Project an employee whose career histories, roles and managers are loaded.

    A single ``now`` is used for every derived value so tenure and durations
    in one response agree with each other.
    """
    now = now or utc_now()
    histories = sorted(employee.career_histories, key=lambda h: h.start_date, reverse=True)

    return EmployeeDetail(
        id=employee.id,
        name=employee.name,
        address=employee.address,
        phone_number=employee.phone_number,
        email=employee.email,
        status=employee.status,
        date_of_joining=to_iso_date(employee.date_of_joining),
        date_of_exit=to_iso_date(employee.date_of_exit),
        tenure_in_years=employee.tenure_in_years(now),
        career_details=[to_career_history_detail(h, now) for h in histories],
    )
