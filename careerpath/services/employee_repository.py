"""Employee queries and writes over an async SQLAlchemy session."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from careerpath.core.dates import utc_now
from careerpath.db.models import STATUS_ACTIVE, STATUS_INACTIVE, CareerHistory, Employee, Role
from careerpath.models.employee import EmployeeCreate, EmployeeQueryParams

logger = logging.getLogger(__name__)

# Every read path resolves the full career graph: history -> role, history -> manager
_CAREER_GRAPH = (
    selectinload(Employee.career_histories).selectinload(CareerHistory.role),
    selectinload(Employee.career_histories).selectinload(CareerHistory.manager),
)

_STATUS_FILTERS = {
    "true": STATUS_ACTIVE,
    "false": STATUS_INACTIVE,
}


def apply_filters(stmt: Select, params: EmployeeQueryParams) -> Select:
    """Restrict ``stmt`` by the active flag and the search term.

    Unrecognised ``is_active`` values leave the statement untouched. The
    search term is matched as a literal, case-insensitive substring of name,
    email or phone number; a NULL phone number never matches.
    """
    if params.is_active:
        status = _STATUS_FILTERS.get(params.is_active.lower())
        if status is not None:
            stmt = stmt.where(Employee.status == status)

    if params.search_term and params.search_term.strip():
        term = params.search_term
        stmt = stmt.where(
            or_(
                Employee.name.icontains(term, autoescape=True),
                Employee.email.icontains(term, autoescape=True),
                Employee.phone_number.is_not(None) & Employee.phone_number.icontains(term, autoescape=True),
            )
        )

    return stmt


def apply_ordering(stmt: Select, params: EmployeeQueryParams) -> Select:
    if params.descending:
        return stmt.order_by(Employee.date_of_joining.desc(), Employee.id.desc())
    return stmt.order_by(Employee.date_of_joining.asc(), Employee.id.asc())


class EmployeeRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def add_employee(self, data: EmployeeCreate) -> Employee:
        """Stage a new employee; nothing is visible until :meth:`save_changes`."""
        employee = Employee(
            name=data.name,
            address=data.address,
            phone_number=data.phone_number,
            email=str(data.email),
            status=data.status,
            date_of_joining=utc_now(),
            career_histories=[],
        )
        self.session.add(employee)
        return employee

    async def save_changes(self) -> bool:
        # an attribute set to its current value still lands in session.dirty
        modified = sum(1 for obj in self.session.dirty if self.session.is_modified(obj))
        pending = len(self.session.new) + modified + len(self.session.deleted)
        if not pending:
            logger.warning("save_changes called with nothing staged")
            return False

        await self.session.commit()
        logger.info("Committed %d change(s)", pending)
        return True

    async def get_employee_by_id(self, employee_id: int) -> Employee | None:
        stmt = (
            select(Employee)
            .where(Employee.id == employee_id)
            .options(*_CAREER_GRAPH)
        )
        with self.session.no_autoflush:
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def get_employees(self, params: EmployeeQueryParams | None = None) -> tuple[Sequence[Employee], int]:
        """Return one page of matching employees and the total match count.

        The page and the count are two statements. Both run in this session's
        transaction, but on stores below snapshot isolation a concurrent write
        between them can make the count disagree with the page.
        """
        params = params or EmployeeQueryParams()

        filtered = apply_filters(select(Employee), params)
        page_stmt = (
            apply_ordering(filtered, params)
            .options(*_CAREER_GRAPH)
            .offset(params.skip)
            .limit(params.page_size)
        )
        count_stmt = apply_filters(select(func.count()).select_from(Employee), params)

        logger.debug(
            "Listing employees page=%d size=%d desc=%s search=%r active=%r",
            params.page_number,
            params.page_size,
            params.descending,
            params.search_term,
            params.is_active,
        )

        with self.session.no_autoflush:
            employees = (await self.session.execute(page_stmt)).scalars().all()
            total_count = (await self.session.execute(count_stmt)).scalar_one()

        return employees, total_count

    async def get_roles(self) -> Sequence[Role]:
        result = await self.session.execute(select(Role).order_by(Role.hierarchy_level, Role.title))
        return result.scalars().all()
