"""ORM entities for employees, roles and career history."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from careerpath.core.dates import duration_in_months, tenure_in_years, utc_now
from careerpath.db.base import Base

STATUS_ACTIVE = "Active"
STATUS_INACTIVE = "Inactive"


class Employee(Base):
    __tablename__ = "employee"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str | None] = mapped_column(String, nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String, nullable=True)
    email: Mapped[str] = mapped_column(String(200), nullable=False)

    status: Mapped[str] = mapped_column(String, nullable=False, default=STATUS_ACTIVE)
    date_of_joining: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utc_now)
    date_of_exit: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    career_histories: Mapped[list[CareerHistory]] = relationship(
        back_populates="employee",
        foreign_keys="CareerHistory.employee_id",
        lazy="raise",
        passive_deletes="all",
    )
    # Reverse index of entries this employee manages; never owned, never cascaded
    managed_career_histories: Mapped[list[CareerHistory]] = relationship(
        back_populates="manager",
        foreign_keys="CareerHistory.manager_id",
        lazy="raise",
        passive_deletes="all",
    )

    def tenure_in_years(self, now: datetime | None = None) -> int:
        return tenure_in_years(self.date_of_joining, self.date_of_exit, now)

    def __repr__(self) -> str:
        return f"Employee(id={self.id!r}, name={self.name!r}, status={self.status!r})"


class Role(Base):
    __tablename__ = "role"
    __table_args__ = (Index("ix_role_title", "title", unique=True),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    # Junior, Mid, Senior, Lead, Principal, Architect
    level: Mapped[str] = mapped_column(String(50), nullable=False)
    hierarchy_level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)

    career_histories: Mapped[list[CareerHistory]] = relationship(
        back_populates="role",
        lazy="raise",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        return f"Role(id={self.id!r}, title={self.title!r}, level={self.level!r})"


class CareerHistory(Base):
    __tablename__ = "career_history"
    __table_args__ = (
        Index("ix_career_history_employee_id", "employee_id"),
        Index("ix_career_history_manager_id", "manager_id"),
        Index("ix_career_history_role_id", "role_id"),
        Index("ix_career_history_employee_id_start_date", "employee_id", "start_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        ForeignKey("employee.id", ondelete="RESTRICT"),
        nullable=False,
    )
    role_id: Mapped[int] = mapped_column(
        ForeignKey("role.id", ondelete="RESTRICT"),
        nullable=False,
    )
    # NULL for the top of the hierarchy
    manager_id: Mapped[int | None] = mapped_column(
        ForeignKey("employee.id", ondelete="RESTRICT"),
        nullable=True,
    )

    department: Mapped[str] = mapped_column(String, nullable=False)
    salary: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False, default=Decimal("0"))
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    # NULL while the position is current
    end_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    notes: Mapped[str] = mapped_column(String(500), nullable=False, default="")

    employee: Mapped[Employee] = relationship(
        back_populates="career_histories",
        foreign_keys=[employee_id],
        lazy="raise",
    )
    role: Mapped[Role] = relationship(back_populates="career_histories", lazy="raise")
    manager: Mapped[Employee | None] = relationship(
        back_populates="managed_career_histories",
        foreign_keys=[manager_id],
        lazy="raise",
    )

    def duration_in_months(self, now: datetime | None = None) -> int:
        return duration_in_months(self.start_date, self.end_date, now)

    def __repr__(self) -> str:
        return (
            f"CareerHistory(id={self.id!r}, employee_id={self.employee_id!r}, "
            f"role_id={self.role_id!r}, start_date={self.start_date!r})"
        )
