"""Request and response models for employees and their career history."""

from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field, field_validator

DEFAULT_PAGE_SIZE = 5
MAX_PAGE_SIZE = 10
ORDER_BY_JOINING_DATE_DESC = "joiningdatedesc"
MAX_EMAIL_LENGTH = 200
# keeps the row offset inside a signed 64-bit store integer
MAX_PAGE_NUMBER = 2**31 - 1


class EmployeeQueryParams(BaseModel):
    """Listing parameters for the employee query.

    Out-of-range values are normalised rather than rejected: a page size
    outside ``1..MAX_PAGE_SIZE`` falls back to ``DEFAULT_PAGE_SIZE`` and a
    page number below 1 is treated as the first page. Page numbers above
    ``MAX_PAGE_NUMBER`` are capped, which always lands past the last row.
    """

    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    order_by: str | None = None
    search_term: str | None = None
    is_active: str | None = None

    @field_validator("page_number", mode="before")
    @classmethod
    def _clamp_page_number(cls, value: int | None) -> int:
        if value is None or int(value) < 1:
            return 1
        return min(int(value), MAX_PAGE_NUMBER)

    @field_validator("page_size", mode="before")
    @classmethod
    def _clamp_page_size(cls, value: int | None) -> int:
        if value is None or not 1 <= int(value) <= MAX_PAGE_SIZE:
            return DEFAULT_PAGE_SIZE
        return int(value)

    @property
    def skip(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def descending(self) -> bool:
        return (self.order_by or "").lower() == ORDER_BY_JOINING_DATE_DESC


class EmployeeCreate(BaseModel):
    """Validated input for a new employee."""

    name: str = Field(..., min_length=1, max_length=100)
    address: str | None = None
    phone_number: str | None = None
    email: EmailStr
    status: str = "Active"

    @field_validator("email", mode="before")
    @classmethod
    def _check_email_length(cls, value: str) -> str:
        if isinstance(value, str) and len(value) > MAX_EMAIL_LENGTH:
            raise ValueError(f"email must be at most {MAX_EMAIL_LENGTH} characters")
        return value


class RoleSummary(BaseModel):
    title: str
    level: str


class CareerHistoryDetail(BaseModel):
    role: RoleSummary
    manager_name: str | None = None
    department: str
    salary: str
    start_date: str
    end_date: str | None = None
    notes: str = ""
    duration_in_months: int


class EmployeeDetail(BaseModel):
    id: int
    name: str
    address: str | None = None
    phone_number: str | None = None
    email: str

    status: str
    date_of_joining: str
    date_of_exit: str | None = None
    tenure_in_years: int

    career_details: list[CareerHistoryDetail] = Field(default_factory=list)


class PagedResult(BaseModel):
    total_count: int
    data: list[EmployeeDetail] = Field(default_factory=list)
