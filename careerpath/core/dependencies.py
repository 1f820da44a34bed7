from __future__ import annotations

from typing import AsyncIterator

from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from careerpath.db.session import database
from careerpath.services.employee_repository import EmployeeRepository


async def get_session() -> AsyncIterator[AsyncSession]:
    if not database.initialized:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database not available",
        )

    async with database.session() as session:
        yield session


def get_repository(session: AsyncSession = Depends(get_session)) -> EmployeeRepository:  # noqa: B008
    return EmployeeRepository(session)
