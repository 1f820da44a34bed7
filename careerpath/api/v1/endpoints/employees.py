from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from careerpath.core.dependencies import get_repository
from careerpath.models.employee import EmployeeCreate, EmployeeDetail, EmployeeQueryParams, PagedResult
from careerpath.services.employee_repository import EmployeeRepository
from careerpath.services.projection import to_employee_detail

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=PagedResult, response_model_exclude_none=True)
async def list_employees(
    page_number: int | None = Query(None, alias="pageNumber"),
    page_size: int | None = Query(None, alias="pageSize"),
    order_by: str | None = Query(None, alias="orderBy"),
    search_term: str | None = Query(None, alias="searchTerm"),
    is_active: str | None = Query(None, alias="isActive"),
    repo: EmployeeRepository = Depends(get_repository),  # noqa: B008
):
    params = EmployeeQueryParams(
        page_number=page_number,
        page_size=page_size,
        order_by=order_by,
        search_term=search_term,
        is_active=is_active,
    )
    try:
        employees, total_count = await repo.get_employees(params)
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from err

    return PagedResult(
        total_count=total_count,
        data=[to_employee_detail(e) for e in employees],
    )


@router.get("/{employee_id}", response_model=EmployeeDetail, response_model_exclude_none=True)
async def get_employee(
    employee_id: int,
    repo: EmployeeRepository = Depends(get_repository),  # noqa: B008
):
    try:
        employee = await repo.get_employee_by_id(employee_id)
    except Exception as err:
        logger.exception("Failed to get employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employee",
        ) from err

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id {employee_id} not found",
        )

    return to_employee_detail(employee)


@router.post(
    "",
    response_model=EmployeeDetail,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    payload: EmployeeCreate,
    repo: EmployeeRepository = Depends(get_repository),  # noqa: B008
):
    try:
        employee = repo.add_employee(payload)
        saved = await repo.save_changes()
        created = await repo.get_employee_by_id(employee.id) if saved else None
    except Exception as err:
        logger.exception("Failed to create employee %s", payload.email)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create employee",
        ) from err

    if not created:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Problem creating employee",
        )

    logger.info("Created employee id=%s", created.id)
    return to_employee_detail(created)
