from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from careerpath.core.dependencies import get_repository
from careerpath.models.employee import RoleSummary
from careerpath.services.employee_repository import EmployeeRepository
from careerpath.services.projection import to_role_summary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/roles", tags=["roles"])


@router.get("", response_model=list[RoleSummary])
async def list_roles(
    repo: EmployeeRepository = Depends(get_repository),  # noqa: B008
):
    try:
        roles = await repo.get_roles()
    except Exception as err:
        logger.exception("Failed to list roles")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve roles",
        ) from err

    return [to_role_summary(r) for r in roles]
