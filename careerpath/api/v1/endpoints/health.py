from __future__ import annotations

from fastapi import APIRouter

from careerpath.core.config import settings
from careerpath.db.session import database

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services: dict[str, str] = {}

    if database.initialized:
        ok = await database.check_connection()
        services["database"] = "ok" if ok else "error"
    else:
        services["database"] = "error"

    all_ok = all(v == "ok" for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": database.initialized}
