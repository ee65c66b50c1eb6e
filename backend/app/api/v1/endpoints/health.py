from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from app.core.dependencies import get_employee_store
from app.services.employee_store import EmployeeStore

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(
    request: Request,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
):
    services: dict[str, str] = {}

    try:
        ok = await store.check_connection()
        services["employee_store"] = "ok" if ok else "error"
    except Exception:
        services["employee_store"] = "error"

    all_ok = all(v == "ok" for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": request.app.state.settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
