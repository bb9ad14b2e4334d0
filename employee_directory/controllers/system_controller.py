# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""System endpoints — health, readiness, metrics, debug snapshot."""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from employee_directory.core.config import Settings
from employee_directory.core.dependencies import (
    get_employee_service, get_repository, get_settings,
)
from employee_directory.core.logging import get_logger
from employee_directory.exceptions import DirectoryError
from employee_directory.repositories.base import EmployeeRepository
from employee_directory.schemas import DebugOut, EmployeeOut, HealthOut
from employee_directory.services.employee_service import EmployeeService

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthOut)
@router.get("/api/health", response_model=HealthOut)
def health_check(config: Settings = Depends(get_settings)):
    return HealthOut(
        status="OK",
        environment=config.ENVIRONMENT,
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/health/ready")
def readiness_check(repo: EmployeeRepository = Depends(get_repository)):
    try:
        repo.verify_connection()
    except Exception as exc:
        logger.warning("Readiness check failed: %s", exc)
        return JSONResponse(status_code=503,
                            content={"status": "unavailable", "storage": repo.backend_name})
    return {"status": "ok", "storage": repo.backend_name}


@router.get("/metrics")
def prometheus_metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@router.get("/api/debug", response_model=DebugOut)
def debug_snapshot(service: EmployeeService = Depends(get_employee_service),
                   config: Settings = Depends(get_settings)):
    if not config.DEBUG_ENDPOINT_ENABLED:
        raise HTTPException(status_code=404, detail="Route not found")
    try:
        employees = service.list_employees()
    except DirectoryError as exc:
        return JSONResponse(status_code=500, content={
            "error": "Debug endpoint failed", "details": exc.message,
        })
    return DebugOut(
        environment=config.ENVIRONMENT,
        employee_count=len(employees),
        employees=[EmployeeOut(**e.to_json()) for e in employees],
        database=service.repository.backend_name,
        timestamp=datetime.now(timezone.utc),
    )
