# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Employee Directory Service
==========================
REST façade for the internal employee dashboard: employee CRUD, derived
dashboard statistics, and an email action forwarded to a workflow webhook.

Storage backend (memory / json / sql) is chosen once at startup from
STORAGE_BACKEND and injected into the service layer.

Port: 5000
"""
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match, Mount

from employee_directory.controllers import (
    dashboard_controller, employee_controller, notification_controller,
    system_controller,
)
from employee_directory.core.config import Settings, settings
from employee_directory.core.database import build_repository
from employee_directory.core.dependencies import build_container
from employee_directory.core.logging import get_logger
from employee_directory.exceptions import DirectoryError
from employee_directory.middleware import MetricsMiddleware, RequestIDMiddleware
from employee_directory.repositories.base import EmployeeRepository
from employee_directory.services.webhook_client import WebhookClient

logger = get_logger(settings.SERVICE_NAME)


def _ui_index(config: Settings) -> Optional[str]:
    if not config.STATIC_DIR:
        return None
    index = os.path.join(config.STATIC_DIR, "index.html")
    return index if os.path.isfile(index) else None


def _has_api_route(application: FastAPI, request: Request) -> bool:
    scope = {"type": "http", "path": request.url.path, "root_path": "",
             "method": request.method}
    return any(
        route.matches(scope)[0] != Match.NONE
        for route in application.router.routes
        if not isinstance(route, Mount)
    )


def _field_errors(exc: RequestValidationError) -> dict:
    fields = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        fields[".".join(loc) or "body"] = err.get("msg", "Invalid value")
    return fields


def create_app(repository: Optional[EmployeeRepository] = None,
               webhook: Optional[WebhookClient] = None,
               config: Settings = settings) -> FastAPI:
    """Build the application. Tests pass their own repository and webhook."""
    repository = repository if repository is not None else build_repository(config)
    container = build_container(repository, webhook or WebhookClient())
    ui_index = _ui_index(config)

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        service = container.employee_service
        try:
            if config.SEED_SAMPLE_DATA:
                service.seed_sample_employees()
            service.refresh_gauges()
        except DirectoryError:
            logger.warning("Could not seed employees — storage may not be ready yet")
        logger.info("Employee directory started backend=%s environment=%s",
                    repository.backend_name, config.ENVIRONMENT)
        yield
        repository.dispose()
        logger.info("Shutting down — storage released")

    application = FastAPI(
        title="Employee Directory Service",
        description="Employee records, dashboard statistics and email dispatch.",
        version=config.SERVICE_VERSION,
        lifespan=lifespan,
    )
    application.state.container = container
    application.state.config = config

    application.add_middleware(MetricsMiddleware)
    application.add_middleware(RequestIDMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.exception_handler(DirectoryError)
    async def directory_error_handler(request: Request, exc: DirectoryError):
        if exc.status_code >= 500:
            logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={
            "error": "Invalid request body", "fields": _field_errors(exc),
        })

    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            if (ui_index and request.method == "GET"
                    and not request.url.path.startswith("/api")):
                return FileResponse(ui_index)
            return JSONResponse(status_code=404, content={"error": "Route not found"})
        # The UI mount at "/" answers 405 for non-GET requests on unknown API paths.
        if (exc.status_code == 405 and ui_index and request.url.path.startswith("/api")
                and not _has_api_route(application, request)):
            return JSONResponse(status_code=404, content={"error": "Route not found"})
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    application.include_router(system_controller.router)
    application.include_router(employee_controller.router)
    application.include_router(dashboard_controller.router)
    application.include_router(notification_controller.router)

    if ui_index:
        application.mount("/", StaticFiles(directory=config.STATIC_DIR, html=True), name="ui")

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level="info")
