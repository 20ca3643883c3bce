"""FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .errors import EmployeeError
from .routers.employees import router as employees_router
from .store import EmployeeStore

logger = logging.getLogger(__name__)

OPENAPI_URL = "/swagger/v1/swagger.json"
API_VERSION = "v1.0.0"
DESCRIPTION = (
    "A simple REST API for managing employee records. "
    "This API is designed for contract testing using Specmatic."
)


async def employee_error_handler(request: Request, exc: EmployeeError) -> JSONResponse:
    """Render store errors as ``{"message": ...}`` bodies."""

    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject unparseable requests with 400 instead of FastAPI's default 422."""

    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"message": "Invalid request", "errors": exc.errors()}),
    )


def _openapi_schema(app: FastAPI):
    """
    Build the schema document without FastAPI's automatic 422 responses.

    Request validation failures are answered with 400 by
    ``validation_error_handler``; the routes document that response themselves.
    """

    def openapi() -> dict:
        if app.openapi_schema:
            return app.openapi_schema

        schema = get_openapi(
            title=app.title,
            version=app.version,
            openapi_version=app.openapi_version,
            description=app.description,
            contact=app.contact,
            routes=app.routes,
        )
        for path_item in schema.get("paths", {}).values():
            for operation in path_item.values():
                operation.get("responses", {}).pop("422", None)
        components = schema.get("components", {}).get("schemas", {})
        components.pop("HTTPValidationError", None)
        components.pop("ValidationError", None)

        app.openapi_schema = schema
        return schema

    return openapi


def create_app(settings: Settings | None = None, store: EmployeeStore | None = None) -> FastAPI:
    """Build the application with its own employee store."""

    settings = settings or get_settings()

    app = FastAPI(
        title="Employee Management API",
        version=API_VERSION,
        description=DESCRIPTION,
        contact={"name": "Development Team", "email": "dev@company.com"},
        openapi_url=OPENAPI_URL,
        docs_url="/" if settings.enable_swagger else None,
        redoc_url=None,
    )

    if store is None:
        store = EmployeeStore.with_seed_data() if settings.seed_employees else EmployeeStore()
    app.state.store = store
    app.state.settings = settings

    # allow_credentials must stay off while any origin is allowed
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(EmployeeError, employee_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(employees_router)
    app.openapi = _openapi_schema(app)

    @app.on_event("startup")
    async def on_startup() -> None:
        """Report the state the service starts with."""

        logger.info(
            "Employee API starting (env=%s, employees=%d, swagger=%s)",
            settings.app_env,
            len(app.state.store),
            settings.enable_swagger,
        )

    @app.get("/health", tags=["system"])
    async def healthcheck() -> dict[str, str]:
        """Simple readiness probe for uptime checks."""

        return {"status": "ok"}

    return app


app = create_app()
