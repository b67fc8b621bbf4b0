"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from portfolio.config import settings
from portfolio.errors import StorageError
from portfolio.routers import pages, rpc
from portfolio.schemas.rpc import RpcErrorBody, RpcErrorData, RpcErrorResponse

logger = logging.getLogger(__name__)

# Location segments that say where an input came from rather than which field failed
_SOURCE_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging once at process start."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _procedure_name(request: Request) -> str:
    """Procedure name from the last path segment, e.g. ``getSkills``."""
    return request.url.path.rstrip("/").rsplit("/", 1)[-1]


def _field_errors(errors: list[dict]) -> dict[str, list[str]]:
    """Collapse pydantic error entries into ``{"field.path": [messages]}``."""
    field_errors: dict[str, list[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in _SOURCE_LOCATIONS]
        field = ".".join(loc) or "input"
        field_errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return field_errors


def _error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    field_errors: dict[str, list[str]] | None = None,
) -> JSONResponse:
    body = RpcErrorResponse(
        error=RpcErrorBody(
            message=message,
            code=code,
            data=RpcErrorData(
                code=code,
                httpStatus=status_code,
                path=_procedure_name(request),
                fieldErrors=field_errors or {},
            ),
        )
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject invalid procedure input with field-level detail."""
    field_errors = _field_errors(list(exc.errors()))
    logger.warning("Rejected input for %s: %s", _procedure_name(request), field_errors)
    return _error_response(request, 400, "BAD_REQUEST", "Input validation failed", field_errors)


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Report a failed database operation to the caller."""
    return _error_response(request, 500, "INTERNAL_SERVER_ERROR", str(exc))


app = FastAPI(
    title="Portfolio API",
    description="Backend API and page for a personal portfolio site",
    version="0.1.0",
)

# CORS middleware to allow a separately hosted frontend to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(StorageError, storage_error_handler)

# Mount routers
app.include_router(rpc.router, prefix="/trpc")
app.include_router(pages.router)


def run() -> None:
    """Create tables and serve the app on the configured host and port."""
    import uvicorn

    from portfolio.init_db import init_database

    configure_logging(settings.log_level)
    init_database()
    logger.info("Portfolio server listening at port: %s", settings.server_port)
    uvicorn.run(app, host=settings.server_host, port=settings.server_port)


if __name__ == "__main__":
    run()
