from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from sqlalchemy import text

from teapots.config import settings
from teapots.db.session import async_session, init_db, shutdown
from teapots.dependencies import DB
from teapots.domain import Teapot
from teapots.exceptions import DomainError, ErrorKind, ValidationFailedError
from teapots.logging import get_logger
from teapots.middleware import RequestIDMiddleware
from teapots.routers.teapot import router as teapot_router
from teapots.services.teapot import TeapotSeeder

logger = get_logger(__name__)

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.ALREADY_EXISTS: 409,
    ErrorKind.VALIDATION_FAILED: 400,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup: create tables, build the seeder and reset the store.

    Shutdown: close database connections.
    """
    await init_db()
    seeds = [Teapot(**seed.model_dump()) for seed in settings.seed_teapots]
    app.state.seeder = TeapotSeeder(async_session, seeds)
    if settings.seed_on_startup:
        await app.state.seeder.reset()
    yield
    await shutdown()


app = FastAPI(title="Teapots", lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)
app.include_router(teapot_router)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> PlainTextResponse:
    """Translate any domain error into its status code with the message as body."""
    logger.warning("domain_error", kind=exc.kind, error=exc.message, path=request.url.path)
    return PlainTextResponse(exc.message, status_code=STATUS_BY_KIND[exc.kind])


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    """Report malformed bodies and parameters the same way as field violations."""
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        errors.append(f"{location}: {error['msg']}" if location else error["msg"])
    return await domain_error_handler(request, ValidationFailedError(errors))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Log unhandled exceptions and return a safe error response.

    - Logs full exception with traceback (includes request_id from context)
    - Returns generic error to client (no stack traces leaked)
    """
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return PlainTextResponse("Internal server error", status_code=500)


@app.get("/health")
async def health(db: DB) -> dict[str, str]:
    """Health check endpoint, verifies database connectivity."""
    await db.execute(text("SELECT 1"))
    return {"status": "ok"}
