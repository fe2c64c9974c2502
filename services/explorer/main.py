"""
City explorer FastAPI service: location, weather, business and movie lookups.

Entrypoint: uvicorn services.explorer.main:app --host 0.0.0.0 --port 3000
        or: python -m services.explorer.main  (binds settings.host / settings.port)
"""

import logging
import uuid
from contextlib import asynccontextmanager

import asyncpg
import uvicorn
from fastapi import FastAPI, Request, Response
from starlette.responses import JSONResponse, PlainTextResponse

from services.explorer.config import settings
from services.explorer.middleware.cors import setup_cors
from services.explorer.middleware.sentry import setup_sentry
from services.explorer.routers import health, location, movies, weather, yelp
from services.explorer.service import ExplorerService
from services.explorer.store import LocationStore, create_pool

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = "you are in the wrong place"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. The store pool lives exactly as long as the app."""
    setup_sentry()

    pool = await create_pool(settings)
    store = LocationStore(pool)
    try:
        await store.ensure_schema()
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
        logger.warning("Location schema setup failed, cache disabled: %s", e)
        await pool.close()
        pool = None
        store = LocationStore(None)

    app.state.settings = settings
    app.state.explorer = ExplorerService.from_settings(settings, store)
    logger.info("%s %s ready", settings.app_name, settings.app_version)

    yield

    if pool:
        await pool.close()


app = FastAPI(
    title="City Explorer API",
    version=settings.app_version,
    # Only the explorer routes and /health are served; everything else is the plain 404
    openapi_url="/openapi.json" if settings.debug else None,
    docs_url="/docs" if settings.debug else None,
    redoc_url=None,
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(location.router)
app.include_router(weather.router)
app.include_router(yelp.router)
app.include_router(movies.router)

# CORS sits inside the request-id middleware below, so preflight responses get the header too
setup_cors(app)


# Request ID injection
@app.middleware("http")
async def request_envelope_middleware(request: Request, call_next) -> Response:
    request_id = request.headers.get("x-request-id", str(uuid.uuid4()))
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


# -- Exception Handlers --

@app.exception_handler(404)
async def not_found_handler(request: Request, exc) -> PlainTextResponse:
    return PlainTextResponse(NOT_FOUND_BODY, status_code=404)


@app.exception_handler(422)
async def validation_error_handler(request: Request, exc) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": {
                "code": "VALIDATION_ERROR",
                "message": str(exc.detail) if hasattr(exc, "detail") else "Validation error.",
            },
            "requestId": getattr(request.state, "request_id", str(uuid.uuid4())),
        },
    )


@app.exception_handler(500)
async def internal_error_handler(request: Request, exc) -> JSONResponse:
    # Runs in ServerErrorMiddleware, outside request_envelope_middleware
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred."},
            "requestId": request_id,
        },
        headers={"X-Request-ID": request_id},
    )


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
