import asyncio
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from reelforge import __version__
from reelforge.api.router import api_router
from reelforge.config import get_settings
from reelforge.core.datetime_utils import isoformat_z, utc_now
from reelforge.core.exceptions import ReelforgeError
from reelforge.core.logging import get_logger, install_exception_hooks, setup_logging
from reelforge.core.rate_limit import enforce_rate_limit
from reelforge.dependencies import get_scheduler

logger = get_logger(__name__)

settings = get_settings()

_started_at = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Startup
    setup_logging()
    install_exception_hooks(asyncio.get_running_loop())
    scheduler = get_scheduler()
    await scheduler.start()
    logger.bind(environment=settings.environment, port=settings.port).info("server_started")
    yield
    # Shutdown
    logger.info("server_shutting_down")
    await scheduler.stop()


app = FastAPI(
    title="Reelforge",
    description="Short-form video content automation API",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/docs" if settings.is_development else None,
    redoc_url="/api/redoc" if settings.is_development else None,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    client = request.client.host if request.client else None
    level = "DEBUG" if request.url.path == "/health" else "INFO"
    logger.bind(method=request.method, path=request.url.path, client=client).log(
        level, "http_request"
    )
    return await call_next(request)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "message": message})


@app.exception_handler(ReelforgeError)
async def reelforge_error_handler(request: Request, exc: ReelforgeError) -> JSONResponse:
    log = logger.bind(path=request.url.path, status_code=exc.status_code, error=str(exc))
    if exc.status_code >= 500:
        log.error("request_failed")
        if not settings.is_development:
            return _error_response(exc.status_code, "Internal server error")
    else:
        log.warning("request_rejected")
    return _error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    return _error_response(400, message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return _error_response(404, "Endpoint not found")
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.bind(path=request.url.path, error=str(exc)).exception("unhandled_error")
    message = str(exc) if settings.is_development else "Internal server error"
    return _error_response(500, message)


# Include API routes; /health and / stay outside the per-IP limit
app.include_router(api_router, dependencies=[Depends(enforce_rate_limit)])


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint for load balancers."""
    return {
        "status": "ok",
        "timestamp": isoformat_z(utc_now()),
        "uptime": round(time.monotonic() - _started_at, 3),
        "environment": settings.environment,
    }


@app.get("/")
async def root() -> dict:
    """Service description and endpoint map."""
    return {
        "name": "Reelforge",
        "version": __version__,
        "description": "Short-form video content automation",
        "endpoints": {
            "health": "GET /health",
            "content": {
                "generate": "POST /api/content/generate",
                "repurpose": "POST /api/content/repurpose",
                "publish": "POST /api/content/publish",
            },
            "trends": {
                "youtube": "GET /api/trends/youtube",
                "search": "GET /api/trends/search",
                "niche": "GET /api/trends/niche/{niche}",
            },
            "script": {
                "generate": "POST /api/script/generate",
                "voiceover": "POST /api/script/voiceover",
                "variations": "POST /api/script/variations",
            },
            "jobs": {
                "status": "GET /api/jobs/status",
                "run": "POST /api/jobs/run/{job_name}",
            },
        },
    }
