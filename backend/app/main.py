"""Application entrypoint.

Centralized settings + structured logging + optional cache sweep task.
Run: uvicorn app.main:app --reload (with ``backend`` on the path or the
package installed).
"""
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import json
import threading
import time
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

from app.core.cache import CacheStore
from app.core.kv_store import KeyValueStore, SqlKeyValueStore
from app.core.settings import settings
from app.database.db import Base, engine, SessionLocal
from app.database import models  # noqa: F401  registers the kv_store table
from app.middleware.rate_limit import limiter, _rate_limit_exceeded_handler
from app.routes import analysis_routes, cache_routes, preference_routes, system_routes

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "level": record.levelname,
            "ts": record.created,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            log_record["exc"] = self.formatException(record.exc_info)
        return json.dumps(log_record)

if settings.log_json:
    for handler in logging.getLogger().handlers:
        handler.setFormatter(JsonFormatter())

logger = logging.getLogger(__name__)

REQUEST_COUNT = Counter("http_requests_total", "Total HTTP requests", ["method", "path", "status"])
REQUEST_LATENCY = Histogram("http_request_duration_seconds", "Request latency", ["path"])


def _cache_sweep_loop(cache: CacheStore, interval_seconds: int, stop: threading.Event):
    """Background loop removing stale cache entries that are never read again."""
    logger.info("Cache sweep thread started")
    while not stop.wait(interval_seconds):
        try:
            cache.sweep()
        except Exception as e:
            logger.error(f"Cache sweep error: {e}")


def create_app(kv_store: KeyValueStore | None = None, market_cache: CacheStore | None = None) -> FastAPI:
    """Builds the API with explicitly supplied stores.

    Without arguments the SQL key-value store on ``settings.database_url`` is
    used and tables are created at startup.
    """
    use_sql = kv_store is None
    if kv_store is None:
        kv_store = SqlKeyValueStore(SessionLocal)
    if market_cache is None:
        market_cache = CacheStore(kv_store, settings.market_cache_prefix, settings.market_cache_ttl_ms)

    app = FastAPI(title=settings.app_name, version="v1", openapi_tags=[
        {"name": "cache", "description": "Market trends cache"},
        {"name": "analysis", "description": "Student analysis storage"},
        {"name": "preferences", "description": "User preference storage"},
        {"name": "system", "description": "Health & analytics"},
    ])
    app.state.kv_store = kv_store
    app.state.market_cache = market_cache
    app.state.sweep_stop = threading.Event()

    # Attach rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    @app.middleware("http")
    async def metrics_middleware(request: Request, call_next):
        method = request.method
        start = time.perf_counter()
        response = await call_next(request)
        # Route template, not the raw URL, so per-field paths share one series.
        route = request.scope.get("route")
        path = getattr(route, "path", None) or "unmatched"
        REQUEST_LATENCY.labels(path=path).observe(time.perf_counter() - start)
        REQUEST_COUNT.labels(method=method, path=path, status=response.status_code).inc()
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin.strip() for origin in settings.cors_allow_origins.split(',')],
        allow_credentials=True,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        detail = exc.detail
        if exc.status_code == 404 and detail == "Not Found":
            detail = "Endpoint not found"
        return JSONResponse(status_code=exc.status_code, content={"detail": detail}, headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Server error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.on_event("startup")
    def startup():
        if use_sql:
            Base.metadata.create_all(bind=engine)
            logger.info("Database tables created/checked.")
        if settings.cache_sweep_interval_seconds > 0:
            t = threading.Thread(
                target=_cache_sweep_loop,
                args=(market_cache, settings.cache_sweep_interval_seconds, app.state.sweep_stop),
                daemon=True,
            )
            t.start()
        logger.info("Student Career Guidance API starting...")

    @app.on_event("shutdown")
    def shutdown():
        app.state.sweep_stop.set()

    # Include routers
    app.include_router(cache_routes.router, prefix="/cache", tags=["cache"])
    app.include_router(analysis_routes.router, prefix="/student-analysis", tags=["analysis"])
    app.include_router(preference_routes.router, prefix="/user-preferences", tags=["preferences"])
    app.include_router(system_routes.router, tags=["system"])

    @app.get("/")
    async def root():
        """Root endpoint for the API."""
        return {"message": f"{settings.app_name} is running", "version": app.version}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return app


app = create_app()
