"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import load_config
from core.errors import KsuidError
from core.health import HealthChecker, Status, check_codec, create_clock_check, create_random_check
from core.sources import DEFAULT_CLOCK, DEFAULT_RANDOM_SOURCE
from internal.logging import get_logger, LogLevel, StructuredLogger
from ui.routes import codec, health, ksuids

VERSION = "1.0.0"


def create_app(config=None, clock=None, random_source=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()
    clock = clock or DEFAULT_CLOCK
    random_source = random_source or DEFAULT_RANDOM_SOURCE

    # Configure structured logging
    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))
    logger_instance = get_logger()

    health_checker = HealthChecker()
    health_checker.register("random", create_random_check(random_source), critical=True)
    health_checker.register("clock", create_clock_check(clock), critical=False)
    health_checker.register("codec", check_codec, critical=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version=VERSION)
        report = await health_checker.check()
        if report.status != Status.OK:
            logger_instance.warn("Startup health check not healthy", report=report.to_dict())
        logger_instance.info("Application started successfully")

        yield

        logger_instance.info("Application shutdown complete")

    app = FastAPI(
        title="KSUID Service",
        version=VERSION,
        description="K-sortable unique identifier generation and inspection",
        lifespan=lifespan,
    )

    @app.exception_handler(KsuidError)
    async def ksuid_error_handler(request: Request, exc: KsuidError):
        logger_instance.warn("Rejected ksuid input", error=exc, path=request.url.path)
        return JSONResponse(status_code=400, content=exc.to_dict())

    # Initialize route modules with dependencies
    ksuids.init(config.generator, clock, random_source)
    health.init(health_checker, clock)

    # Include routers
    app.include_router(ksuids.router)
    app.include_router(codec.router)
    app.include_router(health.router)

    return app
