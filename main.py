import sys
import time
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from cityweather import __version__
from cityweather.api import v1_router
from cityweather.api.health import health_router
from cityweather.config.config import config
from cityweather.utils.logging_config import setup_logging

# Configure logging
setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log application startup and shutdown."""
    logger.info(
        "Starting City Weather application",
        environment=config.environment,
        api_key_configured=bool(config.openweather_api_key),
    )
    try:
        yield
    finally:
        logger.info("Shutting down City Weather")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="City Weather API",
        description="Current weather for a city, backed by OpenWeatherMap.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests with timing information."""
        start_time = time.time()

        logger.info(
            "HTTP request started",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else "unknown",
        )

        response = await call_next(request)
        process_time = time.time() - start_time

        logger.info(
            "HTTP request completed",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            process_time=process_time,
        )

        response.headers["X-Process-Time"] = str(process_time)
        return response

    # HTTP exception handler
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent formatting."""
        logger.warning(
            "HTTP exception",
            method=request.method,
            url=str(request.url),
            status_code=exc.status_code,
            detail=exc.detail,
        )

        # Titled errors ({"title", "message"}) are returned as the body itself
        if isinstance(exc.detail, dict):
            return JSONResponse(status_code=exc.status_code, content=exc.detail)

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "status_code": exc.status_code, "timestamp": time.time()},
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions globally."""
        logger.error(
            "Unhandled exception",
            method=request.method,
            url=str(request.url),
            error=str(exc),
            exc_info=True,
        )

        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred. Please try again later.",
                "timestamp": time.time(),
            },
        )

    app.include_router(health_router)
    app.include_router(v1_router)

    # Root endpoint (hide from swagger)
    @app.get("/", tags=["Root"], include_in_schema=False)
    async def root():
        """Root endpoint providing basic system information."""
        return {
            "message": "City Weather API",
            "version": __version__,
            "status": "running",
            "timestamp": time.time(),
            "docs": "/docs",
        }

    return app


# Create the application instance
app = create_app()


def main():
    logger.info(
        f"Starting City Weather server in {config.environment} environment",
        host=config.api_host,
        port=config.api_port,
    )

    try:
        uvicorn.run(
            app,
            host=config.api_host,
            port=config.api_port,
            log_level=config.log_level.lower(),
            access_log=True,
            server_header=False,
            date_header=False,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
