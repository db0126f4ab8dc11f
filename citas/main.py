from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pathlib import Path
from typing import Optional
import time
import logging
import sys

from .api.v1.citas import router as citas_router
from .core.config import Settings, settings as default_settings
from .core.database import Store
from .core.exceptions import StoreError
from .services.notification_service import NotificationService

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def bootstrap(config: Optional[Settings] = None) -> Store:
    """Open the store. Raises StoreUnavailable or SchemaError."""
    config = config or default_settings
    db_type = "SQLite" if config.is_sqlite else "Unknown"
    logger.info(f"Using {db_type} database")
    return Store.open(config.DATABASE_URL)

def create_app(store: Store, config: Optional[Settings] = None) -> FastAPI:
    """Build the application around an already opened store."""
    config = config or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Citas...")
        yield
        logger.info("Shutting down Citas...")

    app = FastAPI(
        title=config.APP_NAME,
        version=config.VERSION,
        description="Appointment booking backend",
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.notifier = NotificationService(config.NOTIFICATION_SENDER)

    # Middleware setup
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Custom middleware for request logging and timing
    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        # Log request
        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.4f}s"
        )

        return response

    # Exception handlers
    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=404,
            content={
                "detail": "Recurso no encontrado",
                "path": str(request.url.path)
            }
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.error(f"Internal server error: {str(exc)}")
        return JSONResponse(
            status_code=500,
            content={"detail": "Error interno del servidor"}
        )

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": time.time(),
            "version": config.VERSION
        }

    # Include routers
    app.include_router(citas_router, prefix="/api")

    # Static files go last so they never shadow the API routes
    static_dir = Path(config.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        logger.info(f"Serving static files from {static_dir}")
    else:
        logger.warning(f"Static directory {static_dir} not found, nothing mounted at /")

    return app

def main() -> int:
    """Run the server until it is stopped. Returns the process exit code."""
    import uvicorn

    try:
        store = bootstrap(default_settings)
    except StoreError as e:
        logger.critical(f"Could not initialize the database: {e}")
        return 1

    try:
        app = create_app(store, default_settings)
        logger.info(f"Server started at http://localhost:{default_settings.PORT}")
        uvicorn.run(
            app,
            host=default_settings.HOST,
            port=default_settings.PORT,
            log_level="info"
        )
    finally:
        store.close()

    return 0

if __name__ == "__main__":
    sys.exit(main())
