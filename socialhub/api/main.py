"""
SocialHub API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           SOCIALHUB API                                     │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   Middleware:    CORS → Request log context → Error Handler                 │
│                              │                                              │
│                              ▼                                              │
│   Routers:       Health │ Auth │ Posts │ Shares │ Comments │ Users │       │
│                  Activity │ Upload                                          │
│                              │                                              │
│                              ▼                                              │
│   Dependencies:  Database │ Auth │ Services │ Storage                       │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection initialized
3. Application serves requests
4. Application stops → lifespan shutdown
5. Database connection closed

Usage:
======
    # Run with uvicorn
    uvicorn socialhub.api.main:app --host 0.0.0.0 --port 8000 --reload

    # Or programmatically
    from socialhub.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from socialhub.config.settings import settings
from socialhub.shared.db import init_db, close_db
from socialhub.shared.core.logging import clear_log_context, log_context, logger
from socialhub.api.middleware import setup_exception_handlers
from socialhub.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Initialize database connection pool

    Shutdown:
    - Close database connections
    """
    logger.info(
        "Starting SocialHub API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    await init_db()

    logger.info("SocialHub API started successfully")

    yield

    logger.info("Shutting down SocialHub API")

    await close_db()

    logger.info("SocialHub API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Adds middleware (CORS)
    3. Sets up exception handlers
    4. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Social network backend: users, posts, comments, likes, shares and follows",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        """Tag every log line of a request with its method and path."""
        clear_log_context()
        log_context(method=request.method, path=request.url.path)
        return await call_next(request)

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()
