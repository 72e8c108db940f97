"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ledwall.web.exceptions import register_exception_handlers
from ledwall.web.routers import (
    advise_router,
    calculate_router,
    modules_router,
    templates_router,
    validate_router,
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="LED Wall Planner API",
        description="REST API for LED video wall layout, rigging and cabling",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(calculate_router, prefix="/api/v1")
    app.include_router(validate_router, prefix="/api/v1")
    app.include_router(modules_router, prefix="/api/v1")
    app.include_router(templates_router, prefix="/api/v1")
    app.include_router(advise_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
