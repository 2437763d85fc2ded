"""
Framebase FastAPI Application

Main entry point for the Framebase API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Common library imports
from common.database import SupabaseDatabase, set_database
from common.utils import configure_responses, success_response

# App-specific imports
from framebase.config import settings
from framebase.dependencies import init_auth_provider
from framebase.middleware import SecurityHeadersMiddleware, register_exception_handlers

# Import routers
from framebase.routers import (
    auth_router,
    profile_router,
    projects_router,
    pages_router,
    export_router,
    ai_router,
    payments_router,
    site_router,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


# =============================================================================
# Database Instance
# =============================================================================
db = SupabaseDatabase()


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Connects to Supabase when it is configured. Without it the public
    endpoints still work and data endpoints answer 503.
    """
    print("Starting Framebase API...")

    if settings.supabase_configured():
        await db.connect(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
        set_database(db)
        init_auth_provider()
        print(f"Connected to Supabase: {settings.SUPABASE_URL}")
    else:
        missing = ", ".join(settings.missing_supabase_settings())
        print(f"Supabase is not configured (missing {missing}); data endpoints are disabled.")

    print("Framebase API started successfully!")

    yield

    print("Shutting down Framebase API...")
    if db.is_connected:
        await db.disconnect()
    print("Framebase API shut down complete.")


# =============================================================================
# FastAPI Application
# =============================================================================
def create_app() -> FastAPI:
    """Build the application with middleware, handlers and routers."""
    configure_responses(settings.is_production)

    app = FastAPI(
        title="Framebase API",
        description="AI-powered UI/UX builder",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development() else None,
        redoc_url="/redoc" if settings.is_development() else None,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.middleware("http")(SecurityHeadersMiddleware(production=settings.is_production()))

    register_exception_handlers(app)

    # =========================================================================
    # Include Routers (all under /api prefix)
    # =========================================================================
    API_PREFIX = "/api"

    app.include_router(auth_router, prefix=API_PREFIX, tags=["Authentication"])
    app.include_router(profile_router, prefix=API_PREFIX, tags=["Profile"])
    app.include_router(projects_router, prefix=API_PREFIX, tags=["Projects"])
    app.include_router(pages_router, prefix=API_PREFIX, tags=["Pages"])
    app.include_router(export_router, prefix=API_PREFIX, tags=["Export"])
    app.include_router(ai_router, prefix=API_PREFIX, tags=["AI"])
    app.include_router(payments_router, prefix=API_PREFIX, tags=["Payments"])
    app.include_router(site_router, prefix=API_PREFIX, tags=["Site"])

    @app.get("/health", tags=["Health"])
    async def health():
        """Health check endpoint."""
        return success_response({
            "status": "ok",
            "version": "1.0.0",
            "database": db.is_connected,
        })

    return app


app = create_app()


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
