"""FastAPI main application."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import settings
from .utils.logger import init_app_logger
from .api import scopes, diagnostics


# Initialize logger
logger = init_app_logger(settings)


def _mask(secret: Optional[str]) -> str:
    """Mask a secret for logging."""
    if not secret:
        return "Not set"
    if len(secret) > 12:
        return secret[:8] + "..." + secret[-4:]
    return "***"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Args:
        app: FastAPI application instance
    """
    logger.info("=" * 70)
    logger.info(f"Starting {settings.app_name}...")
    logger.info("=" * 70)

    logger.info("Server Configuration:")
    logger.info(f"  Host: {settings.host}")
    logger.info(f"  Port: {settings.port}")
    logger.info(f"  Environment: {settings.environment}")
    logger.info(f"  Log Level: {settings.log_level}")
    logger.info(f"  Log File: {settings.log_file or 'console only'}")

    logger.info("Supabase Configuration:")
    logger.info(f"  URL: {settings.supabase_url or 'Not set'}")
    logger.info(f"  Service Role Key: {_mask(settings.supabase_service_role_key)}")

    logger.info("CRM OAuth Configuration:")
    logger.info(f"  Client ID: {settings.crm_client_id or 'Not set'}")
    logger.info(f"  Redirect URI: {settings.crm_redirect_uri or 'Not set'}")
    logger.info(f"  Diagnostic routes: {'enabled' if settings.enable_diagnostic_routes else 'disabled'}")

    # The admin client is built lazily; only warn here
    missing = settings.missing_required()
    if missing:
        logger.warning(f"Missing database settings: {', '.join(missing)}")

    logger.info(f"{settings.app_name} started successfully")

    yield

    logger.info(f"{settings.app_name} shut down")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="OAuth scope reporting and database diagnostics for the CRM agent integration",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.app_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(scopes.router)
if settings.enable_diagnostic_routes:
    app.include_router(diagnostics.router)


@app.get("/health")
async def health():
    """
    Simple health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": __version__
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "crm_agent.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
