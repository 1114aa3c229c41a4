"""
PassGate FastAPI Application
Main entry point for the password login server.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings
from app.api import login
from app.middleware.rate_limit import RateLimitMiddleware
from app.middleware.security_headers import SecurityHeadersMiddleware
from app.utils.common_passwords import load_common_passwords

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Configures logging and loads the common-password blocklist once per process.
    """
    from app.logging_config import setup_logging
    setup_logging(log_dir=settings.log_dir, log_level=settings.log_level)

    logger.info(f"Starting {settings.app_name}...")
    app.state.common_passwords = load_common_passwords(settings.common_passwords_file)
    logger.info(f"{settings.app_name} ready")

    yield

    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title=settings.app_name,
    description="Login form that checks submitted passwords against a strength policy.",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)

# Configure rate limiting: one per-IP budget shared by every path, static files included
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)
app.state.limiter = limiter
app.add_middleware(
    RateLimitMiddleware,
    limiter=limiter,
    rate_limit=settings.rate_limit_general,
    key_func=get_remote_address,
    message=settings.rate_limit_message,
)

if settings.security_headers_enabled:
    app.add_middleware(SecurityHeadersMiddleware, hsts_max_age=settings.hsts_max_age)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


# =============================================================================
# Health Check Endpoints
# =============================================================================

@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for container orchestration."""
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# =============================================
# Routers
# =============================================

app.include_router(login.router, tags=["Login"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
