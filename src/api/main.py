import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.deps import get_settings
from src.app_shell.config import configure_logging, validate_ops_rules
from src.rules.loader import load_rules
from src.shell.http.health import (
    create_health_router,
    get_health_registry,
    mark_startup_complete,
    setup_default_health_checks,
)

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    get_health_registry().clear()

    # Fail fast on an invalid rules file; a missing one falls back to defaults
    if settings.rules_path.exists():
        try:
            rules = load_rules(settings.rules_path)
            configure_logging(rules)
            validate_ops_rules(rules)
        except (FileNotFoundError, ValueError) as e:
            logger.critical("Rules load failed: %s", e)
            raise
        logger.info("Rules loaded from %s", settings.rules_path)
        setup_default_health_checks(rules_loader=lambda: load_rules(settings.rules_path))
    else:
        configure_logging(None)
        logger.warning("No rules file at %s, using built-in defaults", settings.rules_path)
        setup_default_health_checks()

    mark_startup_complete()
    yield


app = FastAPI(
    title="Release Redirect",
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import releases  # noqa: E402

app.include_router(create_health_router(version=VERSION))
# Catch-all, must be registered last
app.include_router(releases.router, tags=["Releases"])
