import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fintrack.core.config import settings
from fintrack.core.logging import configure_logging
from fintrack.api.routes import router as api_router

configure_logging()
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    log.info("Starting entity generation API (%s)...", settings.app_env)
    yield
    log.info("Shutting down entity generation API...")


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    lifespan=lifespan
)
app.include_router(api_router, prefix="/v1")
