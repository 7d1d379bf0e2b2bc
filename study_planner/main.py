"""
Study Planner API - Main Application
"""
import logging
from logging.handlers import RotatingFileHandler
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from contextlib import asynccontextmanager

from study_planner.core.config import settings
from study_planner.api.v1.api import api_router
from study_planner.db.session import engine
from study_planner.models import Base


def get_log_level() -> int:
    """DEBUG when the DEBUG flag is set or in development, INFO otherwise"""
    if settings.DEBUG or settings.ENVIRONMENT == "development":
        return logging.DEBUG
    return logging.INFO


# Configure logging
def setup_logging():
    """Setup application logging with file and console handlers"""
    # Create logs directory if it doesn't exist
    if not os.path.exists(settings.LOG_DIR):
        os.makedirs(settings.LOG_DIR)

    # Configure log format
    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    log_level = get_log_level()

    # Configure root logger
    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[
            # File handler with rotation (10MB per file, keep 10 backups)
            RotatingFileHandler(
                os.path.join(settings.LOG_DIR, settings.LOG_FILE),
                maxBytes=settings.LOG_MAX_BYTES,
                backupCount=settings.LOG_BACKUP_COUNT,
                encoding='utf-8'
            ),
            # Console handler
            logging.StreamHandler()
        ]
    )

    # Set specific log levels for noisy libraries
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('aiosqlite').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)


# Initialize logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown."""
    # Startup
    logger.info("Starting Study Planner API...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"API Version: {settings.API_V1_STR}")

    async with engine.begin() as conn:
        # Create tables if they don't exist (dev only)
        if settings.ENVIRONMENT == "development":
            logger.info("Development mode: Creating database tables if they don't exist")
            await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables initialized")

    logger.info("API startup complete")
    yield

    # Shutdown
    logger.info("Shutting down Study Planner API...")
    await engine.dispose()
    logger.info("Database connections closed")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Personal study tracking: courses, subjects, lesson plans with checklists, study sessions and exam results",
    version="1.0.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url=f"{settings.API_V1_STR}/docs",
    redoc_url=f"{settings.API_V1_STR}/redoc",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# GZip compression
app.add_middleware(GZipMiddleware, minimum_size=1000)

# API router
app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "study-planner-api",
        "version": "1.0.0"
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Study Planner API",
        "docs": f"{settings.API_V1_STR}/docs",
        "health": "/health"
    }
