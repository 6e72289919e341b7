"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from suggestion_box.config import get_settings
from suggestion_box.infrastructure.database import engine, Base
from suggestion_box.core.logging import configure_logging
from suggestion_box.core.middleware import setup_middleware
from suggestion_box.core.exceptions import register_exception_handlers

# Import all models so SQLAlchemy knows about them
from suggestion_box.domain.models.user import User  # noqa: F401
from suggestion_box.domain.models.category import Category  # noqa: F401
from suggestion_box.domain.models.suggestion import Suggestion  # noqa: F401
from suggestion_box.domain.models.upvote import Upvote  # noqa: F401
from suggestion_box.domain.models.comment import Comment  # noqa: F401

# Import routers
from suggestion_box.interfaces.api.auth import router as auth_router
from suggestion_box.interfaces.api.suggestions import router as suggestions_router
from suggestion_box.interfaces.api.upvotes import router as upvotes_router
from suggestion_box.interfaces.api.comments import router as comments_router
from suggestion_box.interfaces.api.categories import router as categories_router
from suggestion_box.interfaces.api.admin import router as admin_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Suggestion Box API...", env=settings.ENVIRONMENT)

    # Create DB tables (dev only, use migrations in production)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    yield

    logger.info("Suggestion Box API stopped")


app = FastAPI(
    title="Suggestion Box",
    description="API Backend — member suggestions, upvotes and admin triage",
    version="1.0.0",
    lifespan=lifespan,
)

# Setup Middleware (Correlation ID, Logging)
setup_middleware(app)

# Exception handling: every error leaves as {"error": "..."}
register_exception_handlers(app)

# CORS is added last so it runs first
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router)
app.include_router(suggestions_router)
app.include_router(upvotes_router)
app.include_router(comments_router)
app.include_router(categories_router)
app.include_router(admin_router)


@app.get("/")
def root():
    return {
        "name": "Suggestion Box",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
