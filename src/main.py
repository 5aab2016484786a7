"""
FastAPI Application Entry Point.

Путь: src/main.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.api.errors import register_exception_handlers
from src.api.routes import articles
from src.api.routes import auth
from src.api.routes import categories
from src.api.routes import comments
from src.api.routes import files
from src.api.routes import innovations
from src.api.routes import news
from src.api.routes import statistics
from src.api.routes import users
from src.infrastructure.config.database import engine, init_models
from src.infrastructure.config.logging_config import setup_logging
from src.infrastructure.config.settings import get_settings

settings = get_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_tables:
        await init_models()
    logger.info("inno-fair API started")
    yield
    await engine.dispose()


app = FastAPI(
    title="inno-fair.uz API",
    description="Maqolalar, yangiliklar, innovatsiyalar va muhokamalar",
    version=VERSION,
    debug=settings.debug,
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Routes
app.include_router(auth.router, prefix="/api")
app.include_router(categories.router, prefix="/api")
app.include_router(articles.router, prefix="/api")
app.include_router(news.router, prefix="/api")
app.include_router(innovations.router, prefix="/api")
app.include_router(comments.router, prefix="/api")
app.include_router(users.router, prefix="/api")
app.include_router(users.admin_router, prefix="/api")
app.include_router(files.router, prefix="/api")
app.include_router(statistics.router, prefix="/api")

# Загруженные файлы
app.mount("/uploads", StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": VERSION
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "inno-fair.uz API",
        "version": VERSION,
        "docs": "/docs",
        "health": "/health",
    }
