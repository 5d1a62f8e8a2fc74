from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from userservice.core.config import Settings, get_settings
from userservice.core.log import configure_logging
from userservice.db.create_tables import create_all
from userservice.repositories import InMemoryUserRepository, SQLUserRepository, UserRepository
from userservice.routers import users as users_router
from userservice.routers.errors import register_exception_handlers
from userservice.services.user_service import UserService

logger = logging.getLogger("userservice.app")


def build_repository(settings: Settings) -> UserRepository:
    """Pick the storage adapter named by USER_STORE."""
    if settings.user_store == "memory":
        return InMemoryUserRepository()
    if settings.user_store == "sql":
        return SQLUserRepository()
    raise RuntimeError(f"Unknown USER_STORE {settings.user_store!r} (expected 'sql' or 'memory')")


def create_app(repository: UserRepository | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``) and tests."""
    settings = get_settings()
    configure_logging(settings.log_level)
    create_schema = repository is None and settings.user_store == "sql"
    if repository is None:
        repository = build_repository(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if create_schema:
            create_all()
        logger.info("User service started (env=%s, store=%s)", settings.app_env, type(repository).__name__)
        yield

    app = FastAPI(title="User Service", lifespan=lifespan)
    app.state.user_service = UserService(repository)
    app.include_router(users_router.router)
    register_exception_handlers(app)
    return app


app = create_app()
