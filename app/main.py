"""
Application entry point.

``create_app`` builds one FastAPI instance that owns its ``Database``; the
lifespan creates the tables on startup and disposes the engine on shutdown.
``run`` serves the module-level ``app`` with uvicorn.
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging

import uvicorn
from fastapi import FastAPI

from app.config import settings
from app.database import Database
from app.errors import register_error_handlers
from app.logging_config import configure_logging
from app.routes import health, user, store, product

# Import all models to ensure they are registered with SQLAlchemy
from app.db.models import User, Store, Product  # noqa: F401

logger = logging.getLogger(__name__)


def create_app(database_url: Optional[str] = None) -> FastAPI:
    configure_logging(settings.log_level)
    database = Database(database_url or settings.database_url, echo=settings.sql_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s", settings.service_name)
        database.create_all()
        yield
        database.dispose()
        logger.info("Stopped %s", settings.service_name)

    app = FastAPI(
        title=settings.service_name,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )
    app.state.database = database

    register_error_handlers(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(user.router, prefix="/user", tags=["User"])
    app.include_router(store.router, prefix="/store", tags=["Store"])
    app.include_router(product.router, prefix="/product", tags=["Product"])

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
