import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from todo_api.config.settings import Settings
from todo_api.database import Database
from todo_api.routers import auth, todos
from todo_api.utils.errors import ApiError, api_error_handler, request_validation_handler

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around one immutable Settings instance"""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Todo API...")
        database = Database(settings)
        await database.create_tables()
        app.state.database = database
        logger.info("Connected to database")
        try:
            yield
        finally:
            logger.info("Shutting down Todo API...")
            await database.dispose()

    app = FastAPI(title="Todo API", lifespan=lifespan)
    app.state.settings = settings

    # Only the configured frontend may send credentialed requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Route registration
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(todos.router, prefix="/todos", tags=["Todos"])

    @app.get("/")
    def read_root():
        return {"message": "Todo API"}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
