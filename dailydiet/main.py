import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from dailydiet import __version__
from dailydiet.api import meals, users
from dailydiet.core.config import Settings, get_settings
from dailydiet.core.errors import DailyDietError
from dailydiet.db.session import build_engine, build_session_factory, init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.settings.create_tables_on_startup:
        init_db(app.state.engine)
    logger.info("[APP] Daily Diet API started")
    try:
        yield
    finally:
        app.state.engine.dispose()
        logger.info("[APP] Engine disposed")


async def daily_diet_error_handler(request: Request, exc: DailyDietError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"[REQUEST] Validation failed for {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Собираем приложение.
    Engine и фабрика сессий создаются здесь и живут на app.state:
    обработчики получают их через зависимости, глобального соединения нет.
    """
    settings = settings or get_settings()

    app = FastAPI(title="Daily Diet API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = build_engine(settings.database_url)
    app.state.session_factory = build_session_factory(app.state.engine)

    app.add_exception_handler(DailyDietError, daily_diet_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"[REQUEST] {request.method} {request.url.path}")
        return await call_next(request)

    @app.get("/health")
    def health_check():
        database = "ok"
        try:
            with app.state.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error(f"[DB] Health check failed: {e}")
            database = "unavailable"

        return {
            "status": "ok",
            "app": "DailyDiet",
            "database": database,
        }

    app.include_router(users.router)
    app.include_router(meals.router)

    return app

