from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.api import index, products, suppliers
from app.core.config import Settings
from app.core.exceptions import StoreError
from app.db.core import create_db_engine


def check_database(engine: Engine) -> bool:
    """Opens and closes one connection; only logs the outcome."""
    try:
        with engine.connect():
            pass
    except SQLAlchemyError as e:
        logger.error(f"Database connection error: {e}")
        return False

    logger.info("Database connected")
    return True


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reports missing or mistyped fields in the same shape as every other failure."""
    fields = sorted({str(error["loc"][-1]) for error in exc.errors() if error.get("loc")})
    logger.info(f"Rejected {request.method} {request.url.path}: invalid {', '.join(fields)}")
    return JSONResponse(
        status_code=422,
        content={"error": f"Missing or invalid fields: {', '.join(fields)}"}
    )


def create_app(settings: Settings, engine: Optional[Engine] = None) -> FastAPI:
    """
    Builds the application around one Settings object.

    Args:
        settings (Settings): Configuration read once at process start.
        engine (Engine, optional): Pre-built engine, e.g. an in-memory one in tests.
            Built from the settings when omitted.
    """
    if engine is None:
        engine = create_db_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        check_database(engine)
        yield
        engine.dispose()

    app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine

    # Middlewares
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Register routes
    app.include_router(index.router, prefix="/api")
    app.include_router(products.router, prefix="/api/products")
    app.include_router(suppliers.router, prefix="/api/suppliers")

    return app
