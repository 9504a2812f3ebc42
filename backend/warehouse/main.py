"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from warehouse.config import get_settings
from warehouse.domain.exceptions import (
    InvalidValueError,
    ProductError,
    RecordNotFoundError,
    UnknownFieldError,
)
from warehouse.infrastructure.database import Base, engine
from warehouse.infrastructure.logging.log_config import setup_logging
from warehouse.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)

_STATUS_CODES: dict[type[ProductError], int] = {
    UnknownFieldError: status.HTTP_404_NOT_FOUND,
    RecordNotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidValueError: status.HTTP_400_BAD_REQUEST,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and create tables on startup."""
    setup_logging()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")

    yield

    await engine.dispose()


async def _product_error_handler(request: Request, exc: ProductError) -> JSONResponse:
    status_code = _STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
    logger.debug("%s %s rejected (%d): %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(status_code=status_code, content={"message": exc.message})


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests with the same envelope as product errors."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        description=settings.app_description,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ProductError, _product_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "warehouse.main:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )
