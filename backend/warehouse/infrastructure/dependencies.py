"""FastAPI dependency providers wiring repositories into application services."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse.application.services import ProductCreationService, ProductDispatcher
from warehouse.infrastructure.database.repositories import SQLAlchemyProductRepository
from warehouse.infrastructure.database.session import get_db_session


async def get_product_dispatcher(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProductDispatcher, None]:
    """Provides a ProductDispatcher with its repository wired up."""
    yield ProductDispatcher(SQLAlchemyProductRepository(session))


async def get_product_creation_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProductCreationService, None]:
    """Provides a ProductCreationService with its repository wired up."""
    yield ProductCreationService(SQLAlchemyProductRepository(session))
