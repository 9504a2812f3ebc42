"""SQLAlchemyProductRepository against an in-memory SQLite database."""

import uuid
from collections.abc import AsyncIterator
from dataclasses import replace
from datetime import date

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from warehouse.application.services import ProductDispatcher
from warehouse.domain.entities import Product
from warehouse.infrastructure.database import Base
from warehouse.infrastructure.database.repositories import SQLAlchemyProductRepository


@pytest_asyncio.fixture
async def session(products: list[Product]) -> AsyncIterator[AsyncSession]:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        repository = SQLAlchemyProductRepository(session)
        for product in products:
            await repository.save(product)
        await session.commit()
        yield session

    await engine.dispose()


@pytest.fixture
def sql_repository(session: AsyncSession) -> SQLAlchemyProductRepository:
    return SQLAlchemyProductRepository(session)


@pytest.mark.asyncio
async def test_get_by_article_round_trips(sql_repository: SQLAlchemyProductRepository, bear: Product):
    assert await sql_repository.get_by_article(bear.article) == bear
    assert await sql_repository.get_by_article(uuid.uuid4()) is None


@pytest.mark.asyncio
async def test_exists_by_article(sql_repository: SQLAlchemyProductRepository, bear: Product):
    assert await sql_repository.exists_by_article(bear.article)
    assert not await sql_repository.exists_by_article(uuid.uuid4())


@pytest.mark.asyncio
async def test_find_by_field(sql_repository: SQLAlchemyProductRepository):
    by_price = await sql_repository.find_by_field("price", 250)
    assert [p.name for p in by_price] == ["Football", "Race car"]

    by_date = await sql_repository.find_by_field("createdate", date(2024, 3, 29))
    assert {p.name for p in by_date} == {"Fluffy bear", "Football"}

    never_edited = await sql_repository.find_by_field("editdate", "")
    assert {p.name for p in never_edited} == {"Fluffy bear", "Football"}


@pytest.mark.asyncio
async def test_find_by_unknown_column_raises(sql_repository: SQLAlchemyProductRepository):
    with pytest.raises(ValueError):
        await sql_repository.find_by_field("colour", "red")


@pytest.mark.asyncio
async def test_delete_by_field_returns_count(sql_repository: SQLAlchemyProductRepository, bear: Product):
    assert await sql_repository.delete_by_field("category", "Toys") == 2
    assert await sql_repository.delete_by_field("category", "Toys") == 0
    assert not await sql_repository.exists_by_article(bear.article)
    assert len(await sql_repository.find_all()) == 1


@pytest.mark.asyncio
async def test_delete_by_article(sql_repository: SQLAlchemyProductRepository, bear: Product):
    assert await sql_repository.delete_by_field("article", bear.article) == 1
    assert await sql_repository.get_by_article(bear.article) is None


@pytest.mark.asyncio
async def test_save_updates_existing_row(sql_repository: SQLAlchemyProductRepository, bear: Product):
    changed = replace(bear, price=1200, editdate="2024-05-01 08:00:00")
    saved = await sql_repository.save(changed)

    assert saved == changed
    assert await sql_repository.get_by_article(bear.article) == changed
    assert len(await sql_repository.find_all()) == 3


@pytest.mark.asyncio
async def test_delete_all(sql_repository: SQLAlchemyProductRepository):
    assert await sql_repository.delete_all() == 3
    assert await sql_repository.find_all() == []


@pytest.mark.asyncio
async def test_dispatcher_edit_through_database(sql_repository: SQLAlchemyProductRepository, bear: Product):
    dispatcher = ProductDispatcher(sql_repository)

    updated = await dispatcher.edit_by_param("description", "Softer than ever", str(bear.article))

    found = await dispatcher.search_by_param("description", "Softer than ever")
    assert found == [updated]
    assert updated.editdate != ""
