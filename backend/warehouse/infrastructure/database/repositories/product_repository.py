"""Concrete repository implementation for Product backed by SQLAlchemy."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse.application.interfaces import FieldValue, ProductRepository
from warehouse.domain.entities import Product
from warehouse.infrastructure.database.models import ProductModel

_COLUMNS = {
    "article": ProductModel.article,
    "name": ProductModel.name,
    "description": ProductModel.description,
    "category": ProductModel.category,
    "price": ProductModel.price,
    "count": ProductModel.count,
    "editdate": ProductModel.editdate,
    "createdate": ProductModel.createdate,
}


class SQLAlchemyProductRepository(ProductRepository):
    """Implements the ProductRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ProductModel) -> Product:
        """Map ORM model → domain entity."""
        return Product(
            article=UUID(model.article),
            name=model.name,
            description=model.description,
            category=model.category,
            price=model.price,
            count=model.count,
            editdate=model.editdate,
            createdate=model.createdate,
        )

    def _to_model(self, entity: Product) -> ProductModel:
        """Map domain entity → ORM model (for creation)."""
        return ProductModel(
            article=str(entity.article),
            name=entity.name,
            description=entity.description,
            category=entity.category,
            price=entity.price,
            count=entity.count,
            editdate=entity.editdate,
            createdate=entity.createdate,
        )

    def _condition(self, field: str, value: FieldValue):
        column = _COLUMNS.get(field)
        if column is None:
            raise ValueError(f"Unknown product column '{field}'")
        if isinstance(value, UUID):
            value = str(value)
        return column == value

    async def find_by_field(self, field: str, value: FieldValue) -> list[Product]:
        stmt = select(ProductModel).where(self._condition(field, value)).order_by(ProductModel.name)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_article(self, article: UUID) -> Product | None:
        result = await self._session.get(ProductModel, str(article))
        return self._to_entity(result) if result else None

    async def exists_by_article(self, article: UUID) -> bool:
        stmt = select(ProductModel.article).where(ProductModel.article == str(article)).limit(1)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def delete_by_field(self, field: str, value: FieldValue) -> int:
        stmt = delete(ProductModel).where(self._condition(field, value))
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount

    async def save(self, product: Product) -> Product:
        model = await self._session.get(ProductModel, str(product.article))
        if model is None:
            model = self._to_model(product)
            self._session.add(model)
        else:
            model.name = product.name
            model.description = product.description
            model.category = product.category
            model.price = product.price
            model.count = product.count
            model.editdate = product.editdate
        await self._session.flush()
        return self._to_entity(model)

    async def find_all(self) -> list[Product]:
        stmt = select(ProductModel).order_by(ProductModel.createdate.desc(), ProductModel.name)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def delete_all(self) -> int:
        result = await self._session.execute(delete(ProductModel))
        await self._session.flush()
        return result.rowcount
