"""Application service (use case) for creating products."""

import logging
import uuid
from datetime import date

from warehouse.application.interfaces import ProductRepository
from warehouse.application.schemas import ProductCreate
from warehouse.application.services.product_fields import MAX_INT
from warehouse.domain.entities import Product
from warehouse.domain.exceptions import InvalidValueError

logger = logging.getLogger(__name__)


class ProductCreationService:
    """Validates a new-product payload and stores it under a fresh article."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def create_product(self, data: ProductCreate | None) -> Product:
        if data is None:
            raise InvalidValueError("Request body is missing")
        if not data.name:
            raise InvalidValueError("Product name missing")
        if not data.description:
            raise InvalidValueError("Product description missing")
        if not data.category:
            raise InvalidValueError("Product category missing")
        if data.price <= 0 or data.price > MAX_INT:
            raise InvalidValueError("Invalid product price")
        if data.count <= 0 or data.count > MAX_INT:
            raise InvalidValueError("Invalid product count")

        product = Product(
            article=await self._generate_article(),
            name=data.name,
            description=data.description,
            category=data.category,
            price=data.price,
            count=data.count,
            editdate="",
            createdate=date.today(),
        )
        saved = await self._repository.save(product)
        logger.info("Created product %s (%s)", saved.article, saved.name)
        return saved

    async def _generate_article(self) -> uuid.UUID:
        article = uuid.uuid4()
        while await self._repository.exists_by_article(article):
            article = uuid.uuid4()
        return article
