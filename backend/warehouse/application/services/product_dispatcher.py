"""Application service that routes (field, value) requests to product store operations."""

import logging

from warehouse.application.interfaces import FieldValue, ProductRepository
from warehouse.application.services.product_fields import (
    ProductField,
    lookup_field,
    parse_article,
)
from warehouse.domain.entities import Product
from warehouse.domain.exceptions import InvalidValueError, RecordNotFoundError

logger = logging.getLogger(__name__)


class ProductDispatcher:
    """Search, delete and edit products by an arbitrary whitelisted field.

    Every failure is raised as a :class:`~warehouse.domain.exceptions.ProductError`
    subclass; finding nothing to return or delete is not a failure.
    """

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    def _resolve(self, param: str, param_value: str) -> tuple[ProductField, FieldValue]:
        field = lookup_field(param)
        if param_value == "" and not field.allows_empty:
            raise InvalidValueError("Invalid parameter value")
        return field, field.coerce(param_value)

    async def search_by_param(self, param: str, param_value: str) -> list[Product]:
        field, value = self._resolve(param, param_value)
        return await field.search(self._repository, field.name, value)

    async def delete_by_param(self, param: str, param_value: str) -> int:
        field, value = self._resolve(param, param_value)
        deleted = await field.delete(self._repository, field.name, value)
        logger.info("Deleted %d product(s) where %s=%r", deleted, field.name, param_value)
        return deleted

    async def edit_by_param(self, param: str, param_value: str, article: str) -> Product:
        """Set one mutable field of the product identified by ``article``.

        The product is loaded and saved in two store calls; a delete landing
        in between is overwritten by the save.
        """
        field = lookup_field(param)
        if not field.mutable:
            raise InvalidValueError(field.immutable_message)
        if param_value == "":
            raise InvalidValueError("Invalid parameter value")
        if article == "":
            raise InvalidValueError("Invalid article value")

        product_article = parse_article(article)
        if not await self._repository.exists_by_article(product_article):
            raise RecordNotFoundError(product_article)

        product = await self._repository.get_by_article(product_article)
        if product is None:
            raise RecordNotFoundError(product_article)

        product.set_field(field.name, field.coerce(param_value))
        saved = await self._repository.save(product)
        logger.info("Edited product %s: %s=%r", product_article, field.name, param_value)
        return saved

    async def list_products(self) -> list[Product]:
        return await self._repository.find_all()

    async def delete_all_products(self) -> int:
        deleted = await self._repository.delete_all()
        logger.info("Deleted all products (%d)", deleted)
        return deleted
