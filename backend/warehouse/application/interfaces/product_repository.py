"""Abstract repository interface (port) for Product persistence."""

from abc import ABC, abstractmethod
from datetime import date
from uuid import UUID

from warehouse.domain.entities import Product

FieldValue = str | int | UUID | date


class ProductRepository(ABC):
    """Port for product persistence, implemented in the infrastructure layer.

    Field-scoped operations take an attribute name of :class:`Product` and an
    already coerced value; matching is exact equality.
    """

    @abstractmethod
    async def find_by_field(self, field: str, value: FieldValue) -> list[Product]:
        """Retrieve every product whose ``field`` equals ``value``."""
        ...

    @abstractmethod
    async def get_by_article(self, article: UUID) -> Product | None:
        """Retrieve a single product by its article."""
        ...

    @abstractmethod
    async def exists_by_article(self, article: UUID) -> bool:
        """Return True if a product with this article is stored."""
        ...

    @abstractmethod
    async def delete_by_field(self, field: str, value: FieldValue) -> int:
        """Delete every product whose ``field`` equals ``value``. Returns the number deleted."""
        ...

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Insert a new product or overwrite the stored one with the same article."""
        ...

    @abstractmethod
    async def find_all(self) -> list[Product]:
        """Retrieve every stored product."""
        ...

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every stored product. Returns the number deleted."""
        ...
