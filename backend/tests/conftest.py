"""Shared fixtures: an in-memory product repository and a few stored products."""

import uuid
from dataclasses import replace
from datetime import date

import pytest

from warehouse.application.interfaces import FieldValue, ProductRepository
from warehouse.domain.entities import Product


class FakeProductRepository(ProductRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self, products: list[Product] | None = None):
        self._products: dict[uuid.UUID, Product] = {}
        for product in products or []:
            self._products[product.article] = replace(product)

    async def find_by_field(self, field: str, value: FieldValue) -> list[Product]:
        return [replace(p) for p in self._products.values() if getattr(p, field) == value]

    async def get_by_article(self, article: uuid.UUID) -> Product | None:
        product = self._products.get(article)
        return replace(product) if product else None

    async def exists_by_article(self, article: uuid.UUID) -> bool:
        return article in self._products

    async def delete_by_field(self, field: str, value: FieldValue) -> int:
        matching = [a for a, p in self._products.items() if getattr(p, field) == value]
        for article in matching:
            del self._products[article]
        return len(matching)

    async def save(self, product: Product) -> Product:
        self._products[product.article] = replace(product)
        return replace(product)

    async def find_all(self) -> list[Product]:
        return [replace(p) for p in self._products.values()]

    async def delete_all(self) -> int:
        deleted = len(self._products)
        self._products.clear()
        return deleted


BEAR_ARTICLE = uuid.UUID("15cb0ec7-4e3a-45fc-afeb-a9c5e119ef34")
CAR_ARTICLE = uuid.UUID("7a6c2d1e-0b9f-4c3a-8e5d-2f1a0b9c8d7e")
BALL_ARTICLE = uuid.UUID("c3e1f0a2-5b4d-4e6f-9a8b-7c6d5e4f3a2b")


def make_products() -> list[Product]:
    return [
        Product(
            article=BEAR_ARTICLE,
            name="Fluffy bear",
            description="What a beautiful toy",
            category="Toys",
            price=1000,
            count=100,
            editdate="",
            createdate=date(2024, 3, 29),
        ),
        Product(
            article=CAR_ARTICLE,
            name="Race car",
            description="Fast and red",
            category="Toys",
            price=250,
            count=5,
            editdate="2024-04-01 12:30:00",
            createdate=date(2024, 3, 30),
        ),
        Product(
            article=BALL_ARTICLE,
            name="Football",
            description="Size 5",
            category="Sport",
            price=250,
            count=40,
            editdate="",
            createdate=date(2024, 3, 29),
        ),
    ]


@pytest.fixture
def products() -> list[Product]:
    return make_products()


@pytest.fixture
def bear(products: list[Product]) -> Product:
    return products[0]


@pytest.fixture
def repository(products: list[Product]) -> FakeProductRepository:
    return FakeProductRepository(products)


@pytest.fixture
def empty_repository() -> FakeProductRepository:
    return FakeProductRepository()
