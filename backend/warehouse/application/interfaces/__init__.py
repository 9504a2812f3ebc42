from .product_repository import FieldValue, ProductRepository

__all__ = [
    "FieldValue",
    "ProductRepository",
]
