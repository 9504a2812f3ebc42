from .product import EDIT_DATE_FORMAT, Product

__all__ = [
    "EDIT_DATE_FORMAT",
    "Product",
]
