from .product_creation_service import ProductCreationService
from .product_dispatcher import ProductDispatcher

__all__ = [
    "ProductCreationService",
    "ProductDispatcher",
]
