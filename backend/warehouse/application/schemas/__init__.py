from .product import ErrorResponse, ProductCreate, ProductResponse

__all__ = [
    "ErrorResponse",
    "ProductCreate",
    "ProductResponse",
]
