"""Framework-independent product request errors.

Services raise these at the point a request is found to be invalid.
Exception handlers registered in main.py translate them into the
error envelope: {"message": "..."}.
"""


class ProductError(Exception):
    """Base class for all product request failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnknownFieldError(ProductError):
    """Raised when a field name is outside the product field whitelist."""

    def __init__(self, field: str):
        self.field = field
        super().__init__("No such parameter exists")


class InvalidValueError(ProductError):
    """Raised when a value fails coercion, a range check, or targets an immutable field."""


class RecordNotFoundError(ProductError):
    """Raised when a referenced product article does not exist."""

    def __init__(self, article: object):
        self.article = article
        super().__init__("Product with this article does not exist")
