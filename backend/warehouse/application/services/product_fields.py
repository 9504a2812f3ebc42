"""Product field registry: the whitelist of fields usable as a query or edit key.

Each entry keeps together everything the dispatcher needs to know about a
field: how to turn the raw request string into a typed value, which store
lookup and delete to run, and whether the field may be edited.
"""

import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from warehouse.application.interfaces import FieldValue, ProductRepository
from warehouse.domain.entities import EDIT_DATE_FORMAT, Product
from warehouse.domain.exceptions import InvalidValueError, UnknownFieldError

# Integer columns are 32-bit signed.
MAX_INT = 2**31 - 1
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_ARTICLE_PATTERN = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")
_EDIT_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")
_CREATE_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


# ── Coercion ─────────────────────────────────────────────────────────

def parse_article(raw: str) -> UUID:
    """Parse a product article, which must be a hyphenated 8-4-4-4-12 UUID."""
    if not _ARTICLE_PATTERN.fullmatch(raw):
        raise InvalidValueError("Invalid UUID article")
    return UUID(raw)


def parse_positive_int(raw: str, message: str) -> int:
    """Parse a base-10 integer that must be at least 1."""
    if not _INT_PATTERN.fullmatch(raw):
        raise InvalidValueError(message)
    value = int(raw)
    if value < 1 or value > MAX_INT:
        raise InvalidValueError(message)
    return value


def parse_edit_date(raw: str) -> str:
    """Validate an edit timestamp; the empty string means "never edited"."""
    if raw == "":
        return raw
    try:
        if not _EDIT_DATE_PATTERN.fullmatch(raw):
            raise ValueError(raw)
        datetime.strptime(raw, EDIT_DATE_FORMAT)
    except ValueError:
        raise InvalidValueError("Invalid date and time format") from None
    return raw


def parse_create_date(raw: str) -> date:
    """Parse a creation date in ``YYYY-MM-DD`` form."""
    try:
        if not _CREATE_DATE_PATTERN.fullmatch(raw):
            raise ValueError(raw)
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError:
        raise InvalidValueError("Invalid date format") from None


def _as_is(raw: str) -> str:
    return raw


def _parse_price(raw: str) -> int:
    return parse_positive_int(raw, "Invalid price")


def _parse_count(raw: str) -> int:
    return parse_positive_int(raw, "Invalid count")


# ── Store operations ─────────────────────────────────────────────────

SearchFn = Callable[[ProductRepository, str, FieldValue], Awaitable[list[Product]]]
DeleteFn = Callable[[ProductRepository, str, FieldValue], Awaitable[int]]


async def _search_matching(repository: ProductRepository, name: str, value: FieldValue) -> list[Product]:
    return await repository.find_by_field(name, value)


async def _search_article(repository: ProductRepository, name: str, value: FieldValue) -> list[Product]:
    product = await repository.get_by_article(value)
    return [product] if product is not None else []


async def _delete_matching(repository: ProductRepository, name: str, value: FieldValue) -> int:
    return await repository.delete_by_field(name, value)


# ── Registry ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ProductField:
    """One whitelisted product field."""

    name: str
    coerce: Callable[[str], FieldValue]
    search: SearchFn = _search_matching
    delete: DeleteFn = _delete_matching
    mutable: bool = True
    immutable_message: str = ""
    allows_empty: bool = False


PRODUCT_FIELDS: dict[str, ProductField] = {
    f.name: f
    for f in (
        ProductField(
            "article",
            parse_article,
            search=_search_article,
            mutable=False,
            immutable_message="Product article cannot be changed",
        ),
        ProductField("name", _as_is),
        ProductField("description", _as_is),
        ProductField("category", _as_is),
        ProductField("price", _parse_price),
        ProductField("count", _parse_count),
        ProductField(
            "editdate",
            parse_edit_date,
            mutable=False,
            immutable_message="Product edit date cannot be changed",
            allows_empty=True,
        ),
        ProductField(
            "createdate",
            parse_create_date,
            mutable=False,
            immutable_message="Product creation date cannot be changed",
        ),
    )
}


def is_recognized(field_name: str) -> bool:
    return field_name.lower() in PRODUCT_FIELDS


def lookup_field(field_name: str) -> ProductField:
    """Return the registry entry for a field name, case-insensitively."""
    field = PRODUCT_FIELDS.get(field_name.lower())
    if field is None:
        raise UnknownFieldError(field_name)
    return field
