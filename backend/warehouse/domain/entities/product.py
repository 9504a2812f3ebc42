"""Domain entity for a warehouse product."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

EDIT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class Product:
    """A product stored in the warehouse.

    ``editdate`` stays an empty string until the first edit so that
    "never edited" products can be found by searching for ``""``.
    """

    article: UUID
    name: str
    description: str
    category: str
    price: int
    count: int
    editdate: str = ""
    createdate: date = field(default_factory=date.today)

    def set_field(self, name: str, value: str | int) -> None:
        """Replace one mutable attribute and stamp the edit date."""
        setattr(self, name, value)
        self.editdate = datetime.now().strftime(EDIT_DATE_FORMAT)
