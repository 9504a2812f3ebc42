"""SQLAlchemy ORM model for the Product entity."""

from datetime import date

from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from warehouse.infrastructure.database.base import Base


class ProductModel(Base):
    """Maps to the 'products' table."""

    __tablename__ = "products"

    article: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    count: Mapped[int] = mapped_column(Integer, nullable=False)
    # "" until the first edit, then "YYYY-MM-DD HH:MM:SS"
    editdate: Mapped[str] = mapped_column(String(19), nullable=False, default="")
    createdate: Mapped[date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:
        return f"<ProductModel(article={self.article}, name='{self.name}')>"
