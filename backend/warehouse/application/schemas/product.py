"""Pydantic DTOs (Data Transfer Objects) for the Product feature."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    """Schema for creating a new product.

    Every field is optional here so the creation service can report the
    first missing one with its own message.
    """

    name: str | None = Field(None, examples=["Fluffy bear"])
    description: str | None = Field(None, examples=["Pretty good toy"])
    category: str | None = Field(None, examples=["toys"])
    price: int = Field(0, examples=[100])
    count: int = Field(0, examples=[10])


class ProductResponse(BaseModel):
    """Schema returned to the client."""

    article: UUID
    name: str
    description: str
    category: str
    price: int
    count: int
    editdate: str
    createdate: date

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "examples": [
                {
                    "article": "15cb0ec7-4e3a-45fc-afeb-a9c5e119ef34",
                    "name": "Fluffy bear",
                    "description": "What a beautiful toy",
                    "category": "Toys",
                    "price": 1000,
                    "count": 100,
                    "editdate": "",
                    "createdate": "2024-03-29",
                }
            ]
        },
    }


class ErrorResponse(BaseModel):
    """Error envelope for every 400/404 response."""

    message: str = Field(..., examples=["Invalid parameter value"])
