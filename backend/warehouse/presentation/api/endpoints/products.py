"""Product endpoints: search, edit and delete by an arbitrary field, plus bulk operations."""

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import PlainTextResponse

from warehouse.application.schemas import ErrorResponse, ProductCreate, ProductResponse
from warehouse.application.services import ProductCreationService, ProductDispatcher
from warehouse.application.services.product_fields import PRODUCT_FIELDS
from warehouse.infrastructure.dependencies import (
    get_product_creation_service,
    get_product_dispatcher,
)

router = APIRouter(prefix="/product", tags=["Product"])

_FIELD_NAMES = ", ".join(PRODUCT_FIELDS)

_ERRORS = {
    400: {"model": ErrorResponse, "description": "Value does not match the parameter type, or is empty"},
    404: {"model": ErrorResponse, "description": "No such parameter exists"},
}


@router.get("/searchByParam", response_model=list[ProductResponse], responses=_ERRORS)
async def search_by_param(
    param: str = Query(..., description=f"Parameter to search by, one of: {_FIELD_NAMES}"),
    param_value: str = Query(
        ...,
        alias="paramValue",
        description="Value to match; may be empty only for editdate",
    ),
    dispatcher: ProductDispatcher = Depends(get_product_dispatcher),
) -> list[ProductResponse]:
    """Get the products whose parameter equals the given value."""
    products = await dispatcher.search_by_param(param, param_value)
    return [ProductResponse.model_validate(p, from_attributes=True) for p in products]


@router.delete("/deleteByParam", response_class=PlainTextResponse, responses=_ERRORS)
async def delete_by_param(
    param: str = Query(..., description=f"Parameter to delete by, one of: {_FIELD_NAMES}"),
    param_value: str = Query(
        ...,
        alias="paramValue",
        description="Value to match; may be empty only for editdate",
    ),
    dispatcher: ProductDispatcher = Depends(get_product_dispatcher),
) -> str:
    """Delete the products whose parameter equals the given value."""
    if await dispatcher.delete_by_param(param, param_value):
        return f"Product(s) with parameter {param} and value {param_value} were deleted successfully"
    return f"Product(s) with parameter {param} and value {param_value} not found"


@router.put(
    "/editByParam",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid value, or the parameter cannot be edited"},
        404: {"model": ErrorResponse, "description": "No such parameter, or no product with this article"},
    },
)
async def edit_by_param(
    param: str = Query(..., description="Parameter to change: name, description, category, price or count"),
    param_value: str = Query(..., alias="paramValue", description="New value of the parameter"),
    article: str = Query(..., description="Article (UUID) of the product to change"),
    dispatcher: ProductDispatcher = Depends(get_product_dispatcher),
) -> ProductResponse:
    """Change one parameter of a product."""
    product = await dispatcher.edit_by_param(param, param_value, article)
    return ProductResponse.model_validate(product, from_attributes=True)


@router.get("/getAll", response_model=list[ProductResponse])
async def get_all(
    dispatcher: ProductDispatcher = Depends(get_product_dispatcher),
) -> list[ProductResponse]:
    """Get every product in the warehouse."""
    products = await dispatcher.list_products()
    return [ProductResponse.model_validate(p, from_attributes=True) for p in products]


@router.delete("/deleteAll", response_class=PlainTextResponse)
async def delete_all(
    dispatcher: ProductDispatcher = Depends(get_product_dispatcher),
) -> str:
    """Delete every product in the warehouse."""
    await dispatcher.delete_all_products()
    return "All products were deleted successfully"


@router.post(
    "/createProduct",
    response_model=ProductResponse,
    responses={400: {"model": ErrorResponse, "description": "A field is missing or invalid"}},
)
async def create_product(
    data: ProductCreate | None = Body(None),
    service: ProductCreationService = Depends(get_product_creation_service),
) -> ProductResponse:
    """Create a new product."""
    product = await service.create_product(data)
    return ProductResponse.model_validate(product, from_attributes=True)
