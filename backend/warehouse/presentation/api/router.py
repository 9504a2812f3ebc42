"""Top-level API router aggregating all endpoint routers."""

from fastapi import APIRouter

from warehouse.presentation.api.endpoints.health import router as health_router
from warehouse.presentation.api.endpoints.products import router as products_router

router = APIRouter()
router.include_router(health_router)
router.include_router(products_router)
