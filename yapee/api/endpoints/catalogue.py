"""
Catalogue endpoints backed by the mock catalogue client.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from yapee.error_handler import INTERNAL_ERROR_BODY
from yapee.integrations.clients.mocks.catalogue import MockCatalogueClient, mock_catalogue_client
from yapee.integrations.contracts.catalogue import Category, Product, ProductFilter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Catalogue"])


def get_catalogue_client() -> MockCatalogueClient:
    """Dependency for the catalogue source"""
    return mock_catalogue_client


@router.get("/products", response_model=List[Product])
async def list_products(
    category: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    brand: Optional[str] = Query(None),
    min_price: Optional[int] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[int] = Query(None, alias="maxPrice", ge=0),
    catalogue: MockCatalogueClient = Depends(get_catalogue_client),
):
    """
    List products. Filters are accepted and logged; the mock returns every product.
    """
    try:
        filters = ProductFilter(category=category, search=search, brand=brand, min_price=min_price, max_price=max_price)
        return catalogue.list_products(filters)
    except Exception as e:
        logger.error("API Error - GET /api/products: %s", e, exc_info=True)
        return JSONResponse(status_code=500, content=dict(INTERNAL_ERROR_BODY))


@router.get("/categories", response_model=List[Category])
async def list_categories(catalogue: MockCatalogueClient = Depends(get_catalogue_client)):
    try:
        return catalogue.list_categories()
    except Exception as e:
        logger.error("API Error - GET /api/categories: %s", e, exc_info=True)
        return JSONResponse(status_code=500, content=dict(INTERNAL_ERROR_BODY))
