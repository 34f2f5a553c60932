from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from solesociety.api.deps import get_product_service
from solesociety.schemas.sneaker import ProductDetailResponse, ProductListResponse, SneakerSource
from solesociety.services.product_lookup import ProductService

router = APIRouter()

INVALID_SOURCE = {"error": "source must be 'stockx' or 'goat'"}


def _parse_source(source: str) -> SneakerSource | None:
    try:
        return SneakerSource(source)
    except ValueError:
        return None


@router.get("/products", response_model=ProductListResponse)
async def list_products(
    source: str = "stockx",
    query: str | None = None,
    brand: str | None = None,
    limit: int = Query(default=20, ge=1, le=100),
    page: int = Query(default=1, ge=1),
    service: ProductService = Depends(get_product_service),
):
    """Proxy a StockX or GOAT product listing, normalized."""
    parsed = _parse_source(source)
    if parsed is None:
        return JSONResponse(status_code=400, content=INVALID_SOURCE)

    sneakers = await service.list_products(parsed, query=query, brand=brand, limit=limit, page=page)
    return ProductListResponse(data=sneakers)


@router.get("/product/{product_id}", response_model=ProductDetailResponse)
async def get_product(
    product_id: str,
    source: str = "stockx",
    service: ProductService = Depends(get_product_service),
):
    """Product detail by slug or id, falling back to a search on the id."""
    parsed = _parse_source(source)
    if parsed is None:
        return JSONResponse(status_code=400, content=INVALID_SOURCE)

    sneaker = await service.get_product(product_id, parsed)
    return ProductDetailResponse(data=sneaker)
