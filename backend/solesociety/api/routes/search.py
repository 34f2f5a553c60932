from fastapi import APIRouter, Depends, HTTPException, Query, status
from solesociety.api.deps import get_search_service
from solesociety.schemas.sneaker import (
    InterleavedSearchResponse,
    SearchMode,
    SearchResponse,
    SearchSource,
)
from solesociety.services.search import SearchResults, SearchService, requested_sources

router = APIRouter()


def _render(results: SearchResults, source: SearchSource, mode: SearchMode):
    if results.failed_all(requested_sources(source)):
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"error": "All marketplace searches failed", "errors": results.errors},
        )

    if mode is SearchMode.INTERLEAVED:
        return InterleavedSearchResponse(data=results.interleaved(), errors=results.errors)
    return SearchResponse(stockx=results.stockx, goat=results.goat, errors=results.errors)


@router.get("/search", response_model=SearchResponse | InterleavedSearchResponse)
async def search_sneakers(
    keyword: str | None = None,
    brand: str | None = None,
    source: SearchSource = SearchSource.BOTH,
    limit: int | None = Query(default=None, ge=1, le=100),
    size: str | None = Query(default=None, description="User shoe size for GOAT pricing"),
    mode: SearchMode = SearchMode.SEPARATE,
    service: SearchService = Depends(get_search_service),
):
    """Keyword or brand search across StockX, GOAT, or both."""
    results = await service.search(
        keyword=keyword,
        brand=brand,
        source=source,
        limit=limit,
        user_size=size,
    )
    return _render(results, source, mode)


@router.get("/curated", response_model=SearchResponse | InterleavedSearchResponse)
async def curated_sneakers(
    source: SearchSource = SearchSource.BOTH,
    brand: str | None = None,
    limit: int | None = Query(default=None, ge=1, le=100),
    size: str | None = None,
    mode: SearchMode = SearchMode.INTERLEAVED,
    service: SearchService = Depends(get_search_service),
):
    """Default browse list (brand-filtered) shown before any search."""
    results = await service.curated(source=source, limit=limit, user_size=size, brand=brand)
    return _render(results, source, mode)
