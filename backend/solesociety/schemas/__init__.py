from solesociety.schemas.sneaker import (
    SneakerSource, SearchSource, SearchMode, PRICE_UNAVAILABLE,
    ResellLinks, LowestResellPrice, Sneaker, SneakerSearchResult,
    ProductListResponse, ProductDetailResponse, SearchResponse, InterleavedSearchResponse,
)
from solesociety.schemas.user import (
    RegisterRequest, LoginRequest, UserResponse, ShoeSizeUpdate,
    LikeStatusResponse, LikedStyleIDsResponse,
)

__all__ = [
    # Sneaker
    "SneakerSource", "SearchSource", "SearchMode", "PRICE_UNAVAILABLE",
    "ResellLinks", "LowestResellPrice", "Sneaker", "SneakerSearchResult",
    "ProductListResponse", "ProductDetailResponse", "SearchResponse", "InterleavedSearchResponse",
    # User
    "RegisterRequest", "LoginRequest", "UserResponse", "ShoeSizeUpdate",
    "LikeStatusResponse", "LikedStyleIDsResponse",
]
