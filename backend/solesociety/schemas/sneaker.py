import enum
from typing import Optional
from pydantic import BaseModel, Field


class SneakerSource(str, enum.Enum):
    STOCKX = "stockx"
    GOAT = "goat"

    @property
    def marketplace(self) -> str:
        """Key used in resellLinks / lowestResellPrice / resellPrices."""
        return "stockX" if self is SneakerSource.STOCKX else "goat"


class SearchSource(str, enum.Enum):
    STOCKX = "stockx"
    GOAT = "goat"
    BOTH = "both"


class SearchMode(str, enum.Enum):
    SEPARATE = "separate"
    INTERLEAVED = "interleaved"


PRICE_UNAVAILABLE = "—"


class ResellLinks(BaseModel):
    stock_x: Optional[str] = Field(default=None, alias="stockX")
    goat: Optional[str] = None

    class Config:
        populate_by_name = True


class LowestResellPrice(BaseModel):
    stock_x: Optional[int] = Field(default=None, alias="stockX")
    goat: Optional[int] = None

    class Config:
        populate_by_name = True


class Sneaker(BaseModel):
    style_id: str = Field(alias="styleID")
    sku: Optional[str] = None
    shoe_name: str = Field(default="", alias="shoeName")
    brand: Optional[str] = None
    colorway: Optional[str] = None
    retail_price: Optional[int] = Field(default=None, alias="retailPrice")
    release_date: Optional[str] = Field(default=None, alias="releaseDate")
    image_links: list[str] = Field(default_factory=list, alias="imageLinks")
    thumbnail: Optional[str] = None
    resell_links: ResellLinks = Field(default_factory=ResellLinks, alias="resellLinks")
    lowest_resell_price: LowestResellPrice = Field(default_factory=LowestResellPrice, alias="lowestResellPrice")

    # size -> {marketplace: price}; one marketplace key per record in practice
    resell_prices: dict[str, dict[str, int]] = Field(default_factory=dict, alias="resellPrices")

    # StockX aggregate statistics, independent of resell_prices
    stockx_min_price: Optional[int] = Field(default=None, alias="stockXMinPrice")
    stockx_max_price: Optional[int] = Field(default=None, alias="stockXMaxPrice")
    stockx_avg_price: Optional[int] = Field(default=None, alias="stockXAvgPrice")

    description: Optional[str] = None
    source: SneakerSource

    class Config:
        populate_by_name = True


class SneakerSearchResult(BaseModel):
    style_id: str = Field(alias="styleID")
    sku: Optional[str] = None
    shoe_name: str = Field(alias="shoeName")
    colorway: Optional[str] = None
    thumbnail: Optional[str] = None
    display_price: str = Field(default=PRICE_UNAVAILABLE, alias="displayPrice")
    source: SneakerSource

    class Config:
        populate_by_name = True


class ProductListResponse(BaseModel):
    data: list[Sneaker]


class ProductDetailResponse(BaseModel):
    data: Sneaker


class SearchResponse(BaseModel):
    stockx: list[SneakerSearchResult]
    goat: list[SneakerSearchResult]
    errors: dict[str, str] = {}


class InterleavedSearchResponse(BaseModel):
    data: list[SneakerSearchResult]
    errors: dict[str, str] = {}
