"""
Raw per-source product records.

StockX and GOAT return structurally different product records, and neither
source is consistent about types: ids arrive as strings or integers, prices
as integers or whole-dollar floats. Payloads are parsed here into typed
records with every field optional. Parsing never raises; anything that
cannot be coerced comes out as None.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Optional

from solesociety.schemas.sneaker import SneakerSource

# Coercion helpers

def coerce_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def coerce_id(value: Any) -> Optional[str]:
    """Ids come back as strings from StockX and integers from GOAT."""
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return None


def coerce_int(value: Any) -> Optional[int]:
    """Accept int or float, truncating floats toward zero (199.9 -> 199)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return None


def coerce_bool(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def coerce_str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item]


def coerce_size(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def first_non_empty(*values: Optional[str]) -> Optional[str]:
    for value in values:
        if value:
            return value
    return None


def parse_retail_price(retail_prices: Any) -> Optional[int]:
    """Parse GOAT's {"USD": "150"} into 150; None if missing or unparsable."""
    if not isinstance(retail_prices, dict):
        return None
    usd = retail_prices.get("USD")
    if not isinstance(usd, str):
        return None
    try:
        return int(usd.strip())
    except ValueError:
        return None


# Raw per-source records

@dataclass
class Variant:
    """Per-size ask for a product."""
    size: Optional[str] = None
    lowest_ask: Optional[int] = None
    available: Optional[bool] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "Variant":
        if not isinstance(payload, dict):
            return cls()
        return cls(
            size=coerce_size(payload.get("size")),
            lowest_ask=coerce_int(payload.get("lowest_ask")),
            available=coerce_bool(payload.get("available")),
        )


def parse_variants(value: Any) -> list[Variant]:
    if not isinstance(value, list):
        return []
    return [Variant.from_payload(item) for item in value if isinstance(item, dict)]


@dataclass
class RawProduct:
    """Fields shared by both marketplaces. Everything is optional."""
    slug: Optional[str] = None
    id: Optional[str] = None
    title: Optional[str] = None
    name: Optional[str] = None
    model: Optional[str] = None
    brand: Optional[str] = None
    category: Optional[str] = None
    product_type: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    avg_price: Optional[int] = None
    variants: list[Variant] = field(default_factory=list)

    @property
    def style_id(self) -> str:
        return first_non_empty(self.slug, self.id) or ""

    @property
    def display_name(self) -> str:
        return first_non_empty(self.title, self.name, self.model) or ""

    @property
    def image_links(self) -> list[str]:
        return []

    @property
    def thumbnail(self) -> Optional[str]:
        images = self.image_links
        return images[0] if images else None

    @property
    def colorway_label(self) -> Optional[str]:
        return None

    @staticmethod
    def _common_fields(payload: dict) -> dict:
        return {
            "slug": coerce_str(payload.get("slug")),
            "id": coerce_id(payload.get("id")),
            "title": coerce_str(payload.get("title")),
            "name": coerce_str(payload.get("name")),
            "model": coerce_str(payload.get("model")),
            "brand": coerce_str(payload.get("brand")),
            "category": coerce_str(payload.get("category")),
            "product_type": coerce_str(payload.get("product_type")),
            "link": coerce_str(payload.get("link")),
            "description": coerce_str(payload.get("description")),
            "min_price": coerce_int(payload.get("min_price")),
            "max_price": coerce_int(payload.get("max_price")),
            "avg_price": coerce_int(payload.get("avg_price")),
            "variants": parse_variants(payload.get("variants")),
        }


@dataclass
class StockXProduct(RawProduct):
    gallery: list[str] = field(default_factory=list)
    image: Optional[str] = None
    gender: Optional[str] = None
    created_at: Optional[str] = None
    release_date: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "StockXProduct":
        if not isinstance(payload, dict):
            return cls()
        return cls(
            **cls._common_fields(payload),
            gallery=coerce_str_list(payload.get("gallery")),
            image=coerce_str(payload.get("image")),
            gender=coerce_str(payload.get("gender")),
            created_at=coerce_str(payload.get("created_at")),
            release_date=coerce_str(payload.get("release_date")),
        )

    @property
    def image_links(self) -> list[str]:
        if self.gallery:
            return list(self.gallery)
        return [self.image] if self.image else []

    @property
    def colorway_label(self) -> Optional[str]:
        # StockX list payloads carry no colorway; the category is shown instead
        return self.category


@dataclass
class GoatProduct(RawProduct):
    colorway: Optional[str] = None
    images: list[str] = field(default_factory=list)
    image_url: Optional[str] = None
    image: Optional[str] = None
    retail_price: Optional[int] = None
    release_date: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "GoatProduct":
        if not isinstance(payload, dict):
            return cls()
        return cls(
            **cls._common_fields(payload),
            colorway=coerce_str(payload.get("colorway")),
            images=coerce_str_list(payload.get("images")),
            image_url=coerce_str(payload.get("image_url")),
            image=coerce_str(payload.get("image")),
            retail_price=parse_retail_price(payload.get("retail_prices")),
            release_date=coerce_str(payload.get("release_date")),
        )

    @property
    def display_name(self) -> str:
        return first_non_empty(self.name, self.title, self.model) or ""

    @property
    def image_links(self) -> list[str]:
        if self.images:
            return list(self.images)
        single = first_non_empty(self.image_url, self.image)
        return [single] if single else []

    @property
    def colorway_label(self) -> Optional[str]:
        return first_non_empty(self.colorway, self.category)


RAW_PRODUCT_TYPES: dict[SneakerSource, type[RawProduct]] = {
    SneakerSource.STOCKX: StockXProduct,
    SneakerSource.GOAT: GoatProduct,
}


def parse_product(payload: Any, source: SneakerSource) -> RawProduct:
    """Parse an untyped upstream payload into the source's raw record."""
    return RAW_PRODUCT_TYPES[SneakerSource(source)].from_payload(payload)
