"""
Schema normalization: map raw StockX / GOAT records onto the canonical Sneaker.

The two marketplaces are mapped by separate functions because their payloads
differ in structure, not just field names. Normalization is pure and never
raises on malformed payloads; missing fields stay None.
"""

from typing import Any

from solesociety.schemas.sneaker import (
    LowestResellPrice,
    ResellLinks,
    Sneaker,
    SneakerSource,
)
from solesociety.services.pricing import build_size_price_map, lowest_variant_ask
from solesociety.services.records import (
    GoatProduct,
    RawProduct,
    StockXProduct,
    first_non_empty,
    parse_product,
)


def normalize_stockx(record: StockXProduct) -> Sneaker:
    images = record.image_links
    return Sneaker(
        style_id=record.style_id,
        sku=record.id,
        shoe_name=record.display_name,
        brand=record.brand,
        colorway=record.colorway_label,
        retail_price=None,
        release_date=first_non_empty(record.created_at, record.release_date),
        image_links=images,
        thumbnail=images[0] if images else None,
        resell_links=ResellLinks(stock_x=record.link),
        lowest_resell_price=LowestResellPrice(stock_x=record.min_price),
        resell_prices=build_size_price_map(record.variants, SneakerSource.STOCKX),
        stockx_min_price=record.min_price,
        stockx_max_price=record.max_price,
        stockx_avg_price=record.avg_price,
        description=record.description,
        source=SneakerSource.STOCKX,
    )


def normalize_goat(record: GoatProduct) -> Sneaker:
    images = record.image_links
    return Sneaker(
        style_id=record.style_id,
        sku=record.id,
        shoe_name=record.display_name,
        brand=record.brand,
        colorway=record.colorway,
        retail_price=record.retail_price,
        release_date=record.release_date,
        image_links=images,
        thumbnail=images[0] if images else None,
        resell_links=ResellLinks(goat=record.link),
        lowest_resell_price=LowestResellPrice(goat=lowest_variant_ask(record.variants)),
        resell_prices=build_size_price_map(record.variants, SneakerSource.GOAT),
        description=record.description,
        source=SneakerSource.GOAT,
    )


def normalize_record(record: RawProduct) -> Sneaker:
    if isinstance(record, GoatProduct):
        return normalize_goat(record)
    if isinstance(record, StockXProduct):
        return normalize_stockx(record)
    raise TypeError(f"Unsupported record type: {type(record).__name__}")


def normalize(payload: Any, source: SneakerSource) -> Sneaker:
    """Normalize a raw upstream payload from `source` into a Sneaker."""
    return normalize_record(parse_product(payload, source))
