"""
Display-price resolution for search results.

StockX exposes aggregate statistics (avg/min/max) per product, GOAT exposes
per-size asks. Sizes are matched as raw strings: "10" and "US 10" are
different sizes here.
"""

import math
import logging
from typing import Optional

from solesociety.schemas.sneaker import PRICE_UNAVAILABLE, SneakerSource
from solesociety.services.records import RawProduct, Variant

logger = logging.getLogger(__name__)

def build_size_price_map(variants: list[Variant], source: SneakerSource) -> dict[str, dict[str, int]]:
    """
    Map each variant size to {marketplace: lowest ask}.

    Variants without a size or without an ask are dropped rather than
    represented as null entries. A repeated size keeps the later ask.
    """
    marketplace = SneakerSource(source).marketplace
    prices: dict[str, dict[str, int]] = {}
    for variant in variants:
        if not variant.size or variant.lowest_ask is None:
            continue
        prices[variant.size] = {marketplace: variant.lowest_ask}
    return prices


def lowest_variant_ask(variants: list[Variant]) -> Optional[int]:
    asks = [v.lowest_ask for v in variants if v.lowest_ask is not None and v.lowest_ask > 0]
    return min(asks) if asks else None


def format_price(price: Optional[int]) -> str:
    if price is None or price <= 0:
        return PRICE_UNAVAILABLE
    return f"${price}"


def numeric_size(size: Optional[str]) -> Optional[float]:
    """Parse a size like "10.5"; None for "10W", "OS" or missing sizes."""
    if not size:
        return None
    try:
        value = float(size)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def resolve_stockx_price(avg_price: Optional[int], min_price: Optional[int]) -> str:
    if avg_price is not None and avg_price > 0:
        return format_price(avg_price)
    if min_price is not None and min_price > 0:
        return format_price(min_price)
    return PRICE_UNAVAILABLE


def resolve_goat_price(variants: list[Variant], user_size: Optional[str] = None) -> str:
    """
    Pick the ask for the user's size, else the smallest numeric size.

    Non-numeric sizes sort after all numeric ones, keeping upstream order
    among themselves.
    """
    if not variants:
        return PRICE_UNAVAILABLE

    if user_size:
        match = next((v for v in variants if v.size == user_size), None)
        if match is not None and match.lowest_ask is not None and match.lowest_ask > 0:
            return format_price(match.lowest_ask)
        logger.debug(f"Size {user_size} has no ask; falling back to smallest size")

    priced = [v for v in variants if v.lowest_ask is not None and v.lowest_ask > 0]
    if not priced:
        return PRICE_UNAVAILABLE

    def sort_key(variant: Variant) -> tuple[int, float]:
        value = numeric_size(variant.size)
        return (0, value) if value is not None else (1, 0.0)

    smallest = sorted(priced, key=sort_key)[0]
    return format_price(smallest.lowest_ask)


def resolve_display_price(
    record: RawProduct,
    source: SneakerSource,
    user_size: Optional[str] = None,
) -> str:
    """Compute the single price string shown for a search result."""
    if SneakerSource(source) is SneakerSource.STOCKX:
        return resolve_stockx_price(record.avg_price, record.min_price)
    return resolve_goat_price(record.variants, user_size)
