from __future__ import annotations

from solesociety.schemas.sneaker import PRICE_UNAVAILABLE, SneakerSource
from solesociety.services.pricing import (
    build_size_price_map,
    format_price,
    lowest_variant_ask,
    numeric_size,
    resolve_display_price,
)
from solesociety.services.records import GoatProduct, StockXProduct, Variant

GOAT_VARIANTS = [Variant(size="9", lowest_ask=100), Variant(size="10", lowest_ask=150)]


def test_stockx_prefers_average_then_minimum() -> None:
    assert resolve_display_price(StockXProduct(avg_price=344, min_price=280), SneakerSource.STOCKX) == "$344"
    assert resolve_display_price(StockXProduct(avg_price=0, min_price=120), SneakerSource.STOCKX) == "$120"
    assert resolve_display_price(StockXProduct(avg_price=0, min_price=0), SneakerSource.STOCKX) == PRICE_UNAVAILABLE
    assert resolve_display_price(StockXProduct(), SneakerSource.STOCKX) == "—"


def test_stockx_ignores_user_size() -> None:
    record = StockXProduct(avg_price=200, variants=[Variant(size="10", lowest_ask=999)])
    assert resolve_display_price(record, SneakerSource.STOCKX, "10") == "$200"


def test_goat_uses_user_size() -> None:
    record = GoatProduct(variants=GOAT_VARIANTS)
    assert resolve_display_price(record, SneakerSource.GOAT, "10") == "$150"


def test_goat_falls_back_to_smallest_numeric_size() -> None:
    record = GoatProduct(variants=list(reversed(GOAT_VARIANTS)))
    assert resolve_display_price(record, SneakerSource.GOAT, "11") == "$100"
    assert resolve_display_price(record, SneakerSource.GOAT) == "$100"


def test_goat_user_size_without_ask_falls_back() -> None:
    record = GoatProduct(variants=[Variant(size="10", lowest_ask=0), Variant(size="12", lowest_ask=210)])
    assert resolve_display_price(record, SneakerSource.GOAT, "10") == "$210"


def test_goat_size_match_is_exact_string() -> None:
    record = GoatProduct(variants=[Variant(size="10", lowest_ask=150), Variant(size="4", lowest_ask=90)])
    assert resolve_display_price(record, SneakerSource.GOAT, "10.0") == "$90"
    assert resolve_display_price(record, SneakerSource.GOAT, "US 10") == "$90"


def test_goat_numeric_ordering_not_lexical() -> None:
    record = GoatProduct(variants=[Variant(size="10", lowest_ask=150), Variant(size="9.5", lowest_ask=140)])
    assert resolve_display_price(record, SneakerSource.GOAT) == "$140"


def test_goat_non_numeric_sizes_sort_last() -> None:
    record = GoatProduct(variants=[Variant(size="OS", lowest_ask=50), Variant(size="13", lowest_ask=300)])
    assert resolve_display_price(record, SneakerSource.GOAT) == "$300"

    only_text = GoatProduct(variants=[Variant(size="S", lowest_ask=60), Variant(size="M", lowest_ask=70)])
    assert resolve_display_price(only_text, SneakerSource.GOAT) == "$60"


def test_goat_without_priced_variants() -> None:
    assert resolve_display_price(GoatProduct(), SneakerSource.GOAT, "10") == PRICE_UNAVAILABLE
    unpriced = GoatProduct(variants=[Variant(size="9", lowest_ask=None), Variant(size="10", lowest_ask=0)])
    assert resolve_display_price(unpriced, SneakerSource.GOAT) == PRICE_UNAVAILABLE


def test_goat_ignores_aggregate_prices() -> None:
    assert resolve_display_price(GoatProduct(avg_price=200), SneakerSource.GOAT) == PRICE_UNAVAILABLE


def test_build_size_price_map() -> None:
    assert build_size_price_map([Variant(size="9", lowest_ask=None)], SneakerSource.GOAT) == {}
    assert build_size_price_map(GOAT_VARIANTS, SneakerSource.GOAT) == {"9": {"goat": 100}, "10": {"goat": 150}}
    assert build_size_price_map(GOAT_VARIANTS, SneakerSource.STOCKX) == {"9": {"stockX": 100}, "10": {"stockX": 150}}
    assert build_size_price_map([Variant(size="", lowest_ask=80), Variant(lowest_ask=80)], SneakerSource.GOAT) == {}


def test_lowest_variant_ask_skips_missing_and_zero() -> None:
    assert lowest_variant_ask([Variant(size="8", lowest_ask=0), Variant(size="9", lowest_ask=120)]) == 120
    assert lowest_variant_ask([Variant(size="9")]) is None


def test_helpers() -> None:
    assert format_price(150) == "$150"
    assert format_price(None) == "—"
    assert numeric_size("10.5") == 10.5
    assert numeric_size("10W") is None
    assert numeric_size("nan") is None
    assert numeric_size(None) is None
