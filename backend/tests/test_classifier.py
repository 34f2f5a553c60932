from __future__ import annotations

import pytest

from solesociety.services.classifier import has_price, is_sneaker
from solesociety.services.records import GoatProduct, StockXProduct, Variant


def test_explicit_sneaker_product_type_wins() -> None:
    assert is_sneaker(StockXProduct(product_type="Sneakers", title="Nike Tech Fleece Hoodie"))
    assert is_sneaker(StockXProduct(product_type="shoes"))


def test_exclusion_beats_inclusion() -> None:
    assert not is_sneaker(StockXProduct(product_type="apparel", title="Jordan Flight Essentials"))
    assert not is_sneaker(StockXProduct(title="Jordan Essential Hoodie"))
    assert not is_sneaker(GoatProduct(name="Nike Windrunner Jacket Air"))


@pytest.mark.parametrize(
    "record",
    [
        StockXProduct(title="Nike Dunk Low Panda"),
        StockXProduct(title="Something", category="Yeezy Boost"),
        GoatProduct(name="Adidas Adilette Slide"),
        GoatProduct(name="FOAMPOSITE ONE"),
    ],
)
def test_inclusion_keywords(record) -> None:
    assert is_sneaker(record)


def test_default_include_needs_a_name() -> None:
    assert is_sneaker(StockXProduct(title="New Balance 990v6"))
    assert not is_sneaker(StockXProduct())
    assert not is_sneaker(GoatProduct(name=""))


def test_product_type_cap_only_checked_against_type() -> None:
    # "cap" is an apparel type, not a name keyword
    assert is_sneaker(StockXProduct(title="Capri Sun Dunk"))
    assert not is_sneaker(StockXProduct(product_type="Caps", title="Dunk"))


def test_has_price() -> None:
    assert has_price(StockXProduct(min_price=120))
    assert has_price(StockXProduct(min_price=0, avg_price=80))
    assert not has_price(StockXProduct(min_price=0, avg_price=0))
    assert not has_price(GoatProduct())


def test_has_price_counts_unpriced_variants() -> None:
    assert has_price(GoatProduct(variants=[Variant(size="9", lowest_ask=None)]))
    assert has_price(GoatProduct(variants=[Variant(size="9", lowest_ask=0)]))


@pytest.mark.parametrize(
    "name",
    ["Nike Heritage Bag", "Jordan Jumpman Cap", "Nike Dri-FIT Shirt", "Supreme Box Logo Hat"],
)
def test_apparel_type_words_do_not_exclude_by_name(name: str) -> None:
    # bag/cap/shirt/hat only exclude through the product type
    assert is_sneaker(StockXProduct(title=name))
    assert not is_sneaker(StockXProduct(title=name, product_type="accessories"))
