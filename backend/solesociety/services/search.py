"""
Search orchestration across StockX and GOAT.

Each source is fetched independently. When both are requested they run
concurrently and a failure on one side only empties that side's list; the
healthy side is still returned.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional, TypeVar

from solesociety.core.config import settings
from solesociety.schemas.sneaker import (
    Sneaker,
    SneakerSearchResult,
    SneakerSource,
    SearchSource,
)
from solesociety.services.classifier import has_price, is_sneaker
from solesociety.services.kicks_client import KicksClient, UpstreamError
from solesociety.services.pricing import resolve_display_price, resolve_goat_price, resolve_stockx_price
from solesociety.services.records import RawProduct, Variant, parse_product

logger = logging.getLogger(__name__)

T = TypeVar("T")


def interleave(a: list[T], b: list[T]) -> list[T]:
    """Alternate a[0], b[0], a[1], b[1], ...; leftovers of the longer list go last."""
    out: list[T] = []
    for i in range(max(len(a), len(b))):
        if i < len(a):
            out.append(a[i])
        if i < len(b):
            out.append(b[i])
    return out


def partition_by_price(records: list[RawProduct]) -> list[RawProduct]:
    """Priced records first; relative order kept within each group."""
    return sorted(records, key=lambda record: not has_price(record))


def filter_valid(results: list[SneakerSearchResult]) -> list[SneakerSearchResult]:
    """Drop results the UI can't render: no name or no thumbnail."""
    valid = []
    for result in results:
        if result.shoe_name and result.thumbnail:
            valid.append(result)
        else:
            logger.debug(f"Filtered out invalid result: {result.style_id!r}")
    return valid


def to_search_result(
    record: RawProduct,
    source: SneakerSource,
    user_size: Optional[str] = None,
) -> SneakerSearchResult:
    return SneakerSearchResult(
        style_id=record.style_id,
        sku=record.id,
        shoe_name=record.display_name,
        colorway=record.colorway_label,
        thumbnail=record.thumbnail,
        display_price=resolve_display_price(record, source, user_size),
        source=SneakerSource(source),
    )


def search_result_from_sneaker(sneaker: Sneaker, user_size: Optional[str] = None) -> SneakerSearchResult:
    """Re-derive the list-row view of an already normalized sneaker."""
    if sneaker.source is SneakerSource.STOCKX:
        display_price = resolve_stockx_price(sneaker.stockx_avg_price, sneaker.stockx_min_price)
    else:
        marketplace = sneaker.source.marketplace
        variants = [
            Variant(size=size, lowest_ask=prices.get(marketplace))
            for size, prices in sneaker.resell_prices.items()
        ]
        display_price = resolve_goat_price(variants, user_size)

    return SneakerSearchResult(
        style_id=sneaker.style_id,
        sku=sneaker.sku,
        shoe_name=sneaker.shoe_name,
        colorway=sneaker.colorway,
        thumbnail=sneaker.thumbnail or (sneaker.image_links[0] if sneaker.image_links else None),
        display_price=display_price,
        source=sneaker.source,
    )


@dataclass
class SearchResults:
    stockx: list[SneakerSearchResult] = field(default_factory=list)
    goat: list[SneakerSearchResult] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)

    def interleaved(self) -> list[SneakerSearchResult]:
        return interleave(self.stockx, self.goat)

    def failed_all(self, requested: list[SneakerSource]) -> bool:
        return bool(requested) and all(source.value in self.errors for source in requested)


def requested_sources(source: SearchSource) -> list[SneakerSource]:
    source = SearchSource(source)
    if source is SearchSource.BOTH:
        return [SneakerSource.STOCKX, SneakerSource.GOAT]
    return [SneakerSource(source.value)]


class SearchService:
    """Fans out product searches to the requested marketplaces."""

    def __init__(self, client: KicksClient):
        self.client = client

    async def fetch_products(
        self,
        source: SneakerSource,
        query: Optional[str] = None,
        brand: Optional[str] = None,
        limit: int = 20,
        page: int = 1,
        user_size: Optional[str] = None,
    ) -> list[SneakerSearchResult]:
        """One marketplace: fetch, keep sneakers, priced first, map to results."""
        source = SneakerSource(source)
        payloads = await self.client.search_products(source, query=query, brand=brand, limit=limit, page=page)

        records = [parse_product(payload, source) for payload in payloads]
        sneakers = partition_by_price([record for record in records if is_sneaker(record)])

        priced = sum(1 for record in sneakers if has_price(record))
        logger.info(
            f"{source.value}: {len(sneakers)}/{len(records)} sneakers "
            f"({priced} priced, {len(sneakers) - priced} unpriced)"
        )
        if source is SneakerSource.GOAT:
            logger.debug(f"goat: user shoe size {user_size or 'not set'}")

        return [to_search_result(record, source, user_size) for record in sneakers]

    async def search(
        self,
        keyword: Optional[str] = None,
        brand: Optional[str] = None,
        source: SearchSource = SearchSource.BOTH,
        limit: Optional[int] = None,
        user_size: Optional[str] = None,
        valid_only: bool = True,
    ) -> SearchResults:
        """
        Search one or both marketplaces.

        Both branches run concurrently. A branch that raises contributes an
        empty list and an entry in `errors`; it never fails the other branch.
        """
        limit = limit or settings.DEFAULT_SEARCH_LIMIT
        sources = requested_sources(source)

        outcomes = await asyncio.gather(
            *(
                self.fetch_products(s, query=keyword, brand=brand, limit=limit, user_size=user_size)
                for s in sources
            ),
            return_exceptions=True,
        )

        results = SearchResults()
        for s, outcome in zip(sources, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                message = outcome.message if isinstance(outcome, UpstreamError) else str(outcome)
                logger.warning(f"{s.value} search failed: {message}")
                results.errors[s.value] = message or type(outcome).__name__
                continue
            setattr(results, s.value, filter_valid(outcome) if valid_only else outcome)

        return results

    async def curated(
        self,
        source: SearchSource = SearchSource.BOTH,
        limit: Optional[int] = None,
        user_size: Optional[str] = None,
        brand: Optional[str] = None,
    ) -> SearchResults:
        """Brand-filtered browse list shown before the user searches."""
        return await self.search(
            brand=brand or settings.CURATED_BRAND,
            source=source,
            limit=limit or settings.DEFAULT_BRAND_LIMIT,
            user_size=user_size,
        )
