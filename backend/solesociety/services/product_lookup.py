"""
Product detail lookups.

Detail requests resolve in two steps: a direct lookup by slug/id, and if
upstream says 404 (or returns an empty detail), a keyword search using the
id as the query whose first hit is then fetched by its own slug.
"""

import asyncio
import logging
from typing import Iterable, Optional

from solesociety.core.config import settings
from solesociety.schemas.sneaker import Sneaker, SneakerSource
from solesociety.services.kicks_client import KicksClient, UpstreamError
from solesociety.services.normalizer import normalize
from solesociety.services.records import coerce_id, coerce_str, first_non_empty

logger = logging.getLogger(__name__)


class ProductNotFoundError(Exception):
    """Neither the direct lookup nor the fallback search found the product."""

    def __init__(self, product_id: str, source: SneakerSource):
        super().__init__(f"Product not found: {product_id} ({source.value})")
        self.product_id = product_id
        self.source = source


class ProductService:
    def __init__(self, client: KicksClient):
        self.client = client

    async def list_products(
        self,
        source: SneakerSource,
        query: Optional[str] = None,
        brand: Optional[str] = None,
        limit: int = 20,
        page: int = 1,
    ) -> list[Sneaker]:
        """Normalized product list, unfiltered, in upstream order."""
        source = SneakerSource(source)
        payloads = await self.client.search_products(source, query=query, brand=brand, limit=limit, page=page)
        return [normalize(payload, source) for payload in payloads]

    async def fetch_detail(self, source: SneakerSource, product_id: str) -> Sneaker:
        """Direct detail lookup only. Raises ProductNotFoundError on 404/empty."""
        source = SneakerSource(source)
        try:
            payload = await self.client.get_product(source, product_id)
        except UpstreamError as e:
            if e.is_not_found:
                raise ProductNotFoundError(product_id, source) from e
            raise

        if not payload:
            raise ProductNotFoundError(product_id, source)
        return normalize(payload, source)

    async def get_product(self, product_id: str, source: SneakerSource) -> Sneaker:
        """Detail lookup with the search-by-id fallback."""
        source = SneakerSource(source)
        try:
            return await self.fetch_detail(source, product_id)
        except ProductNotFoundError:
            logger.info(f"{source.value} detail miss for {product_id!r}; trying search fallback")

        matches = await self.client.search_products(source, query=product_id, limit=1)
        if not matches:
            raise ProductNotFoundError(product_id, source)

        found = matches[0]
        detail_id = first_non_empty(coerce_str(found.get("slug")), coerce_id(found.get("id")))
        if not detail_id:
            raise ProductNotFoundError(product_id, source)

        return await self.fetch_detail(source, detail_id)

    async def _lookup_liked(self, style_id: str, semaphore: asyncio.Semaphore) -> Optional[Sneaker]:
        async with semaphore:
            for source in (SneakerSource.GOAT, SneakerSource.STOCKX):
                try:
                    return await self.fetch_detail(source, style_id)
                except (UpstreamError, ProductNotFoundError) as e:
                    logger.debug(f"Liked lookup {style_id!r} failed on {source.value}: {e}")
            logger.warning(f"Could not load liked sneaker {style_id!r} from any source")
            return None

    async def get_liked_sneakers(
        self,
        style_ids: Iterable[str],
        concurrency: Optional[int] = None,
    ) -> list[Sneaker]:
        """
        Load details for liked style ids, GOAT first then StockX.

        Items that fail on both sources are skipped. Result order is not
        guaranteed to match `style_ids`.
        """
        semaphore = asyncio.Semaphore(concurrency or settings.LIKED_LOOKUP_CONCURRENCY)
        tasks = [
            asyncio.create_task(self._lookup_liked(style_id, semaphore))
            for style_id in dict.fromkeys(style_ids)
            if style_id
        ]

        sneakers = []
        for completed in asyncio.as_completed(tasks):
            sneaker = await completed
            if sneaker is not None:
                sneakers.append(sneaker)
        return sneakers
