"""
KicksDB client for StockX and GOAT product data.

Only builds requests and unwraps the JSON envelope; records are returned as
plain dicts and typed later by the normalizer. Every failure (timeout,
transport error, non-2xx, undecodable body) surfaces as UpstreamError so
callers can treat it as "no data from this source".
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from solesociety.core.config import settings
from solesociety.schemas.sneaker import SneakerSource
from solesociety.utils.retry import create_retry_decorator

logger = logging.getLogger(__name__)

PRODUCTS_PATHS = {
    SneakerSource.STOCKX: "/v3/stockx/products",
    SneakerSource.GOAT: "/v3/goat/products",
}


class UpstreamError(Exception):
    """A KicksDB call failed. Carries the upstream status/body when there was one."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


def brand_filter(brand: str) -> str:
    """Upstream filter expression; only one clause is supported per call."""
    return f"brand = '{brand}'"


def _drop_none(params: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in params.items() if value is not None and value != ""}


class KicksClient:
    """Async client for the KicksDB StockX/GOAT endpoints."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        retry_attempts: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        api_key = api_key if api_key is not None else settings.KICKS_API_KEY
        headers = {"Accept": "application/json"}
        if api_key:
            # Provider-issued token, sent verbatim
            headers["Authorization"] = api_key

        self.client = httpx.AsyncClient(
            base_url=base_url or settings.KICKS_API_BASE_URL,
            headers=headers,
            timeout=timeout if timeout is not None else settings.UPSTREAM_TIMEOUT_SECONDS,
            transport=transport,
        )
        attempts = retry_attempts if retry_attempts is not None else settings.UPSTREAM_RETRY_ATTEMPTS
        self._send = create_retry_decorator(max_attempts=attempts)(self._send_once)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _send_once(self, path: str, params: dict[str, Any]) -> httpx.Response:
        return await self.client.get(path, params=params)

    async def _get(self, path: str, params: dict[str, Any]) -> Any:
        try:
            response = await self._send(path, _drop_none(params))
        except httpx.TimeoutException as e:
            logger.error(f"KicksDB timeout on {path}: {e}")
            raise UpstreamError(f"Upstream request timed out: {path}") from e
        except httpx.HTTPError as e:
            logger.error(f"KicksDB request failed on {path}: {e}")
            raise UpstreamError(f"Upstream request failed: {e}") from e

        if response.status_code != 200:
            try:
                body = response.json()
            except ValueError:
                body = {"error": response.text} if response.text else None
            logger.error(f"KicksDB error on {path}: {response.status_code} {response.text[:200]}")
            raise UpstreamError(
                f"Upstream returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=body,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(f"Invalid JSON from upstream: {path}") from e

    @staticmethod
    def _list_data(payload: Any) -> list[dict]:
        data = payload.get("data") if isinstance(payload, dict) else None
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            return []
        return [item for item in data if isinstance(item, dict)]

    async def search_products(
        self,
        source: SneakerSource,
        query: Optional[str] = None,
        brand: Optional[str] = None,
        limit: int = 20,
        page: int = 1,
    ) -> list[dict]:
        """List products from one marketplace. Free-text query and brand filter
        should not be combined; upstream rejects or ignores one of them."""
        source = SneakerSource(source)
        params: dict[str, Any] = {
            "query": query,
            "limit": limit,
            "page": page,
            "filters": brand_filter(brand) if brand else None,
            "currency": "USD",
        }
        if source is SneakerSource.STOCKX:
            params["market"] = "US"
            params["display[prices]"] = "true"
        else:
            params["display[variants]"] = "true"

        payload = await self._get(PRODUCTS_PATHS[source], params)
        return self._list_data(payload)

    async def get_stockx_product(self, slug: str) -> Optional[dict]:
        """StockX detail by slug or id, with variants and prices."""
        path = f"{PRODUCTS_PATHS[SneakerSource.STOCKX]}/{quote(slug, safe='')}"
        payload = await self._get(
            path,
            {
                "display[variants]": "true",
                "display[prices]": "true",
                "market": "US",
                "currency": "USD",
            },
        )
        data = payload.get("data") if isinstance(payload, dict) else None
        return data if isinstance(data, dict) and data else None

    async def get_goat_product(self, slug: str) -> Optional[dict]:
        """GOAT detail by slug. The envelope holds either one object or a one-element list."""
        payload = await self._get(
            PRODUCTS_PATHS[SneakerSource.GOAT],
            {
                "slugs": slug,
                "limit": 1,
                "display[variants]": "true",
                "currency": "USD",
            },
        )
        items = self._list_data(payload)
        return items[0] if items and items[0] else None

    async def get_product(self, source: SneakerSource, slug: str) -> Optional[dict]:
        if SneakerSource(source) is SneakerSource.STOCKX:
            return await self.get_stockx_product(slug)
        return await self.get_goat_product(slug)
