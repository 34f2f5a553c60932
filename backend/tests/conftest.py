from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from solesociety.core.database import init_db
from solesociety.services.kicks_client import KicksClient
from solesociety.services.users import UserRepository

Handler = Callable[[httpx.Request], httpx.Response]


def stockx_payload(**overrides: Any) -> dict:
    payload = {
        "id": "b6f1c1f3-stockx",
        "slug": "air-jordan-1-retro-high-og-chicago-2022",
        "title": "Jordan 1 Retro High OG Chicago Lost and Found",
        "brand": "Jordan",
        "category": "Air Jordan 1",
        "product_type": "sneakers",
        "gallery": ["https://img.example/aj1-1.png", "https://img.example/aj1-2.png"],
        "image": "https://img.example/aj1.png",
        "link": "https://stockx.com/air-jordan-1-retro-high-og-chicago-2022",
        "min_price": 280.0,
        "max_price": 611.0,
        "avg_price": 344.6,
        "description": "Lost and Found.",
    }
    payload.update(overrides)
    return payload


def goat_payload(**overrides: Any) -> dict:
    payload = {
        "id": 1017393,
        "slug": "air-jordan-1-retro-high-og-dz5485-612",
        "name": "Air Jordan 1 Retro High OG 'Chicago Lost & Found'",
        "brand": "Air Jordan",
        "colorway": "Varsity Red/Black/Sail/Muslin",
        "images": ["https://img.example/goat-aj1.png"],
        "image_url": "https://img.example/goat-aj1-small.png",
        "retail_prices": {"USD": "180"},
        "release_date": "2022-11-19",
        "link": "https://www.goat.com/sneakers/air-jordan-1-retro-high-og-dz5485-612",
        "variants": [
            {"size": "9", "lowest_ask": 100, "available": True},
            {"size": "10", "lowest_ask": 150.0, "available": True},
        ],
    }
    payload.update(overrides)
    return payload


def make_client(handler: Handler, **kwargs: Any) -> KicksClient:
    return KicksClient(
        api_key="KICKS-test-key",
        base_url="https://api.kicks.test",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


@pytest.fixture()
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture()
def session_maker(tmp_path: Path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'users.sqlite3'}", poolclass=NullPool)
    asyncio.run(init_db(engine))
    try:
        yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    finally:
        asyncio.run(engine.dispose())


@pytest.fixture()
def run_repo(session_maker):
    """Run `fn(repo)` against a fresh session and return its result."""

    def runner(fn):
        async def _go():
            async with session_maker() as session:
                return await fn(UserRepository(session))

        return asyncio.run(_go())

    return runner
