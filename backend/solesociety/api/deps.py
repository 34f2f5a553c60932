from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from solesociety.core.database import get_db
from solesociety.services.kicks_client import KicksClient
from solesociety.services.product_lookup import ProductService
from solesociety.services.search import SearchService
from solesociety.services.users import UserRepository


def get_kicks_client(request: Request) -> KicksClient:
    """Shared client created in the app lifespan."""
    return request.app.state.kicks_client


def get_search_service(client: KicksClient = Depends(get_kicks_client)) -> SearchService:
    return SearchService(client)


def get_product_service(client: KicksClient = Depends(get_kicks_client)) -> ProductService:
    return ProductService(client)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)
