from fastapi import APIRouter
from solesociety.api.routes import products, search, users

api_router = APIRouter()

api_router.include_router(products.router, tags=["products"])
api_router.include_router(search.router, tags=["search"])
api_router.include_router(users.auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
