from fastapi import APIRouter, Depends, HTTPException, status
from solesociety.api.deps import get_product_service, get_user_repository
from solesociety.models import User
from solesociety.schemas.sneaker import ProductListResponse
from solesociety.schemas.user import (
    LikedStyleIDsResponse,
    LikeStatusResponse,
    LoginRequest,
    RegisterRequest,
    ShoeSizeUpdate,
    UserResponse,
)
from solesociety.services.product_lookup import ProductService
from solesociety.services.users import UserRepository

auth_router = APIRouter()
router = APIRouter()


def _user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        liked_style_ids=list(user.liked_style_ids or []),
        shoe_size=user.shoe_size,
    )


async def _require_user(user_id: str, repo: UserRepository) -> User:
    user = await repo.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user


# Auth endpoints
@auth_router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    repo: UserRepository = Depends(get_user_repository),
):
    """Create an account and make it the current user."""
    user = await repo.create_user(request.username, request.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already taken",
        )
    await repo.set_current_user(user)
    return _user_response(user)


@auth_router.post("/login", response_model=UserResponse)
async def login(
    request: LoginRequest,
    repo: UserRepository = Depends(get_user_repository),
):
    user = await repo.authenticate(request.username, request.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )
    await repo.set_current_user(user)
    return _user_response(user)


@auth_router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(repo: UserRepository = Depends(get_user_repository)):
    await repo.clear_current_user()


@auth_router.get("/me", response_model=UserResponse)
async def current_user(repo: UserRepository = Depends(get_user_repository)):
    user = await repo.get_current_user()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in",
        )
    return _user_response(user)


# Likes and preferences
@router.get("/{user_id}/likes", response_model=LikedStyleIDsResponse)
async def list_likes(
    user_id: str,
    repo: UserRepository = Depends(get_user_repository),
):
    await _require_user(user_id, repo)
    return LikedStyleIDsResponse(data=await repo.get_liked_style_ids(user_id))


@router.get("/{user_id}/likes/{style_id}", response_model=LikeStatusResponse)
async def like_status(
    user_id: str,
    style_id: str,
    repo: UserRepository = Depends(get_user_repository),
):
    await _require_user(user_id, repo)
    return LikeStatusResponse(style_id=style_id, liked=await repo.is_liked(user_id, style_id))


@router.post("/{user_id}/likes/{style_id}", response_model=LikeStatusResponse)
async def toggle_like(
    user_id: str,
    style_id: str,
    repo: UserRepository = Depends(get_user_repository),
):
    """Like or unlike a sneaker by styleID."""
    liked = await repo.toggle_like(user_id, style_id)
    if liked is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return LikeStatusResponse(style_id=style_id, liked=liked)


@router.get("/{user_id}/liked-sneakers", response_model=ProductListResponse)
async def liked_sneakers(
    user_id: str,
    repo: UserRepository = Depends(get_user_repository),
    products: ProductService = Depends(get_product_service),
):
    """Full details for every liked sneaker that could be loaded."""
    await _require_user(user_id, repo)
    style_ids = await repo.get_liked_style_ids(user_id)
    return ProductListResponse(data=await products.get_liked_sneakers(style_ids))


@router.put("/{user_id}/shoe-size", response_model=UserResponse)
async def update_shoe_size(
    user_id: str,
    request: ShoeSizeUpdate,
    repo: UserRepository = Depends(get_user_repository),
):
    user = await repo.update_shoe_size(user_id, request.shoe_size)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return _user_response(user)
