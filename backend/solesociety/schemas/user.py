from typing import Optional
from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    username: str
    password: str


class UserResponse(BaseModel):
    id: str
    username: str
    liked_style_ids: list[str] = Field(default_factory=list, alias="likedStyleIDs")
    shoe_size: Optional[str] = Field(default=None, alias="shoeSize")

    class Config:
        from_attributes = True
        populate_by_name = True


class ShoeSizeUpdate(BaseModel):
    shoe_size: Optional[str] = Field(default=None, alias="shoeSize")

    class Config:
        populate_by_name = True


class LikeStatusResponse(BaseModel):
    style_id: str = Field(alias="styleID")
    liked: bool

    class Config:
        populate_by_name = True


class LikedStyleIDsResponse(BaseModel):
    data: list[str]
