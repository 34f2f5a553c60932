"""
Local user store: registration, login, likes and shoe size.

Usernames are unique case-insensitively. The "current user" pointer is kept
in the app_state table so it survives restarts.
"""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from solesociety.core.security import get_password_hash, verify_password
from solesociety.models import AppState, User

logger = logging.getLogger(__name__)

CURRENT_USER_KEY = "current_user_id"

DEMO_USERNAME = "demo"
DEMO_PASSWORD = "password"
DEMO_LIKED_STYLE_IDS = ["FY2903", "FY4176"]


class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user(self, user_id: str) -> Optional[User]:
        return await self.db.get(User, user_id)

    async def get_by_username(self, username: str) -> Optional[User]:
        result = await self.db.execute(
            select(User).where(func.lower(User.username) == username.lower())
        )
        return result.scalar_one_or_none()

    async def count_users(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(User))
        return result.scalar_one()

    async def create_user(self, username: str, password: str) -> Optional[User]:
        """Create a user; None if the username is already taken."""
        if await self.get_by_username(username):
            return None

        user = User(
            username=username,
            password_hash=get_password_hash(password),
            liked_style_ids=[],
        )
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        logger.info(f"Registered user {user.username} ({user.id})")
        return user

    async def authenticate(self, username: str, password: str) -> Optional[User]:
        user = await self.get_by_username(username)
        if not user or not verify_password(password, user.password_hash):
            return None
        return user

    # Current user pointer

    async def set_current_user(self, user: User) -> None:
        state = await self.db.get(AppState, CURRENT_USER_KEY)
        if state is None:
            self.db.add(AppState(key=CURRENT_USER_KEY, value=user.id))
        else:
            state.value = user.id
        await self.db.commit()

    async def get_current_user(self) -> Optional[User]:
        state = await self.db.get(AppState, CURRENT_USER_KEY)
        if state is None or not state.value:
            return None
        return await self.get_user(state.value)

    async def clear_current_user(self) -> None:
        state = await self.db.get(AppState, CURRENT_USER_KEY)
        if state is not None:
            await self.db.delete(state)
            await self.db.commit()

    # Likes

    async def toggle_like(self, user_id: str, style_id: str) -> Optional[bool]:
        """Flip the like for style_id. Returns the new state, None for an unknown user."""
        user = await self.get_user(user_id)
        if user is None:
            return None

        liked = list(user.liked_style_ids or [])
        if style_id in liked:
            liked = [s for s in liked if s != style_id]
        else:
            liked.append(style_id)

        user.liked_style_ids = liked
        await self.db.commit()
        return style_id in liked

    async def is_liked(self, user_id: str, style_id: str) -> bool:
        user = await self.get_user(user_id)
        if user is None:
            return False
        return style_id in (user.liked_style_ids or [])

    async def get_liked_style_ids(self, user_id: str) -> list[str]:
        user = await self.get_user(user_id)
        if user is None:
            return []
        return list(user.liked_style_ids or [])

    async def update_shoe_size(self, user_id: str, shoe_size: Optional[str]) -> Optional[User]:
        user = await self.get_user(user_id)
        if user is None:
            return None
        user.shoe_size = shoe_size or None
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def seed_demo_user(self) -> Optional[User]:
        """Create the demo account on an empty store."""
        if await self.count_users() > 0:
            return None
        user = await self.create_user(DEMO_USERNAME, DEMO_PASSWORD)
        if user is not None:
            user.liked_style_ids = list(DEMO_LIKED_STYLE_IDS)
            await self.db.commit()
        return user
