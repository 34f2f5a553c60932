from solesociety.models.user import User, AppState

__all__ = [
    "User",
    "AppState",
]
