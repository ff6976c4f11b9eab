from .user import User
from .profile import Profile
from .recipe import Recipe
from .like import Like
from .comment import Comment

__all__ = [
    "User",
    "Profile",
    "Recipe",
    "Like",
    "Comment",
]
