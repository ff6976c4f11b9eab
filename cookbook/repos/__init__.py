from .recipe_repo import RecipeRepo
from .profile_repo import ProfileRepo
from .like_repo import LikeRepo
from .comment_repo import CommentRepo

__all__ = ["RecipeRepo", "ProfileRepo", "LikeRepo", "CommentRepo"]
