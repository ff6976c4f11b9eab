from .ownership import can_mutate, require_owner
from .social import SocialCounterAggregator, SocialCounts
from .profiles import AuthorInfo, ProfileService, UNKNOWN_AUTHOR
from .feed import FeedEntry, FeedService, SearchFilters
from .likes import LikeService
from .comments import CommentService, CommentWithAuthor
from .recipes import RecipeService

__all__ = [
    "can_mutate",
    "require_owner",
    "SocialCounterAggregator",
    "SocialCounts",
    "AuthorInfo",
    "ProfileService",
    "UNKNOWN_AUTHOR",
    "FeedEntry",
    "FeedService",
    "SearchFilters",
    "LikeService",
    "CommentService",
    "CommentWithAuthor",
    "RecipeService",
]
