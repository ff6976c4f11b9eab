"""Social counters (likes, comments, liked-by-actor) for a set of recipes."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, TypeVar

from django.db import DatabaseError

from cookbook.repos import CommentRepo, LikeRepo
from .ownership import actor_id_of

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SocialCounts:
    like_count: int = 0
    comment_count: int = 0
    is_liked_by_user: bool = False


class SocialCounterAggregator:
    """Reconcile like counts, top-level comment counts and the actor's likes by recipe id.

    Each of the three lookups is one grouped query over the whole id set. A
    lookup that fails is logged and replaced by its empty result, so the
    other values still come back.
    """

    def __init__(self, *, like_repo: LikeRepo | None = None, comment_repo: CommentRepo | None = None) -> None:
        self.like_repo = like_repo or LikeRepo()
        self.comment_repo = comment_repo or CommentRepo()

    def counts_for(self, recipe_ids: Iterable, actor=None) -> Dict:
        """Return {recipe_id: SocialCounts} for every requested id."""
        ids = list(dict.fromkeys(recipe_ids))
        if not ids:
            return {}

        like_counts = self._degrade(lambda: self.like_repo.counts_by_recipe(ids), {}, "like counts")
        comment_counts = self._degrade(
            lambda: self.comment_repo.top_level_counts_by_recipe(ids), {}, "comment counts"
        )
        liked_ids = set()
        actor_id = actor_id_of(actor)
        if actor_id is not None:
            liked_ids = self._degrade(
                lambda: self.like_repo.liked_recipe_ids(actor_id, ids), set(), "liked recipes"
            )

        return {
            recipe_id: SocialCounts(
                like_count=like_counts.get(recipe_id, 0),
                comment_count=comment_counts.get(recipe_id, 0),
                is_liked_by_user=recipe_id in liked_ids,
            )
            for recipe_id in ids
        }

    def _degrade(self, query: Callable[[], T], default: T, label: str) -> T:
        try:
            return query()
        except DatabaseError as exc:
            logger.error("Failed to load %s, using defaults: %s", label, exc)
            return default
