"""Like toggle for recipes."""

import logging

from django.core.exceptions import PermissionDenied
from django.db import IntegrityError, transaction

from cookbook.repos import LikeRepo
from .ownership import actor_id_of

logger = logging.getLogger(__name__)


class LikeService:
    """Check-then-invert toggle over the (user, recipe) like relation."""

    def __init__(self, *, like_repo: LikeRepo | None = None) -> None:
        self.like_repo = like_repo or LikeRepo()

    def is_liked(self, actor, recipe) -> bool:
        """Return True when the actor currently likes the recipe."""
        actor_id = actor_id_of(actor)
        if actor_id is None:
            return False
        return self.like_repo.exists(user_id=actor_id, recipe_id=recipe.id)

    def toggle(self, actor, recipe) -> bool:
        """Like or unlike the recipe for actor; return the new liked state.

        A concurrent toggle can make the insert hit the uniqueness
        constraint. If the like is there on a second look the result is
        still liked; any other integrity failure propagates.
        """
        actor_id = actor_id_of(actor)
        if actor_id is None:
            raise PermissionDenied("You must be signed in to like recipes.")

        if self.like_repo.exists(user_id=actor_id, recipe_id=recipe.id):
            self.like_repo.delete(user_id=actor_id, recipe_id=recipe.id)
            return False

        try:
            with transaction.atomic():
                self.like_repo.create(user_id=actor_id, recipe_id=recipe.id)
        except IntegrityError:
            if not self.like_repo.exists(user_id=actor_id, recipe_id=recipe.id):
                raise
            logger.info("Duplicate like for user=%s recipe=%s treated as liked", actor_id, recipe.id)
        return True

    def like_count(self, recipe) -> int:
        """Return the current number of likes on the recipe."""
        return self.like_repo.model.objects.filter(recipe_id=recipe.id).count()
