"""Repository helpers for likes."""

from typing import Dict, Iterable, Set

from django.db.models import Count

from cookbook.db_accessor import DB_Accessor
from cookbook.models.like import Like


class LikeRepo(DB_Accessor):
    """Repository for Like queries and grouped counts."""
    def __init__(self) -> None:
        """Initialise with the Like model."""
        super().__init__(Like)

    def counts_by_recipe(self, recipe_ids: Iterable) -> Dict:
        """Return {recipe_id: like count} for recipes with at least one like."""
        rows = (
            self.model.objects.filter(recipe_id__in=list(recipe_ids))
            .values("recipe_id")
            .annotate(total=Count("id"))
            .order_by()
        )
        return {row["recipe_id"]: row["total"] for row in rows}

    def liked_recipe_ids(self, user_id: int, recipe_ids: Iterable) -> Set:
        """Return the subset of recipe_ids the user has liked."""
        return set(
            self.model.objects.filter(user_id=user_id, recipe_id__in=list(recipe_ids))
            .values_list("recipe_id", flat=True)
        )
