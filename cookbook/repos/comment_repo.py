"""Repository helpers for comments."""

from typing import Dict, Iterable

from django.db.models import Count, QuerySet

from cookbook.db_accessor import DB_Accessor
from cookbook.models.comment import Comment


class CommentRepo(DB_Accessor):
    """Repository for Comment queries; only top-level comments are surfaced."""
    def __init__(self) -> None:
        """Initialise with the Comment model."""
        super().__init__(Comment)

    def top_level_for_recipe(self, recipe_id) -> QuerySet:
        """Return top-level comments of a recipe, newest first."""
        return self.list(
            filters={"recipe_id": recipe_id, "parent__isnull": True},
            order_by=("-created_at",),
        )

    def top_level_counts_by_recipe(self, recipe_ids: Iterable) -> Dict:
        """Return {recipe_id: top-level comment count} for recipes with comments."""
        rows = (
            self.model.objects.filter(recipe_id__in=list(recipe_ids), parent__isnull=True)
            .values("recipe_id")
            .annotate(total=Count("id"))
            .order_by()
        )
        return {row["recipe_id"]: row["total"] for row in rows}
