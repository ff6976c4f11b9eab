"""Repository helpers for fetching recipes."""

from typing import Optional, Sequence
from django.db.models import QuerySet
from cookbook.db_accessor import DB_Accessor
from cookbook.models.recipe import Recipe


class RecipeRepo(DB_Accessor):
    """Repository for Recipe queries (shared feed and per-owner lists)."""
    def __init__(self) -> None:
        """Initialise with the Recipe model."""
        super().__init__(Recipe)

    def list_for_feed(
        self,
        *,
        owner_id: Optional[int] = None,
        order_by: Sequence[str] = ("-created_at",),
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> QuerySet:
        """Return recipes for the feed, newest first, optionally for one owner."""
        filters = {"owner_id": owner_id} if owner_id is not None else None
        qs = self.list(
            filters=filters,
            order_by=order_by,
            limit=limit,
            offset=offset,
        )
        return qs.select_related("owner")
