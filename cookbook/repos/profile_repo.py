"""Repository helpers for profile lookups."""

from typing import Any, Dict, Iterable, List, Optional

from cookbook.db_accessor import DB_Accessor
from cookbook.models.profile import Profile


class ProfileRepo(DB_Accessor):
    """Repository for Profile queries."""
    def __init__(self) -> None:
        """Initialise with the Profile model."""
        super().__init__(Profile)

    def display_rows_for(self, user_ids: Iterable[int]) -> List[Dict[str, Any]]:
        """Return user_id/username/display_name rows for the given users in one query."""
        ids = list(user_ids)
        if not ids:
            return []
        return list(
            self.model.objects.filter(user_id__in=ids).values("user_id", "username", "display_name")
        )

    def for_user(self, user_id: int) -> Optional[Profile]:
        """Return the profile of a user, or None when not created yet."""
        return self.first(user_id=user_id)

    def username_taken(self, username: str, *, exclude_user_id: Optional[int] = None) -> bool:
        """Return True when another user already holds the username."""
        qs = self.model.objects.filter(username__iexact=username)
        if exclude_user_id is not None:
            qs = qs.exclude(user_id=exclude_user_id)
        return qs.exists()
