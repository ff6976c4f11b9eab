"""Profile lookup, author display join and profile saving."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction
from django.http import Http404

from cookbook.models import Profile
from cookbook.repos import ProfileRepo
from cookbook.validators import normalise_profile_data, validate_profile_data
from .ownership import actor_id_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthorInfo:
    username: str
    display_name: Optional[str] = None

    def as_dict(self):
        return {"username": self.username, "display_name": self.display_name}


UNKNOWN_AUTHOR = AuthorInfo(username="Unknown", display_name=None)


class ProfileService:
    """Encapsulate profile reads and writes."""

    def __init__(self, *, profile_repo: ProfileRepo | None = None) -> None:
        self.profile_repo = profile_repo or ProfileRepo()

    # --- author join -----------------------------------------------------
    def authors_for(self, user_ids: Iterable) -> Dict:
        """Map each user id to its AuthorInfo using a single IN query.

        Ids without a profile map to UNKNOWN_AUTHOR.
        """
        ids = list(dict.fromkeys(user_ids))
        rows = self.profile_repo.display_rows_for(ids)
        by_user = {
            row["user_id"]: AuthorInfo(row["username"], row["display_name"])
            for row in rows
        }
        return {user_id: by_user.get(user_id, UNKNOWN_AUTHOR) for user_id in ids}

    def author_for(self, user_id) -> AuthorInfo:
        """Single-id form of authors_for."""
        return self.authors_for([user_id])[user_id]

    # --- lookups ---------------------------------------------------------
    def for_actor(self, actor) -> Optional[Profile]:
        """Return the actor's own profile, or None before the first save."""
        actor_id = actor_id_of(actor)
        if actor_id is None:
            return None
        return self.profile_repo.for_user(actor_id)

    def get_by_username(self, username: str) -> Profile:
        """Return the profile with this username (case-insensitive) or raise 404."""
        profile = self.profile_repo.first(username__iexact=(username or "").strip())
        if profile is None:
            raise Http404("Profile not found.")
        return profile

    # --- writes ----------------------------------------------------------
    @transaction.atomic
    def save_profile(self, actor, data) -> Profile:
        """Validate, normalise and upsert the actor's profile.

        The profile row is created on the first save.
        """
        actor_id = actor_id_of(actor)
        if actor_id is None:
            raise PermissionDenied("You must be signed in to edit a profile.")

        validate_profile_data(data)
        cleaned = normalise_profile_data(data)
        if self.profile_repo.username_taken(cleaned["username"], exclude_user_id=actor_id):
            raise ValidationError({"username": ["This username is already taken."]})

        profile, created = Profile.objects.update_or_create(user_id=actor_id, defaults=cleaned)
        if created:
            logger.info("Created profile @%s for user %s", profile.username, actor_id)
        return profile
