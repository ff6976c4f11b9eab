"""Ownership checks gating edits and deletes of owner-scoped records."""

import logging

from django.core.exceptions import PermissionDenied

logger = logging.getLogger(__name__)


def actor_id_of(actor):
    """Return the primary key of an authenticated actor, else None."""
    if actor is None or not getattr(actor, "is_authenticated", False):
        return None
    return actor.pk


def can_mutate(actor_id, owner_id) -> bool:
    """Return True only when a known actor is the owner."""
    return actor_id is not None and actor_id == owner_id


def require_owner(actor, owner_id, *, action="modify this item"):
    """Raise PermissionDenied unless actor owns the record."""
    actor_id = actor_id_of(actor)
    if can_mutate(actor_id, owner_id):
        return
    logger.info("Refused %s: actor=%s owner=%s", action, actor_id, owner_id)
    raise PermissionDenied(f"You are not allowed to {action}.")
