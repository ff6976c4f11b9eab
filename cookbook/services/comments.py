"""Service helpers for listing, creating, editing and deleting comments."""

import logging
from dataclasses import dataclass
from typing import List

from django.core.exceptions import PermissionDenied, ValidationError
from django.shortcuts import get_object_or_404

from cookbook.models import Comment
from cookbook.repos import CommentRepo
from cookbook.validators import validate_comment_content
from .ownership import actor_id_of, require_owner
from .profiles import AuthorInfo, ProfileService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommentWithAuthor:
    comment: Comment
    author: AuthorInfo


class CommentService:
    """Encapsulate comment CRUD for recipes.

    Content is validated before any query runs; edits and deletes check
    existence first (404) and ownership second (403).
    """

    def __init__(
        self,
        *,
        comment_repo: CommentRepo | None = None,
        profile_service: ProfileService | None = None,
    ) -> None:
        self.comment_repo = comment_repo or CommentRepo()
        self.profile_service = profile_service or ProfileService()

    def fetch(self, comment_id) -> Comment:
        """Fetch a comment by id or raise 404."""
        return get_object_or_404(Comment, id=comment_id)

    def list_for_recipe(self, recipe) -> List[CommentWithAuthor]:
        """Top-level comments of a recipe, newest first, with their authors."""
        comments = list(self.comment_repo.top_level_for_recipe(recipe.id))
        authors = self.profile_service.authors_for(c.user_id for c in comments)
        return [CommentWithAuthor(c, authors[c.user_id]) for c in comments]

    def with_author(self, comment) -> CommentWithAuthor:
        """Pair a single comment with its author display info."""
        return CommentWithAuthor(comment, self.profile_service.author_for(comment.user_id))

    def create_comment(self, actor, recipe, content, parent_id=None) -> Comment:
        """Create a comment by actor on recipe, optionally as a reply."""
        content = validate_comment_content(content)
        actor_id = actor_id_of(actor)
        if actor_id is None:
            raise PermissionDenied("You must be signed in to comment.")
        if parent_id and not self.comment_repo.exists(id=parent_id, recipe_id=recipe.id):
            raise ValidationError({"parent_id": ["Parent comment not found on this recipe."]})
        return self.comment_repo.create(
            recipe_id=recipe.id,
            user_id=actor_id,
            content=content,
            parent_id=parent_id or None,
        )

    def edit_comment(self, actor, comment_id, content) -> Comment:
        """Replace the content of actor's comment and flag it as edited."""
        content = validate_comment_content(content)
        comment = self.fetch(comment_id)
        require_owner(actor, comment.user_id, action="edit this comment")
        comment.content = content
        comment.is_edited = True
        comment.save(update_fields=["content", "is_edited", "updated_at"])
        return comment

    def delete_comment(self, actor, comment_id):
        """Delete actor's comment outright and return its recipe id.

        Replies are left in place.
        """
        comment = self.fetch(comment_id)
        require_owner(actor, comment.user_id, action="delete this comment")
        recipe_id = comment.recipe_id
        comment.delete()
        logger.info("Comment %s deleted by user %s", comment_id, comment.user_id)
        return recipe_id
