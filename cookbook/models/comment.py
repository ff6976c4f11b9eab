"""Model for user comments on recipes."""

from django.core.validators import MaxLengthValidator
from django.db import models

from cookbook.utils.uuid import uuid7_or_4
from cookbook.validators import COMMENT_MAX_LENGTH
from .user import User
from .recipe import Recipe

class Comment(models.Model):
    """User-authored comment on a recipe, optionally replying to another comment."""
    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='comments'
    )

    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='comments'
    )

    content = models.TextField(
        max_length=COMMENT_MAX_LENGTH,
        validators=[MaxLengthValidator(COMMENT_MAX_LENGTH)],
    )

    # Plain reference without a DB constraint: deleting a parent leaves its
    # replies in place with a dangling parent_id.
    parent = models.ForeignKey(
        'self',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        db_column='parent_id',
        related_name='replies',
        blank=True,
        null=True,
    )

    is_edited = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """DB table name for comments."""
        db_table = "comment"
        ordering = ['-created_at']

    def __str__(self):
        """Readable identifier for admin/debugging."""
        return f"Comment by {self.user_id} on {self.recipe_id}"
