"""Model representing a user's like on a recipe."""

from django.db import models
from .user import User
from .recipe import Recipe

class Like(models.Model):
    """User like on a recipe; existence means liked."""
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='likes'
    )

    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='likes'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Enforce one like per user/recipe pair."""
        db_table = "recipe_like"
        constraints = [
            models.UniqueConstraint(fields=['user', 'recipe'], name='unique_like_per_user_recipe'),
        ]

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} → {self.recipe_id}"
