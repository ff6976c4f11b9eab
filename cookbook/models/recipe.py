"""
Recipe model.

A recipe is owned by the user who uploaded it:
- `ingredients` and `instructions` are ordered JSON string arrays; the
  upload/edit flow never stores a blank entry or an empty list.
- `image` is an optional stored object under `recipes/<owner uid>/`.
- `duration_min` and `difficulty` are optional and drive the feed filters.
Likes and comments cascade with the recipe; the stored image is removed by
RecipeService.delete_recipe.
"""

from django.db import models

from cookbook.utils.uuid import uuid7_or_4
from .user import User


class Recipe(models.Model):
    DIFFICULTY_EASY = "Easy"
    DIFFICULTY_MEDIUM = "Medium"
    DIFFICULTY_HARD = "Hard"

    DIFFICULTY_CHOICES = [
        (DIFFICULTY_EASY, "Easy"),
        (DIFFICULTY_MEDIUM, "Medium"),
        (DIFFICULTY_HARD, "Hard"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    owner = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='recipes',
        db_column='user_id'
    )

    title = models.CharField(max_length=255)
    description = models.TextField(max_length=4000, blank=True, null=True)

    ingredients = models.JSONField(default=list)
    instructions = models.JSONField(default=list)

    image = models.ImageField(upload_to="recipes/", max_length=500, blank=True, null=True)

    duration_min = models.PositiveIntegerField(blank=True, null=True)
    difficulty = models.CharField(
        max_length=10,
        choices=DIFFICULTY_CHOICES,
        blank=True,
        null=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'recipe'
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    @property
    def image_url(self):
        """Public URL of the stored image, or None."""
        if not self.image:
            return None
        try:
            return self.image.url
        except ValueError:
            return None
