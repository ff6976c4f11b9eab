"""Service helpers for recipe upload, edit and delete."""

import logging
import os

from django.core.exceptions import PermissionDenied, ValidationError
from django.db import DatabaseError, transaction
from django.shortcuts import get_object_or_404
from django.utils import timezone

from cookbook.models import Recipe
from cookbook.validators import clean_lines
from .ownership import actor_id_of, require_owner

logger = logging.getLogger(__name__)

DIFFICULTY_VALUES = {value for value, _ in Recipe.DIFFICULTY_CHOICES}


class RecipeService:
    """Encapsulate the recipe lifecycle and its stored image."""

    def fetch(self, recipe_id) -> Recipe:
        """Fetch a recipe by id or raise 404."""
        return get_object_or_404(Recipe, id=recipe_id)

    # --- validation ------------------------------------------------------
    def clean_data(self, data):
        """Return normalised recipe fields or raise ValidationError keyed by field."""
        errors = {}
        title = (data.get("title") or "").strip()
        if not title:
            errors["title"] = ["Recipe title is required."]

        ingredients = clean_lines(data.get("ingredients"))
        if not ingredients:
            errors["ingredients"] = ["At least one ingredient is required."]

        instructions = clean_lines(data.get("instructions"))
        if not instructions:
            errors["instructions"] = ["At least one instruction is required."]

        difficulty = data.get("difficulty") or None
        if difficulty is not None and difficulty not in DIFFICULTY_VALUES:
            errors["difficulty"] = ["Difficulty must be Easy, Medium or Hard."]

        duration_min = self._clean_duration(data.get("duration_min"), errors)

        if errors:
            raise ValidationError(errors)
        return {
            "title": title,
            "description": (data.get("description") or "").strip() or None,
            "ingredients": ingredients,
            "instructions": instructions,
            "duration_min": duration_min,
            "difficulty": difficulty,
        }

    def _current_data(self, recipe):
        return {
            "title": recipe.title,
            "description": recipe.description,
            "ingredients": recipe.ingredients,
            "instructions": recipe.instructions,
            "duration_min": recipe.duration_min,
            "difficulty": recipe.difficulty,
        }

    def _clean_duration(self, value, errors):
        if value is None or value == "":
            return None
        try:
            minutes = int(value)
        except (TypeError, ValueError):
            errors["duration_min"] = ["Duration must be a whole number of minutes."]
            return None
        if minutes <= 0:
            errors["duration_min"] = ["Duration must be a positive number of minutes."]
            return None
        return minutes

    # --- lifecycle -------------------------------------------------------
    @transaction.atomic
    def create_recipe(self, actor, data, image=None) -> Recipe:
        """Create a recipe owned by actor, storing the optional image."""
        cleaned = self.clean_data(data)
        owner_id = actor_id_of(actor)
        if owner_id is None:
            raise PermissionDenied("You must be signed in to upload recipes.")
        recipe = Recipe(owner_id=owner_id, **cleaned)
        if image:
            self._save_with_image(recipe, actor, image)
        else:
            recipe.save()
        logger.info("Recipe %s created by user %s", recipe.id, owner_id)
        return recipe

    @transaction.atomic
    def update_recipe(self, actor, recipe_id, data, image=None, partial=False) -> Recipe:
        """Apply an owner edit; a new image replaces and removes the old one.

        With partial=True, fields missing from data keep their current values.
        The old image is only removed once the edit has committed.
        """
        recipe = self.fetch(recipe_id)
        require_owner(actor, recipe.owner_id, action="edit this recipe")
        if partial:
            data = {**self._current_data(recipe), **data}
        cleaned = self.clean_data(data)
        for field_name, value in cleaned.items():
            setattr(recipe, field_name, value)

        if not image:
            recipe.save()
            return recipe

        old_image_name = recipe.image.name if recipe.image else None
        self._save_with_image(recipe, actor, image)
        if old_image_name and old_image_name != recipe.image.name:
            self._delete_after_commit(recipe.image.storage, old_image_name)
        return recipe

    @transaction.atomic
    def delete_recipe(self, actor, recipe_id):
        """Delete an owner's recipe, then its stored image once the delete commits."""
        recipe = self.fetch(recipe_id)
        require_owner(actor, recipe.owner_id, action="delete this recipe")
        image_name = recipe.image.name if recipe.image else None
        storage = recipe.image.storage
        recipe.delete()
        if image_name:
            self._delete_after_commit(storage, image_name)
        logger.info("Recipe %s deleted by user %s", recipe_id, actor.pk)

    # --- storage helpers -------------------------------------------------
    def image_name_for(self, actor, upload) -> str:
        """Storage name '<owner uid>/<timestamp ms>.<ext>' under the recipes/ prefix."""
        _, ext = os.path.splitext(getattr(upload, "name", "") or "")
        stamp = int(timezone.now().timestamp() * 1000)
        return f"{actor.uid}/{stamp}{ext.lower() or '.jpg'}"

    def _save_with_image(self, recipe, actor, image):
        """Store the upload, then the row; the stored file is removed if the row write fails."""
        recipe.image.save(self.image_name_for(actor, image), image, save=False)
        storage, name = recipe.image.storage, recipe.image.name
        try:
            recipe.save()
        except DatabaseError:
            self._delete_stored_image(storage, name)
            raise

    def _delete_after_commit(self, storage, name):
        transaction.on_commit(lambda: self._delete_stored_image(storage, name))

    def _delete_stored_image(self, storage, name):
        try:
            storage.delete(name)
        except OSError as exc:
            logger.error("Failed to delete stored image %s: %s", name, exc)
