from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from cookbook.models import Recipe
from cookbook.utils.formatting import format_duration, truncate_text
from cookbook.validators import validate_comment_content


class FeedEntrySerializer(serializers.Serializer):
    """Read-only shape of a feed entry: recipe fields, counters and author."""
    id = serializers.UUIDField(source="recipe.id")
    user_id = serializers.IntegerField(source="recipe.owner_id")
    title = serializers.CharField(source="recipe.title")
    description = serializers.CharField(source="recipe.description", allow_null=True)
    summary = serializers.SerializerMethodField()
    ingredients = serializers.ListField(source="recipe.ingredients", child=serializers.CharField())
    instructions = serializers.ListField(source="recipe.instructions", child=serializers.CharField())
    image_url = serializers.CharField(source="recipe.image_url", allow_null=True)
    duration_min = serializers.IntegerField(source="recipe.duration_min", allow_null=True)
    duration_display = serializers.SerializerMethodField()
    difficulty = serializers.CharField(source="recipe.difficulty", allow_null=True)
    created_at = serializers.DateTimeField(source="recipe.created_at")
    updated_at = serializers.DateTimeField(source="recipe.updated_at")
    like_count = serializers.IntegerField()
    comment_count = serializers.IntegerField()
    is_liked_by_user = serializers.BooleanField()
    user_profile = serializers.SerializerMethodField()

    def get_summary(self, entry):
        return truncate_text(entry.recipe.description, 120)

    def get_duration_display(self, entry):
        return format_duration(entry.recipe.duration_min)

    def get_user_profile(self, entry):
        return entry.author.as_dict()


class RecipeWriteSerializer(serializers.Serializer):
    """Parses upload/edit input; RecipeService applies the content rules."""
    title = serializers.CharField(allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    ingredients = serializers.ListField(child=serializers.CharField(allow_blank=True), allow_empty=True)
    instructions = serializers.ListField(child=serializers.CharField(allow_blank=True), allow_empty=True)
    duration_min = serializers.IntegerField(required=False, allow_null=True)
    difficulty = serializers.ChoiceField(
        choices=Recipe.DIFFICULTY_CHOICES,
        required=False,
        allow_blank=True,
        allow_null=True,
    )
    image = serializers.ImageField(required=False, allow_null=True)


class CommentSerializer(serializers.Serializer):
    """Comment with its author's display info."""
    id = serializers.UUIDField(source="comment.id")
    recipe_id = serializers.UUIDField(source="comment.recipe_id")
    user_id = serializers.IntegerField(source="comment.user_id")
    content = serializers.CharField(source="comment.content")
    parent_id = serializers.UUIDField(source="comment.parent_id", allow_null=True)
    is_edited = serializers.BooleanField(source="comment.is_edited")
    created_at = serializers.DateTimeField(source="comment.created_at")
    updated_at = serializers.DateTimeField(source="comment.updated_at")
    user_profile = serializers.SerializerMethodField()

    def get_user_profile(self, item):
        return item.author.as_dict()


class CommentWriteSerializer(serializers.Serializer):
    """Parses comment input; length and blank checks live in validate_comment_content."""
    content = serializers.CharField(
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
    )
    parent_id = serializers.UUIDField(required=False, allow_null=True)

    def validate_content(self, value):
        try:
            return validate_comment_content(value)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages)


class ProfileSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    user_id = serializers.IntegerField()
    username = serializers.CharField()
    display_name = serializers.CharField(allow_null=True)
    bio = serializers.CharField(allow_null=True)
    location = serializers.CharField(allow_null=True)
    website = serializers.CharField(allow_null=True)
    social_links = serializers.DictField(child=serializers.CharField())
    avatar_url = serializers.CharField()
    initials = serializers.CharField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ProfileWriteSerializer(serializers.Serializer):
    """Parses profile input; ProfileService validates and normalises it."""
    username = serializers.CharField(allow_blank=True, trim_whitespace=False)
    display_name = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    bio = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    location = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    website = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    social_links = serializers.DictField(
        child=serializers.CharField(allow_blank=True, allow_null=True),
        required=False,
    )


class CredentialsSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False, min_length=6)
