from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from cookbook.models import Comment, Like, Profile, Recipe, User


admin.site.register(User, UserAdmin)


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    """Admin configuration for public profiles."""
    list_display = ('username', 'display_name', 'user', 'created_at')
    search_fields = ('username', 'display_name', 'user__username', 'user__email')


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    """Admin configuration for recipes with social counts."""
    list_display = ('title', 'owner', 'difficulty', 'duration_min', 'created_at', 'like_count_display')
    list_filter = ('difficulty', 'created_at')
    search_fields = ('title', 'owner__username')

    def like_count_display(self, obj):
        """Return the number of likes on the recipe."""
        return obj.likes.count()
    like_count_display.short_description = "Likes"


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    """Admin configuration for comments."""
    list_display = ('short_content', 'user', 'recipe', 'is_edited', 'created_at')
    list_filter = ('is_edited', 'created_at')
    search_fields = ('content', 'user__username')

    def short_content(self, obj):
        """Shorten comment content for list display."""
        return obj.content[:50] + "..." if len(obj.content) > 50 else obj.content


@admin.register(Like)
class LikeAdmin(admin.ModelAdmin):
    """Admin configuration for likes."""
    list_display = ('user', 'recipe', 'created_at')
