"""Public profile attached 1:1 to a principal."""

from django.core.validators import MaxLengthValidator
from django.db import models

from cookbook.utils.uuid import uuid7_or_4
from cookbook.validators import USERNAME_MAX_LENGTH, validate_username
from .user import User


class Profile(models.Model):
    """Displayable identity of a user: handle, name and links."""

    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    user = models.OneToOneField(
        User,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='profile',
    )

    # stored lowercase, see ProfileService.save_profile
    username = models.CharField(
        max_length=USERNAME_MAX_LENGTH,
        unique=True,
        validators=[validate_username],
    )
    display_name = models.CharField(max_length=100, blank=True, null=True)
    bio = models.TextField(
        max_length=500,
        blank=True,
        null=True,
        validators=[MaxLengthValidator(500)],
    )
    location = models.CharField(max_length=100, blank=True, null=True)
    website = models.URLField(max_length=500, blank=True, null=True)

    # platform name -> URL
    social_links = models.JSONField(default=dict, blank=True)

    avatar = models.ImageField(upload_to="avatars/", blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """DB table name for profiles."""
        db_table = "profile"

    def __str__(self):
        return f"@{self.username}"

    @property
    def initials(self):
        """Up to two uppercase initials from the display name or username."""
        name = self.display_name or self.username
        if not name:
            return "?"
        return "".join(word[0] for word in name.split() if word).upper()[:2]

    @property
    def avatar_url(self):
        """Uploaded avatar URL, falling back to the principal's gravatar."""
        if self.avatar:
            try:
                return self.avatar.url
            except ValueError:
                pass
        return self.user.gravatar(size=200)
