from datetime import timedelta

from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone

from cookbook.models import Comment, Profile, Recipe, User

# 1x1 transparent GIF, enough for Pillow to verify as an image
TINY_GIF = (
    b"GIF89a\x01\x00\x01\x00\x80\x00\x00\x00\x00\x00\xff\xff\xff!\xf9\x04"
    b"\x01\x00\x00\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"
)


def make_user(uid="uid_alice", **kwargs):
    """Create a principal mirror row, as FirebaseAuthentication would."""
    email = kwargs.pop("email", f"{uid}@example.org")
    user = User.objects.create_user(username=uid, email=email, **kwargs)
    return user


def make_profile(user, username=None, **kwargs):
    return Profile.objects.create(
        user=user,
        username=username or user.username.replace("uid_", "")[:20],
        **kwargs,
    )


def make_recipe(owner, **kwargs):
    """Create a recipe; ``created_ago`` shifts created_at back by that many minutes."""
    created_ago = kwargs.pop("created_ago", None)
    data = {
        "title": "Tomato Pasta",
        "description": "Quick weeknight pasta.",
        "ingredients": ["250g pasta", "400g tomatoes"],
        "instructions": ["Boil pasta", "Add sauce"],
        "duration_min": 20,
        "difficulty": Recipe.DIFFICULTY_EASY,
    }
    data.update(kwargs)
    recipe = Recipe.objects.create(owner=owner, **data)
    if created_ago is not None:
        Recipe.objects.filter(pk=recipe.pk).update(
            created_at=timezone.now() - timedelta(minutes=created_ago)
        )
        recipe.refresh_from_db()
    return recipe


def make_comment(recipe, user, content="Looks great", **kwargs):
    return Comment.objects.create(recipe=recipe, user=user, content=content, **kwargs)


def make_image(name="dish.gif"):
    return SimpleUploadedFile(name, TINY_GIF, content_type="image/gif")
