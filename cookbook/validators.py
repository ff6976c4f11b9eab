"""Input validation shared by models, serializers and services.

Every check here runs before anything is written, so a failure never costs a
database round trip.
"""

from django.core.exceptions import ValidationError
from django.core.validators import (
    MaxLengthValidator,
    MinLengthValidator,
    RegexValidator,
    URLValidator,
)

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
USERNAME_VALIDATORS = [
    MinLengthValidator(
        USERNAME_MIN_LENGTH,
        message=f"Username must be at least {USERNAME_MIN_LENGTH} characters long",
    ),
    MaxLengthValidator(
        USERNAME_MAX_LENGTH,
        message=f"Username must be no more than {USERNAME_MAX_LENGTH} characters long",
    ),
    RegexValidator(
        regex=r"^[a-zA-Z0-9_]+$",
        message="Username can only contain letters, numbers, and underscores",
        code="invalid",
    ),
]

COMMENT_MAX_LENGTH = 1000

SOCIAL_PLATFORMS = ("twitter", "instagram", "facebook", "youtube")

_http_url = URLValidator(schemes=["http", "https"])


def validate_username(username):
    """Raise ValidationError unless username is 3-20 letters, digits or underscores."""
    if not username:
        raise ValidationError("Username is required", code="required")
    for validator in USERNAME_VALIDATORS:
        validator(username)


def validate_comment_content(content):
    """Return trimmed comment content, or raise ValidationError.

    The length limit applies to the content as submitted, before trimming.
    """
    content = "" if content is None else str(content)
    if not content.strip():
        raise ValidationError("Comment content is required", code="required")
    if len(content) > COMMENT_MAX_LENGTH:
        raise ValidationError(
            f"Comment is too long (max {COMMENT_MAX_LENGTH} characters)",
            code="max_length",
        )
    return content.strip()


def _is_http_url(value):
    try:
        _http_url(value)
    except ValidationError:
        return False
    return True


def validate_profile_data(data):
    """Validate raw profile input; raise ValidationError keyed by field.

    ``data`` is a mapping with ``username`` and the optional
    ``display_name``, ``website`` and ``social_links`` keys.
    """
    errors = {}

    try:
        validate_username(_strip(data.get("username")))
    except ValidationError as exc:
        errors["username"] = exc.messages

    display_name = data.get("display_name")
    if display_name is not None and display_name != "" and not display_name.strip():
        errors["display_name"] = ["Display name cannot be empty if provided"]

    website = _strip(data.get("website"))
    if website and not _is_http_url(website):
        errors["website"] = ["Please enter a valid URL"]

    for platform, url in (data.get("social_links") or {}).items():
        if platform not in SOCIAL_PLATFORMS:
            errors[f"social_links.{platform}"] = [f"Unsupported social platform: {platform}"]
            continue
        url = _strip(url)
        if url and not _is_http_url(url):
            errors[f"social_links.{platform}"] = [f"Please enter a valid {platform} URL"]

    if errors:
        raise ValidationError(errors)


def normalise_profile_data(data):
    """Trim all values, lowercase the username and turn blanks into None."""
    social_links = {}
    for platform, url in (data.get("social_links") or {}).items():
        url = _strip(url)
        if url:
            social_links[platform] = url
    return {
        "username": _strip(data.get("username")).lower(),
        "display_name": _strip(data.get("display_name")) or None,
        "bio": _strip(data.get("bio")) or None,
        "location": _strip(data.get("location")) or None,
        "website": _strip(data.get("website")) or None,
        "social_links": social_links,
    }


def clean_lines(items):
    """Trim each entry and drop the blank ones, keeping order."""
    if not items:
        return []
    if isinstance(items, str):
        items = items.splitlines()
    return [str(item).strip() for item in items if str(item).strip()]


def _strip(value):
    return (value or "").strip()
