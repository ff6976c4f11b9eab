"""DRF authentication against the hosted identity provider."""

import logging
from firebase_admin import auth
from django.contrib.auth import get_user_model
from rest_framework import authentication
from rest_framework import exceptions
from .firebase_admin_client import get_app

logger = logging.getLogger(__name__)

User = get_user_model()

class FirebaseAuthentication(authentication.BaseAuthentication):
    """DRF authentication backend validating Firebase ID tokens.

    The provider owns the identity; a local User row keyed by uid is
    mirrored on the first verified request.
    """

    keyword = 'Bearer'

    def authenticate(self, request):
        """Validate Authorization header token and return (user, decoded_token)."""
        auth_header = request.META.get('HTTP_AUTHORIZATION')
        if not auth_header:
            return None

        id_token = auth_header.split(' ').pop()

        try:
            get_app()
            decoded_token = auth.verify_id_token(id_token)
        except Exception as exc:
            logger.info("Rejected ID token: %s", exc)
            raise exceptions.AuthenticationFailed('Invalid Firebase token')

        uid = decoded_token.get("uid")
        if not uid:
            raise exceptions.AuthenticationFailed('Token has no uid')

        user, created = User.objects.get_or_create(
            username=uid,
            defaults={"email": decoded_token.get("email") or ""},
        )
        if created:
            user.set_unusable_password()
            user.save(update_fields=["password"])
            logger.info("Mirrored new principal %s", uid)
        if not user.is_active:
            raise exceptions.AuthenticationFailed('User inactive or deleted')
        return (user, decoded_token)

    def authenticate_header(self, request):
        """Ask clients for a bearer token so unauthenticated calls get a 401."""
        return self.keyword
