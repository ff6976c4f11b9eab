"""Principal mirror for identities owned by the hosted auth provider."""

from django.contrib.auth.models import AbstractUser
from libgravatar import Gravatar


class User(AbstractUser):
    """Local row for an authenticated principal.

    ``username`` stores the provider uid, so the public handle lives on
    :class:`~cookbook.models.profile.Profile` instead.
    """

    class Meta:
        """Default ordering for principals."""
        ordering = ['username']

    @property
    def uid(self):
        """Provider uid of this principal."""
        return self.username

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email or self.username)
        return gravatar_object.get_image(size=size, default='mp')
