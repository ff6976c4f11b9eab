"""Sign-up and sign-in calls forwarded to the hosted identity provider."""

import logging
import requests
from django.conf import settings

logger = logging.getLogger(__name__)


class AuthProviderError(Exception):
    """Raised when the identity provider rejects a request or cannot be reached."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _endpoint(action: str) -> str:
    base = getattr(settings, "FIREBASE_AUTH_URL", "").rstrip("/")
    api_key = getattr(settings, "FIREBASE_API_KEY", None)
    if not api_key:
        raise AuthProviderError("Identity provider is not configured (FIREBASE_API_KEY missing).")
    return f"{base}/accounts:{action}?key={api_key}"


def _post(action: str, payload: dict) -> dict:
    url = _endpoint(action)
    timeout = getattr(settings, "FIREBASE_REQUEST_TIMEOUT", 10)
    try:
        response = requests.post(url, json=payload, timeout=timeout)
    except requests.RequestException as exc:
        logger.error("Identity provider unreachable for %s: %s", action, exc)
        raise AuthProviderError("Identity provider unreachable.") from exc

    if response.status_code == 200:
        return response.json()

    message = _provider_message(response)
    logger.warning(
        "Identity provider %s failed (status=%s, message=%s)",
        action,
        response.status_code,
        message,
    )
    raise AuthProviderError(message, status_code=response.status_code)


def _provider_message(response) -> str:
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return getattr(response, "text", "") or "Identity provider error."


def sign_up(email: str, password: str) -> dict:
    """Create an email/password account; return the provider's token payload."""
    return _post("signUp", {"email": email, "password": password, "returnSecureToken": True})


def sign_in_with_email_and_password(email: str, password: str) -> dict:
    """Sign in against the provider REST API; return the provider's token payload."""
    return _post(
        "signInWithPassword",
        {"email": email, "password": password, "returnSecureToken": True},
    )
