from unittest.mock import MagicMock, patch

import requests
from django.test import SimpleTestCase, override_settings

from cookbook import firebase_auth_services
from cookbook.firebase_auth_services import AuthProviderError


def _response(status_code, payload):
    response = MagicMock(status_code=status_code)
    response.json.return_value = payload
    return response


@override_settings(FIREBASE_API_KEY="test-key", FIREBASE_AUTH_URL="https://auth.example/v1/")
class FirebaseAuthServicesTests(SimpleTestCase):

    @patch("cookbook.firebase_auth_services.requests.post")
    def test_sign_up_posts_to_provider(self, mock_post):
        mock_post.return_value = _response(200, {"idToken": "tok"})

        result = firebase_auth_services.sign_up("a@example.org", "secret1")

        self.assertEqual(result, {"idToken": "tok"})
        args, kwargs = mock_post.call_args
        self.assertEqual(args[0], "https://auth.example/v1/accounts:signUp?key=test-key")
        self.assertEqual(kwargs["json"]["returnSecureToken"], True)
        self.assertEqual(kwargs["timeout"], 10)

    @patch("cookbook.firebase_auth_services.requests.post")
    def test_sign_in_uses_password_endpoint(self, mock_post):
        mock_post.return_value = _response(200, {"localId": "uid"})
        firebase_auth_services.sign_in_with_email_and_password("a@example.org", "secret1")
        self.assertIn("accounts:signInWithPassword", mock_post.call_args[0][0])

    @patch("cookbook.firebase_auth_services.requests.post")
    def test_provider_error_message_is_surfaced(self, mock_post):
        mock_post.return_value = _response(400, {"error": {"message": "EMAIL_EXISTS"}})

        with self.assertRaises(AuthProviderError) as ctx:
            firebase_auth_services.sign_up("a@example.org", "secret1")

        self.assertEqual(ctx.exception.message, "EMAIL_EXISTS")
        self.assertEqual(ctx.exception.status_code, 400)

    @patch("cookbook.firebase_auth_services.requests.post")
    def test_unparseable_error_falls_back_to_text(self, mock_post):
        response = MagicMock(status_code=500, text="oops")
        response.json.side_effect = ValueError("no json")
        mock_post.return_value = response

        with self.assertRaisesMessage(AuthProviderError, "oops"):
            firebase_auth_services.sign_up("a@example.org", "secret1")

    @patch("cookbook.firebase_auth_services.requests.post", side_effect=requests.ConnectionError("down"))
    def test_unreachable_provider(self, _mock_post):
        with self.assertRaisesMessage(AuthProviderError, "Identity provider unreachable."):
            firebase_auth_services.sign_up("a@example.org", "secret1")

    @override_settings(FIREBASE_API_KEY="")
    @patch("cookbook.firebase_auth_services.requests.post")
    def test_missing_api_key(self, mock_post):
        with self.assertRaises(AuthProviderError):
            firebase_auth_services.sign_up("a@example.org", "secret1")
        mock_post.assert_not_called()
