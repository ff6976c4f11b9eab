"""Sign-up and sign-in forwarded to the hosted identity provider."""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from cookbook import firebase_auth_services
from cookbook.serializers import CredentialsSerializer


def _session_payload(provider_response):
    """Keep only the token fields a client needs from the provider response."""
    return {
        "uid": provider_response.get("localId"),
        "email": provider_response.get("email"),
        "id_token": provider_response.get("idToken"),
        "refresh_token": provider_response.get("refreshToken"),
        "expires_in": provider_response.get("expiresIn"),
    }


class SignUpApi(APIView):
    """Create an account with the provider and return its session tokens."""
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = CredentialsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = firebase_auth_services.sign_up(**serializer.validated_data)
        return Response(_session_payload(result), status=status.HTTP_201_CREATED)


class SignInApi(APIView):
    """Exchange email/password for provider session tokens."""
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = CredentialsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = firebase_auth_services.sign_in_with_email_and_password(**serializer.validated_data)
        return Response(_session_payload(result))
