"""Profile endpoints: the signed-in user's own profile and public lookups."""

from django.http import Http404
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from cookbook.serializers import ProfileSerializer, ProfileWriteSerializer
from cookbook.services import ProfileService

profile_service = ProfileService()


class ProfileApi(APIView):
    """Read or save the current user's profile (created on first save)."""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        profile = profile_service.for_actor(request.user)
        if profile is None:
            raise Http404("Profile not created yet.")
        return Response(ProfileSerializer(profile).data)

    def put(self, request):
        serializer = ProfileWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = profile_service.save_profile(request.user, serializer.validated_data)
        return Response(ProfileSerializer(profile).data)


class PublicProfileApi(APIView):
    """Look up any profile by username."""
    permission_classes = [AllowAny]

    def get(self, request, username):
        profile = profile_service.get_by_username(username)
        data = ProfileSerializer(profile).data
        data["recipe_count"] = profile.user.recipes.count()
        return Response(data)
