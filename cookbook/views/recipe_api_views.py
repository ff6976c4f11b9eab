"""Feed, recipe lifecycle and like endpoints."""

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.views import APIView

from cookbook.permissions import IsOwnerOrReadOnly
from cookbook.serializers import FeedEntrySerializer, RecipeWriteSerializer
from cookbook.services import FeedService, LikeService, RecipeService, SearchFilters

feed_service = FeedService()
recipe_service = RecipeService()
like_service = LikeService()


def _feed_response(entries):
    return Response({
        "recipes": FeedEntrySerializer(entries, many=True).data,
        "total": len(entries),
    })


def _split_image(validated_data):
    data = dict(validated_data)
    return data, data.pop("image", None)


class RecipeListApi(APIView):
    """Shared feed (anyone) and recipe upload (signed-in users)."""
    permission_classes = [IsAuthenticatedOrReadOnly]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get(self, request):
        """Return the enriched feed filtered by q, difficulty, max_duration and sort."""
        filters = SearchFilters.from_query_params(request.query_params)
        return _feed_response(feed_service.feed(request.user, filters))

    def post(self, request):
        """Upload a recipe owned by the current user."""
        serializer = RecipeWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data, image = _split_image(serializer.validated_data)
        recipe = recipe_service.create_recipe(request.user, data, image)
        entry = feed_service.entry_for(recipe, request.user)
        return Response(FeedEntrySerializer(entry).data, status=status.HTTP_201_CREATED)


class RecipeDetailApi(APIView):
    """Read one feed entry; owners may edit or delete it."""
    permission_classes = [IsAuthenticatedOrReadOnly, IsOwnerOrReadOnly]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get(self, request, recipe_id):
        recipe = recipe_service.fetch(recipe_id)
        return Response(FeedEntrySerializer(feed_service.entry_for(recipe, request.user)).data)

    def put(self, request, recipe_id):
        return self._update(request, recipe_id, partial=False)

    def patch(self, request, recipe_id):
        return self._update(request, recipe_id, partial=True)

    def delete(self, request, recipe_id):
        recipe = recipe_service.fetch(recipe_id)
        self.check_object_permissions(request, recipe)
        recipe_service.delete_recipe(request.user, recipe.id)
        return Response({"success": True})

    def _update(self, request, recipe_id, partial):
        recipe = recipe_service.fetch(recipe_id)
        self.check_object_permissions(request, recipe)
        serializer = RecipeWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        data, image = _split_image(serializer.validated_data)
        recipe = recipe_service.update_recipe(request.user, recipe.id, data, image, partial=partial)
        return Response(FeedEntrySerializer(feed_service.entry_for(recipe, request.user)).data)


class MyRecipesApi(APIView):
    """The current user's own recipes as feed entries."""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        filters = SearchFilters.from_query_params(request.query_params)
        return _feed_response(feed_service.feed(request.user, filters, owner=request.user))


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def toggle_like(request, recipe_id):
    """Toggle like/unlike for a recipe and return the new state."""
    recipe = recipe_service.fetch(recipe_id)
    liked = like_service.toggle(request.user, recipe)
    return Response({"liked": liked, "like_count": like_service.like_count(recipe)})
