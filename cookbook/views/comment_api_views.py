"""Comment listing and comment CRUD endpoints."""

from rest_framework import status
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.views import APIView

from cookbook.serializers import CommentSerializer, CommentWriteSerializer
from cookbook.services import CommentService, RecipeService

comment_service = CommentService()
recipe_service = RecipeService()


class RecipeCommentsApi(APIView):
    """Top-level comments of a recipe; signed-in users may post."""
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request, recipe_id):
        recipe = recipe_service.fetch(recipe_id)
        items = comment_service.list_for_recipe(recipe)
        return Response({"comments": CommentSerializer(items, many=True).data})

    def post(self, request, recipe_id):
        serializer = CommentWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        recipe = recipe_service.fetch(recipe_id)
        comment = comment_service.create_comment(
            request.user,
            recipe,
            serializer.validated_data["content"],
            parent_id=serializer.validated_data.get("parent_id"),
        )
        return Response(
            {"comment": CommentSerializer(comment_service.with_author(comment)).data},
            status=status.HTTP_201_CREATED,
        )


class CommentDetailApi(APIView):
    """Owner-only edit and delete of a single comment."""
    permission_classes = [IsAuthenticated]

    def put(self, request, comment_id):
        serializer = CommentWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        comment = comment_service.edit_comment(
            request.user, comment_id, serializer.validated_data["content"]
        )
        return Response({"comment": CommentSerializer(comment_service.with_author(comment)).data})

    def delete(self, request, comment_id):
        comment_service.delete_comment(request.user, comment_id)
        return Response({"success": True})
