"""
URL configuration for the recipeshare project.

Every application route is a JSON endpoint served by the cookbook app.
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path

from cookbook.views.auth_api_views import SignInApi, SignUpApi
from cookbook.views.comment_api_views import CommentDetailApi, RecipeCommentsApi
from cookbook.views.profile_api_views import ProfileApi, PublicProfileApi
from cookbook.views.recipe_api_views import (
    MyRecipesApi,
    RecipeDetailApi,
    RecipeListApi,
    toggle_like,
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('auth/sign-up/', SignUpApi.as_view(), name='sign_up_api'),
    path('auth/sign-in/', SignInApi.as_view(), name='sign_in_api'),
    path('recipes/', RecipeListApi.as_view(), name='recipe_list_api'),
    path('recipes/<uuid:recipe_id>/', RecipeDetailApi.as_view(), name='recipe_detail_api'),
    path('recipes/<uuid:recipe_id>/like/', toggle_like, name='toggle_like_api'),
    path('recipes/<uuid:recipe_id>/comments/', RecipeCommentsApi.as_view(), name='recipe_comments_api'),
    path('comments/<uuid:comment_id>/', CommentDetailApi.as_view(), name='comment_detail_api'),
    path('my-recipes/', MyRecipesApi.as_view(), name='my_recipes_api'),
    path('profile/', ProfileApi.as_view(), name='profile_api'),
    path('users/<str:username>/', PublicProfileApi.as_view(), name='public_profile_api'),
]

urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
