import tempfile
import uuid

from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework.test import APIClient

from cookbook.models import Like, Recipe
from cookbook.tests.helpers import make_image, make_profile, make_recipe, make_user


@override_settings(MEDIA_ROOT=tempfile.mkdtemp())
class RecipeApiViewTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = make_user("uid_alice")
        self.other_user = make_user("uid_bob")
        make_profile(self.user, "alice", display_name="Alice")
        self.client.force_authenticate(user=self.user)
        self.list_url = reverse('recipe_list_api')

    def _detail_url(self, recipe_id):
        return reverse('recipe_detail_api', args=[recipe_id])

    # --- feed ---

    def test_feed_is_public(self):
        make_recipe(self.user, title="Pasta")
        response = APIClient().get(self.list_url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["total"], 1)
        entry = response.data["recipes"][0]
        self.assertEqual(entry["user_profile"], {"username": "alice", "display_name": "Alice"})
        self.assertFalse(entry["is_liked_by_user"])
        self.assertEqual(entry["duration_display"], "20m")

    def test_feed_filters_by_query_params(self):
        make_recipe(self.user, title="Pasta", duration_min=20)
        make_recipe(self.other_user, title="Soup", duration_min=90)
        response = self.client.get(self.list_url, {"max_duration": "30"})
        self.assertEqual([r["title"] for r in response.data["recipes"]], ["Pasta"])

    def test_feed_sort_by_title(self):
        make_recipe(self.user, title="Zucchini bake")
        make_recipe(self.user, title="apple pie")
        response = self.client.get(self.list_url, {"sort": "title"})
        self.assertEqual([r["title"] for r in response.data["recipes"]], ["apple pie", "Zucchini bake"])

    # --- create ---

    def test_user_can_create_recipe_with_json(self):
        data = {
            "title": "Simple pasta",
            "ingredients": ["pasta", "salt"],
            "instructions": ["boil"],
            "difficulty": "Easy",
            "duration_min": 15,
        }
        response = self.client.post(self.list_url, data, format="json")
        self.assertEqual(response.status_code, 201)
        recipe = Recipe.objects.get()
        self.assertEqual(recipe.owner, self.user)
        self.assertEqual(response.data["like_count"], 0)

    def test_user_can_upload_with_image(self):
        data = {
            "title": "Photo pasta",
            "ingredients": ["pasta", "salt"],
            "instructions": ["boil"],
            "image": make_image(),
        }
        response = self.client.post(self.list_url, data, format="multipart")
        self.assertEqual(response.status_code, 201)
        self.assertIn("/recipes/uid_alice/", response.data["image_url"])
        self.assertEqual(Recipe.objects.get().ingredients, ["pasta", "salt"])

    def test_create_with_blank_ingredients_is_400(self):
        data = {"title": "Empty", "ingredients": [" "], "instructions": ["boil"]}
        response = self.client.post(self.list_url, data, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertIn("ingredients", response.data)
        self.assertFalse(Recipe.objects.exists())

    def test_create_requires_authentication(self):
        response = APIClient().post(self.list_url, {"title": "x"}, format="json")
        self.assertEqual(response.status_code, 401)

    # --- detail / edit / delete ---

    def test_get_unknown_recipe_is_404(self):
        response = self.client.get(self._detail_url(uuid.uuid4()))
        self.assertEqual(response.status_code, 404)

    def test_owner_can_patch(self):
        recipe = make_recipe(self.user, title="Old")
        response = self.client.patch(self._detail_url(recipe.id), {"title": "New"}, format="json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["title"], "New")

    def test_non_owner_cannot_edit(self):
        recipe = make_recipe(self.other_user, title="Bob's")
        response = self.client.patch(self._detail_url(recipe.id), {"title": "Mine"}, format="json")
        self.assertEqual(response.status_code, 403)
        recipe.refresh_from_db()
        self.assertEqual(recipe.title, "Bob's")

    def test_owner_can_delete(self):
        recipe = make_recipe(self.user)
        response = self.client.delete(self._detail_url(recipe.id))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, {"success": True})
        self.assertFalse(Recipe.objects.exists())

    def test_non_owner_cannot_delete(self):
        recipe = make_recipe(self.other_user)
        response = self.client.delete(self._detail_url(recipe.id))
        self.assertEqual(response.status_code, 403)
        self.assertTrue(Recipe.objects.filter(pk=recipe.pk).exists())

    # --- my recipes ---

    def test_my_recipes_only_lists_own(self):
        mine = make_recipe(self.user, title="Mine")
        make_recipe(self.other_user, title="Theirs")
        response = self.client.get(reverse('my_recipes_api'))
        self.assertEqual([r["id"] for r in response.data["recipes"]], [str(mine.id)])

    def test_my_recipes_requires_authentication(self):
        response = APIClient().get(reverse('my_recipes_api'))
        self.assertEqual(response.status_code, 401)


class ToggleLikeApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.actor = make_user("uid_x")
        self.recipe = make_recipe(make_user("uid_owner"))
        self.client.force_authenticate(user=self.actor)
        self.url = reverse('toggle_like_api', args=[self.recipe.id])

    def test_like_then_unlike(self):
        first = self.client.post(self.url)
        self.assertEqual(first.data, {"liked": True, "like_count": 1})
        second = self.client.post(self.url)
        self.assertEqual(second.data, {"liked": False, "like_count": 0})
        self.assertFalse(Like.objects.exists())

    def test_like_requires_authentication(self):
        response = APIClient().post(self.url)
        self.assertEqual(response.status_code, 401)

    def test_like_unknown_recipe_is_404(self):
        response = self.client.post(reverse('toggle_like_api', args=[uuid.uuid4()]))
        self.assertEqual(response.status_code, 404)
