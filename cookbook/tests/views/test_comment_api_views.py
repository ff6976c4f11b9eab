import uuid

from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from cookbook.models import Comment
from cookbook.tests.helpers import make_comment, make_profile, make_recipe, make_user


class CommentApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.y = make_user("uid_y")
        self.z = make_user("uid_z")
        make_profile(self.z, "zed", display_name="Zed")
        self.recipe = make_recipe(self.y)
        self.client.force_authenticate(user=self.z)
        self.list_url = reverse('recipe_comments_api', args=[self.recipe.id])

    def _detail_url(self, comment_id):
        return reverse('comment_detail_api', args=[comment_id])

    # --- list ---

    def test_list_is_public_and_top_level_only(self):
        top = make_comment(self.recipe, self.z, content="top")
        make_comment(self.recipe, self.y, content="reply", parent=top)
        response = APIClient().get(self.list_url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.data["comments"]), 1)
        comment = response.data["comments"][0]
        self.assertEqual(comment["content"], "top")
        self.assertEqual(comment["user_profile"], {"username": "zed", "display_name": "Zed"})

    def test_list_unknown_recipe_is_404(self):
        response = self.client.get(reverse('recipe_comments_api', args=[uuid.uuid4()]))
        self.assertEqual(response.status_code, 404)

    # --- create ---

    def test_create_comment(self):
        response = self.client.post(self.list_url, {"content": "  Delicious  "}, format="json")
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["comment"]["content"], "Delicious")
        self.assertFalse(response.data["comment"]["is_edited"])

    def test_create_too_long_is_400(self):
        response = self.client.post(self.list_url, {"content": "x" * 1001}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["content"], ["Comment is too long (max 1000 characters)"])
        self.assertFalse(Comment.objects.exists())

    def test_create_empty_is_400(self):
        response = self.client.post(self.list_url, {"content": ""}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["content"], ["Comment content is required"])

    def test_create_requires_authentication(self):
        response = APIClient().post(self.list_url, {"content": "hi"}, format="json")
        self.assertEqual(response.status_code, 401)

    def test_create_on_unknown_recipe_is_404(self):
        url = reverse('recipe_comments_api', args=[uuid.uuid4()])
        response = self.client.post(url, {"content": "hi"}, format="json")
        self.assertEqual(response.status_code, 404)

    def test_create_reply(self):
        top = make_comment(self.recipe, self.y)
        response = self.client.post(self.list_url, {"content": "reply", "parent_id": str(top.id)}, format="json")
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["comment"]["parent_id"], str(top.id))

    # --- edit ---

    def test_owner_edit(self):
        comment = make_comment(self.recipe, self.z)
        response = self.client.put(self._detail_url(comment.id), {"content": "changed"}, format="json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["comment"]["content"], "changed")
        self.assertTrue(response.data["comment"]["is_edited"])

    def test_non_owner_edit_is_403(self):
        comment = make_comment(self.recipe, self.y)
        response = self.client.put(self._detail_url(comment.id), {"content": "changed"}, format="json")
        self.assertEqual(response.status_code, 403)

    def test_edit_unknown_is_404(self):
        response = self.client.put(self._detail_url(uuid.uuid4()), {"content": "changed"}, format="json")
        self.assertEqual(response.status_code, 404)

    # --- delete ---

    def test_owner_delete(self):
        comment = make_comment(self.recipe, self.z)
        response = self.client.delete(self._detail_url(comment.id))
        self.assertEqual(response.data, {"success": True})
        self.assertFalse(Comment.objects.exists())

    def test_non_owner_delete_is_403_and_comment_kept(self):
        comment = make_comment(self.recipe, self.y)
        response = self.client.delete(self._detail_url(comment.id))
        self.assertEqual(response.status_code, 403)
        self.assertTrue(Comment.objects.filter(pk=comment.pk).exists())

    def test_delete_unknown_is_404(self):
        response = self.client.delete(self._detail_url(uuid.uuid4()))
        self.assertEqual(response.status_code, 404)
