from django.core.exceptions import ValidationError
from django.test import TestCase

from cookbook.models import Comment
from cookbook.tests.helpers import make_comment, make_recipe, make_user


class CommentModelTests(TestCase):
    def setUp(self):
        self.user = make_user()
        self.recipe = make_recipe(self.user)

    def test_defaults(self):
        comment = make_comment(self.recipe, self.user)
        self.assertFalse(comment.is_edited)
        self.assertIsNone(comment.parent_id)
        self.assertIn(str(self.recipe.id), str(comment))

    def test_content_longer_than_limit_fails_full_clean(self):
        comment = Comment(recipe=self.recipe, user=self.user, content="x" * 1001)
        with self.assertRaises(ValidationError):
            comment.full_clean()

    def test_deleting_parent_leaves_reply_in_place(self):
        parent = make_comment(self.recipe, self.user, content="parent")
        reply = make_comment(self.recipe, self.user, content="reply", parent=parent)
        parent_id = parent.id

        parent.delete()

        reply = Comment.objects.get(pk=reply.pk)
        self.assertEqual(reply.parent_id, parent_id)
        self.assertFalse(Comment.objects.filter(pk=parent_id).exists())

    def test_comments_cascade_with_recipe(self):
        make_comment(self.recipe, self.user)
        self.recipe.delete()
        self.assertFalse(Comment.objects.exists())
