from django.test import TestCase

from cookbook.repos import RecipeRepo
from cookbook.tests.helpers import make_recipe, make_user


class RecipeRepoTests(TestCase):
    def setUp(self):
        self.repo = RecipeRepo()
        self.alice = make_user("uid_alice")
        self.bob = make_user("uid_bob")
        self.old = make_recipe(self.alice, title="Old", created_ago=30)
        self.mid = make_recipe(self.bob, title="Mid", created_ago=10)
        self.new = make_recipe(self.alice, title="New")

    def test_list_for_feed_newest_first(self):
        self.assertEqual(list(self.repo.list_for_feed()), [self.new, self.mid, self.old])

    def test_list_for_feed_by_owner(self):
        self.assertEqual(list(self.repo.list_for_feed(owner_id=self.alice.id)), [self.new, self.old])

    def test_list_for_feed_limit_and_offset(self):
        self.assertEqual(list(self.repo.list_for_feed(limit=1, offset=1)), [self.mid])
