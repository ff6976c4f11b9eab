from django.test import TestCase

from cookbook.db_accessor import DB_Accessor
from cookbook.models import Recipe
from cookbook.tests.helpers import make_recipe, make_user


class DBAccessorTests(TestCase):

    def setUp(self):
        self.user = make_user()
        self.obj1 = make_recipe(self.user, title="Soup", difficulty=Recipe.DIFFICULTY_MEDIUM)
        self.obj2 = make_recipe(self.user, title="Cake", difficulty=Recipe.DIFFICULTY_HARD)
        self.repo = DB_Accessor(Recipe)

    # ---------- list() ----------

    def test_list_default_returns_queryset(self):
        qs = self.repo.list()
        self.assertEqual(qs.count(), 2)

    def test_list_filters(self):
        qs = self.repo.list(filters={"title": "Soup"})
        self.assertEqual(list(qs), [self.obj1])

    def test_list_order_by(self):
        qs = self.repo.list(order_by=["title"])
        self.assertEqual(list(qs.values_list("title", flat=True)), ["Cake", "Soup"])

    def test_list_limit_and_offset(self):
        self.assertEqual(len(self.repo.list(order_by=["title"], limit=1)), 1)
        self.assertEqual(list(self.repo.list(order_by=["title"], limit=1, offset=1)), [self.obj1])

    def test_list_offset_no_limit(self):
        self.assertEqual(len(self.repo.list(offset=1)), 1)

    def test_list_slice_past_end_is_empty(self):
        self.assertEqual(len(self.repo.list(limit=1, offset=10)), 0)

    # ---------- single-object helpers ----------

    def test_first_returns_none_when_missing(self):
        self.assertIsNone(self.repo.first(title="Nope"))

    def test_exists(self):
        self.assertTrue(self.repo.exists(title="Cake"))
        self.assertFalse(self.repo.exists(title="Nope"))

    # ---------- writes ----------

    def test_create(self):
        created = self.repo.create(
            owner=self.user,
            title="New",
            ingredients=["salt"],
            instructions=["stir"],
        )
        self.assertTrue(Recipe.objects.filter(id=created.id).exists())

    def test_delete(self):
        self.assertEqual(self.repo.delete(id=self.obj2.id), 1)
        self.assertFalse(Recipe.objects.filter(id=self.obj2.id).exists())
