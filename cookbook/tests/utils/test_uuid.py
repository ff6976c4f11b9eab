import uuid

from django.test import SimpleTestCase

from cookbook.utils.uuid import uuid7_or_4


class UuidHelperTests(SimpleTestCase):
    def test_returns_unique_uuids(self):
        first, second = uuid7_or_4(), uuid7_or_4()
        self.assertIsInstance(first, uuid.UUID)
        self.assertNotEqual(first, second)
