from django.core.management.base import BaseCommand
from django.db import transaction

from cookbook.management.commands.seed import SEED_UID_PREFIX
from cookbook.models import User


class Command(BaseCommand):
    """Remove the users created by `seed` together with their profiles, recipes, likes and comments.

    Staff accounts and real (provider-backed) users are left alone.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        seeded_users = User.objects.filter(username__startswith=SEED_UID_PREFIX, is_staff=False)
        with transaction.atomic():
            deleted_count, _ = seeded_users.delete()
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted_count} seeded rows."))
