"""Management command to seed the database with sample users, recipes, likes and comments."""

import re
from random import choice, randint, sample

from django.core.management.base import BaseCommand
from django.db import transaction
from faker import Faker

from cookbook.models import Comment, Like, Profile, Recipe, User
from cookbook.validators import USERNAME_MAX_LENGTH

SEED_UID_PREFIX = "seed-"

INGREDIENT_POOL = [
    "2 eggs", "200g flour", "1 tbsp olive oil", "1 onion", "2 cloves garlic",
    "400g chopped tomatoes", "250g pasta", "1 tsp salt", "100ml milk", "50g butter",
    "1 lemon", "handful of basil", "300g chicken thighs", "1 red pepper", "200g rice",
]

COMMENT_PHRASES = [
    "Made this last night, lovely.",
    "Could I swap the butter for oil?",
    "Great weeknight dinner.",
    "Needed a bit more salt for me.",
    "Kids loved it!",
]


class Command(BaseCommand):
    """Seed sample users (with profiles), recipes, likes and comments."""
    USER_COUNT = 20
    help = 'Seeds the database with sample data'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Number of users to create.")
        parser.add_argument("--per-user", type=int, default=2, help="Recipes per user.")

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        users = self.create_users(options["users"])
        recipes = self.seed_recipes(users, per_user=options["per_user"])
        self.seed_likes(users, recipes, max_likes_per_recipe=10)
        self.seed_comments(users, recipes, max_comments_per_recipe=4)
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, count):
        """Create principal users, each with a profile."""
        users = []
        for _ in range(count):
            first_name = self.faker.first_name()
            last_name = self.faker.last_name()
            uid = f"{SEED_UID_PREFIX}{self.faker.unique.hexify('^^^^^^^^^^^^')}"
            user, created = User.objects.get_or_create(
                username=uid,
                defaults={"email": f"{first_name}.{last_name}@example.org".lower()},
            )
            if created:
                user.set_unusable_password()
                user.save()
            Profile.objects.get_or_create(
                user=user,
                defaults={
                    "username": _profile_username(first_name, last_name, uid),
                    "display_name": f"{first_name} {last_name}",
                    "bio": self.faker.sentence(nb_words=10),
                    "location": self.faker.city(),
                },
            )
            users.append(user)
        self.stdout.write(f"users created: {len(users)}")
        return users

    def seed_recipes(self, users, *, per_user=2):
        rows = [self._build_recipe(user) for user in users for _ in range(per_user)]
        with transaction.atomic():
            Recipe.objects.bulk_create(rows, batch_size=500)
        self.stdout.write(f"recipes created: {len(rows)}")
        return rows

    def seed_likes(self, users, recipes, max_likes_per_recipe=10):
        rows = []
        for recipe in recipes:
            k = randint(0, min(max_likes_per_recipe, len(users)))
            rows.extend(Like(user_id=u.pk, recipe_id=recipe.id) for u in sample(users, k))
        with transaction.atomic():
            Like.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"likes created: {len(rows)}")

    def seed_comments(self, users, recipes, max_comments_per_recipe=4):
        rows = [
            Comment(recipe_id=recipe.id, user_id=choice(users).pk, content=choice(COMMENT_PHRASES))
            for recipe in recipes
            for _ in range(randint(0, max_comments_per_recipe))
        ]
        Comment.objects.bulk_create(rows, batch_size=500)
        self.stdout.write(f"Comments created: {len(rows)}")

    def _build_recipe(self, user):
        """Construct an unsaved Recipe with randomized fields."""
        return Recipe(
            owner_id=user.pk,
            title=self.faker.sentence(nb_words=4).rstrip(".")[:200],
            description=self.faker.paragraph(nb_sentences=2),
            ingredients=sample(INGREDIENT_POOL, randint(3, 7)),
            instructions=[self.faker.sentence(nb_words=8) for _ in range(randint(2, 5))],
            duration_min=None if randint(1, 5) == 1 else choice([10, 15, 20, 30, 45, 60, 90]),
            difficulty=choice([None, *[value for value, _ in Recipe.DIFFICULTY_CHOICES]]),
        )


def _profile_username(first_name, last_name, uid):
    """Valid, unique-enough profile username such as 'jane_smith_3fa2'."""
    base = re.sub(r"[^a-z0-9_]", "", f"{first_name}_{last_name}".lower())
    suffix = uid[-4:]
    return f"{base[:USERNAME_MAX_LENGTH - len(suffix) - 1]}_{suffix}"
