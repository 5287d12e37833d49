"""Management command to seed the database with sample users, recipes and related data."""

from random import choice, randint, sample, uniform

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import IntegrityError, transaction

from recipes.exceptions import RecipeServiceError
from recipes.models import Recipe, User
from recipes.services import CollectionService, RecipeService, ShoppingListService
from .seed_data import collection_names, review_phrases, user_fixtures
from .seed_utils import SeedHelpers, create_email, create_username


class Command(SeedHelpers, BaseCommand):
    """Management command to seed the database with sample users/recipes/data."""
    USER_COUNT = 30
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Total number of users to reach.")
        parser.add_argument("--recipes-per-user", type=int, default=2)

    def __init__(self, *args, **kwargs):
        """Set up faker instance and the services used to write data."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')
        self.recipe_service = RecipeService()
        self.engagement = self.recipe_service.engagement
        self.collection_service = CollectionService(engagement=self.engagement)
        self.shopping_list_service = ShoppingListService()

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        self.create_users(options["users"])
        self.seed_recipes(per_user=options["recipes_per_user"])
        self.seed_ratings(max_ratings_per_recipe=8)
        self.seed_likes(max_likes_per_recipe=15)
        self.seed_collections(per_user=2)
        self.seed_shopping_lists()
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, user_count):
        """Create fixture users, then random users until `user_count` is reached."""
        for data in user_fixtures:
            self.try_create_user(data)
        while User.objects.count() < user_count:
            first_name = self.faker.first_name()
            last_name = self.faker.last_name()
            self.try_create_user({
                'username': create_username(first_name, last_name),
                'email': create_email(first_name, last_name),
                'first_name': first_name,
                'last_name': last_name,
            })
        self.stdout.write(f"Users: {User.objects.count()}")

    def try_create_user(self, data):
        """Try to create a user and skip duplicates."""
        try:
            with transaction.atomic():
                User.objects.create_user(
                    username=data['username'],
                    email=data['email'],
                    password=Command.DEFAULT_PASSWORD,
                    first_name=data['first_name'],
                    last_name=data['last_name'],
                )
        except IntegrityError:
            self.stdout.write(f"Skipping duplicate user {data['username']}")

    def seed_recipes(self, *, per_user: int = 2) -> None:
        """Create recipes with ingredients and instructions for every user."""
        created = 0
        for user in User.objects.all():
            for _ in range(per_user):
                self.recipe_service.create_recipe(user, self._build_recipe_data())
                created += 1
        self.stdout.write(f"Recipes created: {created}")

    def seed_ratings(self, max_ratings_per_recipe: int = 8) -> None:
        """Rate public recipes through the engagement service so aggregates stay derived."""
        users = list(User.objects.all())
        count = 0
        for recipe in Recipe.objects.filter(is_public=True):
            raters = [u for u in users if u.pk != recipe.owner_id]
            for user in sample(raters, randint(0, min(max_ratings_per_recipe, len(raters)))):
                value = round(uniform(1, 5) * 2) / 2
                self.engagement.rate(recipe.pk, user, value, choice(review_phrases))
                count += 1
        self.stdout.write(f"Ratings created: {count}")

    def seed_likes(self, max_likes_per_recipe: int = 15) -> None:
        users = list(User.objects.all())
        count = 0
        for recipe in Recipe.objects.filter(is_public=True):
            for user in sample(users, randint(0, min(max_likes_per_recipe, len(users)))):
                self.engagement.like(recipe.pk, user)
                count += 1
        self.stdout.write(f"Likes created: {count}")

    def seed_collections(self, *, per_user: int = 2) -> None:
        """Give users a few collections filled with recipes they can see."""
        public_ids = list(Recipe.objects.filter(is_public=True).values_list("id", flat=True))
        count = 0
        for user in User.objects.all():
            for name in sample(collection_names, min(per_user, len(collection_names))):
                collection = self.collection_service.create(user, name)
                count += 1
                for recipe_id in sample(public_ids, min(randint(0, 5), len(public_ids))):
                    self.collection_service.add_recipe(collection.pk, recipe_id, user)
        self.stdout.write(f"Collections created: {count}")

    def seed_shopping_lists(self) -> None:
        """Create one shopping list per fixture user from a few public recipes."""
        public_ids = list(Recipe.objects.filter(is_public=True).values_list("id", flat=True))
        if not public_ids:
            return
        for data in user_fixtures:
            user = User.objects.filter(username=data["username"]).first()
            if user is None:
                continue
            recipe_ids = sample(public_ids, min(3, len(public_ids)))
            try:
                self.shopping_list_service.generate("Weekly shop", recipe_ids, user)
            except RecipeServiceError as exc:
                self.stdout.write(self.style.WARNING(f"Shopping list for {user.username} skipped: {exc}"))
