from django.core.management.base import BaseCommand
from django.db import transaction
from recipes.models import Like, Rating, User
from recipes.services import AggregateRecalculator

class Command(BaseCommand):
    """
    Management command to remove (unseed) user data from the database.

    This command deletes all non-staff users from the database. Recipes,
    ratings, likes, collections and shopping lists owned by those users go
    with them through their cascading foreign keys. Administrative accounts
    are kept, and the cached aggregates of their recipes are recomputed
    from the facts that remain.

    Attributes:
        help (str): Short description displayed when running
            `python manage.py help unseed`.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        """
        Execute the unseeding process.

        Deletes all `User` records where `is_staff` is False, recalculates
        the surviving recipes they had rated or liked, and prints a
        confirmation message upon completion.
        """

        non_staff_users = User.objects.filter(is_staff=False)
        recalculator = AggregateRecalculator()

        with transaction.atomic():
            touched = set(
                Rating.objects.filter(user__in=non_staff_users)
                .exclude(recipe__owner__in=non_staff_users)
                .values_list("recipe_id", flat=True)
            )
            touched.update(
                Like.objects.filter(user__in=non_staff_users)
                .exclude(recipe__owner__in=non_staff_users)
                .values_list("recipe_id", flat=True)
            )
            _, deleted_by_model = non_staff_users.delete()
            for recipe_id in touched:
                recalculator.recalculate(recipe_id)
                recalculator.recount_likes(recipe_id)

        self.stdout.write(self.style.SUCCESS(
            f"Deleted {deleted_by_model.get('recipes.User', 0)} non-staff users and related data; "
            f"recalculated {len(touched)} recipes."
        ))
