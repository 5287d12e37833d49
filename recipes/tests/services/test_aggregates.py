import uuid
from unittest.mock import MagicMock

from django.test import TestCase

from recipes.exceptions import NotFoundError
from recipes.models import Like, Rating, Recipe
from recipes.services.aggregates import AggregateRecalculator
from recipes.tests.helpers import make_user, make_recipe


class AggregateRecalculatorTests(TestCase):
    def setUp(self):
        self.recalculator = AggregateRecalculator()
        self.recipe = make_recipe()

    def _rate(self, username, value):
        user = make_user(username=username)
        Rating.objects.create(recipe=self.recipe, user=user, username=username, value=value)

    def test_recalculate_uses_every_rating(self):
        self._rate("alice", 4)
        self._rate("bobby", 5)
        self._rate("carol", 2)

        recipe = self.recalculator.recalculate(self.recipe.pk)

        self.assertAlmostEqual(recipe.average_rating, 11 / 3)
        self.assertEqual(recipe.rating_count, 3)
        self.recipe.refresh_from_db()
        self.assertAlmostEqual(self.recipe.average_rating, 11 / 3)
        self.assertEqual(self.recipe.rating_count, 3)

    def test_recalculate_without_ratings_resets_to_zero(self):
        Recipe.objects.filter(pk=self.recipe.pk).update(average_rating=3.0, rating_count=2)

        recipe = self.recalculator.recalculate(self.recipe.pk)

        self.assertEqual(recipe.average_rating, 0.0)
        self.assertEqual(recipe.rating_count, 0)

    def test_recalculate_does_not_touch_like_count(self):
        Recipe.objects.filter(pk=self.recipe.pk).update(like_count=4)
        self.recalculator.recalculate(self.recipe.pk)
        self.recipe.refresh_from_db()
        self.assertEqual(self.recipe.like_count, 4)

    def test_recalculate_unknown_recipe(self):
        with self.assertRaises(NotFoundError):
            self.recalculator.recalculate(uuid.uuid4())

    def test_increment_and_decrement_likes(self):
        self.recalculator.increment_likes(self.recipe.pk)
        self.recalculator.increment_likes(self.recipe.pk)
        self.recalculator.decrement_likes(self.recipe.pk)
        self.recipe.refresh_from_db()
        self.assertEqual(self.recipe.like_count, 1)

    def test_decrement_never_goes_below_zero(self):
        updated = self.recalculator.decrement_likes(self.recipe.pk)
        self.assertEqual(updated, 0)
        self.recipe.refresh_from_db()
        self.assertEqual(self.recipe.like_count, 0)

    def test_recount_likes_matches_facts(self):
        Recipe.objects.filter(pk=self.recipe.pk).update(like_count=9)
        for username in ("alice", "bobby"):
            user = make_user(username=username)
            Like.objects.create(recipe=self.recipe, user=user, username=username)

        self.recalculator.recount_likes(self.recipe.pk)

        self.recipe.refresh_from_db()
        self.assertEqual(self.recipe.like_count, 2)

    def test_recalculate_saves_only_rating_fields(self):
        accessor = MagicMock()
        recipe = MagicMock(pk=self.recipe.pk)
        accessor.get_by_id.return_value = recipe
        recalculator = AggregateRecalculator(recipe_accessor=accessor)

        recalculator.recalculate(self.recipe.pk)

        accessor.get_by_id.assert_called_once_with(self.recipe.pk, for_update=True)
        accessor.save.assert_called_once_with(
            recipe, update_fields=["average_rating", "rating_count", "updated_at"]
        )
