from django.test import TestCase
from django.db import IntegrityError, transaction

from recipes.models import Rating
from recipes.tests.helpers import make_user, make_recipe


class RatingModelTestCase(TestCase):
    def setUp(self):
        self.owner = make_user(username="owner")
        self.rater = make_user(username="rater")
        self.recipe = make_recipe(owner=self.owner)

    def _rate(self, value, user=None):
        user = user or self.rater
        return Rating.objects.create(recipe=self.recipe, user=user, username=user.username, value=value)

    def test_rating_defaults(self):
        rating = self._rate(4.5)
        self.assertEqual(rating.review, "")
        self.assertIsNotNone(rating.created_at)
        self.assertIsNotNone(rating.updated_at)

    def test_one_rating_per_user_and_recipe(self):
        self._rate(3)
        with self.assertRaises(IntegrityError):
            self._rate(4)

    def test_value_must_be_within_bounds(self):
        for value in (-0.5, 5.5):
            with self.subTest(value=value):
                with self.assertRaises(IntegrityError), transaction.atomic():
                    self._rate(value)

    def test_bounds_are_inclusive(self):
        self._rate(0.0)
        self._rate(5.0, user=make_user(username="another"))
        self.assertEqual(Rating.objects.count(), 2)

    def test_ratings_are_removed_with_recipe(self):
        self._rate(2)
        self.recipe.delete()
        self.assertFalse(Rating.objects.exists())
