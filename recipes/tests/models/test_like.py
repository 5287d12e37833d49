from django.test import TestCase
from django.db import IntegrityError

from recipes.models import Like
from recipes.tests.helpers import make_user, make_recipe


class LikeModelTestCase(TestCase):
    def setUp(self):
        self.user_a = make_user(username="usera")
        self.user_b = make_user(username="userb")
        self.recipe = make_recipe(owner=self.user_a)

    def test_user_can_like_a_recipe(self):
        like = Like.objects.create(user=self.user_b, recipe=self.recipe, username="userb")

        self.assertEqual(like.user, self.user_b)
        self.assertEqual(like.recipe, self.recipe)
        self.assertEqual(Like.objects.count(), 1)

    def test_duplicate_like_not_allowed(self):
        Like.objects.create(user=self.user_b, recipe=self.recipe, username="userb")

        with self.assertRaises(IntegrityError):
            Like.objects.create(user=self.user_b, recipe=self.recipe, username="userb")

    def test_likes_are_removed_with_recipe(self):
        Like.objects.create(user=self.user_b, recipe=self.recipe, username="userb")
        self.recipe.delete()
        self.assertEqual(Like.objects.count(), 0)

    def test_string_representation(self):
        like = Like.objects.create(user=self.user_b, recipe=self.recipe, username="userb")
        self.assertTrue(str(like))
