from django.urls import reverse

from recipes.models import Like, Rating
from recipes.tests.helpers import make_recipe
from recipes.tests.views.base import ApiTestCase


class RatingApiTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.recipe = make_recipe(owner=self.other_user)
        self.url = reverse('recipe_rating_api', args=[self.recipe.pk])

    def test_rate_recipe(self):
        response = self.client.patch(self.url, {"rating": 4.5, "review": "Great"}, format="json")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["average_rating"], 4.5)
        self.assertEqual(response.json()["rating_count"], 1)

    def test_rating_out_of_bounds_rejected(self):
        for value in (-1, 5.5):
            with self.subTest(value=value):
                response = self.client.patch(self.url, {"rating": value}, format="json")
                self.assertEqual(response.status_code, 400)
        self.assertFalse(Rating.objects.exists())

    def test_owner_cannot_rate(self):
        response = self.client_for(self.other_user).patch(self.url, {"rating": 5}, format="json")
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["message"], "You cannot rate your own recipes.")

    def test_list_ratings(self):
        self.client.patch(self.url, {"rating": 3}, format="json")

        response = self.anonymous_client().get(reverse('recipe_ratings_api', args=[self.recipe.pk]))

        self.assertEqual(response.status_code, 200)
        rating = response.json()[0]
        self.assertEqual(rating["rating"], 3.0)
        self.assertEqual(rating["username"], "johndoe")
        self.assertEqual(rating["user_id"], self.user.pk)
        self.assertEqual(rating["recipe_id"], str(self.recipe.pk))

    def test_anonymous_cannot_rate(self):
        response = self.anonymous_client().patch(self.url, {"rating": 3}, format="json")
        self.assertIn(response.status_code, [401, 403])


class LikeApiTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.recipe = make_recipe(owner=self.other_user)
        self.url = reverse('recipe_like_api', args=[self.recipe.pk])

    def test_like_and_unlike(self):
        response = self.client.post(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["is_liked"])
        self.assertEqual(response.json()["like_count"], 1)

        response = self.client.delete(self.url)
        self.assertFalse(response.json()["is_liked"])
        self.assertEqual(response.json()["like_count"], 0)

    def test_repeated_like_counts_once(self):
        self.client.post(self.url)
        response = self.client.post(self.url)
        self.assertEqual(response.json()["like_count"], 1)
        self.assertEqual(Like.objects.count(), 1)
