import uuid

from django.urls import reverse

from recipes.models import ShoppingList
from recipes.tests.helpers import make_recipe
from recipes.tests.views.base import ApiTestCase


class ShoppingListApiTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.r1 = make_recipe(ingredients=[("flour", 200, "g"), ("eggs", 2, "")])
        self.r2 = make_recipe(ingredients=[("flour", 300, "g")])
        self.generate_url = reverse('shopping_list_generate_api')

    def _generate(self):
        return self.client.post(
            self.generate_url,
            {"name": "Weekly", "recipe_ids": [str(self.r1.pk), str(self.r2.pk)]},
            format="json",
        )

    def test_generate_merges_items(self):
        response = self._generate()

        self.assertEqual(response.status_code, 201)
        self.assertEqual(
            response.json()["items"],
            [
                {"ingredient_name": "flour", "quantity": 500.0, "unit": "g", "is_checked": False},
                {"ingredient_name": "eggs", "quantity": 2.0, "unit": "", "is_checked": False},
            ],
        )

    def test_generate_with_no_recipes_is_400(self):
        response = self.client.post(self.generate_url, {"name": "Empty", "recipe_ids": []}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertFalse(ShoppingList.objects.exists())

    def test_generate_with_missing_recipe_is_404(self):
        missing = uuid.uuid4()
        response = self.client.post(
            self.generate_url, {"name": "Broken", "recipe_ids": [str(self.r1.pk), str(missing)]}, format="json"
        )
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["message"], f"Recipe not found: {missing}")
        self.assertFalse(ShoppingList.objects.exists())

    def test_toggle_item(self):
        list_id = self._generate().json()["id"]

        response = self.client.patch(reverse('shopping_item_toggle_api', args=[list_id, 1]))

        self.assertEqual(response.status_code, 200)
        self.assertEqual([i["is_checked"] for i in response.json()["items"]], [False, True])

    def test_toggle_out_of_range(self):
        list_id = self._generate().json()["id"]
        response = self.client.patch(reverse('shopping_item_toggle_api', args=[list_id, 2]))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Invalid item index")

    def test_toggle_by_other_user_forbidden(self):
        list_id = self._generate().json()["id"]
        response = self.client_for(self.other_user).patch(reverse('shopping_item_toggle_api', args=[list_id, 0]))
        self.assertEqual(response.status_code, 403)

    def test_list_and_delete(self):
        list_id = self._generate().json()["id"]

        self.assertEqual(len(self.client.get(reverse('shopping_list_api')).json()), 1)
        self.assertEqual(len(self.client_for(self.other_user).get(reverse('shopping_list_api')).json()), 0)

        forbidden = self.client_for(self.other_user).delete(reverse('shopping_list_detail_api', args=[list_id]))
        self.assertEqual(forbidden.status_code, 403)

        response = self.client.delete(reverse('shopping_list_detail_api', args=[list_id]))
        self.assertEqual(response.status_code, 204)
        self.assertFalse(ShoppingList.objects.exists())
