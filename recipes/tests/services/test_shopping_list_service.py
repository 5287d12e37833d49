import uuid
from types import SimpleNamespace

from django.test import SimpleTestCase, TestCase

from recipes.exceptions import InvalidInputError, NotFoundError, PermissionDeniedError
from recipes.models import ShoppingItem, ShoppingList
from recipes.services.shopping_lists import ShoppingListService, consolidate
from recipes.tests.helpers import make_user, make_recipe


def _line(name, quantity, unit):
    return SimpleNamespace(name=name, quantity=quantity, unit=unit)


class ConsolidateTests(SimpleTestCase):
    def test_sums_quantities_per_name_and_unit(self):
        items = consolidate([_line("flour", 200, "g"), _line("flour", 300, "g")])
        self.assertEqual(len(items), 1)
        self.assertEqual((items[0].name, items[0].quantity, items[0].unit), ("flour", 500.0, "g"))
        self.assertFalse(items[0].is_checked)

    def test_keeps_first_occurrence_order(self):
        items = consolidate([
            _line("eggs", 2, ""),
            _line("flour", 100, "g"),
            _line("eggs", 1, ""),
            _line("milk", 200, "ml"),
        ])
        self.assertEqual([i.name for i in items], ["eggs", "flour", "milk"])
        self.assertEqual(items[0].quantity, 3.0)

    def test_no_unit_conversion(self):
        items = consolidate([_line("flour", 200, "g"), _line("flour", 1, "kg")])
        self.assertEqual([(i.quantity, i.unit) for i in items], [(200.0, "g"), (1.0, "kg")])

    def test_case_differences_stay_separate(self):
        items = consolidate([_line("Tomato", 1, ""), _line("tomato", 2, "")])
        self.assertEqual(len(items), 2)

    def test_empty_input(self):
        self.assertEqual(consolidate([]), [])


class GenerateTests(TestCase):
    def setUp(self):
        self.service = ShoppingListService()
        self.user = make_user(username="shopper")

    def _items(self, shopping_list):
        return [
            (item.ingredient_name, item.quantity, item.unit, item.is_checked)
            for item in shopping_list.items.all()
        ]

    def test_merges_same_ingredient_across_recipes(self):
        r1 = make_recipe(ingredients=[("flour", 200, "g")])
        r2 = make_recipe(ingredients=[("flour", 300, "g")])

        shopping_list = self.service.generate("Bake day", [r1.pk, r2.pk], self.user)

        self.assertEqual(self._items(shopping_list), [("flour", 500.0, "g", False)])
        self.assertEqual(shopping_list.owner, self.user)
        self.assertEqual(shopping_list.name, "Bake day")

    def test_different_units_yield_two_items(self):
        r1 = make_recipe(ingredients=[("flour", 200, "g")])
        r2 = make_recipe(ingredients=[("flour", 1, "kg")])

        shopping_list = self.service.generate("Bake day", [r1.pk, r2.pk], self.user)

        self.assertEqual(
            self._items(shopping_list),
            [("flour", 200.0, "g", False), ("flour", 1.0, "kg", False)],
        )

    def test_items_follow_recipe_and_ingredient_order(self):
        r1 = make_recipe(ingredients=[("eggs", 2, ""), ("milk", 100, "ml")])
        r2 = make_recipe(ingredients=[("sugar", 50, "g"), ("eggs", 1, "")])

        shopping_list = self.service.generate("Mixed", [r2.pk, r1.pk], self.user)

        self.assertEqual(
            [name for name, *_ in self._items(shopping_list)],
            ["sugar", "eggs", "milk"],
        )

    def test_same_recipe_twice_doubles_quantities(self):
        recipe = make_recipe(ingredients=[("rice", 150, "g")])
        shopping_list = self.service.generate("Double", [recipe.pk, recipe.pk], self.user)
        self.assertEqual(self._items(shopping_list), [("rice", 300.0, "g", False)])

    def test_private_recipes_of_others_can_be_used(self):
        recipe = make_recipe(is_public=False, ingredients=[("salt", 5, "g")])
        shopping_list = self.service.generate("Salt", [recipe.pk], self.user)
        self.assertEqual(len(self._items(shopping_list)), 1)

    def test_empty_recipe_ids_is_invalid_and_persists_nothing(self):
        with self.assertRaises(InvalidInputError):
            self.service.generate("Nothing", [], self.user)
        self.assertFalse(ShoppingList.objects.exists())

    def test_missing_recipe_aborts_whole_generation(self):
        recipe = make_recipe(ingredients=[("salt", 5, "g")])
        missing = uuid.uuid4()

        with self.assertRaises(NotFoundError) as ctx:
            self.service.generate("Partial", [recipe.pk, missing], self.user)

        self.assertIn(str(missing), str(ctx.exception.detail))
        self.assertFalse(ShoppingList.objects.exists())
        self.assertFalse(ShoppingItem.objects.exists())


class ShoppingListOwnershipTests(TestCase):
    def setUp(self):
        self.service = ShoppingListService()
        self.owner = make_user(username="owner")
        self.stranger = make_user(username="stranger")
        recipe = make_recipe(ingredients=[("flour", 200, "g"), ("eggs", 2, "")])
        self.shopping_list = self.service.generate("Weekly", [recipe.pk], self.owner)

    def _checked(self):
        return [item.is_checked for item in self.shopping_list.items.all()]

    def test_toggle_flips_only_that_item(self):
        self.service.toggle_item(self.shopping_list.pk, 1, self.owner)
        self.assertEqual(self._checked(), [False, True])

        self.service.toggle_item(self.shopping_list.pk, 1, self.owner)
        self.assertEqual(self._checked(), [False, False])

    def test_toggle_out_of_range_is_invalid(self):
        for index in (2, -1, None):
            with self.subTest(index=index):
                with self.assertRaises(InvalidInputError):
                    self.service.toggle_item(self.shopping_list.pk, index, self.owner)
        self.assertEqual(self._checked(), [False, False])

    def test_toggle_by_non_owner_denied(self):
        with self.assertRaises(PermissionDeniedError) as ctx:
            self.service.toggle_item(self.shopping_list.pk, 0, self.stranger)
        self.assertEqual(str(ctx.exception.detail), "You can only modify your own shopping lists.")
        self.assertEqual(self._checked(), [False, False])

    def test_toggle_unknown_list(self):
        with self.assertRaises(NotFoundError):
            self.service.toggle_item(uuid.uuid4(), 0, self.owner)

    def test_delete_by_non_owner_denied(self):
        with self.assertRaises(PermissionDeniedError):
            self.service.delete(self.shopping_list.pk, self.stranger)
        self.assertTrue(ShoppingList.objects.filter(pk=self.shopping_list.pk).exists())

    def test_delete_by_owner(self):
        self.service.delete(self.shopping_list.pk, self.owner)
        self.assertFalse(ShoppingList.objects.exists())
        self.assertFalse(ShoppingItem.objects.exists())

    def test_list_for_user_only_returns_own_lists(self):
        recipe = make_recipe(ingredients=[("salt", 1, "g")])
        self.service.generate("Theirs", [recipe.pk], self.stranger)

        names = [sl.name for sl in self.service.list_for_user(self.owner)]
        self.assertEqual(names, ["Weekly"])
