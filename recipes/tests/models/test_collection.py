from django.test import TestCase
from django.db import IntegrityError

from recipes.models import CollectionItem, RecipeCollection
from recipes.tests.helpers import make_user, make_recipe


class RecipeCollectionModelTestCase(TestCase):
    def setUp(self):
        self.user = make_user(username="collector")
        self.collection = RecipeCollection.objects.create(owner=self.user, name="Baking")
        self.recipe = make_recipe()

    def test_recipe_ids_in_insertion_order(self):
        second = make_recipe()
        CollectionItem.objects.create(collection=self.collection, recipe=self.recipe)
        CollectionItem.objects.create(collection=self.collection, recipe=second)
        self.assertEqual(self.collection.recipe_ids, [self.recipe.pk, second.pk])

    def test_recipe_only_once_per_collection(self):
        CollectionItem.objects.create(collection=self.collection, recipe=self.recipe)
        with self.assertRaises(IntegrityError):
            CollectionItem.objects.create(collection=self.collection, recipe=self.recipe)

    def test_deleting_recipe_removes_reference(self):
        CollectionItem.objects.create(collection=self.collection, recipe=self.recipe)
        self.recipe.delete()
        self.assertEqual(self.collection.recipe_ids, [])

    def test_string_representation(self):
        self.assertIn("Baking", str(self.collection))
