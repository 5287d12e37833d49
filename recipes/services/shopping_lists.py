"""Shopping list generation and item bookkeeping.

Ingredients from every requested recipe are grouped by merge key; quantities
sharing a key are summed as raw numbers and the resulting items keep the
order in which each key was first seen.
"""

import logging
from dataclasses import dataclass

from django.db import transaction

from recipes.db_accessor import DB_Accessor
from recipes.exceptions import InvalidInputError, NotFoundError
from recipes.models import ShoppingItem, ShoppingList
from recipes.repos.recipe_repo import RecipeRepo
from recipes.services.ingredient_keys import merge_key
from recipes.services.ownership import assert_owner, caller_id

logger = logging.getLogger(__name__)


@dataclass
class MergedItem:
    name: str
    quantity: float
    unit: str
    is_checked: bool = False


def consolidate(ingredients):
    """Merge ingredient lines sharing name and unit, preserving first-seen order."""
    merged = {}
    for ingredient in ingredients:
        key = merge_key(ingredient.name, ingredient.unit)
        item = merged.get(key)
        if item is None:
            merged[key] = MergedItem(
                name=ingredient.name,
                quantity=float(ingredient.quantity),
                unit=ingredient.unit or "",
            )
        else:
            item.quantity += float(ingredient.quantity)
    return list(merged.values())


class ShoppingListService:
    """Generate shopping lists from recipes and manage their items."""

    def __init__(self, recipe_repo=None, list_accessor=None, item_accessor=None):
        self.recipe_repo = recipe_repo or RecipeRepo()
        self.list_accessor = list_accessor or DB_Accessor(ShoppingList)
        self.item_accessor = item_accessor or DB_Accessor(ShoppingItem)

    def _recipes_in_order(self, recipe_ids):
        recipes = []
        for recipe_id in recipe_ids:
            recipe = self.recipe_repo.get_by_id(recipe_id)
            if recipe is None:
                raise NotFoundError(f"Recipe not found: {recipe_id}")
            recipes.append(recipe)
        return recipes

    def generate(self, name, recipe_ids, owner):
        """Build and persist a consolidated shopping list; any missing recipe aborts."""
        if not recipe_ids:
            raise InvalidInputError("At least one recipe is required to generate a shopping list.")

        recipes = self._recipes_in_order(recipe_ids)
        ingredients = [ing for recipe in recipes for ing in recipe.ingredients.all()]
        items = consolidate(ingredients)

        with transaction.atomic():
            shopping_list = self.list_accessor.create(owner=owner, name=name)
            self.item_accessor.model.objects.bulk_create(
                [
                    ShoppingItem(
                        shopping_list=shopping_list,
                        position=position,
                        ingredient_name=item.name,
                        quantity=item.quantity,
                        unit=item.unit,
                        is_checked=item.is_checked,
                    )
                    for position, item in enumerate(items)
                ]
            )
        logger.info(
            "Generated shopping list %s with %d items from %d recipes",
            shopping_list.pk, len(items), len(recipes),
        )
        return shopping_list

    def fetch(self, list_id):
        shopping_list = self.list_accessor.get_by_id(list_id)
        if shopping_list is None:
            raise NotFoundError(f"Shopping list not found: {list_id}")
        return shopping_list

    def toggle_item(self, list_id, index, caller):
        """Flip the checked flag of the item at `index`."""
        shopping_list = self.fetch(list_id)
        assert_owner(shopping_list.owner_id, caller_id(caller), "modify your own shopping lists")

        items = list(self.item_accessor.list_matching("shopping_list_id", shopping_list.pk, order_by=("position",)))
        if index is None or not 0 <= index < len(items):
            logger.warning("Invalid item index %s for shopping list %s", index, shopping_list.pk)
            raise InvalidInputError("Invalid item index")

        item = items[index]
        item.is_checked = not item.is_checked
        self.item_accessor.save(item, update_fields=["is_checked"])
        return shopping_list

    def delete(self, list_id, caller):
        """Delete a shopping list and its items."""
        shopping_list = self.fetch(list_id)
        assert_owner(shopping_list.owner_id, caller_id(caller), "delete your own shopping lists")
        shopping_list.delete()
        logger.info("Deleted shopping list %s", list_id)

    def list_for_user(self, owner):
        """Return the owner's shopping lists, newest first."""
        return self.list_accessor.list_for_owner(
            caller_id(owner), order_by=("-created_at",)
        ).prefetch_related("items")
