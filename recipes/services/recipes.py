"""Service helpers for recipe creation, updates, copying and discovery."""

import logging

from django.db import transaction

from recipes.db_accessor import DB_Accessor
from recipes.exceptions import PermissionDeniedError
from recipes.models import Ingredient, Instruction
from recipes.repos.recipe_repo import RecipeRepo
from recipes.services.engagement import RecipeEngagementService
from recipes.services.ownership import assert_owner, caller_id

logger = logging.getLogger(__name__)


class RecipeService:
    """Encapsulate the recipe lifecycle; cached aggregates are never written here."""

    EDITABLE_FIELDS = (
        "title",
        "description",
        "prep_time_minutes",
        "cook_time_minutes",
        "servings",
        "difficulty",
        "is_public",
        "image_urls",
        "categories",
        "tags",
    )
    COPIED_FIELDS = tuple(f for f in EDITABLE_FIELDS if f != "is_public")

    def __init__(self, recipe_repo=None, engagement=None, ingredient_accessor=None, instruction_accessor=None):
        self.recipe_repo = recipe_repo or RecipeRepo()
        self.engagement = engagement or RecipeEngagementService(recipe_repo=self.recipe_repo)
        self.ingredient_accessor = ingredient_accessor or DB_Accessor(Ingredient)
        self.instruction_accessor = instruction_accessor or DB_Accessor(Instruction)

    def create_recipe(self, owner, data):
        """Create and return a recipe with its ingredients and instructions."""
        fields = {name: data[name] for name in self.EDITABLE_FIELDS if name in data}
        with transaction.atomic():
            recipe = self.recipe_repo.create(owner=owner, **fields)
            self.persist_relations(
                recipe, data.get("ingredients") or [], data.get("instructions") or []
            )
        logger.info("User %s created recipe %s", owner.pk, recipe.pk)
        return recipe

    def update_recipe(self, recipe_id, caller, data):
        """Apply a partial update; provided ingredient/instruction lists replace the old ones."""
        with transaction.atomic():
            recipe = self.engagement.fetch(recipe_id, for_update=True)
            assert_owner(recipe.owner_id, caller_id(caller), "update your own recipes")
            changed = [name for name in self.EDITABLE_FIELDS if data.get(name) is not None]
            for name in changed:
                setattr(recipe, name, data[name])
            # aggregates are left to AggregateRecalculator
            self.recipe_repo.save(recipe, update_fields=[*changed, "updated_at"])
            if data.get("ingredients") is not None:
                self.ingredient_accessor.delete(recipe_id=recipe.pk)
                self.persist_relations(recipe, data["ingredients"], [])
            if data.get("instructions") is not None:
                self.instruction_accessor.delete(recipe_id=recipe.pk)
                self.persist_relations(recipe, [], data["instructions"])
        recipe.refresh_from_db()
        return recipe

    def persist_relations(self, recipe, ingredients, instructions):
        """Store ingredient and instruction rows in their given order."""
        for item in ingredients:
            self.ingredient_accessor.create(
                recipe=recipe,
                name=item["name"],
                quantity=item["quantity"],
                unit=item.get("unit", ""),
                position=item.get("order", 0),
            )
        for step in instructions:
            self.instruction_accessor.create(
                recipe=recipe,
                step_number=step["step_number"],
                description=step["description"],
            )

    def delete_recipe(self, recipe_id, caller):
        """Delete a recipe with its ratings, likes and collection references."""
        recipe = self.engagement.fetch(recipe_id)
        assert_owner(recipe.owner_id, caller_id(caller), "delete your own recipes")
        with transaction.atomic():
            ratings_removed = self.engagement.rating_accessor.delete(recipe_id=recipe.pk)
            recipe.delete()
        logger.info("Deleted recipe %s and %d ratings", recipe_id, ratings_removed)

    def toggle_visibility(self, recipe_id, caller):
        """Flip a recipe between public and private."""
        recipe = self.engagement.fetch(recipe_id)
        assert_owner(recipe.owner_id, caller_id(caller), "change visibility of your own recipes")
        recipe.is_public = not recipe.is_public
        self.recipe_repo.save(recipe, update_fields=["is_public", "updated_at"])
        return recipe

    def copy_recipe(self, recipe_id, caller):
        """Create a private copy of a public recipe owned by the caller."""
        original = self.engagement.fetch(recipe_id)
        if not original.is_public:
            raise PermissionDeniedError("You can only copy public recipes.")
        data = {name: getattr(original, name) for name in self.COPIED_FIELDS}
        data["is_public"] = False
        data["ingredients"] = [
            {"name": ing.name, "quantity": ing.quantity, "unit": ing.unit, "order": ing.position}
            for ing in original.ingredients.all()
        ]
        data["instructions"] = [
            {"step_number": step.step_number, "description": step.description}
            for step in original.instructions.all()
        ]
        copy = self.create_recipe(caller, data)
        logger.info("Recipe %s copied to %s", original.pk, copy.pk)
        return copy

    def list_own_recipes(self, owner, search=None, category=None, tag=None):
        return self.recipe_repo.list_for_owner_filtered(
            caller_id(owner), search=search, category=category, tag=tag
        )

    def list_public_recipes(self, search=None, category=None):
        return self.recipe_repo.list_public(search=search, category=category)

    def search_public_recipes(self, term, category=None):
        return self.recipe_repo.search_public(term, category=category)
