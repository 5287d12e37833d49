"""Maintenance of the cached aggregates stored on Recipe.

Ratings are recomputed from the full fact set; likes are counted
incrementally with atomic updates. Both paths lock the recipe row first so
writes for one recipe are serialized.
"""

import logging

from django.db import transaction
from django.db.models import Avg, Count, F

from recipes.db_accessor import DB_Accessor
from recipes.exceptions import NotFoundError
from recipes.models import Like, Rating, Recipe

logger = logging.getLogger(__name__)


class AggregateRecalculator:
    """Sole writer of Recipe.average_rating, rating_count and like_count."""

    def __init__(self, recipe_accessor=None, rating_model=Rating, like_model=Like):
        self.recipe_accessor = recipe_accessor or DB_Accessor(Recipe)
        self.rating_model = rating_model
        self.like_model = like_model

    def _locked_recipe(self, recipe_id):
        recipe = self.recipe_accessor.get_by_id(recipe_id, for_update=True)
        if recipe is None:
            raise NotFoundError(f"Recipe not found: {recipe_id}")
        return recipe

    def recalculate(self, recipe_id):
        """Recompute average rating and rating count from every Rating fact."""
        with transaction.atomic():
            recipe = self._locked_recipe(recipe_id)
            stats = self.rating_model.objects.filter(recipe_id=recipe.pk).aggregate(
                average=Avg("value"), count=Count("pk")
            )
            recipe.average_rating = float(stats["average"] or 0.0)
            recipe.rating_count = stats["count"] or 0
            self.recipe_accessor.save(
                recipe, update_fields=["average_rating", "rating_count", "updated_at"]
            )
        logger.debug(
            "Recalculated ratings for recipe %s: average=%.3f count=%d",
            recipe.pk, recipe.average_rating, recipe.rating_count,
        )
        return recipe

    def recount_likes(self, recipe_id):
        """Reset the cached like count from the Like facts, for bulk removals."""
        with transaction.atomic():
            recipe = self._locked_recipe(recipe_id)
            recipe.like_count = self.like_model.objects.filter(recipe_id=recipe.pk).count()
            self.recipe_accessor.save(recipe, update_fields=["like_count", "updated_at"])
        return recipe

    def increment_likes(self, recipe_id):
        """Add exactly one to the cached like count."""
        return self.recipe_accessor.update({"pk": recipe_id}, like_count=F("like_count") + 1)

    def decrement_likes(self, recipe_id):
        """Subtract one from the cached like count, never going below zero."""
        return self.recipe_accessor.update(
            {"pk": recipe_id, "like_count__gt": 0}, like_count=F("like_count") - 1
        )
