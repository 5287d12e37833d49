"""Rating, like and view operations on recipes.

Owns the recompute-on-write policy: every rating write is followed by a
full recalculation, every like/unlike adjusts the cached like count by one.
"""

import logging
from dataclasses import dataclass

from django.db import transaction

from recipes.db_accessor import DB_Accessor
from recipes.exceptions import InvalidInputError, NotFoundError, PermissionDeniedError
from recipes.models import Like, Rating, Recipe
from recipes.repos.recipe_repo import RecipeRepo
from recipes.services.aggregates import AggregateRecalculator
from recipes.services.ownership import caller_id, is_owner

logger = logging.getLogger(__name__)


@dataclass
class RecipeView:
    """A recipe as seen by one viewer."""

    recipe: Recipe
    is_liked: bool = False
    is_owner: bool = False


class RecipeEngagementService:
    """Encapsulate rating, liking and access-checked viewing of recipes."""

    def __init__(self, recipe_repo=None, rating_accessor=None, like_accessor=None, recalculator=None):
        self.recipe_repo = recipe_repo or RecipeRepo()
        self.rating_accessor = rating_accessor or DB_Accessor(Rating)
        self.like_accessor = like_accessor or DB_Accessor(Like)
        self.recalculator = recalculator or AggregateRecalculator(recipe_accessor=self.recipe_repo)

    def fetch(self, recipe_id, *, for_update=False):
        """Return the recipe or raise NotFoundError."""
        recipe = self.recipe_repo.get_by_id(recipe_id, for_update=for_update)
        if recipe is None:
            raise NotFoundError(f"Recipe not found: {recipe_id}")
        return recipe

    def can_view(self, recipe, viewer) -> bool:
        """Owners always see their recipes; everyone else only public ones."""
        return recipe.is_public or is_owner(recipe.owner_id, caller_id(viewer))

    def is_liked(self, recipe, viewer) -> bool:
        viewer_id = caller_id(viewer)
        if viewer_id is None:
            return False
        return self.like_accessor.list(filters={"recipe_id": recipe.pk, "user_id": viewer_id}).exists()

    def liked_ids(self, viewer, recipes):
        """Return the ids among `recipes` the viewer has liked."""
        viewer_id = caller_id(viewer)
        if viewer_id is None:
            return set()
        likes = self.like_accessor.list(
            filters={"user_id": viewer_id, "recipe_id__in": [recipe.pk for recipe in recipes]}
        )
        return set(likes.values_list("recipe_id", flat=True))

    def view_of(self, recipe, viewer=None):
        """Build the viewer-specific view without an access check."""
        return RecipeView(
            recipe=recipe,
            is_liked=self.is_liked(recipe, viewer),
            is_owner=is_owner(recipe.owner_id, caller_id(viewer)),
        )

    def view(self, recipe_id, viewer=None):
        """Return the recipe view, enforcing the owner-or-public access policy."""
        recipe = self.fetch(recipe_id)
        if not self.can_view(recipe, viewer):
            raise PermissionDeniedError("You don't have permission to view this recipe.")
        return self.view_of(recipe, viewer)

    def rate(self, recipe_id, rater, value, review=None):
        """Create or overwrite the rater's rating, then recompute the aggregates.

        `value` is expected to be validated to [0.0, 5.0] by the caller.
        """
        rater_id = caller_id(rater)
        with transaction.atomic():
            recipe = self.fetch(recipe_id, for_update=True)
            if is_owner(recipe.owner_id, rater_id):
                logger.warning("User %s tried to rate own recipe %s", rater_id, recipe.pk)
                raise PermissionDeniedError("You cannot rate your own recipes.")

            rating = self.rating_accessor.list(
                filters={"recipe_id": recipe.pk, "user_id": rater_id}
            ).first()
            if rating is not None:
                rating.value = value
                if review is not None:
                    rating.review = review
                self.rating_accessor.save(rating, update_fields=["value", "review", "updated_at"])
            else:
                self.rating_accessor.create(
                    recipe=recipe,
                    user=rater,
                    username=rater.display_name,
                    value=value,
                    review=review or "",
                )
            recipe = self.recalculator.recalculate(recipe.pk)

        logger.info("User %s rated recipe %s with %s", rater_id, recipe.pk, value)
        return self.view_of(recipe, rater)

    def ratings_for(self, recipe_id, viewer=None):
        """Return the Rating facts of a recipe the viewer may see, newest first."""
        recipe = self.view(recipe_id, viewer).recipe
        return self.rating_accessor.list_matching("recipe_id", recipe.pk, order_by=("-updated_at", "-id"))

    def like(self, recipe_id, liker):
        """Record a like once; repeated likes are no-ops."""
        liker_id = caller_id(liker)
        with transaction.atomic():
            recipe = self.fetch(recipe_id, for_update=True)
            _, created = self.like_accessor.model.objects.get_or_create(
                recipe=recipe,
                user=liker,
                defaults={"username": liker.display_name},
            )
            if created:
                self.recalculator.increment_likes(recipe.pk)
                logger.info("User %s liked recipe %s", liker_id, recipe.pk)
        recipe.refresh_from_db()
        return RecipeView(recipe=recipe, is_liked=True, is_owner=is_owner(recipe.owner_id, liker_id))

    def unlike(self, recipe_id, liker):
        """Remove a like if present; unliking twice is a no-op."""
        liker_id = caller_id(liker)
        with transaction.atomic():
            recipe = self.fetch(recipe_id, for_update=True)
            removed = self.like_accessor.delete(recipe_id=recipe.pk, user_id=liker_id)
            if removed:
                self.recalculator.decrement_likes(recipe.pk)
                logger.info("User %s unliked recipe %s", liker_id, recipe.pk)
        recipe.refresh_from_db()
        return RecipeView(recipe=recipe, is_liked=False, is_owner=is_owner(recipe.owner_id, liker_id))

    def most_liked(self, limit):
        """Return the `limit` most liked public recipes."""
        try:
            limit = int(limit)
        except (TypeError, ValueError):
            raise InvalidInputError("Limit must be a non-negative integer.") from None
        if limit < 0:
            raise InvalidInputError("Limit must be a non-negative integer.")
        return list(self.recipe_repo.most_liked_public(limit))
