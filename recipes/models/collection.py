import uuid
from django.conf import settings
from django.db import models

"""
RecipeCollection + CollectionItem models

A collection is a named, user-owned list of recipe references
("weeknight dinners", "baking", ...).

- Each collection belongs to exactly one user.
- CollectionItem is the join row; the (collection, recipe) unique constraint
  keeps a recipe from being added twice.
- Items cascade when either the collection or the recipe is deleted, so a
  deleted recipe never leaves a dangling reference behind.
"""


class RecipeCollection(models.Model):
    """A user's named collection of recipes."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="collections",
    )

    name = models.CharField(max_length=255)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "recipe_collection"

    def __str__(self) -> str:
        return f"RecipeCollection(owner={self.owner_id}, name={self.name})"

    @property
    def recipe_ids(self):
        return [item.recipe_id for item in self.items.order_by("added_at", "id")]


class CollectionItem(models.Model):
    """Join row linking a RecipeCollection to a Recipe."""
    collection = models.ForeignKey(
        RecipeCollection,
        on_delete=models.CASCADE,
        related_name="items",
        db_column="collection_id",
    )

    recipe = models.ForeignKey(
        "recipes.Recipe",
        on_delete=models.CASCADE,
        related_name="collection_items",
        db_column="recipe_id",
    )

    added_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """DB metadata and constraints for CollectionItem."""
        db_table = "recipe_collection_item"
        constraints = [
            models.UniqueConstraint(
                fields=["collection", "recipe"],
                name="uniq_collection_item",
            ),
        ]

    def __str__(self) -> str:
        """Readable label for admin/debugging."""
        return f"CollectionItem(collection={self.collection_id}, recipe={self.recipe_id})"
