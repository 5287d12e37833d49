"""Service helpers for recipe collections."""

import logging

from recipes.db_accessor import DB_Accessor
from recipes.exceptions import NotFoundError
from recipes.models import CollectionItem, RecipeCollection
from recipes.services.engagement import RecipeEngagementService
from recipes.services.ownership import assert_owner, caller_id

logger = logging.getLogger(__name__)


class CollectionService:
    """Encapsulate collection fetching and mutation."""

    def __init__(self, collection_model=RecipeCollection, collection_item_model=CollectionItem, engagement=None):
        self.collection_accessor = DB_Accessor(collection_model)
        self.item_accessor = DB_Accessor(collection_item_model)
        self.engagement = engagement or RecipeEngagementService()

    def create(self, owner, name):
        """Create an empty collection for the owner."""
        collection = self.collection_accessor.create(owner=owner, name=name)
        logger.info("User %s created collection %s", owner.pk, collection.pk)
        return collection

    def list_for_user(self, owner):
        """Return all collections for a user with prefetched items."""
        return self.collection_accessor.list_for_owner(
            caller_id(owner), order_by=("-created_at",)
        ).prefetch_related("items")

    def fetch_owned(self, collection_id, caller, action):
        """Fetch a collection the caller owns or raise."""
        collection = self.collection_accessor.get_by_id(collection_id)
        if collection is None:
            raise NotFoundError(f"Collection not found: {collection_id}")
        assert_owner(collection.owner_id, caller_id(caller), action)
        return collection

    def add_recipe(self, collection_id, recipe_id, caller):
        """Add a viewable recipe once; repeated adds are no-ops."""
        collection = self.fetch_owned(collection_id, caller, "modify your own collections")
        recipe = self.engagement.view(recipe_id, caller).recipe
        self.item_accessor.model.objects.get_or_create(collection=collection, recipe=recipe)
        return collection

    def remove_recipe(self, collection_id, recipe_id, caller):
        """Drop a recipe from the collection; absent recipes are ignored."""
        collection = self.fetch_owned(collection_id, caller, "modify your own collections")
        self.item_accessor.delete(collection_id=collection.pk, recipe_id=recipe_id)
        return collection

    def delete(self, collection_id, caller):
        """Delete a collection."""
        collection = self.fetch_owned(collection_id, caller, "delete your own collections")
        collection.delete()
        logger.info("Deleted collection %s", collection_id)

    def recipes_for(self, collection_id, caller):
        """Return recipes of the collection still viewable by the caller, oldest addition first."""
        collection = self.fetch_owned(collection_id, caller, "view your own collections")
        items = self.item_accessor.list_matching(
            "collection_id", collection.pk, order_by=("added_at", "id")
        ).select_related("recipe", "recipe__owner")
        return [item.recipe for item in items if self.engagement.can_view(item.recipe, caller)]
