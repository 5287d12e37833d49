from .aggregates import AggregateRecalculator
from .collections import CollectionService
from .engagement import RecipeEngagementService, RecipeView
from .ownership import assert_owner, caller_id, is_owner
from .recipes import RecipeService
from .shopping_lists import ShoppingListService, consolidate

__all__ = [
    "AggregateRecalculator",
    "CollectionService",
    "RecipeEngagementService",
    "RecipeService",
    "RecipeView",
    "ShoppingListService",
    "assert_owner",
    "caller_id",
    "consolidate",
    "is_owner",
]
