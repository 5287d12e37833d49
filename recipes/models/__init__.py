from .user import User
from .recipe import Recipe
from .ingredient import Ingredient
from .instruction import Instruction
from .rating import Rating
from .like import Like
from .collection import RecipeCollection, CollectionItem
from .shopping_list import ShoppingList, ShoppingItem

__all__ = [
    "User",
    "Recipe",
    "Ingredient",
    "Instruction",
    "Rating",
    "Like",
    "RecipeCollection",
    "CollectionItem",
    "ShoppingList",
    "ShoppingItem",
]
