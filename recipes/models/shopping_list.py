"""Shopping list and its ordered, checkable items."""

import uuid
from django.conf import settings
from django.db import models


class ShoppingList(models.Model):
    """Named list of merged ingredients owned by one user."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="shopping_lists",
    )

    name = models.CharField(max_length=255)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "shopping_list"

    def __str__(self) -> str:
        return f"ShoppingList(owner={self.owner_id}, name={self.name})"


class ShoppingItem(models.Model):
    """One merged line of a shopping list; `position` is its index."""
    shopping_list = models.ForeignKey(
        ShoppingList,
        on_delete=models.CASCADE,
        related_name="items",
        db_column="shopping_list_id",
    )

    position = models.PositiveIntegerField()

    ingredient_name = models.CharField(max_length=255)
    quantity = models.FloatField(default=0)
    unit = models.CharField(max_length=50, blank=True, default="")
    is_checked = models.BooleanField(default=False)

    class Meta:
        db_table = "shopping_item"
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(
                fields=["shopping_list", "position"],
                name="uniq_shopping_item_position",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.ingredient_name} ({self.quantity} {self.unit})"
