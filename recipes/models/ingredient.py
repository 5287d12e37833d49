"""Model for the ordered ingredient lines of a recipe."""

from django.db import models
from .recipe import Recipe


class Ingredient(models.Model):
    """Ingredient line; identified only by its position within the recipe."""
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='ingredients'
    )

    # stored verbatim: merging is case and whitespace sensitive
    name = models.CharField(max_length=255)

    quantity = models.FloatField(default=0)

    unit = models.CharField(max_length=50, blank=True, default="")

    # explicit display order
    position = models.PositiveIntegerField(default=0)

    class Meta:
        """Ordering and quantity constraint for ingredients."""
        db_table = "recipe_ingredient"
        ordering = ["position", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=0),
                name='ingredient_quantity_gte_0'
            ),
        ]

    def __str__(self):
        """Readable ingredient string with quantity."""
        return f"{self.name} ({self.quantity} {self.unit})"
