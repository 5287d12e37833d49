"""Model representing an individual recipe instruction with ordering."""

from django.db import models
from .recipe import Recipe

class Instruction(models.Model):
    """Ordered instruction step for a recipe."""
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='instructions'
    )

    step_number = models.PositiveIntegerField()

    description = models.TextField(max_length=1000)

    class Meta:
        """Ordering for steps."""
        db_table = "recipe_instruction"
        ordering = ["step_number", "id"]

    def __str__(self):
        """Readable snippet of the step for admin/debugging."""
        return f"Step {self.step_number}: {self.description[:30]}..."
