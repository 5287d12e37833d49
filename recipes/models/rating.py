"""Model representing one user's rating of a recipe."""

import uuid
from django.db import models
from .user import User
from .recipe import Recipe


class Rating(models.Model):
    """Rating fact; at most one per (recipe, user), updated in place."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='ratings'
    )

    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='ratings'
    )

    # rater display name at the time of rating
    username = models.CharField(max_length=150)

    value = models.FloatField()
    review = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """One rating per user/recipe pair, value in [0, 5]."""
        db_table = "rating"
        constraints = [
            models.UniqueConstraint(
                fields=["recipe", "user"],
                name="uniq_rating_recipe_user",
            ),
            models.CheckConstraint(
                condition=models.Q(value__gte=0) & models.Q(value__lte=5),
                name="rating_value_range",
            ),
        ]

    def __str__(self):
        return f"{self.user_id} rated {self.recipe_id}: {self.value}"
