"""Model representing a user's like on a recipe."""

from django.db import models
from .user import User
from .recipe import Recipe

class Like(models.Model):
    """User like on a recipe."""
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='likes'
    )

    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='likes'
    )

    # liker display name at the time of liking
    username = models.CharField(max_length=150)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Enforce one like per user/recipe pair."""
        constraints = [
            models.UniqueConstraint(
                fields=["user", "recipe"],
                name="uniq_like_user_recipe",
            ),
        ]

        db_table = "like"

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} → {self.recipe_id}"
