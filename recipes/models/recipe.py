import uuid
from django.db import models
from .user import User

"""
Recipe model

Stores the recipe document a user publishes: title, description, timings,
difficulty, categories, tags and image URLs. Ingredients and instructions
live in their own ordered tables (see ingredient.py / instruction.py).

Cached aggregates:
- `average_rating` and `rating_count` are recomputed from the Rating facts
  after every rating write.
- `like_count` is incremented/decremented alongside Like facts.
Only recipes.services.aggregates writes these three fields.
"""


class Recipe(models.Model):
    DIFFICULTY_EASY = "EASY"
    DIFFICULTY_MEDIUM = "MEDIUM"
    DIFFICULTY_HARD = "HARD"

    DIFFICULTY_CHOICES = [
        (DIFFICULTY_EASY, "Easy"),
        (DIFFICULTY_MEDIUM, "Medium"),
        (DIFFICULTY_HARD, "Hard"),
    ]

    AGGREGATE_FIELDS = ("average_rating", "rating_count", "like_count")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    owner = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='recipes',
        db_column='owner_id'
    )

    title = models.CharField(max_length=255)
    description = models.TextField(max_length=4000, blank=True, default="")

    prep_time_minutes = models.PositiveIntegerField(default=0)
    cook_time_minutes = models.PositiveIntegerField(default=0)
    servings = models.PositiveIntegerField(default=1)
    difficulty = models.CharField(
        max_length=10,
        choices=DIFFICULTY_CHOICES,
        default=DIFFICULTY_EASY,
    )

    is_public = models.BooleanField(default=False)

    # string arrays
    image_urls = models.JSONField(default=list, blank=True)
    categories = models.JSONField(default=list, blank=True)
    tags = models.JSONField(default=list, blank=True)

    # cached aggregates
    average_rating = models.FloatField(default=0.0)
    rating_count = models.PositiveIntegerField(default=0)
    like_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'recipe'
        constraints = [
            models.CheckConstraint(
                condition=models.Q(average_rating__gte=0) & models.Q(average_rating__lte=5),
                name='recipe_average_rating_range',
            ),
        ]
        indexes = [
            models.Index(fields=["is_public", "-like_count"], name="recipe_public_likes_idx"),
        ]

    def __str__(self):
        return self.title

    @property
    def username(self):
        return self.owner.username
