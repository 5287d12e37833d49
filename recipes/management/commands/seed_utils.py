"""Helper utilities for assembling seed payloads before they go through the services."""

from random import choice, randint, sample, uniform
from typing import Any, Dict, List

from recipes.models import Recipe
from .seed_data import INGREDIENT_POOL, categories, tags_pool


class SeedHelpers:
    """Builds recipe payloads shaped like validated API input."""

    def _build_recipe_data(self) -> Dict[str, Any]:
        """Construct a randomized recipe payload."""
        return {
            "title": self.faker.sentence(nb_words=4).rstrip(".")[:255],
            "description": self.faker.paragraph(nb_sentences=3)[:4000],
            "prep_time_minutes": randint(0, 60),
            "cook_time_minutes": randint(0, 90),
            "servings": choice([1, 2, 4, 6, 8]),
            "difficulty": choice([Recipe.DIFFICULTY_EASY, Recipe.DIFFICULTY_MEDIUM, Recipe.DIFFICULTY_HARD]),
            "is_public": randint(1, 4) != 1,
            "categories": sample(categories, randint(1, 2)),
            "tags": sample(tags_pool, randint(0, 4)),
            "image_urls": [self.faker.image_url() for _ in range(randint(0, 2))],
            "ingredients": self._build_ingredients(),
            "instructions": self._build_instructions(),
        }

    def _build_ingredients(self, min_count: int = 4, max_count: int = 8) -> List[Dict[str, Any]]:
        picked = sample(INGREDIENT_POOL, randint(min_count, max_count))
        return [
            {"name": name, "unit": unit, "quantity": round(uniform(low, high)), "order": position}
            for position, (name, unit, low, high) in enumerate(picked)
        ]

    def _build_instructions(self, min_steps: int = 3, max_steps: int = 7) -> List[Dict[str, Any]]:
        return [
            {"step_number": step, "description": self.faker.sentence(nb_words=12)[:1000]}
            for step in range(1, randint(min_steps, max_steps) + 1)
        ]


def create_username(first_name, last_name):
    """Build a simple lowercase username from a name."""
    return (first_name + last_name).lower()[:30]


def create_email(first_name, last_name):
    """Build a deterministic email for seeded users."""
    return first_name + '.' + last_name + '@example.org'
