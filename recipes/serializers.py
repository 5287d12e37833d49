from rest_framework import serializers
from recipes.models import Ingredient, Instruction, Rating, Recipe, RecipeCollection, ShoppingItem, ShoppingList


class IngredientSerializer(serializers.ModelSerializer):
    """Ingredient line; `order` maps to the stored position."""
    order = serializers.IntegerField(source="position", default=0, min_value=0)
    unit = serializers.CharField(allow_blank=True, default="", max_length=50)
    quantity = serializers.FloatField(min_value=0)

    class Meta:
        model = Ingredient
        fields = ["name", "quantity", "unit", "order"]

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        value["order"] = value.pop("position", 0)
        return value


class InstructionSerializer(serializers.ModelSerializer):
    step_number = serializers.IntegerField(min_value=1)

    class Meta:
        model = Instruction
        fields = ["step_number", "description"]


class DifficultyField(serializers.ChoiceField):
    """Accepts difficulty in any case, stores it upper-cased."""

    def __init__(self, **kwargs):
        super().__init__(choices=Recipe.DIFFICULTY_CHOICES, **kwargs)

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = data.strip().upper()
        return super().to_internal_value(data)


class RecipeWriteSerializer(serializers.Serializer):
    """Validated payload for creating or updating a recipe."""
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, max_length=4000)
    prep_time_minutes = serializers.IntegerField(required=False, min_value=0)
    cook_time_minutes = serializers.IntegerField(required=False, min_value=0)
    servings = serializers.IntegerField(required=False, min_value=1)
    difficulty = DifficultyField(required=False)
    is_public = serializers.BooleanField(required=False)
    image_urls = serializers.ListField(child=serializers.CharField(), required=False)
    categories = serializers.ListField(child=serializers.CharField(), required=False)
    tags = serializers.ListField(child=serializers.CharField(), required=False)
    ingredients = IngredientSerializer(many=True, required=False)
    instructions = InstructionSerializer(many=True, required=False)


class RecipeSummarySerializer(serializers.ModelSerializer):
    """Compact recipe shape used in listings; `liked_ids` in context marks liked recipes."""
    username = serializers.CharField(read_only=True)
    is_liked = serializers.SerializerMethodField()

    class Meta:
        model = Recipe
        fields = [
            "id",
            "title",
            "description",
            "average_rating",
            "rating_count",
            "like_count",
            "image_urls",
            "prep_time_minutes",
            "cook_time_minutes",
            "categories",
            "difficulty",
            "servings",
            "is_liked",
            "username",
        ]
        read_only_fields = fields

    def get_is_liked(self, obj):
        return obj.pk in self.context.get("liked_ids", ())


class RecipeDetailSerializer(serializers.ModelSerializer):
    """Full recipe shape; `owner` is only exposed to the owner."""
    username = serializers.CharField(read_only=True)
    ingredients = IngredientSerializer(many=True, read_only=True)
    instructions = InstructionSerializer(many=True, read_only=True)
    is_liked = serializers.SerializerMethodField()

    class Meta:
        model = Recipe
        fields = [
            "id",
            "owner",
            "username",
            "title",
            "description",
            "prep_time_minutes",
            "cook_time_minutes",
            "servings",
            "difficulty",
            "is_public",
            "image_urls",
            "categories",
            "tags",
            "ingredients",
            "instructions",
            "average_rating",
            "rating_count",
            "like_count",
            "is_liked",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_is_liked(self, obj):
        return bool(self.context.get("is_liked", False))

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if not self.context.get("is_owner", False):
            data.pop("owner", None)
        return data

    @classmethod
    def for_view(cls, view, **kwargs):
        """Serialize a RecipeView with its viewer-specific flags."""
        return cls(view.recipe, context={"is_liked": view.is_liked, "is_owner": view.is_owner}, **kwargs)


class RatingRequestSerializer(serializers.Serializer):
    rating = serializers.FloatField(min_value=0.0, max_value=5.0)
    review = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=2000)


class RatingSerializer(serializers.ModelSerializer):
    recipe_id = serializers.UUIDField(read_only=True)
    user_id = serializers.IntegerField(read_only=True)
    rating = serializers.FloatField(source="value", read_only=True)

    class Meta:
        model = Rating
        fields = ["id", "recipe_id", "user_id", "username", "rating", "review", "created_at", "updated_at"]
        read_only_fields = fields


class CollectionSerializer(serializers.ModelSerializer):
    recipe_ids = serializers.ListField(child=serializers.UUIDField(), read_only=True)
    recipe_count = serializers.SerializerMethodField()

    class Meta:
        model = RecipeCollection
        fields = ["id", "name", "recipe_count", "recipe_ids", "created_at"]
        read_only_fields = ["id", "recipe_count", "recipe_ids", "created_at"]

    def get_recipe_count(self, obj):
        return len(obj.recipe_ids)


class ShoppingItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = ShoppingItem
        fields = ["ingredient_name", "quantity", "unit", "is_checked"]
        read_only_fields = fields


class ShoppingListSerializer(serializers.ModelSerializer):
    items = ShoppingItemSerializer(many=True, read_only=True)

    class Meta:
        model = ShoppingList
        fields = ["id", "name", "items", "created_at"]
        read_only_fields = fields


class ShoppingListRequestSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    # emptiness is rejected by the generator itself
    recipe_ids = serializers.ListField(child=serializers.UUIDField(), allow_empty=True)
