from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from recipes.models import (
    CollectionItem,
    Ingredient,
    Instruction,
    Rating,
    Recipe,
    RecipeCollection,
    ShoppingItem,
    ShoppingList,
    User,
)
from recipes.services import AggregateRecalculator


admin.site.register(User, UserAdmin)


class IngredientInline(admin.TabularInline):
    model = Ingredient
    extra = 0


class InstructionInline(admin.TabularInline):
    model = Instruction
    extra = 0


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    """Admin configuration for recipes; cached aggregates are read-only."""
    list_display = ('title', 'owner', 'is_public', 'average_rating', 'rating_count', 'like_count', 'created_at')
    list_filter = ('is_public', 'difficulty', 'created_at')
    search_fields = ('title', 'description', 'owner__username')
    readonly_fields = Recipe.AGGREGATE_FIELDS
    inlines = [IngredientInline, InstructionInline]
    actions = ['recalculate_ratings', 'make_private']

    @admin.action(description='Recalculate rating aggregates')
    def recalculate_ratings(self, request, queryset):
        """Recompute average rating and rating count from the Rating facts."""
        recalculator = AggregateRecalculator()
        for recipe in queryset:
            recalculator.recalculate(recipe.pk)

    @admin.action(description='Make selected recipes private')
    def make_private(self, request, queryset):
        queryset.update(is_public=False)


@admin.register(Rating)
class RatingAdmin(admin.ModelAdmin):
    list_display = ('recipe', 'username', 'value', 'updated_at')
    search_fields = ('username', 'recipe__title')
    readonly_fields = ('recipe', 'user', 'username', 'value', 'review', 'created_at', 'updated_at')


class CollectionItemInline(admin.TabularInline):
    model = CollectionItem
    extra = 0


@admin.register(RecipeCollection)
class RecipeCollectionAdmin(admin.ModelAdmin):
    list_display = ('name', 'owner', 'created_at')
    inlines = [CollectionItemInline]


class ShoppingItemInline(admin.TabularInline):
    model = ShoppingItem
    extra = 0


@admin.register(ShoppingList)
class ShoppingListAdmin(admin.ModelAdmin):
    list_display = ('name', 'owner', 'created_at')
    inlines = [ShoppingItemInline]
