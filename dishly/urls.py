"""
URL configuration for the dishly project.

The JSON API lives under /api/; the Django admin under /admin/.
"""
from django.contrib import admin
from django.urls import path
from recipes import views

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/profile/', views.profile_api, name='profile_api'),

    path('api/recipes/', views.RecipeListApi.as_view(), name='recipe_list_api'),
    path('api/recipes/public/', views.PublicRecipeListApi.as_view(), name='public_recipe_list_api'),
    path('api/recipes/public/trending/', views.TrendingRecipesApi.as_view(), name='trending_recipes_api'),
    path('api/recipes/search/', views.RecipeSearchApi.as_view(), name='recipe_search_api'),
    path('api/recipes/<uuid:pk>/', views.RecipeDetailApi.as_view(), name='recipe_detail_api'),
    path('api/recipes/<uuid:pk>/visibility/', views.toggle_visibility, name='recipe_visibility_api'),
    path('api/recipes/<uuid:pk>/rating/', views.rate_recipe, name='recipe_rating_api'),
    path('api/recipes/<uuid:pk>/ratings/', views.recipe_ratings, name='recipe_ratings_api'),
    path('api/recipes/<uuid:pk>/like/', views.like_recipe, name='recipe_like_api'),
    path('api/recipes/<uuid:pk>/copy/', views.copy_recipe, name='recipe_copy_api'),

    path('api/collections/', views.CollectionListApi.as_view(), name='collection_list_api'),
    path('api/collections/<uuid:collection_id>/', views.delete_collection, name='collection_detail_api'),
    path('api/collections/<uuid:collection_id>/recipes/', views.collection_recipes, name='collection_recipes_api'),
    path(
        'api/collections/<uuid:collection_id>/recipes/<uuid:recipe_id>/',
        views.collection_recipe,
        name='collection_recipe_api',
    ),

    path('api/shopping-lists/', views.shopping_lists, name='shopping_list_api'),
    path('api/shopping-lists/generate/', views.generate_shopping_list, name='shopping_list_generate_api'),
    path(
        'api/shopping-lists/<uuid:list_id>/items/<int:index>/toggle/',
        views.toggle_shopping_item,
        name='shopping_item_toggle_api',
    ),
    path('api/shopping-lists/<uuid:list_id>/', views.delete_shopping_list, name='shopping_list_detail_api'),
]
