"""REST endpoints for recipes: CRUD, discovery, ratings, likes and copies."""

from django.conf import settings
from rest_framework import generics, permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from recipes.serializers import (
    RatingRequestSerializer,
    RatingSerializer,
    RecipeDetailSerializer,
    RecipeSummarySerializer,
    RecipeWriteSerializer,
)
from recipes.services import RecipeService
from recipes.views.view_utils import RecipePagination, query_int, query_text

recipe_service = RecipeService()
engagement_service = recipe_service.engagement


def _detail_response(view, status_code=status.HTTP_200_OK):
    return Response(RecipeDetailSerializer.for_view(view).data, status=status_code)


def _summaries(request, recipes):
    liked = engagement_service.liked_ids(request.user, recipes)
    return RecipeSummarySerializer(recipes, many=True, context={"request": request, "liked_ids": liked}).data


class RecipeSummaryListMixin:
    """Paginate a recipe queryset into summaries flagged with the caller's likes."""
    serializer_class = RecipeSummarySerializer
    pagination_class = RecipePagination

    def list(self, request, *args, **kwargs):
        page = self.paginate_queryset(self.get_queryset())
        return self.get_paginated_response(_summaries(request, page))


class RecipeListApi(RecipeSummaryListMixin, generics.ListCreateAPIView):
    """List the caller's recipes and allow creation."""
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        """
        Optionally restricts the returned recipes by a `search`, `category`
        or `tag` query parameter; the first one given wins.
        """
        return recipe_service.list_own_recipes(
            self.request.user,
            search=query_text(self.request, "search"),
            category=query_text(self.request, "category"),
            tag=query_text(self.request, "tag"),
        )

    def create(self, request, *args, **kwargs):
        """Validate the payload and create the recipe for the current user."""
        serializer = RecipeWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        recipe = recipe_service.create_recipe(request.user, serializer.validated_data)
        return _detail_response(engagement_service.view_of(recipe, request.user), status.HTTP_201_CREATED)


class PublicRecipeListApi(RecipeSummaryListMixin, generics.ListAPIView):
    """Public recipes filtered by title and category."""
    permission_classes = [AllowAny]

    def get_queryset(self):
        return recipe_service.list_public_recipes(
            search=query_text(self.request, "search"),
            category=query_text(self.request, "category"),
        )


class RecipeSearchApi(RecipeSummaryListMixin, generics.ListAPIView):
    """Free-text search across public recipes."""
    permission_classes = [AllowAny]

    def get_queryset(self):
        return recipe_service.search_public_recipes(
            query_text(self.request, "q"),
            category=query_text(self.request, "category"),
        )


class TrendingRecipesApi(APIView):
    """Most liked public recipes."""
    permission_classes = [AllowAny]

    def get(self, request):
        limit = query_int(request, "limit", settings.DISHLY_TRENDING_LIMIT)
        return Response(_summaries(request, engagement_service.most_liked(limit)))


class RecipeDetailApi(APIView):
    """Retrieve, update, or delete a recipe; ownership is enforced by the service."""
    permission_classes = [permissions.IsAuthenticatedOrReadOnly]

    def get(self, request, pk):
        return _detail_response(engagement_service.view(pk, request.user))

    def put(self, request, pk):
        """Partial update; omitted fields keep their values."""
        serializer = RecipeWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        recipe = recipe_service.update_recipe(pk, request.user, serializer.validated_data)
        return _detail_response(engagement_service.view_of(recipe, request.user))

    patch = put

    def delete(self, request, pk):
        recipe_service.delete_recipe(pk, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(["PATCH"])
@permission_classes([IsAuthenticated])
def toggle_visibility(request, pk):
    """Flip a recipe between public and private."""
    recipe = recipe_service.toggle_visibility(pk, request.user)
    return _detail_response(engagement_service.view_of(recipe, request.user))


@api_view(["PATCH"])
@permission_classes([IsAuthenticated])
def rate_recipe(request, pk):
    """Create or update the caller's rating for a recipe."""
    serializer = RatingRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    view = engagement_service.rate(
        pk,
        request.user,
        serializer.validated_data["rating"],
        serializer.validated_data.get("review"),
    )
    return _detail_response(view)


@api_view(["GET"])
@permission_classes([AllowAny])
def recipe_ratings(request, pk):
    ratings = engagement_service.ratings_for(pk, request.user)
    return Response(RatingSerializer(ratings, many=True).data)


@api_view(["POST", "DELETE"])
@permission_classes([IsAuthenticated])
def like_recipe(request, pk):
    """POST likes the recipe, DELETE removes the like; both are idempotent."""
    if request.method == "DELETE":
        return _detail_response(engagement_service.unlike(pk, request.user))
    return _detail_response(engagement_service.like(pk, request.user))


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def copy_recipe(request, pk):
    """Copy a public recipe into the caller's private recipes."""
    copy = recipe_service.copy_recipe(pk, request.user)
    return _detail_response(engagement_service.view_of(copy, request.user), status.HTTP_201_CREATED)
