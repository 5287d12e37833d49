"""REST endpoints for recipe collections; every route is owner-only."""

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from recipes.serializers import CollectionSerializer, RecipeSummarySerializer
from recipes.services import CollectionService

collection_service = CollectionService()


class CollectionListApi(APIView):
    """List the caller's collections and create new ones."""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        collections = collection_service.list_for_user(request.user)
        return Response(CollectionSerializer(collections, many=True).data)

    def post(self, request):
        serializer = CollectionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        collection = collection_service.create(request.user, serializer.validated_data["name"])
        return Response(CollectionSerializer(collection).data, status=status.HTTP_201_CREATED)


@api_view(["DELETE"])
@permission_classes([IsAuthenticated])
def delete_collection(request, collection_id):
    collection_service.delete(collection_id, request.user)
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def collection_recipes(request, collection_id):
    """Render the recipes of a collection the caller can still see."""
    recipes = collection_service.recipes_for(collection_id, request.user)
    liked = collection_service.engagement.liked_ids(request.user, recipes)
    serializer = RecipeSummarySerializer(recipes, many=True, context={"request": request, "liked_ids": liked})
    return Response(serializer.data)


@api_view(["POST", "DELETE"])
@permission_classes([IsAuthenticated])
def collection_recipe(request, collection_id, recipe_id):
    """POST adds the recipe to the collection, DELETE removes it."""
    if request.method == "DELETE":
        collection = collection_service.remove_recipe(collection_id, recipe_id, request.user)
    else:
        collection = collection_service.add_recipe(collection_id, recipe_id, request.user)
    return Response(CollectionSerializer(collection).data)
