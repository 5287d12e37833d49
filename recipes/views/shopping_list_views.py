"""REST endpoints for shopping lists."""

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from recipes.serializers import ShoppingListRequestSerializer, ShoppingListSerializer
from recipes.services import ShoppingListService

shopping_list_service = ShoppingListService()


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def shopping_lists(request):
    lists = shopping_list_service.list_for_user(request.user)
    return Response(ShoppingListSerializer(lists, many=True).data)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def generate_shopping_list(request):
    """Merge the ingredients of the given recipes into a new shopping list."""
    serializer = ShoppingListRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    shopping_list = shopping_list_service.generate(
        serializer.validated_data["name"],
        serializer.validated_data["recipe_ids"],
        request.user,
    )
    return Response(ShoppingListSerializer(shopping_list).data, status=status.HTTP_201_CREATED)


@api_view(["PATCH"])
@permission_classes([IsAuthenticated])
def toggle_shopping_item(request, list_id, index):
    shopping_list = shopping_list_service.toggle_item(list_id, index, request.user)
    return Response(ShoppingListSerializer(shopping_list).data)


@api_view(["DELETE"])
@permission_classes([IsAuthenticated])
def delete_shopping_list(request, list_id):
    shopping_list_service.delete(list_id, request.user)
    return Response(status=status.HTTP_204_NO_CONTENT)
