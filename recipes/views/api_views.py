from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def profile_api(request):
    """
    Return the identity the API sees for the current caller.
    The `id` is the value every ownership check compares against.
    """
    user = request.user
    return Response({
        "id": user.pk,
        "username": user.username,
        "email": user.email,
    })
