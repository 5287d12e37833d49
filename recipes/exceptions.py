"""Error taxonomy shared by the services and the API layer.

Every error is terminal for the current operation and is propagated
unchanged; the DRF exception handler maps them straight to HTTP responses.
"""

from rest_framework import status
from rest_framework.exceptions import APIException


class RecipeServiceError(APIException):
    """Base class for domain errors raised by the recipes services."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Request could not be completed."
    default_code = "error"


class NotFoundError(RecipeServiceError):
    """An entity id does not resolve."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found."
    default_code = "not_found"


class PermissionDeniedError(RecipeServiceError):
    """Ownership check failed, self-rating, or viewing a private recipe."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You do not have permission to perform this action."
    default_code = "permission_denied"


class InvalidInputError(RecipeServiceError):
    """Caller supplied input the operation cannot act on."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input."
    default_code = "invalid"
