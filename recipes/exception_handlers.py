"""DRF exception handler adding a flat `message` to every error body."""

import logging

from rest_framework.views import exception_handler

from recipes.exceptions import RecipeServiceError

logger = logging.getLogger(__name__)


def _message_for(detail):
    if isinstance(detail, dict):
        if "detail" in detail:
            return _message_for(detail["detail"])
        return "Validation failed."
    if isinstance(detail, list):
        return _message_for(detail[0]) if detail else ""
    return str(detail)


def recipes_exception_handler(exc, context):
    """Delegate to DRF, then attach `message` alongside `detail`."""
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, RecipeServiceError):
        view = context.get("view")
        logger.warning(
            "%s in %s: %s", type(exc).__name__, type(view).__name__ if view else "?", exc.detail
        )

    if isinstance(response.data, dict):
        response.data.setdefault("message", _message_for(response.data))
    else:
        response.data = {"detail": response.data, "message": _message_for(response.data)}
    return response
