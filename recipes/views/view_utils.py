from django.conf import settings
from rest_framework.pagination import PageNumberPagination

from recipes.exceptions import InvalidInputError


class RecipePagination(PageNumberPagination):
    """Page-number pagination with a `size` query parameter."""
    page_size = getattr(settings, "DISHLY_PAGE_SIZE", 20)
    page_size_query_param = "size"
    max_page_size = 100


def query_text(request, name):
    """
    Return a stripped query parameter, or None when absent or blank.
    """
    value = (request.query_params.get(name) or "").strip()
    return value or None


def query_int(request, name, default):
    """Parse an integer query parameter, raising InvalidInputError on garbage."""
    raw = request.query_params.get(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Query parameter '{name}' must be an integer.") from None
