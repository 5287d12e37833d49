"""Repository helpers for recipe discovery queries."""

from typing import Any, Dict, Optional, Sequence
from django.db.models import Q, QuerySet
from recipes.db_accessor import DB_Accessor
from recipes.models import Recipe


class RecipeRepo(DB_Accessor):
    """Repository for Recipe queries (owner listings, public search, trending)."""
    def __init__(self) -> None:
        """Initialise with the Recipe model."""
        super().__init__(Recipe)

    def list_for_owner_filtered(
        self,
        owner_id: Any,
        *,
        search: Optional[str] = None,
        category: Optional[str] = None,
        tag: Optional[str] = None,
        order_by: Sequence[str] = ("-created_at",),
    ) -> QuerySet:
        """Return the owner's recipes; the first given filter of search/category/tag wins."""
        filters: Dict[str, Any] = {"owner_id": owner_id}
        if search:
            filters["title__icontains"] = search
        elif category:
            filters["categories__icontains"] = category
        elif tag:
            filters["tags__icontains"] = tag
        return self.list(filters=filters, order_by=order_by)

    def list_public(
        self,
        *,
        search: Optional[str] = None,
        category: Optional[str] = None,
        order_by: Sequence[str] = ("-created_at",),
    ) -> QuerySet:
        """Return public recipes, optionally narrowed by title and category."""
        filters: Dict[str, Any] = {"is_public": True}
        if search:
            filters["title__icontains"] = search
        if category:
            filters["categories__icontains"] = category
        return self.list(filters=filters, order_by=order_by).select_related("owner")

    def search_public(
        self,
        term: Optional[str],
        *,
        category: Optional[str] = None,
        order_by: Sequence[str] = ("-created_at",),
    ) -> QuerySet:
        """Match `term` across title, description, tags and owner username."""
        if term and category:
            return self.list_public(search=term, category=category, order_by=order_by)
        qs = self.list_public(category=category, order_by=order_by)
        if term:
            qs = qs.filter(
                Q(title__icontains=term)
                | Q(description__icontains=term)
                | Q(tags__icontains=term)
                | Q(owner__username__icontains=term)
            ).distinct()
        return qs

    def most_liked_public(self, limit: int) -> QuerySet:
        """Return the top `limit` public recipes by cached like count."""
        # created_at/id keep ties in storage order
        qs = self.model.objects.filter(is_public=True).select_related("owner")
        return self._apply_slice(
            qs.order_by("-like_count", "created_at", "id"), limit=limit
        )
