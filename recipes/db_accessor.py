from typing import Any, Dict, List, Mapping, Optional, Sequence, Type
from django.core.exceptions import ValidationError
from django.db.models import Model, QuerySet


class DB_Accessor:
    """Generic data accessor to wrap basic queryset operations."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        limit: Optional[int] = None,
        offset: int = 0,
        as_dict: bool = False,
    ) -> QuerySet | List[Dict[str, Any]]:
        """Return a filtered/sliced queryset (or list of dicts)."""
        qs: QuerySet = self.model.objects.filter(**(filters or {}))
        qs = self._apply_ordering(qs, order_by)
        qs = self._apply_slice(qs, offset=offset, limit=limit)
        return list(qs.values()) if as_dict else qs

    def _apply_ordering(self, qs: QuerySet, order_by: Sequence[str]) -> QuerySet:
        return qs.order_by(*order_by) if order_by else qs

    def _apply_slice(
        self, qs: QuerySet, *, offset: int = 0, limit: Optional[int] = None
    ) -> QuerySet:
        if not (offset or limit is not None):
            return qs
        start = max(0, int(offset))
        end = None if limit is None else start + max(0, int(limit))
        return qs[start:end]

    def list_for_owner(self, owner_id: Any, order_by: Sequence[str] = ()) -> QuerySet:
        """Return every object owned by `owner_id`."""
        return self.list(filters={"owner_id": owner_id}, order_by=order_by)

    def list_matching(self, field: str, value: Any, order_by: Sequence[str] = ()) -> QuerySet:
        """Return every object whose `field` equals `value`."""
        return self.list(filters={field: value}, order_by=order_by)

    def get(self, **lookup: Any) -> Model:
        """Fetch a single object matching the lookup."""
        return self.model.objects.get(**lookup)

    def get_by_id(self, pk: Any, *, for_update: bool = False) -> Optional[Model]:
        """Fetch by primary key; None when missing or not a valid key."""
        qs = self.model.objects.select_for_update() if for_update else self.model.objects
        try:
            return qs.get(pk=pk)
        except (self.model.DoesNotExist, ValidationError, ValueError):
            return None

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def save(self, obj: Model, update_fields: Optional[Sequence[str]] = None) -> Model:
        """Persist an object (insert or update) and return it."""
        obj.save(update_fields=update_fields)
        return obj

    def update(self, lookup: Mapping[str, Any], **data: Any) -> int:
        """Update objects matching lookup; return count updated."""
        return self.model.objects.filter(**lookup).update(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
