from typing import Any, Mapping, Optional, Sequence, Type
from django.db.models import Model, Q, QuerySet


class DBAccessor:
    """Generic data accessor wrapping the queryset calls repositories share."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def query(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        where: Optional[Q] = None,
        exclude: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        for_update: bool = False,
    ) -> QuerySet:
        """Return a filtered, ordered queryset, row-locked when for_update is set."""
        qs: QuerySet = self.model.objects.filter(**(filters or {}))
        if where is not None:
            qs = qs.filter(where)
        if exclude:
            qs = qs.exclude(**exclude)
        if for_update:
            qs = qs.select_for_update()
        return qs.order_by(*order_by) if order_by else qs

    def first(self, **lookup: Any) -> Optional[Model]:
        """Return the first row matching lookup, or None."""
        return self.model.objects.filter(**lookup).first()

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def update(self, lookup: Mapping[str, Any], **data: Any) -> int:
        """Update objects matching lookup; return count updated."""
        return self.model.objects.filter(**lookup).update(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
