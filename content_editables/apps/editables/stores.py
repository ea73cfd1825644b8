"""
Detail store backed by the ContentDetail table.
"""
from __future__ import annotations

from logging import getLogger
from typing import Any

from django.db.transaction import atomic

from .details import DetailStore
from .models import ContentDetail

log = getLogger(__name__)


class DatabaseDetailStore(DetailStore):
    """
    Reads and writes the details of one content item, identified by
    ``item_key``.

    Every write goes straight to the database. Batching the writes for one
    item into a single transaction is up to the caller, e.g.::

        with atomic():
            api.update_item(page, contexts)
    """

    def __init__(self, item_key: str):
        self.item_key = item_key

    def _details(self):
        return ContentDetail.objects.filter(item_key=self.item_key)

    def get(self, name: str) -> Any:
        try:
            return self._details().get(name=name).value
        except ContentDetail.DoesNotExist:
            return None

    def set(self, name: str, value: Any) -> None:
        columns = ContentDetail.columns_for(name, value)
        with atomic():
            ContentDetail.objects.update_or_create(
                item_key=self.item_key,
                name=name,
                defaults=columns,
            )

    def remove(self, name: str) -> None:
        deleted, _by_model = self._details().filter(name=name).delete()
        if deleted:
            log.debug("Removed detail %s of %s", name, self.item_key)

    def names(self) -> list[str]:
        return list(self._details().order_by("name").values_list("name", flat=True))

    def as_dict(self) -> dict[str, Any]:
        return {detail.name: detail.value for detail in self._details().order_by("name")}

    def __repr__(self):
        return f"DatabaseDetailStore({self.item_key!r})"
