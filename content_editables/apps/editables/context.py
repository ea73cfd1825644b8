"""
Binding context for one property during one editing operation.
"""
from __future__ import annotations

from typing import Any, TypeVar

from .controls import Control
from .items import ContentItem

T = TypeVar("T")


class ContainableContext:
    """
    Ties an editor control to the item property it edits.

    A context is created per request for each edited property and thrown away
    afterwards. It references the item but does not own it; all reads and
    writes go through the item's detail store.
    """

    def __init__(self, control: Control, item: ContentItem, name: str):
        self.control = control
        self.item = item
        self.name = name

    def get_value(self, value_type: type[T], default: T | None = None) -> T | None:
        return self.item.details.get_value(self.name, value_type, default)

    def set_value(self, value: Any, default: Any = None, value_type: type | None = None) -> None:
        self.item.details.set_value(self.name, value, default, value_type)

    def __repr__(self):
        return f"<ContainableContext {self.name!r} control={self.control!r}>"
