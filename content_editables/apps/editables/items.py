"""
The content item contract that editables need.

The real content hierarchy (pages, parts, their parents and children) lives
outside this app. All editables care about is that an item owns a detail store,
so content classes subclass ContentItem and declare their editable properties
as class attributes::

    @register_content_type
    class NewsPage(ContentItem):
        published = EditableDate("Published", 20, show_time=False)
        link = EditableUrl("Read more", 30)
"""
from __future__ import annotations

from typing import Any

from .details import DetailCollection, DetailStore


class ContentItem:
    """
    Base class for anything that has editable details.
    """

    def __init__(self, details: DetailStore | None = None, **values):
        """
        Keyword arguments set editable properties. Any other name is a
        TypeError; use ``set_detail`` for details without an editable.
        """
        self.details: DetailStore = details if details is not None else DetailCollection()
        for name, value in values.items():
            if not hasattr(getattr(type(self), name, None), "__set__"):
                raise TypeError(
                    f"{self.__class__.__name__}() got an unexpected keyword argument '{name}'"
                )
            setattr(self, name, value)

    def __getitem__(self, name: str) -> Any:
        """
        Raw stored value for ``name``, or None when nothing is stored.
        """
        return self.details.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.details.set_value(name, value)

    def get_detail(self, name: str, default: Any = None) -> Any:
        value = self.details.get(name)
        return default if value is None else value

    def set_detail(self, name: str, value: Any, default: Any = None) -> None:
        self.details.set_value(name, value, default)

    def __repr__(self):
        return f"<{self.__class__.__name__}: {self.details!r}>"
