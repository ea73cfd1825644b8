"""
Registry of content types and their editables.

A content type is registered once, usually by decorating its class::

    @register_content_type
    class NewsPage(ContentItem):
        ...

Registration walks the class and its bases for editables and freezes them into
a ContentTypeDefinition. The editing and display pipelines only ever look
editables up here; they never scan classes themselves.
"""
from __future__ import annotations

import logging
from typing import Iterator

from .editors.base import AbstractEditable
from .exceptions import UnknownContentType
from .items import ContentItem

log = logging.getLogger(__name__)

# Global registry
_CONTENT_TYPE_REGISTRY: dict[type, ContentTypeDefinition] = {}


class ContentTypeDefinition:
    """
    The editables of one content item class, in editing order.
    """

    def __init__(self, item_class: type, editables: list[AbstractEditable]):
        self.item_class = item_class
        self.editables: tuple[AbstractEditable, ...] = tuple(
            sorted(editables, key=AbstractEditable.sort_key)
        )
        self._by_name = {editable.name: editable for editable in self.editables}

    @classmethod
    def from_class(cls, item_class: type) -> ContentTypeDefinition:
        """
        Collect editables from ``item_class`` and its bases. An attribute
        redefined in a subclass replaces the base class's editable, and setting
        it to something else (e.g. None) removes it.
        """
        found: dict[str, AbstractEditable] = {}
        for klass in reversed(item_class.__mro__):
            for attr, value in vars(klass).items():
                if isinstance(value, AbstractEditable):
                    found[attr] = value
                else:
                    found.pop(attr, None)
        return cls(item_class, list(found.values()))

    @property
    def name(self) -> str:
        return self.item_class.__name__

    def __iter__(self) -> Iterator[AbstractEditable]:
        return iter(self.editables)

    def __len__(self) -> int:
        return len(self.editables)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def get_editable(self, name: str) -> AbstractEditable:
        """
        Raises KeyError if there's no editable for ``name``.
        """
        return self._by_name[name]

    def with_capability(self, capability: type) -> list[AbstractEditable]:
        return [editable for editable in self.editables if isinstance(editable, capability)]

    def containers(self) -> dict[str | None, list[AbstractEditable]]:
        """
        Editables grouped by ``container_name``, keeping editing order both
        between and within groups. Editables without a container are under
        None.
        """
        grouped: dict[str | None, list[AbstractEditable]] = {}
        for editable in self.editables:
            grouped.setdefault(editable.container_name, []).append(editable)
        return grouped

    def __repr__(self):
        return f"<ContentTypeDefinition {self.name}: {[e.name for e in self.editables]}>"


def register_content_type(item_class: type) -> type:
    """
    Register ``item_class`` and return it, so this works as a class decorator.

    Registering the same class again rebuilds its definition.
    """
    if not (isinstance(item_class, type) and issubclass(item_class, ContentItem)):
        raise TypeError(f"{item_class!r} is not a ContentItem subclass")
    definition = ContentTypeDefinition.from_class(item_class)
    if item_class in _CONTENT_TYPE_REGISTRY:
        log.info("Re-registering content type %s", definition.name)
    _CONTENT_TYPE_REGISTRY[item_class] = definition
    log.debug("Registered %r", definition)
    return item_class


def unregister_content_type(item_class: type) -> None:
    _CONTENT_TYPE_REGISTRY.pop(item_class, None)


def get_definition(item_or_class: ContentItem | type) -> ContentTypeDefinition:
    """
    Return the definition registered for an item or item class.

    Only the exact class is looked up: a subclass of a registered type has to
    be registered itself, since it may declare editables of its own.
    """
    item_class = item_or_class if isinstance(item_or_class, type) else type(item_or_class)
    try:
        return _CONTENT_TYPE_REGISTRY[item_class]
    except KeyError as exc:
        raise UnknownContentType(item_class) from exc


def registered_content_types() -> list[type]:
    return list(_CONTENT_TYPE_REGISTRY)
