"""
Detail stores: the per-item bag of loosely typed values that editables read
and write.

Every store speaks the same small contract (``get``/``set``/``remove``) and
inherits the typed accessors that editables actually use. The typed setter is
where default elision happens: a value equal to the declared default is never
stored, so an absent key and "the default" are the same thing. That keeps the
store compact and lets a property's default change later without rewriting
existing items.
"""
from __future__ import annotations

from typing import Any, Iterator, TypeVar

from .exceptions import TypeMismatch

T = TypeVar("T")


class DetailStore:
    """
    Base class for detail stores.

    Subclasses implement the raw accessors; ``get_value`` and ``set_value``
    are built on top of them and should not need to be overridden.
    """

    def get(self, name: str) -> Any:
        """
        Return the stored value for ``name``, or None if nothing is stored.
        """
        raise NotImplementedError

    def set(self, name: str, value: Any) -> None:
        """
        Store ``value`` under ``name`` as-is.
        """
        raise NotImplementedError

    def remove(self, name: str) -> None:
        """
        Remove ``name``. Removing a missing name is not an error.
        """
        raise NotImplementedError

    def names(self) -> list[str]:
        raise NotImplementedError

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def get_value(self, name: str, value_type: type[T], default: T | None = None) -> T | None:
        """
        Typed read. A missing value gives ``default``; a value of the wrong
        type raises TypeMismatch instead of being cast.
        """
        value = self.get(name)
        if value is None:
            return default
        if not isinstance(value, value_type):
            raise TypeMismatch(name, value_type, value)
        return value

    def set_value(
        self,
        name: str,
        value: Any,
        default: Any = None,
        value_type: type | None = None,
    ) -> None:
        """
        Typed write with default elision: None, or a value equal to
        ``default``, removes the entry.

        With ``value_type``, anything else that isn't a ``value_type`` raises
        TypeMismatch and the store is left alone.
        """
        if value_type is not None and value is not None and not isinstance(value, value_type):
            raise TypeMismatch(name, value_type, value)
        if value is None or value == default:
            self.remove(name)
        else:
            self.set(name, value)


class DetailCollection(DetailStore):
    """
    In-memory detail store, for items that are persisted elsewhere (or not at
    all, like previews and tests).
    """

    def __init__(self, initial: dict[str, Any] | None = None):
        self._values: dict[str, Any] = {}
        for name, value in (initial or {}).items():
            self.set_value(name, value)

    def get(self, name: str) -> Any:
        return self._values.get(name)

    def set(self, name: str, value: Any) -> None:
        self._values[name] = value

    def remove(self, name: str) -> None:
        self._values.pop(name, None)

    def names(self) -> list[str]:
        return list(self._values)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def __repr__(self):
        return f"DetailCollection({self._values!r})"
