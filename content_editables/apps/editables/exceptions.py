"""
Exceptions raised by editable descriptors and the stores they talk to.

A missing detail is deliberately *not* represented here: an absent key in a
detail store always means "use the default value", so it never surfaces as an
error.
"""
from __future__ import annotations

from django.utils.translation import gettext as _


class EditableError(Exception):
    """
    Base exception for the editables app
    """

    def __init__(self, message: str = ""):
        super().__init__()
        self.message = message

    def __str__(self):
        return str(self.message)

    def __repr__(self):
        return f"{self.__class__.__name__}({str(self)})"


class TypeMismatch(EditableError, TypeError):
    """
    A bound control or a stored value is not of the type a descriptor expects.

    This is a broken pairing between a descriptor and its control (or a store
    that was written by something else), so callers should not retry.
    """

    def __init__(
        self,
        name: str,
        expected: type | tuple[type, ...],
        actual: object,
        message: str | None = None,
    ):
        super().__init__()
        self.name = name
        self.expected = expected
        self.actual = actual
        expected_types = expected if isinstance(expected, tuple) else (expected,)
        self.message = message or _("Expected {expected} for '{name}', got {actual}").format(
            expected=" or ".join(t.__name__ for t in expected_types),
            name=name,
            actual=type(actual).__name__,
        )


class InvalidPath(EditableError, ValueError):
    """
    A path failed structural validation. The offending string is kept on
    ``path``; nothing attempts to repair it.
    """

    def __init__(self, path: object, message: str = ""):
        super().__init__()
        self.path = path
        self.message = _("Invalid path {path!r}: {message}").format(path=path, message=message)


class UnknownContentType(EditableError, LookupError):
    """
    A content item class was used before it was registered.
    """

    def __init__(self, item_class: type):
        super().__init__()
        self.item_class = item_class
        self.message = _("Content type {name} is not registered").format(
            name=getattr(item_class, "__qualname__", repr(item_class)),
        )
