"""
The base class for editable property descriptors.
"""
from __future__ import annotations

from typing import Any

from django.utils.translation import gettext as _

from ..context import ContainableContext
from ..controls import Control, EditorContainer, Label, Literal
from ..exceptions import TypeMismatch


class AbstractEditable:
    """
    Marks a content item property as editable and knows how to edit it.

    An editable is declared as a class attribute of a ContentItem subclass,
    which also makes it a data descriptor for that property: reading
    ``item.prop`` is a typed read from the item's details, and assigning to it
    is a default-elided write.

    Every editable goes through the same three steps during an edit:

    1. ``add_editor`` builds a fresh control inside a container. It never
       touches the detail store.
    2. ``update_editor`` copies the stored value into the control.
    3. ``update_item`` copies the control's value back into the store.

    ``title``, ``sort_order`` and ``container_name`` are only read by whatever
    lays out the editing form. Once an editable is attached to a class it is
    read-only configuration, shared by every request.

    To create an editable, subclass this and set:

    * ``control_class``: the control type ``add_editor`` creates; any other
      control in a context is a TypeMismatch
    * ``value_type``: the type stored in the detail store
    * ``default_sort_order``
    """

    control_class: type[Control] = Control
    value_type: type = object
    default_sort_order = 0

    def __init__(
        self,
        title: str | None = None,
        sort_order: int | None = None,
        *,
        container_name: str | None = None,
        help_text: str = "",
        default: Any = None,
        name: str | None = None,
    ):
        self.title = title
        self.sort_order = self.default_sort_order if sort_order is None else sort_order
        self.container_name = container_name
        self.help_text = help_text
        self.default = default
        self.name = name
        self._bound = False

    def __setattr__(self, attr: str, value: Any) -> None:
        if getattr(self, "_bound", False):
            raise AttributeError(
                _("{editable} is attached to a content type and can't be changed").format(editable=self)
            )
        super().__setattr__(attr, value)

    def __set_name__(self, owner: type, name: str) -> None:
        if self._bound:
            if name != self.name:
                raise TypeError(
                    _("{editable} is already attached as '{bound}', not '{name}'").format(
                        editable=self, bound=self.name, name=name,
                    )
                )
            return
        if self.name is None:
            self.name = name
        self._bound = True

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.details.get_value(self.name, self.value_type, self.default)

    def __set__(self, instance, value) -> None:
        instance.details.set_value(self.name, value, self.default, self.value_type)

    @property
    def label(self) -> str:
        return self.title or self.name or ""

    def sort_key(self) -> tuple[int, str]:
        return (self.sort_order, self.name or "")

    def add_to(self, container: EditorContainer) -> Control:
        """
        Add a label, the editor, and the help text (if any) to ``container``.

        Returns the editor control.
        """
        container.add(Label(self.label, for_id=self.name, id=f"lbl{self.name}"))
        editor = self.add_editor(container)
        if self.help_text:
            container.add(Literal(self.help_text, id=f"hlp{self.name}"))
        return editor

    def add_editor(self, container: EditorContainer) -> Control:
        """
        Create a new control seeded with this editable's options, add it to
        ``container`` and return it.
        """
        raise NotImplementedError

    def update_editor(self, context: ContainableContext) -> None:
        """
        Load the stored value into ``context.control``. An absent value means
        the default.
        """
        raise NotImplementedError

    def update_item(self, context: ContainableContext) -> None:
        """
        Save the value of ``context.control`` into the item's details.
        """
        raise NotImplementedError

    def get_control(self, context: ContainableContext) -> Control:
        """
        Return the bound control, which must be a ``control_class``.
        """
        control = context.control
        if not isinstance(control, self.control_class):
            raise TypeMismatch(self.name or "", self.control_class, control)
        return control

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name!r}>"
