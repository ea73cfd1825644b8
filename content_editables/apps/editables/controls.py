"""
Server-side editor controls.

These are the small control objects that editables build and fill in. Each one
holds the value being edited, knows how to render itself with a Django form
widget, and knows how to read a posted value back from request data. Layout
(tabs, zones, fieldsets) belongs to whoever owns the EditorContainer, not to
the controls.
"""
from __future__ import annotations

import enum
from datetime import date, datetime, time
from operator import methodcaller
from typing import Any, Callable, Iterator, Mapping

from django import forms
from django.forms.utils import from_current_timezone, to_current_timezone
from django.utils.html import conditional_escape, format_html, format_html_join
from django.utils.safestring import SafeString, mark_safe


class UrlSelectorMode(enum.Flag):
    """
    What a UrlSelector lets editors pick.
    """
    ITEMS = 1
    FILES = 2
    ALL = ITEMS | FILES

    @property
    def labels(self) -> list[str]:
        return [
            mode.name.lower()
            for mode in (UrlSelectorMode.ITEMS, UrlSelectorMode.FILES)
            if mode in self
        ]


class Control:
    """
    Base class for controls. ``parent`` is set by the container it's added to.
    """

    def __init__(self, id: str | None = None, visible: bool = True):  # pylint: disable=redefined-builtin
        self.id = id
        self.visible = visible
        self.parent: Control | None = None

    def render(self) -> SafeString:
        raise NotImplementedError

    def __html__(self):
        return self.render()

    def __repr__(self):
        return f"<{self.__class__.__name__} id={self.id!r}>"


class EditorContainer(Control):
    """
    An ordered group of controls, e.g. one tab of an editing form.
    """

    def __init__(self, id: str | None = None, visible: bool = True):  # pylint: disable=redefined-builtin
        super().__init__(id, visible)
        self.controls: list[Control] = []

    def add(self, control: Control) -> Control:
        """
        Attach ``control`` at the end, detaching it from any previous parent.
        """
        if isinstance(control.parent, EditorContainer):
            control.parent.remove(control)
        control.parent = self
        self.controls.append(control)
        return control

    def remove(self, control: Control) -> None:
        self.controls.remove(control)
        control.parent = None

    def find(self, id: str) -> Control | None:  # pylint: disable=redefined-builtin
        """
        Depth-first search for a control with the given id.
        """
        for control in self.controls:
            if control.id == id:
                return control
            if isinstance(control, EditorContainer):
                found = control.find(id)
                if found is not None:
                    return found
        return None

    def __iter__(self) -> Iterator[Control]:
        return iter(self.controls)

    def __len__(self) -> int:
        return len(self.controls)

    def render(self) -> SafeString:
        return format_html_join(
            "\n", "{}", ((control.render(),) for control in self.controls if control.visible)
        )


class Literal(Control):
    """
    Plain text, escaped on output.
    """

    def __init__(self, text: Any = "", id: str | None = None):  # pylint: disable=redefined-builtin
        super().__init__(id)
        self.text = text

    def render(self) -> SafeString:
        return conditional_escape(self.text)


class Label(Control):
    def __init__(self, text: str, for_id: str | None, id: str | None = None):  # pylint: disable=redefined-builtin
        super().__init__(id)
        self.text = text
        self.for_id = for_id

    def render(self) -> SafeString:
        return format_html('<label for="{}">{}</label>', self.for_id or "", self.text)


class Hyperlink(Control):
    def __init__(self, text: str, url: str, id: str | None = None):  # pylint: disable=redefined-builtin
        super().__init__(id)
        self.text = text
        self.url = url

    def render(self) -> SafeString:
        return format_html('<a href="{}">{}</a>', self.url, self.text)


class PickerBox(Control):
    """
    One half of a DatePicker: the date box or the time box.

    Its input name is derived from the picker's id, so it follows the picker
    if the picker is renamed.
    """

    def __init__(
        self,
        suffix: str,
        widget: forms.Widget,
        field: forms.Field,
        part: Callable[[datetime], date | time],
    ):
        super().__init__()
        self.suffix = suffix
        self.widget = widget
        self.field = field
        self.part = part

    @property
    def name(self) -> str:
        parent_id = self.parent.id if self.parent is not None else None
        return f"{parent_id}_{self.suffix}"

    def clean(self, data: Mapping[str, Any]):
        """
        Parse this box's posted value. Raises ValidationError on bad input.
        """
        return self.field.clean(self.widget.value_from_datadict(data, {}, self.name))

    def render(self) -> SafeString:
        selected = self.parent.local_selection() if isinstance(self.parent, DatePicker) else None
        value = self.part(selected) if selected is not None else None
        return self.widget.render(self.name, value, attrs={"id": self.name})


class DatePicker(Control):
    """
    A date box and a time box that together edit one optional datetime.

    Hiding a box only affects rendering and posting: whatever part of
    ``selected_date`` that box would edit is kept as it is.
    """

    def __init__(self, id: str | None = None, selected_date: datetime | None = None):  # pylint: disable=redefined-builtin
        super().__init__(id)
        self.selected_date = selected_date
        self.date_box = PickerBox(
            "date",
            forms.DateInput(attrs={"type": "date"}, format="%Y-%m-%d"),
            forms.DateField(required=False),
            methodcaller("date"),
        )
        self.time_box = PickerBox(
            "time",
            forms.TimeInput(attrs={"type": "time"}, format="%H:%M"),
            forms.TimeField(required=False),
            methodcaller("time"),
        )
        self.date_box.parent = self
        self.time_box.parent = self

    def local_selection(self) -> datetime | None:
        """
        The selection converted to the current time zone, for display.
        """
        if self.selected_date is None:
            return None
        return to_current_timezone(self.selected_date)

    def load_post_data(self, data: Mapping[str, Any]) -> None:
        """
        Update ``selected_date`` from posted form data.

        An empty date means "no selection". An empty or hidden time box gives
        the current selection's time, or midnight.
        """
        current = self.local_selection()
        if self.date_box.visible:
            date_part = self.date_box.clean(data)
        else:
            date_part = current.date() if current is not None else None
        if self.time_box.visible:
            time_part = self.time_box.clean(data)
        else:
            time_part = None
        if time_part is None:
            time_part = current.time() if current is not None else time.min

        if date_part is None:
            self.selected_date = None
        else:
            self.selected_date = from_current_timezone(datetime.combine(date_part, time_part))

    def render(self) -> SafeString:
        boxes = [box.render() for box in (self.date_box, self.time_box) if box.visible]
        return format_html(
            '<span class="date-picker" id="{}">{}</span>',
            self.id or "",
            mark_safe("".join(boxes)),
        )


class UrlSelector(Control):
    """
    Text input for a path to a content item or a file.

    The picker dialog itself is client-side; it reads the modes from the
    ``data-`` attributes rendered here.
    """

    def __init__(
        self,
        id: str | None = None,  # pylint: disable=redefined-builtin
        url: str | None = None,
        available_modes: UrlSelectorMode = UrlSelectorMode.ALL,
        default_mode: UrlSelectorMode = UrlSelectorMode.ITEMS,
    ):
        super().__init__(id)
        self.url = url
        self.available_modes = available_modes
        self.default_mode = default_mode
        self.widget = forms.TextInput(attrs={"class": "url-selector"})

    def load_post_data(self, data: Mapping[str, Any]) -> None:
        value = self.widget.value_from_datadict(data, {}, self.id)
        self.url = (value or "").strip() or None

    def render(self) -> SafeString:
        return self.widget.render(
            self.id,
            self.url,
            attrs={
                "id": self.id,
                "data-available-modes": " ".join(self.available_modes.labels),
                "data-default-mode": " ".join(self.default_mode.labels),
            },
        )
