"""
Date/time editable.
"""
from __future__ import annotations

from datetime import datetime

from django.utils import formats
from django.utils.timezone import template_localtime

from ..capabilities import Displayable, WritingDisplayable
from ..context import ContainableContext
from ..controls import Control, DatePicker, EditorContainer, Literal
from ..items import ContentItem
from .base import AbstractEditable


class EditableDate(AbstractEditable, Displayable, WritingDisplayable):
    """
    Edits an optional datetime with a date box and a time box.

    ``show_date`` and ``show_time`` only hide the boxes; a hidden part keeps
    whatever the picker already holds. No selection is stored as no value.
    """

    control_class = DatePicker
    value_type = datetime
    default_sort_order = 20

    def __init__(
        self,
        title: str | None = None,
        sort_order: int | None = None,
        *,
        show_date: bool = True,
        show_time: bool = True,
        **kwargs,
    ):
        super().__init__(title, sort_order, **kwargs)
        self.show_date = show_date
        self.show_time = show_time

    def add_editor(self, container: EditorContainer) -> Control:
        picker = DatePicker(id=self.name)
        picker.time_box.visible = self.show_time
        picker.date_box.visible = self.show_date
        container.add(picker)
        return picker

    def update_editor(self, context: ContainableContext) -> None:
        picker = self.get_control(context)
        picker.selected_date = context.get_value(datetime, self.default)

    def update_item(self, context: ContainableContext) -> None:
        picker = self.get_control(context)
        context.set_value(picker.selected_date, self.default, datetime)

    def add_display(self, item: ContentItem, name: str, container: EditorContainer) -> Control | None:
        value = item.details.get_value(name, datetime)
        if value is None:
            return None
        return container.add(Literal(formats.localize(template_localtime(value))))
