"""
URL editable, for links to content items or files.
"""
from __future__ import annotations

import enum

from .. import paths
from ..capabilities import Displayable, RelativityMode, RelativityTransformer, WritingDisplayable
from ..context import ContainableContext
from ..controls import Control, EditorContainer, Hyperlink, UrlSelector, UrlSelectorMode
from ..items import ContentItem
from .base import AbstractEditable


class UrlRelativityMode(enum.Enum):
    """
    How an EditableUrl stores the path it's given.
    """
    # Store whatever the editor entered.
    ABSOLUTE = "absolute"
    # Store paths under the application root as ~/...
    APPLICATION = "application"


class EditableUrl(AbstractEditable, RelativityTransformer, WritingDisplayable, Displayable):
    """
    Edits a path to a content item or a file.

    ``relative_to`` is applied on every save. With ``ABSOLUTE`` the path is
    stored exactly as entered, so a relative path stays relative; with
    ``APPLICATION`` absolute paths under the application root are stored as
    ``~/...`` and survive the site moving to another root.

    ``relative_when`` controls which moves should ``rebase`` stored paths; the
    rewrite itself is always ``paths.rebase``.
    """

    control_class = UrlSelector
    value_type = str
    default_sort_order = 30

    def __init__(
        self,
        title: str | None = None,
        sort_order: int | None = None,
        *,
        available_modes: UrlSelectorMode = UrlSelectorMode.ALL,
        opening_mode: UrlSelectorMode = UrlSelectorMode.ITEMS,
        relative_to: UrlRelativityMode = UrlRelativityMode.ABSOLUTE,
        relative_when: RelativityMode = RelativityMode.ALWAYS,
        **kwargs,
    ):
        super().__init__(title, sort_order, **kwargs)
        self.available_modes = available_modes
        self.opening_mode = opening_mode
        self.relative_to = relative_to
        self.relative_when = relative_when

    def add_editor(self, container: EditorContainer) -> Control:
        selector = UrlSelector(
            id=self.name,
            available_modes=self.available_modes,
            default_mode=self.opening_mode,
        )
        container.add(selector)
        return selector

    def update_item(self, context: ContainableContext) -> None:
        selector = self.get_control(context)
        url = selector.url or None
        if self.relative_to is not UrlRelativityMode.ABSOLUTE:
            url = paths.to_relative(url)
        context.set_value(url, self.default, str)

    def update_editor(self, context: ContainableContext) -> None:
        selector = self.get_control(context)
        selector.url = context.get_value(str, self.default)

    def rebase(self, current_path: str | None, from_app_path: str, to_app_path: str) -> str | None:
        return paths.rebase(current_path, from_app_path, to_app_path)

    def add_display(self, item: ContentItem, name: str, container: EditorContainer) -> Control | None:
        value = item.details.get_value(name, str)
        if not value:
            return None
        return container.add(Hyperlink(value, paths.to_absolute(value)))
