"""
Editables API

This is the surface the editing, display and import/export pipelines should
use. It drives the editables registered for a content type; it does not know
about any particular editable class.
"""
from __future__ import annotations

from logging import getLogger
from typing import IO, Iterable

from .capabilities import Displayable, RelativityMode, RelativityTransformer, WritingDisplayable, supports
from .context import ContainableContext
from .controls import Control, EditorContainer
from .items import ContentItem
from .registry import ContentTypeDefinition, get_definition, register_content_type, unregister_content_type

# The public API is listed in __all__. Internal helper functions that are
# private to this module start with an underscore.
__all__ = [
    "register_content_type",
    "unregister_content_type",
    "get_definition",
    "bind",
    "build_editors",
    "update_editors",
    "update_item",
    "render_display",
    "write_display",
    "rebase_item",
    "rebase_items",
]


log = getLogger(__name__)


def bind(item: ContentItem, name: str, control: Control) -> ContainableContext:
    """
    Create the binding context for editing ``name`` on ``item`` with
    ``control``.
    """
    return ContainableContext(control, item, name)


def build_editors(
    item: ContentItem,
    container: EditorContainer,
    *,
    containers: dict[str | None, EditorContainer] | None = None,
    with_labels: bool = False,
) -> dict[str, ContainableContext]:
    """
    Add an editor for every editable of ``item`` and load the stored values.

    Editors are added in editing order to ``container``, or to the container
    in ``containers`` keyed by the editable's ``container_name`` when there is
    one. Returns the binding contexts by property name; keep them for the
    matching ``update_item`` call.
    """
    definition = get_definition(item)
    contexts = {}
    for editable in definition:
        target = (containers or {}).get(editable.container_name, container)
        if with_labels:
            control = editable.add_to(target)
        else:
            control = editable.add_editor(target)
        contexts[editable.name] = bind(item, editable.name, control)
    update_editors(contexts, definition)
    return contexts


def update_editors(
    contexts: dict[str, ContainableContext],
    definition: ContentTypeDefinition | None = None,
) -> None:
    """
    Load stored values into the bound controls.
    """
    for name, context in contexts.items():
        item_definition = definition if definition is not None else get_definition(context.item)
        item_definition.get_editable(name).update_editor(context)


def update_item(item: ContentItem, contexts: dict[str, ContainableContext]) -> None:
    """
    Save every bound control's value back into ``item``.

    The writes are not wrapped in a transaction here; wrap the call when the
    item's details are persisted and the save has to be all-or-nothing.
    """
    definition = get_definition(item)
    for name, context in contexts.items():
        if context.item is not item:
            raise ValueError(f"Context for {name!r} is bound to a different item")
        definition.get_editable(name).update_item(context)


def render_display(item: ContentItem, name: str, container: EditorContainer) -> Control | None:
    """
    Add a read-only display of ``name`` to ``container``.

    Returns None, attaching nothing, when there is no stored value or the
    property's editable is not Displayable.
    """
    editable = get_definition(item).get_editable(name)
    if not supports(editable, Displayable):
        log.debug("%r is not displayable", editable)
        return None
    return editable.add_display(item, name, container)


def write_display(item: ContentItem, name: str, writer: IO[str]) -> bool:
    """
    Write the raw stored value of ``name`` to ``writer``.

    Returns False if the property's editable can't write itself.
    """
    editable = get_definition(item).get_editable(name)
    if not supports(editable, WritingDisplayable):
        return False
    editable.write(item, name, writer)
    return True


def rebase_item(
    item: ContentItem,
    from_app_path: str,
    to_app_path: str,
    mode: RelativityMode = RelativityMode.REBASING,
) -> dict[str, tuple[str, str]]:
    """
    Rewrite the stored paths of ``item`` for a move from one application root
    to another.

    Only editables that are RelativityTransformers and whose ``relative_when``
    includes ``mode`` take part. Returns ``{name: (old, new)}`` for the values
    that changed.

    Rebasing is not idempotent, so call this exactly once per move.
    """
    changes = {}
    for editable in get_definition(item).with_capability(RelativityTransformer):
        if not editable.rebases_on(mode):
            continue
        current = item.details.get_value(editable.name, editable.value_type)
        rebased = editable.rebase(current, from_app_path, to_app_path)
        if rebased != current:
            item.details.set_value(editable.name, rebased, editable.default, editable.value_type)
            changes[editable.name] = (current, rebased)
    if changes:
        log.info(
            "Rebased %s of %r from %s to %s", ", ".join(changes), item, from_app_path, to_app_path
        )
    return changes


def rebase_items(
    items: Iterable[ContentItem],
    from_app_path: str,
    to_app_path: str,
    mode: RelativityMode = RelativityMode.REBASING,
) -> int:
    """
    Rebase every item in ``items``. Returns how many values were rewritten.
    """
    return sum(len(rebase_item(item, from_app_path, to_app_path, mode)) for item in items)
