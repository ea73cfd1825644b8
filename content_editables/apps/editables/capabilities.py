"""
Optional capabilities an editable can offer besides editing.

An editable advertises a capability by inheriting from it, and pipelines ask
with ``supports(editable, Capability)`` instead of assuming a class hierarchy.
None of these depend on each other: an editable may be displayable without
being writable, or rebase paths without being displayable at all.
"""
from __future__ import annotations

import enum
from typing import IO

from .controls import Control, EditorContainer
from .items import ContentItem


class RelativityMode(enum.Flag):
    """
    The situations in which a RelativityTransformer should rewrite paths.
    """
    NEVER = 0
    RENDERING = 1
    IMPORTING_OR_EXPORTING = 2
    REBASING = 4
    ALWAYS = RENDERING | IMPORTING_OR_EXPORTING | REBASING


class Displayable:
    """
    Can show a stored value read-only, without building an editor.
    """

    def add_display(self, item: ContentItem, name: str, container: EditorContainer) -> Control | None:
        """
        Attach a read-only control showing ``item``'s value for ``name`` and
        return it. Return None, attaching nothing, when there's no value.
        """
        raise NotImplementedError


class WritingDisplayable:
    """
    Can write a stored value straight to a text stream.
    """

    def write(self, item: ContentItem, name: str, writer: IO[str]) -> None:
        """
        Write the raw stored value, unformatted. Writes nothing when there is
        no value.
        """
        value = item[name]
        if value is not None:
            writer.write(str(value))


class RelativityTransformer:
    """
    Can rewrite a stored path when its content moves to another application
    root. ``relative_when`` says which moves should trigger that.
    """

    relative_when: RelativityMode = RelativityMode.ALWAYS

    def rebase(self, current_path: str | None, from_app_path: str, to_app_path: str) -> str | None:
        raise NotImplementedError

    def rebases_on(self, mode: RelativityMode) -> bool:
        return bool(self.relative_when & mode)


def supports(editable, capability: type) -> bool:
    return isinstance(editable, capability)
