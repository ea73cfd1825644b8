"""
Helpers for the paths stored by URL editables.

Three kinds of values show up in a detail store:

* absolute paths, rooted at the server: ``/app/news/page``
* app-relative paths, rooted at the application: ``~/news/page``
* anything else (plain relative paths, external URLs), which we never touch

The application root comes from ``settings.CONTENT_EDITABLES["APPLICATION_PATH"]``
and falls back to Django's script prefix, so a site deployed under
``FORCE_SCRIPT_NAME`` gets the right root without extra configuration.
"""
from __future__ import annotations

import re

from django.conf import settings
from django.urls import get_script_prefix
from django.utils.translation import gettext as _

from .exceptions import InvalidPath

APP_RELATIVE_PREFIX = "~/"

# "https:", "mailto:", ... but not a Windows drive letter
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]+:")

# Characters that may follow the application root in a path under that root.
_ROOT_BOUNDARIES = ("/", "?", "#")


def application_path() -> str:
    """
    Return the application root, always with a trailing slash.
    """
    config = getattr(settings, "CONTENT_EDITABLES", {})
    app_path = config.get("APPLICATION_PATH") or get_script_prefix()
    validate_path_root(app_path)
    return _with_trailing_slash(app_path)


def validate_path_root(path: str):
    """
    Raise InvalidPath unless ``path`` can be used as an application root.
    """
    if not isinstance(path, str) or not path:
        raise InvalidPath(path, _("an application root must be a non-empty string"))
    if not path.startswith("/") or path.startswith("//"):
        raise InvalidPath(path, _("an application root must start with a single '/'"))
    if _SCHEME_RE.match(path) or "\\" in path or any(c.isspace() for c in path):
        raise InvalidPath(path, _("an application root must be a plain server path"))


def is_external(path: str | None) -> bool:
    if not path:
        return False
    return path.startswith("//") or bool(_SCHEME_RE.match(path))


def is_absolute(path: str | None) -> bool:
    """
    True for server-rooted paths like ``/app/page``.
    """
    if not path:
        return False
    return path.startswith("/") and not path.startswith("//")


def is_app_relative(path: str | None) -> bool:
    return bool(path) and path.startswith(APP_RELATIVE_PREFIX)


def to_relative(path: str | None, app_path: str | None = None) -> str | None:
    """
    Convert an absolute path under the application root into ``~/...`` form.

    The root comparison is case-insensitive. Anything that isn't an absolute
    path under the root comes back unchanged.
    """
    if not is_absolute(path):
        return path
    root = _with_trailing_slash(app_path) if app_path else application_path()
    if path.lower().startswith(root.lower()):
        return APP_RELATIVE_PREFIX + path[len(root):]
    if path.lower() == root.rstrip("/").lower():
        return APP_RELATIVE_PREFIX
    return path


def to_absolute(path: str | None, app_path: str | None = None) -> str | None:
    """
    Resolve ``~/...`` against the application root. Other values are returned
    unchanged.
    """
    if not is_app_relative(path):
        return path
    root = _with_trailing_slash(app_path) if app_path else application_path()
    return root + path[len(APP_RELATIVE_PREFIX):]


def rebase(current_path: str | None, from_app_path: str, to_app_path: str) -> str | None:
    """
    Move an absolute path from one application root to another.

    ``rebase("/app/old/page", "/app/old", "/app/new")`` gives
    ``"/app/new/page"``. Relative and external paths are left alone, as are
    absolute paths that live outside ``from_app_path``. The root only matches
    on a segment boundary, so ``/app/older/page`` is not under ``/app/old``.

    This keeps no state: rebasing a result again with the same roots will
    rewrite it again if it still matches, so call it once per move.
    """
    validate_path_root(from_app_path)
    validate_path_root(to_app_path)

    if not is_absolute(current_path):
        return current_path

    from_root = from_app_path.rstrip("/")
    to_root = to_app_path.rstrip("/")
    if not from_root:
        # Moving out of the server root: every absolute path is underneath it.
        return to_root + current_path

    if current_path == from_root:
        return to_root or "/"
    if current_path.startswith(from_root) and current_path[len(from_root)] in _ROOT_BOUNDARIES:
        remainder = current_path[len(from_root):]
        if not to_root and not remainder.startswith("/"):
            remainder = "/" + remainder
        return to_root + remainder
    return current_path


def _with_trailing_slash(path: str) -> str:
    return path if path.endswith("/") else path + "/"
