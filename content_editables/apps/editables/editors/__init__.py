"""
Editable property descriptors.
"""
from .base import AbstractEditable
from .date import EditableDate
from .url import EditableUrl, UrlRelativityMode

__all__ = [
    "AbstractEditable",
    "EditableDate",
    "EditableUrl",
    "UrlRelativityMode",
]
