"""
Persisted detail rows.

Each row holds one detail of one content item. The value lives in exactly one
of the typed columns, picked by ``value_type``; this keeps dates as real
datetimes in the database instead of strings inside a JSON blob, and it means
we can query details by value when we need to.

There is never a row holding a property's default value: setting a detail
back to its default deletes the row (see ``DetailStore.set_value``).
"""
from __future__ import annotations

from datetime import datetime
from typing import Any

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from ...lib.fields import detail_name_field, key_field
from .exceptions import TypeMismatch

__all__ = [
    "ContentDetail",
]


class ContentDetail(models.Model):
    """
    A single stored value for a property of a content item.

    .. no_pii:
    """

    class ValueType(models.TextChoices):
        BOOL = "bool", _("Boolean")
        INT = "int", _("Integer")
        FLOAT = "float", _("Float")
        DATETIME = "datetime", _("Date/time")
        STRING = "string", _("String")

    # Order matters: bool is a subclass of int, so it has to be checked first.
    PYTHON_TYPES: tuple[tuple[str, type], ...] = (
        ("bool", bool),
        ("int", int),
        ("float", float),
        ("datetime", datetime),
        ("string", str),
    )
    VALUE_COLUMNS: dict[str, str] = {
        "bool": "bool_value",
        "int": "int_value",
        "float": "float_value",
        "datetime": "datetime_value",
        "string": "string_value",
    }

    id = models.BigAutoField(primary_key=True)
    item_key = key_field()
    name = detail_name_field()
    value_type = models.CharField(max_length=10, choices=ValueType.choices)

    bool_value = models.BooleanField(null=True, blank=True)
    int_value = models.BigIntegerField(null=True, blank=True)
    float_value = models.FloatField(null=True, blank=True)
    datetime_value = models.DateTimeField(null=True, blank=True)
    string_value = models.TextField(null=True, blank=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["item_key", "name"],
                name="content_editables_uniq_item_detail",
            ),
        ]
        verbose_name = "Content Detail"
        verbose_name_plural = "Content Details"

    def __str__(self):
        return f"{self.item_key}[{self.name}] = {self.value!r}"

    @property
    def value(self) -> Any:
        return getattr(self, self.VALUE_COLUMNS[self.value_type])

    @classmethod
    def value_type_for(cls, name: str, value: Any) -> str:
        """
        Return the ValueType that can store ``value``.

        Raises TypeMismatch for values no column can hold.
        """
        for value_type, python_type in cls.PYTHON_TYPES:
            if isinstance(value, python_type):
                return value_type
        raise TypeMismatch(name, tuple(t for _vt, t in cls.PYTHON_TYPES), value)

    @classmethod
    def columns_for(cls, name: str, value: Any) -> dict[str, Any]:
        """
        All the column values needed to store ``value``, with every other
        typed column cleared.
        """
        value_type = cls.value_type_for(name, value)
        if value_type == "datetime" and settings.USE_TZ and timezone.is_naive(value):
            # The column would read back as an aware UTC datetime, not ``value``.
            raise TypeMismatch(
                name, datetime, value,
                message=_("'{name}' is a naive datetime; only timezone-aware datetimes can be stored").format(
                    name=name,
                ),
            )
        columns: dict[str, Any] = {column: None for column in cls.VALUE_COLUMNS.values()}
        columns["value_type"] = value_type
        columns[cls.VALUE_COLUMNS[value_type]] = value
        return columns
