"""
Field helpers shared by the models in this project.

Detail names and item keys are identifiers that come from code (property
names) or from other systems, so they must compare case-sensitively on every
backend. MySQL is case-insensitive by default while SQLite and Postgres are
not, which is why the collation is pinned per database vendor here.
"""
from __future__ import annotations

from django.db import models

CASE_SENSITIVE_COLLATIONS = {
    "sqlite": "BINARY",
    "mysql": "utf8mb4_bin",
}


class MultiCollationCharField(models.CharField):
    """
    CharField with a collation chosen by database vendor.

    Django's own ``db_collation`` only takes a single value, which can't be
    valid for both SQLite (tests) and MySQL (production) at once.
    """

    def __init__(self, *args, db_collations=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.db_collations = db_collations or {}

    def db_parameters(self, connection):
        db_params = super().db_parameters(connection)
        if connection.vendor in self.db_collations:
            db_params["collation"] = self.db_collations[connection.vendor]
        return db_params

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        if self.db_collations:
            kwargs["db_collations"] = self.db_collations
        return name, path, args, kwargs


def case_sensitive_char_field(**kwargs) -> MultiCollationCharField:
    """
    Return a case-sensitive ``MultiCollationCharField``.

    "Title" and "title" are two different details, and a unique index over
    them must not collide.
    """
    final_kwargs = {
        "null": False,
        "db_collations": dict(CASE_SENSITIVE_COLLATIONS),
    }
    final_kwargs.update(kwargs)
    return MultiCollationCharField(**final_kwargs)


def key_field(**kwargs) -> MultiCollationCharField:
    """
    Externally created identifier for a content item.

    The content item hierarchy lives outside this app, so details refer to
    their owner by this key rather than by a foreign key.
    """
    return case_sensitive_char_field(max_length=500, blank=False, **kwargs)


def detail_name_field(**kwargs) -> MultiCollationCharField:
    """
    Name of a detail, which is the name of the property it backs.
    """
    return case_sensitive_char_field(max_length=255, blank=False, **kwargs)
