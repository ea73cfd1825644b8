"""
Django admin for stored content details.
"""
from django.contrib import admin

from ...lib.admin_utils import ReadOnlyModelAdmin
from .models import ContentDetail


@admin.register(ContentDetail)
class ContentDetailAdmin(ReadOnlyModelAdmin):
    """
    Read-only view of the details stored for content items.
    """
    list_display = ["item_key", "name", "value_type", "display_value"]
    list_filter = ["value_type"]
    search_fields = ["item_key", "name"]
    fields = ["item_key", "name", "value_type", "display_value"]
    readonly_fields = fields

    @admin.display(description="Value")
    def display_value(self, detail: ContentDetail):
        return detail.value
