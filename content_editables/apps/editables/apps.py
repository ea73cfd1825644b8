"""
editables Django application initialization.
"""

from django.apps import AppConfig
from django.utils.module_loading import autodiscover_modules


class EditablesConfig(AppConfig):
    """
    Configuration for the editables Django application.
    """

    name = "content_editables.apps.editables"
    verbose_name = "Content Editables"
    default_auto_field = "django.db.models.BigAutoField"
    label = "content_editables"

    def ready(self):
        """
        Import every installed app's ``content_types`` module.

        Content item classes register themselves with the editables registry
        when their module is imported, so this builds all definitions once at
        start-up instead of on first use.
        """
        autodiscover_modules("content_types")
