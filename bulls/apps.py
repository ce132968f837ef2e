"""Application configuration for the bulls app."""

from __future__ import annotations

from django.apps import AppConfig


class BullsConfig(AppConfig):
    """AppConfig for the bull registry.

    ``ready()`` stays empty so Django can start without touching the
    database; spreadsheet imports run through the ``import_bulls``
    management command or the upload view.
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'bulls'
    verbose_name = 'Bull registry'
