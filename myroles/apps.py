from __future__ import annotations

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _

from dashboard.checks import register_startup_checks


class MyRolesConfig(AppConfig):
    name = "myroles"
    # for translation of the name of the app displayed in admin.
    verbose_name = _("My roles in courses")

    default_auto_field = "django.db.models.BigAutoField"

    def ready(self):
        register_startup_checks()
