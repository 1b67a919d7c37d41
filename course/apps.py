from __future__ import annotations

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class CourseConfig(AppConfig):
    name = "course"
    # for translation of the name of "Course" app displayed in admin.
    verbose_name = _("Course module")

    default_auto_field = "django.db.models.BigAutoField"
