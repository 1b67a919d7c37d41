from __future__ import annotations


__copyright__ = """
Copyright (C) 2014 Andreas Kloeckner
Copyright (C) 2024 myroles-dashboard developers
"""

__license__ = """
Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as UserAdminBase
from django.utils.translation import gettext_lazy as _

from course.models import Course, Participation

from .models import User


class CourseListFilter(admin.SimpleListFilter):
    title = _("Course")
    parameter_name = "course__shortname"

    def lookups(self, request, model_admin):
        course_shortnames = Course.objects.values_list("shortname", flat=True)
        return zip(course_shortnames, course_shortnames, strict=True)

    def queryset(self, request, queryset):
        if self.value():
            participations = (
                Participation.objects
                .filter(course__shortname=self.value()))
            return queryset.filter(pk__in=participations.values_list("user__pk"))
        else:
            return queryset


@admin.register(User)
class UserAdmin(UserAdminBase):
    save_on_top = True

    list_editable = ("first_name", "last_name")
    list_filter = (
            *UserAdminBase.list_filter,
            CourseListFilter)  # type: ignore

    ordering = ["-date_joined"]

    def get_fieldsets(self, request, obj=None):
        fieldsets = super().get_fieldsets(request, obj)
        if request is not None and request.user.is_superuser:
            return fieldsets
        return tuple(
            fields for fields in fieldsets
             if "is_superuser" not in fields[1]["fields"]
             and "is_staff" not in fields[1]["fields"]
             and "user_permissions" not in fields[1]["fields"])
