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

from typing import Any

from django.conf import settings
from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _, pgettext

from course.models import (
    Course,
    CourseCategory,
    Favourite,
    Participation,
    Role,
    RoleAssignment,
    RolePermission,
)


# {{{ list filter helper

def _filter_related_only(filter_arg: str) -> tuple[str, Any]:
    return (filter_arg, admin.RelatedOnlyFieldListFilter)

# }}}


# {{{ categories

@admin.register(CourseCategory)
class CourseCategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "parent", "visible", "path")
    list_editable = ("visible",)
    list_filter = ("visible",)
    search_fields = ("name",)
    readonly_fields = ("path",)

# }}}


# {{{ course

@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = (
            "shortname",
            "fullname",
            "category",
            "start_date",
            "end_date",
            "visible")
    list_editable = (
            "fullname",
            "start_date",
            "end_date",
            "visible")
    list_filter = (
            _filter_related_only("category"),
            "visible")
    date_hierarchy = "start_date"

    search_fields = (
            "shortname",
            "fullname")

    save_on_top = True

# }}}


# {{{ roles

class RolePermissionInline(admin.TabularInline):
    model = RolePermission
    extra = 3


@admin.register(Role)
class RoleAdmin(admin.ModelAdmin):
    inlines = (RolePermissionInline,)

    @admin.display(
        description=_("Display name")
    )
    def get_name(self, obj):
        return obj.get_name()

    @admin.display(
        description=_("Built-in"),
        boolean=True,
    )
    def get_is_core_role(self, obj):
        return obj.is_core_role

    list_display = ("id", "shortname", "get_name", "sortorder",
            "get_is_core_role")
    list_editable = ("sortorder",)
    search_fields = ("shortname", "name")

# }}}


# {{{ participations

class RoleAssignmentInline(admin.TabularInline):
    model = RoleAssignment
    extra = 1


@admin.register(Participation)
class ParticipationAdmin(admin.ModelAdmin):
    inlines = (RoleAssignmentInline,)

    @admin.display(
        description=_("Roles")
    )
    def get_roles(self, obj):
        return obj.get_role_desc()

    @admin.display(
        description=pgettext("real name of a user", "Name"),
        ordering="user__last_name",
    )
    def get_user(self, obj):
        return format_html(
                "<a href='{}'>{}</a>",
                reverse(
                    "admin:{}_change".format(
                        settings.AUTH_USER_MODEL.replace(".", "_").lower()),
                    args=(obj.user.id,)),
                obj.user.get_full_name())

    list_display = (
            "user",
            "get_user",
            "course",
            "get_roles",
            "status",
            )
    list_filter = (_filter_related_only("course"), "status")
    raw_id_fields = ("user",)

    search_fields = (
            "course__shortname",
            "user__username",
            "user__first_name",
            "user__last_name",
            )

# }}}


# {{{ favourites

@admin.register(Favourite)
class FavouriteAdmin(admin.ModelAdmin):
    list_display = ("user", "component", "item_type", "item_id",
            "time_created")
    list_filter = ("component", "item_type")
    raw_id_fields = ("user",)

# }}}

# vim: foldmethod=marker
