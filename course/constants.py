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

from django.utils.translation import gettext_lazy as _, pgettext_lazy


COURSE_SHORTNAME_REGEX = "(?P<course_shortname>[-_.a-zA-Z0-9]+)"
ROLE_SHORTNAME_REGEX = r"^[a-z][a-z0-9_]*$"


# {{{ participation status

class participation_status:  # noqa
    active = "active"
    suspended = "suspended"


PARTICIPATION_STATUS_CHOICES = (
        (participation_status.active,
            pgettext_lazy("Participation status", "Active")),
        (participation_status.suspended,
            pgettext_lazy("Participation status", "Suspended")),
        )

# }}}


# {{{ role permission

class role_permission:  # noqa
    delete_course = "delete_course"
    view_hidden_courses = "view_hidden_courses"
    view_hidden_categories = "view_hidden_categories"


ROLE_PERMISSION_CHOICES = (
        (role_permission.delete_course,
            pgettext_lazy("Role permission", "Delete course")),
        (role_permission.view_hidden_courses,
            pgettext_lazy("Role permission", "View hidden courses")),
        (role_permission.view_hidden_categories,
            pgettext_lazy("Role permission", "View hidden categories")),
        )

# }}}


# {{{ core roles

# Roles every site starts with. Their display name may be left blank, in
# which case the translated name below is used.
CORE_ROLES = (
        "manager",
        "coursecreator",
        "editingteacher",
        "teacher",
        "student",
        "guest",
        "user",
        "frontpage",
        )

CORE_ROLE_NAMES = {
        "manager": _("Manager"),
        "coursecreator": _("Course creator"),
        "editingteacher": _("Teacher"),
        "teacher": _("Non-editing teacher"),
        "student": _("Student"),
        "guest": _("Guest"),
        "user": _("Authenticated user"),
        "frontpage": _("Authenticated user on site home"),
        }


def is_core_role(shortname: str) -> bool:
    return shortname in CORE_ROLES

# }}}


# {{{ favourites

class favourite_component:  # noqa
    course = "core_course"


class favourite_item_type:  # noqa
    courses = "courses"

# }}}

# vim: foldmethod=marker
