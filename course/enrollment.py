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

from typing import TYPE_CHECKING

from django.contrib.auth import get_user_model
from django.db.models import Q

from course.constants import (
    participation_status,
    role_permission as rperm,
)
from course.models import (
    Course,
    Participation,
    Role,
    RoleAssignment,
)


# {{{ for mypy

if TYPE_CHECKING:
    import accounts.models

# }}}


def _wake_user(user):
    # "wake up" lazy object
    # http://stackoverflow.com/questions/20534577/int-argument-must-be-a-string-or-a-number-not-simplelazyobject  # noqa
    try:
        possible_user = user._wrapped
    except AttributeError:
        pass
    else:
        if isinstance(possible_user, get_user_model()):
            user = possible_user

    return user


# {{{ get_participation_for_user

def get_participation_for_user(
        user: accounts.models.User, course: Course,
        only_active: bool = True,
        ) -> Participation | None:
    user = _wake_user(user)

    if not user.is_authenticated:
        return None

    qset = Participation.objects.filter(user=user, course=course)
    if only_active:
        qset = qset.filter(status=participation_status.active)

    participations = list(qset)

    # The uniqueness constraint should have ensured that.
    assert len(participations) <= 1

    if len(participations) == 0:
        return None

    return participations[0]

# }}}


# {{{ courses of a user

def get_user_courses(
        user: accounts.models.User, only_active: bool = True) -> list[Course]:
    """Return the courses *user* is enrolled in, most recent first.

    :arg only_active: if *True*, only active participations count, and
        hidden courses are only returned where one of the user's roles in
        the course may view hidden courses. If *False*, every course the
        user was ever enrolled in is returned.
    """
    user = _wake_user(user)

    if not user.is_authenticated:
        return []

    participations = Participation.objects.filter(user=user)

    if only_active:
        participations = participations.filter(
                status=participation_status.active)
        may_view_hidden = participations.filter(
                role_assignments__role__permissions__permission=(
                    rperm.view_hidden_courses))

        qset = Course.objects.filter(
                Q(visible=True, id__in=participations.values("course"))
                | Q(id__in=may_view_hidden.values("course")))
    else:
        qset = Course.objects.filter(id__in=participations.values("course"))

    return list(qset.select_related("category"))

# }}}


# {{{ roles

def get_all_roles() -> list[Role]:
    return list(Role.objects.all())


def get_user_role_assignments(
        course: Course, user: accounts.models.User) -> list[RoleAssignment]:
    """Return every role assignment of *user* in *course*, including
    repeated assignments of the same role.
    """
    user = _wake_user(user)

    return list(
            RoleAssignment.objects.filter(
                participation__course=course,
                participation__user=user)
            .select_related("role")
            .order_by("role__sortorder", "id"))


def has_course_permission(
        user: accounts.models.User, course: Course, perm: str,
        only_active: bool = True) -> bool:
    """Whether *user* is enrolled in *course* with a role granting
    *perm*.
    """
    participation = get_participation_for_user(
            user, course, only_active=only_active)

    if participation is None:
        return False

    return participation.has_permission(perm)


def may_delete_course(user: accounts.models.User, course: Course) -> bool:
    """Superusers may delete any course. Others need a role granting
    *delete_course* in *course*, suspended enrollments included.
    """
    user = _wake_user(user)

    if user.is_superuser:
        return True

    return has_course_permission(
            user, course, rperm.delete_course, only_active=False)

# }}}

# vim: foldmethod=marker
