from __future__ import annotations

__copyright__ = """
Copyright (C) 2017 Dong Zhuang, Andreas Kloeckner, Zesheng Wang
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

import datetime

from django.contrib.auth import get_user_model
from django.contrib.auth.models import Permission
from django.test import override_settings

from course.constants import participation_status
from myroles.block import MyRolesInCoursesBlock

from tests import factories


NOW = datetime.datetime(2024, 5, 15, 12, 0, tzinfo=datetime.timezone.utc)
ONE_DAY = datetime.timedelta(days=1)


def grant_view_content(user):
    perm = Permission.objects.get(
            content_type__app_label="myroles", codename="view_content")
    user.user_permissions.add(perm)

    # re-fetch to drop the permission cache of the auth backend
    return get_user_model().objects.get(pk=user.pk)


class MyRolesTestMixin:
    """Sets up a user allowed to view the block, its block instance and
    two supported roles, "editingteacher" and "student". A third role,
    "guest", exists but is not supported.
    """

    def setUp(self):  # noqa
        super().setUp()

        self.teacher_role = factories.RoleFactory(
                shortname="editingteacher", sortorder=3)
        self.student_role = factories.RoleFactory(
                shortname="student", sortorder=5)
        self.guest_role = factories.RoleFactory(
                shortname="guest", sortorder=6)

        self.user = grant_view_content(factories.UserFactory())
        self.config = factories.BlockInstanceFactory(owner=self.user)

        self.settings_override = override_settings(
                MYROLES_ENABLED=True,
                MYROLES_SUPPORTED_ROLES=(
                    f"{self.teacher_role.id},{self.student_role.id}"),
                MYROLES_SHOW_DELETE_ICON=False,
                MYROLES_SKIP_COURSE_CAPABILITY_CHECK=False)
        self.settings_override.enable()
        self.addCleanup(self.settings_override.disable)

    def get_block(self, user=None, now=NOW):
        if user is None:
            user = self.user
        return MyRolesInCoursesBlock(user, self.config, now=now)

    def make_course(self, start_delta=-ONE_DAY, end_delta=None, **kwargs):
        kwargs["start_date"] = NOW + start_delta
        if end_delta is not None:
            kwargs["end_date"] = NOW + end_delta
        return factories.CourseFactory(**kwargs)

    def enroll(self, course, roles=("student",), user=None,
            status=participation_status.active):
        if user is None:
            user = self.user
        return factories.ParticipationFactory(
                user=user, course=course, roles=list(roles), status=status)
