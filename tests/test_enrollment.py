from __future__ import annotations

__copyright__ = "Copyright (C) 2024 myroles-dashboard developers"

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

from django.contrib.auth.models import AnonymousUser
from django.test import TestCase

from course.constants import participation_status, role_permission as rperm
from course.enrollment import (
    get_all_roles,
    get_participation_for_user,
    get_user_courses,
    get_user_role_assignments,
    has_course_permission,
    may_delete_course,
)

from tests import factories
from tests.base_test_mixins import ONE_DAY, MyRolesTestMixin


class GetParticipationForUserTest(MyRolesTestMixin, TestCase):
    def test_anonymous(self):
        course = self.make_course()
        self.assertIsNone(get_participation_for_user(AnonymousUser(), course))

    def test_not_enrolled(self):
        course = self.make_course()
        self.assertIsNone(get_participation_for_user(self.user, course))

    def test_suspended(self):
        course = self.make_course()
        participation = self.enroll(
                course, status=participation_status.suspended)

        self.assertIsNone(get_participation_for_user(self.user, course))
        self.assertEqual(
                get_participation_for_user(self.user, course, only_active=False),
                participation)


class GetUserCoursesTest(MyRolesTestMixin, TestCase):
    def test_anonymous(self):
        self.assertEqual(get_user_courses(AnonymousUser()), [])

    def test_none(self):
        self.make_course()
        self.assertEqual(get_user_courses(self.user), [])

    def test_most_recent_first(self):
        older = self.make_course(start_delta=-10 * ONE_DAY)
        newer = self.make_course(start_delta=ONE_DAY)
        self.enroll(older)
        self.enroll(newer)

        self.assertEqual(get_user_courses(self.user), [newer, older])

    def test_other_users_courses(self):
        course = self.make_course()
        self.enroll(course, user=factories.UserFactory())

        self.assertEqual(get_user_courses(self.user), [])

    def test_each_course_once(self):
        course = self.make_course()
        self.enroll(course, roles=["student", "editingteacher"])

        self.assertEqual(get_user_courses(self.user), [course])

    def test_only_active(self):
        visible = self.make_course()
        hidden = self.make_course(visible=False)
        suspended = self.make_course()
        self.enroll(visible)
        self.enroll(hidden)
        self.enroll(suspended, status=participation_status.suspended)

        self.assertEqual(get_user_courses(self.user), [visible])
        self.assertEqual(
                set(get_user_courses(self.user, only_active=False)),
                {visible, hidden, suspended})

    def test_hidden_with_permission(self):
        factories.RolePermissionFactory(
                role=self.teacher_role, permission=rperm.view_hidden_courses)
        hidden = self.make_course(visible=False)
        self.enroll(hidden, roles=["editingteacher"])

        self.assertEqual(get_user_courses(self.user), [hidden])

    def test_hidden_with_permission_but_suspended(self):
        factories.RolePermissionFactory(
                role=self.teacher_role, permission=rperm.view_hidden_courses)
        hidden = self.make_course(visible=False)
        self.enroll(hidden, roles=["editingteacher"],
                status=participation_status.suspended)

        self.assertEqual(get_user_courses(self.user), [])


class RolesTest(MyRolesTestMixin, TestCase):
    def test_get_all_roles(self):
        self.assertEqual(get_all_roles(),
                [self.teacher_role, self.student_role, self.guest_role])

    def test_get_user_role_assignments(self):
        course = self.make_course()
        participation = self.enroll(course, roles=["student", "editingteacher"])
        factories.RoleAssignmentFactory(
                participation=participation, role=self.student_role,
                component="enrol_cohort")

        self.enroll(course, user=factories.UserFactory())

        assignments = get_user_role_assignments(course, self.user)
        self.assertEqual(
                [(ra.role.shortname, ra.component) for ra in assignments],
                [("editingteacher", ""),
                 ("student", ""),
                 ("student", "enrol_cohort")])

    def test_has_course_permission(self):
        course = self.make_course()
        self.enroll(course, roles=["editingteacher"])

        self.assertFalse(
                has_course_permission(self.user, course, rperm.delete_course))

        factories.RolePermissionFactory(
                role=self.teacher_role, permission=rperm.delete_course)
        self.assertTrue(
                has_course_permission(self.user, course, rperm.delete_course))

        other_course = self.make_course()
        self.assertFalse(
                has_course_permission(
                    self.user, other_course, rperm.delete_course))

    def test_has_course_permission_suspended(self):
        factories.RolePermissionFactory(
                role=self.teacher_role, permission=rperm.delete_course)
        course = self.make_course()
        self.enroll(course, roles=["editingteacher"],
                status=participation_status.suspended)

        self.assertFalse(
                has_course_permission(self.user, course, rperm.delete_course))
        self.assertTrue(
                has_course_permission(self.user, course, rperm.delete_course,
                    only_active=False))


class MayDeleteCourseTest(MyRolesTestMixin, TestCase):
    def test_without_permission(self):
        course = self.make_course()
        self.enroll(course, roles=["editingteacher"])

        self.assertFalse(may_delete_course(self.user, course))

    def test_with_permission(self):
        factories.RolePermissionFactory(
                role=self.teacher_role, permission=rperm.delete_course)
        course = self.make_course()
        self.enroll(course, roles=["editingteacher"],
                status=participation_status.suspended)

        self.assertTrue(may_delete_course(self.user, course))

    def test_superuser(self):
        superuser = factories.UserFactory(is_superuser=True)
        course = self.make_course()

        self.assertTrue(may_delete_course(superuser, course))

    def test_anonymous(self):
        course = self.make_course()
        self.assertFalse(may_delete_course(AnonymousUser(), course))
