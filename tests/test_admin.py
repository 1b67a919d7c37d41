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

from django.test import TestCase
from django.urls import reverse

from tests import factories
from tests.base_test_mixins import MyRolesTestMixin


class AdminChangelistTest(MyRolesTestMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.superuser = factories.UserFactory(
                is_superuser=True, is_staff=True)

        category = factories.CourseCategoryFactory()
        course = self.make_course(category=category)
        self.enroll(course, roles=["student", "editingteacher"])
        factories.FavouriteFactory(user=self.user, item_id=course.id)

        self.client.force_login(self.superuser)

    def test_changelists(self):
        for model_name in [
                "accounts_user",
                "course_coursecategory",
                "course_course",
                "course_role",
                "course_participation",
                "course_favourite",
                "myroles_blockinstance"]:
            with self.subTest(model_name=model_name):
                resp = self.client.get(
                        reverse(f"admin:{model_name}_changelist"))
                self.assertEqual(resp.status_code, 200)

    def test_user_changelist_course_filter(self):
        course = self.make_course(shortname="filtered")
        self.enroll(course, user=factories.UserFactory(username="enrolled"))

        resp = self.client.get(
                reverse("admin:accounts_user_changelist"),
                {"course__shortname": "filtered"})
        self.assertContains(resp, "enrolled")
        self.assertNotContains(resp, self.user.username)

    def test_user_change_page(self):
        resp = self.client.get(
                reverse("admin:accounts_user_change", args=(self.user.pk,)))
        self.assertEqual(resp.status_code, 200)
