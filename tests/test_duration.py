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

import unittest
from unittest import mock

from django.test import SimpleTestCase, override_settings
from django.utils import translation

from course.models import Course
from myroles.block import CourseDuration, MyRolesInCoursesBlock
from myroles.constants import duration_status
from myroles.models import BlockInstance

from tests.base_test_mixins import NOW, ONE_DAY


def make_course(start_date, end_date=None, pk=1):
    return Course(pk=pk, shortname=f"course-{pk}", fullname="A course",
            start_date=start_date, end_date=end_date)


class ClassifyDurationTest(unittest.TestCase):
    # test myroles.block.MyRolesInCoursesBlock.classify_duration
    def setUp(self):
        self.block = MyRolesInCoursesBlock(
                mock.MagicMock(), BlockInstance(), now=NOW)

    def classify(self, start_date, end_date=None):
        return self.block.classify_duration(make_course(start_date, end_date))

    def test_future(self):
        for delta in (ONE_DAY, ONE_DAY * 365, NOW.resolution):
            with self.subTest(delta=delta):
                result = self.classify(NOW + delta)
                self.assertEqual(result.duration_status, duration_status.future)
                self.assertEqual(result.css_class, "course-future")

    def test_future_with_end_date(self):
        result = self.classify(NOW + ONE_DAY, NOW + 10 * ONE_DAY)
        self.assertEqual(result.duration_status, duration_status.future)

    def test_in_progress_without_end_date(self):
        result = self.classify(NOW - ONE_DAY)
        self.assertEqual(result.duration_status, duration_status.in_progress)
        self.assertEqual(result.css_class, "course-inprogress")

    def test_in_progress_with_end_date(self):
        result = self.classify(NOW - ONE_DAY, NOW + ONE_DAY)
        self.assertEqual(result.duration_status, duration_status.in_progress)

    def test_past(self):
        result = self.classify(NOW - 10 * ONE_DAY, NOW - ONE_DAY)
        self.assertEqual(result.duration_status, duration_status.past)
        self.assertEqual(result.css_class, "course-finished")

    def test_css_classes(self):
        css_classes = [
                self.classify(start_date, end_date).css_class
                for start_date, end_date in [
                    (NOW + ONE_DAY, None),
                    (NOW - ONE_DAY, None),
                    (NOW - 2 * ONE_DAY, NOW - ONE_DAY)]]

        self.assertEqual(css_classes,
                ["course-future", "course-inprogress", "course-finished"])

    def test_start_equals_now_is_not_future(self):
        result = self.classify(NOW)
        self.assertEqual(result.duration_status, duration_status.in_progress)

        result = self.classify(NOW, NOW + ONE_DAY)
        self.assertEqual(result.duration_status, duration_status.in_progress)

    def test_end_equals_now_is_past(self):
        result = self.classify(NOW - ONE_DAY, NOW)
        self.assertEqual(result.duration_status, duration_status.past)


@override_settings(TIME_ZONE="UTC")
class DurationTextTest(SimpleTestCase):
    def setUp(self):
        self.block = MyRolesInCoursesBlock(
                mock.MagicMock(), BlockInstance(), now=NOW)

    def test_with_end_date(self):
        with translation.override("en"):
            result = self.block.classify_duration(
                    make_course(NOW - ONE_DAY, NOW + 5 * ONE_DAY))
        self.assertEqual(result.duration, "05/14/2024 - 05/20/2024")

    def test_without_end_date(self):
        with translation.override("en"):
            result = self.block.classify_duration(make_course(NOW))
        self.assertEqual(result.duration, "05/15/2024 - no end date ")


class GetDurationTest(unittest.TestCase):
    # test myroles.block.MyRolesInCoursesBlock.get_duration
    def setUp(self):
        self.block = MyRolesInCoursesBlock(
                mock.MagicMock(), BlockInstance(), now=NOW)

    def test_computed_once_per_course(self):
        course = make_course(NOW - ONE_DAY)
        another_course = make_course(NOW + ONE_DAY, pk=2)

        with mock.patch.object(
                self.block, "classify_duration",
                wraps=self.block.classify_duration) as mock_classify:
            first = self.block.get_duration(course)
            second = self.block.get_duration(course)
            other = self.block.get_duration(another_course)

            self.assertEqual(mock_classify.call_count, 2)

        self.assertIs(first, second)
        self.assertIsInstance(first, CourseDuration)
        self.assertEqual(first.duration_status, duration_status.in_progress)
        self.assertEqual(other.duration_status, duration_status.future)

    def test_now_defaults_to_current_time(self):
        with mock.patch("myroles.block.timezone.now") as mock_now:
            mock_now.return_value = NOW
            block = MyRolesInCoursesBlock(mock.MagicMock(), BlockInstance())

        self.assertEqual(block.now, NOW)
