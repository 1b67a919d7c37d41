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

from tests.base_test_mixins import MyRolesTestMixin


class CreateLegendTest(MyRolesTestMixin, TestCase):
    # test MyRolesInCoursesBlock.create_legend
    def test_all_statuses(self):
        legend = self.get_block().create_legend()

        positions = [legend.index(css_class) for css_class in (
            "course-finished",
            "course-inprogress",
            "course-future")]
        self.assertEqual(positions, sorted(positions))

        for status_name in ("Past", "In progress", "Future"):
            self.assertIn(status_name, legend)

        self.assertEqual(
                legend.count("... but not visible to participants"), 3)

    def test_fixed_lines(self):
        self.config.showpast = False
        self.config.showinprogress = False
        self.config.showfuture = False

        legend = self.get_block().create_legend()
        self.assertNotIn("... but not visible to participants", legend)

        self.assertIn("myroles-agendanothidden", legend)
        self.assertIn("Course visible to participants", legend)
        self.assertIn("myroles-agendahidden", legend)
        self.assertIn("Course hidden from participants", legend)
        self.assertIn("myroles-agendafavourite", legend)
        self.assertIn("Favourite course", legend)

    def test_status_toggles(self):
        for field, css_class in [
                ("showpast", "course-finished"),
                ("showinprogress", "course-inprogress"),
                ("showfuture", "course-future")]:
            with self.subTest(field=field):
                setattr(self.config, field, False)
                try:
                    legend = self.get_block().create_legend()
                finally:
                    setattr(self.config, field, True)

                self.assertNotIn(css_class, legend)
                self.assertEqual(
                        legend.count("... but not visible to participants"), 2)

    def test_dimmed_column(self):
        legend = self.get_block().create_legend()
        self.assertIn("course-future dimmed", legend)

    def test_deterministic(self):
        self.assertEqual(
                self.get_block().create_legend(),
                self.get_block().create_legend())
