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

from django.utils.translation import gettext_lazy as _, pgettext_lazy


# {{{ duration status

class duration_status:  # noqa
    past = 1
    in_progress = 2
    future = 3


DURATION_STATUS_CHOICES = (
        (duration_status.past,
            pgettext_lazy("Course duration status", "Past")),
        (duration_status.in_progress,
            pgettext_lazy("Course duration status", "In progress")),
        (duration_status.future,
            pgettext_lazy("Course duration status", "Future")),
        )

DURATION_STATUS_CSS_CLASSES = {
        duration_status.past: "course-finished",
        duration_status.in_progress: "course-inprogress",
        duration_status.future: "course-future",
        }

# Instance configuration flag deciding whether courses of a status are shown.
DURATION_STATUS_CONFIG_FIELDS = {
        duration_status.past: "showpast",
        duration_status.in_progress: "showinprogress",
        duration_status.future: "showfuture",
        }

# }}}


# {{{ strings

BLOCK_TITLE = _("My roles in courses")
NO_END_DATE = _("no end date")
CATEGORY_HIDDEN = _("hidden category")

# }}}

# vim: foldmethod=marker
