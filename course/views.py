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

import logging

import django.views.decorators.http as http_dec
from django import http
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import PermissionDenied
from django.db import transaction
from django.shortcuts import get_object_or_404, redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.utils.translation import gettext as _

from course.constants import (
        favourite_component,
        favourite_item_type,
        role_permission as rperm,
        )
from course.enrollment import (
        get_participation_for_user,
        may_delete_course,
        )
from course.favourites import toggle_favourite
from course.models import Course


logger = logging.getLogger(__name__)


# {{{ course page

@login_required
def course_view(request: http.HttpRequest, course_id: int) -> http.HttpResponse:
    course = get_object_or_404(Course, pk=course_id)
    participation = get_participation_for_user(request.user, course)

    if not course.visible and not (
            participation is not None
            and participation.has_permission(rperm.view_hidden_courses)):
        raise PermissionDenied(_("This course is hidden."))

    return render(request, "course/course-page.html", {
        "course": course,
        "participation": participation,
        "may_delete": may_delete_course(request.user, course),
        })

# }}}


# {{{ delete course

@login_required
@transaction.atomic
def course_delete(request: http.HttpRequest, course_id: int) -> http.HttpResponse:
    course = get_object_or_404(Course, pk=course_id)

    if not may_delete_course(request.user, course):
        raise PermissionDenied(_("may not delete this course"))

    if request.method == "POST":
        shortname = course.shortname
        course.delete()
        logger.info("course '%s' deleted by '%s'", shortname, request.user)
        messages.add_message(request, messages.SUCCESS,
                _("Course '%(shortname)s' deleted.") % {"shortname": shortname})
        return redirect("dashboard")

    return render(request, "course/course-delete.html", {
        "course": course,
        })

# }}}


# {{{ favourites

@login_required
@http_dec.require_POST
def favourite_toggle(
        request: http.HttpRequest, course_id: int) -> http.HttpResponse:
    course = get_object_or_404(Course, pk=course_id)

    is_favourite = toggle_favourite(
            request.user, favourite_component.course,
            favourite_item_type.courses, course.pk)

    if is_favourite:
        msg = _("'%(shortname)s' added to your favourites.")
    else:
        msg = _("'%(shortname)s' removed from your favourites.")
    messages.add_message(request, messages.INFO,
            msg % {"shortname": course.shortname})

    next_url = request.POST.get("next")
    if next_url and url_has_allowed_host_and_scheme(
            next_url, allowed_hosts={request.get_host()}):
        return redirect(next_url)

    return redirect("dashboard")

# }}}

# vim: foldmethod=marker
