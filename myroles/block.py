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

import datetime
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from django.conf import settings
from django.db import IntegrityError, transaction
from django.template.loader import render_to_string
from django.utils import timezone
from django.utils.translation import gettext as _

from course.constants import (
        favourite_component,
        favourite_item_type,
        role_permission as rperm,
        )
from course.enrollment import (
        get_all_roles,
        get_user_courses,
        get_user_role_assignments,
        has_course_permission,
        may_delete_course,
        )
from course.favourites import find_favourites_by_type
from course.models import Course, CourseCategory, Role
from dashboard.utils import as_local_time, format_datetime_local
from myroles.constants import (
        BLOCK_TITLE,
        CATEGORY_HIDDEN,
        DURATION_STATUS_CHOICES,
        DURATION_STATUS_CONFIG_FIELDS,
        DURATION_STATUS_CSS_CLASSES,
        NO_END_DATE,
        duration_status,
        )
from myroles.models import BlockInstance


if TYPE_CHECKING:
    import accounts.models


logger = logging.getLogger(__name__)

SECTION_TEMPLATE = "myroles/myrolesincourses.html"
LEGEND_TEMPLATE = "myroles/legend.html"


# {{{ data passed to the templates

@dataclass(frozen=True)
class BlockContent:
    text: str
    footer: str = ""


@dataclass(frozen=True)
class CourseDuration:
    duration_status: int
    css_class: str
    duration: str


@dataclass(frozen=True)
class EnrolledCourseWithRole:
    roleid: int
    roleshortname: str
    rolename: str

    courseid: int
    courseshortname: str
    coursefullname: str
    visible: bool
    favourite: bool

    url: str
    url_delete: str
    dimmed: str

    duration_status: int
    css_class: str
    duration: str
    showdeleteicon: bool
    usetimeranges: bool
    usecategories: bool
    category: str

# }}}


def parse_supported_roles(value: str | None) -> frozenset[str]:
    """Parse a comma-separated list of role ids. Blank entries are
    ignored.
    """
    if not value:
        return frozenset()

    return frozenset(
            role_id.strip() for role_id in str(value).split(",")
            if role_id.strip())


def get_favourite_course_ids(user: accounts.models.User) -> set[int]:
    favourites = find_favourites_by_type(
            user, favourite_component.course, favourite_item_type.courses)
    return {favourite.item_id for favourite in favourites}


class MyRolesInCoursesBlock:
    """Lists the courses *user* is enrolled in, one section per supported
    role.

    An instance lives for one request: the content, the course durations
    and the category names are computed once and then reused. *now* is
    fixed at construction time.
    """

    def __init__(self,
            user: accounts.models.User,
            config: BlockInstance,
            now: datetime.datetime | None = None) -> None:
        self.user = user
        self.config = config

        if now is None:
            now = timezone.now()
        self.now = now

        self._content: BlockContent | None = None
        self._content_computed = False
        self._duration_cache: dict[int, CourseDuration] = {}
        self._category_cache: dict[int, str] = {}

    def get_title(self) -> str:
        return str(BLOCK_TITLE)

    def has_config(self) -> bool:
        return True

    # {{{ content

    def get_content(self) -> BlockContent | None:
        if not settings.MYROLES_ENABLED:
            logger.debug("block is disabled site-wide")
            return None

        if self._content_computed:
            return self._content

        self._content_computed = True

        if not self.user.has_perm("myroles.view_content"):
            logger.debug("'%s' may not view the block content", self.user)
            self._content = None
            return None

        enrolled_courses = get_user_courses(
                self.user,
                only_active=not settings.MYROLES_SKIP_COURSE_CAPABILITY_CHECK)

        text = ""
        if enrolled_courses:
            supported_roles = parse_supported_roles(
                    settings.MYROLES_SUPPORTED_ROLES)
            favourite_ids = get_favourite_course_ids(self.user)

            nsections = 0
            for role in get_all_roles():
                if str(role.id) not in supported_roles:
                    continue

                section = self.render_role_section(
                        role, enrolled_courses, favourite_ids)
                if section:
                    text += section
                    nsections += 1

            logger.debug("rendered %d role sections for '%s'",
                    nsections, self.user)

            text += self.create_legend()

        self._content = BlockContent(text=text, footer="")
        return self._content

    def render_role_section(self,
            role: Role,
            enrolled_courses: Iterable[Course],
            favourite_ids: set[int]) -> str:
        mylist = self.get_courses_enrolled_with_role(
                enrolled_courses, role, favourite_ids)

        if not mylist:
            return ""

        return render_to_string(SECTION_TEMPLATE, {
            "roleshortname": role.shortname,
            "iscorerole": role.is_core_role,
            "rolelocalname": role.get_name(),
            "foldonstart": self.config.foldonstart,
            "mylist": mylist,
            "counter": len(mylist),
            "courses": _("Courses") if len(mylist) > 1 else _("Course"),
            })

    # }}}

    # {{{ course list for a role

    def is_status_shown(self, status: int) -> bool:
        return bool(getattr(self.config, DURATION_STATUS_CONFIG_FIELDS[status]))

    def is_course_shown(self, course: Course, favourite_ids: set[int]) -> bool:
        if not self.is_status_shown(self.get_duration(course).duration_status):
            return False

        if self.config.onlyfavourite and course.id not in favourite_ids:
            return False

        return True

    def get_courses_enrolled_with_role(self,
            enrolled_courses: Iterable[Course],
            role: Role,
            favourite_ids: set[int]) -> list[EnrolledCourseWithRole]:
        return [
                record
                for course in enrolled_courses
                if self.is_course_shown(course, favourite_ids)
                for record in self._make_records(course, role, favourite_ids)]

    def _make_records(self,
            course: Course,
            role: Role,
            favourite_ids: set[int]) -> list[EnrolledCourseWithRole]:
        assignments = [
                ra for ra in get_user_role_assignments(course, self.user)
                if ra.role_id == role.id]

        if not assignments:
            return []

        showdeleteicon = (
                bool(settings.MYROLES_SHOW_DELETE_ICON)
                and may_delete_course(self.user, course))

        duration = self.get_duration(course)
        category = self.get_category_name(course)

        # One record per assignment, repeated assignments included.
        return [
                EnrolledCourseWithRole(
                    roleid=role.id,
                    roleshortname=ra.role.shortname,
                    rolename=ra.role.get_name(),
                    courseid=course.id,
                    courseshortname=course.shortname,
                    coursefullname=course.fullname,
                    visible=course.visible,
                    favourite=course.id in favourite_ids,
                    url=course.get_absolute_url(),
                    url_delete=course.get_delete_url(),
                    dimmed="" if course.visible else "dimmed",
                    duration_status=duration.duration_status,
                    css_class=duration.css_class,
                    duration=duration.duration,
                    showdeleteicon=showdeleteicon,
                    usetimeranges=self.config.usetimeranges,
                    usecategories=self.config.usecategories,
                    category=category,
                    )
                for ra in assignments]

    # }}}

    # {{{ duration

    def get_duration(self, course: Course) -> CourseDuration:
        try:
            return self._duration_cache[course.id]
        except KeyError:
            pass

        result = self._duration_cache[course.id] = (
                self.classify_duration(course))
        return result

    def classify_duration(self, course: Course) -> CourseDuration:
        now = self.now

        if course.start_date > now:
            status = duration_status.future
        elif course.end_date is None or course.end_date > now:
            status = duration_status.in_progress
        else:
            status = duration_status.past

        startdate = format_datetime_local(
                as_local_time(course.start_date), "SHORT_DATE_FORMAT")
        if course.end_date is not None:
            enddate = format_datetime_local(
                    as_local_time(course.end_date), "SHORT_DATE_FORMAT")
        else:
            enddate = str(NO_END_DATE) + " "

        return CourseDuration(
                duration_status=status,
                css_class=DURATION_STATUS_CSS_CLASSES[status],
                duration=f"{startdate} - {enddate}")

    # }}}

    # {{{ category

    def get_category_name(self, course: Course) -> str:
        try:
            return self._category_cache[course.id]
        except KeyError:
            pass

        result = self._category_cache[course.id] = (
                self.resolve_category_name(course))
        return result

    def resolve_category_name(self, course: Course) -> str:
        if course.category_id is None:
            return str(CATEGORY_HIDDEN)

        category = CourseCategory.objects.get(pk=course.category_id)
        top_category = CourseCategory.objects.get(
                pk=category.get_top_level_id())

        if (top_category.visible
                or self.user.is_superuser
                or has_course_permission(
                    self.user, course, rperm.view_hidden_categories,
                    only_active=False)):
            return top_category.name

        return str(CATEGORY_HIDDEN)

    # }}}

    # {{{ legend

    def create_legend(self) -> str:
        statuses = [
                (DURATION_STATUS_CSS_CLASSES[status], status_name)
                for status, status_name in DURATION_STATUS_CHOICES
                if self.is_status_shown(status)]

        return render_to_string(LEGEND_TEMPLATE, {
            "statuses": statuses,
            })

    # }}}

    # {{{ instance lifecycle

    def instance_create(self) -> bool:
        """Store the site defaults in the block's configuration."""

        self.config.apply_site_defaults()
        self.config.save()
        logger.info("created block instance for '%s'", self.config.owner)
        return True

    # }}}


def get_or_create_instance(owner: accounts.models.User) -> BlockInstance:
    try:
        return BlockInstance.objects.get(owner=owner)
    except BlockInstance.DoesNotExist:
        pass

    instance = BlockInstance(owner=owner)
    try:
        with transaction.atomic():
            MyRolesInCoursesBlock(owner, instance).instance_create()
    except IntegrityError:
        # created by a concurrent request
        return BlockInstance.objects.get(owner=owner)

    return instance

# vim: foldmethod=marker
