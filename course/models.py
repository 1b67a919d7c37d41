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

from django.conf import settings
from django.core.validators import RegexValidator
from django.db import models
from django.urls import reverse
from django.utils.timezone import now
from django.utils.translation import gettext_lazy as _

from course.constants import (  # noqa
        participation_status, PARTICIPATION_STATUS_CHOICES,
        role_permission, ROLE_PERMISSION_CHOICES,
        favourite_component, favourite_item_type,
        CORE_ROLE_NAMES, COURSE_SHORTNAME_REGEX, ROLE_SHORTNAME_REGEX,
        is_core_role,
        )


# {{{ course category

class CourseCategory(models.Model):
    name = models.CharField(max_length=255,
            verbose_name=_("Category name"))
    parent = models.ForeignKey("self", null=True, blank=True,
            related_name="children",
            verbose_name=_("Parent category"), on_delete=models.PROTECT)
    visible = models.BooleanField(default=True,
            help_text=_("Hidden categories are only shown to users allowed "
            "to view hidden categories."),
            verbose_name=_("Visible"))
    path = models.CharField(max_length=255, blank=True, editable=False,
            help_text=_("Ids of all ancestors and of the category itself, "
            "e.g. '/1/4/9'. Maintained automatically."),
            verbose_name=_("Path"))

    class Meta:
        verbose_name = _("Course category")
        verbose_name_plural = _("Course categories")
        ordering = ("path",)

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        super().save(*args, **kwargs)

        if self.parent is None:
            path = f"/{self.pk}"
        else:
            path = f"{self.parent.path}/{self.pk}"

        if path != self.path:
            self.path = path
            CourseCategory.objects.filter(pk=self.pk).update(path=path)

            for child in self.children.all():
                child.save()

    def get_top_level_id(self) -> int:
        return int(self.path.split("/")[1])

# }}}


# {{{ course

class Course(models.Model):
    shortname = models.CharField(max_length=255, unique=True,
            help_text=_("A short name for the course, e.g. 'CS123-F24'. "
            "Letters, numbers, dots, underscores and hyphens only."),
            verbose_name=_("Course short name"),
            db_index=True,
            validators=[
                RegexValidator(
                    "^"+COURSE_SHORTNAME_REGEX+"$",
                    message=_(
                        "Short name may only contain letters, numbers, "
                        "dots, underscores and hyphens.")),
                    ]
            )
    fullname = models.CharField(max_length=255,
            verbose_name=_("Course full name"),
            help_text=_("A human-readable name for the course. "
                "(e.g. 'Numerical Methods')"))

    visible = models.BooleanField(default=True,
            help_text=_("Is the course visible to participants without "
            "permission to view hidden courses?"),
            verbose_name=_("Visible"))

    start_date = models.DateTimeField(default=now,
            verbose_name=_("Start date"))
    end_date = models.DateTimeField(null=True, blank=True,
            help_text=_("Leave blank for courses without an end date."),
            verbose_name=_("End date"))

    category = models.ForeignKey(CourseCategory, null=True, blank=True,
            related_name="courses",
            verbose_name=_("Category"), on_delete=models.PROTECT)

    participants = models.ManyToManyField(settings.AUTH_USER_MODEL,
            through="Participation")

    class Meta:
        verbose_name = _("Course")
        verbose_name_plural = _("Courses")
        ordering = ("-start_date", "shortname")

    def __str__(self):
        return self.shortname

    def get_absolute_url(self):
        return reverse("course-view", args=(self.pk,))

    def get_delete_url(self):
        return reverse("course-delete", args=(self.pk,))

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

# }}}


# {{{ roles

class Role(models.Model):
    shortname = models.CharField(max_length=100, unique=True,
            help_text=_("A symbolic name for this role. Lower case letters, "
            "digits and underscores."),
            verbose_name=_("Role short name"),
            validators=[
                RegexValidator(
                    ROLE_SHORTNAME_REGEX,
                    message=_("Should be lower_case_with_underscores, "
                        "no spaces allowed.")),
                ])
    name = models.CharField(max_length=255, blank=True,
            help_text=_("A human-readable name for this role. May be left "
            "blank for built-in roles."),
            verbose_name=_("Role name"))
    sortorder = models.IntegerField(default=0,
            verbose_name=_("Sort order"))

    class Meta:
        verbose_name = _("Role")
        verbose_name_plural = _("Roles")
        ordering = ("sortorder", "id")

    def __str__(self):
        return str(self.get_name())

    @property
    def is_core_role(self) -> bool:
        return is_core_role(self.shortname)

    def get_name(self) -> str:
        if self.name:
            return self.name
        return CORE_ROLE_NAMES.get(self.shortname, self.shortname)

    # {{{ permissions handling

    _permissions_cache: frozenset[str] | None = None

    def permission_set(self) -> frozenset[str]:
        if self._permissions_cache is not None:
            return self._permissions_cache

        perm = frozenset(
                RolePermission.objects.filter(role=self)
                .values_list("permission", flat=True))

        self._permissions_cache = perm
        return perm

    def has_permission(self, perm: str) -> bool:
        return perm in self.permission_set()

    # }}}


class RolePermission(models.Model):
    role = models.ForeignKey(Role,
            verbose_name=_("Role"), on_delete=models.CASCADE,
            related_name="permissions")
    permission = models.CharField(max_length=200,
            choices=ROLE_PERMISSION_CHOICES,
            verbose_name=_("Permission"),
            db_index=True)

    class Meta:
        verbose_name = _("Role permission")
        verbose_name_plural = _("Role permissions")
        unique_together = (("role", "permission"),)

    def __str__(self):
        # Translators: permissions for roles
        return _("%(permission)s for %(role)s") % {
            "permission": self.permission,
            "role": self.role}

# }}}


# {{{ participation

class Participation(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL,
            verbose_name=_("User ID"), on_delete=models.CASCADE,
            related_name="participations")
    course = models.ForeignKey(Course, related_name="participations",
            verbose_name=_("Course"), on_delete=models.CASCADE)

    enroll_time = models.DateTimeField(default=now,
            verbose_name=_("Enroll time"))
    status = models.CharField(max_length=50,
            choices=PARTICIPATION_STATUS_CHOICES,
            default=participation_status.active,
            verbose_name=_("Participation status"))

    class Meta:
        verbose_name = _("Participation")
        verbose_name_plural = _("Participations")
        unique_together = (("user", "course"),)
        ordering = ("course", "user")

    def __str__(self):
        # Translators: displayed format of Participation: some user in some
        # course as some role
        return _("%(user)s in %(course)s as %(role)s") % {
                "user": self.user, "course": self.course,
                "role": "/".join(
                    ra.role.shortname
                    for ra in self.role_assignments.all())
                }

    def get_role_desc(self):
        return ", ".join(
                str(ra.role.get_name()) for ra in self.role_assignments.all())

    # {{{ permissions handling

    _permissions_cache: frozenset[str] | None = None

    def permissions(self) -> frozenset[str]:
        if self._permissions_cache is not None:
            return self._permissions_cache

        perm = frozenset(
                RolePermission.objects.filter(
                    role__assignments__participation=self)
                .values_list("permission", flat=True))

        self._permissions_cache = perm
        return perm

    def has_permission(self, perm: str) -> bool:
        return perm in self.permissions()

    # }}}


class RoleAssignment(models.Model):
    """A role held by a participant. The same role may be assigned more
    than once through different *component*\\ s (for instance manually and
    by a cohort sync).
    """

    participation = models.ForeignKey(Participation,
            verbose_name=_("Participation"), on_delete=models.CASCADE,
            related_name="role_assignments")
    role = models.ForeignKey(Role,
            verbose_name=_("Role"), on_delete=models.CASCADE,
            related_name="assignments")
    component = models.CharField(max_length=100, blank=True, default="",
            help_text=_("What created this assignment. Blank for manual "
            "assignments."),
            verbose_name=_("Component"))
    assign_time = models.DateTimeField(default=now,
            verbose_name=_("Assign time"))

    class Meta:
        verbose_name = _("Role assignment")
        verbose_name_plural = _("Role assignments")
        unique_together = (("participation", "role", "component"),)
        ordering = ("participation", "role", "id")

    def __str__(self):
        return _("%(role)s of %(participation)s") % {
                "role": self.role.shortname,
                "participation": self.participation_id}

# }}}


# {{{ favourites

class Favourite(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL,
            verbose_name=_("User ID"), on_delete=models.CASCADE,
            related_name="favourites")
    component = models.CharField(max_length=100,
            verbose_name=_("Component"))
    item_type = models.CharField(max_length=100,
            verbose_name=_("Item type"))
    item_id = models.BigIntegerField(
            verbose_name=_("Item ID"))
    time_created = models.DateTimeField(default=now,
            verbose_name=_("Time created"))

    class Meta:
        verbose_name = _("Favourite")
        verbose_name_plural = _("Favourites")
        unique_together = (("user", "component", "item_type", "item_id"),)

    def __str__(self):
        return f"{self.component}/{self.item_type}/{self.item_id}"

# }}}


# {{{ default roles

def add_default_roles_and_permissions(
        role_model=Role, role_permission_model=RolePermission):
    from course.constants import CORE_ROLES, role_permission as rp

    rpm = role_permission_model

    roles = {}
    for sortorder, shortname in enumerate(CORE_ROLES, start=1):
        role, _created = role_model.objects.get_or_create(
                shortname=shortname, defaults={"sortorder": sortorder})
        roles[shortname] = role

    def grant(shortname, *permissions):
        for perm in permissions:
            rpm.objects.get_or_create(role=roles[shortname], permission=perm)

    grant("manager",
            rp.delete_course, rp.view_hidden_courses, rp.view_hidden_categories)
    grant("coursecreator",
            rp.view_hidden_courses, rp.view_hidden_categories)
    grant("editingteacher",
            rp.view_hidden_courses, rp.view_hidden_categories)
    grant("teacher",
            rp.view_hidden_courses)

# }}}

# vim: foldmethod=marker
