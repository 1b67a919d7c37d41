from __future__ import annotations


__copyright__ = """
Copyright (C) 2017 Dong Zhuang
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

import re

from django.conf import settings
from django.core.checks import Critical, register
from django.core.exceptions import ImproperlyConfigured


REQUIRED_CONF_ERROR_PATTERN = (
    "You must configure %(location)s for the dashboard to run properly.")
INSTANCE_ERROR_PATTERN = "%(location)s must be an instance of %(types)s."

MYROLES_ENABLED = "MYROLES_ENABLED"
MYROLES_SUPPORTED_ROLES = "MYROLES_SUPPORTED_ROLES"
MYROLES_SHOW_DELETE_ICON = "MYROLES_SHOW_DELETE_ICON"
MYROLES_SKIP_COURSE_CAPABILITY_CHECK = "MYROLES_SKIP_COURSE_CAPABILITY_CHECK"

MYROLES_BOOLEAN_SETTINGS = (
    MYROLES_ENABLED,
    MYROLES_SHOW_DELETE_ICON,
    MYROLES_SKIP_COURSE_CAPABILITY_CHECK,
    "MYROLES_DEFAULT_SHOWPAST",
    "MYROLES_DEFAULT_SHOWINPROGRESS",
    "MYROLES_DEFAULT_SHOWFUTURE",
    "MYROLES_DEFAULT_ONLYSHOWFAVOURITE",
    "MYROLES_DEFAULT_FOLDONSTART",
    "MYROLES_DEFAULT_USETIMERANGES",
    "MYROLES_DEFAULT_USECATEGORIES",
    )

DASHBOARD_STARTUP_CHECKS_TAG = "start_up_check"

SUPPORTED_ROLES_RE = re.compile(r"^\s*(\d+\s*(,\s*\d+\s*)*,?\s*)?$")


class DashboardCriticalCheckMessage(Critical):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.obj = self.obj or ImproperlyConfigured.__name__


def check_myroles_settings(app_configs, **kwargs):
    errors = []

    # {{{ check boolean settings

    for location in MYROLES_BOOLEAN_SETTINGS:
        value = getattr(settings, location, None)
        if value is None:
            errors.append(DashboardCriticalCheckMessage(
                msg=REQUIRED_CONF_ERROR_PATTERN % {"location": location},
                id="myroles_settings.E001"
            ))
        elif not isinstance(value, bool):
            errors.append(DashboardCriticalCheckMessage(
                msg=(INSTANCE_ERROR_PATTERN
                     % {"location": location, "types": "bool"}),
                id="myroles_settings.E002"
            ))

    # }}}

    # {{{ check MYROLES_SUPPORTED_ROLES

    supported_roles = getattr(settings, MYROLES_SUPPORTED_ROLES, None)
    if supported_roles is None:
        errors.append(DashboardCriticalCheckMessage(
            msg=(REQUIRED_CONF_ERROR_PATTERN
                 % {"location": MYROLES_SUPPORTED_ROLES}),
            id="myroles_supported_roles.E001"
        ))
    elif not isinstance(supported_roles, str):
        errors.append(DashboardCriticalCheckMessage(
            msg=(INSTANCE_ERROR_PATTERN
                 % {"location": MYROLES_SUPPORTED_ROLES, "types": "str"}),
            id="myroles_supported_roles.E002"
        ))
    elif not SUPPORTED_ROLES_RE.match(supported_roles):
        errors.append(DashboardCriticalCheckMessage(
            msg=(f"{MYROLES_SUPPORTED_ROLES} must be a comma-separated "
                 f"list of role ids, got '{supported_roles}'"),
            id="myroles_supported_roles.E003"
        ))

    # }}}

    return errors


def register_startup_checks():
    register(check_myroles_settings, DASHBOARD_STARTUP_CHECKS_TAG)

# vim: foldmethod=marker
