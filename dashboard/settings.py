from __future__ import annotations

"""
Django settings for the course dashboard.
"""

# Do not change this file. All these settings can be overridden in
# local_settings.py.

import os
from os.path import join
from warnings import warn

from django.utils.translation import gettext_noop


# Build paths inside the project like this: os.path.join(BASE_DIR, ...)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

_local_settings_file = join(BASE_DIR, "local_settings.py")

if os.environ.get("DASHBOARD_LOCAL_TEST_SETTINGS", None):
    # This is to make sure local_settings.py is not used for unit tests.
    assert _local_settings_file != os.environ["DASHBOARD_LOCAL_TEST_SETTINGS"]
    _local_settings_file = os.environ["DASHBOARD_LOCAL_TEST_SETTINGS"]

if not os.path.isfile(_local_settings_file):
    warn("'%(local_settings_file)s' is missing, falling back to "
            "'local_settings_example.py'. Do not use this in production."
            % {"local_settings_file": _local_settings_file})
    _local_settings_file = join(BASE_DIR, "local_settings_example.py")

local_settings: dict = {}
with open(_local_settings_file) as _inf:
    exec(compile(_inf.read(), _local_settings_file, "exec"), local_settings)

# {{{ django: apps

INSTALLED_APPS = (
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "crispy_forms",
    "crispy_bootstrap5",

    "accounts",
    "course",
    "myroles",
)

# }}}

# {{{ django: middleware

MIDDLEWARE = (
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.locale.LocaleMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
)

# }}}

# {{{ django: auth

AUTH_USER_MODEL = "accounts.User"

AUTHENTICATION_BACKENDS = (
    "django.contrib.auth.backends.ModelBackend",
    )

LOGIN_URL = "admin:login"

LOGIN_REDIRECT_URL = "/"

# }}}

ROOT_URLCONF = "dashboard.urls"

WSGI_APPLICATION = "dashboard.wsgi.application"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# {{{ templates

CRISPY_ALLOWED_TEMPLATE_PACKS = "bootstrap5"
CRISPY_TEMPLATE_PACK = "bootstrap5"
CRISPY_FAIL_SILENTLY = False

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "APP_DIRS": True,
        "DIRS": (
            join(BASE_DIR, "dashboard", "templates"),
            ),
        "OPTIONS": {
            "context_processors": (
                "django.contrib.auth.context_processors.auth",
                "django.template.context_processors.debug",
                "django.template.context_processors.i18n",
                "django.template.context_processors.static",
                "django.template.context_processors.tz",
                "django.template.context_processors.request",
                "django.contrib.messages.context_processors.messages",
                "dashboard.utils.settings_context_processor",
                ),
            }
    },
]

# }}}

# {{{ database

# default, likely overriden by local_settings.py
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.path.join(BASE_DIR, "db.sqlite3"),
    }
}

# }}}

# {{{ internationalization

LANGUAGE_CODE = "en-us"

TIME_ZONE = "UTC"

USE_I18N = True

USE_TZ = True

LOCALE_PATHS = (
    join(BASE_DIR, "locale"),
)

# }}}

# {{{ static

STATICFILES_DIRS = (
        join(BASE_DIR, "dashboard", "static"),
        )

STATIC_URL = "/static/"

STATIC_ROOT = join(BASE_DIR, "static")

# }}}

SESSION_COOKIE_NAME = "dashboard_sessionid"

# {{{ logging

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "myroles": {
            "handlers": ["console"],
            "level": "INFO",
        },
        "course": {
            "handlers": ["console"],
            "level": "INFO",
        },
    },
}

# }}}

# {{{ "my roles in courses" block defaults

MYROLES_ENABLED = True

# Comma-separated ids of the roles shown by the block.
MYROLES_SUPPORTED_ROLES = ""

MYROLES_SHOW_DELETE_ICON = False

# If set, list every course the user is enrolled in, including suspended
# enrollments and hidden courses.
MYROLES_SKIP_COURSE_CAPABILITY_CHECK = False

MYROLES_DEFAULT_SHOWPAST = True
MYROLES_DEFAULT_SHOWINPROGRESS = True
MYROLES_DEFAULT_SHOWFUTURE = True
MYROLES_DEFAULT_ONLYSHOWFAVOURITE = False
MYROLES_DEFAULT_FOLDONSTART = False
MYROLES_DEFAULT_USETIMERANGES = True
MYROLES_DEFAULT_USECATEGORIES = True

# }}}

for name, val in local_settings.items():
    if not name.startswith("_") and name.isupper():
        globals()[name] = val

DASHBOARD_SITE_NAME = gettext_noop("Dashboard")
DASHBOARD_CUSTOMIZED_SITE_NAME = local_settings.get("DASHBOARD_CUSTOMIZED_SITE_NAME")
if (DASHBOARD_CUSTOMIZED_SITE_NAME is not None
        and DASHBOARD_CUSTOMIZED_SITE_NAME.strip()):
    DASHBOARD_SITE_NAME = DASHBOARD_CUSTOMIZED_SITE_NAME

if "SECRET_KEY" not in globals():
    warn("SECRET_KEY not set in local_settings.py: using an insecure "
            "development key.")
    SECRET_KEY = "insecure-dashboard-development-key"

# vim: foldmethod=marker
