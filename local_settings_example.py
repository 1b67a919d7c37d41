# See https://docs.djangoproject.com/en/dev/howto/deployment/checklist/

# {{{ database and site

SECRET_KEY = '<CHANGE ME TO SOME RANDOM STRING ONCE IN PRODUCTION>'

ALLOWED_HOSTS = [
        "dashboard.example.com",
        "localhost",
        "testserver",
        ]

# Uncomment this to use a real database. If left commented out, a local SQLite3
# database will be used, which is not recommended for production use.
#
# DATABASES = {
#     'default': {
#         'ENGINE': 'django.db.backends.postgresql',
#         'NAME': 'dashboard',
#         'USER': 'dashboard',
#         'PASSWORD': '<PASSWORD>',
#         'HOST': '127.0.0.1',
#         'PORT': '5432',
#     }
# }

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

TIME_ZONE = "America/Chicago"

# }}}

# {{{ site name

# Uncomment this to configure the site name of your site.
# DASHBOARD_CUSTOMIZED_SITE_NAME = "My Dashboard"

# }}}

# {{{ "my roles in courses" block

# Turn the block off site-wide.
MYROLES_ENABLED = True

# Ids of the roles (see the "Roles" admin page) listed by the block,
# comma-separated and in any order. Sections are always ordered by the
# role's sort order.
MYROLES_SUPPORTED_ROLES = "1,3,4,5"

# Offer a link to delete a course to users allowed to delete it.
MYROLES_SHOW_DELETE_ICON = False

# If True, also list suspended enrollments and hidden courses.
MYROLES_SKIP_COURSE_CAPABILITY_CHECK = False

# Values a newly created block starts with. Users may change them later.
MYROLES_DEFAULT_SHOWPAST = True
MYROLES_DEFAULT_SHOWINPROGRESS = True
MYROLES_DEFAULT_SHOWFUTURE = True
MYROLES_DEFAULT_ONLYSHOWFAVOURITE = False
MYROLES_DEFAULT_FOLDONSTART = False
MYROLES_DEFAULT_USETIMERANGES = True
MYROLES_DEFAULT_USECATEGORIES = True

# }}}

# vim: filetype=python:foldmethod=marker
