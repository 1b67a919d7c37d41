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

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


# Maps instance configuration fields to the site settings holding the
# defaults a new instance starts with.
INSTANCE_DEFAULT_SETTINGS = {
        "showpast": "MYROLES_DEFAULT_SHOWPAST",
        "showinprogress": "MYROLES_DEFAULT_SHOWINPROGRESS",
        "showfuture": "MYROLES_DEFAULT_SHOWFUTURE",
        "onlyfavourite": "MYROLES_DEFAULT_ONLYSHOWFAVOURITE",
        "foldonstart": "MYROLES_DEFAULT_FOLDONSTART",
        "usetimeranges": "MYROLES_DEFAULT_USETIMERANGES",
        "usecategories": "MYROLES_DEFAULT_USECATEGORIES",
        }


class BlockInstance(models.Model):
    """One "my roles in courses" block placed on a user's dashboard,
    together with its configuration.
    """

    owner = models.OneToOneField(settings.AUTH_USER_MODEL,
            verbose_name=_("Owner"), on_delete=models.CASCADE,
            related_name="myroles_block")

    showpast = models.BooleanField(default=True,
            verbose_name=_("Show past courses"))
    showinprogress = models.BooleanField(default=True,
            verbose_name=_("Show courses in progress"))
    showfuture = models.BooleanField(default=True,
            verbose_name=_("Show future courses"))
    onlyfavourite = models.BooleanField(default=False,
            verbose_name=_("Only show favourite courses"))
    foldonstart = models.BooleanField(default=False,
            help_text=_("Show the role sections collapsed when the page "
            "is loaded."),
            verbose_name=_("Fold on start"))
    usetimeranges = models.BooleanField(default=True,
            help_text=_("Show start and end date of each course."),
            verbose_name=_("Show time ranges"))
    usecategories = models.BooleanField(default=True,
            help_text=_("Show the top-level category of each course."),
            verbose_name=_("Show categories"))

    creation_time = models.DateTimeField(auto_now_add=True,
            verbose_name=_("Creation time"))

    class Meta:
        verbose_name = _("My roles in courses block")
        verbose_name_plural = _("My roles in courses blocks")
        permissions = (
                ("view_content", _("View the content of the block")),
                )

    def __str__(self):
        return _("Block of %(owner)s") % {"owner": self.owner}

    def apply_site_defaults(self) -> None:
        for field_name, setting_name in INSTANCE_DEFAULT_SETTINGS.items():
            setattr(self, field_name,
                    bool(getattr(settings, setting_name)))
