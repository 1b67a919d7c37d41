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

import logging

from django import http
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect, render
from django.utils.translation import gettext as _

from myroles.block import MyRolesInCoursesBlock, get_or_create_instance
from myroles.forms import BlockInstanceForm


logger = logging.getLogger(__name__)


# {{{ dashboard

@login_required
def dashboard(request: http.HttpRequest) -> http.HttpResponse:
    instance = get_or_create_instance(request.user)
    block = MyRolesInCoursesBlock(request.user, instance)

    return render(request, "myroles/dashboard.html", {
        "block_title": block.get_title(),
        "block_content": block.get_content(),
        "has_config": block.has_config(),
        })

# }}}


# {{{ block configuration

@login_required
def edit_block_config(request: http.HttpRequest) -> http.HttpResponse:
    instance = get_or_create_instance(request.user)
    block = MyRolesInCoursesBlock(request.user, instance)

    if request.method == "POST":
        form = BlockInstanceForm(request.POST, instance=instance)
        if form.is_valid():
            form.save()
            logger.debug("block configuration of '%s' changed: %s",
                    request.user, ", ".join(form.changed_data))
            messages.add_message(request, messages.SUCCESS,
                    _("Changes saved."))
            return redirect("dashboard")
    else:
        form = BlockInstanceForm(instance=instance)

    return render(request, "myroles/block-config.html", {
        "block_title": block.get_title(),
        "form": form,
        })

# }}}

# vim: foldmethod=marker
