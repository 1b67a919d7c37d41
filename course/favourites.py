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

from typing import TYPE_CHECKING

from django.db import transaction

from course.models import Favourite


if TYPE_CHECKING:
    import accounts.models


def find_favourites_by_type(
        user: accounts.models.User, component: str, item_type: str
        ) -> list[Favourite]:
    if not user.is_authenticated:
        return []

    return list(Favourite.objects.filter(
            user=user, component=component, item_type=item_type))


@transaction.atomic
def toggle_favourite(
        user: accounts.models.User, component: str, item_type: str,
        item_id: int) -> bool:
    """Star the item if it is not a favourite yet, unstar it otherwise.

    :returns: whether the item is a favourite afterwards.
    """
    deleted, _ = Favourite.objects.filter(
            user=user, component=component, item_type=item_type,
            item_id=item_id).delete()
    if deleted:
        return False

    Favourite.objects.create(
            user=user, component=component, item_type=item_type,
            item_id=item_id)
    return True
