"""Sidebar emptiness checks.

A restricted next response comes back with the related-videos sidebar
stripped. These checks never raise: anything missing counts as empty.
"""

from typing import Any

from sidebarunlock.document import DESKTOP_ROOT, SINGLE_COLUMN_ROOT, dig, find_item, is_watch_next_feed
from sidebarunlock.models import Layout


def is_sidebar_empty(document: Any, layout: Layout) -> bool:
    """Return True if the response's sidebar has no content."""
    if layout == Layout.DESKTOP:
        results = dig(document, *DESKTOP_ROOT, "secondaryResults", "secondaryResults", "results")
        return results is None

    contents = dig(document, *SINGLE_COLUMN_ROOT, "results", "results", "contents")
    feed = find_item(contents, is_watch_next_feed)
    return not isinstance(dig(feed, "itemSectionRenderer"), dict)


class SidebarInspector:
    """Validator bound to a session's layout."""

    def __init__(self, layout: Layout):
        self.layout = layout

    def is_sidebar_empty(self, document: Any) -> bool:
        return is_sidebar_empty(document, self.layout)
