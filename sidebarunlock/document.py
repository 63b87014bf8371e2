"""Path helpers for navigating next responses.

Lookups come in two flavours:
- dig() and find_item() return None when a path is absent (used by the
  inspector, which must tolerate malformed responses)
- require() and require_item() raise StructuralMismatch (used by the merger,
  where a missing target is a contract violation)
"""

from typing import Any, Callable

from sidebarunlock.errors import MissingIdentifier, StructuralMismatch
from sidebarunlock.models import ContentDocument, Layout

VIDEO_ID_PATH = ("currentVideoEndpoint", "watchEndpoint", "videoId")

DESKTOP_ROOT = ("contents", "twoColumnWatchNextResults")
SINGLE_COLUMN_ROOT = ("contents", "singleColumnWatchNextResults")

WATCH_NEXT_FEED_TARGET = "watch-next-feed"


def dig(document: Any, *path: str) -> Any:
    """Follow a key path through nested mappings, returning None if absent."""
    node = document
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def require(document: Any, *path: str) -> Any:
    """Like dig(), but a missing path raises StructuralMismatch."""
    node = dig(document, *path)
    if node is None:
        raise StructuralMismatch(".".join(path))
    return node


def find_item(items: Any, predicate: Callable[[dict], bool]) -> dict | None:
    """Return the first mapping in a list matching predicate."""
    if not isinstance(items, list):
        return None
    for item in items:
        if isinstance(item, dict) and predicate(item):
            return item
    return None


def require_item(items: Any, predicate: Callable[[dict], bool], path: str) -> dict:
    item = find_item(items, predicate)
    if item is None:
        raise StructuralMismatch(path)
    return item


def has_key(key: str) -> Callable[[dict], bool]:
    """Predicate matching list entries that carry key with a non-null value."""
    return lambda item: item.get(key) is not None


def is_watch_next_feed(item: dict) -> bool:
    return dig(item, "itemSectionRenderer", "targetId") == WATCH_NEXT_FEED_TARGET


def get_video_id(document: ContentDocument) -> str:
    """Extract the video id of a next response.

    Raises:
        MissingIdentifier: If the id is absent or empty.
    """
    video_id = dig(document, *VIDEO_ID_PATH)
    if not video_id or not isinstance(video_id, str):
        raise MissingIdentifier()
    return video_id


def detect_layout(document: ContentDocument) -> Layout | None:
    """Work out which layout a response uses.

    Meant to be called once per session; the merger and inspector are given
    the layout rather than probing every response.
    """
    if dig(document, *DESKTOP_ROOT) is not None:
        return Layout.DESKTOP
    if dig(document, *SINGLE_COLUMN_ROOT) is not None:
        return Layout.SINGLE_COLUMN
    return None
