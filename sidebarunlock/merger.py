"""Transfer of unlocked fragments into the original next response.

Only two things are transplanted: the related-videos sidebar and the video
description. Where they live depends on the session's layout:

Desktop (contents.twoColumnWatchNextResults):
    secondaryResults                       replaced wholesale
    results.results.contents[*].videoSecondaryInfoRenderer.description
                                           replaced if the unlocked one is set

Single column (contents.singleColumnWatchNextResults):
    results.results.contents               watch-next-feed section appended
    engagementPanels[*].engagementPanelSectionListRenderer
        .content.structuredDescriptionContentRenderer.items[*]
        .expandableVideoDescriptionBodyRenderer
                                           replaced if the unlocked one is set

Every target in the original is located before anything is written, so a
StructuralMismatch leaves the original untouched. Fragments missing from the
unlocked response are skipped.
"""

import copy
import logging

from sidebarunlock.document import (
    DESKTOP_ROOT,
    SINGLE_COLUMN_ROOT,
    dig,
    find_item,
    has_key,
    is_watch_next_feed,
    require,
    require_item,
)
from sidebarunlock.errors import StructuralMismatch
from sidebarunlock.models import ContentDocument, Layout

logger = logging.getLogger(__name__)

RESULTS_CONTENTS = ("results", "results", "contents")
DESCRIPTION_ITEMS = ("content", "structuredDescriptionContentRenderer", "items")


class DocumentMerger:
    """Layout-aware merge of an unlocked response into the original.

    The layout is fixed per session and given up front; responses are not
    probed to decide which branch to take.
    """

    def __init__(self, layout: Layout):
        self.layout = layout

    def merge(self, original: ContentDocument, unlocked: ContentDocument) -> None:
        """Copy sidebar and description from unlocked into original, in place.

        Raises:
            StructuralMismatch: If a merge target is missing.
        """
        if self.layout == Layout.DESKTOP:
            merge_desktop(original, unlocked)
        else:
            merge_single_column(original, unlocked)


def _secondary_info(document: ContentDocument) -> dict:
    contents = require(document, *DESKTOP_ROOT, *RESULTS_CONTENTS)
    item = require_item(
        contents,
        has_key("videoSecondaryInfoRenderer"),
        f"{'.'.join(DESKTOP_ROOT + RESULTS_CONTENTS)}[videoSecondaryInfoRenderer]",
    )
    return item["videoSecondaryInfoRenderer"]


def merge_desktop(original: ContentDocument, unlocked: ContentDocument) -> None:
    original_root = require(original, *DESKTOP_ROOT)
    original_info = _secondary_info(original)

    secondary_results = dig(unlocked, *DESKTOP_ROOT, "secondaryResults")
    unlocked_item = find_item(
        dig(unlocked, *DESKTOP_ROOT, *RESULTS_CONTENTS),
        has_key("videoSecondaryInfoRenderer"),
    )
    unlocked_description = dig(unlocked_item, "videoSecondaryInfoRenderer", "description")

    if secondary_results is not None:
        original_root["secondaryResults"] = copy.deepcopy(secondary_results)

    # Keep whatever description the original has unless there is a better one
    if unlocked_description:
        original_info["description"] = copy.deepcopy(unlocked_description)


def _description_items(document: ContentDocument) -> list | None:
    panel = find_item(document.get("engagementPanels"), has_key("engagementPanelSectionListRenderer"))
    return dig(panel, "engagementPanelSectionListRenderer", *DESCRIPTION_ITEMS)


def merge_single_column(original: ContentDocument, unlocked: ContentDocument) -> None:
    original_contents = require(original, *SINGLE_COLUMN_ROOT, *RESULTS_CONTENTS)
    if not isinstance(original_contents, list):
        raise StructuralMismatch(".".join(SINGLE_COLUMN_ROOT + RESULTS_CONTENTS))

    original_body = require_item(
        _description_items(original),
        has_key("expandableVideoDescriptionBodyRenderer"),
        "engagementPanels[engagementPanelSectionListRenderer]."
        + ".".join(DESCRIPTION_ITEMS)
        + "[expandableVideoDescriptionBodyRenderer]",
    )

    watch_next_feed = find_item(dig(unlocked, *SINGLE_COLUMN_ROOT, *RESULTS_CONTENTS), is_watch_next_feed)
    unlocked_body = find_item(_description_items(unlocked), has_key("expandableVideoDescriptionBodyRenderer"))

    if watch_next_feed:
        original_contents.append(copy.deepcopy(watch_next_feed))
    else:
        logger.info("Unlocked response has no watch-next feed to transfer")

    if unlocked_body:
        original_body["expandableVideoDescriptionBodyRenderer"] = copy.deepcopy(
            unlocked_body["expandableVideoDescriptionBodyRenderer"]
        )
