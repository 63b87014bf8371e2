"""Tests for the layout-aware merge."""

import copy

import pytest

from sidebarunlock.errors import StructuralMismatch
from sidebarunlock.merger import DocumentMerger
from sidebarunlock.models import Layout

from tests.helpers import desktop_response, single_column_response


def secondary_info(document):
    contents = document["contents"]["twoColumnWatchNextResults"]["results"]["results"]["contents"]
    return next(x for x in contents if "videoSecondaryInfoRenderer" in x)["videoSecondaryInfoRenderer"]


def description_body(document):
    items = document["engagementPanels"][0]["engagementPanelSectionListRenderer"]["content"][
        "structuredDescriptionContentRenderer"]["items"]
    return next(x for x in items if "expandableVideoDescriptionBodyRenderer" in x)[
        "expandableVideoDescriptionBodyRenderer"]


def watch_next_contents(document):
    return document["contents"]["singleColumnWatchNextResults"]["results"]["results"]["contents"]


class TestDesktopMerge:
    @pytest.fixture
    def merger(self):
        return DocumentMerger(Layout.DESKTOP)

    def test_replaces_sidebar_and_description(self, merger, restricted, unlocked):
        """Test the desktop merge of sidebar and description."""
        merger.merge(restricted, unlocked)

        root = restricted["contents"]["twoColumnWatchNextResults"]
        assert root["secondaryResults"] == unlocked["contents"]["twoColumnWatchNextResults"]["secondaryResults"]
        assert secondary_info(restricted)["description"] == {"runs": [{"text": "D"}]}

    def test_plain_string_description(self, merger):
        """Test merging a description that is a plain string."""
        original = desktop_response(description="")
        merger.merge(original, desktop_response(sidebar=True, description="D"))
        assert secondary_info(original)["description"] == "D"

    @pytest.mark.parametrize("unlocked_description", [None, "", {}])
    def test_keeps_original_description_when_unlocked_has_none(self, merger, unlocked_description):
        """Test that an empty unlocked description keeps the original one."""
        original = desktop_response(description="kept")
        unlocked = desktop_response(sidebar=True, description=unlocked_description)

        merger.merge(original, unlocked)

        assert secondary_info(original)["description"] == "kept"
        assert original["contents"]["twoColumnWatchNextResults"]["secondaryResults"]["secondaryResults"]["results"]

    def test_merged_fragments_are_copies(self, merger, restricted, unlocked):
        """Test that merged fragments do not alias the unlocked response."""
        merger.merge(restricted, unlocked)
        unlocked["contents"]["twoColumnWatchNextResults"]["secondaryResults"]["secondaryResults"]["results"].clear()

        root = restricted["contents"]["twoColumnWatchNextResults"]
        assert len(root["secondaryResults"]["secondaryResults"]["results"]) == 2

    def test_missing_secondary_info_raises_and_leaves_original(self, merger, unlocked):
        """Test that a missing original target raises before anything is written."""
        original = desktop_response()
        original["contents"]["twoColumnWatchNextResults"]["results"]["results"]["contents"] = []
        before = copy.deepcopy(original)

        with pytest.raises(StructuralMismatch) as exc_info:
            merger.merge(original, unlocked)

        assert "videoSecondaryInfoRenderer" in exc_info.value.path
        assert original == before

    def test_unlocked_without_secondary_info_still_transfers_sidebar(self, merger):
        """Test that a missing description fragment in the unlocked response only skips the description."""
        original = desktop_response(description="kept")
        unlocked = desktop_response(sidebar=True)
        unlocked["contents"]["twoColumnWatchNextResults"]["results"]["results"]["contents"] = []

        merger.merge(original, unlocked)

        root = original["contents"]["twoColumnWatchNextResults"]
        assert root["secondaryResults"] == unlocked["contents"]["twoColumnWatchNextResults"]["secondaryResults"]
        assert secondary_info(original)["description"] == "kept"

    def test_wrong_layout_raises(self, merger, unlocked):
        """Test merging a single-column response with the desktop merger."""
        with pytest.raises(StructuralMismatch):
            merger.merge(single_column_response(), unlocked)


class TestSingleColumnMerge:
    @pytest.fixture
    def merger(self):
        return DocumentMerger(Layout.SINGLE_COLUMN)

    def test_appends_feed_and_replaces_description(self, merger):
        """Test the single-column merge of feed and description."""
        original = single_column_response()
        body = {"description": {"runs": [{"text": "D"}]}}
        unlocked = single_column_response(sidebar=True, description_body=body)

        merger.merge(original, unlocked)

        contents = watch_next_contents(original)
        assert len(contents) == 2
        assert contents[-1]["itemSectionRenderer"]["targetId"] == "watch-next-feed"
        assert description_body(original) == body

    def test_appends_rather_than_replaces(self, merger):
        """Test that existing results stay in front of the appended feed."""
        original = single_column_response()
        existing = list(watch_next_contents(original))

        merger.merge(original, single_column_response(sidebar=True))

        assert watch_next_contents(original)[:len(existing)] == existing

    def test_no_feed_leaves_results_unchanged(self, merger):
        """Test that nothing is appended when the unlocked response has no feed."""
        original = single_column_response()
        before = len(watch_next_contents(original))

        merger.merge(original, single_column_response(sidebar=False))

        assert len(watch_next_contents(original)) == before

    def test_unlocked_without_description_keeps_original(self, merger):
        """Test that a missing unlocked description keeps the original one."""
        original = single_column_response(description_body={"description": "kept"})
        unlocked = single_column_response(sidebar=True)
        unlocked["engagementPanels"] = []

        merger.merge(original, unlocked)

        assert description_body(original) == {"description": "kept"}
        assert len(watch_next_contents(original)) == 2

    def test_missing_description_panel_raises(self, merger):
        """Test that a missing original description panel raises untouched."""
        original = single_column_response()
        original["engagementPanels"] = []
        before = copy.deepcopy(original)

        with pytest.raises(StructuralMismatch):
            merger.merge(original, single_column_response(sidebar=True))

        assert original == before

    def test_missing_results_list_raises(self, merger):
        """Test that a missing original results list raises."""
        original = single_column_response()
        del original["contents"]["singleColumnWatchNextResults"]["results"]

        with pytest.raises(StructuralMismatch):
            merger.merge(original, single_column_response(sidebar=True))
