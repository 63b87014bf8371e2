"""Shared fixtures."""

import pytest

from tests.helpers import desktop_response


@pytest.fixture
def restricted():
    """Desktop response with an empty sidebar and empty description."""
    return desktop_response(description="")


@pytest.fixture
def unlocked():
    """Desktop response with a sidebar and a description."""
    return desktop_response(sidebar=True, description={"runs": [{"text": "D"}]})
