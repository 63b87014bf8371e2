"""Core data models for sidebar unlocking."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sidebarunlock.sources.base import SourceAdapter


# A next response: nested mapping of str -> scalars, lists and mappings.
ContentDocument = dict[str, Any]


DEFAULT_CLIENT_NAME = "WEB"
DEFAULT_CLIENT_VERSION = "2.20220203.04.00"


class Layout(Enum):
    """Response layout served to a session."""
    DESKTOP = "desktop"              # contents.twoColumnWatchNextResults
    SINGLE_COLUMN = "single_column"  # contents.singleColumnWatchNextResults


class CacheStatus(Enum):
    """Outcome recorded alongside a cached resolution."""
    RESOLVED = "resolved"    # A strategy produced a non-empty sidebar
    EXHAUSTED = "exhausted"  # Every strategy was tried, sidebar still empty


@dataclass
class SessionContext:
    """Ambient session values used to build strategy payloads."""

    client_name: str = DEFAULT_CLIENT_NAME
    client_version: str = DEFAULT_CLIENT_VERSION
    hl: str | None = None
    session_token: str | None = None
    is_embed: bool = False
    is_confirmed: bool = False
    layout: Layout = Layout.DESKTOP


@dataclass
class Strategy:
    """One way of obtaining an unrestricted next response.

    Strategies are tried in list order; the order is a fixed priority,
    cheapest first.
    """

    name: str  # For diagnostics, e.g. "Account Proxy"
    payload: dict[str, Any]
    adapter: SourceAdapter

    def fetch(self) -> ContentDocument:
        return self.adapter.fetch(self.payload)


@dataclass
class CacheEntry:
    """The single live resolution kept by ResolutionCache."""

    content_id: str
    document: ContentDocument
    status: CacheStatus
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_exhausted(self) -> bool:
        return self.status == CacheStatus.EXHAUSTED
