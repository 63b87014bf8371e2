"""SidebarUnlock - recover the sidebar and description of restricted videos."""

from sidebarunlock.errors import (
    UnlockError,
    MalformedDocument,
    MissingIdentifier,
    StructuralMismatch,
    AdapterFailure,
    UnlockFailed,
)
from sidebarunlock.models import Layout, SessionContext, Strategy, CacheEntry, CacheStatus
from sidebarunlock.unlocker import SidebarUnlocker, create_default_unlocker

__all__ = [
    "SidebarUnlocker",
    "create_default_unlocker",
    "Layout",
    "SessionContext",
    "Strategy",
    "CacheEntry",
    "CacheStatus",
    "UnlockError",
    "MalformedDocument",
    "MissingIdentifier",
    "StructuralMismatch",
    "AdapterFailure",
    "UnlockFailed",
]
