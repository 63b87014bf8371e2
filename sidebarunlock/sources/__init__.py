"""Next-response sources.

Each source is one provider the resolver can fall back to. See
sidebarunlock/sources/base.py for the SourceAdapter protocol.
"""

from sidebarunlock.sources.base import SourceAdapter, HttpSourceAdapter
from sidebarunlock.sources.watch import WatchEndpointAdapter
from sidebarunlock.sources.proxy import AccountProxyAdapter

__all__ = ["SourceAdapter", "HttpSourceAdapter", "WatchEndpointAdapter", "AccountProxyAdapter"]
