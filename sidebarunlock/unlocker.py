"""Entry point for unlocking restricted next responses."""

import logging

from sidebarunlock.cache import ResolutionCache
from sidebarunlock.config import Config
from sidebarunlock.document import get_video_id
from sidebarunlock.errors import UnlockFailed
from sidebarunlock.inspector import SidebarInspector
from sidebarunlock.merger import DocumentMerger
from sidebarunlock.models import ContentDocument
from sidebarunlock.resolver import FallbackResolver
from sidebarunlock.sources.proxy import AccountProxyAdapter
from sidebarunlock.sources.watch import WatchEndpointAdapter
from sidebarunlock.strategies import StrategyBuilder

logger = logging.getLogger(__name__)


class SidebarUnlocker:
    """Unlocks the sidebar and description of a restricted next response.

    Usage:
        unlocker = create_default_unlocker()
        if unlocker.inspector.is_sidebar_empty(response):
            unlocker.unlock(response)  # response is modified in place
    """

    def __init__(
        self,
        resolver: FallbackResolver,
        inspector: SidebarInspector,
        merger: DocumentMerger,
    ):
        self.resolver = resolver
        self.inspector = inspector
        self.merger = merger

    def unlock(self, document: ContentDocument) -> None:
        """Fill in document's sidebar and description from an unlocked response.

        Raises:
            MalformedDocument: If document has no video id or lacks a merge
                target (StructuralMismatch).
            UnlockFailed: If no strategy produced a non-empty sidebar.
        """
        unlocked = self.resolver.resolve(document)

        if self.inspector.is_sidebar_empty(unlocked):
            raise UnlockFailed(get_video_id(document))

        self.merger.merge(document, unlocked)
        logger.info(f"Sidebar unlocked for {get_video_id(document)}")


def create_default_unlocker(config: Config | None = None) -> SidebarUnlocker:
    """Wire an unlocker with the default adapters from config."""
    if config is None:
        config = Config.load()

    session = config.session_context()
    inspector = SidebarInspector(session.layout)
    builder = StrategyBuilder(
        watch=WatchEndpointAdapter(timeout=config.timeout),
        proxy=AccountProxyAdapter(host=config.proxy_host, timeout=config.timeout),
    )
    resolver = FallbackResolver(builder, inspector, session, cache=ResolutionCache())
    return SidebarUnlocker(resolver, inspector, DocumentMerger(session.layout))
